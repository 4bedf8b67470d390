"""statsd line encoding

Lines look like ``<name>:<value>|<type>`` with an optional ``|@<rate>``
suffix when the call was sampled. Names are passed through unchecked; the
daemon is the one that rejects malformed names.
"""
import math
from decimal import Decimal
from numbers import Real

from ..exceptions import InvalidArgumentError
from .models import MetricKind, Number


def _wire_integer(value, kind: MetricKind) -> int:
    """Check a value can be written as the integer the wire format carries"""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentError(f"Metric value must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Metric value must be finite, got {value!r}")
    # Timers drop sub-millisecond precision, counters must not lose any delta
    if kind is MetricKind.COUNTER and value != int(value):
        raise InvalidArgumentError(f"Counter delta must be a whole number, got {value!r}")
    return int(value)


def format_value(value: Number, kind: MetricKind) -> str:
    """Encode the value portion of a line, e.g. ``5|c``"""
    return "%d|%s" % (_wire_integer(value, kind), kind.tag)


def format_rate(rate: Number) -> str:
    """Render a sample rate as a plain decimal, never ``1e-05`` or ``1/2``"""
    return format(Decimal(repr(float(rate))), 'f')


def encode_line(name: str, value: str) -> str:
    """Join a metric name with an already encoded value portion"""
    return f"{name}:{value}"


def encode_counter(name: str, delta: Number) -> str:
    return encode_line(name, format_value(delta, MetricKind.COUNTER))


def encode_timer(name: str, milliseconds: Number) -> str:
    return encode_line(name, format_value(milliseconds, MetricKind.TIMER))


def apply_sample_suffix(line: str, rate: Number) -> str:
    """Tag a line with the rate it was sampled at so the daemon can scale it back up"""
    return "%s|@%s" % (line, format_rate(rate))
