"""Statsd client - counters and timers over UDP, best effort"""
import random
import time
from collections.abc import Mapping
from typing import List, Optional

from .config import StatsdConfig, default_config
from .exceptions import InvalidArgumentError
from .logging_config import get_logger, log_client_startup, log_error
from .metrics.encoder import apply_sample_suffix, encode_line, format_value
from .metrics.models import MetricKind, Names, Number, SendResult, SendStatus, normalize_names
from .metrics.sampler import Sampler, validate_rate
from .transport import Transport, UDPTransport

logger = get_logger(__name__)


class StatsdClient:
    """Sends counters and timers to a statsd daemon.

    Every call is independent: it samples once, encodes one line per metric
    and fires each line as its own datagram. Transmission failures never
    raise; they show up in the returned ``SendResult``.

    >>> client = StatsdClient(StatsdConfig(host="localhost", port=8125))
    >>> client.increment("site.logins")
    >>> client.timing("database.complexquery", 42)
    """

    def __init__(self,
                 config: Optional[StatsdConfig] = None,
                 transport: Optional[Transport] = None,
                 rng: Optional[random.Random] = None):
        self.config = config if config is not None else default_config()
        self.sampler = Sampler(rng)

        # A transport handed in belongs to the caller
        self._owns_transport = transport is None
        if transport is None:
            transport = UDPTransport(self.config.host, self.config.port)
        self.transport = transport

        log_client_startup(logger, self.config)

    def timing(self, stat: str, milliseconds: Number, sample_rate: Optional[float] = None) -> SendResult:
        """Log timing information, in milliseconds.

        >>> client.timing("some.time", 500)
        """
        return self.send({stat: format_value(milliseconds, MetricKind.TIMER)}, sample_rate)

    def timing_since(self, stat: str, start: float, sample_rate: Optional[float] = None) -> SendResult:
        """Log the milliseconds elapsed since ``start``, a ``time.time()`` value.

        >>> start = time.time()
        >>> # do the complex database query
        >>> client.timing_since("database.complexquery", start)
        """
        elapsed_ms = max(0.0, (time.time() - start) * 1000)
        return self.timing(stat, elapsed_ms, sample_rate)

    def increment(self, stats: Names, sample_rate: Optional[float] = None) -> SendResult:
        """Increment one or more counters.

        >>> client.increment("some.int")
        >>> client.increment("some.int", 0.5)
        >>> client.increment(["grue.dinners", "room.lamps"])
        """
        return self.update_stats(stats, 1, sample_rate)

    def decrement(self, stats: Names, sample_rate: Optional[float] = None) -> SendResult:
        """Same as increment, but decrements"""
        return self.update_stats(stats, -1, sample_rate)

    def update_stats(self, stats: Names, delta: int = 1, sample_rate: Optional[float] = None) -> SendResult:
        """Update one or more counters by an arbitrary amount.

        A sample rate below 1 only sends the update that fraction of the
        time (0.1 = 10% of calls), for all the named counters together.

        Raises InvalidArgumentError for a mapping or anything else that is
        not a name or a list of names, and for a delta that is not a whole
        number.
        """
        names = normalize_names(stats)
        value = format_value(delta, MetricKind.COUNTER)
        return self.send({name: value for name in names}, sample_rate)

    def send(self, data: Mapping, sample_rate: Optional[float] = None) -> SendResult:
        """Squirt pre-encoded values over UDP, one datagram per metric.

        >>> client.send({"some.int": "1|c"})
        """
        if not isinstance(data, Mapping):
            raise InvalidArgumentError(f"send() expects a mapping of name to value, got {type(data).__name__}")
        rate = validate_rate(self.config.default_sample_rate if sample_rate is None else sample_rate)

        if not self.sampler.should_send(rate):
            logger.debug("Call sampled out", metrics=len(data), sample_rate=rate)
            return SendResult.sampled_out()

        lines = self._build_lines(data, rate)
        sent: List[str] = []
        failed: List[str] = []

        for line in lines:
            if self._transmit(line):
                sent.append(line)
            else:
                failed.append(line)

        status = SendStatus.TRANSMIT_FAILED if failed else SendStatus.DELIVERED
        logger.debug("Metrics sent", sent=len(sent), failed=len(failed), sample_rate=rate)
        return SendResult(status=status, sent_lines=sent, failed_lines=failed)

    def _build_lines(self, data: Mapping, rate: float) -> List[str]:
        """Encode every entry of a call, tagging them all when the call was sampled"""
        sampled = self.sampler.is_sampled(rate)
        lines = []
        for stat, value in data.items():
            line = encode_line(self.config.qualify(stat), value)
            if sampled:
                line = apply_sample_suffix(line, rate)
            lines.append(line)
        return lines

    def _transmit(self, line: str) -> bool:
        try:
            return bool(self.transport.send(line.encode("utf-8")))
        except OSError as e:
            log_error(logger, e, {"packet": line})
            return False

    def close(self) -> None:
        """Close the transport if this client opened it"""
        if self._owns_transport and hasattr(self.transport, "close"):
            self.transport.close()

    def __enter__(self) -> "StatsdClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"StatsdClient(host={self.config.host!r}, port={self.config.port})"

