"""Metric models for the statsd line protocol"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Sequence, Tuple, Union

from ..exceptions import InvalidArgumentError

Number = Union[int, float]


class MetricKind(Enum):
    """statsd metric types and their wire tags"""
    COUNTER = "c"
    TIMER = "ms"

    @property
    def tag(self) -> str:
        return self.value


@dataclass(frozen=True)
class SingleName:
    """One metric name"""
    name: str

    def __iter__(self):
        yield self.name


@dataclass(frozen=True)
class NameList:
    """Several metric names sharing one delta and sample rate"""
    names: Tuple[str, ...]

    def __init__(self, names: Iterable[str]):
        # Duplicates collapse to a single line, first occurrence wins the order
        object.__setattr__(self, "names", tuple(dict.fromkeys(names)))

    def __iter__(self):
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)


Names = Union[str, SingleName, NameList, Sequence[str]]


def normalize_names(stats: Names) -> NameList:
    """Turn a name, a list of names or a tagged batch into a NameList"""
    if isinstance(stats, NameList):
        return stats
    if isinstance(stats, SingleName):
        return NameList([stats.name])
    if isinstance(stats, str):
        return NameList([stats])
    if isinstance(stats, Mapping):
        raise InvalidArgumentError(
            "Usage: update_stats(name, ...) or update_stats([name, ...], ...), got a mapping"
        )
    if isinstance(stats, (list, tuple, set, frozenset)):
        bad = [item for item in stats if not isinstance(item, str)]
        if bad:
            raise InvalidArgumentError(f"Metric names must be strings, got {bad!r}")
        return NameList(stats)
    raise InvalidArgumentError(f"Expected a metric name or a list of names, got {type(stats).__name__}")


class SendStatus(Enum):
    """Outcome of one client call"""
    DELIVERED = "delivered"
    SAMPLED_OUT = "sampled_out"
    TRANSMIT_FAILED = "transmit_failed"


@dataclass
class SendResult:
    """What happened to the lines of one client call"""
    status: SendStatus
    sent_lines: List[str] = field(default_factory=list)
    failed_lines: List[str] = field(default_factory=list)

    @property
    def all_sent(self) -> bool:
        return self.status is not SendStatus.TRANSMIT_FAILED

    def __bool__(self) -> bool:
        return self.all_sent

    @classmethod
    def sampled_out(cls) -> "SendResult":
        return cls(status=SendStatus.SAMPLED_OUT)
