"""Core domain models for parsed RTDM logs."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import overload


def _format_seconds(value: float) -> str:
    """Render seconds in shortest form (12.0 -> "12", 12.34 -> "12.34")."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


@dataclass(frozen=True)
class MetricWindow:
    """One timestamped observation interval from the log.

    Attributes:
        start_seconds: Inclusive start of the interval.
        end_seconds: Inclusive end of the interval. Not checked against
            start_seconds.
        raw_metric_lines: Trimmed metric lines seen after this window's
            start marker, in order of appearance.
    """

    start_seconds: float
    end_seconds: float
    raw_metric_lines: tuple[str, ...] = field(default_factory=tuple)

    def contains(self, time_seconds: float) -> bool:
        """Return True if time_seconds lies in [start_seconds, end_seconds]."""
        return self.start_seconds <= time_seconds <= self.end_seconds

    @property
    def label(self) -> str:
        """Chart axis label, e.g. "12-15.5 sec"."""
        return (
            f"{_format_seconds(self.start_seconds)}-"
            f"{_format_seconds(self.end_seconds)} sec"
        )


class DiscardReason(str, Enum):
    """Why a non-blank line was dropped by the parser."""

    NO_OPEN_WINDOW = "no_open_window"
    UNRECOGNIZED = "unrecognized"
    MALFORMED_MARKER = "malformed_marker"


@dataclass(frozen=True)
class DiscardedLine:
    """A line the parser ignored.

    Attributes:
        line_number: 1-based position of the line in the input text.
        text: The trimmed line.
        reason: Why the line was dropped.
    """

    line_number: int
    text: str
    reason: DiscardReason


@dataclass(frozen=True)
class ParseStats:
    """Counters collected during a single parse."""

    total_lines: int = 0
    window_count: int = 0
    metric_line_count: int = 0
    discarded_count: int = 0
    blank_count: int = 0


@dataclass(frozen=True)
class ParsedLog(Sequence[MetricWindow]):
    """Immutable, ordered sequence of metric windows.

    Order is the order in which window-start markers appeared in the
    source text. Windows may overlap or be out of temporal order.
    """

    windows: tuple[MetricWindow, ...] = ()
    stats: ParseStats = field(default_factory=ParseStats)

    @overload
    def __getitem__(self, index: int) -> MetricWindow: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[MetricWindow, ...]: ...

    def __getitem__(
        self, index: int | slice
    ) -> MetricWindow | tuple[MetricWindow, ...]:
        return self.windows[index]

    def __len__(self) -> int:
        return len(self.windows)

    def __iter__(self) -> Iterator[MetricWindow]:
        return iter(self.windows)


EMPTY_LOG = ParsedLog()
