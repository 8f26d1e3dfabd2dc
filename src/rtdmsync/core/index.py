"""Time-based lookup over a parsed log."""

import math
from collections.abc import Iterable, Iterator

from rtdmsync.core.extraction import extract_metric_value
from rtdmsync.core.models import EMPTY_LOG, MetricWindow, ParsedLog
from rtdmsync.core.series import MetricSeries, build_series


def quantize_position(position_seconds: float) -> int | None:
    """Floor a continuous playback position to whole seconds.

    Lookups are keyed on whole seconds, so a position of 12.99 becomes 12
    and will not match a window starting at 12.34.

    Returns:
        The floored position, or None for NaN and infinite positions.
    """
    if not math.isfinite(position_seconds):
        return None
    return math.floor(position_seconds)


def window_at(windows: Iterable[MetricWindow], time_seconds: float) -> MetricWindow | None:
    """Return the first window whose closed interval contains time_seconds.

    On overlap the earliest window in sequence order wins, regardless of
    interval width.
    """
    for window in windows:
        if window.contains(time_seconds):
            return window
    return None


class WindowIndex:
    """Read-only lookup over the windows of one ParsedLog.

    The index performs no rounding; callers quantize playback positions
    with quantize_position() before calling find_window_at().
    """

    def __init__(self, log: ParsedLog | Iterable[MetricWindow] = EMPTY_LOG) -> None:
        if not isinstance(log, ParsedLog):
            log = ParsedLog(windows=tuple(log))
        self._log = log

    @property
    def log(self) -> ParsedLog:
        return self._log

    def __len__(self) -> int:
        return len(self._log)

    def __iter__(self) -> Iterator[MetricWindow]:
        return iter(self._log)

    def __bool__(self) -> bool:
        return len(self._log) > 0

    def find_window_at(self, time_seconds: float) -> MetricWindow | None:
        """Resolve the window that applies at time_seconds.

        Args:
            time_seconds: Query time, already quantized by the caller.

        Returns:
            The earliest-inserted window with start <= time <= end, or None.
        """
        return window_at(self._log, time_seconds)

    def extract_metric_value(
        self, window: MetricWindow, metric_name: str
    ) -> float | None:
        """Numeric value of metric_name in window, from its first mention."""
        return extract_metric_value(window.raw_metric_lines, metric_name)

    def series(self, metric_names: Iterable[str] | None = None) -> MetricSeries:
        """Per-metric values aligned with the held windows."""
        return build_series(self._log, metric_names)
