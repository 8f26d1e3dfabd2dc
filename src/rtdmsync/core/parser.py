"""Parser turning RTDM log text into an ordered sequence of metric windows.

The parser makes a single pass over the lines with one piece of state,
the currently open window:

  1. A line containing the window tag and a ``[<a>sec - <b>sec]`` bounds
     pair opens a new window.
  2. Any other line containing a metric token is appended to the open
     window.
  3. Everything else is dropped without raising.
"""

import re
from collections.abc import Callable

from rtdmsync.core.config import DEFAULT_CONFIG, ParserConfig
from rtdmsync.core.logs import get_logger
from rtdmsync.core.models import (
    DiscardedLine,
    DiscardReason,
    MetricWindow,
    ParsedLog,
    ParseStats,
)

logger = get_logger(__name__)

# Both bounds need digits on each side of the decimal point.
BOUNDS_PATTERN = re.compile(r"\[(\d+\.\d+)sec - (\d+\.\d+)sec\]", re.ASCII)

DiscardCallback = Callable[[DiscardedLine], None]


class _OpenWindow:
    """Mutable builder for the window currently receiving metric lines."""

    __slots__ = ("start_seconds", "end_seconds", "lines")

    def __init__(self, start_seconds: float, end_seconds: float) -> None:
        self.start_seconds = start_seconds
        self.end_seconds = end_seconds
        self.lines: list[str] = []

    def freeze(self) -> MetricWindow:
        return MetricWindow(
            start_seconds=self.start_seconds,
            end_seconds=self.end_seconds,
            raw_metric_lines=tuple(self.lines),
        )


def parse_bounds(line: str, window_tag: str) -> tuple[float, float] | None:
    """Extract (start, end) seconds from a window-start marker line.

    Args:
        line: A single log line.
        window_tag: Tag the marker line must contain.

    Returns:
        The two bounds, or None if the line is not a well-formed marker.
    """
    if window_tag not in line:
        return None
    match = BOUNDS_PATTERN.search(line)
    if match is None:
        return None
    return float(match.group(1)), float(match.group(2))


class LogParser:
    """Best-effort parser for RTDM diagnostic logs.

    Example:
        ```python
        parser = LogParser(BASIC_CONFIG)
        log = parser.parse(text)
        ```
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        on_discard: DiscardCallback | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            config: Tokens to recognize. Defaults to DEFAULT_CONFIG.
            on_discard: Called once for every non-blank line the parser drops.
        """
        self._config = config or DEFAULT_CONFIG
        self._on_discard = on_discard

    @property
    def config(self) -> ParserConfig:
        return self._config

    def parse(self, text: str) -> ParsedLog:
        """Parse the full text of a log.

        Never raises for malformed content; unrecognized lines are dropped.

        Args:
            text: Complete log contents, newline separated.

        Returns:
            ParsedLog with windows in order of their start markers.
        """
        config = self._config
        windows: list[_OpenWindow] = []
        current: _OpenWindow | None = None
        metric_lines = discarded = blank = 0

        lines = text.split("\n") if text else []
        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.strip()
            if not line:
                blank += 1
                continue

            bounds = parse_bounds(line, config.window_tag)
            if bounds is not None:
                current = _OpenWindow(*bounds)
                windows.append(current)
                continue

            if config.matches_metric(line):
                if current is not None:
                    current.lines.append(line)
                    metric_lines += 1
                    continue
                reason = DiscardReason.NO_OPEN_WINDOW
            elif config.window_tag in line:
                reason = DiscardReason.MALFORMED_MARKER
            else:
                reason = DiscardReason.UNRECOGNIZED

            discarded += 1
            if self._on_discard is not None:
                self._on_discard(DiscardedLine(line_number, line, reason))

        stats = ParseStats(
            total_lines=len(lines),
            window_count=len(windows),
            metric_line_count=metric_lines,
            discarded_count=discarded,
            blank_count=blank,
        )
        if not windows and stats.total_lines > blank:
            logger.warning(
                "No window-start markers found in %d non-blank lines",
                stats.total_lines - blank,
            )
        logger.debug(
            "Parsed %d windows, %d metric lines, %d discarded lines",
            stats.window_count,
            stats.metric_line_count,
            stats.discarded_count,
        )
        return ParsedLog(windows=tuple(w.freeze() for w in windows), stats=stats)


def parse_log(
    text: str,
    config: ParserConfig | None = None,
    on_discard: DiscardCallback | None = None,
) -> ParsedLog:
    """Parse log text with a one-off LogParser."""
    return LogParser(config, on_discard=on_discard).parse(text)
