"""Python logging adapter for parser diagnostics.

This adapter bridges the parser's discard callback to the standard
library logging module, so lines dropped during a parse show up in the
application's logs and can be counted per reason.
"""

import logging
from collections import Counter

from rtdmsync.core.logs import get_logger
from rtdmsync.core.models import DiscardedLine, DiscardReason

# Longer lines are cut in log messages; the DiscardedLine keeps the full text.
_MAX_LOGGED_TEXT = 120


class LoggingDiagnostics:
    """Discard callback that logs each dropped line and counts them.

    Example:
        ```python
        diagnostics = LoggingDiagnostics()
        log = parse_log(text, on_discard=diagnostics)
        diagnostics.counts[DiscardReason.UNRECOGNIZED]
        ```
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.DEBUG,
        ignore: frozenset[DiscardReason] = frozenset(),
    ) -> None:
        """Initialize the diagnostics sink.

        Args:
            logger: Logger to write to. Defaults to the rtdmsync diagnostics
                logger.
            level: Level used for each discarded line.
            ignore: Reasons that are counted but not logged.
        """
        self._logger = logger or get_logger("rtdmsync.diagnostics")
        self._level = level
        self._ignore = ignore
        self.counts: Counter[DiscardReason] = Counter()

    def __call__(self, discarded: DiscardedLine) -> None:
        """Record one discarded line.

        Args:
            discarded: The line the parser dropped.
        """
        self.counts[discarded.reason] += 1
        if discarded.reason in self._ignore:
            return
        text = discarded.text
        if len(text) > _MAX_LOGGED_TEXT:
            text = text[:_MAX_LOGGED_TEXT] + "..."
        self._logger.log(
            self._level,
            "Discarded line %d (%s): %s",
            discarded.line_number,
            discarded.reason.value,
            text,
            extra={
                "line_number": discarded.line_number,
                "discard_reason": discarded.reason.value,
            },
        )

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def reset(self) -> None:
        """Forget all counts, e.g. before the next load."""
        self.counts.clear()

    def summary(self) -> dict[str, int]:
        """Counts keyed by reason value, omitting reasons never seen."""
        return {reason.value: count for reason, count in self.counts.items()}
