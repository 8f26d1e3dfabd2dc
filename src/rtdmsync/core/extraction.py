"""Value extraction from the raw metric lines of a window."""

import re
from collections.abc import Iterable

from rtdmsync.core.config import DEFAULT_TRANSCRIPT_TAG
from rtdmsync.core.models import MetricWindow

SCORE_PATTERN = re.compile(r"Score:\s*(-?\d+(?:\.\d+)?)", re.IGNORECASE | re.ASCII)


def parse_score(line: str) -> float | None:
    """Return the number following ``Score:`` in line, or None."""
    match = SCORE_PATTERN.search(line)
    if match is None:
        return None
    return float(match.group(1))


def extract_metric_value(lines: Iterable[str], metric_name: str) -> float | None:
    """Extract a numeric score for metric_name from metric lines.

    Only the first line containing metric_name (case-sensitive substring)
    is considered; later lines for the same metric are ignored.

    Args:
        lines: Metric lines in log order.
        metric_name: Substring identifying the metric, e.g. "SRC Score".

    Returns:
        The score, or None if no line mentions the metric or the first
        such line has no ``Score:`` value.
    """
    for line in lines:
        if metric_name in line:
            return parse_score(line)
    return None


def extract_transcripts(
    window: MetricWindow, tag: str = DEFAULT_TRANSCRIPT_TAG
) -> tuple[str, ...]:
    """Return the recognized-speech text of every transcript line in window.

    Args:
        window: Window to scan.
        tag: Token that prefixes recognized text.

    Returns:
        Text after the tag, trimmed, in log order.
    """
    transcripts = []
    for line in window.raw_metric_lines:
        _, found, text = line.partition(tag)
        if found:
            transcripts.append(text.strip())
    return tuple(transcripts)
