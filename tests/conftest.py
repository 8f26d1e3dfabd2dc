"""Shared test fixtures for all test modules."""

from collections.abc import Callable
from pathlib import Path

import pytest

from rtdmsync.core.models import MetricWindow
from tests.helpers import RecordingChart, RecordingDisplay

SAMPLE_LOG = """\
2024-05-02 10:00:00.000 INFO  [RTDM] session started
2024-05-02 10:00:00.010 DEBUG [RTDM] audio device opened
[RTDM][Timestamps][0.000sec - 4.500sec]
Smoothness Score: 0.91
SRC Score: 0.75
Background_Noise Score: 0.12
Speaker_Level Score: -0.40
Isochrony Score: 0.66
RT_Metric Score: 0.80
RECOGNIZED: good morning everyone
[RTDM][Timestamps][4.500sec - 9.000sec]
Smoothness Score: 0.88
SRC Score: 0.70
RECOGNIZED: let's get started
2024-05-02 10:00:09.000 WARN  [RTDM] buffer underrun
[RTDM][Timestamps][9.000sec - 15.250sec]
Smoothness Score: 0.42
Isochrony Score: 0.51
"""


@pytest.fixture
def sample_log_text() -> str:
    """A three-window log with noise lines and every metric kind."""
    return SAMPLE_LOG


@pytest.fixture
def sample_log_path(tmp_path: Path, sample_log_text: str) -> Path:
    """The sample log written to a temporary file with CRLF line endings."""
    path = tmp_path / "rtdm.log"
    path.write_bytes(sample_log_text.replace("\n", "\r\n").encode("utf-8"))
    return path


@pytest.fixture
def make_window() -> Callable[..., MetricWindow]:
    """Factory fixture for MetricWindow objects.

    Usage:
        window = make_window(10.0, 20.0, "SRC Score: 0.5")
    """

    def _make(start: float, end: float, *lines: str) -> MetricWindow:
        return MetricWindow(start_seconds=start, end_seconds=end, raw_metric_lines=lines)

    return _make


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def chart() -> RecordingChart:
    return RecordingChart()
