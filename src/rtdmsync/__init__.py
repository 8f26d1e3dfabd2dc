"""rtdmsync - sync RTDM metric windows with media playback position."""

from rtdmsync.adapters.logging import LoggingDiagnostics
from rtdmsync.adapters.sources import FileLogSource, StringLogSource
from rtdmsync.core.config import (
    BASIC_CONFIG,
    DEFAULT_CONFIG,
    FULL_CONFIG,
    ParserConfig,
    get_preset,
)
from rtdmsync.core.extraction import extract_metric_value, extract_transcripts
from rtdmsync.core.index import WindowIndex, quantize_position, window_at
from rtdmsync.core.logs import get_logger
from rtdmsync.core.models import (
    DiscardedLine,
    DiscardReason,
    MetricWindow,
    ParsedLog,
    ParseStats,
)
from rtdmsync.core.parser import LogParser, parse_log
from rtdmsync.core.ports import ChartPort, LogSourcePort, MetricsDisplayPort
from rtdmsync.core.series import MetricSeries, build_series
from rtdmsync.session import MetricsSession

__all__ = [
    # Configuration
    "BASIC_CONFIG",
    "DEFAULT_CONFIG",
    "FULL_CONFIG",
    "ParserConfig",
    "get_preset",
    # Models
    "DiscardReason",
    "DiscardedLine",
    "MetricWindow",
    "ParseStats",
    "ParsedLog",
    # Parsing and lookup
    "LogParser",
    "parse_log",
    "WindowIndex",
    "window_at",
    "quantize_position",
    "extract_metric_value",
    "extract_transcripts",
    "MetricSeries",
    "build_series",
    # Ports
    "ChartPort",
    "LogSourcePort",
    "MetricsDisplayPort",
    # Adapters
    "FileLogSource",
    "LoggingDiagnostics",
    "StringLogSource",
    # Session
    "MetricsSession",
    # Logging
    "get_logger",
]
