"""Adapters connecting the core to logging and text sources."""

from rtdmsync.adapters.logging import LoggingDiagnostics
from rtdmsync.adapters.sources import FileLogSource, StringLogSource

__all__ = [
    "FileLogSource",
    "LoggingDiagnostics",
    "StringLogSource",
]
