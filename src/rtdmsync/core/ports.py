"""Port interfaces for the collaborators around the core.

These protocols define what the rendering, charting and file-loading
surfaces must provide. The core depends only on these interfaces, never
on a concrete UI or media toolkit.
"""

from typing import Protocol, runtime_checkable

from rtdmsync.core.models import MetricWindow
from rtdmsync.core.series import MetricSeries


@runtime_checkable
class MetricsDisplayPort(Protocol):
    """Port for the surface that shows the metrics of the current window."""

    def show(self, window: MetricWindow | None) -> None:
        """Display window, or clear the display when window is None."""
        ...


@runtime_checkable
class ChartPort(Protocol):
    """Port for the charting component.

    Adapters receive one MetricSeries per load and draw it however they
    like; None values in a series are gaps.
    """

    def render(self, series: MetricSeries) -> None:
        """Replace the current chart with series."""
        ...

    def clear(self) -> None:
        """Remove the current chart, if any."""
        ...


@runtime_checkable
class LogSourcePort(Protocol):
    """Port for the asynchronous file-read boundary.

    Examples: StringLogSource, FileLogSource.
    """

    async def read_text(self) -> str:
        """Return the complete text of the log."""
        ...
