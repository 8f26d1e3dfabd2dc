"""Collaborator fakes shared by unit, integration and feature tests."""

from rtdmsync.core.models import MetricWindow
from rtdmsync.core.series import MetricSeries


class RecordingDisplay:
    """MetricsDisplayPort fake that records every window shown."""

    def __init__(self) -> None:
        self.shown: list[MetricWindow | None] = []

    def show(self, window: MetricWindow | None) -> None:
        self.shown.append(window)


class RecordingChart:
    """ChartPort fake that records renders and clears."""

    def __init__(self) -> None:
        self.rendered: list[MetricSeries] = []
        self.clear_count = 0

    def render(self, series: MetricSeries) -> None:
        self.rendered.append(series)

    def clear(self) -> None:
        self.clear_count += 1
