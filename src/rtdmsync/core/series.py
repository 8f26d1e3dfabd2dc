"""Per-metric time series aligned with the window sequence, for charting."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from rtdmsync.core.config import DEFAULT_CONFIG
from rtdmsync.core.extraction import extract_metric_value
from rtdmsync.core.models import MetricWindow


@dataclass(frozen=True)
class MetricSeries:
    """Chart-ready data for a parsed log.

    Attributes:
        labels: One x-axis label per window, in window order.
        values: Metric name -> one value per window; None marks a window
            where the metric is absent.
    """

    labels: tuple[str, ...] = ()
    values: dict[str, tuple[float | None, ...]] = field(default_factory=dict)

    @property
    def metric_names(self) -> tuple[str, ...]:
        return tuple(self.values)

    def __len__(self) -> int:
        return len(self.labels)


def build_series(
    windows: Iterable[MetricWindow],
    metric_names: Iterable[str] | None = None,
) -> MetricSeries:
    """Build one data array per metric, aligned with windows.

    Args:
        windows: Windows in display order.
        metric_names: Metrics to extract. Defaults to the chart metrics of
            DEFAULT_CONFIG.

    Returns:
        MetricSeries with labels and per-metric values.
    """
    names = tuple(metric_names) if metric_names is not None else DEFAULT_CONFIG.chart_metrics
    window_list = list(windows)
    return MetricSeries(
        labels=tuple(w.label for w in window_list),
        values={
            name: tuple(
                extract_metric_value(w.raw_metric_lines, name) for w in window_list
            )
            for name in names
        },
    )
