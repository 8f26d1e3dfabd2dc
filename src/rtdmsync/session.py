"""Session object owning the active parsed log.

A MetricsSession is created by whatever drives the UI and passed to the
handlers that need it. It replaces a process-wide "current log" with an
explicit value that can be loaded, queried and reset.
"""

from rtdmsync.core.config import ParserConfig
from rtdmsync.core.index import WindowIndex, quantize_position
from rtdmsync.core.logs import get_logger
from rtdmsync.core.models import MetricWindow, ParsedLog
from rtdmsync.core.parser import DiscardCallback, LogParser
from rtdmsync.core.ports import ChartPort, LogSourcePort, MetricsDisplayPort

logger = get_logger(__name__)


class MetricsSession:
    """Holds one parsed log at a time and resolves playback positions.

    The active index is replaced by a single attribute assignment after
    the new log is fully parsed, so a concurrent lookup observes either
    the old log or the new one.

    Example:
        ```python
        session = MetricsSession(display=panel, chart=chart)
        await session.load_from(FileLogSource("run.log"))
        session.position_changed(player.current_time)
        ```
    """

    def __init__(
        self,
        config: ParserConfig | None = None,
        display: MetricsDisplayPort | None = None,
        chart: ChartPort | None = None,
        on_discard: DiscardCallback | None = None,
    ) -> None:
        """Initialize an empty session.

        Args:
            config: Parser configuration. Defaults to DEFAULT_CONFIG.
            display: Surface notified on every position change.
            chart: Component notified with a fresh series on every load.
            on_discard: Diagnostics callback handed to the parser.
        """
        self._parser = LogParser(config, on_discard=on_discard)
        self._display = display
        self._chart = chart
        self._index = WindowIndex()
        self._loaded = False

    @property
    def config(self) -> ParserConfig:
        return self._parser.config

    @property
    def index(self) -> WindowIndex:
        return self._index

    @property
    def log(self) -> ParsedLog:
        return self._index.log

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load(self, text: str) -> ParsedLog:
        """Parse text and make it the active log.

        Args:
            text: Complete log contents.

        Returns:
            The newly active ParsedLog.
        """
        parsed = self._parser.parse(text)
        self._index = WindowIndex(parsed)
        self._loaded = True
        logger.info(
            "Loaded metrics log: %d windows, %d discarded lines",
            parsed.stats.window_count,
            parsed.stats.discarded_count,
        )
        if self._chart is not None:
            self._chart.render(self._index.series(self.config.chart_metrics))
        return parsed

    async def load_from(self, source: LogSourcePort) -> ParsedLog:
        """Read text from source and load it.

        If the read fails the exception propagates and the previously
        active log stays in place.
        """
        text = await source.read_text()
        return self.load(text)

    def lookup(self, time_seconds: float) -> MetricWindow | None:
        """Window at time_seconds in the active log, without side effects."""
        return self._index.find_window_at(time_seconds)

    def position_changed(self, position_seconds: float) -> MetricWindow | None:
        """Handle a playback position update.

        The position is floored to whole seconds before lookup. The display,
        if attached, is updated with the result.

        Args:
            position_seconds: Current playback position.

        Returns:
            The window now in effect, or None.
        """
        index = self._index
        query_time = quantize_position(position_seconds)
        window = index.find_window_at(query_time) if query_time is not None else None
        if self._display is not None:
            self._display.show(window)
        return window

    def metric_value(self, window: MetricWindow, metric_name: str) -> float | None:
        """Numeric value of metric_name in window."""
        return self._index.extract_metric_value(window, metric_name)

    def reset(self) -> None:
        """Drop the active log and clear attached collaborators."""
        self._index = WindowIndex()
        self._loaded = False
        if self._display is not None:
            self._display.show(None)
        if self._chart is not None:
            self._chart.clear()
        logger.info("Metrics session reset")
