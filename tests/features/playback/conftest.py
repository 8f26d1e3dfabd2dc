"""Step definitions for the playback sync feature."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from rtdmsync.core.extraction import extract_transcripts
from rtdmsync.core.models import MetricWindow
from rtdmsync.session import MetricsSession
from tests.helpers import RecordingChart, RecordingDisplay


@dataclass
class PlaybackContext:
    """State shared between the steps of one scenario."""

    display: RecordingDisplay = field(default_factory=RecordingDisplay)
    chart: RecordingChart = field(default_factory=RecordingChart)
    session: MetricsSession | None = None

    @property
    def last_shown(self) -> MetricWindow | None:
        assert self.display.shown, "nothing was shown yet"
        return self.display.shown[-1]


def _parse_values(text: str) -> tuple[float | None, ...]:
    return tuple(
        None if item.strip() == "none" else float(item) for item in text.split(",")
    )


@pytest.fixture
def ctx() -> PlaybackContext:
    """Fresh scenario context for each test."""
    return PlaybackContext()


@given("a metrics session with a display and a chart")
def step_session(ctx: PlaybackContext) -> None:
    ctx.session = MetricsSession(display=ctx.display, chart=ctx.chart)


@given("the following log is loaded:")
def step_load(ctx: PlaybackContext, docstring: str) -> None:
    assert ctx.session is not None
    ctx.session.load(docstring)


@when(parsers.parse("playback reaches {position:f} seconds"))
def step_position(ctx: PlaybackContext, position: float) -> None:
    assert ctx.session is not None
    ctx.session.position_changed(position)


@when("the session is reset")
def step_reset(ctx: PlaybackContext) -> None:
    assert ctx.session is not None
    ctx.session.reset()


@then(parsers.parse("the display shows the window from {start:f} to {end:f} seconds"))
def step_shows_window(ctx: PlaybackContext, start: float, end: float) -> None:
    window = ctx.last_shown
    assert window is not None
    assert (window.start_seconds, window.end_seconds) == (start, end)


@then("the display is empty")
def step_display_empty(ctx: PlaybackContext) -> None:
    assert ctx.last_shown is None


@then(parsers.parse('the "{metric}" of the shown window is {value:f}'))
def step_metric_value(ctx: PlaybackContext, metric: str, value: float) -> None:
    window = ctx.last_shown
    assert window is not None and ctx.session is not None
    assert ctx.session.metric_value(window, metric) == value


@then(parsers.parse('the "{metric}" of the shown window has no value'))
def step_metric_absent(ctx: PlaybackContext, metric: str) -> None:
    window = ctx.last_shown
    assert window is not None and ctx.session is not None
    assert ctx.session.metric_value(window, metric) is None


@then(parsers.parse('the shown window has the transcript "{text}"'))
def step_transcript(ctx: PlaybackContext, text: str) -> None:
    window = ctx.last_shown
    assert window is not None
    assert text in extract_transcripts(window)


@then(parsers.parse('the chart shows labels "{labels}"'))
def step_chart_labels(ctx: PlaybackContext, labels: str) -> None:
    assert ctx.chart.rendered[-1].labels == tuple(labels.split(", "))


@then(parsers.parse('the chart series "{metric}" is "{values}"'))
def step_chart_series(ctx: PlaybackContext, metric: str, values: str) -> None:
    assert ctx.chart.rendered[-1].values[metric] == _parse_values(values)


@then("the chart has been cleared")
def step_chart_cleared(ctx: PlaybackContext) -> None:
    assert ctx.chart.clear_count == 1
