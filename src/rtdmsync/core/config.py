"""Parser configuration and the known deployment presets."""

from dataclasses import dataclass, replace

DEFAULT_WINDOW_TAG = "[RTDM][Timestamps]"
DEFAULT_TRANSCRIPT_TAG = "RECOGNIZED:"

SMOOTHNESS_SCORE = "Smoothness Score"
SRC_SCORE = "SRC Score"
BACKGROUND_NOISE_SCORE = "Background_Noise Score"
SPEAKER_LEVEL_SCORE = "Speaker_Level Score"
ISOCHRONY_SCORE = "Isochrony Score"
RT_METRIC_SCORE = "RT_Metric Score"


@dataclass(frozen=True)
class ParserConfig:
    """What the parser recognizes in a log.

    Attributes:
        metric_tokens: Allow-list of substrings marking a metric line.
        window_tag: Tag that a window-start marker line must contain.
        transcript_tag: Token carrying recognized speech. Lines with it are
            stored when it is in metric_tokens, but never charted.
    """

    metric_tokens: tuple[str, ...]
    window_tag: str = DEFAULT_WINDOW_TAG
    transcript_tag: str = DEFAULT_TRANSCRIPT_TAG

    def __post_init__(self) -> None:
        if isinstance(self.metric_tokens, str):
            raise TypeError("metric_tokens must be a sequence of str, not a str")
        # Accept any iterable of tokens but store a tuple.
        object.__setattr__(self, "metric_tokens", tuple(self.metric_tokens))
        for token in self.metric_tokens:
            if not isinstance(token, str):
                raise TypeError(
                    f"metric tokens must be str, got {type(token).__name__}"
                )
            if not token:
                raise ValueError("metric tokens must be non-empty")
        if not self.window_tag:
            raise ValueError("window_tag must be non-empty")

    @property
    def chart_metrics(self) -> tuple[str, ...]:
        """Metric tokens that carry a numeric score."""
        return tuple(t for t in self.metric_tokens if t != self.transcript_tag)

    @property
    def records_transcripts(self) -> bool:
        return self.transcript_tag in self.metric_tokens

    def matches_metric(self, line: str) -> bool:
        """Return True if line contains any configured metric token."""
        return any(token in line for token in self.metric_tokens)

    def with_tokens(self, *tokens: str) -> "ParserConfig":
        """Return a copy whose allow-list is exactly tokens."""
        return replace(self, metric_tokens=tokens)

    def extended(self, *tokens: str) -> "ParserConfig":
        """Return a copy with tokens appended to the allow-list."""
        extra = tuple(t for t in tokens if t not in self.metric_tokens)
        return replace(self, metric_tokens=self.metric_tokens + extra)


FULL_CONFIG = ParserConfig(
    metric_tokens=(
        SMOOTHNESS_SCORE,
        SRC_SCORE,
        BACKGROUND_NOISE_SCORE,
        SPEAKER_LEVEL_SCORE,
        ISOCHRONY_SCORE,
        RT_METRIC_SCORE,
        DEFAULT_TRANSCRIPT_TAG,
    )
)

BASIC_CONFIG = ParserConfig(
    metric_tokens=(
        SMOOTHNESS_SCORE,
        SRC_SCORE,
        BACKGROUND_NOISE_SCORE,
        ISOCHRONY_SCORE,
        RT_METRIC_SCORE,
    )
)

DEFAULT_CONFIG = FULL_CONFIG

_PRESETS = {
    "full": FULL_CONFIG,
    "basic": BASIC_CONFIG,
}


def get_preset(name: str) -> ParserConfig:
    """Look up a preset configuration by name ("full" or "basic").

    Raises:
        ValueError: If name is not a known preset.
    """
    try:
        return _PRESETS[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(_PRESETS))
        raise ValueError(f"unknown preset {name!r}; expected one of: {known}") from None
