"""Sampling parameters derived from preferences and the configured model.

Two table families exist: one for DeepSeek models (selected by model id)
and a default family for everything else.
"""

from app.preferences.models import SummaryLength, Tone

DEEPSEEK_MARKER = "deepseek"

_MAX_TOKENS: dict[SummaryLength, int] = {
    SummaryLength.SHORT: 200,
    SummaryLength.MEDIUM: 500,
    SummaryLength.DETAILED: 1000,
}
_DEEPSEEK_MAX_TOKENS: dict[SummaryLength, int] = {
    SummaryLength.SHORT: 300,
    SummaryLength.MEDIUM: 800,
    SummaryLength.DETAILED: 1500,
}

_TEMPERATURES: dict[Tone, float] = {
    Tone.CLINICAL: 0.2,
    Tone.NEUTRAL: 0.4,
    Tone.EMPATHETIC: 0.6,
}
_DEEPSEEK_TEMPERATURES: dict[Tone, float] = {
    Tone.CLINICAL: 0.1,
    Tone.NEUTRAL: 0.3,
    Tone.EMPATHETIC: 0.5,
}


def is_deepseek_model(model: str) -> bool:
    return DEEPSEEK_MARKER in model.lower()


def resolve_max_tokens(model: str, length: object) -> int:
    """Output token budget for *length*; unknown lengths use the medium entry."""
    table = _DEEPSEEK_MAX_TOKENS if is_deepseek_model(model) else _MAX_TOKENS
    return table[SummaryLength.coerce(length)]


def resolve_temperature(model: str, tone: object) -> float:
    """Sampling temperature for *tone*; unknown tones use the neutral entry."""
    table = _DEEPSEEK_TEMPERATURES if is_deepseek_model(model) else _TEMPERATURES
    return table[Tone.coerce(tone)]
