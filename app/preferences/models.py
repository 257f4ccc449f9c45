"""Closed-set preference types shared by request validation and prompting.

Each dimension declares exactly one default in ``_default``. ``coerce`` maps
any unrecognized value to that default instead of raising.
"""

from dataclasses import dataclass
from enum import StrEnum, nonmember
from typing import Any, Self


class _DefaultingEnum(StrEnum):
    @classmethod
    def default(cls) -> Self:
        """Return the declared default; subclasses without ``_default`` fail here."""
        try:
            declared = cls._default
        except AttributeError:
            raise TypeError(f"{cls.__name__} does not declare a _default") from None
        return cls(declared)

    @classmethod
    def coerce(cls, value: object) -> Self:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.default()


class Tone(_DefaultingEnum):
    CLINICAL = "clinical"
    EMPATHETIC = "empathetic"
    NEUTRAL = "neutral"

    _default = nonmember("neutral")


class SessionType(_DefaultingEnum):
    THERAPY = "therapy"
    PSYCHIATRY = "psychiatry"
    COUPLES = "couples"
    SEXUAL_HEALTH = "sexual-health"

    _default = nonmember("therapy")


class SummaryLength(_DefaultingEnum):
    SHORT = "short"
    MEDIUM = "medium"
    DETAILED = "detailed"

    _default = nonmember("medium")


@dataclass(frozen=True)
class Preferences:
    """Request-scoped options controlling the generated summary."""

    tone: Tone = Tone.NEUTRAL
    session_type: SessionType = SessionType.THERAPY
    summary_length: SummaryLength = SummaryLength.MEDIUM
    include_action_items: bool = True
    anonymize_data: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "tone", Tone.coerce(self.tone))
        object.__setattr__(self, "session_type", SessionType.coerce(self.session_type))
        object.__setattr__(
            self, "summary_length", SummaryLength.coerce(self.summary_length)
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys used on the wire."""
        return {
            "tone": self.tone.value,
            "sessionType": self.session_type.value,
            "summaryLength": self.summary_length.value,
            "includeActionItems": self.include_action_items,
            "anonymizeData": self.anonymize_data,
        }
