"""Validation of incoming summary request bodies.

Bodies use camelCase keys; unknown keys are dropped and every preference
falls back to its default when absent.
"""

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.preferences.models import Preferences, SessionType, SummaryLength, Tone
from app.summary.exceptions import RequestValidationError

MIN_NOTES_LENGTH = 10
MAX_NOTES_LENGTH = 10_000


class PreferencesPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    tone: Tone = Tone.default()
    session_type: SessionType = Field(default=SessionType.default(), alias="sessionType")
    summary_length: SummaryLength = Field(
        default=SummaryLength.default(), alias="summaryLength"
    )
    include_action_items: bool = Field(default=True, alias="includeActionItems")
    anonymize_data: bool = Field(default=False, alias="anonymizeData")

    def to_preferences(self) -> Preferences:
        return Preferences(
            tone=self.tone,
            session_type=self.session_type,
            summary_length=self.summary_length,
            include_action_items=self.include_action_items,
            anonymize_data=self.anonymize_data,
        )


class SummaryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    session_notes: str = Field(
        alias="sessionNotes",
        min_length=MIN_NOTES_LENGTH,
        max_length=MAX_NOTES_LENGTH,
    )
    preferences: PreferencesPayload = Field(default_factory=PreferencesPayload)


def parse_summary_request(payload: Mapping[str, object]) -> SummaryRequest:
    """Validate *payload* and return the typed request.

    Raises:
        RequestValidationError: with every failure joined into one message.
            Input values are never echoed back.
    """
    try:
        return SummaryRequest.model_validate(dict(payload))
    except ValidationError as exc:
        details = ", ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors(include_input=False, include_url=False)
        )
        raise RequestValidationError(f"Validation Error: {details}") from exc
