from dataclasses import dataclass
from typing import Any

from app.anonymization.models import DetectionResult, category_values
from app.preferences.models import Preferences


@dataclass(frozen=True)
class Completion:
    """Provider reply reduced to what the service consumes."""

    text: str
    total_tokens: int = 0


@dataclass(frozen=True)
class SummaryMetadata:
    word_count: int
    character_count: int
    detected_categories: DetectionResult
    anonymized: bool
    preferences: Preferences
    token_usage: int
    generated_at: str

    @property
    def pii_detected(self) -> bool:
        return bool(self.detected_categories)

    def sorted_categories(self) -> list[str]:
        return category_values(self.detected_categories)


@dataclass(frozen=True)
class SummaryResult:
    """Output of one summary request."""

    summary: str
    metadata: SummaryMetadata

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary,
            "metadata": {
                "wordCount": self.metadata.word_count,
                "characterCount": self.metadata.character_count,
                "piiDetected": self.metadata.pii_detected,
                "piiTypes": self.metadata.sorted_categories(),
                "anonymized": self.metadata.anonymized,
                "preferences": self.metadata.preferences.to_dict(),
                "generatedAt": self.metadata.generated_at,
                "tokens": self.metadata.token_usage,
            },
        }
