from abc import ABC, abstractmethod

from app.anonymization.models import DetectionResult, PiiAnalysis


class BasePiiDetector(ABC):
    """Contract for all PII detection and redaction adapters."""

    @abstractmethod
    def detect(self, text: str) -> DetectionResult:
        """Return the categories whose pattern matches anywhere in *text*.

        Never raises for any string input; empty text yields an empty set.
        """

    @abstractmethod
    def anonymize(self, text: str) -> str:
        """Replace every match of every category with its redaction token.

        Categories are applied in their declared order against the
        progressively redacted text. The operation is idempotent.
        """

    @abstractmethod
    def analyze(self, text: str) -> PiiAnalysis:
        """Return per-category match counts and up to three examples."""

    def is_safe(self, text: str) -> bool:
        """True when no category matches *text*."""
        return not self.detect(text)
