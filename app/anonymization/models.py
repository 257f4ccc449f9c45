from dataclasses import dataclass, field
from enum import StrEnum


class PatternCategory(StrEnum):
    """Closed set of PII categories recognized by the detector."""

    EMAIL = "email"
    PHONE = "phone"
    SSN = "ssn"
    CREDIT_CARD = "creditCard"
    IP_ADDRESS = "ipAddress"
    ZIP_CODE = "zipCode"
    PERSON_NAME = "personName"
    DATE = "date"
    MEDICAL_RECORD_NUMBER = "medicalRecordNumber"
    INSURANCE_NUMBER = "insuranceNumber"


DetectionResult = frozenset[PatternCategory]


def category_values(categories: DetectionResult) -> list[str]:
    """Category identifiers in ``PatternCategory`` declaration order."""
    return [c.value for c in PatternCategory if c in categories]


@dataclass(frozen=True)
class CategoryMatch:
    """Diagnostic record for one category found in a text."""

    category: PatternCategory
    count: int
    examples: tuple[str, ...] = ()


@dataclass(frozen=True)
class PiiAnalysis:
    """Per-category breakdown of the PII found in a text.

    ``examples`` hold raw matched values and must never be logged.
    """

    matches: dict[PatternCategory, CategoryMatch] = field(default_factory=dict)

    @property
    def has_pii(self) -> bool:
        return bool(self.matches)

    @property
    def categories(self) -> DetectionResult:
        return frozenset(self.matches)
