"""Pattern registry for the PII detector.

Rules are applied in declaration order: labelled identifiers and structured
numbers first, then the looser zip code and capitalized-name heuristics.
When two categories could claim the same substring, the earlier rule wins.

Every pattern is anchored (``\\b`` or a lookbehind) and avoids nested
unbounded repetition so matching stays linear on long inputs. Redaction
tokens contain no digits, lowercase letters or ``@``, so no rule can match
another rule's token.
"""

import re
from dataclasses import dataclass

from app.anonymization.models import PatternCategory


@dataclass(frozen=True)
class CategoryRule:
    """One PII category bound to its detection pattern and redaction token."""

    category: PatternCategory
    pattern: re.Pattern[str]
    token: str


_MONTH = (
    r"(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?"
    r"|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
)
_OCTET = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_LABELLED_ID = r"[:#\s]+[A-Za-z-]*\d[A-Za-z0-9-]*\b"

CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        PatternCategory.EMAIL,
        re.compile(r"(?<![A-Za-z0-9._%+-])[A-Za-z0-9._%+-]++@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"),
        "[EMAIL_REDACTED]",
    ),
    CategoryRule(
        PatternCategory.INSURANCE_NUMBER,
        re.compile(
            r"\b(?i:Insurance|Policy|Member)(?i:\s+(?:ID|No\.?|Number))?" + _LABELLED_ID
        ),
        "[INSURANCE_NUMBER_REDACTED]",
    ),
    CategoryRule(
        PatternCategory.MEDICAL_RECORD_NUMBER,
        re.compile(r"\b(?i:MRN|MR|Patient ID|ID)" + _LABELLED_ID),
        "[MEDICAL_RECORD_REDACTED]",
    ),
    CategoryRule(
        PatternCategory.IP_ADDRESS,
        re.compile(rf"\b(?:{_OCTET}\.){{3}}{_OCTET}\b"),
        "[IP_ADDRESS_REDACTED]",
    ),
    CategoryRule(
        PatternCategory.CREDIT_CARD,
        re.compile(r"\b(?:\d{4}[-\s]?){3}\d{4}\b"),
        "[CREDIT_CARD_REDACTED]",
    ),
    CategoryRule(
        PatternCategory.SSN,
        re.compile(r"\b\d{3}-?\d{2}-?\d{4}\b"),
        "[SSN_REDACTED]",
    ),
    CategoryRule(
        PatternCategory.PHONE,
        re.compile(r"(?<!\d)(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)"),
        "[PHONE_REDACTED]",
    ),
    CategoryRule(
        PatternCategory.DATE,
        re.compile(
            r"\b(?:"
            r"\d{1,2}[/.-]\d{1,2}[/.-]\d{2,4}"
            r"|\d{4}[/.-]\d{1,2}[/.-]\d{1,2}"
            rf"|{_MONTH}\.?\s+\d{{1,2}}(?:st|nd|rd|th)?,?\s+\d{{4}}"
            rf"|\d{{1,2}}(?:st|nd|rd|th)?\s+{_MONTH}\.?,?\s+\d{{4}}"
            r")\b"
        ),
        "[DATE_REDACTED]",
    ),
    CategoryRule(
        PatternCategory.ZIP_CODE,
        re.compile(r"\b\d{5}(?:-\d{4})?\b"),
        "[ZIP_CODE_REDACTED]",
    ),
    CategoryRule(
        PatternCategory.PERSON_NAME,
        re.compile(r"\b[A-Z][a-z]++ [A-Z][a-z]++\b"),
        "[NAME_REDACTED]",
    ),
)

REDACTION_TOKENS: dict[PatternCategory, str] = {
    rule.category: rule.token for rule in CATEGORY_RULES
}
