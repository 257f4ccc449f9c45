"""Pattern-based PII detector and anonymizer.

Heuristic only: a fixed set of regular expressions, one per category.
False positives (e.g. any two capitalized words read as a name) and false
negatives are expected.
"""

from typing import ClassVar

from app.anonymization.base import BasePiiDetector
from app.anonymization.models import (
    CategoryMatch,
    DetectionResult,
    PatternCategory,
    PiiAnalysis,
)
from app.anonymization.patterns import CATEGORY_RULES, CategoryRule


class PiiDetector(BasePiiDetector):
    """Stateless detector over the declared category rules.

    Compiled ``re.Pattern`` objects keep no match position between calls,
    so one instance can be shared across concurrent requests.
    """

    _RULES: ClassVar[tuple[CategoryRule, ...]] = CATEGORY_RULES
    _MAX_EXAMPLES: ClassVar[int] = 3

    def detect(self, text: str) -> DetectionResult:
        if not text:
            return frozenset()
        return frozenset(
            rule.category for rule in self._RULES if rule.pattern.search(text)
        )

    def anonymize(self, text: str) -> str:
        redacted = text
        for rule in self._RULES:
            redacted = rule.pattern.sub(rule.token, redacted)
        return redacted

    def analyze(self, text: str) -> PiiAnalysis:
        if not text:
            return PiiAnalysis()
        matches: dict[PatternCategory, CategoryMatch] = {}
        for rule in self._RULES:
            found = [m.group() for m in rule.pattern.finditer(text)]
            if found:
                matches[rule.category] = CategoryMatch(
                    category=rule.category,
                    count=len(found),
                    examples=tuple(found[: self._MAX_EXAMPLES]),
                )
        return PiiAnalysis(matches=matches)
