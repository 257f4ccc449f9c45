from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum

from app.anonymization.models import DetectionResult
from app.preferences.models import Preferences
from app.prompting.models import Prompt
from app.summary.models import Completion, SummaryResult


class SummaryStage(StrEnum):
    RECEIVED = "received"
    DETECTED = "detected"
    ANONYMIZED = "anonymized"
    PROMPT_BUILT = "prompt_built"
    MODEL_CALLED = "model_called"
    RESULT_SHAPED = "result_shaped"
    DONE = "done"
    ERROR = "error"


@dataclass(slots=True)
class SummaryContext:
    """Request-scoped state threaded through the summary steps."""

    session_notes: str
    preferences: Preferences
    stage: SummaryStage = SummaryStage.RECEIVED
    detected: DetectionResult = frozenset()
    working_text: str = ""
    anonymized: bool = False
    prompt: Prompt | None = None
    completion: Completion | None = None
    result: SummaryResult | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: SummaryContext) -> SummaryContext:
        raise NotImplementedError
