from collections.abc import Callable
from datetime import UTC, datetime

from app.anonymization.base import BasePiiDetector
from app.anonymization.models import category_values
from app.logging.logger import Log
from app.prompting.prompt_builder import PromptBuilder
from app.summary.client_base import BaseCompletionClient
from app.summary.exceptions import EmptyCompletionError
from app.summary.generation import resolve_max_tokens, resolve_temperature
from app.summary.models import SummaryMetadata, SummaryResult
from app.summary.pipeline import PipelineStep, SummaryContext, SummaryStage


def _utc_now() -> datetime:
    return datetime.now(UTC)


class DetectPiiStep(PipelineStep):
    def __init__(self, detector: BasePiiDetector) -> None:
        self._detector = detector

    def run(self, context: SummaryContext) -> SummaryContext:
        # Always the original notes, whether or not they are redacted later.
        context.detected = self._detector.detect(context.session_notes)
        context.working_text = context.session_notes
        context.stage = SummaryStage.DETECTED
        Log.info(
            "PII detection complete",
            categories=",".join(category_values(context.detected)) or "none",
        )
        return context


class AnonymizeStep(PipelineStep):
    def __init__(self, detector: BasePiiDetector) -> None:
        self._detector = detector

    def run(self, context: SummaryContext) -> SummaryContext:
        if not context.preferences.anonymize_data:
            return context
        context.working_text = self._detector.anonymize(context.session_notes)
        context.anonymized = True
        context.stage = SummaryStage.ANONYMIZED
        Log.info(
            "Session notes anonymized",
            chars_in=len(context.session_notes),
            chars_out=len(context.working_text),
        )
        return context


class BuildPromptStep(PipelineStep):
    def __init__(self, prompt_builder: PromptBuilder) -> None:
        self._prompt_builder = prompt_builder

    def run(self, context: SummaryContext) -> SummaryContext:
        context.prompt = self._prompt_builder.build_prompt(
            context.working_text, context.preferences
        )
        context.stage = SummaryStage.PROMPT_BUILT
        Log.debug(
            "Prompt built",
            system_chars=len(context.prompt[0].content),
            user_chars=len(context.prompt[1].content),
        )
        return context


class CallModelStep(PipelineStep):
    def __init__(self, client: BaseCompletionClient, model: str) -> None:
        self._client = client
        self._model = model

    def run(self, context: SummaryContext) -> SummaryContext:
        if context.prompt is None:
            raise ValueError("SummaryContext.prompt must be set before the model call")
        max_tokens = resolve_max_tokens(self._model, context.preferences.summary_length)
        temperature = resolve_temperature(self._model, context.preferences.tone)
        Log.info(
            "Calling AI provider",
            model=self._model,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        completion = self._client.create_chat_completion(
            model=self._model,
            messages=context.prompt,
            max_tokens=max_tokens,
            temperature=temperature,
        )
        if not completion.text.strip():
            raise EmptyCompletionError()
        context.completion = completion
        context.stage = SummaryStage.MODEL_CALLED
        return context


class ShapeResultStep(PipelineStep):
    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self._clock = clock

    def run(self, context: SummaryContext) -> SummaryContext:
        if context.completion is None:
            raise ValueError("SummaryContext.completion must be set before shaping")
        text = context.completion.text
        context.result = SummaryResult(
            summary=text,
            metadata=SummaryMetadata(
                word_count=len(text.split()),
                character_count=len(text),
                detected_categories=context.detected,
                anonymized=context.anonymized,
                preferences=context.preferences,
                token_usage=context.completion.total_tokens,
                generated_at=self._clock().isoformat(),
            ),
        )
        context.stage = SummaryStage.RESULT_SHAPED
        return context
