from collections.abc import Sequence

from app.anonymization.base import BasePiiDetector
from app.logging.logger import Log
from app.preferences.models import Preferences
from app.prompting.prompt_builder import PromptBuilder
from app.summary.client_base import BaseCompletionClient
from app.summary.exceptions import ProviderGenericError, SummaryError
from app.summary.models import SummaryResult
from app.summary.pipeline import PipelineStep, SummaryContext, SummaryStage
from app.summary.steps import (
    AnonymizeStep,
    BuildPromptStep,
    CallModelStep,
    DetectPiiStep,
    ShapeResultStep,
)


class SummaryService:
    """Orchestrates one consultation summary request.

    Pipeline: detect -> anonymize (optional) -> build prompt -> call model
    -> shape result. Holds no state between requests.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = tuple(steps)

    def generate_summary(
        self, session_notes: str, preferences: Preferences
    ) -> SummaryResult:
        """Run the pipeline and return a complete result or raise a typed error."""
        context = SummaryContext(session_notes=session_notes, preferences=preferences)
        Log.info(
            "Generating summary",
            chars=len(session_notes),
            session_type=preferences.session_type.value,
            anonymize=preferences.anonymize_data,
        )
        try:
            for step in self._steps:
                context = step.run(context)
        except SummaryError as exc:
            context.stage = SummaryStage.ERROR
            Log.error("Summary generation failed", classification=exc.code)
            raise
        except Exception as exc:
            context.stage = SummaryStage.ERROR
            Log.error("Summary generation failed", error=type(exc).__name__)
            raise ProviderGenericError() from exc

        if context.result is None:
            raise ProviderGenericError()
        context.stage = SummaryStage.DONE
        Log.info(
            "Summary generated",
            words=context.result.metadata.word_count,
            tokens=context.result.metadata.token_usage,
        )
        return context.result


def build_summary_service(
    *,
    client: BaseCompletionClient,
    model: str,
    detector: BasePiiDetector,
    prompt_builder: PromptBuilder | None = None,
) -> SummaryService:
    """Assemble the default step sequence around *client*."""
    builder = prompt_builder or PromptBuilder()
    return SummaryService(
        steps=[
            DetectPiiStep(detector),
            AnonymizeStep(detector),
            BuildPromptStep(builder),
            CallModelStep(client, model),
            ShapeResultStep(),
        ]
    )
