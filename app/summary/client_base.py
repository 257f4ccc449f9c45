from abc import ABC, abstractmethod
from collections.abc import Sequence

from app.prompting.models import PromptMessage
from app.summary.models import Completion


class BaseCompletionClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        messages: Sequence[PromptMessage],
        max_tokens: int,
        temperature: float,
    ) -> Completion:
        """Return the generated text and token usage.

        Raises:
            ProviderError: a typed subclass for every provider failure.
            EmptyCompletionError: when the provider returns no choices.
        """
