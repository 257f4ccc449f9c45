"""Offline completion client.

Returns a fixed summary without any network call. Selected with
``SUMMARY_PROVIDER=example`` for local development and tests.
"""

from collections.abc import Sequence
from typing import ClassVar

from app.prompting.models import PromptMessage
from app.summary.client_base import BaseCompletionClient
from app.summary.models import Completion


class ExampleClientAdapter(BaseCompletionClient):
    """Adapter that ignores its input and returns a canned summary."""

    DEFAULT_SUMMARY: ClassVar[str] = (
        "1. Session Overview\n"
        "Client attended a scheduled session.\n\n"
        "2. Presenting Concerns/Issues Discussed\n"
        "Concerns were reviewed as documented in the session notes."
    )

    def create_chat_completion(
        self,
        *,
        model: str,
        messages: Sequence[PromptMessage],
        max_tokens: int,
        temperature: float,
    ) -> Completion:
        _ = model, messages, max_tokens, temperature
        return Completion(text=self.DEFAULT_SUMMARY, total_tokens=0)
