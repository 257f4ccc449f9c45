from collections.abc import Mapping, Sequence
from typing import ClassVar

import httpx
import openai

from app.logging.logger import Log
from app.prompting.models import PromptMessage
from app.summary.client_base import BaseCompletionClient
from app.summary.exceptions import (
    ConfigurationError,
    EmptyCompletionError,
    ProviderAuthError,
    ProviderBadRequestError,
    ProviderError,
    ProviderGenericError,
    ProviderPermissionError,
    ProviderQuotaError,
    ProviderRateLimitError,
)
from app.summary.models import Completion


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat API.

    Provider failures are translated into the typed ``ProviderError``
    hierarchy here, so callers never inspect SDK exceptions.
    """

    STATUS_ERRORS: ClassVar[dict[int, type[ProviderError]]] = {
        400: ProviderBadRequestError,
        401: ProviderAuthError,
        402: ProviderQuotaError,
        403: ProviderPermissionError,
        429: ProviderRateLimitError,
    }

    PRESENCE_PENALTY: ClassVar[float] = 0.1
    FREQUENCY_PENALTY: ClassVar[float] = 0.1

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        default_headers: Mapping[str, str] | None = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("OpenAI API key not configured")
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            default_headers=default_headers,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        messages: Sequence[PromptMessage],
        max_tokens: int,
        temperature: float,
    ) -> Completion:
        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=[message.to_dict() for message in messages],
                max_tokens=max_tokens,
                temperature=temperature,
                presence_penalty=self.PRESENCE_PENALTY,
                frequency_penalty=self.FREQUENCY_PENALTY,
            )
        except openai.APIStatusError as exc:
            error_cls = self.STATUS_ERRORS.get(exc.status_code, ProviderGenericError)
            Log.warning(
                "AI provider rejected request",
                status=exc.status_code,
                classification=error_cls.code,
            )
            raise error_cls() from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            Log.warning("AI provider unreachable", error=type(exc).__name__)
            raise ProviderGenericError(
                "AI service unreachable or timed out. Please try again later."
            ) from exc
        except openai.APIError as exc:
            Log.warning("AI provider error", error=type(exc).__name__)
            raise ProviderGenericError() from exc

        if not response.choices:
            raise EmptyCompletionError()
        content = response.choices[0].message.content
        usage = response.usage
        return Completion(
            text=content or "",
            total_tokens=(usage.total_tokens or 0) if usage is not None else 0,
        )
