from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from app.prompting.models import PromptMessage, Role
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
from app.summary.openai_client_adapter import OpenAIClientAdapter

MESSAGES = (
    PromptMessage(role=Role.SYSTEM, content="system"),
    PromptMessage(role=Role.USER, content="user"),
)
_REQUEST = httpx.Request("POST", "https://api.example.com/v1/chat/completions")


def _make_mock_response(content: str | None, total_tokens: int | None = 42) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    if total_tokens is None:
        response.usage = None
    else:
        response.usage.total_tokens = total_tokens
    return response


def _status_error(
    error_cls: type[openai.APIStatusError], status_code: int
) -> openai.APIStatusError:
    return error_cls(
        "provider rejected the request",
        response=httpx.Response(status_code, request=_REQUEST),
        body=None,
    )


def _call(mock_client: MagicMock, **kwargs: object) -> object:
    with patch(
        "app.summary.openai_client_adapter.openai.OpenAI",
        return_value=mock_client,
    ):
        adapter = OpenAIClientAdapter(api_key="k", timeout_seconds=30)
        return adapter.create_chat_completion(
            model=kwargs.get("model", "m"),  # type: ignore[arg-type]
            messages=MESSAGES,
            max_tokens=200,
            temperature=0.2,
        )


class TestConstruction:
    def test_missing_api_key_raises_configuration_error(self) -> None:
        with patch("app.summary.openai_client_adapter.openai.OpenAI") as mock_openai:
            with pytest.raises(ConfigurationError, match="API key"):
                OpenAIClientAdapter(api_key="", timeout_seconds=30)
        mock_openai.assert_not_called()

    def test_passes_timeout_base_url_and_headers(self) -> None:
        with patch("app.summary.openai_client_adapter.openai.OpenAI") as mock_openai:
            OpenAIClientAdapter(
                api_key="k",
                timeout_seconds=12,
                base_url="https://openrouter.ai/api/v1",
                default_headers={"X-Title": "t"},
            )
        mock_openai.assert_called_once_with(
            api_key="k",
            timeout=12,
            base_url="https://openrouter.ai/api/v1",
            default_headers={"X-Title": "t"},
        )


class TestCreateChatCompletion:
    def test_returns_text_and_usage(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("summary")
        completion = _call(mock_client)
        assert completion.text == "summary"  # type: ignore[attr-defined]
        assert completion.total_tokens == 42  # type: ignore[attr-defined]

    def test_missing_usage_counts_zero_tokens(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(
            "summary", total_tokens=None
        )
        completion = _call(mock_client)
        assert completion.total_tokens == 0  # type: ignore[attr-defined]

    def test_sends_messages_and_sampling_parameters(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response("summary")
        _call(mock_client, model="openai/gpt-4o-mini")
        mock_client.chat.completions.create.assert_called_once_with(
            model="openai/gpt-4o-mini",
            messages=[
                {"role": "system", "content": "system"},
                {"role": "user", "content": "user"},
            ],
            max_tokens=200,
            temperature=0.2,
            presence_penalty=0.1,
            frequency_penalty=0.1,
        )

    def test_no_choices_raises_empty_completion(self) -> None:
        mock_client = MagicMock()
        response = MagicMock()
        response.choices = []
        mock_client.chat.completions.create.return_value = response
        with pytest.raises(EmptyCompletionError):
            _call(mock_client)

    def test_null_content_becomes_empty_text(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.return_value = _make_mock_response(None)
        completion = _call(mock_client)
        assert completion.text == ""  # type: ignore[attr-defined]


class TestErrorMapping:
    @pytest.mark.parametrize(
        ("sdk_error", "expected"),
        [
            (_status_error(openai.AuthenticationError, 401), ProviderAuthError),
            (_status_error(openai.RateLimitError, 429), ProviderRateLimitError),
            (_status_error(openai.BadRequestError, 400), ProviderBadRequestError),
            (_status_error(openai.APIStatusError, 402), ProviderQuotaError),
            (_status_error(openai.PermissionDeniedError, 403), ProviderPermissionError),
            (_status_error(openai.InternalServerError, 500), ProviderGenericError),
            (_status_error(openai.NotFoundError, 404), ProviderGenericError),
        ],
    )
    def test_status_codes_map_to_typed_errors(
        self, sdk_error: openai.APIStatusError, expected: type[ProviderError]
    ) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = sdk_error
        with pytest.raises(expected) as exc_info:
            _call(mock_client)
        assert type(exc_info.value) is expected
        assert exc_info.value.__cause__ is sdk_error

    def test_connection_error_maps_to_generic(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APIConnectionError(
            request=_REQUEST
        )
        with pytest.raises(ProviderGenericError, match="unreachable"):
            _call(mock_client)

    def test_timeout_maps_to_generic(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = openai.APITimeoutError(
            request=_REQUEST
        )
        with pytest.raises(ProviderGenericError, match="timed out"):
            _call(mock_client)

    def test_httpx_timeout_maps_to_generic(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = httpx.TimeoutException("timeout")
        with pytest.raises(ProviderGenericError):
            _call(mock_client)

    def test_messages_do_not_echo_provider_text(self) -> None:
        mock_client = MagicMock()
        mock_client.chat.completions.create.side_effect = _status_error(
            openai.RateLimitError, 429
        )
        with pytest.raises(ProviderRateLimitError) as exc_info:
            _call(mock_client)
        assert str(exc_info.value) == ProviderRateLimitError.default_message
        assert exc_info.value.status_code == 429
