"""Tests for SummaryServiceFactory."""

from unittest.mock import patch

import pytest

from app.config.settings import Settings
from app.preferences.models import Preferences
from app.summary.example_client_adapter import ExampleClientAdapter
from app.summary.exceptions import ConfigurationError
from app.summary.factory import SummaryServiceFactory
from app.summary.service import SummaryService


class TestSummaryServiceFactory:
    def test_creates_offline_service_for_example_provider(self) -> None:
        settings = Settings(summary_provider="example", openai_api_key="")
        service = SummaryServiceFactory.create(settings)
        assert isinstance(service, SummaryService)
        result = service.generate_summary("client reported better sleep.", Preferences())
        assert result.summary == ExampleClientAdapter.DEFAULT_SUMMARY

    def test_example_provider_ignores_case(self) -> None:
        settings = Settings(summary_provider="EXAMPLE")
        assert isinstance(SummaryServiceFactory.create_client(settings), ExampleClientAdapter)

    def test_missing_api_key_raises_configuration_error(self) -> None:
        settings = Settings(summary_provider="openai", openai_api_key="")
        with pytest.raises(ConfigurationError, match="API key"):
            SummaryServiceFactory.create(settings)

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            summary_provider="openai",
            openai_api_key="openai-key",
            ai_base_url="",
            ai_timeout_seconds=42,
        )
        with patch("app.summary.factory.OpenAIClientAdapter") as mock_adapter:
            SummaryServiceFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
            default_headers=None,
        )

    def test_custom_base_url_sends_attribution_headers(self) -> None:
        settings = Settings(
            summary_provider="openai",
            openai_api_key="k",
            ai_base_url="https://gateway.example.com/v1",
            ai_timeout_seconds=30,
            frontend_url="https://notes.example.com",
            app_title="Summary Generator",
        )
        with patch("app.summary.factory.OpenAIClientAdapter") as mock_adapter:
            SummaryServiceFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="k",
            timeout_seconds=30,
            base_url="https://gateway.example.com/v1",
            default_headers={
                "HTTP-Referer": "https://notes.example.com",
                "X-Title": "Summary Generator",
            },
        )

    def test_uses_provider_default_base_url_for_openrouter(self) -> None:
        settings = Settings(
            summary_provider="openrouter",
            openai_api_key="k",
            ai_base_url="",
            ai_timeout_seconds=30,
        )
        with patch("app.summary.factory.OpenAIClientAdapter") as mock_adapter:
            SummaryServiceFactory.create(settings)
        assert mock_adapter.call_args.kwargs["base_url"] == "https://openrouter.ai/api/v1"

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(
            summary_provider="openai_compatible",
            openai_api_key="k",
            ai_base_url="",
        )
        with pytest.raises(ConfigurationError, match="ai_base_url"):
            SummaryServiceFactory.create(settings)

    def test_unknown_provider_raises_configuration_error(self) -> None:
        settings = Settings(summary_provider="unknown", openai_api_key="k")
        with pytest.raises(ConfigurationError, match="Unknown summary provider"):
            SummaryServiceFactory.create(settings)

    def test_passes_configured_model(self) -> None:
        settings = Settings(
            summary_provider="deepseek",
            openai_api_key="k",
            ai_base_url="",
            ai_model="deepseek/deepseek-chat",
        )
        with patch("app.summary.factory.build_summary_service") as mock_build, patch(
            "app.summary.factory.OpenAIClientAdapter"
        ):
            SummaryServiceFactory.create(settings)
        assert mock_build.call_args.kwargs["model"] == "deepseek/deepseek-chat"
