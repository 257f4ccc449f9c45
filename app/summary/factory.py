from typing import ClassVar

from app.anonymization.detector import PiiDetector
from app.config.settings import Settings
from app.summary.client_base import BaseCompletionClient
from app.summary.example_client_adapter import ExampleClientAdapter
from app.summary.exceptions import ConfigurationError
from app.summary.openai_client_adapter import OpenAIClientAdapter
from app.summary.service import SummaryService, build_summary_service


class SummaryServiceFactory:
    """Creates a summary service wired to the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> SummaryService:
        """Build the service; raises ConfigurationError for unusable settings."""
        return build_summary_service(
            client=cls.create_client(settings),
            model=settings.ai_model,
            detector=PiiDetector(),
        )

    @classmethod
    def create_client(cls, settings: Settings) -> BaseCompletionClient:
        provider = settings.summary_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        return OpenAIClientAdapter(
            api_key=settings.openai_api_key,
            timeout_seconds=settings.ai_timeout_seconds,
            base_url=base_url,
            default_headers=cls._resolve_headers(base_url, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        custom_url = settings.ai_base_url.strip()
        if provider == "openai":
            return custom_url or None
        if provider == "openai_compatible":
            if not custom_url:
                raise ConfigurationError(
                    "ai_base_url is required for summary_provider=openai_compatible"
                )
            return custom_url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return custom_url or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ConfigurationError(
            f"Unknown summary provider '{provider}'. Choose from: {supported}"
        )

    @staticmethod
    def _resolve_headers(
        base_url: str | None, settings: Settings
    ) -> dict[str, str] | None:
        if base_url is None:
            return None
        return {
            "HTTP-Referer": settings.frontend_url,
            "X-Title": settings.app_title,
        }
