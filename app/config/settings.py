from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    summary_provider: str = "openai"

    openai_api_key: str = ""
    ai_model: str = "openai/gpt-4o-mini"
    ai_base_url: str = ""
    ai_timeout_seconds: int = 30

    frontend_url: str = "http://localhost:5173"
    app_title: str = "Consultation Summary Generator"
