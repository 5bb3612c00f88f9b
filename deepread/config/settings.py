from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    extraction_provider: str = "gemini"
    extraction_timeout_seconds: int | None = None

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.5-flash"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"

    openai_compatible_base_url: str = ""
    openai_compatible_api_key: str = ""
    openai_compatible_model_name: str = ""

    openrouter_api_key: str = ""
    openrouter_model_name: str = ""
