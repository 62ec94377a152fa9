"""Client configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.sendbird.com"


class Settings(BaseSettings):
    """Settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Sendbird
    sendbird_app_id: str = ""
    sendbird_api_token: str = ""
    sendbird_base_url: str = DEFAULT_BASE_URL
    http_timeout: float | None = None  # None: no client-side deadline

    # Webhook
    webhook_path: str = "/sendbird/bot"
    webhook_max_concurrency: int = 32  # 0 disables the bound

    # App
    environment: str = "development"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached settings. Lazy initialization to avoid import-time errors."""
    return Settings()
