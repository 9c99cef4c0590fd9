# ABOUTME: Centralized configuration using Pydantic Settings.
# ABOUTME: Loads HTTP client and logging settings from RSSMODEL_* environment variables.

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RSSMODEL_",
        extra="ignore",
    )

    # HTTP client
    feed_timeout: float | None = 10.0  # None disables the timeout
    feed_user_agent: str = "rssmodel/0.1.0"
    feed_follow_redirects: bool = True
    feed_headers: dict[str, str] = {}

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from environment variables and .env file.
    """
    return Settings()
