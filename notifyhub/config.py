"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key used to verify JWT access tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to interpret and store schedule timestamps",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    dispatch_interval_seconds: int = Field(
        default=60,
        description="Seconds between dispatch cycles when running in continuous mode",
        gt=0,
    )
    dispatch_max_workers: int = Field(
        default=1,
        description="Maximum number of schedules dispatched in parallel within one cycle",
        ge=1,
    )
    dispatch_timeout_ms: int = Field(
        default=30_000,
        description=(
            "Time budget in milliseconds for each schedule transaction; 0 disables it"
        ),
        ge=0,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
