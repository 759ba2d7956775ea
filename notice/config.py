"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding=ENV_FILE_ENCODING,
        extra="ignore",
    )

    database_url: str = Field(
        default="sqlite:///./notice.db",
        description="Database connection URL used by SQLAlchemy for history and preferences",
        min_length=1,
    )
    csrf_secret: str | None = Field(
        default=None,
        description="Secret used to sign anti-forgery tokens; tokens are disabled when unset",
    )
    filter_order: list[str] = Field(
        default_factory=list,
        description="Explicit filter names, outermost first; overrides filter priorities",
    )
    notifications_file: str | None = Field(
        default=None,
        description="Path to a JSON notification feed served by the static source",
    )
    cache_ttl_seconds: int = Field(
        default=300,
        description="Seconds a per-user source response stays cached; 0 disables caching",
        ge=0,
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:4200"],
        description="Origins allowed to call the REST API from a browser",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"LOG_LEVEL '{value}' is not a valid logging level")
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
