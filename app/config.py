"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    environment: Literal["development", "test", "production"] = Field(
        default="development",
        description="Deployment environment the API is running in",
    )
    database_url: str = Field(
        default="sqlite:///./learning_platform.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 30,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str = Field(
        default="UTC",
        description="IANA timezone name (or UTC±HH:MM offset) used for timestamps",
    )
    base_url: str = Field(
        default="http://localhost:5000",
        description="Public URL advertised in the API documentation",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    api_title: str = Field(default="Digital Learning Platform API")
    api_version: str = Field(default="1.0.0")
    api_description: str = Field(
        default="API documentation for Digital Learning Platform"
    )
    pagination_default_limit: int = Field(default=10, gt=0)
    pagination_max_limit: int = Field(default=100, gt=0)

    @model_validator(mode="after")
    def _validate_pagination(self) -> "Settings":
        if self.pagination_default_limit > self.pagination_max_limit:
            raise ValueError(
                "PAGINATION_DEFAULT_LIMIT cannot exceed PAGINATION_MAX_LIMIT"
            )
        return self

    @property
    def debug(self) -> bool:
        """Return ``True`` outside of production deployments."""

        return self.environment != "production"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
