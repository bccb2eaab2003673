"""
Application configuration models and helpers.

Centralizes settings management so the CLI and the token services share a
consistent configuration surface.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TOKEN_URL = "https://api.anthropic.com/v1/oauth/token"


class OAuthSettings(BaseSettings):
    """Token endpoint and refresh policy configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    token_url: str = Field(DEFAULT_TOKEN_URL, validation_alias="OAUTH_TOKEN_URL")
    refresh_buffer_seconds: int = Field(
        300,
        validation_alias="OAUTH_REFRESH_BUFFER_SECONDS",
        description="Refresh when the access token expires within this many seconds.",
    )
    request_timeout: float = Field(
        10.0,
        validation_alias="OAUTH_REQUEST_TIMEOUT",
        description="Transport timeout applied to token endpoint requests.",
    )

    @field_validator("refresh_buffer_seconds")
    @classmethod
    def _non_negative_buffer(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Refresh buffer must not be negative.")
        return value


class AppSettings(BaseSettings):
    """Root settings object for the command line tooling."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    oauth: OAuthSettings = Field(default_factory=OAuthSettings)


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_TOKEN_URL",
    "OAuthSettings",
    "get_settings",
]
