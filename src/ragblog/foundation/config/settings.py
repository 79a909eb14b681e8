"""Environment-based configuration using pydantic-settings.

Example:
    >>> from ragblog.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.server.port
    8787

    # Or with environment variables:
    # RAGBLOG_SERVER__PORT=9000
    # RAGBLOG_LOG_LEVEL=DEBUG

Search API credentials are deliberately not part of the cached settings tree:
`SearchCredentials` is built on every call so that a missing key only fails
the `search_internet` call that needed it.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, PositiveFloat, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """HTTP server identity and bind address."""

    model_config = SettingsConfigDict(env_prefix="RAGBLOG_SERVER_", extra="ignore")

    name: str = "RAG Blog MCP Server"
    version: str = "1.0.0"
    host: str = "127.0.0.1"
    port: int = Field(default=8787, ge=1, le=65535)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="RAGBLOG_LOG_", extra="ignore")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "text"] = "text"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class HttpSettings(BaseSettings):
    """Outbound HTTP client configuration."""

    model_config = SettingsConfigDict(env_prefix="RAGBLOG_HTTP_", extra="ignore")

    timeout: PositiveFloat = Field(default=30.0, description="Request timeout in seconds")
    user_agent: str = "RAG-Blog-MCP-Server/1.0"
    follow_redirects: bool = True


class RagBlogSettings(BaseSettings):
    """Root settings, loaded from RAGBLOG_* variables and an optional .env file."""

    model_config = SettingsConfigDict(
        env_prefix="RAGBLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    corpus_path: Path | None = Field(default=None, description="Override for the packaged corpus file")

    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)


class SearchCredentials(BaseSettings):
    """Google Custom Search credentials, read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    search_api_key: SecretStr | None = None
    custom_search_engine_id: str | None = None

    @property
    def configured(self) -> bool:
        return bool(self.search_api_key and self.search_api_key.get_secret_value() and self.custom_search_engine_id)


@lru_cache(maxsize=1)
def get_settings() -> RagBlogSettings:
    """Get the global settings instance (cached)."""
    return RagBlogSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
