"""Configuration management via pydantic-settings."""

from .settings import (
    HttpSettings,
    LoggingSettings,
    RagBlogSettings,
    SearchCredentials,
    ServerSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "RagBlogSettings", "ServerSettings", "LoggingSettings", "HttpSettings",
    "SearchCredentials", "get_settings", "clear_settings_cache",
]
