"""
asyncshield.settings - Centralized Configuration

Loads from .env files and environment variables using pydantic-settings.
Only ambient behaviour is configurable here (log levels, whether swallowed
handler failures are logged); return styles and handler chains are always
chosen in code when a handler is built.

Usage:
    >>> from asyncshield.settings import get_settings
    >>> settings = get_settings()
    >>> settings.error_log_level
    'ERROR'
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AsyncShieldSettings(BaseSettings):
    """asyncshield configuration loaded from .env / environment variables.

    All ASYNCSHIELD_* prefixed env vars are loaded automatically.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ASYNCSHIELD_",
        extra="ignore",
    )

    # -- Logging ---------------------------------------------------------------
    # Level for the demo CLI's root logger.
    log_level: str = "INFO"
    # Levels used when a log config entry is a plain message string.
    error_log_level: str = "ERROR"
    success_log_level: str = "INFO"
    # Swallowed predicate/action/default-handler/log failures go to ERROR.
    log_swallowed_errors: bool = True

    # -- Validators ------------------------------------------------------------

    @field_validator("log_level", "error_log_level", "success_log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate a logging level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {v!r}, expected one of {LOG_LEVELS}")
        return level

    # -- Helpers ---------------------------------------------------------------

    def level_for(self, kind: str) -> int:
        """Return the numeric logging level for 'error' or 'success' messages."""
        name = self.error_log_level if kind == "error" else self.success_log_level
        return getattr(logging, name)


# ---------------------------------------------------------------------------
# Singleton accessor
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_settings() -> AsyncShieldSettings:
    """Return the cached AsyncShieldSettings singleton."""
    return AsyncShieldSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()


__all__ = [
    "LOG_LEVELS",
    "AsyncShieldSettings",
    "clear_settings_cache",
    "get_settings",
]
