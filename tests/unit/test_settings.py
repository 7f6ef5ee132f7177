"""
Unit tests for asyncshield.settings - Centralized Configuration

Tests default values, environment variable overrides, level validation
and the settings cache.
"""

import logging

import pytest
from pydantic import ValidationError

from asyncshield.settings import (
    AsyncShieldSettings,
    clear_settings_cache,
    get_settings,
)

_ENV_KEYS = [
    "ASYNCSHIELD_LOG_LEVEL",
    "ASYNCSHIELD_ERROR_LOG_LEVEL",
    "ASYNCSHIELD_SUCCESS_LOG_LEVEL",
    "ASYNCSHIELD_LOG_SWALLOWED_ERRORS",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    """Clear settings cache and strip asyncshield env vars so tests are isolated."""
    clear_settings_cache()
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    clear_settings_cache()


class TestDefaults:
    def test_default_levels(self):
        settings = AsyncShieldSettings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.error_log_level == "ERROR"
        assert settings.success_log_level == "INFO"

    def test_swallowed_errors_logged_by_default(self):
        assert AsyncShieldSettings(_env_file=None).log_swallowed_errors is True


class TestEnvOverrides:
    def test_env_override(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("ASYNCSHIELD_SUCCESS_LOG_LEVEL", "debug")
        monkeypatch.setenv("ASYNCSHIELD_LOG_SWALLOWED_ERRORS", "false")
        settings = AsyncShieldSettings(_env_file=None)
        assert settings.success_log_level == "DEBUG"
        assert settings.log_swallowed_errors is False

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("ASYNCSHIELD_ERROR_LOG_LEVEL=CRITICAL\n")
        settings = AsyncShieldSettings(_env_file=str(env_file))
        assert settings.error_log_level == "CRITICAL"


class TestValidation:
    def test_invalid_level_rejected(self):
        with pytest.raises(ValidationError):
            AsyncShieldSettings(_env_file=None, error_log_level="LOUD")

    def test_level_for(self):
        settings = AsyncShieldSettings(_env_file=None, error_log_level="warning")
        assert settings.level_for("error") == logging.WARNING
        assert settings.level_for("success") == logging.INFO


class TestCache:
    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_clear_settings_cache(self):
        first = get_settings()
        clear_settings_cache()
        assert get_settings() is not first
