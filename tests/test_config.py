"""Configuration Tests."""

import pytest
from pydantic import ValidationError

from zeal_config.settings import Settings


def test_settings_load_defaults(monkeypatch):
    """Test settings load with defaults."""
    monkeypatch.delenv("ZEAL_API_BASE_URL", raising=False)
    monkeypatch.delenv("API_PORT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.API_PORT == 8000
    assert settings.ZEAL_API_BASE_URL == "https://api.zeal.com"
    assert settings.TOOL_LOAD_TIMEOUT_SECONDS > 0


def test_api_key_prefers_primary_variable(monkeypatch):
    monkeypatch.setenv("ZEAL_API_KEY", "primary")
    monkeypatch.setenv("ZEAL_PUBLIC_API_API_KEY", "legacy")
    settings = Settings(_env_file=None)
    assert settings.api_key == "primary"
    assert settings.uses_legacy_api_key is False


def test_api_key_falls_back_to_legacy_variable(monkeypatch):
    monkeypatch.delenv("ZEAL_API_KEY", raising=False)
    monkeypatch.setenv("ZEAL_PUBLIC_API_API_KEY", "legacy")
    settings = Settings(_env_file=None)
    assert settings.api_key == "legacy"
    assert settings.uses_legacy_api_key is True


def test_api_key_empty_when_unset(monkeypatch):
    monkeypatch.delenv("ZEAL_API_KEY", raising=False)
    monkeypatch.delenv("ZEAL_PUBLIC_API_API_KEY", raising=False)
    settings = Settings(_env_file=None)
    assert settings.api_key == ""
    assert settings.uses_legacy_api_key is False


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, LOG_LEVEL="LOUD")
