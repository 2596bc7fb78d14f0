"""Unit tests for settings."""

import pytest
from pydantic import ValidationError

from roleperm.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ROLEPERM_CACHE_TTL_SECONDS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.cache_ttl_seconds == 3600
    assert settings.cache_key_prefix == ""
    assert settings.environment == "development"


def test_env_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROLEPERM_CACHE_TTL_SECONDS", "120")
    monkeypatch.setenv("ROLEPERM_CACHE_KEY_PREFIX", "acl:")
    monkeypatch.setenv("ROLEPERM_LOG_LEVEL", "DEBUG")
    settings = Settings(_env_file=None)
    assert settings.cache_ttl_seconds == 120
    assert settings.cache_key_prefix == "acl:"
    assert settings.log_level == "DEBUG"


def test_ttl_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, cache_ttl_seconds=0)


def test_get_settings_cached() -> None:
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
