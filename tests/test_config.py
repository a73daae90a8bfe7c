"""Tests for FetcherSettings."""

from hookfetch import __version__
from hookfetch.config import FetcherSettings, get_settings


def test_settings_defaults(monkeypatch):
    """Test the defaults when no environment variables are set."""
    for name in ("BASE_URL", "DEFAULT_HEADERS", "REQUEST_TIMEOUT", "USER_AGENT", "LOG_LEVEL"):
        monkeypatch.delenv(f"HOOKFETCH_{name}", raising=False)

    settings = FetcherSettings(_env_file=None)

    assert settings.base_url == ""
    assert settings.default_headers == {}
    assert settings.request_timeout == 30.0
    assert settings.user_agent == f"hookfetch/{__version__}"
    assert settings.log_level == "INFO"


def test_settings_from_environment(monkeypatch):
    """Test values are read from HOOKFETCH_-prefixed environment variables."""
    monkeypatch.setenv("HOOKFETCH_BASE_URL", "https://env.example")
    monkeypatch.setenv("HOOKFETCH_DEFAULT_HEADERS", '{"x-team": "core"}')
    monkeypatch.setenv("hookfetch_request_timeout", "12.5")

    settings = FetcherSettings(_env_file=None)

    assert settings.base_url == "https://env.example"
    assert settings.default_headers == {"x-team": "core"}
    assert settings.request_timeout == 12.5


def test_get_settings_is_cached():
    """Test get_settings returns the same instance on repeated calls."""
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
