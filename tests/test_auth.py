"""Tests for the header-injection auth hooks."""

import pytest
from pytest_httpx import HTTPXMock

from hookfetch.auth import StaticHeaderAuth, StaticTokenAuth
from hookfetch.client import Fetcher
from hookfetch.config import FetcherSettings
from hookfetch.exceptions import ConfigurationError
from hookfetch.types import PendingRequest


def test_static_token_auth_init_success():
    """Test StaticTokenAuth initializes successfully with a token."""
    auth = StaticTokenAuth(token="test_token")
    assert auth._token == "test_token"


def test_static_token_auth_init_no_token():
    """Test StaticTokenAuth raises ConfigurationError if no token is provided."""
    with pytest.raises(
        ConfigurationError, match="StaticTokenAuth requires a non-empty 'token'."
    ):
        StaticTokenAuth(token="")
    with pytest.raises(
        ConfigurationError, match="StaticTokenAuth requires a non-empty 'token'."
    ):
        StaticTokenAuth(token=None)


def test_static_token_auth_sets_authorization_header():
    """Test StaticTokenAuth adds the Authorization header to the draft."""
    request = PendingRequest(method="GET", url="http://example.com")
    StaticTokenAuth(token="test_token")("http://example.com", request)
    assert request.headers["Authorization"] == "Bearer test_token"


def test_static_header_auth_sets_header():
    """Test StaticHeaderAuth adds its header to the draft."""
    request = PendingRequest(method="GET", url="http://example.com")
    StaticHeaderAuth("X-API-Key", "k-123")("http://example.com", request)
    assert request.headers["x-api-key"] == "k-123"


def test_static_header_auth_requires_name_and_value():
    """Test StaticHeaderAuth rejects an empty header name or value."""
    with pytest.raises(ConfigurationError):
        StaticHeaderAuth("", "value")
    with pytest.raises(ConfigurationError):
        StaticHeaderAuth("X-API-Key", None)


@pytest.mark.asyncio
async def test_token_auth_as_before_hook(httpx_mock: HTTPXMock):
    """Test the token hook is applied, and a per-call header still wins."""
    httpx_mock.add_response(json={}, is_reusable=True)
    fetcher = Fetcher(
        "https://api.example.com",
        on_before=StaticTokenAuth("secret"),
        settings=FetcherSettings(),
    )

    await fetcher.get("/me")
    await fetcher.get("/me", headers={"Authorization": "Bearer one-off"})

    first, second = httpx_mock.get_requests()
    assert first.headers["Authorization"] == "Bearer secret"
    assert second.headers["Authorization"] == "Bearer one-off"
