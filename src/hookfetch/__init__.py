"""hookfetch: a thin asynchronous fetch client with request hooks.

This package wraps ``httpx.AsyncClient`` with a base URL, default headers, an
ordered before/after hook pipeline, uniform JSON parsing and a structured
FetcherError for non-2xx responses.
"""

__version__ = "0.1.0"

from .auth import StaticHeaderAuth, StaticTokenAuth
from .client import Fetcher
from .config import FetcherSettings, get_settings
from .exceptions import ConfigurationError, FetcherError, HookfetchError, parse_error
from .hooks import HookRegistry
from .log_config import configure_logging, redact_headers
from .types import AfterHook, BeforeHook, FetcherErrorInfo, FetcherResponse, PendingRequest

__all__ = [
    "__version__",
    "AfterHook",
    "BeforeHook",
    "ConfigurationError",
    "Fetcher",
    "FetcherError",
    "FetcherErrorInfo",
    "FetcherResponse",
    "FetcherSettings",
    "HookRegistry",
    "HookfetchError",
    "PendingRequest",
    "StaticHeaderAuth",
    "StaticTokenAuth",
    "configure_logging",
    "get_settings",
    "parse_error",
    "redact_headers",
]
