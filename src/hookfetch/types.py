# hookfetch/types.py
"""Core type definitions and data structures for hookfetch.

This module defines the per-call request draft handed to before-hooks, the
success envelope returned by the verb methods, and type aliases for hooks.
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypedDict

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

SEND_OPTIONS: frozenset[str] = frozenset(["auth", "follow_redirects"])
"""Transport options consumed by ``httpx.AsyncClient.send`` rather than
``build_request``."""


class PendingRequest(BaseModel):
    """Encapsulates a single outgoing request while it is being prepared.

    Before-hooks receive the instance one at a time and may change any field
    in place. Header keys are case-insensitive.
    """

    method: str
    url: str
    headers: httpx.Headers = Field(default_factory=httpx.Headers)
    params: Mapping[str, Any] | None = None
    content: str | bytes | None = None
    json_data: Any | None = None
    data: Mapping[str, Any] | None = None
    options: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    @field_validator("headers", mode="before")
    @classmethod
    def _coerce_headers(cls, value: Any) -> httpx.Headers:
        if isinstance(value, httpx.Headers):
            return value
        return httpx.Headers(value)

    def build_request(self, client: httpx.AsyncClient) -> httpx.Request:
        """Builds an httpx.Request through ``client`` from the stored data."""
        build_options = {
            key: value for key, value in self.options.items() if key not in SEND_OPTIONS
        }
        return client.build_request(
            method=self.method,
            url=self.url,
            params=self.params,
            content=self.content,
            json=self.json_data,
            data=self.data,
            headers=self.headers,
            **build_options,
        )

    def send_options(self) -> dict[str, Any]:
        """Returns the options meant for ``httpx.AsyncClient.send``."""
        return {key: value for key, value in self.options.items() if key in SEND_OPTIONS}


class FetcherResponse(BaseModel):
    """The success envelope returned for a 2xx response."""

    data: Any = None
    status: int
    headers: httpx.Headers

    model_config = ConfigDict(arbitrary_types_allowed=True)


class FetcherErrorInfo(TypedDict):
    """Plain record describing a FetcherError, as returned by ``parse_error``."""

    message: str
    status: int
    data: Any
    headers: httpx.Headers | None


BeforeHook = Callable[[str, PendingRequest], Awaitable[None] | None]
"""Type alias for a before-request hook.

Before-hooks are called sequentially, in registration order, before the
request is dispatched. Coroutine functions are awaited.

Args:
    url (str): The resolved target URL (base URL + path).
    request (PendingRequest): The mutable request draft. Hooks can modify
        its headers, params, body and options in place.
Return:
    None: Hooks are expected to modify the draft in place.
"""

AfterHook = Callable[[httpx.Response, Any], Awaitable[None] | None]
"""Type alias for an after-response hook.

After-hooks are called sequentially, in registration order, once the body has
been parsed and before the response is classified. They also run for non-2xx
responses.

Args:
    response (httpx.Response): The raw response.
    data (Any): The parsed JSON body, or None if it could not be parsed.
Return:
    None: Hooks are expected to perform side effects only.
"""
