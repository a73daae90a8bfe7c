"""Asynchronous fetch client with a before/after hook pipeline.

This module provides the Fetcher class: a thin layer over httpx.AsyncClient
that prefixes a base URL, merges default and per-call headers, runs
user-supplied hooks around each request, parses JSON bodies and turns
non-2xx responses into FetcherError.

Each call is a single attempt. There is no retry, caching or cancellation;
transport exceptions from httpx propagate to the caller unchanged.
"""

import inspect
import ssl
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Self

import certifi
import httpx

from .config import FetcherSettings, get_settings
from .exceptions import FetcherError, parse_error
from .headers import HeaderTypes, base_headers, merge_options, reapply_headers
from .hooks import HookRegistry, as_hook_list
from .log_config import logger, redact_headers
from .types import AfterHook, BeforeHook, FetcherErrorInfo, FetcherResponse, PendingRequest


async def _call_hook(hook: Callable[..., Any], *args: Any) -> None:
    """Call a hook and await its result if it returned an awaitable."""
    result = hook(*args)
    if inspect.isawaitable(result):
        await result


class Fetcher:
    """Asynchronous HTTP client with configurable defaults and hooks.

    A request goes through these steps, strictly in order:

    1. build the URL (``base_url + path``, no slash normalization) and merge
       default headers, ``Content-Type: application/json`` and per-call headers
    2. run every before-hook on the pending request, then write the per-call
       headers back so they win over anything a hook set
    3. dispatch exactly once through the transport
    4. parse the body as JSON (``None`` if that fails)
    5. run every after-hook with the response and the parsed body
    6. return a FetcherResponse for 2xx, raise FetcherError otherwise

    Example:
    ```python
    async with Fetcher("https://api.example.com", headers={"x-team": "core"}) as fetcher:
        fetcher.add_before_hook(StaticTokenAuth("secret"))
        response = await fetcher.get("/items", params={"page": 2})
        print(response.data)
    ```

    Attributes:
        _settings: Settings supplying fallback base URL, headers and timeout.
        _base_url: Prefix prepended verbatim to every request path.
        _default_headers: Headers sent with every request.
        _default_options: Transport options applied to every request.
        _hooks: The registry of before- and after-hooks.
        _http_client: The underlying httpx.AsyncClient used for dispatch.
        _should_close_client: Flag indicating if this instance owns _http_client.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        headers: HeaderTypes = None,
        on_before: BeforeHook | Iterable[BeforeHook] | None = None,
        on_after: AfterHook | Iterable[AfterHook] | None = None,
        http_client: httpx.AsyncClient | None = None,
        settings: FetcherSettings | None = None,
        **default_options: Any,
    ):
        """Initialize the Fetcher.

        Args:
            base_url: Prefix for every request path. Falls back to
                ``settings.base_url``.
            headers: Default headers, layered over ``settings.default_headers``.
            on_before: A before-hook or an ordered sequence of them.
            on_after: An after-hook or an ordered sequence of them.
            http_client: Optional pre-configured httpx.AsyncClient. It is not
                closed by ``aclose``.
            settings: Optional settings; loaded from the environment if omitted.
            **default_options: Transport options passed through to httpx on
                every call (``params``, ``cookies``, ``timeout``, ``extensions``,
                ``follow_redirects``, ``auth``).
        """
        self._settings = settings or get_settings()
        self._base_url: str = self._settings.base_url if base_url is None else base_url

        self._default_headers = httpx.Headers(self._settings.default_headers)
        if headers:
            self._default_headers.update(headers)
        self._default_options: dict[str, Any] = dict(default_options)

        self._hooks = HookRegistry(as_hook_list(on_before), as_hook_list(on_after))

        self._should_close_client = http_client is None
        self._http_client = http_client or self._create_default_http_client()

        logger.debug(
            f"Fetcher initialized with base URL '{self._base_url}', "
            f"{len(self._hooks.before_hooks)} before-hooks and "
            f"{len(self._hooks.after_hooks)} after-hooks."
        )

    def _create_default_http_client(self) -> httpx.AsyncClient:
        """Create a default httpx.AsyncClient with configured settings.

        Returns:
            httpx.AsyncClient: HTTP client with SSL verification, the
                configured timeout and user agent header.
        """
        try:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            verify_ssl: ssl.SSLContext | bool = ssl_context
            logger.debug("Using certifi SSL context.")
        except Exception:
            verify_ssl = True
            logger.warning(
                "certifi not found or failed to load. Using default SSL verification."
            )

        return httpx.AsyncClient(
            timeout=self._settings.request_timeout,
            verify=verify_ssl,
            headers={"User-Agent": self._settings.user_agent},
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def before_hooks(self) -> tuple[BeforeHook, ...]:
        return self._hooks.before_hooks

    @property
    def after_hooks(self) -> tuple[AfterHook, ...]:
        return self._hooks.after_hooks

    # --- Hook registration ---

    def add_before_hook(self, hook: BeforeHook) -> Self:
        self._hooks.add_before_hook(hook)
        return self

    def add_after_hook(self, hook: AfterHook) -> Self:
        self._hooks.add_after_hook(hook)
        return self

    def remove_before_hook(self, hook: BeforeHook) -> Self:
        self._hooks.remove_before_hook(hook)
        return self

    def remove_after_hook(self, hook: AfterHook) -> Self:
        self._hooks.remove_after_hook(hook)
        return self

    def clear_hooks(self) -> Self:
        self._hooks.clear_hooks()
        return self

    # --- Request pipeline ---

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any | None:
        """Parse the response body as JSON, returning None if that fails."""
        try:
            return response.json()
        except ValueError as e:
            # Empty or non-JSON bodies are not an error; the caller gets data=None.
            logger.debug(
                f"Response body for {response.request.url} is not valid JSON ({e}). "
                "Parsed data will be None."
            )
            return None

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: HeaderTypes = None,
        params: Mapping[str, Any] | None = None,
        content: str | bytes | None = None,
        json: Any | None = None,
        data: Mapping[str, Any] | None = None,
        **options: Any,
    ) -> FetcherResponse:
        """Perform a single HTTP request through the hook pipeline.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, etc.).
            path: Request path, appended verbatim to the base URL.
            headers: Per-call headers. They override defaults and hooks.
            params: Query parameters, replacing any default ``params``.
            content: Raw request body.
            json: JSON-serializable request body.
            data: Form fields for the request body.
            **options: Other transport options, overriding the defaults.

        Returns:
            FetcherResponse: Parsed body, status and headers of a 2xx response.

        Raises:
            FetcherError: If the response status is not 2xx.
            httpx.HTTPError: Transport failures, re-raised unchanged.
        """
        url = self._base_url + path
        merged_options = merge_options(self._default_options, {"params": params, **options})
        pending = PendingRequest(
            method=method.upper(),
            url=url,
            headers=base_headers(self._default_headers, headers),
            params=merged_options.pop("params", None),
            content=content,
            json_data=json,
            data=data,
            options=merged_options,
        )

        # --- Before-Hooks ---
        before_hooks = self._hooks.before_hooks
        if before_hooks:
            logger.debug(
                f"Executing {len(before_hooks)} before-hooks for {pending.method} {url}"
            )
            for hook in before_hooks:
                await _call_hook(hook, url, pending)
        reapply_headers(pending.headers, headers)

        # --- Dispatch ---
        request = pending.build_request(self._http_client)
        logger.debug(f"Sending request: {request.method} {request.url}")
        logger.trace(f"Request Headers: {redact_headers(request.headers)}")
        try:
            response = await self._http_client.send(request, **pending.send_options())
        except httpx.HTTPError as e:
            logger.error(f"Transport error for {request.method} {request.url}: {e!r}")
            raise

        logger.debug(f"Received response: {response.status_code} for {request.url}")
        logger.trace(f"Response Headers: {redact_headers(response.headers)}")

        data_out = self._parse_body(response)

        # --- After-Hooks ---
        after_hooks = self._hooks.after_hooks
        if after_hooks:
            logger.debug(
                f"Executing {len(after_hooks)} after-hooks for {request.method} {request.url}"
            )
            for hook in after_hooks:
                await _call_hook(hook, response, data_out)

        if not response.is_success:
            logger.warning(
                f"Request {request.method} {request.url} failed with status "
                f"{response.status_code} {response.reason_phrase}"
            )
            raise FetcherError(
                response.reason_phrase,
                response.status_code,
                data_out,
                response.headers,
                response=response,
                request=request,
            )

        return FetcherResponse(
            data=data_out, status=response.status_code, headers=response.headers
        )

    async def get(self, path: str, **kwargs: Any) -> FetcherResponse:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> FetcherResponse:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> FetcherResponse:
        return await self.request("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> FetcherResponse:
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> FetcherResponse:
        return await self.request("DELETE", path, **kwargs)

    async def head(self, path: str, **kwargs: Any) -> FetcherResponse:
        return await self.request("HEAD", path, **kwargs)

    @staticmethod
    def parse_error(error: BaseException) -> FetcherErrorInfo | None:
        """Return the structured fields of a FetcherError, or None for any other error."""
        return parse_error(error)

    # --- Lifecycle ---

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this Fetcher created it."""
        if self._should_close_client and not self._http_client.is_closed:
            await self._http_client.aclose()
            logger.debug(f"Fetcher internal HTTP client closed. Client ID: {id(self)}.")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.aclose()
