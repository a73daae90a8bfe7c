"""Custom exception classes for the hookfetch library."""

from typing import Any

import httpx

from .types import FetcherErrorInfo


class HookfetchError(Exception):
    """Base exception class for all hookfetch errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(HookfetchError):
    """Represents invalid input given while configuring a Fetcher."""


class FetcherError(HookfetchError):
    """Represents a response whose status indicates failure (non-2xx).

    Transport-level failures (DNS errors, refused connections, timeouts) are
    never turned into a FetcherError; they surface as the native ``httpx``
    exception instead.

    Attributes:
        message: The response reason phrase (e.g. "Not Found").
        status: The numeric HTTP status, ``0`` when no response exists.
        data: The parsed JSON body, or None if it could not be parsed.
        headers: The response headers.
        response: The raw httpx.Response, if any.
        request: The httpx.Request that produced the response, if any.
    """

    def __init__(
        self,
        message: str,
        status: int = 0,
        data: Any | None = None,
        headers: httpx.Headers | None = None,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the FetcherError.

        Args:
            message: The error message, usually the response status text.
            status: The HTTP status code.
            data: The parsed response body.
            headers: The response headers.
            response: Optional httpx.Response associated with the error.
            request: Optional httpx.Request associated with the error.
        """
        super().__init__(message)
        self.status = status
        self.data = data
        self.headers = headers
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.request is not None:
            return f"{self.message} (Status: {self.status}, URL: {self.request.url})"
        if self.status:
            return f"{self.message} (Status: {self.status})"
        return self.message


def parse_error(error: BaseException) -> FetcherErrorInfo | None:
    """Narrow an unknown caught error into the structured FetcherError shape.

    Args:
        error: Any caught exception.

    Returns:
        FetcherErrorInfo | None: A plain record of message, status, data and
            headers if ``error`` is a FetcherError, otherwise None. A None
            result means the caller has to inspect the raw exception itself.
    """
    if isinstance(error, FetcherError):
        return FetcherErrorInfo(
            message=error.message,
            status=error.status,
            data=error.data,
            headers=error.headers,
        )
    return None
