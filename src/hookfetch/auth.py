"""Header-injection authentication, packaged as before-hooks.

Each strategy is a callable matching the BeforeHook signature, so it can be
passed to ``Fetcher(on_before=...)`` or ``Fetcher.add_before_hook``. Headers
given explicitly to a verb method still override what these hooks set.
"""

from .exceptions import ConfigurationError
from .log_config import logger
from .types import PendingRequest


class StaticTokenAuth:
    """Adds a static Bearer token to every request.

    Suitable for APIs that use a pre-issued, long-lived token (e.g. a
    personal access token).

    Attributes:
        _token: The static API token.
    """

    def __init__(self, token: str | None):
        """Initializes StaticTokenAuth with the provided API token.

        Args:
            token: The static API token to use for authentication.

        Raises:
            ConfigurationError: If the token is None or empty.
        """
        if not token:
            raise ConfigurationError("StaticTokenAuth requires a non-empty 'token'.")
        self._token: str = token
        logger.debug("StaticTokenAuth initialized.")

    def __call__(self, url: str, request: PendingRequest) -> None:
        logger.trace(f"Adding Bearer token for {url}")
        request.headers["Authorization"] = f"Bearer {self._token}"


class StaticHeaderAuth:
    """Adds a fixed API key header (e.g. ``X-API-Key``) to every request."""

    def __init__(self, header_name: str, value: str | None):
        if not header_name or not value:
            raise ConfigurationError(
                "StaticHeaderAuth requires a non-empty 'header_name' and 'value'."
            )
        self._header_name = header_name
        self._value: str = value

    def __call__(self, url: str, request: PendingRequest) -> None:
        logger.trace(f"Adding {self._header_name} header for {url}")
        request.headers[self._header_name] = self._value
