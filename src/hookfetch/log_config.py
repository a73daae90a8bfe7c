# hookfetch/log_config.py
"""Logging setup for hookfetch using Loguru.

The request pipeline logs through the shared Loguru ``logger``. Call
``configure_logging`` to install a single formatted handler; without an
explicit level it uses ``FetcherSettings.log_level`` (``HOOKFETCH_LOG_LEVEL``).
Header values that carry credentials are masked by ``redact_headers`` before
they reach a trace record.
"""

import sys
from collections.abc import Iterable, Mapping

from loguru import logger

from .config import get_settings

REDACTED = "[REDACTED]"

SENSITIVE_HEADERS: frozenset[str] = frozenset(
    ["authorization", "proxy-authorization", "cookie", "set-cookie", "x-api-key"]
)


def redact_headers(
    headers: Mapping[str, str], extra: Iterable[str] = ()
) -> dict[str, str]:
    """Return a copy of ``headers`` with credential-bearing values masked.

    Args:
        headers: Request or response headers (any mapping, e.g. httpx.Headers).
        extra: Additional header names to mask, matched case-insensitively.
    """
    hidden = SENSITIVE_HEADERS | {name.lower() for name in extra}
    return {
        key: REDACTED if key.lower() in hidden else value
        for key, value in headers.items()
    }


def configure_logging(level: str | None = None, sink=sys.stderr):
    """
    Configures Loguru logger for hookfetch.

    Removes existing handlers and adds one with the given level and sink.

    Args:
        level: Minimum level name in any case (e.g., "debug", "TRACE").
            Defaults to the ``log_level`` setting.
        sink: The output sink (e.g., sys.stderr, "file.log", a stream).
    """
    level = (level or get_settings().log_level).upper()
    logger.remove()
    logger.add(
        sink,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        colorize=sink is sys.stderr,
    )
    logger.debug(f"hookfetch logging configured with level={level}")
