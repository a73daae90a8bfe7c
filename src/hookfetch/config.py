# hookfetch/config.py
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__


class FetcherSettings(BaseSettings):
    """
    Manages user-configurable defaults for a Fetcher, loaded from
    environment variables (prefixed with 'HOOKFETCH_') or a .env file.

    Explicit constructor arguments given to ``Fetcher`` take precedence over
    these values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HOOKFETCH_",
        extra="ignore",
        case_sensitive=False,
    )

    base_url: str = Field(
        default="", description="Prefix prepended verbatim to every request path"
    )
    default_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers sent with every request unless overridden",
    )
    request_timeout: float | None = Field(
        default=30.0,
        description="Timeout in seconds handed to the transport (None disables it)",
    )
    user_agent: str = Field(
        default=f"hookfetch/{__version__}",
        description="User-Agent header set on the default transport",
    )
    log_level: str = Field(
        default="INFO",
        description="Default level used by configure_logging",
    )


@lru_cache
def get_settings() -> FetcherSettings:
    """
    Provides access to the hookfetch settings.

    Settings are loaded from environment variables or a .env file. The
    instance is cached for performance.

    Returns:
        FetcherSettings: The settings instance.
    """
    return FetcherSettings()
