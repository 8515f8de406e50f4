"""Configuration for Tether app clients.

Values come from, in order of precedence: explicit keyword arguments,
environment variables prefixed ``TETHER_`` (nested fields use ``__``, e.g.
``TETHER_TIMEOUTS__DEFAULT_REQUEST_TIMEOUT``), a ``.env`` file, and the
defaults below.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tether_sdk.logging import LoggingConfig

DEFAULT_REQUEST_TIMEOUT = 15.0


class CodecName(str, Enum):
    """Document codecs selectable by configuration."""

    JSON = "json"
    MSGPACK = "msgpack"


class TimeoutConfig(BaseModel):
    """Timeout-related configuration."""

    default_request_timeout: float = Field(
        default=DEFAULT_REQUEST_TIMEOUT,
        gt=0,
        le=600,
        description="Timeout in seconds applied to calls that do not override it",
    )


class ClientConfig(BaseSettings):
    """Main app client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TETHER_",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default="http://localhost:8080", description="Base URL of the application platform"
    )
    app_id: str = Field(default="", description="Client application identifier")
    codec: CodecName = Field(default=CodecName.JSON, description="Wire document codec")

    timeouts: TimeoutConfig = Field(default_factory=TimeoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_config() -> ClientConfig:
    """Get the singleton configuration instance.

    Returns:
        ClientConfig: The configuration instance
    """
    return ClientConfig()


def reload_config() -> ClientConfig:
    """Reload configuration from environment.

    Returns:
        ClientConfig: The new configuration instance
    """
    get_config.cache_clear()
    return get_config()
