"""Configuration package for the Tether SDK."""

from .config import (
    DEFAULT_REQUEST_TIMEOUT,
    ClientConfig,
    CodecName,
    TimeoutConfig,
    get_config,
    reload_config,
)

__all__ = [
    "DEFAULT_REQUEST_TIMEOUT",
    "ClientConfig",
    "CodecName",
    "TimeoutConfig",
    "get_config",
    "reload_config",
]
