"""Tether SDK: authenticated remote function calls for application clients."""

from __future__ import annotations

import logging as _stdlib_logging

from .auth import AuthProvider, BearerTokenAuthProvider
from .clients import AppClient, AuthRequestClient, CoreServiceClient, HttpAuthRequestClient
from .config import ClientConfig, get_config
from .exceptions import (
    CallCancelledError,
    DecodeFailedError,
    InvalidArgumentError,
    RequestFailedError,
    RequestTimeoutError,
    TetherError,
    TransportError,
)
from .services import TwilioServiceClient

__version__ = "0.1.0"

_stdlib_logging.getLogger(__name__).addHandler(_stdlib_logging.NullHandler())

__all__ = [
    "AppClient",
    "AuthProvider",
    "AuthRequestClient",
    "BearerTokenAuthProvider",
    "CallCancelledError",
    "ClientConfig",
    "CoreServiceClient",
    "DecodeFailedError",
    "HttpAuthRequestClient",
    "InvalidArgumentError",
    "RequestFailedError",
    "RequestTimeoutError",
    "TetherError",
    "TransportError",
    "TwilioServiceClient",
    "get_config",
]
