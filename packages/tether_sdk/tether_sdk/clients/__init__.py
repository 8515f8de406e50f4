"""Client implementations for the Tether SDK."""

from __future__ import annotations

from .app_client import AppClient
from .auth_request_client import AuthRequestClient, HttpAuthRequestClient
from .service_client import CoreServiceClient

__all__ = ["AppClient", "AuthRequestClient", "CoreServiceClient", "HttpAuthRequestClient"]
