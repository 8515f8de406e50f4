"""Credential providers consumed by the authenticated request client."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from tether_sdk.logging import get_logger

logger = get_logger(__name__)


class AuthProvider(ABC):
    """Source of the credentials attached to every authenticated request."""

    @abstractmethod
    def authorization_header(self) -> str | None:
        """Return the current ``Authorization`` header value, or None when logged out."""

    @property
    @abstractmethod
    def can_refresh(self) -> bool:
        """Whether ``refresh`` can obtain new credentials."""

    @abstractmethod
    async def refresh(self, rejected_authorization: str | None) -> None:
        """Renew the credentials after the server rejected them.

        Args:
            rejected_authorization: The header value the server rejected. Providers
                should skip the refresh when their credentials already changed.
        """


class BearerTokenAuthProvider(AuthProvider):
    """Bearer access token, optionally renewed through an async callable."""

    def __init__(
        self,
        access_token: str | None,
        refresher: Callable[[], Awaitable[str]] | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            access_token: Current access token
            refresher: Coroutine function returning a fresh access token
        """
        self._access_token = access_token
        self._refresher = refresher
        self._lock = asyncio.Lock()

    def authorization_header(self) -> str | None:
        if not self._access_token:
            return None
        return f"Bearer {self._access_token}"

    @property
    def can_refresh(self) -> bool:
        return self._refresher is not None

    async def refresh(self, rejected_authorization: str | None) -> None:
        if self._refresher is None:
            return

        async with self._lock:
            # Another caller already refreshed while this one waited.
            if self.authorization_header() != rejected_authorization:
                return
            self._access_token = await self._refresher()
            logger.info("Access token refreshed")
