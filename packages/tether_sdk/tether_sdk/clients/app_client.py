"""App client: entry point for calling functions and building service clients."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar, overload

from tether_sdk.auth import AuthProvider
from tether_sdk.clients.auth_request_client import AuthRequestClient, HttpAuthRequestClient
from tether_sdk.clients.service_client import CoreServiceClient
from tether_sdk.codec import get_codec
from tether_sdk.config import DEFAULT_REQUEST_TIMEOUT, ClientConfig
from tether_sdk.routes import AppRoutes

T = TypeVar("T")
S = TypeVar("S")


class AppClient:
    """Client for one application on the platform.

    Example:
        async with AppClient.from_config(config, BearerTokenAuthProvider(token)) as app:
            total = await app.call_function("sum", [1, 2], result_type=int)
            twilio = app.service_client(TwilioServiceClient, "twilio1")
            await twilio.send_message(to="+15551234", from_="+15554321", body="hi")
    """

    def __init__(
        self,
        client_app_id: str,
        request_client: AuthRequestClient,
        default_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the app client.

        Args:
            client_app_id: Client application identifier
            request_client: Client performing authenticated requests
            default_timeout: Timeout in seconds for calls that do not set one
        """
        self._routes = AppRoutes(client_app_id)
        self._request_client = request_client
        self._default_timeout = default_timeout
        self._functions = CoreServiceClient(
            request_client, self._routes.service_routes, default_timeout=default_timeout
        )

    @classmethod
    def from_config(cls, config: ClientConfig, auth: AuthProvider | None = None) -> AppClient:
        """Build a client wired to HTTP from configuration."""
        request_client = HttpAuthRequestClient(
            base_url=config.base_url,
            auth=auth,
            codec=get_codec(config.codec),
            default_timeout=config.timeouts.default_request_timeout,
        )
        return cls(
            config.app_id,
            request_client,
            default_timeout=config.timeouts.default_request_timeout,
        )

    @property
    def routes(self) -> AppRoutes:
        """Paths of this application."""
        return self._routes

    async def __aenter__(self) -> AppClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the HTTP resources held by the request client."""
        if isinstance(self._request_client, HttpAuthRequestClient):
            await self._request_client.aclose()

    def service_client(
        self, factory: Callable[[CoreServiceClient], S], service_name: str | None = None
    ) -> S:
        """Build a named service client.

        Args:
            factory: Callable taking the bound core service client, usually a
                service client class such as ``TwilioServiceClient``
            service_name: Name of the service as defined in the application

        Returns:
            Whatever ``factory`` returns
        """
        service = CoreServiceClient(
            self._request_client,
            self._routes.service_routes,
            service_name=service_name,
            default_timeout=self._default_timeout,
        )
        return factory(service)

    @overload
    async def call_function(
        self,
        name: str,
        args: Sequence[Any] = ...,
        *,
        request_timeout: float | None = ...,
        result_type: None = ...,
    ) -> None: ...

    @overload
    async def call_function(
        self,
        name: str,
        args: Sequence[Any] = ...,
        *,
        request_timeout: float | None = ...,
        result_type: type[T],
    ) -> T: ...

    async def call_function(
        self,
        name: str,
        args: Sequence[Any] = (),
        *,
        request_timeout: float | None = None,
        result_type: type[T] | None = None,
    ) -> T | None:
        """Call an app-level function. See ``CoreServiceClient.call_function``."""
        return await self._functions.call_function(
            name, args, request_timeout=request_timeout, result_type=result_type
        )
