"""Core service client: the single entry point for remote function calls."""

from __future__ import annotations

import asyncio
import math
from collections.abc import Sequence
from typing import Any, TypeVar, overload

from tether_sdk.clients.auth_request_client import AuthRequestClient
from tether_sdk.config import DEFAULT_REQUEST_TIMEOUT
from tether_sdk.enums import HTTPMethod, ResultMode
from tether_sdk.exceptions import CallCancelledError, InvalidArgumentError
from tether_sdk.logging import get_logger
from tether_sdk.models import AuthenticatedDocumentRequest, build_function_call
from tether_sdk.routes import ServiceRoutes

logger = get_logger(__name__)

T = TypeVar("T")


class CoreServiceClient:
    """Invokes remote functions, optionally on behalf of one named service.

    Instances are immutable after construction and safe to share between
    concurrent callers. Named service clients hold a reference to one of
    these and route every call through ``call_function``.
    """

    def __init__(
        self,
        request_client: AuthRequestClient,
        routes: ServiceRoutes,
        service_name: str | None = None,
        default_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the service client.

        Args:
            request_client: Client performing authenticated requests
            routes: Paths of the application the functions belong to
            service_name: Service to scope calls to, None for app-level calls
            default_timeout: Timeout in seconds for calls that do not set one
        """
        self._request_client = request_client
        self._routes = routes
        self._service_name = service_name
        self._default_timeout = default_timeout

    @property
    def service_name(self) -> str | None:
        """Name of the service calls are scoped to."""
        return self._service_name

    @property
    def default_timeout(self) -> float:
        """Timeout applied when a call does not override it."""
        return self._default_timeout

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
        """Call a remote function.

        Args:
            name: Name of the function to call
            args: Ordered function arguments
            request_timeout: Timeout in seconds, overriding the client default
            result_type: Type to decode the result into. When None the result
                is discarded and only success or failure is reported.

        Returns:
            The decoded result, or None when ``result_type`` is None

        Raises:
            InvalidArgumentError: If the name is empty or the timeout is not a positive number
            RequestFailedError: If the server rejects the call
            DecodeFailedError: If the result does not fit ``result_type``
            RequestTimeoutError: If no response arrives in time
            CallCancelledError: If the request client aborts the call while in flight
            asyncio.CancelledError: If the awaiting task is cancelled
        """
        request = self._build_request(name, args, request_timeout)
        mode = ResultMode.DISCARD if result_type is None else ResultMode.DECODE

        logger.debug(
            "Calling function",
            extra={
                "function": name,
                "service": self._service_name,
                "result_mode": mode.value,
                "timeout": request.timeout,
            },
        )

        try:
            if mode is ResultMode.DISCARD:
                await self._request_client.do_authenticated_request_discarding_result(request)
                return None
            return await self._request_client.do_authenticated_request_decoded(
                request, result_type  # type: ignore[arg-type]
            )
        except asyncio.CancelledError as e:
            task = asyncio.current_task()
            # Cancellation of the awaiting task (including asyncio.timeout) passes through.
            if task is not None and task.cancelling():
                raise
            logger.info("Function call aborted by the request client", extra={"function": name})
            raise CallCancelledError(name) from e

    def _build_request(
        self, name: str, args: Sequence[Any], request_timeout: float | None
    ) -> AuthenticatedDocumentRequest:
        if request_timeout is not None and not (
            math.isfinite(request_timeout) and request_timeout > 0
        ):
            raise InvalidArgumentError(
                f"Request timeout must be a positive finite number, got {request_timeout}",
                argument="request_timeout",
            )

        document = build_function_call(name, args, self._service_name)
        return AuthenticatedDocumentRequest(
            method=HTTPMethod.POST,
            path=self._routes.function_call_route,
            document=document,
            timeout=request_timeout if request_timeout is not None else self._default_timeout,
        )
