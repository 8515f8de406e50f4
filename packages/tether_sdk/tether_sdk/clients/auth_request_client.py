"""Authenticated request clients for the Tether SDK."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, TypeVar

import httpx

from tether_sdk.auth import AuthProvider
from tether_sdk.codec import DocumentCodec, JSONDocumentCodec
from tether_sdk.config import DEFAULT_REQUEST_TIMEOUT
from tether_sdk.enums import ServiceErrorCode
from tether_sdk.exceptions import (
    DecodeFailedError,
    RequestFailedError,
    RequestTimeoutError,
    TransportError,
)
from tether_sdk.logging import get_logger
from tether_sdk.models import AuthenticatedDocumentRequest, Response

logger = get_logger(__name__)

T = TypeVar("T")


class AuthRequestClient(ABC):
    """Performs requests under the current auth context.

    Implementations attach the current credentials, honor ``request.timeout``
    and retry once after re-authenticating when the server answers 401.
    """

    @abstractmethod
    async def do_authenticated_request(self, request: AuthenticatedDocumentRequest) -> Response:
        """Perform the request and return the raw final response.

        The status code of the final response is not checked.
        """

    @abstractmethod
    async def do_authenticated_json_request(self, request: AuthenticatedDocumentRequest) -> Any:
        """Perform the request and decode the body into plain values.

        Raises:
            RequestFailedError: If the final response is not 2xx
            DecodeFailedError: If the body cannot be decoded
        """

    @abstractmethod
    async def do_authenticated_request_discarding_result(
        self, request: AuthenticatedDocumentRequest
    ) -> None:
        """Perform the request, checking only that it succeeded.

        Raises:
            RequestFailedError: If the final response is not 2xx
        """

    @abstractmethod
    async def do_authenticated_request_decoded(
        self, request: AuthenticatedDocumentRequest, result_type: type[T]
    ) -> T:
        """Perform the request and decode the body into ``result_type``.

        Raises:
            RequestFailedError: If the final response is not 2xx
            DecodeFailedError: If the body does not fit ``result_type``
        """


class HttpAuthRequestClient(AuthRequestClient):
    """``AuthRequestClient`` over an ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str,
        auth: AuthProvider | None = None,
        codec: DocumentCodec | None = None,
        default_timeout: float = DEFAULT_REQUEST_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the request client.

        Args:
            base_url: Base URL of the application platform
            auth: Credential provider, None for anonymous requests
            codec: Document codec, JSON if not provided
            default_timeout: Timeout for requests that do not set one
            http_client: HTTP client to use; created and owned if not provided
        """
        self._auth = auth
        self._codec = codec or JSONDocumentCodec()
        self._default_timeout = default_timeout
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=base_url)

    @property
    def codec(self) -> DocumentCodec:
        """Codec used for request and response bodies."""
        return self._codec

    async def __aenter__(self) -> HttpAuthRequestClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http.aclose()

    async def do_authenticated_request(self, request: AuthenticatedDocumentRequest) -> Response:
        authorization = self._auth.authorization_header() if self._auth else None
        response = await self._send(request, authorization)

        if response.status_code == 401 and self._auth is not None and self._auth.can_refresh:
            logger.info(
                "Authentication rejected, refreshing credentials and retrying",
                extra={"path": request.path},
            )
            await self._auth.refresh(authorization)
            response = await self._send(request, self._auth.authorization_header())

        return response

    async def do_authenticated_json_request(self, request: AuthenticatedDocumentRequest) -> Any:
        response = await self._checked_request(request)
        return self._codec.decode(response.body, Any)  # type: ignore[arg-type]

    async def do_authenticated_request_discarding_result(
        self, request: AuthenticatedDocumentRequest
    ) -> None:
        await self._checked_request(request)

    async def do_authenticated_request_decoded(
        self, request: AuthenticatedDocumentRequest, result_type: type[T]
    ) -> T:
        response = await self._checked_request(request)
        try:
            return self._codec.decode(response.body, result_type)
        except DecodeFailedError as e:
            logger.warning(
                "Failed to decode response",
                extra={"path": request.path, "target": e.details.get("target")},
            )
            raise

    async def _checked_request(self, request: AuthenticatedDocumentRequest) -> Response:
        response = await self.do_authenticated_request(request)
        if not response.is_success:
            error = self._request_failure(response)
            logger.warning(
                "Request failed",
                extra={
                    "path": request.path,
                    "status_code": response.status_code,
                    "service_error_code": error.service_error_code.value,
                },
            )
            raise error
        return response

    async def _send(
        self, request: AuthenticatedDocumentRequest, authorization: str | None
    ) -> Response:
        headers = {
            "Accept": self._codec.content_type,
            **request.headers,
        }
        if authorization:
            headers["Authorization"] = authorization

        content: bytes | None = None
        if request.document is not None:
            content = self._codec.encode(request.document)
            headers["Content-Type"] = self._codec.content_type

        timeout = request.timeout if request.timeout is not None else self._default_timeout
        logger.debug(
            "Sending request",
            extra={"method": request.method.value, "path": request.path, "timeout": timeout},
        )

        try:
            # httpx applies the timeout per phase; the deadline covers the whole exchange.
            async with asyncio.timeout(timeout):
                http_response = await self._http.request(
                    request.method.value,
                    request.path,
                    content=content,
                    headers=headers,
                    timeout=timeout,
                )
        except (httpx.TimeoutException, TimeoutError) as e:
            logger.warning("Request timed out", extra={"path": request.path, "timeout": timeout})
            raise RequestTimeoutError(request.path, timeout) from e
        except httpx.TransportError as e:
            logger.error(
                "Request could not be sent", extra={"path": request.path, "error": str(e)}
            )
            raise TransportError(request.path, str(e)) from e

        return Response(
            status_code=http_response.status_code,
            headers=dict(http_response.headers),
            body=http_response.content or None,
        )

    def _request_failure(self, response: Response) -> RequestFailedError:
        """Build the error for a non-2xx response from its error payload."""
        message: str | None = None
        error_code: str | None = None
        if response.body:
            try:
                payload = self._codec.decode(response.body, Any)  # type: ignore[arg-type]
            except DecodeFailedError:
                payload = None
            if isinstance(payload, dict):
                message = payload.get("error")
                error_code = payload.get("error_code")
            else:
                message = response.body.decode("utf-8", errors="replace")

        return RequestFailedError(
            response.status_code,
            message,
            ServiceErrorCode.parse(error_code),
        )
