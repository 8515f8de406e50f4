"""Unit tests for AppClient."""

from __future__ import annotations

from unittest.mock import AsyncMock

import httpx
import pytest
from tether_sdk.auth import BearerTokenAuthProvider
from tether_sdk.clients.app_client import AppClient
from tether_sdk.clients.auth_request_client import AuthRequestClient, HttpAuthRequestClient
from tether_sdk.clients.service_client import CoreServiceClient
from tether_sdk.codec import MsgpackDocumentCodec
from tether_sdk.config import ClientConfig, CodecName, TimeoutConfig
from tether_sdk.services import TwilioServiceClient


@pytest.mark.asyncio
class TestAppClientCallFunction:
    """Test app-level function calls."""

    async def test_call_function_is_unscoped(self) -> None:
        """Test app-level calls carry no service key."""
        request_client = AsyncMock(spec=AuthRequestClient)
        request_client.do_authenticated_request_decoded.return_value = 3
        client = AppClient("test-app", request_client)

        result = await client.call_function("sum", [1, 2], result_type=int)

        assert result == 3
        request = request_client.do_authenticated_request_decoded.await_args[0][0]
        assert request.document == {"name": "sum", "args": [1, 2]}
        assert request.path == "/api/client/v2.0/app/test-app/functions/call"

    async def test_call_function_discarding_result(self) -> None:
        """Test calls without a result type report success only."""
        request_client = AsyncMock(spec=AuthRequestClient)
        client = AppClient("test-app", request_client, default_timeout=20.0)

        assert await client.call_function("ping") is None

        request = request_client.do_authenticated_request_discarding_result.await_args[0][0]
        assert request.timeout == 20.0
        request_client.do_authenticated_request_decoded.assert_not_awaited()

    async def test_end_to_end_over_http(self) -> None:
        """Test a call through the HTTP request client."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/client/v2.0/app/test-app/functions/call"
            return httpx.Response(200, json={"echo": "hi"})

        http_client = httpx.AsyncClient(
            base_url="https://platform.test", transport=httpx.MockTransport(handler)
        )
        request_client = HttpAuthRequestClient(
            "https://platform.test", BearerTokenAuthProvider("token"), http_client=http_client
        )

        async with AppClient("test-app", request_client) as client:
            result = await client.call_function("echo", ["hi"], result_type=dict[str, str])

        assert result == {"echo": "hi"}
        await http_client.aclose()


class TestAppClientServiceClient:
    """Test named service client construction."""

    def test_service_client_bound_to_name(self) -> None:
        """Test the factory receives an invoker bound to the service name."""
        client = AppClient("test-app", AsyncMock(spec=AuthRequestClient), default_timeout=9.0)
        received: list[CoreServiceClient] = []

        def factory(service: CoreServiceClient) -> str:
            received.append(service)
            return "built"

        assert client.service_client(factory, "twilio1") == "built"
        assert received[0].service_name == "twilio1"
        assert received[0].default_timeout == 9.0

    def test_service_client_with_class_factory(self) -> None:
        """Test service client classes work as factories."""
        client = AppClient("test-app", AsyncMock(spec=AuthRequestClient))

        twilio = client.service_client(TwilioServiceClient, "twilio1")

        assert isinstance(twilio, TwilioServiceClient)

    def test_routes(self) -> None:
        """Test routes derive from the app id."""
        client = AppClient("test-app", AsyncMock(spec=AuthRequestClient))

        assert client.routes.client_app_id == "test-app"


class TestAppClientFromConfig:
    """Test building clients from configuration."""

    def test_from_config(self) -> None:
        """Test configuration values reach the request client."""
        config = ClientConfig(
            base_url="https://platform.test",
            app_id="cfg-app",
            codec=CodecName.MSGPACK,
            timeouts=TimeoutConfig(default_request_timeout=25.0),
        )

        client = AppClient.from_config(config)

        assert client.routes.client_app_id == "cfg-app"
        request_client = client._request_client
        assert isinstance(request_client, HttpAuthRequestClient)
        assert isinstance(request_client.codec, MsgpackDocumentCodec)
        assert client._functions.default_timeout == 25.0
