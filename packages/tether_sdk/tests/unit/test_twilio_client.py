"""Unit tests for TwilioServiceClient."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from tether_sdk.clients.auth_request_client import AuthRequestClient
from tether_sdk.clients.service_client import CoreServiceClient
from tether_sdk.exceptions import RequestFailedError
from tether_sdk.routes import AppRoutes
from tether_sdk.services.twilio import SEND_FUNCTION_NAME, TwilioServiceClient


@pytest.mark.asyncio
class TestTwilioServiceClient:
    """Test cases for TwilioServiceClient.send_message."""

    async def test_send_message_without_media(self) -> None:
        """Test the argument document has exactly to, from and body."""
        service = MagicMock(spec=CoreServiceClient)
        service.call_function = AsyncMock(return_value=None)
        client = TwilioServiceClient(service)

        await client.send_message(to="+15551230000", from_="+15550001111", body="hello")

        service.call_function.assert_awaited_once_with(
            SEND_FUNCTION_NAME,
            [{"to": "+15551230000", "from": "+15550001111", "body": "hello"}],
        )
        args = service.call_function.call_args[0][1]
        assert "mediaUrl" not in args[0]

    async def test_send_message_with_media(self) -> None:
        """Test mediaUrl is present when media is supplied."""
        service = MagicMock(spec=CoreServiceClient)
        service.call_function = AsyncMock(return_value=None)
        client = TwilioServiceClient(service)

        await client.send_message(
            to="+15551230000",
            from_="+15550001111",
            body="look",
            media_url="https://example.com/cat.png",
        )

        args = service.call_function.call_args[0][1]
        assert args == [
            {
                "to": "+15551230000",
                "from": "+15550001111",
                "body": "look",
                "mediaUrl": "https://example.com/cat.png",
            }
        ]

    async def test_send_message_scoped_to_service(self) -> None:
        """Test the call document names the bound service and the send function."""
        routes = AppRoutes("test-app")
        request_client = AsyncMock(spec=AuthRequestClient)
        service = CoreServiceClient(request_client, routes.service_routes, "twilio1")

        await TwilioServiceClient(service).send_message(to="a", from_="b", body="c")

        request = request_client.do_authenticated_request_discarding_result.await_args[0][0]
        assert request.path == routes.service_routes.function_call_route
        assert request.document == {
            "name": "send",
            "service": "twilio1",
            "args": [{"to": "a", "from": "b", "body": "c"}],
        }
        assert request.timeout == service.default_timeout

    async def test_send_message_propagates_errors(self) -> None:
        """Test invoker errors reach the caller unchanged."""
        error = RequestFailedError(400, "invalid phone number")
        service = MagicMock(spec=CoreServiceClient)
        service.call_function = AsyncMock(side_effect=error)

        with pytest.raises(RequestFailedError) as exc_info:
            await TwilioServiceClient(service).send_message(to="x", from_="y", body="z")

        assert exc_info.value is error
