"""Twilio messaging service client."""

from __future__ import annotations

from typing import Any

from tether_sdk.clients.service_client import CoreServiceClient

SEND_FUNCTION_NAME = "send"


class TwilioServiceClient:
    """Sends messages through a Twilio service of the application."""

    def __init__(self, service: CoreServiceClient) -> None:
        """Initialize the Twilio client.

        Args:
            service: Core service client bound to the Twilio service
        """
        self._service = service

    async def send_message(
        self,
        to: str,
        from_: str,
        body: str,
        media_url: str | None = None,
    ) -> None:
        """Send an SMS or MMS message.

        Args:
            to: Destination phone number
            from_: Sending phone number
            body: Message text
            media_url: URL of media to attach, making it an MMS

        Raises:
            TetherError: Any error from the underlying function call
        """
        args: dict[str, Any] = {
            "to": to,
            "from": from_,
            "body": body,
        }

        if media_url is not None:
            args["mediaUrl"] = media_url

        await self._service.call_function(SEND_FUNCTION_NAME, [args])
