"""Request descriptor and response models shared by the request clients."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tether_sdk.enums import HTTPMethod


class AuthenticatedDocumentRequest(BaseModel):
    """A request to be sent under the current auth context.

    Attributes:
        method: HTTP method
        path: Request path relative to the client's base URL
        document: Body value, encoded by the client's document codec
        timeout: Timeout in seconds, None for the client default
        headers: Extra request headers
    """

    model_config = {"frozen": True}

    method: HTTPMethod = Field(default=HTTPMethod.POST, description="HTTP method")
    path: str = Field(..., min_length=1, description="Request path")
    document: Any = Field(default=None, description="Request body value")
    timeout: float | None = Field(default=None, gt=0, description="Request timeout in seconds")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra request headers")


class Response(BaseModel):
    """A raw response as returned by the transport."""

    status_code: int = Field(..., description="HTTP status code")
    headers: dict[str, str] = Field(default_factory=dict, description="Response headers")
    body: bytes | None = Field(default=None, description="Raw response body")

    @property
    def is_success(self) -> bool:
        """Whether the status code is in the 2xx range."""
        return 200 <= self.status_code < 300
