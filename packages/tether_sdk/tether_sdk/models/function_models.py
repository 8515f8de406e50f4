"""Function call models for the Tether SDK."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from tether_sdk.exceptions import InvalidArgumentError


class FunctionCallRequest(BaseModel):
    """A named remote function invocation.

    Attributes:
        name: Name of the function to call
        service_name: Service the call is scoped to, if any
        args: Ordered function arguments
    """

    model_config = {"frozen": True}

    name: str = Field(..., min_length=1, description="Function name")
    service_name: str | None = Field(default=None, description="Owning service name")
    args: list[Any] = Field(default_factory=list, description="Ordered arguments")

    def to_document(self) -> dict[str, Any]:
        """Return the call body. ``service`` is left out for unscoped calls."""
        document: dict[str, Any] = {"name": self.name, "args": list(self.args)}
        if self.service_name is not None:
            document["service"] = self.service_name
        return document


def build_function_call(
    name: str, args: Sequence[Any] = (), service_name: str | None = None
) -> dict[str, Any]:
    """Build the document for a function call.

    Args:
        name: Name of the function to call
        args: Ordered function arguments
        service_name: Service to scope the call to

    Returns:
        The call document

    Raises:
        InvalidArgumentError: If the function name is empty
    """
    try:
        request = FunctionCallRequest(name=name, service_name=service_name, args=list(args))
    except ValidationError as e:
        error = e.errors()[0]
        raise InvalidArgumentError(
            f"Invalid function call '{name}': {error['msg']}", argument=str(error["loc"][0])
        ) from e
    return request.to_document()
