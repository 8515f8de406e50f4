"""Exceptions raised by the Tether SDK.

Every failure a caller can observe from a function call is one of the
subclasses of ``TetherError`` defined here. Local input problems are
reported before any network activity; everything else comes back from the
request client unchanged.
"""

from __future__ import annotations

from typing import Any

from tether_sdk.enums import ServiceErrorCode


class TetherError(Exception):
    """Base exception for all Tether SDK errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code for programmatic handling
            details: Additional error context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class InvalidArgumentError(TetherError):
    """Raised when local input is malformed. Never reaches the network."""

    def __init__(self, message: str, argument: str | None = None, **kwargs: Any) -> None:
        """
        Initialize invalid argument error.

        Args:
            message: Validation error message
            argument: Name of the offending argument
            **kwargs: Additional error details
        """
        details = kwargs.pop("details", {})
        if argument:
            details["argument"] = argument
        super().__init__(message, error_code="INVALID_ARGUMENT", details=details)


class RequestFailedError(TetherError):
    """Raised when the server rejects a request after any auth retry."""

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        service_error_code: ServiceErrorCode = ServiceErrorCode.UNKNOWN,
        **kwargs: Any,
    ) -> None:
        """
        Initialize request failed error.

        Args:
            status_code: HTTP status code of the final response
            message: Server-provided error message, if any
            service_error_code: Platform error code parsed from the response
            **kwargs: Additional error details
        """
        self.status_code = status_code
        self.service_error_code = service_error_code
        text = f"Request failed with status {status_code}"
        if message:
            text += f": {message}"
        details = {
            "status_code": status_code,
            "service_error_code": service_error_code.value,
            "server_message": message,
            **kwargs.pop("details", {}),
        }
        super().__init__(text, error_code="REQUEST_FAILED", details=details)


class DecodeFailedError(TetherError):
    """Raised when a response body cannot be decoded into the requested type."""

    def __init__(self, target: str, reason: str | None = None, **kwargs: Any) -> None:
        """
        Initialize decode failed error.

        Args:
            target: Name of the type decoding was attempted into
            reason: Underlying decoder message
            **kwargs: Additional error details
        """
        message = f"Failed to decode response as {target}"
        if reason:
            message += f": {reason}"
        details = {"target": target, "reason": reason, **kwargs.pop("details", {})}
        super().__init__(message, error_code="DECODE_FAILED", details=details)


class RequestTimeoutError(TetherError):
    """Raised when no response arrives within the effective timeout."""

    def __init__(self, path: str, timeout_seconds: float | None, **kwargs: Any) -> None:
        """
        Initialize timeout error.

        Args:
            path: Request path that timed out
            timeout_seconds: Effective timeout in seconds
            **kwargs: Additional error details
        """
        message = f"Request to '{path}' timed out after {timeout_seconds} seconds"
        details = {
            "path": path,
            "timeout_seconds": timeout_seconds,
            **kwargs.pop("details", {}),
        }
        super().__init__(message, error_code="TIMEOUT", details=details)


class TransportError(TetherError):
    """Raised when a request got no response for a reason other than timeout."""

    def __init__(self, path: str, reason: str | None = None, **kwargs: Any) -> None:
        """
        Initialize transport error.

        Args:
            path: Request path
            reason: Failure reason reported by the transport
            **kwargs: Additional error details
        """
        message = f"Failed to send request to '{path}'"
        if reason:
            message += f": {reason}"
        details = {"path": path, "reason": reason, **kwargs.pop("details", {})}
        super().__init__(message, error_code="TRANSPORT_ERROR", details=details)


class CallCancelledError(TetherError):
    """Raised when the request client aborts an in-flight call.

    Cancelling the task that awaits a call raises the plain
    ``asyncio.CancelledError`` instead, so ``asyncio.timeout`` and task
    groups keep working.
    """

    def __init__(self, function_name: str, **kwargs: Any) -> None:
        """
        Initialize cancelled error.

        Args:
            function_name: Name of the function whose call was cancelled
            **kwargs: Additional error details
        """
        message = f"Call to function '{function_name}' was cancelled"
        details = {"function_name": function_name, **kwargs.pop("details", {})}
        super().__init__(message, error_code="CANCELLED", details=details)
