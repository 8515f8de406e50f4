"""Enums shared across the Tether SDK."""

from __future__ import annotations

from enum import Enum


class HTTPMethod(str, Enum):
    """HTTP methods used by the request clients."""

    POST = "POST"


class ResultMode(Enum):
    """How a function call result is handled once the response arrives."""

    DISCARD = "discard"
    DECODE = "decode"


class ServiceErrorCode(str, Enum):
    """Error codes reported by the platform in failed responses."""

    MISSING_AUTH_REQ = "MissingAuthReq"
    INVALID_SESSION = "InvalidSession"
    USER_APP_DOMAIN_MISMATCH = "UserAppDomainMismatch"
    DOMAIN_NOT_ALLOWED = "DomainNotAllowed"
    READ_SIZE_LIMIT_EXCEEDED = "ReadSizeLimitExceeded"
    INVALID_PARAMETER = "InvalidParameter"
    MISSING_PARAMETER = "MissingParameter"
    TWILIO_ERROR = "TwilioError"
    HTTP_ERROR = "HTTPError"
    ARGUMENTS_NOT_ALLOWED = "ArgumentsNotAllowed"
    FUNCTION_EXECUTION_ERROR = "FunctionExecutionError"
    NO_MATCHING_RULE_FOUND = "NoMatchingRuleFound"
    INTERNAL_SERVER_ERROR = "InternalServerError"
    SERVICE_NOT_FOUND = "ServiceNotFound"
    SERVICE_COMMAND_NOT_FOUND = "ServiceCommandNotFound"
    FUNCTION_NOT_FOUND = "FunctionNotFound"
    FUNCTION_INVALID = "FunctionInvalid"
    EXECUTION_TIME_LIMIT_EXCEEDED = "ExecutionTimeLimitExceeded"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: str | None) -> ServiceErrorCode:
        """Map a raw error code string to a member, falling back to UNKNOWN."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN
