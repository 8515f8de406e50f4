"""Shared data models for the Tether SDK."""

from __future__ import annotations

from .function_models import FunctionCallRequest, build_function_call
from .request_models import AuthenticatedDocumentRequest, Response

__all__ = [
    "AuthenticatedDocumentRequest",
    "FunctionCallRequest",
    "Response",
    "build_function_call",
]
