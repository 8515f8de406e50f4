"""Named service clients built on the core service client."""

from __future__ import annotations

from .twilio import TwilioServiceClient

__all__ = ["TwilioServiceClient"]
