"""
Unified error types for rulerkit.

Every error raised by rulerkit itself derives from RulerkitError and carries
a human readable message plus a dict of structured details that can be passed
straight into a structlog event.
"""

from __future__ import annotations

from typing import Any


class RulerkitError(Exception):
    """Base exception for rulerkit errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(RulerkitError):
    """Raised for configuration-related errors."""


class ProviderError(RulerkitError):
    """Raised when an external service (the ruler API) fails."""


def format_error_message(error: RulerkitError) -> str:
    """Format an error message for display to users."""
    msg = error.message
    if error.details:
        detail_str = ", ".join(f"{k}={v}" for k, v in error.details.items())
        msg = f"{msg} ({detail_str})"
    return msg
