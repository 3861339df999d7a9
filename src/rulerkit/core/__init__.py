"""Core modules for rulerkit - centralized error definitions."""

from rulerkit.core.errors import (
    ConfigurationError,
    ProviderError,
    RulerkitError,
    format_error_message,
)

__all__ = [
    "RulerkitError",
    "ConfigurationError",
    "ProviderError",
    "format_error_message",
]
