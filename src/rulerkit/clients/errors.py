"""
Errors raised by the ruler client.

Responses are bucketed into a small set of variants so callers can match on
type: ResourceNotFoundError for 404, RequestFailedError for any other non-2xx
status, CodecError subclasses for YAML failures. Transport failures are never
wrapped; they surface as the httpx exception that caused them.
"""

from __future__ import annotations

from typing import Any

from rulerkit.core.errors import ConfigurationError, ProviderError

MAX_MESSAGE_BODY = 200


class RulerClientError(ProviderError):
    """Base class for errors reported by the ruler API client."""


class ResourceNotFoundError(RulerClientError):
    """The ruler answered 404 for the requested resource."""

    def __init__(
        self,
        message: str = "requested resource not found",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)


class NoConfigError(RulerClientError):
    """The ruler holds no rule configuration for this tenant."""

    def __init__(
        self,
        message: str = "no config exists for this user",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)


class RequestFailedError(RulerClientError):
    """The ruler answered with a non-2xx status other than 404."""

    def __init__(
        self,
        status_code: int,
        body: str,
        summary: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        if summary is None and body:
            summary = body if len(body) <= MAX_MESSAGE_BODY else body[:MAX_MESSAGE_BODY] + "..."
        message = f"failed request to the ruler api (status {status_code})"
        if summary:
            message = f"{message}: {summary}"
        super().__init__(message, details)
        self.status_code = status_code
        self.body = body


class CodecError(RulerClientError):
    """YAML encoding or decoding of a rule payload failed."""


class RequestEncodeError(CodecError):
    """The request payload could not be serialized."""


class ResponseDecodeError(CodecError):
    """The response body could not be deserialized."""


class InvalidAddressError(ConfigurationError):
    """The configured ruler address is not an absolute URL."""


# Stable match targets.
ErrResourceNotFound = ResourceNotFoundError
ErrNoConfig = NoConfigError
