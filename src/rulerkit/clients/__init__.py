from rulerkit.clients.errors import (
    CodecError,
    ErrNoConfig,
    ErrResourceNotFound,
    InvalidAddressError,
    NoConfigError,
    RequestEncodeError,
    RequestFailedError,
    ResourceNotFoundError,
    ResponseDecodeError,
    RulerClientError,
)
from rulerkit.clients.ruler import RulerClient, RulerClientConfig

__all__ = [
    "CodecError",
    "ErrNoConfig",
    "ErrResourceNotFound",
    "InvalidAddressError",
    "NoConfigError",
    "RequestEncodeError",
    "RequestFailedError",
    "ResourceNotFoundError",
    "ResponseDecodeError",
    "RulerClient",
    "RulerClientConfig",
    "RulerClientError",
]
