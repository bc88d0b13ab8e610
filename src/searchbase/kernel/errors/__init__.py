"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── PayloadError                 (payload.py)
    │   ├── MalformedPayloadError
    │   ├── UnencodableNumberError
    │   └── UnsupportedNativeTypeError
    └── ClientError                  (client.py)
        ├── InvalidEndpointError
        ├── TransportError
        ├── ResponseDecodingError
        ├── ApiError
        ├── UnexpectedStatusError
        └── StalledCursorError
"""

from searchbase.kernel.errors.base import BaseError
from searchbase.kernel.errors.client import (
    ApiError,
    ClientError,
    InvalidEndpointError,
    ResponseDecodingError,
    StalledCursorError,
    TransportError,
    UnexpectedStatusError,
)
from searchbase.kernel.errors.payload import (
    MalformedPayloadError,
    PayloadError,
    UnencodableNumberError,
    UnsupportedNativeTypeError,
)

__all__ = [
    "ApiError",
    "BaseError",
    "ClientError",
    "InvalidEndpointError",
    "MalformedPayloadError",
    "PayloadError",
    "ResponseDecodingError",
    "StalledCursorError",
    "TransportError",
    "UnencodableNumberError",
    "UnexpectedStatusError",
    "UnsupportedNativeTypeError",
]
