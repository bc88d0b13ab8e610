"""Kernel – framework-agnostic building blocks: errors and JSON values."""

from searchbase.kernel.errors import (
    ApiError,
    BaseError,
    ClientError,
    MalformedPayloadError,
    PayloadError,
    ResponseDecodingError,
    StalledCursorError,
    TransportError,
    UnencodableNumberError,
    UnexpectedStatusError,
    UnsupportedNativeTypeError,
)
from searchbase.kernel.json import DynamicValue, MapValue, decode, encode, from_native

__all__ = [
    "ApiError",
    "BaseError",
    "ClientError",
    "DynamicValue",
    "MalformedPayloadError",
    "MapValue",
    "PayloadError",
    "ResponseDecodingError",
    "StalledCursorError",
    "TransportError",
    "UnencodableNumberError",
    "UnexpectedStatusError",
    "UnsupportedNativeTypeError",
    "decode",
    "encode",
    "from_native",
]
