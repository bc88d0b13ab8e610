"""Payload errors – JSON text and dynamic value conversion failures."""

from __future__ import annotations

from typing import Any

from searchbase.kernel.errors.base import BaseError


class PayloadError(BaseError):
    """A JSON payload could not be read, built or written."""

    default_code = "payload_error"


class MalformedPayloadError(PayloadError):
    """The text is not well-formed JSON (or uses a non-standard construct)."""

    default_code = "malformed_payload"


class UnencodableNumberError(PayloadError):
    """A numeric value has no JSON representation (NaN, ±Infinity)."""

    default_code = "unencodable_number"

    def __init__(self, value: float, **kwargs: Any) -> None:
        super().__init__(f"Number {value!r} cannot be encoded as JSON", **kwargs)
        self.value = value


class UnsupportedNativeTypeError(PayloadError):
    """A native Python object has no dynamic value counterpart."""

    default_code = "unsupported_native_type"

    def __init__(self, value: object, **kwargs: Any) -> None:
        type_name = type(value).__name__
        super().__init__(
            f"Values of type '{type_name}' cannot be represented as JSON",
            detail={"type": type_name},
            **kwargs,
        )
        self.value = value


__all__ = [
    "MalformedPayloadError",
    "PayloadError",
    "UnencodableNumberError",
    "UnsupportedNativeTypeError",
]
