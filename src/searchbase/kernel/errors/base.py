"""Root error class for the searchbase error hierarchy."""

from __future__ import annotations

import math
from typing import Any


def _loggable(value: Any) -> Any:
    """Reduce *value* to data the JSON encoder always accepts."""
    from searchbase.kernel.json import to_native
    from searchbase.kernel.json.value import DYNAMIC_VALUE_TYPES

    if isinstance(value, DYNAMIC_VALUE_TYPES):
        value = to_native(value)
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else repr(value)
    if isinstance(value, dict):
        return {str(k): _loggable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_loggable(v) for v in value]
    return repr(value)


class BaseError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context; values may be plain data or DynamicValues.
        cause: Exception that triggered this error. A cause from this
            hierarchy is serialised as a nested error, anything else by repr.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """Single-line JSON rendered with the library's own encoder."""
        from searchbase.kernel.json import encode, from_native

        return encode(from_native(_loggable(self.to_dict())))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict (safe for logging)."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if isinstance(self.cause, BaseError):
            payload["cause"] = self.cause.to_dict()
        elif self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
