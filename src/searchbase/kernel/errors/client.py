"""Client errors – failures talking to the search service."""

from __future__ import annotations

from typing import Any

from searchbase.kernel.errors.base import BaseError


class ClientError(BaseError):
    """A search call failed."""

    default_code = "client_error"


class InvalidEndpointError(ClientError):
    """The configured base URL cannot be used to build request URLs."""

    default_code = "invalid_endpoint"

    def __init__(self, endpoint: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid endpoint URL {endpoint!r}", **kwargs)
        self.endpoint = endpoint


class TransportError(ClientError):
    """The request never produced an HTTP response (connect, TLS, timeout, …)."""

    default_code = "transport_error"

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.method = method
        self.url = url


class ResponseDecodingError(ClientError):
    """A 2xx response body does not have the shape of a search page."""

    default_code = "response_decoding_error"


class ApiError(ClientError):
    """The service rejected the request with a structured message."""

    default_code = "api_error"

    def __init__(self, message: str, *, status_code: int | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["status_code"] = self.status_code
        return base


class UnexpectedStatusError(ClientError):
    """The service answered with a status the client does not handle."""

    default_code = "unexpected_status"

    def __init__(self, status_code: int, **kwargs: Any) -> None:
        super().__init__(f"Unexpected response status {status_code}", **kwargs)
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["status_code"] = self.status_code
        return base


class StalledCursorError(ClientError):
    """The service returned a page whose range does not move past the offset."""

    default_code = "stalled_cursor"

    def __init__(self, offset: int, range_end: int, **kwargs: Any) -> None:
        super().__init__(
            f"Pagination stalled at offset {offset} (range end {range_end})",
            detail={"offset": offset, "range_end": range_end},
            **kwargs,
        )
        self.offset = offset
        self.range_end = range_end


__all__ = [
    "ApiError",
    "ClientError",
    "InvalidEndpointError",
    "ResponseDecodingError",
    "StalledCursorError",
    "TransportError",
    "UnexpectedStatusError",
]
