"""HTTP adapter – HttpTransport port and request/response envelopes."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@dataclasses.dataclass(frozen=True, slots=True)
class HttpRequest:
    method: str
    url: str
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)
    body: bytes = b""


@dataclasses.dataclass(frozen=True, slots=True)
class HttpResponse:
    status_code: int
    body: bytes = b""
    headers: Mapping[str, str] = dataclasses.field(default_factory=dict)


@runtime_checkable
class HttpTransport(Protocol):
    """Port: send one request and return the raw response.

    Implementations raise :class:`~searchbase.kernel.errors.TransportError`
    when no response was received; any HTTP status is a normal return.
    """

    async def send(self, request: HttpRequest) -> HttpResponse: ...


__all__ = ["HttpRequest", "HttpResponse", "HttpTransport"]
