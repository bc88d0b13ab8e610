"""HTTP adapter – LoggingTransport."""
from __future__ import annotations

import time
from typing import Any

from searchbase.adapters.http.transport import HttpRequest, HttpResponse, HttpTransport
from searchbase.kernel.errors import TransportError
from searchbase.observability.logging import SensitiveFieldsFilter, get_logger


class LoggingTransport:
    """Wrap another transport and log each exchange with redacted headers."""

    def __init__(
        self,
        inner: HttpTransport,
        *,
        logger: Any = None,
        sensitive_fields: frozenset[str] | None = None,
    ) -> None:
        self._inner = inner
        self._log = logger if logger is not None else get_logger(__name__)
        self._filter = SensitiveFieldsFilter(sensitive_fields)

    @property
    def inner(self) -> HttpTransport:
        return self._inner

    async def aclose(self) -> None:
        close = getattr(self._inner, "aclose", None)
        if close is not None:
            await close()

    async def send(self, request: HttpRequest) -> HttpResponse:
        self._log.debug(
            "http.request",
            method=request.method,
            url=request.url,
            headers=self._filter.redact(dict(request.headers)),
            body_bytes=len(request.body),
        )
        started = time.monotonic()
        try:
            response = await self._inner.send(request)
        except TransportError as exc:
            self._log.warning(
                "http.error",
                method=request.method,
                url=request.url,
                error=exc.message,
                elapsed_ms=int((time.monotonic() - started) * 1000),
            )
            raise
        self._log.debug(
            "http.response",
            method=request.method,
            url=request.url,
            status_code=response.status_code,
            body_bytes=len(response.body),
            elapsed_ms=int((time.monotonic() - started) * 1000),
        )
        return response


__all__ = ["LoggingTransport"]
