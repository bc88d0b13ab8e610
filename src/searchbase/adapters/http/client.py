"""HTTP adapter – HttpxTransport."""
from __future__ import annotations

from typing import Any

import httpx

from searchbase.adapters.http.transport import HttpRequest, HttpResponse
from searchbase.kernel.errors import TransportError


class HttpxTransport:
    """Thin async httpx wrapper with structured error mapping.

    Non-2xx statuses are returned, not raised; only failures that leave no
    response behind become :class:`TransportError`.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        *,
        client: httpx.AsyncClient | None = None,
        **kwargs: Any,
    ) -> None:
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout, **kwargs)
        self._owns_client = client is None

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the httpx client only if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def send(self, request: HttpRequest) -> HttpResponse:
        method, url = request.method, request.url
        try:
            response = await self._client.request(
                method,
                url,
                headers=dict(request.headers),
                content=request.body,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(
                f"HTTP request timed out: {method} {url}", method=method, url=url, cause=exc
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                f"HTTP request failed: {method} {url}: {exc}", method=method, url=url, cause=exc
            ) from exc
        return HttpResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )


__all__ = ["HttpxTransport"]
