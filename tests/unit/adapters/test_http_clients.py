"""Unit tests – HTTP adapter (HttpxTransport, LoggingTransport)."""
from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx
import pytest
import respx

from searchbase.adapters.http import (
    HttpRequest,
    HttpResponse,
    HttpTransport,
    HttpxTransport,
    LoggingTransport,
)
from searchbase.application.search import SearchbaseClient, SearchQuery
from searchbase.kernel.errors import ApiError, TransportError
from searchbase.testing.fakes import FakeTransport


def _search_request(body: bytes = b'{"query":{"index":"i"}}') -> HttpRequest:
    return HttpRequest(
        method="POST",
        url="http://svc/search",
        headers={"Content-Type": "application/json", "x-searchbase-token": "secret"},
        body=body,
    )


class _RecordingLogger:
    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict[str, Any]]] = []

    def debug(self, event: str, **kw: Any) -> None:
        self.events.append(("debug", event, kw))

    def warning(self, event: str, **kw: Any) -> None:
        self.events.append(("warning", event, kw))


# ---------------------------------------------------------------------------
# HttpxTransport
# ---------------------------------------------------------------------------

class TestHttpxTransport:
    """HttpxTransport sends raw requests and maps httpx failures."""

    def test_satisfies_port(self) -> None:
        transport = HttpxTransport()
        assert isinstance(transport, HttpTransport)
        asyncio.run(transport.aclose())

    @respx.mock
    def test_sends_method_headers_and_body(self) -> None:
        route = respx.post("http://svc/search").mock(return_value=httpx.Response(200, json={"ok": True}))

        async def run() -> HttpResponse:
            async with HttpxTransport() as transport:
                return await transport.send(_search_request())

        response = asyncio.run(run())
        sent = route.calls.last.request
        assert sent.headers["x-searchbase-token"] == "secret"
        assert sent.headers["content-type"] == "application/json"
        assert sent.content == b'{"query":{"index":"i"}}'
        assert response.status_code == 200
        assert json.loads(response.body) == {"ok": True}

    @respx.mock
    def test_error_statuses_are_returned_not_raised(self) -> None:
        respx.post("http://svc/search").mock(return_value=httpx.Response(503, text="busy"))

        async def run() -> HttpResponse:
            async with HttpxTransport() as transport:
                return await transport.send(_search_request())

        response = asyncio.run(run())
        assert response.status_code == 503
        assert response.body == b"busy"

    @respx.mock
    def test_connect_error_becomes_transport_error(self) -> None:
        respx.post("http://svc/search").mock(side_effect=httpx.ConnectError("refused"))

        async def run() -> None:
            async with HttpxTransport() as transport:
                with pytest.raises(TransportError) as exc_info:
                    await transport.send(_search_request())
            assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
            assert exc_info.value.method == "POST"
            assert exc_info.value.url == "http://svc/search"

        asyncio.run(run())

    @respx.mock
    def test_timeout_becomes_transport_error(self) -> None:
        respx.post("http://svc/search").mock(side_effect=httpx.ReadTimeout("slow"))

        async def run() -> None:
            async with HttpxTransport() as transport:
                with pytest.raises(TransportError, match="timed out"):
                    await transport.send(_search_request())

        asyncio.run(run())

    def test_injected_client_not_closed(self) -> None:
        async def run() -> None:
            client = httpx.AsyncClient()
            async with HttpxTransport(client=client):
                pass
            assert not client.is_closed
            await client.aclose()

        asyncio.run(run())

    @respx.mock
    def test_end_to_end_with_search_client(self) -> None:
        respx.post("https://search.test/search").mock(
            return_value=httpx.Response(404, json={"message": "index not found"})
        )

        async def run() -> None:
            async with SearchbaseClient("tok", "https://search.test") as client:
                with pytest.raises(ApiError, match="index not found"):
                    await client.search(SearchQuery(index="nope"))

        asyncio.run(run())


# ---------------------------------------------------------------------------
# LoggingTransport
# ---------------------------------------------------------------------------

class TestLoggingTransport:
    def test_logs_request_and_response_with_redacted_token(self) -> None:
        logger = _RecordingLogger()
        inner = FakeTransport([HttpResponse(200, b"{}")])
        transport = LoggingTransport(inner, logger=logger)

        response = asyncio.run(transport.send(_search_request()))

        assert response.status_code == 200
        names = [event for _, event, _ in logger.events]
        assert names == ["http.request", "http.response"]
        request_fields = logger.events[0][2]
        assert request_fields["headers"]["x-searchbase-token"] == "[REDACTED]"
        assert request_fields["headers"]["Content-Type"] == "application/json"
        assert logger.events[1][2]["status_code"] == 200

    def test_logs_and_reraises_transport_error(self) -> None:
        logger = _RecordingLogger()
        transport = LoggingTransport(FakeTransport([TransportError("down")]), logger=logger)

        with pytest.raises(TransportError):
            asyncio.run(transport.send(_search_request()))

        assert logger.events[-1][0] == "warning"
        assert logger.events[-1][1] == "http.error"
        assert logger.events[-1][2]["error"] == "down"

    def test_aclose_closes_inner(self) -> None:
        inner = FakeTransport()
        asyncio.run(LoggingTransport(inner, logger=_RecordingLogger()).aclose())
        assert inner.closed
