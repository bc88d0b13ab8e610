"""Application search – SearchbaseClient.

Usage::

    async with SearchbaseClient(api_token="sb_…") as client:
        page = await client.search(SearchQuery(index="products", limit=10))
        async for batch in client.search_all(SearchQuery(index="products"), batch_size=50):
            ...
"""
from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any, TypeVar
from urllib.parse import urlsplit

from searchbase.adapters.http import HttpRequest, HttpResponse, HttpTransport, HttpxTransport, LoggingTransport
from searchbase.application.pagination import OffsetCursor
from searchbase.application.search.page import SearchResponsePage, parse_page
from searchbase.application.search.query import SearchQuery
from searchbase.application.search.records import RecordDecoder, schemaless_record
from searchbase.config.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_BATCH_SIZE,
    EnvSettingsLoader,
    SearchbaseSettings,
)
from searchbase.kernel.errors import (
    ApiError,
    BaseError,
    InvalidEndpointError,
    PayloadError,
    StalledCursorError,
    TransportError,
    UnexpectedStatusError,
)
from searchbase.kernel.json import MapValue, StringValue, decode, encode, from_native
from searchbase.observability.logging import get_logger

T = TypeVar("T")

TOKEN_HEADER = "x-searchbase-token"
SEARCH_PATH = "/search"

_log = get_logger(__name__)


def _api_message(body: bytes) -> str | None:
    try:
        document = decode(body)
    except PayloadError:
        return None
    if isinstance(document, MapValue):
        message = document.get("message")
        if isinstance(message, StringValue):
            return message.value
    return None


class SearchbaseClient:
    """Client for the Searchbase search endpoint.

    Configuration is read-only after construction, so one instance can serve
    concurrent calls. Nothing is retried: every failure is raised to the
    caller as a :class:`~searchbase.kernel.errors.BaseError` subclass.

    Parameters
    ----------
    api_token:
        Sent as the ``x-searchbase-token`` header on every request.
    base_url:
        Service root; ``/search`` is appended.
    transport:
        Any :class:`HttpTransport`. When omitted an :class:`HttpxTransport`
        is created and closed together with the client.
    record_decoder:
        Default decoder for result records (schemaless when omitted).
    """

    def __init__(
        self,
        api_token: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        transport: HttpTransport | None = None,
        record_decoder: RecordDecoder[Any] = schemaless_record,
        timeout: float = 30.0,
        batch_size: int = DEFAULT_BATCH_SIZE,
        log_requests: bool = False,
    ) -> None:
        parts = urlsplit(base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise InvalidEndpointError(base_url)
        self._api_token = api_token
        self._base_url = base_url.rstrip("/")
        self._owns_transport = transport is None
        self._transport: HttpTransport = transport if transport is not None else HttpxTransport(timeout)
        if log_requests:
            self._transport = LoggingTransport(self._transport)
        self._record_decoder = record_decoder
        self.default_batch_size = batch_size

    @classmethod
    def from_settings(
        cls,
        settings: SearchbaseSettings,
        *,
        transport: HttpTransport | None = None,
        record_decoder: RecordDecoder[Any] = schemaless_record,
    ) -> "SearchbaseClient":
        return cls(
            settings.api_token,
            settings.base_url,
            transport=transport,
            record_decoder=record_decoder,
            timeout=settings.timeout,
            batch_size=settings.batch_size,
            log_requests=settings.log_requests,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "SearchbaseClient":
        """Build a client from ``SEARCHBASE_*`` environment variables."""
        return cls.from_settings(EnvSettingsLoader().load(SearchbaseSettings), **kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def search_url(self) -> str:
        return f"{self._base_url}{SEARCH_PATH}"

    async def __aenter__(self) -> "SearchbaseClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if not self._owns_transport:
            return
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    def _build_request(self, query: SearchQuery) -> HttpRequest:
        body = encode(from_native(query.to_payload()))
        return HttpRequest(
            method="POST",
            url=self.search_url,
            headers={
                "Content-Type": "application/json",
                TOKEN_HEADER: self._api_token,
            },
            body=body.encode("utf-8"),
        )

    def _handle_response(
        self, response: HttpResponse, record_decoder: RecordDecoder[T]
    ) -> SearchResponsePage[T]:
        status = response.status_code
        if 200 <= status <= 299:
            return parse_page(response.body, record_decoder)
        if 400 <= status <= 499:
            message = _api_message(response.body)
            if message is not None:
                raise ApiError(message, status_code=status)
        raise UnexpectedStatusError(status)

    async def search(
        self,
        query: SearchQuery,
        *,
        record_decoder: RecordDecoder[T] | None = None,
    ) -> SearchResponsePage[T]:
        """Run one search request and return the decoded page.

        Raises
        ------
        TransportError
            No response was received. Failures raised by a custom
            transport are wrapped the same way.
        ResponseDecodingError
            A 2xx body is not a valid page.
        ApiError
            A 4xx body carried ``{"message": ...}``.
        UnexpectedStatusError
            Any other non-2xx status.
        """
        decoder = record_decoder if record_decoder is not None else self._record_decoder
        request = self._build_request(query)
        _log.debug(
            "search.request",
            index=query.index,
            limit=query.limit,
            offset=query.offset,
        )
        try:
            response = await self._transport.send(request)
        except BaseError:
            raise
        except Exception as exc:
            raise TransportError(
                f"HTTP request failed: {request.method} {request.url}: {exc!r}",
                method=request.method,
                url=request.url,
                cause=exc,
            ) from exc
        page = self._handle_response(response, decoder)
        _log.debug(
            "search.page",
            index=query.index,
            total=page.total,
            range_start=page.range.start,
            range_end=page.range.end,
            records=len(page.records),
        )
        return page

    async def search_all(
        self,
        query: SearchQuery,
        batch_size: int | None = None,
        *,
        record_decoder: RecordDecoder[T] | None = None,
    ) -> AsyncIterator[list[T]]:
        """Yield every matching record, one list per page.

        Pages are fetched lazily: the next request is sent only when the
        consumer asks for the next batch. The stream ends once the number of
        records received reaches the server's reported total; an empty page
        does not end it, the next request starts at that page's ``range.end``.
        Any error ends the stream after the batches already yielded.

        Raises
        ------
        StalledCursorError
            The server returned a page whose ``range.end`` does not move past
            the requested offset.
        """
        size = self.default_batch_size if batch_size is None else batch_size
        if size < 1:
            raise ValueError("batch_size must be >= 1")
        cursor = OffsetCursor(offset=query.offset or 0)

        while not cursor.exhausted:
            page = await self.search(
                query.with_window(limit=size, offset=cursor.offset),
                record_decoder=record_decoder,
            )
            records = list(page.records)
            yield records
            try:
                cursor.advance(
                    range_end=page.range.end,
                    record_count=len(records),
                    total=page.total,
                )
            except StalledCursorError:
                _log.warning(
                    "search.stalled",
                    index=query.index,
                    offset=cursor.offset,
                    range_end=page.range.end,
                    fetched=cursor.fetched,
                    total=page.total,
                )
                raise

        _log.debug(
            "search.stream_complete",
            index=query.index,
            pages=cursor.pages,
            fetched=cursor.fetched,
        )


__all__ = ["SEARCH_PATH", "SearchbaseClient", "TOKEN_HEADER"]
