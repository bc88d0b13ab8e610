"""Application search – SearchResponsePage and response body parsing."""
from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from searchbase.application.search.records import RecordDecoder
from searchbase.kernel.errors import PayloadError, ResponseDecodingError
from searchbase.kernel.json import DynamicValue, ListValue, MapValue, NumberValue, decode

T = TypeVar("T")

RECORD_KEYS = ("records", "results")


@dataclasses.dataclass(frozen=True, slots=True)
class PageRange:
    """Half-open ``[start, end)`` window of the result set a page covers."""
    start: int
    end: int


@dataclasses.dataclass(frozen=True)
class SearchResponsePage(Generic[T]):
    """One page of search results.

    ``range.end`` is the server's statement of where the next page starts;
    it is not necessarily ``range.start + len(records)``.
    """

    total: int
    range: PageRange
    records: tuple[T, ...]

    @property
    def has_more(self) -> bool:
        return self.range.end < self.total

    def map(self, fn: Callable[[T], Any]) -> "SearchResponsePage[Any]":
        """Return a new page with each record transformed by *fn*."""
        return SearchResponsePage(
            total=self.total,
            range=self.range,
            records=tuple(fn(record) for record in self.records),
        )


def _require_int(container: MapValue, key: str, *, minimum: int | None = None) -> int:
    value = container.get(key)
    if not isinstance(value, NumberValue) or not value.is_integral:
        raise ResponseDecodingError(f"'{key}' must be an integer, got {value!r}")
    number = int(value)
    if minimum is not None and number < minimum:
        raise ResponseDecodingError(f"'{key}' must be >= {minimum}, got {number}")
    return number


def _record_list(document: MapValue) -> ListValue:
    for key in RECORD_KEYS:
        value: DynamicValue | None = document.get(key)
        if value is None:
            continue
        if not isinstance(value, ListValue):
            raise ResponseDecodingError(f"'{key}' must be an array")
        return value
    raise ResponseDecodingError("Response has neither 'records' nor 'results'")


def parse_page(body: bytes | str, record_decoder: RecordDecoder[T]) -> SearchResponsePage[T]:
    """Decode a 2xx response body into a :class:`SearchResponsePage`.

    Raises
    ------
    ResponseDecodingError
        On invalid JSON, a missing or mistyped ``total``/``range``/record
        list, or a record the decoder rejects.
    """
    try:
        document = decode(body)
    except PayloadError as exc:
        raise ResponseDecodingError("Response body is not valid JSON", cause=exc) from exc
    if not isinstance(document, MapValue):
        raise ResponseDecodingError("Response body must be a JSON object")

    total = _require_int(document, "total", minimum=0)
    range_value = document.get("range")
    if not isinstance(range_value, MapValue):
        raise ResponseDecodingError("'range' must be an object with 'start' and 'end'")
    page_range = PageRange(
        start=_require_int(range_value, "start"),
        end=_require_int(range_value, "end"),
    )

    records: list[T] = []
    for position, raw in enumerate(_record_list(document)):
        if not isinstance(raw, MapValue):
            raise ResponseDecodingError(f"Record #{position} is not an object")
        try:
            records.append(record_decoder(raw))
        except ResponseDecodingError:
            raise
        except (PayloadError, TypeError, ValueError, KeyError) as exc:
            raise ResponseDecodingError(f"Record #{position} could not be decoded: {exc}", cause=exc) from exc

    return SearchResponsePage(total=total, range=page_range, records=tuple(records))


__all__ = ["PageRange", "RECORD_KEYS", "SearchResponsePage", "parse_page"]
