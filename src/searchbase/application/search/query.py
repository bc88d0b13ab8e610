"""Application search – SearchQuery value object and its wire payload."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from enum import Enum
from typing import Any

from searchbase.kernel.json import DynamicValue, from_native


class SortDirection(str, Enum):
    ASCENDING = "ASC"
    DESCENDING = "DESC"


@dataclasses.dataclass(frozen=True)
class Filter:
    """A field-level filter; ``op`` is passed to the service verbatim."""
    field: str
    op: str
    value: DynamicValue

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", from_native(self.value))

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "op": self.op, "value": self.value}


@dataclasses.dataclass(frozen=True)
class SortSpec:
    field: str
    direction: SortDirection = SortDirection.ASCENDING

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field, "direction": SortDirection(self.direction).value}


def _as_tuple(items: Iterable[Any] | None) -> tuple[Any, ...] | None:
    return None if items is None else tuple(items)


@dataclasses.dataclass(frozen=True)
class SearchQuery:
    """What to search for.

    Optional parts left as ``None`` are omitted from the request payload.
    ``select`` behaves as a set: duplicates are dropped, first-seen order is
    kept.
    """
    index: str
    filters: tuple[Filter, ...] | None = None
    sort: tuple[SortSpec, ...] | None = None
    select: tuple[str, ...] | None = None
    limit: int | None = None
    offset: int | None = None

    def __post_init__(self) -> None:
        if not self.index:
            raise ValueError("index must not be empty")
        if self.limit is not None and self.limit < 0:
            raise ValueError("limit must be >= 0")
        if self.offset is not None and self.offset < 0:
            raise ValueError("offset must be >= 0")
        object.__setattr__(self, "filters", _as_tuple(self.filters))
        object.__setattr__(self, "sort", _as_tuple(self.sort))
        if self.select is not None:
            object.__setattr__(self, "select", tuple(dict.fromkeys(self.select)))

    def with_window(self, *, limit: int | None, offset: int | None) -> SearchQuery:
        """Return a copy with ``limit``/``offset`` replaced."""
        return dataclasses.replace(self, limit=limit, offset=offset)

    def to_payload(self) -> dict[str, Any]:
        """Build the ``{"query": {...}}`` request body (native form)."""
        query: dict[str, Any] = {"index": self.index}
        if self.filters is not None:
            query["filters"] = [f.to_dict() for f in self.filters]
        if self.sort is not None:
            query["sort"] = [s.to_dict() for s in self.sort]
        if self.select is not None:
            query["select"] = list(self.select)
        if self.limit is not None:
            query["limit"] = self.limit
        if self.offset is not None:
            query["offset"] = self.offset
        return {"query": query}


__all__ = ["Filter", "SearchQuery", "SortDirection", "SortSpec"]
