"""Application – search use cases and pagination."""

from searchbase.application.pagination import OffsetCursor
from searchbase.application.search import (
    Filter,
    SearchbaseClient,
    SearchQuery,
    SearchRecord,
    SearchResponsePage,
    SortDirection,
    SortSpec,
)

__all__ = [
    "Filter",
    "OffsetCursor",
    "SearchQuery",
    "SearchRecord",
    "SearchResponsePage",
    "SearchbaseClient",
    "SortDirection",
    "SortSpec",
]
