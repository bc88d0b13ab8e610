"""Application search – queries, pages, records and the search client."""
from searchbase.application.search.client import SearchbaseClient
from searchbase.application.search.page import PageRange, SearchResponsePage, parse_page
from searchbase.application.search.query import Filter, SearchQuery, SortDirection, SortSpec
from searchbase.application.search.records import (
    RecordDecoder,
    SearchRecord,
    Timestamp,
    dataclass_record,
    schemaless_record,
)

__all__ = [
    "Filter",
    "PageRange",
    "RecordDecoder",
    "SearchQuery",
    "SearchRecord",
    "SearchResponsePage",
    "SearchbaseClient",
    "SortDirection",
    "SortSpec",
    "Timestamp",
    "dataclass_record",
    "parse_page",
    "schemaless_record",
]
