"""
searchbase – async client for the Searchbase search API.

Import path convention::

    from searchbase import SearchbaseClient, SearchQuery, Filter
    from searchbase.kernel.json import decode, encode, MapValue
    from searchbase.kernel.errors import ApiError, TransportError
"""

from searchbase.application.search import (
    Filter,
    SearchbaseClient,
    SearchQuery,
    SearchRecord,
    SearchResponsePage,
    SortDirection,
    SortSpec,
    Timestamp,
    dataclass_record,
    schemaless_record,
)

__version__ = "0.1.0"
__all__ = [
    "Filter",
    "SearchQuery",
    "SearchRecord",
    "SearchResponsePage",
    "SearchbaseClient",
    "SortDirection",
    "SortSpec",
    "Timestamp",
    "__version__",
    "dataclass_record",
    "schemaless_record",
]
