"""Testing support – transport fakes and property-based generators."""

from searchbase.testing.fakes import (
    FakeTransport,
    InMemorySearchTransport,
    json_response,
    page_payload,
)
from searchbase.testing.generators import dynamic_value_strategy, scalar_value_strategy

__all__ = [
    "FakeTransport",
    "InMemorySearchTransport",
    "dynamic_value_strategy",
    "json_response",
    "page_payload",
    "scalar_value_strategy",
]
