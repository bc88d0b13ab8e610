"""Testing fakes – in-memory doubles for the HTTP transport port."""
from searchbase.testing.fakes.transport import (
    FakeTransport,
    InMemorySearchTransport,
    json_response,
    page_payload,
)

__all__ = ["FakeTransport", "InMemorySearchTransport", "json_response", "page_payload"]
