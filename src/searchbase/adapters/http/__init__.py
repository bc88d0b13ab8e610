"""HTTP adapter – transport port, httpx implementation and logging wrapper."""
from searchbase.adapters.http.client import HttpxTransport
from searchbase.adapters.http.logging_client import LoggingTransport
from searchbase.adapters.http.transport import HttpRequest, HttpResponse, HttpTransport

__all__ = ["HttpRequest", "HttpResponse", "HttpTransport", "HttpxTransport", "LoggingTransport"]
