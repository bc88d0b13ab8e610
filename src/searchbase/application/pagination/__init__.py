"""Application pagination – cursor state for streaming search."""
from searchbase.application.pagination.cursor import OffsetCursor

__all__ = ["OffsetCursor"]
