"""Application pagination – OffsetCursor."""
from __future__ import annotations

import dataclasses

from searchbase.kernel.errors import StalledCursorError


@dataclasses.dataclass
class OffsetCursor:
    """Offset state of one streaming search.

    The next offset is always the server-reported ``range_end`` of the last
    page. A ``range_end`` that does not move past the current offset raises
    :class:`StalledCursorError` instead of re-requesting the same window.
    """

    offset: int = 0
    fetched: int = 0
    total: int | None = None
    pages: int = 0

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("offset must be >= 0")

    @property
    def exhausted(self) -> bool:
        return self.total is not None and self.fetched >= self.total

    def advance(self, *, range_end: int, record_count: int, total: int) -> None:
        """Account for a page that has just been delivered."""
        self.pages += 1
        self.fetched += record_count
        self.total = total
        if self.exhausted:
            self.offset = max(self.offset, range_end)
            return
        if range_end <= self.offset:
            raise StalledCursorError(self.offset, range_end)
        self.offset = range_end


__all__ = ["OffsetCursor"]
