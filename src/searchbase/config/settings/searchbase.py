"""Config settings – SearchbaseSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from searchbase.config.settings.base import Settings

DEFAULT_BASE_URL = "https://api.searchbase.dev"
DEFAULT_BATCH_SIZE = 100


@dataclasses.dataclass
class SearchbaseSettings(Settings):
    """Client configuration, read from ``SEARCHBASE_*`` environment variables."""

    _prefix: ClassVar[str] = "SEARCHBASE"

    api_token: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    batch_size: int = DEFAULT_BATCH_SIZE
    log_requests: bool = False

    def _validate(self) -> None:
        if not self.api_token:
            raise self._invalid("api_token", "must not be empty", secret=True)
        if self.timeout <= 0:
            raise self._invalid("timeout", "must be positive")
        if self.batch_size < 1:
            raise self._invalid("batch_size", "must be >= 1")

    def __repr__(self) -> str:
        return (
            f"SearchbaseSettings(api_token='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r}, batch_size={self.batch_size!r}, "
            f"log_requests={self.log_requests!r})"
        )


__all__ = ["DEFAULT_BASE_URL", "DEFAULT_BATCH_SIZE", "SearchbaseSettings"]
