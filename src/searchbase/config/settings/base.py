"""Config settings – Settings base class and environment key naming."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from searchbase.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for env-driven settings dataclasses.

    Each field ``name`` is read from the environment variable
    ``<_prefix>_<NAME>`` (just ``<NAME>`` when the prefix is empty).
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def env_keys(cls) -> dict[str, str]:
        """Map every field name to the environment variable it is read from."""
        return {field.name: cls.env_key(field.name) for field in dataclasses.fields(cls)}

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _invalid(self, field_name: str, reason: str, *, secret: bool = False) -> InvalidSettingValueError:
        return InvalidSettingValueError(
            self.env_key(field_name),
            getattr(self, field_name),
            reason,
            settings_class=type(self).__name__,
            secret=secret,
        )

__all__ = ["Settings"]
