"""Kernel JSON – DynamicValue variants.

A :data:`DynamicValue` is one of six immutable variants::

    NullValue | BoolValue | NumberValue | StringValue | ListValue | MapValue

Each variant is a frozen dataclass so trees compare structurally and can be
taken apart with ``match``::

    match value:
        case StringValue(text):
            ...
        case MapValue(entries):
            ...
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any, TypeAlias, Union, overload

from searchbase.kernel.errors import UnsupportedNativeTypeError


@dataclasses.dataclass(frozen=True, slots=True)
class NullValue:
    """JSON ``null``."""

    def __repr__(self) -> str:
        return "NullValue()"


@dataclasses.dataclass(frozen=True, slots=True)
class BoolValue:
    """JSON ``true`` / ``false``."""
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise UnsupportedNativeTypeError(self.value)

    def __bool__(self) -> bool:
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class NumberValue:
    """JSON number.

    Integral literals are kept as ``int`` and everything else as ``float``;
    ``NumberValue(1) == NumberValue(1.0)`` holds.
    """
    value: int | float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise UnsupportedNativeTypeError(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __int__(self) -> int:
        return int(self.value)

    @property
    def is_integral(self) -> bool:
        return isinstance(self.value, int) or self.value.is_integer()


@dataclasses.dataclass(frozen=True, slots=True)
class StringValue:
    """JSON string."""
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise UnsupportedNativeTypeError(self.value)

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True)
class ListValue(Sequence["DynamicValue"]):
    """Ordered JSON array."""
    items: tuple[DynamicValue, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, DYNAMIC_VALUE_TYPES):
                raise UnsupportedNativeTypeError(item)
        object.__setattr__(self, "items", items)

    @overload
    def __getitem__(self, index: int) -> DynamicValue: ...
    @overload
    def __getitem__(self, index: slice) -> ListValue: ...

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return ListValue(self.items[index])
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[DynamicValue]:
        return iter(self.items)


@dataclasses.dataclass(frozen=True)
class MapValue(Mapping[str, "DynamicValue"]):
    """JSON object: read-only mapping of unique string keys to values.

    Key order is kept for display only; equality ignores it.
    """
    entries: Mapping[str, DynamicValue] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        entries = dict(self.entries)
        for key, item in entries.items():
            if not isinstance(key, str):
                raise UnsupportedNativeTypeError(key)
            if not isinstance(item, DYNAMIC_VALUE_TYPES):
                raise UnsupportedNativeTypeError(item)
        object.__setattr__(self, "entries", MappingProxyType(entries))

    def __getitem__(self, key: str) -> DynamicValue:
        return self.entries[key]

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __repr__(self) -> str:
        return f"MapValue({dict(self.entries)!r})"


DynamicValue: TypeAlias = Union[NullValue, BoolValue, NumberValue, StringValue, ListValue, MapValue]

DYNAMIC_VALUE_TYPES: tuple[type, ...] = (
    NullValue,
    BoolValue,
    NumberValue,
    StringValue,
    ListValue,
    MapValue,
)

NULL = NullValue()


__all__ = [
    "BoolValue",
    "DYNAMIC_VALUE_TYPES",
    "DynamicValue",
    "ListValue",
    "MapValue",
    "NULL",
    "NullValue",
    "NumberValue",
    "StringValue",
]
