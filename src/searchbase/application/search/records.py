"""Application search – result records.

Records come back in whatever shape the index stores. Two decoding modes are
supported:

* schemaless: :func:`schemaless_record` wraps the raw JSON object in a
  :class:`SearchRecord` (the default);
* typed: any callable ``MapValue -> T``; :func:`dataclass_record` builds one
  for a dataclass.
"""
from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any, TypeAlias, TypeVar, Union

from searchbase.kernel.errors import ResponseDecodingError
from searchbase.kernel.json import (
    DynamicValue,
    MapValue,
    NumberValue,
    StringValue,
    from_native,
    to_native,
)

T = TypeVar("T")

RecordDecoder: TypeAlias = Callable[[MapValue], T]


@dataclasses.dataclass(frozen=True)
class SearchRecord:
    """A record decoded without a schema.

    Accepts both the ``{"id": ..., "fields": {...}}`` envelope and a flat
    object of fields. ``raw`` always holds the full object.
    """
    id: str | None
    fields: MapValue
    raw: MapValue

    def __getitem__(self, key: str) -> DynamicValue:
        return self.fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def get(self, key: str, default: DynamicValue | None = None) -> DynamicValue | None:
        return self.fields.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        return to_native(self.fields)


def _record_id(value: DynamicValue | None) -> str | None:
    match value:
        case StringValue(text):
            return text
        case NumberValue(number) if value.is_integral:
            return str(int(number))
        case _:
            return None


def schemaless_record(raw: MapValue) -> SearchRecord:
    fields = raw.get("fields")
    if not isinstance(fields, MapValue):
        fields = raw
    return SearchRecord(id=_record_id(raw.get("id")), fields=fields, raw=raw)


@dataclasses.dataclass(frozen=True)
class Timestamp:
    """Server timestamp serialised as ``{"_seconds": n, "_nanoseconds": n}``."""
    seconds: int
    nanoseconds: int = 0

    @classmethod
    def from_value(cls, value: Any) -> Timestamp:
        if isinstance(value, MapValue):
            value = to_native(value)
        if not isinstance(value, dict):
            raise TypeError(f"expected a timestamp object, got {type(value).__name__}")
        seconds = value.get("_seconds")
        nanos = value.get("_nanoseconds", 0)
        if not isinstance(seconds, int) or isinstance(seconds, bool):
            raise TypeError("timestamp '_seconds' must be an integer")
        if not isinstance(nanos, int) or isinstance(nanos, bool):
            raise TypeError("timestamp '_nanoseconds' must be an integer")
        return cls(seconds=seconds, nanoseconds=nanos)

    def to_datetime(self) -> datetime:
        return datetime.fromtimestamp(self.seconds, tz=UTC) + timedelta(
            microseconds=self.nanoseconds // 1000
        )


# ---------------------------------------------------------------------------
# Typed (dataclass) decoding
# ---------------------------------------------------------------------------

_SCALARS: dict[type, tuple[type, ...]] = {
    str: (str,),
    int: (int,),
    float: (int, float),
    bool: (bool,),
}


def _convert(value: Any, hint: Any, path: str) -> Any:
    origin = typing.get_origin(hint)
    args = typing.get_args(hint)

    if hint is Any:
        return value
    if hint == DynamicValue:
        return from_native(value)
    if hint is MapValue:
        if not isinstance(value, dict):
            raise TypeError(f"{path}: expected an object")
        return from_native(value)
    if origin in (Union, types.UnionType):
        if value is None and type(None) in args:
            return None
        candidates = [a for a in args if a is not type(None)]
        errors: list[str] = []
        for candidate in candidates:
            try:
                return _convert(value, candidate, path)
            except TypeError as exc:
                errors.append(str(exc))
        raise TypeError("; ".join(errors))
    if origin in (list, tuple):
        if not isinstance(value, list):
            raise TypeError(f"{path}: expected an array")
        item_hint = args[0] if args else Any
        items = [_convert(item, item_hint, f"{path}[{i}]") for i, item in enumerate(value)]
        return items if origin is list else tuple(items)
    if origin is dict:
        if not isinstance(value, dict):
            raise TypeError(f"{path}: expected an object")
        item_hint = args[1] if len(args) == 2 else Any
        return {k: _convert(v, item_hint, f"{path}.{k}") for k, v in value.items()}
    if isinstance(hint, type) and hasattr(hint, "from_value"):
        return hint.from_value(value)
    if dataclasses.is_dataclass(hint) and isinstance(hint, type):
        if not isinstance(value, dict):
            raise TypeError(f"{path}: expected an object")
        return _build(hint, value, path)
    if hint in _SCALARS:
        if isinstance(value, bool) and hint is not bool:
            raise TypeError(f"{path}: expected {hint.__name__}, got bool")
        if not isinstance(value, _SCALARS[hint]):
            raise TypeError(f"{path}: expected {hint.__name__}, got {type(value).__name__}")
        return hint(value) if hint is float else value
    return value


def _build(cls: type[T], data: dict[str, Any], path: str) -> T:
    hints = typing.get_type_hints(cls)
    kwargs: dict[str, Any] = {}
    for field in dataclasses.fields(cls):  # type: ignore[arg-type]
        if not field.init:
            continue
        key = field.metadata.get("json_key", field.name)
        field_path = f"{path}.{key}" if path else key
        if key not in data:
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise TypeError(f"{field_path}: required field is missing")
            continue
        kwargs[field.name] = _convert(data[key], hints[field.name], field_path)
    return cls(**kwargs)


def dataclass_record(cls: type[T]) -> RecordDecoder[T]:
    """Return a decoder building *cls* from each record object.

    Field names map to JSON keys unless ``field(metadata={"json_key": ...})``
    says otherwise. Nested dataclasses, lists, optionals and types exposing a
    ``from_value`` classmethod (e.g. :class:`Timestamp`) are handled.
    """
    if not (dataclasses.is_dataclass(cls) and isinstance(cls, type)):
        raise TypeError(f"{cls!r} is not a dataclass")

    def decode(raw: MapValue) -> T:
        try:
            return _build(cls, to_native(raw), "")
        except (TypeError, ValueError) as exc:
            raise ResponseDecodingError(
                f"Cannot decode record as {cls.__name__}: {exc}", cause=exc
            ) from exc

    return decode


__all__ = [
    "RecordDecoder",
    "SearchRecord",
    "Timestamp",
    "dataclass_record",
    "schemaless_record",
]
