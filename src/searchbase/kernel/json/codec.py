"""Kernel JSON – text codec and native conversion for DynamicValue."""
from __future__ import annotations

import json
import math
from enum import Enum
from typing import Any

from searchbase.kernel.errors import (
    MalformedPayloadError,
    UnencodableNumberError,
    UnsupportedNativeTypeError,
)
from searchbase.kernel.json.value import (
    DYNAMIC_VALUE_TYPES,
    NULL,
    BoolValue,
    DynamicValue,
    ListValue,
    MapValue,
    NullValue,
    NumberValue,
    StringValue,
)

_SEPARATORS = (",", ":")


def _object_hook(pairs: list[tuple[str, Any]]) -> MapValue:
    entries: dict[str, DynamicValue] = {}
    for key, raw in pairs:
        if key in entries:
            raise MalformedPayloadError(f"Duplicate object key {key!r}", detail={"key": key})
        entries[key] = from_native(raw)
    return MapValue(entries)


def _reject_constant(name: str) -> Any:
    raise MalformedPayloadError(f"Non-standard JSON constant {name!r}")


def _parse_int(literal: str) -> int:
    try:
        return int(literal)
    except ValueError as exc:
        raise MalformedPayloadError(
            f"Integer literal of {len(literal)} digits is too long", cause=exc
        ) from exc


def _parse_float(literal: str) -> float:
    number = float(literal)
    if not math.isfinite(number):
        raise MalformedPayloadError(f"Number {literal!r} is out of range")
    return number


def decode(text: str | bytes | bytearray) -> DynamicValue:
    """Parse JSON *text* into a :data:`DynamicValue` tree.

    Raises
    ------
    MalformedPayloadError
        When the text is not RFC 8259 JSON, contains ``NaN``/``Infinity``,
        holds a number that overflows a float or exceeds the integer digit
        limit, nests deeper than the interpreter can convert, or repeats a
        key inside one object.
    """
    try:
        parsed = json.loads(
            text,
            object_pairs_hook=_object_hook,
            parse_constant=_reject_constant,
            parse_int=_parse_int,
            parse_float=_parse_float,
        )
        return from_native(parsed)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedPayloadError(f"Invalid JSON: {exc}", cause=exc) from exc
    except RecursionError as exc:
        raise MalformedPayloadError("JSON nesting too deep", cause=exc) from exc


def encode(value: DynamicValue) -> str:
    """Serialise *value* to compact JSON text.

    Raises
    ------
    UnencodableNumberError
        When the tree holds a NaN or infinite number.
    """
    return json.dumps(
        _to_plain(value, strict=True),
        separators=_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
    )


def from_native(obj: Any) -> DynamicValue:
    """Convert plain Python data (``None``, bool, int, float, str, list,
    tuple, str-keyed dict) into a :data:`DynamicValue`.

    Dynamic values are returned unchanged. Anything else, enum members
    included, raises :class:`UnsupportedNativeTypeError`.
    """
    if isinstance(obj, DYNAMIC_VALUE_TYPES):
        return obj
    match obj:
        case None:
            return NULL
        case bool():
            return BoolValue(obj)
        case Enum():
            raise UnsupportedNativeTypeError(obj)
        case int():
            return NumberValue(int(obj))
        case float():
            return NumberValue(float(obj))
        case str():
            return StringValue(str(obj))
        case list() | tuple():
            return ListValue(tuple(from_native(item) for item in obj))
        case dict():
            entries: dict[str, DynamicValue] = {}
            for key, item in obj.items():
                if not isinstance(key, str):
                    raise UnsupportedNativeTypeError(key)
                entries[key] = from_native(item)
            return MapValue(entries)
        case _:
            raise UnsupportedNativeTypeError(obj)


def to_native(value: DynamicValue) -> Any:
    """Inverse of :func:`from_native`: lists for arrays, dicts for objects."""
    return _to_plain(value, strict=False)


def _to_plain(value: DynamicValue, *, strict: bool) -> Any:
    match value:
        case NullValue():
            return None
        case BoolValue(flag):
            return flag
        case NumberValue(number):
            if strict and isinstance(number, float) and not math.isfinite(number):
                raise UnencodableNumberError(number)
            return number
        case StringValue(text):
            return text
        case ListValue(items):
            return [_to_plain(item, strict=strict) for item in items]
        case MapValue(entries):
            return {key: _to_plain(item, strict=strict) for key, item in entries.items()}
        case _:
            raise UnsupportedNativeTypeError(value)


__all__ = ["decode", "encode", "from_native", "to_native"]
