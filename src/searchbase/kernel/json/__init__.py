"""Kernel JSON – type-erased JSON values (DynamicValue) and their codec."""
from searchbase.kernel.json.codec import decode, encode, from_native, to_native
from searchbase.kernel.json.value import (
    NULL,
    BoolValue,
    DynamicValue,
    ListValue,
    MapValue,
    NullValue,
    NumberValue,
    StringValue,
)

__all__ = [
    "BoolValue",
    "DynamicValue",
    "ListValue",
    "MapValue",
    "NULL",
    "NullValue",
    "NumberValue",
    "StringValue",
    "decode",
    "encode",
    "from_native",
    "to_native",
]
