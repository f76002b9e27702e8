"""Wire shapes exchanged between host and client.

The host owns the actual encoding. These helpers describe the mapping it is
expected to follow: scalars map to numbers, strings, booleans and null;
homogeneous numeric sequences map to typed binary arrays; other sequences map
to generic arrays and string-keyed dicts map to objects.
"""

from __future__ import annotations

from array import array
from collections.abc import Mapping, Sequence
from typing import Any

_TYPECODE_ARRAYS = {
    "b": "Int8Array",
    "B": "Uint8Array",
    "h": "Int16Array",
    "H": "Uint16Array",
    "f": "Float32Array",
    "d": "Float64Array",
}

_INT_RANGES = (
    ("Int8Array", -(2**7), 2**7 - 1),
    ("Uint8Array", 0, 2**8 - 1),
    ("Int16Array", -(2**15), 2**15 - 1),
    ("Uint16Array", 0, 2**16 - 1),
    ("Int32Array", -(2**31), 2**31 - 1),
    ("Uint32Array", 0, 2**32 - 1),
)


def is_raw_value(value: Any) -> bool:
    """Check that `value` has one of the shapes a client can send."""

    if value is None or isinstance(value, (bool, int, float, str)):
        return True
    if isinstance(value, list):
        return all(is_raw_value(item) for item in value)
    if isinstance(value, dict):
        return all(isinstance(key, str) and is_raw_value(item) for key, item in value.items())
    return False


def typed_array_name(value: Any) -> str | None:
    """Name of the typed array a numeric sequence is sent as, or None for a generic array."""

    if isinstance(value, (bytes, bytearray, memoryview)):
        return "Uint8Array"
    if isinstance(value, array):
        if value.typecode in _TYPECODE_ARRAYS:
            return _TYPECODE_ARRAYS[value.typecode]
        if value.typecode not in "iIlLqQ":
            return None
        return _int_array_name(value.itemsize * 8, signed=value.typecode.islower())
    if isinstance(value, (str, Mapping)) or not isinstance(value, Sequence) or not value:
        return None
    if all(isinstance(item, float) for item in value):
        return "Float64Array"
    if all(isinstance(item, int) and not isinstance(item, bool) for item in value):
        low, high = min(value), max(value)
        for name, lower, upper in _INT_RANGES:
            if lower <= low and high <= upper:
                return name
    return None


def _int_array_name(bits: int, *, signed: bool) -> str | None:
    if bits > 32:
        return None
    prefix = "Int" if signed else "Uint"
    return f"{prefix}{bits}Array"
