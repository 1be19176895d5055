"""Numeric conversion with clamping to the target type's value range."""

from __future__ import annotations

import math
import struct
import sys
from enum import Enum


class NumericType(Enum):
    """Fixed-size numeric types that values can be clamped to."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    @property
    def is_float(self) -> bool:
        return self in (NumericType.FLOAT32, NumericType.FLOAT64)

    @property
    def lowest(self) -> int | float:
        """Smallest (most negative) representable value."""
        return _LIMITS[self][0]

    @property
    def max(self) -> int | float:
        """Largest representable value."""
        return _LIMITS[self][1]


def _int_limits(bits: int, signed: bool) -> tuple[int, int]:
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


_FLT_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]

_LIMITS: dict[NumericType, tuple[int | float, int | float]] = {
    NumericType.INT8: _int_limits(8, True),
    NumericType.INT16: _int_limits(16, True),
    NumericType.INT32: _int_limits(32, True),
    NumericType.INT64: _int_limits(64, True),
    NumericType.UINT8: _int_limits(8, False),
    NumericType.UINT16: _int_limits(16, False),
    NumericType.UINT32: _int_limits(32, False),
    NumericType.UINT64: _int_limits(64, False),
    NumericType.FLOAT32: (-_FLT_MAX, _FLT_MAX),
    NumericType.FLOAT64: (-sys.float_info.max, sys.float_info.max),
}


def cast_clamped(value: int | float, target_type: NumericType) -> int | float:
    """Convert value to target_type, clamping it into the target's range.

    Floats converted to integer types are truncated toward zero.
    A NaN cannot be converted to an integer type and raises ValueError.
    """
    if isinstance(value, bool):
        value = int(value)
    lo, hi = target_type.lowest, target_type.max

    if target_type.is_float:
        if isinstance(value, float):
            if math.isnan(value):
                return value
            if target_type is NumericType.FLOAT64:
                return value
        if value >= hi:
            return hi
        if value <= lo:
            return lo
        result = float(value)
        if target_type is NumericType.FLOAT32:
            result = struct.unpack("f", struct.pack("f", result))[0]
        return result

    if isinstance(value, float) and math.isnan(value):
        raise ValueError("cannot convert NaN to an integer type")
    if value >= hi:
        return hi
    if value <= lo:
        return lo
    return int(value)