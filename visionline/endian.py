"""Byte-order conversion of fixed-size numeric values.

Types are named by their struct format character:
b, B (8 bit), h, H (16 bit), i, I (32 bit), q, Q (64 bit), f (float), d (double).
"""

from __future__ import annotations

import struct
import sys
from enum import Enum
from functools import lru_cache
from itertools import islice
from typing import Iterable

_FORMATS = frozenset("bBhHiIqQfd")


class ByteOrder(Enum):
    """Byte orders; NATIVE is an alias of the host's own order."""

    LITTLE = "<"
    BIG = ">"
    NATIVE = "<" if sys.byteorder == "little" else ">"


@lru_cache(maxsize=None)
def _codec(fmt: str, byteorder: ByteOrder) -> struct.Struct:
    if not isinstance(fmt, str) or len(fmt) != 1 or fmt not in _FORMATS:
        raise ValueError(f"unsupported format {fmt!r}")
    return struct.Struct(byteorder.value + fmt)


def _pack(codec: struct.Struct, value: int | float) -> bytes:
    try:
        return codec.pack(value)
    except (struct.error, OverflowError) as exc:
        raise ValueError(f"{value!r} does not fit format {codec.format!r}") from exc


def byteswap(value: int | float, fmt: str) -> int | float:
    """Return value with the order of its bytes reversed, as the same type."""
    raw = _pack(_codec(fmt, ByteOrder.LITTLE), value)
    return _codec(fmt, ByteOrder.BIG).unpack(raw)[0]


def to_bytes(
    value: int | float,
    fmt: str,
    byteorder: ByteOrder = ByteOrder.NATIVE,
    capacity: int = 0,
) -> bytearray:
    """Encode value in the given byte order.

    The result always holds exactly one value; capacity is a size hint for
    callers that go on to append to it and must not be negative.
    """
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    return bytearray(_pack(_codec(fmt, byteorder), value))


def from_bytes(data: bytes | bytearray | memoryview, fmt: str,
               byteorder: ByteOrder = ByteOrder.NATIVE) -> int | float:
    """Decode one value from the start of data."""
    codec = _codec(fmt, byteorder)
    if len(data) < codec.size:
        raise ValueError(
            f"need {codec.size} bytes to decode {fmt!r}, got {len(data)}"
        )
    return codec.unpack_from(data)[0]


def read_from(iterator: Iterable[int], fmt: str,
              byteorder: ByteOrder = ByteOrder.NATIVE) -> int | float:
    """Consume exactly one value's worth of byte values from iterator and decode them.

    Raises ValueError if the input ends before a complete value was read.
    """
    codec = _codec(fmt, byteorder)
    buf = bytes(islice(iterator, codec.size))
    if len(buf) < codec.size:
        raise ValueError("input ended before a complete value was read")
    return codec.unpack(buf)[0]