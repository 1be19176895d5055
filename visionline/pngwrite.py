"""Writers for PNG image files."""

from __future__ import annotations

import struct
import zlib
from os import PathLike
from typing import Sequence

_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_MAX_DIMENSION = 2**31 - 1

_COLOR_GRAYSCALE = 0
_COLOR_TRUECOLOR_ALPHA = 6


def _chunk(tag: bytes, body: bytes) -> bytes:
    crc = zlib.crc32(tag + body) & 0xFFFFFFFF
    return struct.pack(">I", len(body)) + tag + body + struct.pack(">I", crc)


def _pixels(fmt: str, data: Sequence[int], width: int, height: int) -> bytes:
    for name, dim in (("width", width), ("height", height)):
        if not 1 <= dim <= _MAX_DIMENSION:
            raise ValueError(f"{name} must be between 1 and {_MAX_DIMENSION}, got {dim}")
    values = list(data)
    if len(values) != width * height:
        raise ValueError(
            f"expected {width * height} pixels for {width}x{height}, got {len(values)}"
        )
    try:
        return struct.pack(f"{fmt[0]}{len(values)}{fmt[1]}", *values)
    except struct.error as exc:
        raise ValueError(f"pixel value out of range: {exc}") from exc


def _write_png(path: str | PathLike[str], pixels: bytes, width: int, height: int,
               bit_depth: int, color_type: int) -> None:
    stride = len(pixels) // height
    scanlines = b"".join(
        b"\x00" + pixels[row * stride:(row + 1) * stride] for row in range(height)
    )
    ihdr = struct.pack(">IIBBBBB", width, height, bit_depth, color_type, 0, 0, 0)
    with open(path, "wb") as handle:
        handle.write(_SIGNATURE)
        handle.write(_chunk(b"IHDR", ihdr))
        handle.write(_chunk(b"IDAT", zlib.compress(scanlines)))
        handle.write(_chunk(b"IEND", b""))


def write_png_u16(path: str | PathLike[str], data: Sequence[int],
                  width: int, height: int) -> None:
    """Write 16-bit grayscale samples, row by row, as a PNG file.

    Raises OSError if the file cannot be written and ValueError on bad
    dimensions, a pixel count other than width * height, or a sample
    outside 0..65535.
    """
    pixels = _pixels(">H", data, width, height)
    _write_png(path, pixels, width, height, 16, _COLOR_GRAYSCALE)


def write_png_rgba(path: str | PathLike[str], data: Sequence[int],
                   width: int, height: int) -> None:
    """Write 32-bit RGBA pixels, row by row, as an 8-bit-per-channel PNG file.

    Each pixel holds red in its lowest byte, then green, blue and alpha.
    Raises OSError if the file cannot be written and ValueError on bad
    dimensions, a pixel count other than width * height, or a pixel
    outside the 32-bit range.
    """
    pixels = _pixels("<I", data, width, height)
    _write_png(path, pixels, width, height, 8, _COLOR_TRUECOLOR_ALPHA)