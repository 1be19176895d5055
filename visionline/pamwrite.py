"""Writers for PAM (portable arbitrary map) image files."""

from __future__ import annotations

import struct
from os import PathLike
from typing import Sequence


def _header(width: int, height: int, depth: int, maxval: int, tupltype: str) -> bytes:
    return (
        "P7\n"
        f"WIDTH {width}\n"
        f"HEIGHT {height}\n"
        f"DEPTH {depth}\n"
        f"MAXVAL {maxval}\n"
        f"TUPLTYPE {tupltype}\n"
        "ENDHDR\n"
    ).encode("ascii")


def _pack(fmt: str, data: Sequence[int]) -> bytes:
    values = list(data)
    try:
        return struct.pack(f"{fmt[0]}{len(values)}{fmt[1]}", *values)
    except struct.error as exc:
        raise ValueError(f"pixel value out of range: {exc}") from exc


def write_pam_u16(path: str | PathLike[str], data: Sequence[int],
                  width: int, height: int) -> None:
    """Write 16-bit grayscale samples as a PAM file, big-endian per sample.

    Raises OSError if the file cannot be written and ValueError on a
    sample outside 0..65535.
    """
    payload = _pack(">H", data)
    with open(path, "wb") as handle:
        handle.write(_header(width, height, 1, 65535, "GRAYSCALE"))
        handle.write(payload)


def write_pam_rgba(path: str | PathLike[str], data: Sequence[int],
                   width: int, height: int) -> None:
    """Write 32-bit RGBA pixels as a PAM file.

    Each pixel holds red in its lowest byte, then green, blue and alpha.
    Raises OSError if the file cannot be written and ValueError on a
    pixel outside the 32-bit range.
    """
    payload = _pack("<I", data)
    with open(path, "wb") as handle:
        handle.write(_header(width, height, 4, 255, "RGB_ALPHA"))
        handle.write(payload)