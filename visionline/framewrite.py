"""Write a complete frame, its image maps and its metadata, to files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from os import PathLike
from typing import Callable, Sequence

from visionline.frame_data import FrameData
from visionline.pngwrite import write_png_rgba, write_png_u16
from visionline.sdata import VisionarySData
from visionline.tmini_data import VisionaryTMiniData
from visionline.visionary_type import VisionaryType


@dataclass(frozen=True)
class _MapFile:
    """A map tag and the file name it is stored under."""

    tag: str
    filename: str


def _num(value: float) -> str:
    return f"{value:g}"


def _meta_text(
    visionary_type: VisionaryType, data: FrameData, maps: Sequence[_MapFile]
) -> str:
    params = data.camera_params
    lines = [
        "[ident]",
        f"visionarytype={visionary_type.to_string()}",
        "",
        "[frame]",
        f"framenumber={data.frame_num}",
        f"timestamp={data.timestamp}",
        f"width={data.width}",
        f"height={data.height}",
        "",
        "[intrinsics]",
        f"cx={_num(params.cx)}",
        f"cy={_num(params.cy)}",
        f"fx={_num(params.fx)}",
        f"fy={_num(params.fy)}",
        "",
        "[lensdistortion]",
        f"k1={_num(params.k1)}",
        f"k2={_num(params.k2)}",
        f"p1={_num(params.p1)}",
        f"p2={_num(params.p2)}",
        f"k3={_num(params.k3)}",
        "",
        "[cam2world]",
        f"f2rc={_num(params.f2rc)}",
        "cam2world=" + " ".join(_num(v) for v in params.cam2world_matrix[:16]),
        "",
        "[maps]",
    ]
    lines.extend(f"{m.tag}={m.filename}" for m in maps)
    return "\n".join(lines) + "\n"


def _map_plan(
    visionary_type: VisionaryType, data: FrameData
) -> list[tuple[str, Sequence[int], Callable[..., None]]]:
    if visionary_type is VisionaryType.VISIONARY_S:
        if not isinstance(data, VisionarySData):
            raise TypeError("Visionary-S frames need VisionarySData")
        return [
            ("rgba", data.rgba_map, write_png_rgba),
            ("z", data.z_map, write_png_u16),
            ("state", data.state_map, write_png_u16),
        ]
    if visionary_type is VisionaryType.VISIONARY_T_MINI:
        if not isinstance(data, VisionaryTMiniData):
            raise TypeError("Visionary-T Mini frames need VisionaryTMiniData")
        return [
            ("int", data.intensity_map, write_png_u16),
            ("dist", data.distance_map, write_png_u16),
            ("state", data.state_map, write_png_u16),
        ]
    raise ValueError("Unknown visionary type")


def write_frame(
    visionary_type: VisionaryType, data: FrameData, file_prefix: str | PathLike[str]
) -> list[str]:
    """Write the maps of a frame as PNG files and its metadata as an .ini file.

    Files are named by appending the frame number, the map tag and an
    extension to file_prefix: "<prefix><n>-<tag>.png" for each map and
    "<prefix><n>.ini" for the metadata, which lists the map files.
    Returns the paths written, the .ini file last. Raises OSError if a file
    cannot be written and TypeError if data does not fit visionary_type.
    """
    prefix = os.fspath(file_prefix)
    frame_prefix = str(data.frame_num)

    written: list[str] = []
    maps: list[_MapFile] = []
    for tag, values, writer in _map_plan(visionary_type, data):
        entry = _MapFile(tag, f"{frame_prefix}-{tag}.png")
        path = prefix + entry.filename
        writer(path, values, data.width, data.height)
        written.append(path)
        maps.append(entry)

    ini_path = prefix + frame_prefix + ".ini"
    with open(ini_path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(_meta_text(visionary_type, data, maps))
    written.append(ini_path)
    return written