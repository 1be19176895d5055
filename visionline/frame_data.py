"""Frame data shared by the Visionary device types."""

from __future__ import annotations

import struct
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

_ITEM_LENGTHS = {
    "int8": 1,
    "uint8": 1,
    "int16": 2,
    "uint16": 2,
    "int32": 4,
    "uint32": 4,
    "int64": 8,
    "uint64": 8,
    "float32": 4,
    "float64": 8,
}

_HEADER = struct.Struct("<IQH")  # length, timestamp, version
_EXTENDED_HEADER = struct.Struct("<IBB")  # frame number, data quality, device status
_FOOTER = struct.Struct("<II")  # crc (unused), copy of length


def item_length(type_name: str) -> int:
    """Byte size of one pixel of the named data type; 0 for an absent or unknown type."""
    return _ITEM_LENGTHS.get(type_name.strip().lower(), 0)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass
class PointXYZ:
    """A 3D point in single precision, as delivered by the device."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class CameraParameters:
    """Image geometry, intrinsics, lens distortion and camera-to-world transform."""

    width: int = 0
    height: int = 0
    cam2world_matrix: list[float] = field(default_factory=lambda: [0.0] * 16)
    fx: float = 0.0
    fy: float = 0.0
    cx: float = 0.0
    cy: float = 0.0
    k1: float = 0.0
    k2: float = 0.0
    p1: float = 0.0
    p2: float = 0.0
    k3: float = 0.0
    f2rc: float = 0.0


class FrameParseError(ValueError):
    """Raised when the XML or binary part of a frame is malformed."""


def _element_text(elem: ET.Element | None, path: str) -> str | None:
    if elem is None:
        return None
    child = elem.find(path)
    if child is None:
        return None
    return (child.text or "").strip()


def _as_int(text: str | None, default: int = 0) -> int:
    try:
        return int(text)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def _as_float(text: str | None, default: float = 0.0) -> float:
    try:
        return float(text)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def _decode_map(raw: bytes, fmt: str, count: int) -> list[int]:
    """Decode count little-endian items of type fmt from raw, zero-padding short input."""
    size = struct.calcsize(fmt) * count
    raw = raw[:size].ljust(size, b"\x00")
    return list(struct.unpack(f"<{count}{fmt}", raw))


class FrameData(ABC):
    """Common state of a received frame: camera parameters, timestamp, frame number."""

    def __init__(self) -> None:
        self.camera_params = CameraParameters()
        self.change_counter: int | None = None
        self.frame_num = 0
        self.timestamp = 0
        self.scale_z = 1.0

    @property
    def width(self) -> int:
        return self.camera_params.width

    @property
    def height(self) -> int:
        return self.camera_params.height

    @abstractmethod
    def parse_xml(self, xml_string: str, change_counter: int) -> None:
        """Read the metadata describing the binary part of the frame."""

    @abstractmethod
    def parse_binary_data(self, data: bytes) -> None:
        """Extract the image maps from the binary part of the frame."""

    def _begin_xml(self, xml_string: str, change_counter: int) -> ET.Element | None:
        """Parse the XML document, or return None if it is unchanged since last time."""
        if self.change_counter == change_counter:
            return None
        self.change_counter = change_counter
        try:
            return ET.fromstring(xml_string)
        except ET.ParseError as exc:
            raise FrameParseError("Reading XML tree in BLOB failed.") from exc

    def _read_camera_params(self, stream: ET.Element | None, with_transform: bool) -> None:
        params = self.camera_params
        params.width = _as_int(_element_text(stream, "Width"))
        params.height = _as_int(_element_text(stream, "Height"))

        if with_transform:
            transform = stream.find("CameraToWorldTransform") if stream is not None else None
            if transform is None:
                raise FrameParseError("missing CameraToWorldTransform in frame metadata")
            entries = list(transform)
            if len(entries) > len(params.cam2world_matrix):
                raise FrameParseError("CameraToWorldTransform has more than 16 entries")
            for i, item in enumerate(entries):
                params.cam2world_matrix[i] = _as_float((item.text or "").strip())
        else:
            params.cam2world_matrix = [0.0] * 16

        params.fx = _as_float(_element_text(stream, "CameraMatrix/FX"))
        params.fy = _as_float(_element_text(stream, "CameraMatrix/FY"))
        params.cx = _as_float(_element_text(stream, "CameraMatrix/CX"))
        params.cy = _as_float(_element_text(stream, "CameraMatrix/CY"))
        params.k1 = _as_float(_element_text(stream, "CameraDistortionParams/K1"))
        params.k2 = _as_float(_element_text(stream, "CameraDistortionParams/K2"))
        params.p1 = _as_float(_element_text(stream, "CameraDistortionParams/P1"))
        params.p2 = _as_float(_element_text(stream, "CameraDistortionParams/P2"))
        params.k3 = _as_float(_element_text(stream, "CameraDistortionParams/K3"))
        params.f2rc = _as_float(_element_text(stream, "FocalToRayCross"))

    def _pixel_count(self) -> int:
        if self.camera_params.height < 1 or self.camera_params.width < 1:
            raise FrameParseError("Invalid image size")
        return self.camera_params.width * self.camera_params.height

    def _read_header(self, data: bytes) -> tuple[int, int]:
        """Read the segment header; return the length field and the offset after it."""
        size = len(data)
        if size < _HEADER.size:
            raise FrameParseError(
                "Malformed data. Did not receive enough data to parse header of binary segment"
            )
        length, timestamp, version = _HEADER.unpack_from(data, 0)
        if length > size:
            raise FrameParseError(
                "Malformed data, length in depth map header does not match package size."
            )
        self.timestamp = timestamp
        offset = _HEADER.size

        if version > 1:
            if size - offset < _EXTENDED_HEADER.size:
                raise FrameParseError(
                    "Malformed data. Did not receive enough data to parse extended header "
                    "of binary segment"
                )
            self.frame_num, _quality, _status = _EXTENDED_HEADER.unpack_from(data, offset)
            offset += _EXTENDED_HEADER.size
        else:
            self.frame_num = (self.frame_num + 1) & 0xFFFFFFFF
        return length, offset

    @staticmethod
    def _require_images(data: bytes, offset: int, image_set_size: int) -> None:
        if len(data) - offset < image_set_size:
            raise FrameParseError(
                "Malformed data. Did not receive enough data to parse images of binary segment"
            )

    @staticmethod
    def _check_footer(data: bytes, offset: int, length: int) -> None:
        if len(data) - offset < _FOOTER.size:
            raise FrameParseError(
                "Malformed data. Did not receive enough data to parse footer of binary segment"
            )
        _crc, length_copy = _FOOTER.unpack_from(data, offset)
        if length != length_copy:
            raise FrameParseError(
                f"Malformed data, length in header({length}) does not match "
                f"package size({length_copy})."
            )