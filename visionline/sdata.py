"""Frame data of the Visionary-S stereo camera."""

from __future__ import annotations

from visionline.frame_data import (
    FrameData,
    FrameParseError,
    _as_int,
    _decode_map,
    _element_text,
    _f32,
    item_length,
)

_STREAM_PATH = "DataSets/DataSetStereo/FormatDescriptionDepthMap/DataStream"


class VisionarySData(FrameData):
    """Z, RGBA and state maps of a Visionary-S frame."""

    def __init__(self) -> None:
        super().__init__()
        self._z_depth = 0
        self._rgba_depth = 0
        self._confidence_depth = 0
        self.z_map: list[int] = []
        self.rgba_map: list[int] = []
        self.state_map: list[int] = []

    def parse_xml(self, xml_string: str, change_counter: int) -> None:
        """Read the metadata; nothing is done if change_counter equals the last one."""
        root = self._begin_xml(xml_string, change_counter)
        if root is None:
            return
        stream = root.find(_STREAM_PATH) if root.tag == "SickRecord" else None
        if stream is None:
            raise FrameParseError(f"missing SickRecord/{_STREAM_PATH} in frame metadata")

        self._read_camera_params(stream, with_transform=True)

        self._z_depth = item_length(_element_text(stream, "Z") or "")
        self._rgba_depth = item_length(_element_text(stream, "Intensity") or "")
        self._confidence_depth = item_length(_element_text(stream, "Confidence") or "")

        z_elem = stream.find("Z")
        exponent = _as_int(z_elem.get("decimalexponent") if z_elem is not None else None)
        self.scale_z = _f32(10.0 ** exponent)

    def parse_binary_data(self, data: bytes) -> None:
        """Extract the maps; raise FrameParseError on malformed data."""
        data = bytes(data)
        num_pixel = self._pixel_count()
        n_z = num_pixel * self._z_depth
        n_rgba = num_pixel * self._rgba_depth
        n_conf = num_pixel * self._confidence_depth

        length, offset = self._read_header(data)
        self._require_images(data, offset, n_z + n_rgba + n_conf)

        self.z_map = _decode_map(data[offset:offset + n_z], "H", num_pixel)
        offset += n_z
        self.rgba_map = _decode_map(data[offset:offset + n_rgba], "I", num_pixel)
        offset += n_rgba
        self.state_map = _decode_map(data[offset:offset + n_conf], "H", num_pixel)
        offset += n_conf

        self._check_footer(data, offset, length)