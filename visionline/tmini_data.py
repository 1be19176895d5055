"""Frame data of the Visionary-T Mini time-of-flight camera."""

from __future__ import annotations

from visionline.frame_data import (
    FrameData,
    _decode_map,
    _element_text,
    item_length,
)


class VisionaryTMiniData(FrameData):
    """Distance, intensity and state maps of a Visionary-T Mini frame."""

    DISTANCE_MAP_UNIT = 0.25
    """Factor converting the fixed-point radial distance map to millimetres."""

    def __init__(self) -> None:
        super().__init__()
        self.has_depth_map = False
        self._distance_depth = 0
        self._intensity_depth = 0
        self._state_depth = 0
        self.distance_map: list[int] = []
        self.intensity_map: list[int] = []
        self.state_map: list[int] = []

    def parse_xml(self, xml_string: str, change_counter: int) -> None:
        """Read the metadata; nothing is done if change_counter equals the last one."""
        root = self._begin_xml(xml_string, change_counter)
        if root is None:
            return
        data_sets = root.find("DataSets") if root.tag == "SickRecord" else None
        depth_map = data_sets.find("DataSetDepthMap") if data_sets is not None else None
        self.has_depth_map = depth_map is not None

        stream = (
            depth_map.find("FormatDescriptionDepthMap/DataStream")
            if depth_map is not None
            else None
        )
        self._read_camera_params(stream, with_transform=self.has_depth_map)

        self._distance_depth = item_length(_element_text(stream, "Distance") or "")
        self._intensity_depth = item_length(_element_text(stream, "Intensity") or "")
        self._state_depth = item_length(_element_text(stream, "Confidence") or "")

        self.scale_z = self.DISTANCE_MAP_UNIT

    def parse_binary_data(self, data: bytes) -> None:
        """Extract the maps; raise FrameParseError on malformed data."""
        data = bytes(data)
        num_pixel = self._pixel_count()

        if not self.has_depth_map:
            self.distance_map = []
            self.intensity_map = []
            self.state_map = []
            return

        n_dist = num_pixel * self._distance_depth
        n_int = num_pixel * self._intensity_depth
        n_state = num_pixel * self._state_depth

        length, offset = self._read_header(data)
        self._require_images(data, offset, n_dist + n_int + n_state)

        def take(count: int) -> list[int]:
            nonlocal offset
            if count == 0:
                return []
            values = _decode_map(data[offset:offset + count], "H", num_pixel)
            offset += count
            return values

        self.distance_map = take(n_dist)
        self.intensity_map = take(n_int)
        self.state_map = take(n_state)

        self._check_footer(data, offset, length)