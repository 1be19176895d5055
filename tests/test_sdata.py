import struct

import pytest

from visionline.frame_data import FrameParseError
from visionline.sdata import VisionarySData


def make_xml(width=2, height=1, transform=None, exponent=0, fx=146.5):
    transform = list(range(16)) if transform is None else transform
    values = "".join(f"<value>{v}</value>" for v in transform)
    return (
        "<SickRecord><DataSets><DataSetStereo><FormatDescriptionDepthMap><DataStream>"
        f"<Width>{width}</Width><Height>{height}</Height>"
        f"<CameraToWorldTransform>{values}</CameraToWorldTransform>"
        f"<CameraMatrix><FX>{fx}</FX><FY>2.5</FY><CX>3.5</CX><CY>4.5</CY></CameraMatrix>"
        "<CameraDistortionParams><K1>0.1</K1><K2>0.2</K2><P1>0.3</P1><P2>0.4</P2>"
        "<K3>0.5</K3></CameraDistortionParams>"
        "<FocalToRayCross>7.5</FocalToRayCross>"
        f'<Z decimalexponent="{exponent}">uint16</Z>'
        "<Intensity>uint32</Intensity><Confidence>uint16</Confidence>"
        "</DataStream></FormatDescriptionDepthMap></DataSetStereo></DataSets></SickRecord>"
    )


def make_blob(images, *, version=2, frame_num=7, timestamp=123456789,
              length=None, length_copy=None):
    header_len = 14 + (6 if version > 1 else 0)
    total = header_len + len(images) + 8
    length = total if length is None else length
    length_copy = length if length_copy is None else length_copy
    blob = struct.pack("<IQH", length, timestamp, version)
    if version > 1:
        blob += struct.pack("<IBB", frame_num, 0, 0)
    return blob + images + struct.pack("<II", 0, length_copy)


Z = [1, 65535]
RGBA = [0x11223344, 5]
STATE = [0, 9]
IMAGES = struct.pack("<2H", *Z) + struct.pack("<2I", *RGBA) + struct.pack("<2H", *STATE)


@pytest.fixture
def frame():
    data = VisionarySData()
    data.parse_xml(make_xml(), 1)
    return data


def test_parse_xml_reads_parameters(frame):
    params = frame.camera_params
    assert (frame.width, frame.height) == (2, 1)
    assert params.cam2world_matrix == [float(v) for v in range(16)]
    assert params.fx == 146.5
    assert (params.k3, params.f2rc) == (0.5, 7.5)


def test_scale_z_from_decimal_exponent():
    data = VisionarySData()
    data.parse_xml(make_xml(exponent=-3), 1)
    assert data.scale_z == pytest.approx(10.0 ** -3)


def test_parse_binary_data_extracts_maps(frame):
    frame.parse_binary_data(make_blob(IMAGES, frame_num=7, timestamp=123456789))
    assert frame.z_map == Z
    assert frame.rgba_map == RGBA
    assert frame.state_map == STATE
    assert frame.frame_num == 7
    assert frame.timestamp == 123456789


def test_version_one_increments_frame_number(frame):
    frame.parse_binary_data(make_blob(IMAGES, frame_num=41))
    previous = frame.frame_num
    frame.parse_binary_data(make_blob(IMAGES, version=1))
    assert frame.frame_num == previous + 1
    assert frame.z_map == Z


def test_same_change_counter_skips_parsing(frame):
    frame.parse_xml("not xml at all", 1)
    assert frame.width == 2


def test_malformed_xml_raises():
    with pytest.raises(FrameParseError):
        VisionarySData().parse_xml("<SickRecord>", 3)


def test_missing_data_stream_raises():
    with pytest.raises(FrameParseError):
        VisionarySData().parse_xml("<SickRecord><DataSets/></SickRecord>", 3)


def test_binary_before_xml_is_invalid_image_size():
    with pytest.raises(FrameParseError, match="Invalid image size"):
        VisionarySData().parse_binary_data(make_blob(IMAGES))


def test_short_header_raises(frame):
    with pytest.raises(FrameParseError, match="header"):
        frame.parse_binary_data(b"\x00" * 10)


def test_length_larger_than_package_raises(frame):
    blob = make_blob(IMAGES)
    with pytest.raises(FrameParseError, match="length"):
        frame.parse_binary_data(make_blob(IMAGES, length=len(blob) + 1))


def test_length_copy_mismatch_raises(frame):
    blob = make_blob(IMAGES)
    with pytest.raises(FrameParseError, match="does not match"):
        frame.parse_binary_data(make_blob(IMAGES, length_copy=len(blob) - 1))