import pytest

from visionline.pamwrite import write_pam_rgba, write_pam_u16

U16_HEADER = (
    b"P7\nWIDTH 2\nHEIGHT 2\nDEPTH 1\nMAXVAL 65535\nTUPLTYPE GRAYSCALE\nENDHDR\n"
)
RGBA_HEADER = (
    b"P7\nWIDTH 2\nHEIGHT 1\nDEPTH 4\nMAXVAL 255\nTUPLTYPE RGB_ALPHA\nENDHDR\n"
)


def _split(content):
    marker = b"ENDHDR\n"
    end = content.index(marker) + len(marker)
    return content[:end], content[end:]


def test_u16_header(tmp_path):
    target = tmp_path / "img.pam"
    write_pam_u16(target, [0, 1, 2, 3], 2, 2)
    header, _ = _split(target.read_bytes())
    assert header == U16_HEADER


def test_u16_samples_round_trip(tmp_path):
    target = tmp_path / "img.pam"
    values = [0, 1, 0x0102, 65535]
    write_pam_u16(target, values, 2, 2)
    _, body = _split(target.read_bytes())
    assert len(body) == 2 * len(values)
    decoded = [int.from_bytes(body[k:k + 2], "big") for k in range(0, len(body), 2)]
    assert decoded == values


def test_u16_big_endian_bytes(tmp_path):
    target = tmp_path / "img.pam"
    write_pam_u16(target, [0x0102], 1, 1)
    _, body = _split(target.read_bytes())
    assert body == b"\x01\x02"


def test_rgba_header(tmp_path):
    target = tmp_path / "img.pam"
    write_pam_rgba(target, [0, 0], 2, 1)
    header, _ = _split(target.read_bytes())
    assert header == RGBA_HEADER


def test_rgba_pixels_round_trip(tmp_path):
    target = tmp_path / "img.pam"
    values = [0xAABBCCDD, 0x00000000, 0xFFFFFFFF, 0x11223344]
    write_pam_rgba(target, values, 4, 1)
    _, body = _split(target.read_bytes())
    assert len(body) == 4 * len(values)
    decoded = [int.from_bytes(body[k:k + 4], "little") for k in range(0, len(body), 4)]
    assert decoded == values


def test_rgba_red_first(tmp_path):
    target = tmp_path / "img.pam"
    write_pam_rgba(target, [0xAABBCCDD], 1, 1)
    _, body = _split(target.read_bytes())
    assert body[0] == 0xDD and body[3] == 0xAA


def test_empty_data_writes_header_only(tmp_path):
    target = tmp_path / "img.pam"
    write_pam_u16(target, [], 2, 2)
    assert target.read_bytes() == U16_HEADER


def test_unwritable_path(tmp_path):
    with pytest.raises(OSError):
        write_pam_u16(tmp_path / "missing" / "img.pam", [1], 1, 1)


def test_u16_value_out_of_range(tmp_path):
    with pytest.raises(ValueError):
        write_pam_u16(tmp_path / "img.pam", [65536], 1, 1)


def test_rgba_value_out_of_range(tmp_path):
    with pytest.raises(ValueError):
        write_pam_rgba(tmp_path / "img.pam", [-1], 1, 1)