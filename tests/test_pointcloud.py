import pytest

from visionline.pointcloud import PointCloud, PointCloudError
from visionline.vector3d import Vector3d


def _cloud():
    return PointCloud(
        [
            Vector3d(1, 2, 3),
            Vector3d(-1, 4, 0),
            Vector3d(3, -2, 5),
            Vector3d(0, 0, 1),
        ]
    )


def test_empty_cloud_defaults():
    pc = PointCloud()
    assert pc.points == []
    assert pc.shift == Vector3d()
    assert pc.mean_value() == Vector3d()
    assert pc.min_max_3d() == (Vector3d(), Vector3d())


def test_mean_of_symmetric_points_is_centre():
    centre = Vector3d(2, -1, 5)
    offsets = [Vector3d(1, 0, 0), Vector3d(0, 2, 0), Vector3d(0, 0, 3)]
    pts = [centre + o for o in offsets] + [centre - o for o in offsets]
    assert PointCloud(pts).mean_value() == centre


def test_min_max_bounds_every_point():
    pc = _cloud()
    low, high = pc.min_max_3d()
    for p in pc.points:
        assert low.x <= p.x <= high.x
        assert low.y <= p.y <= high.y
        assert low.z <= p.z <= high.z
    assert low.x == min(p.x for p in pc.points)
    assert high.z == max(p.z for p in pc.points)


def test_shift_to_origin_centres_bounding_box():
    pc = _cloud()
    original = list(pc.points)
    pc.shift_to_origin()
    low, high = pc.min_max_3d()
    assert low + high == Vector3d()
    assert [p + pc.shift for p in pc.points] == original


def test_shift_accumulates():
    pc = _cloud()
    pc.shift_to_origin()
    first = pc.shift
    pc.shift_to_origin()
    assert pc.shift == first


def test_read_from_file_space_and_trailing_text(tmp_path):
    path = tmp_path / "cloud.txt"
    path.write_text("1 2 3 extra\n4\t5  6\n")
    pc = PointCloud()
    pc.read_from_file(path, " ")
    assert pc.points == [Vector3d(1, 2, 3), Vector3d(4, 5, 6)]


def test_read_appends_to_existing_points(tmp_path):
    path = tmp_path / "cloud.csv"
    path.write_text("7,8,9\n")
    pc = PointCloud([Vector3d(1, 1, 1)])
    pc.read_from_file(path, ",")
    assert pc.points == [Vector3d(1, 1, 1), Vector3d(7, 8, 9)]


def test_read_malformed_line_raises_and_keeps_earlier(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("1,2,3\n1;2;3\n4,5,6\n")
    pc = PointCloud()
    with pytest.raises(PointCloudError):
        pc.read_from_file(path, ",")
    assert pc.points == [Vector3d(1, 2, 3)]


def test_read_blank_line_is_malformed(tmp_path):
    path = tmp_path / "blank.csv"
    path.write_text("1,2,3\n\n")
    with pytest.raises(PointCloudError):
        PointCloud().read_from_file(path, ",")


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        PointCloud().read_from_file(tmp_path / "missing.csv", ",")


def test_read_rejects_long_delimiter(tmp_path):
    path = tmp_path / "x.csv"
    path.write_text("1,2,3\n")
    with pytest.raises(ValueError):
        PointCloud().read_from_file(path, ",,")


def test_points_close_to_line():
    pc = PointCloud(
        [
            Vector3d(0, 0, 0),
            Vector3d(5, 0.5, 0),
            Vector3d(2, 3, 0),
            Vector3d(-7, 0, -0.25),
        ]
    )
    close = pc.points_close_to_line(Vector3d(), Vector3d(1, 0, 0), 1.0)
    assert close.points == [pc.points[0], pc.points[1], pc.points[3]]
    assert close.shift == Vector3d()


def test_points_close_to_line_boundary_inclusive():
    pc = PointCloud([Vector3d(3, 0, 2)])
    close = pc.points_close_to_line(Vector3d(), Vector3d(1, 0, 0), 2.0)
    assert close.points == pc.points


def test_remove_points_in_order():
    pc = _cloud()
    other = PointCloud([pc.points[1], pc.points[3]])
    pc.remove_points(other)
    assert pc.points == [Vector3d(1, 2, 3), Vector3d(3, -2, 5)]


def test_remove_points_empty_other_is_noop():
    pc = _cloud()
    before = list(pc.points)
    pc.remove_points(PointCloud())
    assert pc.points == before


def test_remove_close_points_round_trip():
    pc = _cloud()
    close = pc.points_close_to_line(Vector3d(), Vector3d(0, 0, 1), 1.5)
    total = len(pc.points)
    pc.remove_points(close)
    assert len(pc.points) == total - len(close.points)
    assert all(p not in close.points for p in pc.points)