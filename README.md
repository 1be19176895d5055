# visionline

Pure-Python tools for 3D point clouds and for frames from Visionary stereo
and time-of-flight cameras. It needs nothing outside the standard library.

## Geometry and line detection

- `visionline.vector3d.Vector3d`: an immutable 3D vector. It has `norm()`,
  `dot()` and `cross()`, supports `+`, `-`, unary `-`, multiplication and
  division by a number, and `a @ b` for the scalar product.
- `visionline.pointcloud.PointCloud`: a list of `points` plus the total
  `shift` applied so far.
  - `read_from_file(path, delim)` appends points from a text file with one
    `x<delim>y<delim>z` line per point. Lines starting with `#` are skipped.
    A file that cannot be opened raises `OSError`. A malformed line raises
    `PointCloudError`, and the points read before that line are kept.
  - `min_max_3d()` returns the two corners of the bounding box, and
    `mean_value()` returns the centre of gravity. An empty cloud gives the
    origin for both.
  - `shift_to_origin()` moves the cloud so that the centre of its bounding
    box lies at the origin.
  - `points_close_to_line(a, b, dx)` returns a new cloud holding the points
    within `dx` of the line `a + t*b`.
  - `remove_points(other)` removes the points of `other`. They must appear in
    the same order in both clouds.
- `visionline.sphere.Sphere`: unit directions on a half sphere.
  `from_icosahedron(sub_divisions=4)` builds them by repeatedly subdividing an
  icosahedron and fills `vertices` and `triangles`.
- `visionline.hough.Hough(min_p, max_p, dx=0.0, sphere_granularity=4)`: the
  accumulator for a 3D line Hough transform.
  - A `dx` of `0.0` picks a step of 1/64 of the range. A degenerate bounding
    box raises `ValueError`.
  - `add(cloud)` votes the points of a cloud in, and `subtract(cloud)` takes
    their votes out again.
  - `get_line()` returns a `HoughLine` with `point`, `direction` and `votes`
    for the cell that has the most votes.

```python
from visionline.hough import Hough
from visionline.pointcloud import PointCloud
from visionline.vector3d import Vector3d

cloud = PointCloud([Vector3d(float(t), 0.0, 0.0) for t in range(-5, 6)])
low, high = cloud.min_max_3d()
hough = Hough(low, high, dx=0.5, sphere_granularity=2)
hough.add(cloud)
line = hough.get_line()
print(line.votes, line.point, line.direction)
```

## Camera frames

- `visionline.frame_data`: the pieces shared by both camera types.
  - `PointXYZ` and `CameraParameters`.
  - `item_length(type_name)` gives the byte size of a pixel type such as
    `"uint16"`, and 0 for an unknown type.
  - `FrameData` is the common base class. It holds `camera_params`,
    `frame_num`, `timestamp`, `scale_z`, `width` and `height`.
  - `FrameParseError` is raised for malformed XML or binary data.
- `visionline.sdata.VisionarySData`: `parse_xml(xml_string, change_counter)`
  reads the metadata. It does nothing if the counter has not changed since
  the last call. `parse_binary_data(data)` then fills `z_map`, `rgba_map` and
  `state_map`.
- `visionline.tmini_data.VisionaryTMiniData`: the same two methods fill
  `distance_map`, `intensity_map` and `state_map`. `has_depth_map` tells
  whether the frame carried a depth map at all. `DISTANCE_MAP_UNIT` (0.25) is
  the distance scale.
- `visionline.visionary_type.VisionaryType`: the product types
  `VISIONARY_S` and `VISIONARY_T_MINI`, with `from_string`, `to_string` and
  `names`. An unknown name raises `ValueError`.
- `visionline.framewrite.write_frame(visionary_type, data, file_prefix)`
  writes files named after the frame number `<n>`:
  - each map as `<prefix><n>-<tag>.png`;
  - an `<prefix><n>.ini` file with the product type, frame number, timestamp,
    image size, intrinsics, lens distortion, the camera-to-world transform
    and the list of map files.

  It returns the paths it wrote. A data object that does not match the
  product type raises `TypeError`.

```python
from visionline.visionary_type import VisionaryType

camera = VisionaryType.from_string("Visionary-T_Mini")
print(camera.to_string())      # Visionary-T_Mini
print(VisionaryType.names())   # ['Visionary-S', 'Visionary-T_Mini']
```

## Helpers

- `visionline.pamwrite`: `write_pam_u16` and `write_pam_rgba` write 16-bit
  grayscale and 8-bit RGBA PAM files.
- `visionline.pngwrite`: `write_png_u16` and `write_png_rgba` write the same
  two kinds of image as PNG files. Bad dimensions, a wrong pixel count or an
  out-of-range value raise `ValueError`.
- `visionline.endian`: `byteswap`, `to_bytes`, `from_bytes` and `read_from`
  convert fixed-size values given by a struct format character. The byte order
  is chosen with `ByteOrder` (`LITTLE`, `BIG` or `NATIVE`).
- `visionline.numeric`: `cast_clamped(value, target_type)` converts a number
  to a `NumericType` and clamps it to that type's range.
- `visionline.cola`: the enums `CoLaCommandType` and `UserLevel`, the
  abstract `Authentication` and `Transport` interfaces, and `SockRecord`.

## What it does not do

The package does not talk to a camera:

- There is no network client, no CoLa session handling and no frame grabbing.
  `Transport` and `Authentication` are interfaces only.
- Frames must be handed to `parse_xml` and `parse_binary_data` by the caller.
- The parsed maps are not turned into point clouds.
- There is no command-line program.

## Running the tests

The test suite uses pytest, which the `test` extra installs:

```
pip install -e .[test]
pytest
```