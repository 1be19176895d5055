"""Point clouds, 3D Hough line detection, and parsing and writing of Visionary camera frames."""

__version__ = "0.1.0"

__all__ = [
    "cola",
    "endian",
    "frame_data",
    "framewrite",
    "hough",
    "numeric",
    "pamwrite",
    "pngwrite",
    "pointcloud",
    "sdata",
    "sphere",
    "tmini_data",
    "vector3d",
    "visionary_type",
]