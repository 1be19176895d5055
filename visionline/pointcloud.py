"""A set of 3D points with simple geometric helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike

from visionline.vector3d import Vector3d

_FLOAT = r"([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))"


class PointCloudError(ValueError):
    """Raised when a point cloud file holds a malformed line."""


def _line_pattern(delim: str) -> re.Pattern[str]:
    if len(delim) != 1:
        raise ValueError("delimiter must be a single character")
    sep = r"\s*" if delim.isspace() else re.escape(delim)
    number = r"\s*" + _FLOAT
    return re.compile(number + sep + number + sep + number, re.IGNORECASE)


@dataclass
class PointCloud:
    """Points of a cloud, and the total translation applied by shift_to_origin."""

    points: list[Vector3d] = field(default_factory=list)
    shift: Vector3d = field(default_factory=Vector3d)

    def shift_to_origin(self) -> None:
        """Translate the cloud so that its bounding-box centre is the origin."""
        low, high = self.min_max_3d()
        offset = (low + high) / 2.0
        self.points = [p - offset for p in self.points]
        self.shift = self.shift + offset

    def mean_value(self) -> Vector3d:
        """Centre of gravity; the origin for an empty cloud."""
        total = Vector3d()
        for p in self.points:
            total = total + p
        if self.points:
            return total / float(len(self.points))
        return total

    def min_max_3d(self) -> tuple[Vector3d, Vector3d]:
        """Corners of the axis-aligned bounding box; origins for an empty cloud."""
        if not self.points:
            return Vector3d(), Vector3d()
        low = Vector3d(
            min(p.x for p in self.points),
            min(p.y for p in self.points),
            min(p.z for p in self.points),
        )
        high = Vector3d(
            max(p.x for p in self.points),
            max(p.y for p in self.points),
            max(p.z for p in self.points),
        )
        return low, high

    def read_from_file(self, path: str | PathLike[str], delim: str) -> None:
        """Append points read from a text file of delimited x, y, z lines.

        Lines starting with '#' are skipped. Raises OSError when the file
        cannot be opened and PointCloudError on a malformed line; points
        read before the bad line are kept.
        """
        pattern = _line_pattern(delim)
        with open(path, "r", encoding="utf-8") as handle:
            for lineno, line in enumerate(handle, start=1):
                if line.startswith("#"):
                    continue
                match = pattern.match(line)
                if match is None:
                    raise PointCloudError(
                        f"{path}:{lineno}: expected three numbers separated by {delim!r}"
                    )
                self.points.append(Vector3d(*(float(g) for g in match.groups())))

    def points_close_to_line(self, a: Vector3d, b: Vector3d, dx: float) -> PointCloud:
        """Return the points whose distance to the line a + t*b is at most dx."""
        close = PointCloud()
        for p in self.points:
            t = b.dot(p - a)
            d = p - (a + t * b)
            if d.norm() <= dx:
                close.points.append(p)
        return close

    def remove_points(self, other: PointCloud) -> None:
        """Remove the points of other, which must appear in the same order here."""
        if not other.points:
            return
        wanted = other.points
        j = 0
        remaining = []
        for p in self.points:
            if j < len(wanted) and p == wanted[j]:
                j += 1
            else:
                remaining.append(p)
        self.points = remaining