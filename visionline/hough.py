"""Hough transform for detecting 3D lines in a point cloud."""

from __future__ import annotations

import math
from array import array
from dataclasses import dataclass

from visionline.pointcloud import PointCloud
from visionline.sphere import Sphere
from visionline.vector3d import Vector3d


def _round_half_away(num: float) -> int:
    return math.floor(num + 0.5) if num > 0.0 else math.ceil(num - 0.5)


@dataclass(frozen=True)
class HoughLine:
    """A line given by an anchor point and a direction, with its vote count."""

    point: Vector3d
    direction: Vector3d
    votes: int


class Hough:
    """Accumulator over line directions and positions in the perpendicular plane."""

    def __init__(
        self,
        min_p: Vector3d,
        max_p: Vector3d,
        dx: float = 0.0,
        sphere_granularity: int = 4,
    ) -> None:
        self.sphere = Sphere()
        self.sphere.from_icosahedron(sphere_granularity)
        self.num_b = len(self.sphere.vertices)

        self.max_x = max(max_p.norm(), min_p.norm())
        range_x = 2 * self.max_x
        self.dx = dx if dx != 0.0 else range_x / 64.0
        if self.dx == 0.0:
            raise ValueError("bounding box is degenerate: cannot derive a step size")
        self.num_x = _round_half_away(range_x / self.dx)

        self.voting_space = array("q", [0]) * (self.num_x * self.num_x * self.num_b)

    def add(self, pc: PointCloud) -> None:
        """Add the votes of every point of the cloud."""
        for point in pc.points:
            self._point_vote(point, 1)

    def subtract(self, pc: PointCloud) -> None:
        """Withdraw the votes of every point of the cloud."""
        for point in pc.points:
            self._point_vote(point, -1)

    def _point_vote(self, point: Vector3d, delta: int) -> None:
        size = len(self.voting_space)
        for j, b in enumerate(self.sphere.vertices):
            beta = 1 / (1 + b.z)
            x_new = (
                (1 - beta * (b.x * b.x)) * point.x
                - (beta * (b.x * b.y)) * point.y
                - b.x * point.z
            )
            y_new = (
                (-beta * (b.x * b.y)) * point.x
                + (1 - beta * (b.y * b.y)) * point.y
                - b.y * point.z
            )
            x_i = _round_half_away((x_new + self.max_x) / self.dx)
            y_i = _round_half_away((y_new + self.max_x) / self.dx)
            if x_i < 0 or y_i < 0:
                continue
            index = x_i * self.num_x * self.num_b + y_i * self.num_b + j
            if index < size:
                self.voting_space[index] += delta

    def get_line(self) -> HoughLine:
        """Return the line with the most votes."""
        votes = max(self.voting_space, default=0)
        if votes <= 0:
            votes, index = 0, 0
        else:
            index = self.voting_space.index(votes)

        plane = self.num_x * self.num_b
        xi, index = divmod(index, plane)
        yi, index = divmod(index, self.num_b)
        x = xi * self.dx - self.max_x
        y = yi * self.dx - self.max_x

        b = self.sphere.vertices[index]
        anchor = Vector3d(
            x * (1 - (b.x * b.x) / (1 + b.z)) - y * ((b.x * b.y) / (1 + b.z)),
            x * (-((b.x * b.y) / (1 + b.z))) + y * (1 - (b.y * b.y) / (1 + b.z)),
            -x * b.x - y * b.y,
        )
        return HoughLine(anchor, b, votes)