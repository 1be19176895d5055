"""Three-dimensional vectors with the usual arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vector3d:
    """An immutable 3D vector of doubles."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"({self.x:g},{self.y:g},{self.z:g})"

    def __add__(self, other: Vector3d) -> Vector3d:
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3d) -> Vector3d:
        if not isinstance(other, Vector3d):
            return NotImplemented
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3d:
        return Vector3d(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vector3d:
        if isinstance(factor, Vector3d) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Vector3d(factor * self.x, factor * self.y, factor * self.z)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vector3d:
        if isinstance(divisor, Vector3d) or not isinstance(divisor, (int, float)):
            return NotImplemented
        return Vector3d(self.x / divisor, self.y / divisor, self.z / divisor)

    def __matmul__(self, other: Vector3d) -> float:
        if not isinstance(other, Vector3d):
            return NotImplemented
        return self.dot(other)

    def dot(self, other: Vector3d) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        """Euclidean norm."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def cross(self, other: Vector3d) -> Vector3d:
        """Cross product."""
        return Vector3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )