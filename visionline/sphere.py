"""Direction quantisation by subdividing an icosahedron."""

from __future__ import annotations

import math
import struct

from visionline.vector3d import Vector3d

_ICOSAHEDRON_TRIANGLES = (
    (0, 1, 2), (0, 1, 3), (0, 2, 4), (0, 4, 6), (0, 3, 6),
    (1, 2, 5), (1, 3, 7), (1, 5, 7), (2, 4, 8), (2, 5, 8),
    (3, 6, 9), (3, 7, 9), (4, 8, 10), (8, 10, 11), (5, 8, 11),
    (5, 7, 11), (7, 9, 11), (9, 10, 11), (6, 9, 10), (4, 6, 10),
)


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _normalized_sum(p: Vector3d, q: Vector3d) -> Vector3d:
    s = p + q
    return s / s.norm()


class Sphere:
    """Unit direction vectors on a hemisphere, with their surface triangles."""

    def __init__(self) -> None:
        self.vertices: list[Vector3d] = []
        self.triangles: list[tuple[int, int, int]] = []

    def from_icosahedron(self, sub_divisions: int = 4) -> None:
        """Build the directions by repeated subdivision of an icosahedron."""
        self._icosahedron()
        for _ in range(sub_divisions):
            self._subdivide()
        self._make_unique()

    def _icosahedron(self) -> None:
        tau = _f32(1.61803399)
        norm = _f32(math.sqrt(_f32(1 + _f32(tau * tau))))
        v = _f32(1 / norm)
        tau = _f32(tau / norm)
        self.vertices = [
            Vector3d(-v, tau, 0), Vector3d(v, tau, 0),
            Vector3d(0, v, -tau), Vector3d(0, v, tau),
            Vector3d(-tau, 0, -v), Vector3d(tau, 0, -v),
            Vector3d(-tau, 0, v), Vector3d(tau, 0, v),
            Vector3d(0, -v, -tau), Vector3d(0, -v, tau),
            Vector3d(-v, -tau, 0), Vector3d(v, -tau, 0),
        ]
        self.triangles = list(_ICOSAHEDRON_TRIANGLES)

    def _subdivide(self) -> None:
        added: dict[Vector3d, int] = {}

        def index_of(vec: Vector3d) -> int:
            idx = added.get(vec)
            if idx is None:
                idx = len(self.vertices)
                self.vertices.append(vec)
                added[vec] = idx
            return idx

        refined = []
        for ai, bi, ci in self.triangles:
            a, b, c = self.vertices[ai], self.vertices[bi], self.vertices[ci]
            d = _normalized_sum(a, b)
            e = _normalized_sum(c, b)
            f = _normalized_sum(a, c)
            di, ei, fi = index_of(d), index_of(e), index_of(f)
            refined.extend(
                [(ai, di, fi), (di, bi, ei), (fi, ei, ci), (fi, di, ei)]
            )
        self.triangles = refined

    def _make_unique(self) -> None:
        i = 0
        while i < len(self.vertices):
            v = self.vertices[i]
            redundant = v.z < 0 or (
                v.z == 0 and (v.x < 0 or (v.x == 0 and v.y == -1))
            )
            if redundant:
                del self.vertices[i]
                self._drop_vertex(i)
            else:
                i += 1

    def _drop_vertex(self, index: int) -> None:
        self.triangles = [
            tuple(k - 1 if k > index else k for k in tri)
            for tri in self.triangles
            if index not in tri
        ]