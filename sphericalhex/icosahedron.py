"""Vectors, icosahedron faces and their geodesic subdivision."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

PHI = 1.618033988749895
PHI_NORM = 0.8506508083520399
ONE_NORM = 0.5257311121191336


@dataclass(frozen=True, slots=True)
class Vector3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector3:
        """Return a unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector3()
        return self / length


class IcosahedronFace:
    """A triangle with its unit normal, as used to build the sphere."""

    __slots__ = ("vertices", "normal")

    def __init__(self, a: Vector3, b: Vector3, c: Vector3) -> None:
        self.vertices: tuple[Vector3, Vector3, Vector3] = (a, b, c)
        self.normal: Vector3 = (b - a).cross(c - a).normalized()

    def __repr__(self) -> str:
        a, b, c = self.vertices
        return f"IcosahedronFace({a!r}, {b!r}, {c!r})"

    def center(self) -> Vector3:
        """Return the centroid of the triangle (not projected onto the sphere)."""
        a, b, c = self.vertices
        return (a + b + c) / 3.0

    def subdivide(self, depth: int) -> list[IcosahedronFace]:
        """Split into 4**depth triangles, projecting new midpoints onto the unit sphere."""
        if depth < 0:
            raise ValueError("subdivision depth must not be negative")
        if depth == 0:
            return [self]
        a, b, c = self.vertices
        mid_ab = (a + b).normalized()
        mid_bc = (b + c).normalized()
        mid_ca = (c + a).normalized()
        children = (
            IcosahedronFace(a, mid_ab, mid_ca),
            IcosahedronFace(mid_ab, b, mid_bc),
            IcosahedronFace(mid_ca, mid_bc, c),
            IcosahedronFace(mid_ab, mid_bc, mid_ca),
        )
        return [face for child in children for face in child.subdivide(depth - 1)]


_VERTICES: tuple[Vector3, ...] = (
    Vector3(ONE_NORM, 0.0, PHI_NORM),
    Vector3(-ONE_NORM, 0.0, PHI_NORM),
    Vector3(ONE_NORM, 0.0, -PHI_NORM),
    Vector3(-ONE_NORM, 0.0, -PHI_NORM),
    Vector3(0.0, PHI_NORM, ONE_NORM),
    Vector3(0.0, -PHI_NORM, ONE_NORM),
    Vector3(0.0, PHI_NORM, -ONE_NORM),
    Vector3(0.0, -PHI_NORM, -ONE_NORM),
    Vector3(PHI_NORM, ONE_NORM, 0.0),
    Vector3(-PHI_NORM, ONE_NORM, 0.0),
    Vector3(PHI_NORM, -ONE_NORM, 0.0),
    Vector3(-PHI_NORM, -ONE_NORM, 0.0),
)

_FACES: tuple[tuple[int, int, int], ...] = (
    (0, 4, 8), (0, 8, 10), (0, 10, 5), (0, 5, 1), (0, 1, 4),
    (4, 1, 9), (8, 4, 6), (10, 8, 2), (5, 10, 7), (1, 5, 11),
    (3, 6, 9), (3, 9, 11), (3, 11, 7), (3, 7, 2), (3, 2, 6),
    (9, 6, 4), (6, 2, 8), (2, 7, 10), (7, 11, 5), (11, 9, 1),
)


def generate_icosahedron() -> list[IcosahedronFace]:
    """Return the 20 faces of a unit icosahedron."""
    return [IcosahedronFace(*(_VERTICES[i] for i in face)) for face in _FACES]