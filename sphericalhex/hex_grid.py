"""Flat hexagon grids laid onto icosahedron faces and projected onto the sphere."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .hex_coord import HexCoord
from .icosahedron import IcosahedronFace, Vector3

_SQRT_3 = 1.7320508075688772


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True, slots=True)
class Basis:
    """A 3x3 basis given by its columns ``x``, ``y`` and ``z``."""

    x: Vector3 = Vector3(1.0, 0.0, 0.0)
    y: Vector3 = Vector3(0.0, 1.0, 0.0)
    z: Vector3 = Vector3(0.0, 0.0, 1.0)

    def xform(self, v: Vector3) -> Vector3:
        """Transform ``v`` by this basis."""
        return self.x * v.x + self.y * v.y + self.z * v.z


@dataclass
class HexGridSettings:
    hex_size: float = 0.1
    grid_radius: int = 1


@dataclass
class FaceGridData:
    face_index: int
    face: IcosahedronFace
    local_coords: list[HexCoord]
    center: Vector3
    orientation: Basis


@dataclass(frozen=True, slots=True)
class FaceHexCoord:
    """A hexagon coordinate qualified by the face it lies on."""

    face_index: int = 0
    hex: HexCoord = field(default_factory=HexCoord)


def hex_to_pixel(hex_coord: HexCoord, size: float) -> tuple[float, float]:
    """Return the flat-top planar centre of a hexagon."""
    return (
        size * (1.5 * hex_coord.q),
        size * (_SQRT_3 / 2.0 * hex_coord.q + _SQRT_3 * hex_coord.r),
    )


def pixel_to_hex(point: tuple[float, float], size: float) -> HexCoord:
    """Return the hexagon that contains a planar point."""
    px, py = point
    q = (2.0 / 3.0 * px) / size
    r = (-1.0 / 3.0 * px + _SQRT_3 / 3.0 * py) / size
    s = -q - r
    rq, rr, rs = _round_half_away(q), _round_half_away(r), _round_half_away(s)
    q_diff, r_diff, s_diff = abs(rq - q), abs(rr - r), abs(rs - s)
    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs
    return HexCoord(int(rq), int(rr))


class HexGrid:
    """Hexagon positions on the unit sphere, one flat patch per face."""

    def __init__(self, settings: HexGridSettings) -> None:
        self.settings = settings
        self.positions: dict[FaceHexCoord, Vector3] = {}
        self.face_grids: list[FaceGridData] = []

    def generate_on_face(self, face: IcosahedronFace, face_index: int) -> None:
        """Lay a hexagonal patch on ``face`` and record its projected positions."""
        center = face.center().normalized()
        normal = face.normal
        v0, v1, _ = face.vertices
        tangent = (v1 - v0).normalized()
        bitangent = normal.cross(tangent).normalized()
        tangent = bitangent.cross(normal).normalized()
        orientation = Basis(tangent, bitangent, normal)

        radius = self.settings.grid_radius
        local: list[HexCoord] = []
        for q in range(-radius, radius + 1):
            for r in range(-radius, radius + 1):
                if abs(-q - r) > radius:
                    continue
                coord = HexCoord(q, r)
                px, py = hex_to_pixel(coord, self.settings.hex_size)
                offset = orientation.xform(Vector3(px, py, 0.0))
                world = (center + offset).normalized()
                self.positions.setdefault(FaceHexCoord(face_index, coord), world)
                local.append(coord)

        self.face_grids.append(
            FaceGridData(face_index, face, local, center, orientation)
        )

    def get_neighbor_positions(self, coord: FaceHexCoord) -> list[Vector3]:
        """Return positions of the generated neighbours on the same face."""
        found = (
            self.positions.get(FaceHexCoord(coord.face_index, n))
            for n in coord.hex.neighbors()
        )
        return [p for p in found if p is not None]