"""A sphere covered by tiles, built either geodesically or from hex patches."""

from __future__ import annotations

import math
from collections import defaultdict

from .hex_coord import HexCoord
from .hex_grid import Basis, HexGrid, HexGridSettings
from .hex_tile import HexTile
from .icosahedron import IcosahedronFace, Vector3, generate_icosahedron

_KEY_SCALE = 100000.0
_UP = Vector3(0.0, 1.0, 0.0)

_PositionKey = tuple[int, int, int]


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _position_key(point: Vector3) -> _PositionKey:
    """Quantise a direction so that nearly equal points share a key."""
    n = point.normalized()
    return (
        _round_half_away(n.x * _KEY_SCALE),
        _round_half_away(n.y * _KEY_SCALE),
        _round_half_away(n.z * _KEY_SCALE),
    )


def _orientation(normal: Vector3) -> Basis:
    """Return a basis whose z column follows ``normal``."""
    d = normal.dot(_UP)
    if d > 0.999:
        return Basis()
    if d < -0.999:
        c, s = math.cos(math.pi), math.sin(math.pi)
        return Basis(
            Vector3(1.0, 0.0, 0.0),
            Vector3(0.0, c, s),
            Vector3(0.0, -s, c),
        )
    right = _UP.cross(normal).normalized()
    up = normal.cross(right)
    return Basis(right, up, normal)


class SphericalHexGrid:
    """Tiles spread over a sphere of a given radius, linked to their neighbours."""

    def __init__(
        self,
        radius: float = 1.0,
        resolution: int = 1,
        hex_size: float = 0.1,
        use_geodesic: bool = True,
    ) -> None:
        self.radius = float(radius)
        self.resolution = resolution
        self.hex_size = float(hex_size)
        self.use_geodesic = use_geodesic
        self.faces: list[IcosahedronFace] = []
        self.tiles: list[HexTile] = []

    @property
    def resolution(self) -> int:
        return self._resolution

    @resolution.setter
    def resolution(self, value: int) -> None:
        self._resolution = max(0, int(value))

    def _create_tile(self, position: Vector3, normal: Vector3, coord: HexCoord) -> HexTile:
        tile = HexTile(coord, _orientation(normal), position * self.radius)
        self.tiles.append(tile)
        return tile

    def generate_grid(self) -> None:
        """Discard any existing tiles and build the grid from the current settings."""
        self.tiles = []
        self.faces = []
        base = generate_icosahedron()
        if self.use_geodesic:
            self._generate_geodesic(base)
        else:
            self._generate_hex_patches(base)

    def _generate_geodesic(self, base: list[IcosahedronFace]) -> None:
        subfaces = [sub for face in base for sub in face.subdivide(self.resolution)]

        index: dict[_PositionKey, int] = {}
        vertices: list[Vector3] = []

        def vertex_id(v: Vector3) -> int:
            n = v.normalized()
            key = _position_key(n)
            if key not in index:
                index[key] = len(vertices)
                vertices.append(n)
            return index[key]

        adjacency: defaultdict[int, set[int]] = defaultdict(set)
        for face in subfaces:
            a, b, c = (vertex_id(v) for v in face.vertices)
            adjacency[a].update((b, c))
            adjacency[b].update((a, c))
            adjacency[c].update((a, b))

        tiles = [self._create_tile(p, p, HexCoord()) for p in vertices]
        for i, tile in enumerate(tiles):
            tile.connect_neighbors([tiles[j] for j in sorted(adjacency[i])])

    def _generate_hex_patches(self, base: list[IcosahedronFace]) -> None:
        self.faces = list(base)
        settings = HexGridSettings(self.hex_size, int(6.0 * 2.0 ** self.resolution))
        grid = HexGrid(settings)
        for i, face in enumerate(self.faces):
            grid.generate_on_face(face, i)

        by_key: dict[_PositionKey, HexTile] = {}
        created = []
        for face_coord, position in grid.positions.items():
            p = position.normalized()
            key = _position_key(p)
            if key in by_key:
                continue
            tile = self._create_tile(p, p, face_coord.hex)
            by_key[key] = tile
            created.append((face_coord, tile))

        for face_coord, tile in created:
            keys = (_position_key(n) for n in grid.get_neighbor_positions(face_coord))
            tile.connect_neighbors([by_key[k] for k in keys if k in by_key])

    def get_tile_at_position(self, world_pos: Vector3) -> HexTile | None:
        """Return the tile nearest to ``world_pos``, or None if there are no tiles."""
        best: HexTile | None = None
        best_d2 = 1e30
        for tile in self.tiles:
            d2 = (tile.position - world_pos).length_squared()
            if d2 < best_d2:
                best_d2 = d2
                best = tile
        return best