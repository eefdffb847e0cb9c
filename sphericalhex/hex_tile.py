"""A single tile of the spherical grid and its links to neighbouring tiles."""

from __future__ import annotations

import weakref
from collections.abc import Iterable

from .hex_coord import HexCoord
from .hex_grid import Basis
from .icosahedron import Vector3


class HexTile:
    """A tile placed on the sphere, holding weak links to its neighbours."""

    def __init__(
        self,
        coord: HexCoord | None = None,
        basis: Basis | None = None,
        position: Vector3 | None = None,
    ) -> None:
        self.coord: HexCoord = coord if coord is not None else HexCoord()
        self.basis: Basis = basis if basis is not None else Basis()
        self.position: Vector3 = position if position is not None else Vector3()
        self._neighbor_refs: list[weakref.ref[HexTile]] = []

    def __repr__(self) -> str:
        return f"HexTile(coord={self.coord!r}, position={self.position!r})"

    @property
    def coordinate(self) -> Vector3:
        """The cube coordinate (q, r, s) of the tile as a vector."""
        return Vector3(float(self.coord.q), float(self.coord.r), float(self.coord.s))

    @property
    def neighbors(self) -> list[HexTile]:
        """The linked neighbours that still exist, in the order they were linked."""
        alive = (ref() for ref in self._neighbor_refs)
        return [tile for tile in alive if tile is not None]

    def connect_neighbors(self, tiles: Iterable[object]) -> None:
        """Replace the neighbour links with the tiles found in ``tiles``.

        Items that are not tiles are ignored. Links are weak, so a neighbour
        that is discarded elsewhere simply disappears from ``neighbors``.
        """
        self._neighbor_refs = [
            weakref.ref(tile) for tile in tiles if isinstance(tile, HexTile)
        ]