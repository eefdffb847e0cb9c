"""Axial hexagon coordinates."""

from __future__ import annotations

from dataclasses import dataclass

_DIRECTIONS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


@dataclass(frozen=True, slots=True)
class HexCoord:
    """A hexagon in axial coordinates; the cube coordinate ``s`` is derived."""

    q: int = 0
    r: int = 0

    @property
    def s(self) -> int:
        return -self.q - self.r

    def neighbors(self) -> list[HexCoord]:
        """Return the six adjacent hexagons in a fixed direction order."""
        return [HexCoord(self.q + dq, self.r + dr) for dq, dr in _DIRECTIONS]