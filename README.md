# sphericalhex

This package builds tile grids on the surface of a sphere. A game can place units, terrain or regions on the tiles and move between neighbouring tiles.

The package lays out tiles in one of two ways:

- **Geodesic mode** is the default. Each face of an icosahedron is split `resolution` times into four smaller triangles. Every distinct vertex becomes a tile, and tiles joined by a triangle edge are neighbours.
- **Hex-on-face mode** places a patch of axial hex coordinates on each of the 20 icosahedron faces. The patch radius is `int(6 * 2 ** resolution)` and the spacing is `hex_size`. Each patch is projected onto the unit sphere. Points that round to the same place (five decimal places) are merged into one tile. Neighbours are linked only within a face.

## Installation

```
pip install sphericalhex
```

The package has no runtime dependencies. To run the tests:

```
pip install "sphericalhex[test]"
pytest
```

## Usage

```python
from sphericalhex.spherical_hex_grid import SphericalHexGrid
from sphericalhex.icosahedron import Vector3

grid = SphericalHexGrid(radius=2.0, resolution=2, use_geodesic=True)
grid.generate_grid()

print(len(grid.tiles))
tile = grid.get_tile_at_position(Vector3(0.0, 2.0, 0.0))
print(tile.coordinate)          # cube coordinate (q, r, s) as a Vector3
for neighbour in tile.neighbors:
    print(neighbour.position)
```

`SphericalHexGrid` takes these settings, which you can also change as attributes before calling `generate_grid()`:

- `radius` (default `1.0`)
- `resolution` (default `1`; a negative value is clamped to `0`)
- `hex_size` (default `0.1`)
- `use_geodesic` (default `True`)

Each call to `generate_grid()` discards the existing tiles and builds a new set.

`get_tile_at_position(world_pos)` returns the tile whose `position` is nearest to `world_pos`. It returns `None` when the grid has no tiles.

Every tile is oriented so that its basis `z` column follows the surface normal, and its `position` is scaled by `radius`. In geodesic mode every tile has the coordinate `HexCoord(0, 0)`. In hex-on-face mode a tile keeps the axial coordinate it had on its face.

### Building blocks

- `sphericalhex.hex_coord.HexCoord` is a frozen axial coordinate `(q, r)` with the derived property `s = -q - r`. `neighbors()` returns the six adjacent coordinates in a fixed order.
- `sphericalhex.icosahedron` provides:
  - `Vector3`, an immutable vector with `+`, `-`, scalar `*` and `/`, and the methods `dot`, `cross`, `length`, `length_squared` and `normalized`.
  - `IcosahedronFace`, which holds `vertices` and a unit `normal`. `center()` returns the centroid. `subdivide(depth)` returns `4 ** depth` faces with their midpoints projected onto the unit sphere; a negative depth raises `ValueError`.
  - `generate_icosahedron()`, which returns the 20 faces of a unit icosahedron.
- `sphericalhex.hex_grid` provides:
  - `hex_to_pixel(hex_coord, size)`, which returns the flat-top planar centre of a hex as an `(x, y)` tuple.
  - `pixel_to_hex(point, size)`, which returns the `HexCoord` containing an `(x, y)` point.
  - `Basis`, given by its column vectors, with `xform(v)`.
  - `HexGrid(HexGridSettings(hex_size, grid_radius))`. Its `generate_on_face(face, face_index)` fills `positions`, a dict keyed by `FaceHexCoord`. Its `get_neighbor_positions(coord)` returns the positions of the generated neighbours on the same face.
- `sphericalhex.hex_tile.HexTile` holds a `coord`, a `basis` and a `position`, and exposes:
  - `coordinate` and `neighbors` as properties.
  - `connect_neighbors(tiles)`, which replaces the neighbour links. Items in `tiles` that are not `HexTile` are ignored. Links are weak references, so a discarded neighbour drops out of `neighbors`.

## What this package does not do

The package only computes tiles, their positions, orientations and neighbour links. It does not render, display or animate anything. It does not handle scenes or input. It does not save or load grids.