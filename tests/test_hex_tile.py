import gc

from sphericalhex.hex_coord import HexCoord
from sphericalhex.hex_grid import Basis
from sphericalhex.hex_tile import HexTile
from sphericalhex.icosahedron import Vector3


def test_default_tile_is_at_origin_with_zero_coordinate():
    tile = HexTile()
    assert tile.coord == HexCoord(0, 0)
    assert tile.position == Vector3()
    assert tile.basis == Basis()
    assert tile.neighbors == []


def test_coordinate_includes_derived_s():
    tile = HexTile(HexCoord(2, -5))
    assert tile.coordinate == Vector3(2.0, -5.0, 3.0)


def test_reassigning_coord_updates_coordinate():
    tile = HexTile()
    tile.coord = HexCoord(-1, 4)
    assert tile.coordinate == Vector3(-1.0, 4.0, -3.0)


def test_connect_neighbors_keeps_order_and_ignores_non_tiles():
    tile = HexTile()
    a, b = HexTile(HexCoord(1, 0)), HexTile(HexCoord(0, 1))
    tile.connect_neighbors([a, "not a tile", None, b, 42])
    assert tile.neighbors == [a, b]


def test_connect_neighbors_replaces_previous_links():
    tile = HexTile()
    a, b = HexTile(), HexTile()
    tile.connect_neighbors([a])
    tile.connect_neighbors([b])
    assert tile.neighbors == [b]


def test_connect_neighbors_accepts_any_iterable():
    tile = HexTile()
    others = [HexTile(), HexTile(), HexTile()]
    tile.connect_neighbors(t for t in others)
    assert tile.neighbors == others


def test_discarded_neighbor_disappears():
    tile = HexTile()
    kept = HexTile()
    dropped = HexTile()
    tile.connect_neighbors([kept, dropped])
    del dropped
    gc.collect()
    assert tile.neighbors == [kept]


def test_links_are_one_directional():
    a, b = HexTile(), HexTile()
    a.connect_neighbors([b])
    assert a.neighbors == [b]
    assert b.neighbors == []