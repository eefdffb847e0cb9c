import pytest

from sphericalhex.hex_coord import HexCoord


def test_default_is_origin():
    origin = HexCoord()
    assert (origin.q, origin.r, origin.s) == (0, 0, 0)


@pytest.mark.parametrize("q,r", [(0, 0), (3, -1), (-4, 7), (2, 2)])
def test_s_is_derived(q, r):
    coord = HexCoord(q, r)
    assert coord.q + coord.r + coord.s == 0


def test_origin_neighbors_follow_direction_table():
    assert HexCoord().neighbors() == [
        HexCoord(1, 0),
        HexCoord(1, -1),
        HexCoord(0, -1),
        HexCoord(-1, 0),
        HexCoord(-1, 1),
        HexCoord(0, 1),
    ]


@pytest.mark.parametrize("q,r", [(0, 0), (5, -2), (-3, -3)])
def test_neighbors_are_distinct_and_adjacent(q, r):
    coord = HexCoord(q, r)
    neighbors = coord.neighbors()
    assert len(set(neighbors)) == 6
    assert coord not in neighbors
    for n in neighbors:
        distance = max(abs(n.q - coord.q), abs(n.r - coord.r), abs(n.s - coord.s))
        assert distance == 1
        assert coord in n.neighbors()


def test_equality_and_hashing():
    table = {HexCoord(1, 2): "a"}
    assert HexCoord(1, 2) == HexCoord(1, 2)
    assert HexCoord(1, 2) != HexCoord(2, 1)
    assert table[HexCoord(1, 2)] == "a"


def test_is_immutable():
    coord = HexCoord(1, 1)
    with pytest.raises(AttributeError):
        coord.q = 5  # type: ignore[misc]
    assert (coord.q, coord.r, coord.s) == (1, 1, -2)
    assert coord == HexCoord(1, 1)