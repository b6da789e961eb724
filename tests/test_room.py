import pytest

from dungeongen.room import Point, Room
from dungeongen.tiles import Tile


def test_create_room():
    room = Room.create(2, 12, 8, 9)
    assert (room.x, room.y) == (2, 12)
    assert room.x2 == 10
    assert room.y2 == 21
    assert room.centre == Point(6, 16)
    assert len(room.layout) == 9
    assert all(len(r) == 8 and set(r) == {Tile.WALKABLE} for r in room.layout)


def test_intersects():
    room = Room.create(2, 12, 8, 9)
    assert room.intersects(Room.create(3, 12, 8, 9))
    assert not room.intersects(Room.create(18, 20, 4, 4))


def test_edge_touching_rooms_intersect():
    a = Room.create(0, 0, 4, 4)
    assert a.intersects(Room.create(4, 0, 4, 4))
    assert not a.intersects(Room.create(5, 0, 4, 4))


def test_layout_must_match_size():
    with pytest.raises(ValueError):
        Room.create(0, 0, 3, 2, [[Tile.WALL] * 3])
    room = Room.create(1, 1, 2, 1, [[Tile.WALL, Tile.EMPTY]])
    assert list(room.cells()) == [(1, 1, Tile.WALL), (2, 1, Tile.EMPTY)]


def test_value_equality_and_dict():
    assert Room.create(1, 2, 3, 4) == Room.create(1, 2, 3, 4)
    d = Room.create(1, 2, 3, 1).to_dict()
    assert d["centre"] == {"x": 2, "y": 2}
    assert d["x2"] == 4 and d["y2"] == 3
    assert d["layout"] == [[1, 1, 1]]
