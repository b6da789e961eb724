import pytest

from dungeongen.errors import ConfigError, OutOfBoundsError
from dungeongen.level import NEIGHBOURS, Level
from dungeongen.room import Room
from dungeongen.tiles import Tile


def make_level(w=10, h=8):
    return Level.create(w, h, "hash", 4, 5)


def snapshot(level):
    return [row[:] for row in level.board]


def test_create_is_empty():
    level = make_level()
    assert len(level.board) == 8 and all(len(r) == 10 for r in level.board)
    assert level.count(Tile.EMPTY) == 80
    assert level.rooms == []
    assert level.tile_size == 16


def test_create_rejects_bad_dimensions():
    with pytest.raises(ConfigError):
        Level.create(0, 5, "h", 4, 5)


def test_add_room_stamps_and_records():
    level = make_level()
    room = Room.create(2, 1, 3, 2)
    level.add_room(room)
    assert level.rooms == [room]
    assert level.count(Tile.WALKABLE) == 6
    assert level.tile(2, 1) is Tile.WALKABLE
    assert level.tile(4, 2) is Tile.WALKABLE
    assert level.tile(5, 2) is Tile.EMPTY


def test_later_rooms_overwrite():
    level = make_level()
    level.add_room(Room.create(0, 0, 3, 3))
    level.add_room(Room.create(1, 1, 1, 1, [[Tile.WALL]]))
    assert level.tile(1, 1) is Tile.WALL
    assert len(level.rooms) == 2


def test_carve_does_not_register():
    level = make_level()
    level.carve(Room.create(0, 0, 2, 1))
    assert level.rooms == []
    assert level.count(Tile.WALKABLE) == 2


@pytest.mark.parametrize("room", [
    Room.create(-1, 0, 2, 2),
    Room.create(0, -1, 2, 2),
    Room.create(9, 0, 2, 2),
    Room.create(0, 7, 2, 2),
])
def test_out_of_bounds_is_an_error(room):
    level = make_level()
    with pytest.raises(OutOfBoundsError):
        level.add_room(room)
    assert level.count(Tile.EMPTY) == 80
    assert level.rooms == []


def test_add_walls_rings_a_room():
    level = make_level()
    level.add_room(Room.create(3, 3, 2, 2))
    level.add_walls()
    assert level.count(Tile.WALKABLE) == 4
    assert level.count(Tile.WALL) == 12  # 4x4 ring minus the 2x2 room
    assert level.tile(2, 2) is Tile.WALL
    assert level.tile(5, 5) is Tile.WALL
    assert level.tile(1, 1) is Tile.EMPTY


def test_add_walls_clips_at_edges():
    level = make_level(3, 3)
    level.add_room(Room.create(0, 0, 1, 1))
    level.add_walls()
    assert level.count(Tile.WALL) == 3


def test_add_walls_soundness_and_idempotence():
    level = make_level()
    level.add_room(Room.create(0, 0, 3, 2))
    level.add_room(Room.create(6, 4, 2, 3))
    before = snapshot(level)
    level.add_walls()
    after = snapshot(level)
    for y in range(level.height):
        for x in range(level.width):
            if after[y][x] is Tile.WALL:
                assert before[y][x] is Tile.EMPTY
                assert any(
                    level.in_bounds(x + dx, y + dy) and before[y + dy][x + dx] is Tile.WALKABLE
                    for dx, dy in NEIGHBOURS
                )
            if before[y][x] is Tile.WALKABLE:
                assert after[y][x] is Tile.WALKABLE
    level.add_walls()
    assert snapshot(level) == after


def test_board_to_csv():
    level = make_level(3, 2)
    level.add_room(Room.create(0, 0, 1, 1))
    level.add_walls()
    assert level.board_to_csv() == "1,2,0\n2,2,0"


def test_str():
    level = Level.create(3, 2, "abc", 1, 1)
    level.add_room(Room.create(1, 0, 1, 1))
    assert str(level) == "abc\n  1   \n      "
