from dungeongen.tiles import Tile, codes_to_tiles


def test_tile_codes():
    assert Tile.EMPTY.code == 0
    assert Tile.WALKABLE.code == 1
    assert Tile.WALL.code == 2


def test_tile_display():
    assert str(Tile.EMPTY) == " "
    assert str(Tile.WALKABLE) == "1"
    assert str(Tile.WALL) == "2"


def test_unknown_codes_decode_to_empty():
    assert Tile.from_code(7) is Tile.EMPTY
    assert Tile.from_code(-1) is Tile.EMPTY
    assert codes_to_tiles([0, 1, 2, 3]) == [Tile.EMPTY, Tile.WALKABLE, Tile.WALL, Tile.EMPTY]
