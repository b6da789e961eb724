# Tile variants and their two fixed tables:
#   code  (JSON/CSV contract): EMPTY=0, WALKABLE=1, WALL=2
#   glyph (text display):      EMPTY=" ", WALKABLE="1", WALL="2"
# The code table is the contract, not the enum ordering.

from enum import Enum
from typing import Iterable, List


class Tile(Enum):
    EMPTY = "empty"
    WALL = "wall"
    WALKABLE = "walkable"

    @property
    def code(self) -> int:
        return TILE_CODES[self]

    @property
    def glyph(self) -> str:
        return TILE_GLYPHS[self]

    @classmethod
    def from_code(cls, code: int) -> "Tile":
        # Unknown codes decode to EMPTY.
        return CODE_TILES.get(code, cls.EMPTY)

    def __str__(self) -> str:
        return self.glyph


TILE_CODES = {Tile.EMPTY: 0, Tile.WALKABLE: 1, Tile.WALL: 2}
CODE_TILES = {v: k for k, v in TILE_CODES.items()}
TILE_GLYPHS = {Tile.EMPTY: " ", Tile.WALKABLE: "1", Tile.WALL: "2"}


def codes_to_tiles(row: Iterable[int]) -> List[Tile]:
    return [Tile.from_code(int(c)) for c in row]
