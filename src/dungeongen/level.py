# src/dungeongen/level.py
# The tile board every generator writes into. board[y][x], row-major.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .errors import ConfigError, OutOfBoundsError
from .room import Room
from .tiles import Tile

Board = List[List[Tile]]

NEIGHBOURS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


def empty_board(width: int, height: int) -> Board:
    return [[Tile.EMPTY for _ in range(width)] for _ in range(height)]


@dataclass
class Level:
    width: int
    height: int
    hash: str
    min_room_width: int
    min_room_height: int
    tile_size: int = 16
    board: Board = field(default_factory=list)
    rooms: List[Room] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        hash: str,
        min_room_width: int,
        min_room_height: int,
        tile_size: int = 16,
    ) -> "Level":
        if width <= 0 or height <= 0:
            raise ConfigError(f"Level dimensions must be positive, got {width}x{height}")
        return cls(
            width=width,
            height=height,
            hash=hash,
            min_room_width=min_room_width,
            min_room_height=min_room_height,
            tile_size=tile_size,
            board=empty_board(width, height),
        )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> Tile:
        return self.board[y][x]

    def count(self, tile: Tile) -> int:
        return sum(row.count(tile) for row in self.board)

    def _check_fits(self, room: Room) -> None:
        if room.x < 0 or room.y < 0 or room.x2 > self.width or room.y2 > self.height:
            raise OutOfBoundsError(
                f"room ({room.x},{room.y}) {room.width}x{room.height} "
                f"does not fit a {self.width}x{self.height} board"
            )

    def carve(self, room: Room) -> None:
        """Stamp a room's layout onto the board without registering it."""
        self._check_fits(room)
        for x, y, tile in room.cells():
            self.board[y][x] = tile

    def add_room(self, room: Room) -> None:
        self.carve(room)
        self.rooms.append(room)

    def add_walls(self) -> None:
        # Only EMPTY -> WALL promotions, sourced from WALKABLE cells, so one pass is enough.
        for y in range(self.height):
            for x in range(self.width):
                if self.board[y][x] is not Tile.WALKABLE:
                    continue
                for dx, dy in NEIGHBOURS:
                    nx, ny = x + dx, y + dy
                    if self.in_bounds(nx, ny) and self.board[ny][nx] is Tile.EMPTY:
                        self.board[ny][nx] = Tile.WALL

    def board_to_csv(self) -> str:
        return "\n".join(",".join(str(t.code) for t in row) for row in self.board)

    def __str__(self) -> str:
        lines = [self.hash]
        for row in self.board:
            lines.append("".join(f"{t} " for t in row))
        return "\n".join(lines)
