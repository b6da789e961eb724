from dataclasses import dataclass
from typing import Any, Dict, Iterator, NamedTuple, Optional, Sequence, Tuple

from .tiles import Tile

Layout = Tuple[Tuple[Tile, ...], ...]


class Point(NamedTuple):
    x: int
    y: int


def blank_layout(width: int, height: int) -> Layout:
    return tuple(tuple(Tile.WALKABLE for _ in range(width)) for _ in range(height))


@dataclass(frozen=True)
class Room:
    """
    Axis-aligned rectangle with a tile payload.
    (x, y) is the top-left cell; layout is height rows of width tiles.
    """
    x: int
    y: int
    width: int
    height: int
    layout: Layout

    def __post_init__(self):
        if len(self.layout) != self.height or any(len(r) != self.width for r in self.layout):
            raise ValueError(
                f"layout must be {self.height}x{self.width} for room at ({self.x},{self.y})"
            )

    @classmethod
    def create(
        cls,
        x: int,
        y: int,
        width: int,
        height: int,
        layout: Optional[Sequence[Sequence[Tile]]] = None,
    ) -> "Room":
        if layout is None:
            return cls(x, y, width, height, blank_layout(width, height))
        return cls(x, y, width, height, tuple(tuple(row) for row in layout))

    @property
    def x2(self) -> int:
        return self.x + self.width

    @property
    def y2(self) -> int:
        return self.y + self.height

    @property
    def centre(self) -> Point:
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    def intersects(self, other: "Room") -> bool:
        # Inclusive bounds: rooms that share an edge count as intersecting.
        return (
            self.x <= other.x2
            and self.x2 >= other.x
            and self.y <= other.y2
            and self.y2 >= other.y
        )

    def cells(self) -> Iterator[Tuple[int, int, Tile]]:
        for row, line in enumerate(self.layout):
            for col, tile in enumerate(line):
                yield self.x + col, self.y + row, tile

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "x2": self.x2,
            "y2": self.y2,
            "width": self.width,
            "height": self.height,
            "centre": {"x": self.centre.x, "y": self.centre.y},
            "layout": [[t.code for t in row] for row in self.layout],
        }
