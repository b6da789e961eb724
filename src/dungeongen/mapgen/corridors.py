# src/dungeongen/mapgen/corridors.py
# L-shaped corridors: two straight 1-tile-wide legs, both endpoints inclusive.

from typing import List, Tuple

from ..room import Room

XY = Tuple[int, int]


def horz_corridor(start_x: int, end_x: int, y: int) -> Room:
    lo, hi = min(start_x, end_x), max(start_x, end_x)
    return Room.create(lo, y, hi - lo + 1, 1)


def vert_corridor(start_y: int, end_y: int, x: int) -> Room:
    lo, hi = min(start_y, end_y), max(start_y, end_y)
    return Room.create(x, lo, 1, hi - lo + 1)


def l_corridor(start: XY, end: XY, horizontal_first: bool) -> List[Room]:
    """
    Horizontal first: along start's row to end's column, then down/up end's column.
    Vertical first:   along start's column to end's row, then across end's row.
    """
    (sx, sy), (ex, ey) = start, end
    if horizontal_first:
        return [horz_corridor(sx, ex, sy), vert_corridor(sy, ey, ex)]
    return [vert_corridor(sy, ey, sx), horz_corridor(sx, ex, ey)]
