# src/dungeongen/export.py
# JSON output of a finished level, and integer-code / CSV decoding back into a board.

import json
from typing import Any, Dict, List, Optional, Sequence

from .level import Board, Level
from .tiles import codes_to_tiles


def board_to_codes(board: Board) -> List[List[int]]:
    return [[t.code for t in row] for row in board]


def board_from_codes(rows: Sequence[Sequence[int]]) -> Board:
    return [codes_to_tiles(r) for r in rows]


def board_from_csv(text: str) -> Board:
    rows = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        rows.append([int(x) for x in line.split(",")])
    return board_from_codes(rows)


def level_to_dict(level: Level) -> Dict[str, Any]:
    return {
        "hash": level.hash,
        "tile_size": level.tile_size,
        "width": level.width,
        "height": level.height,
        "board": board_to_codes(level.board),
        "rooms": [r.to_dict() for r in level.rooms],
    }


def level_to_json(level: Level, indent: Optional[int] = None) -> str:
    return json.dumps(level_to_dict(level), indent=indent)
