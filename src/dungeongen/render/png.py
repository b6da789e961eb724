# src/dungeongen/render/png.py
# Rasterize a finished board to PNG using Pillow. One tile_size square per cell.

import logging
import os
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from ..level import Board, Level
from ..tiles import Tile

logger = logging.getLogger(__name__)

TILE_COLOURS = {
    Tile.WALKABLE: (255, 102, 51, 255),
    Tile.WALL: (80, 80, 80, 255),
}


def tile_colour(tile: Tile) -> Optional[Tuple[int, int, int, int]]:
    # EMPTY is left transparent
    return TILE_COLOURS.get(tile)


def render_board(board: Board, tile_size: int = 16) -> Image.Image:
    height = len(board)
    width = len(board[0]) if height else 0
    canvas = Image.new("RGBA", (width * tile_size, height * tile_size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)
    for y, row in enumerate(board):
        for x, tile in enumerate(row):
            colour = tile_colour(tile)
            if colour is None:
                continue
            x0, y0 = x * tile_size, y * tile_size
            draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=colour)
    return canvas


def render_level(level: Level, path: Optional[str] = None, directory: str = ".") -> str:
    """Write <directory>/<hash>.png unless an explicit path is given. Returns the path."""
    if path is None:
        path = os.path.join(directory, f"{level.hash}.png")
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    render_board(level.board, level.tile_size).save(path)
    logger.info("wrote %s", path)
    return path
