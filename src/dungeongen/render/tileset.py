# src/dungeongen/render/tileset.py
from __future__ import annotations

from functools import lru_cache

import pygame

from ..tiles import Tile
from .png import tile_colour

BACKGROUND = (0, 0, 0)


class Tileset:
    """
    Tiny cached surface factory for the viewer:
      - one solid square per Tile, colours shared with the PNG renderer
      - EMPTY is a fully transparent surface
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=16)
    def get(self, tile: Tile) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        colour = tile_colour(tile)
        img.fill(colour if colour is not None else (0, 0, 0, 0))
        return img


def draw_board(screen: pygame.Surface, board, tiles: Tileset) -> None:
    screen.fill(BACKGROUND)
    size = tiles.tile_size
    for y, row in enumerate(board):
        for x, tile in enumerate(row):
            if tile is Tile.EMPTY:
                continue
            screen.blit(tiles.get(tile), (x * size, y * size))
