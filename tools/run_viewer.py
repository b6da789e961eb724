#!/usr/bin/env python3
# Read-only viewer for one generated level (no regeneration).
# - Esc / window close: quit
# - S: save a screenshot next to the working directory as <hash>.png

import argparse
import logging

import pygame

from dungeongen.cli import build_level, build_parser
from dungeongen.errors import ConfigError, TemplateError
from dungeongen.logging_config import setup_logging
from dungeongen.render.tileset import Tileset, draw_board


def main(argv=None):
    ap = build_parser()
    ap.description = "Show a generated level in a window"
    ap.add_argument("--tile", type=int, default=16, help="Tile size in pixels")
    args = ap.parse_args(argv)
    setup_logging(logging.INFO if args.verbose else logging.WARNING)

    try:
        level = build_level(args)
    except (ConfigError, TemplateError) as e:
        ap.error(str(e))

    pygame.init()
    pygame.display.set_caption(f"dungeongen - {args.algorithm} {level.width}x{level.height}")
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((level.width * args.tile, level.height * args.tile))
    tiles = Tileset(args.tile)

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_s:
                    path = f"{level.hash}.png"
                    pygame.image.save(screen, path)
                    print(f"[viewer] saved {path}")

        draw_board(screen, level.board, tiles)
        pygame.display.flip()
        clock.tick(30)

    pygame.quit()


if __name__ == "__main__":
    main()
