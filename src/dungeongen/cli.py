#!/usr/bin/env python3
# dungeongen command line: generate one level and print/serialize/draw it.

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from .config import DEFAULT_HEIGHT, DEFAULT_WIDTH, DEFAULTS, GeneratorConfig
from .errors import ConfigError, TemplateError
from .export import level_to_json
from .level import Level
from .logging_config import setup_logging
from .mapgen.generator import Algorithm, generate_level
from .mapgen.templates import load_templates
from .render.png import render_level
from .seed import resolve_seed, seed_bytes

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dungeongen", description="Seeded dungeon map generator")
    p.add_argument("-t", "--text", type=str, help="A string to hash and use as a seed")
    p.add_argument("-s", "--seed", type=str, help="An existing seed. Must be 32 characters")
    p.add_argument("-a", "--algorithm", choices=[a.value for a in Algorithm], default="rooms",
                   help="The type of procedural algorithm to use")
    p.add_argument("-j", "--json", action="store_true", help="Also print serialised JSON output")
    p.add_argument("-d", "--draw", action="store_true", help="Create a png representation")
    p.add_argument("--outdir", type=str, default="./img", help="Where --draw writes PNGs")
    p.add_argument("-c", "--csv", action="store_true", help="Output board in CSV format")
    p.add_argument("-w", "--walls", action="store_true", help="Add wall tiles around rooms")
    p.add_argument("-x", "--width", type=int, default=DEFAULT_WIDTH, help="Width of the level")
    p.add_argument("-y", "--height", type=int, default=DEFAULT_HEIGHT, help="Height of the level")
    p.add_argument("--templates", type=str, help="Directory of prebuilt room JSON files (bsp)")
    p.add_argument("--max-rooms", type=int, default=DEFAULTS.max_rooms,
                   help="Room placement attempts (rooms)")
    p.add_argument("--min-room-width", type=int, help="Smallest room width (both algorithms)")
    p.add_argument("--min-room-height", type=int, help="Smallest room height (both algorithms)")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug")
    return p


def config_from_args(args: argparse.Namespace) -> GeneratorConfig:
    config = replace(DEFAULTS, max_rooms=args.max_rooms)
    if args.min_room_width is not None:
        config = replace(
            config,
            min_room_width=args.min_room_width,
            max_room_width=max(config.max_room_width, args.min_room_width + 1),
            bsp_min_room_width=args.min_room_width,
        )
    if args.min_room_height is not None:
        config = replace(
            config,
            min_room_height=args.min_room_height,
            max_room_height=max(config.max_room_height, args.min_room_height + 1),
            bsp_min_room_height=args.min_room_height,
        )
    return config


def build_level(args: argparse.Namespace) -> Level:
    seed = resolve_seed(seed=args.seed, text=args.text)
    logger.info("using seed %s", seed)
    templates = load_templates(args.templates) if args.templates else ()
    return generate_level(
        args.width,
        args.height,
        seed_bytes(seed),
        algorithm=args.algorithm,
        walls=args.walls,
        config=config_from_args(args),
        templates=templates,
        hash=seed,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level_no = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    setup_logging(level_no)

    try:
        level = build_level(args)
    except (ConfigError, TemplateError) as e:
        parser.error(str(e))

    print(level)
    if args.json:
        print(level_to_json(level))
    if args.draw:
        render_level(level, directory=args.outdir)
    if args.csv:
        print(level.board_to_csv())
    return 0


if __name__ == "__main__":
    sys.exit(main())
