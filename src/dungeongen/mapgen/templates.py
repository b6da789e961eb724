# src/dungeongen/mapgen/templates.py
# Prebuilt room layouts: one JSON file per room, each a grid of tile codes
# (0=empty, 1=walkable, 2=wall), either bare or under a "layout" key.
# Files are read once, in filename order, before generation starts.
# Rooms are stamped whole, so EMPTY or WALL cells of a template stamped later
# in the walk can still cut a corridor that crosses the room; corridor
# endpoints are always drawn from WALKABLE cells.

import json
import logging
import os
from typing import Any, List, Sequence, Tuple, Union

from ..errors import TemplateError
from ..room import Layout
from ..tiles import Tile, codes_to_tiles

logger = logging.getLogger(__name__)


def _as_tile(cell: Any, source: str) -> Tile:
    if isinstance(cell, Tile):
        return cell
    if isinstance(cell, int) and not isinstance(cell, bool):
        return Tile.from_code(cell)
    raise TemplateError(f"{source}: expected a Tile or tile code, got {cell!r}")


def validate_layout(
    rows: Sequence[Sequence[Union[Tile, int]]], source: str = "<template>"
) -> Layout:
    """Check a template is a non-empty rectangle; integer codes become Tiles."""
    if not rows or not rows[0]:
        raise TemplateError(f"{source}: template is empty")
    width = len(rows[0])
    if any(len(r) != width for r in rows):
        raise TemplateError(f"{source}: template rows must all be {width} wide")
    return tuple(tuple(_as_tile(c, source) for c in r) for r in rows)


def parse_template(data: Any, source: str = "<template>") -> Layout:
    if isinstance(data, dict):
        data = data.get("layout")
    if not isinstance(data, list) or not all(isinstance(r, list) for r in data):
        raise TemplateError(f"{source}: expected a list of rows of tile codes")
    try:
        rows = [codes_to_tiles(r) for r in data]
    except (TypeError, ValueError) as e:
        raise TemplateError(f"{source}: bad tile code ({e})") from e
    return validate_layout(rows, source)


def load_template(path: str) -> Layout:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise TemplateError(f"{path}: {e}") from e
    return parse_template(data, path)


def load_templates(directory: str) -> Tuple[Layout, ...]:
    if not os.path.isdir(directory):
        logger.info("template directory %s not found, using random rooms", directory)
        return ()
    names = sorted(n for n in os.listdir(directory) if n.endswith(".json"))
    out: List[Layout] = [load_template(os.path.join(directory, n)) for n in names]
    logger.info("loaded %d room templates from %s", len(out), directory)
    return tuple(out)
