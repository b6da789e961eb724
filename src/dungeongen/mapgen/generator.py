# src/dungeongen/mapgen/generator.py
# Entry point: seed -> RNG -> chosen placer -> optional wall pass -> Level.

import logging
from enum import Enum
from typing import Optional, Sequence, Union

from ..config import DEFAULTS, GeneratorConfig
from ..errors import ConfigError
from ..level import Level
from ..rng import PMRandom
from ..room import Layout
from .bsp import generate_bsp
from .rooms_corridors import generate_rooms_corridors
from .templates import validate_layout

logger = logging.getLogger(__name__)


class Algorithm(str, Enum):
    ROOMS = "rooms"
    BSP = "bsp"

    @classmethod
    def parse(cls, value: Union["Algorithm", str]) -> "Algorithm":
        try:
            return cls(value)
        except ValueError:
            names = ", ".join(a.value for a in cls)
            raise ConfigError(f"unknown algorithm {value!r} (choose from {names})") from None


def generate_level(
    width: int,
    height: int,
    seed: bytes,
    algorithm: Union[Algorithm, str] = Algorithm.ROOMS,
    walls: bool = False,
    config: Optional[GeneratorConfig] = None,
    templates: Sequence[Layout] = (),
    hash: Optional[str] = None,
) -> Level:
    config = (config or DEFAULTS).validate()
    algorithm = Algorithm.parse(algorithm)
    templates = [validate_layout(t) for t in templates]
    rng = PMRandom.from_seed(seed)

    if algorithm is Algorithm.BSP:
        min_w, min_h = config.bsp_min_room_width, config.bsp_min_room_height
    else:
        min_w, min_h = config.min_room_width, config.min_room_height
    level = Level.create(
        width, height,
        hash if hash is not None else seed.decode("utf-8", errors="replace"),
        min_w, min_h,
        tile_size=config.tile_size,
    )

    if algorithm is Algorithm.BSP:
        generate_bsp(level, rng, config, templates)
    else:
        if templates:
            logger.warning("room templates are only used by the bsp algorithm; ignoring %d",
                           len(templates))
        generate_rooms_corridors(level, rng, config)

    if walls:
        level.add_walls()

    logger.info("generated %s level %dx%d with %d rooms (walls=%s)",
                algorithm.value, width, height, len(level.rooms), walls)
    return level
