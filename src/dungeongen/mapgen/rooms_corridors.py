# src/dungeongen/mapgen/rooms_corridors.py
# Scatter non-overlapping rooms, then join consecutive rooms with L-shaped corridors.

import logging
from typing import List

from ..config import GeneratorConfig
from ..errors import ConfigError
from ..level import Level
from ..rng import PMRandom
from ..room import Room
from .corridors import l_corridor

logger = logging.getLogger(__name__)


def check_board_fits(level: Level, config: GeneratorConfig) -> None:
    # Largest drawable room is (max - 1); it must fit once its origin is clamped.
    if level.width < config.max_room_width - 1 or level.height < config.max_room_height - 1:
        raise ConfigError(
            f"{level.width}x{level.height} board is smaller than the largest room "
            f"({config.max_room_width - 1}x{config.max_room_height - 1})"
        )


def place_rooms(level: Level, rng: PMRandom, config: GeneratorConfig) -> List[Room]:
    """
    Fixed attempt budget, no retries. Draw order per attempt: x, y, width, height.
    Candidates overflowing the right/bottom edge are shifted inward, not rejected.
    """
    accepted: List[Room] = []
    for attempt in range(config.max_rooms):
        x = rng.gen_range(0, level.width)
        y = rng.gen_range(0, level.height)
        width = rng.gen_range(config.min_room_width, config.max_room_width)
        height = rng.gen_range(config.min_room_height, config.max_room_height)

        if x + width > level.width:
            x = level.width - width
        if y + height > level.height:
            y = level.height - height

        room = Room.create(x, y, width, height)
        if any(room.intersects(other) for other in accepted):
            logger.debug("attempt %d: room at (%d,%d) %dx%d collides, dropped",
                         attempt, x, y, width, height)
            continue

        level.add_room(room)
        accepted.append(room)
    return accepted


def place_corridors(level: Level, rng: PMRandom, rooms: List[Room]) -> None:
    for room, other in zip(rooms, rooms[1:]):
        horizontal_first = rng.gen_range(0, 2) == 0
        for segment in l_corridor(room.centre, other.centre, horizontal_first):
            level.carve(segment)


def generate_rooms_corridors(level: Level, rng: PMRandom, config: GeneratorConfig) -> Level:
    check_board_fits(level, config)
    rooms = place_rooms(level, rng, config)
    place_corridors(level, rng, rooms)
    logger.debug("rooms-and-corridors placed %d/%d rooms", len(rooms), config.max_rooms)
    return level
