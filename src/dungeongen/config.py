from dataclasses import dataclass, fields

from .errors import ConfigError

DEFAULT_WIDTH = 48
DEFAULT_HEIGHT = 40


@dataclass(frozen=True)
class GeneratorConfig:
    # rooms-and-corridors; upper bounds are exclusive
    max_rooms: int = 10
    min_room_width: int = 4
    max_room_width: int = 8
    min_room_height: int = 5
    max_room_height: int = 12
    # bsp
    bsp_min_size: int = 8
    bsp_min_room_width: int = 4
    bsp_min_room_height: int = 3
    split_ratio: float = 1.25
    # rendering hint carried on the Level
    tile_size: int = 16

    def validate(self) -> "GeneratorConfig":
        if self.max_rooms < 0:
            raise ConfigError(f"max_rooms must be >= 0, got {self.max_rooms}")
        for f in fields(self):
            if f.name == "max_rooms":
                continue
            if getattr(self, f.name) <= 0:
                raise ConfigError(f"{f.name} must be positive, got {getattr(self, f.name)}")
        if self.min_room_width >= self.max_room_width:
            raise ConfigError("min_room_width must be smaller than max_room_width")
        if self.min_room_height >= self.max_room_height:
            raise ConfigError("min_room_height must be smaller than max_room_height")
        if self.split_ratio < 1:
            raise ConfigError("split_ratio must be >= 1")
        return self


DEFAULTS = GeneratorConfig()
