# src/dungeongen/errors.py
# Exception taxonomy shared by the generators and their callers.


class DungeonError(Exception):
    """Base class for everything this package raises on purpose."""


class ConfigError(DungeonError, ValueError):
    """Bad generation parameters; raised before any generation starts."""


class SeedError(ConfigError):
    """Seed is not usable (must be 32 bytes)."""


class TemplateError(DungeonError):
    """A prebuilt room template file could not be read or is not rectangular."""


class OutOfBoundsError(DungeonError, AssertionError):
    """A generator produced geometry outside the board. Internal bug, never clamped."""
