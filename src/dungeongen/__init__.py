"""Seeded 2D dungeon maps: rooms-and-corridors and BSP placers over a tile grid."""

__version__ = "0.1.0"
