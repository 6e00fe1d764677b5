"""A small 2D platformer built on pygame: player, enemies, obstacles, levels and a pause menu."""

__version__ = "0.1.0"