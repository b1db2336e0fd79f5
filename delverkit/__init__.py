"""Data-driven spawning toolkit for roguelike games: templates, spawn tables, dice and names."""

__version__ = "0.1.0"

__all__ = ["namegen", "random_tables", "rawmaster", "raws", "rect", "spawner", "strings"]