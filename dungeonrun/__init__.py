"""Tile-based dungeon puzzle game: map loading and checks, game rules and a pygame front end."""

__version__ = "0.1.0"