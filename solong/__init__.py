"""A small top-down tile puzzle game: map loading, validation, game state and a pygame front end."""

__version__ = "1.0.0"
__all__ = ["cli", "console", "game", "lines", "mapfile", "render", "validate"]