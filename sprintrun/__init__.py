"""A small side-scrolling runner game: character logic, pygame drawing and the game loop."""

__version__ = "0.1.0"
__all__ = ["character", "render", "game"]