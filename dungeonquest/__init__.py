"""A terminal dungeon crawler with characters, monsters, treasure, save files and high scores."""

__version__ = "1.0.0"
__all__ = ["__version__"]