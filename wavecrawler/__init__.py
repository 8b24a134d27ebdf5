"""A turn-based wave-survival dungeon crawler for the terminal."""

__version__ = "0.1.0"