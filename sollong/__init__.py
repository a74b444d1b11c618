"""A tile-based puzzle game: collect every coin, then reach the exit."""

__version__ = "0.1.0"