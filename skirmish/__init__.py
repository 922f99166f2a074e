"""A two-player hot-seat tactics game on a square grid, drawn with pygame."""

__version__ = "0.1.0"