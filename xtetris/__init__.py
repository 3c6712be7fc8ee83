"""Turn-based terminal Tetris with single player, two player and CPU modes."""

__version__ = "1.0.0"