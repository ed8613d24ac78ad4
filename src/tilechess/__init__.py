"""Turn-based 8x8 board-game rules engine."""

__version__ = "0.1.0"
