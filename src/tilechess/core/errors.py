"""Exceptions raised by the rules core."""

from __future__ import annotations


class InvalidSquare(ValueError):
    """A square coordinate or name lies outside the 8x8 board."""

    def __init__(self, square: object) -> None:
        super().__init__(f"Invalid square: {square!r}")
        self.square = square
