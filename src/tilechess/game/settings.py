"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass

from tilechess.core.enums import Color


@dataclass
class GameSettings:
    """All user-configurable settings."""

    # Side that moves first
    first_to_move: Color = Color.WHITE

    # Board orientation: white's back rank on rank 0 and advancing upward
    white_on_top: bool = True
