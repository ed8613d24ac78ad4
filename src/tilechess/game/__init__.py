"""Game management layer — state, sides, turn controller.

Quick start::

    from tilechess.game import TurnController
    from tilechess.core import parse_square

    ctrl = TurnController()
    ctrl.handle_click(parse_square("e2"))
    ctrl.handle_click(parse_square("e4"))
"""

from tilechess.game.controller import TurnController, TurnEvents
from tilechess.game.interfaces import ITurnController
from tilechess.game.settings import GameSettings
from tilechess.game.side import Side
from tilechess.game.state import GameState, MoveRecord, initial_pieces

__all__ = [
    # Interfaces
    "ITurnController",
    # Concrete
    "GameSettings",
    "GameState",
    "MoveRecord",
    "Side",
    "TurnController",
    "TurnEvents",
    "initial_pieces",
]
