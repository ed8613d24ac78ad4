"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the presentation bridge depends on this
ABC, not on the concrete :class:`~tilechess.game.controller.TurnController`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from tilechess.core.enums import Color, TurnPhase

if TYPE_CHECKING:
    from tilechess.core.occupancy import Occupant
    from tilechess.core.piece import Piece
    from tilechess.core.types import Square
    from tilechess.game.settings import GameSettings


class ITurnController(ABC):
    """Interface for the turn orchestrator consumed by front-ends."""

    @abstractmethod
    def new_game(self, settings: GameSettings | None = None) -> None:
        """Set up a new game."""

    @abstractmethod
    def handle_click(self, square: Square) -> TurnPhase:
        """Process one input event on *square* and return the new phase."""

    @abstractmethod
    def select_at(self, square: Square) -> Piece | None:
        """Select the active side's piece on *square*, if any."""

    @abstractmethod
    def legal_destinations(self, piece: Piece) -> frozenset[Square]:
        """Squares *piece* may currently move to."""

    @abstractmethod
    def attempt_move(self, piece: Piece, dest: Square) -> bool:
        """Try to move *piece*. Returns True if legal and applied."""

    @abstractmethod
    def occupant(self, square: Square) -> Occupant | None:
        """Who stands on *square*, for drawing."""

    @abstractmethod
    def score(self, color: Color) -> int:
        """Accumulated capture points of *color*."""

    @abstractmethod
    def active_side(self) -> Color:
        """Color whose turn it is."""
