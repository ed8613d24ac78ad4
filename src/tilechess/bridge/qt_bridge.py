"""Qt bridge exposing a turn controller as signals and slots."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from tilechess.core.enums import Color
from tilechess.core.errors import InvalidSquare
from tilechess.core.occupancy import Occupant
from tilechess.core.piece import Piece
from tilechess.core.types import Square, make_square
from tilechess.game.controller import TurnController
from tilechess.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)


class GameBridge(QObject):
    """Forwards board clicks to a :class:`TurnController` and re-emits its events.

    A front-end connects to the signals to redraw and only ever reads
    the controller's state between clicks.
    """

    selection_changed = pyqtSignal(object)  # Piece | None
    move_made = pyqtSignal(object)  # MoveRecord
    move_rejected = pyqtSignal(object, object)  # Piece, Square
    turn_changed = pyqtSignal(int)  # Color
    score_changed = pyqtSignal(int, int)  # white, black
    click_ignored = pyqtSignal(int, int)  # file, rank

    def __init__(self, controller: TurnController | None = None) -> None:
        super().__init__()
        self._controller = controller or TurnController()
        events = self._controller.events
        events.on_select.append(self._on_select)
        events.on_move.append(self._on_move)
        events.on_reject.append(self._on_reject)
        events.on_turn_changed.append(self._on_turn_changed)

    @property
    def controller(self) -> TurnController:
        return self._controller

    # ── Slots ────────────────────────────────────────────────────────────

    @pyqtSlot(int, int)
    def click(self, file: int, rank: int) -> None:
        """Handle a click on board cell ``(file, rank)``."""
        try:
            square = make_square(file, rank)
        except InvalidSquare:
            _LOGGER.warning("Ignoring click outside the board: (%d, %d)", file, rank)
            self.click_ignored.emit(file, rank)
            return
        self._controller.handle_click(square)

    @pyqtSlot()
    def new_game(self) -> None:
        self._controller.new_game()
        self._emit_scores()

    # ── Read-only queries for drawing ────────────────────────────────────

    def occupant(self, file: int, rank: int) -> Occupant | None:
        return self._controller.occupant(Square(file, rank))

    def highlighted_squares(self) -> frozenset[Square]:
        """Destinations of the selected piece, or nothing when idle."""
        selected = self._controller.selected
        if selected is None:
            return frozenset()
        return self._controller.legal_destinations(selected)

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_select(self, piece: Piece | None) -> None:
        self.selection_changed.emit(piece)

    def _on_move(self, record: MoveRecord, _state: GameState) -> None:
        self.move_made.emit(record)
        if record.captured is not None:
            self._emit_scores()

    def _on_reject(self, piece: Piece, dest: Square) -> None:
        self.move_rejected.emit(piece, dest)

    def _on_turn_changed(self, color: Color) -> None:
        self.turn_changed.emit(int(color))

    def _emit_scores(self) -> None:
        self.score_changed.emit(
            self._controller.score(Color.WHITE),
            self._controller.score(Color.BLACK),
        )
