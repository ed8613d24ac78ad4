"""TurnController — the central orchestrator of a game.

Coordinates: GameState, Sides, OccupancyIndex, MoveGenerator.
Emits events via simple callbacks so a front-end / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from tilechess.core.enums import Color, PieceKind, TurnPhase
from tilechess.core.occupancy import Occupant
from tilechess.core.piece import Piece
from tilechess.core.types import Square, check_square
from tilechess.game.interfaces import ITurnController
from tilechess.game.settings import GameSettings
from tilechess.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectCallback = Callable[[Piece | None], None]
MoveCallback = Callable[[MoveRecord, GameState], None]
RejectCallback = Callable[[Piece, Square], None]
TurnCallback = Callable[[Color], None]


@dataclass
class TurnEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_select: list[SelectCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_reject: list[RejectCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TurnController(ITurnController):
    """Drives selection, move validation, capture, scoring and turn order.

    Two states: ``IDLE`` (nothing selected) and ``SELECTED`` (one piece of
    the active side held).  Methods are meant to be called from a single
    thread; every call runs to completion before the next input.
    """

    __slots__ = ("_state", "events")

    def __init__(self, state: GameState | None = None) -> None:
        if state is None:
            state = GameState()
            state.setup()
        self._state = state
        self.events = TurnEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selected(self) -> Piece | None:
        return self._state.selected

    @property
    def phase(self) -> TurnPhase:
        if self._state.selected is None:
            return TurnPhase.IDLE
        return TurnPhase.SELECTED

    # ── ITurnController impl ─────────────────────────────────────────────

    def new_game(self, settings: GameSettings | None = None) -> None:
        self._state = GameState()
        self._state.setup(settings)
        _LOGGER.debug("New game, %s to move", self._state.active)
        self._emit_select(None)
        self._emit_turn_changed()

    def handle_click(self, square: Square) -> TurnPhase:
        square = check_square(square)
        self._state.rebuild_occupancy()

        selected = self._state.selected
        if selected is None:
            self.select_at(square)
            return self.phase

        # The selection is dropped whether or not the move succeeds.
        moved = self.attempt_move(selected, square)
        if not moved:
            self._state.selected = None
            self._emit_select(None)
        return self.phase

    def select_at(self, square: Square) -> Piece | None:
        square = check_square(square)
        piece = self._state.active_side.piece_at(square)
        if piece is None:
            return None
        self._state.selected = piece
        _LOGGER.debug("Selected %r", piece)
        self._emit_select(piece)
        return piece

    def legal_destinations(self, piece: Piece) -> frozenset[Square]:
        if self._state.owner(piece) is None:
            return frozenset()
        return self._state.move_generator().destinations(piece)

    def attempt_move(self, piece: Piece, dest: Square) -> bool:
        dest = check_square(dest)
        state = self._state

        if piece.color != state.active or state.owner(piece) is None:
            return self._reject(piece, dest, "not a live piece of the side to move")

        if dest not in self.legal_destinations(piece):
            return self._reject(piece, dest, "not a legal destination")

        target = state.piece_at(dest)
        if target is not None and target.kind == PieceKind.KING:
            return self._reject(piece, dest, "kings cannot be captured")

        record = state.apply_move(piece, dest)
        state.selected = None
        state.swap_sides()
        state.rebuild_occupancy()

        if record.captured is not None:
            _LOGGER.debug(
                "%s captured %s on %s (+%d)",
                record.color,
                record.captured,
                record.to_sq,
                record.points,
            )
        _LOGGER.debug("Moved %s %s -> %s", record.piece_kind, record.from_sq, record.to_sq)

        self._emit_move(record)
        self._emit_select(None)
        self._emit_turn_changed()
        return True

    def occupant(self, square: Square) -> Occupant | None:
        return self._state.occupancy[check_square(square)]

    def score(self, color: Color) -> int:
        return self._state.sides[color].score

    def active_side(self) -> Color:
        return self._state.active

    # ── Check query ──────────────────────────────────────────────────────

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king on a square some opposing piece can reach?"""
        king = self._state.sides[color].king()
        return self._state.move_generator().is_in_check(king)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reject(self, piece: Piece, dest: Square, reason: str) -> bool:
        _LOGGER.debug("Rejected %r -> %s: %s", piece, dest, reason)
        for cb in self.events.on_reject:
            cb(piece, dest)
        return False

    def _emit_select(self, piece: Piece | None) -> None:
        for cb in self.events.on_select:
            cb(piece)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_turn_changed(self) -> None:
        for cb in self.events.on_turn_changed:
            cb(self._state.active)
