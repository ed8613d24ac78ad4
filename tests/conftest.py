"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

from tilechess.core.enums import Color, PieceKind  # noqa: E402
from tilechess.core.piece import Piece  # noqa: E402
from tilechess.core.types import Square  # noqa: E402
from tilechess.game.controller import TurnController  # noqa: E402
from tilechess.game.state import GameState  # noqa: E402

PieceSpec = tuple[PieceKind, Color, Square]


@pytest.fixture
def controller() -> TurnController:
    """A controller on the standard opening layout, white to move."""
    return TurnController()


@pytest.fixture
def make_controller() -> Callable[..., TurnController]:
    """Build a controller from ``(kind, color, square)`` specs."""

    def _make(*specs: PieceSpec, active: Color = Color.WHITE) -> TurnController:
        pieces = [Piece(kind, color, sq) for kind, color, sq in specs]
        return TurnController(GameState.from_pieces(pieces, active))

    return _make


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for bridge tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
