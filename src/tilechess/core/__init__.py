"""Core domain layer — pure rules logic with zero external dependencies.

Quick start::

    from tilechess.core import Color, MoveGenerator, OccupancyIndex, Piece, PieceKind, Square

    rook = Piece(PieceKind.ROOK, Color.WHITE, Square(0, 0))
    occ = OccupancyIndex.from_pieces([rook])
    gen = MoveGenerator(occ, [rook])
    print(sorted(gen.destinations(rook)))
"""

from tilechess.core.enums import Color, PieceKind, TurnPhase
from tilechess.core.errors import InvalidSquare
from tilechess.core.move_generator import MoveGenerator
from tilechess.core.occupancy import OccupancyIndex, Occupant
from tilechess.core.piece import PIECE_VALUES, Piece
from tilechess.core.types import (
    BOARD_SIZE,
    Square,
    check_square,
    is_valid_square,
    make_square,
    offset,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceKind",
    "TurnPhase",
    # Errors
    "InvalidSquare",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "check_square",
    "is_valid_square",
    "make_square",
    "offset",
    "parse_square",
    "square_name",
    # Domain objects
    "MoveGenerator",
    "OccupancyIndex",
    "Occupant",
    "PIECE_VALUES",
    "Piece",
]
