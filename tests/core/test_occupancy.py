"""Tests for OccupancyIndex."""

import pytest

from tilechess.core.enums import Color, PieceKind
from tilechess.core.errors import InvalidSquare
from tilechess.core.occupancy import OccupancyIndex, Occupant
from tilechess.core.piece import Piece
from tilechess.core.types import A1, D4, E2, E4, H8, Square, all_squares
from tilechess.game.state import initial_pieces


class TestOccupancyRecord:
    def test_new_index_is_empty(self) -> None:
        occ = OccupancyIndex()
        assert all(occ[sq] is None for sq in all_squares())

    def test_record_and_lookup(self) -> None:
        occ = OccupancyIndex()
        occ.record(Piece(PieceKind.KNIGHT, Color.BLACK, D4))
        assert occ[D4] == Occupant(Color.BLACK, PieceKind.KNIGHT)
        assert occ.color_at(D4) == Color.BLACK
        assert occ.kind_at(D4) == PieceKind.KNIGHT
        assert occ.is_empty(E4)
        assert occ.color_at(E4) is None
        assert occ.kind_at(E4) is None

    def test_reset_clears_everything(self) -> None:
        occ = OccupancyIndex.from_pieces(initial_pieces())
        occ.reset()
        assert occ.occupied_squares() == []


class TestOccupancyRebuild:
    def test_rebuild_reflects_live_pieces_exactly(self) -> None:
        pieces = initial_pieces()
        occ = OccupancyIndex.from_pieces(pieces)
        assert set(occ.occupied_squares()) == {p.square for p in pieces}
        for p in pieces:
            assert occ[p.square] == Occupant(p.color, p.kind)

    def test_rebuild_drops_stale_cells(self) -> None:
        pawn = Piece(PieceKind.PAWN, Color.WHITE, E2)
        occ = OccupancyIndex.from_pieces([pawn])
        pawn.square = E4
        occ.rebuild([pawn])
        assert occ.is_empty(E2)
        assert occ.kind_at(E4) == PieceKind.PAWN

    def test_equality(self) -> None:
        assert OccupancyIndex.from_pieces(initial_pieces()) == OccupancyIndex.from_pieces(
            initial_pieces()
        )


class TestOccupancyBounds:
    @pytest.mark.parametrize("sq", [Square(8, 0), Square(0, 8), Square(-1, 3)])
    def test_out_of_bounds_raises(self, sq: Square) -> None:
        occ = OccupancyIndex()
        with pytest.raises(InvalidSquare):
            occ[sq]
        with pytest.raises(InvalidSquare):
            occ.color_at(sq)

    def test_record_off_board_piece_raises(self) -> None:
        occ = OccupancyIndex()
        with pytest.raises(InvalidSquare):
            occ.record(Piece(PieceKind.ROOK, Color.WHITE, Square(9, 9)))

    def test_corners_in_bounds(self) -> None:
        occ = OccupancyIndex()
        assert occ[A1] is None
        assert occ[H8] is None


class TestOccupancyRepr:
    def test_repr_shows_pieces(self) -> None:
        text = repr(OccupancyIndex.from_pieces(initial_pieces()))
        assert "K" in text and "k" in text
        assert "a b c d e f g h" in text
