"""Per-kind destination generation and attack detection."""

from __future__ import annotations

from collections.abc import Iterable

from tilechess.core.enums import Color, PieceKind
from tilechess.core.occupancy import OccupancyIndex
from tilechess.core.piece import Piece
from tilechess.core.types import Square, offset

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

_CORNER_FILES: tuple[int, int] = (0, 7)


class MoveGenerator:
    """Destination sets for pieces against one occupancy snapshot.

    *occupancy* must have been rebuilt from *pieces* (the live pieces of
    both sides) before the generator is used; a stale index yields stale
    destinations.
    """

    __slots__ = ("_occ", "_pieces", "_by_square")

    def __init__(self, occupancy: OccupancyIndex, pieces: Iterable[Piece]) -> None:
        self._occ = occupancy
        self._pieces: list[Piece] = list(pieces)
        self._by_square: dict[Square, Piece] = {p.square: p for p in self._pieces}

    # -- Public API ---------------------------------------------------------

    def destinations(self, piece: Piece) -> frozenset[Square]:
        """Squares *piece* may move to, captures included."""
        return frozenset(self._destinations(piece, castling=True))

    def piece_at(self, sq: Square) -> Piece | None:
        return self._by_square.get(sq)

    def attacked_squares(self, color: Color) -> frozenset[Square]:
        """Union of the destination sets of every *color* piece.

        Castling hops are left out: they only ever land on empty squares,
        and evaluating them here would make each king's castling depend on
        the other's.
        """
        attacked: set[Square] = set()
        for piece in self._pieces:
            if piece.color == color:
                attacked.update(self._destinations(piece, castling=False))
        return frozenset(attacked)

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        return sq in self.attacked_squares(by_color)

    def is_in_check(self, king: Piece) -> bool:
        """Is *king*'s square reachable by any opposing piece?"""
        return self.is_square_attacked(king.square, king.color.opposite)

    # -- Dispatch -----------------------------------------------------------

    def _destinations(self, piece: Piece, *, castling: bool) -> list[Square]:
        match piece.kind:
            case PieceKind.PAWN:
                return self._gen_pawn(piece)
            case PieceKind.ROOK:
                return self._gen_sliding(piece, ROOK_DIRS)
            case PieceKind.KNIGHT:
                return self._gen_knight(piece)
            case PieceKind.BISHOP:
                return self._gen_sliding(piece, BISHOP_DIRS)
            case PieceKind.QUEEN:
                return self._gen_queen(piece)
            case PieceKind.KING:
                return self._gen_king(piece, castling=castling)
        raise ValueError(f"Unknown piece kind: {piece.kind!r}")

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, piece: Piece) -> list[Square]:
        occ = self._occ
        moves: list[Square] = []
        step = piece.forward

        one_step = offset(piece.square, 0, step)
        if one_step is not None and occ.is_empty(one_step):
            moves.append(one_step)
            if not piece.has_moved:
                two_step = offset(one_step, 0, step)
                if two_step is not None and occ.is_empty(two_step):
                    moves.append(two_step)

        for df in (-1, 1):
            cap_sq = offset(piece.square, df, step)
            if cap_sq is not None and piece.is_enemy(occ.color_at(cap_sq)):
                moves.append(cap_sq)
        return moves

    def _gen_knight(self, piece: Piece) -> list[Square]:
        moves: list[Square] = []
        for df, dr in KNIGHT_OFFSETS:
            to_sq = offset(piece.square, df, dr)
            if to_sq is not None and not piece.is_friend(self._occ.color_at(to_sq)):
                moves.append(to_sq)
        return moves

    def _gen_sliding(
        self,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
    ) -> list[Square]:
        occ = self._occ
        moves: list[Square] = []
        for df, dr in directions:
            to_sq = offset(piece.square, df, dr)
            while to_sq is not None:
                color = occ.color_at(to_sq)
                if color is None:
                    moves.append(to_sq)
                    to_sq = offset(to_sq, df, dr)
                    continue
                if color != piece.color:
                    moves.append(to_sq)
                break
        return moves

    def _gen_queen(self, piece: Piece) -> list[Square]:
        rook_moves = self._gen_sliding(piece, ROOK_DIRS)
        bishop_moves = self._gen_sliding(piece, BISHOP_DIRS)
        return rook_moves + bishop_moves

    def _gen_king(self, piece: Piece, *, castling: bool) -> list[Square]:
        moves: list[Square] = []
        for df, dr in KING_OFFSETS:
            to_sq = offset(piece.square, df, dr)
            if to_sq is not None and not piece.is_friend(self._occ.color_at(to_sq)):
                moves.append(to_sq)

        if castling:
            moves.extend(self.castling_destinations(piece))
        return moves

    def castling_destinations(self, king: Piece) -> list[Square]:
        """Two-square king hops toward each eligible original-corner rook.

        Only the transit squares strictly between king and rook are tested
        for emptiness and attack; the king's own and landing squares are
        not checked separately.
        """
        if king.kind != PieceKind.KING or king.has_moved or king.has_castled:
            return []

        hops: list[Square] = []
        attacked: frozenset[Square] | None = None
        rank = king.square.rank
        for corner_file in _CORNER_FILES:
            rook = self._by_square.get(Square(corner_file, rank))
            if (
                rook is None
                or rook.kind != PieceKind.ROOK
                or rook.color != king.color
                or rook.has_moved
            ):
                continue

            step = 1 if corner_file > king.square.file else -1
            transit = [
                Square(f, rank) for f in range(king.square.file + step, corner_file, step)
            ]
            if len(transit) < 2:
                continue
            if not all(self._occ.is_empty(sq) for sq in transit):
                continue

            if attacked is None:
                attacked = self.attacked_squares(king.color.opposite)
            if any(sq in attacked for sq in transit):
                continue
            hops.append(transit[1])
        return hops
