"""OccupancyIndex - derived per-square lookup of who stands where."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

from tilechess.core.enums import Color, PieceKind
from tilechess.core.piece import Piece, piece_char
from tilechess.core.types import BOARD_SIZE, Square, check_square


class Occupant(NamedTuple):
    color: Color
    kind: PieceKind

    def __str__(self) -> str:
        return piece_char(self.color, self.kind)


class OccupancyIndex:
    """8x8 grid of ``Occupant | None`` rebuilt from the live pieces.

    The index is derived state: each piece's own ``square`` is
    authoritative.  It is cleared and re-recorded once per turn tick and
    never patched incrementally.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[list[Occupant | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Rebuild ------------------------------------------------------------

    def reset(self) -> None:
        for row in self._cells:
            for f in range(BOARD_SIZE):
                row[f] = None

    def record(self, piece: Piece) -> None:
        sq = check_square(piece.square)
        self._cells[sq.rank][sq.file] = Occupant(piece.color, piece.kind)

    def rebuild(self, pieces: Iterable[Piece]) -> None:
        """``reset()`` followed by ``record()`` for every live piece."""
        self.reset()
        for piece in pieces:
            self.record(piece)

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> OccupancyIndex:
        index = cls()
        index.rebuild(pieces)
        return index

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Occupant | None:
        sq = check_square(sq)
        return self._cells[sq.rank][sq.file]

    def occupant(self, sq: Square) -> Occupant | None:
        return self[sq]

    def color_at(self, sq: Square) -> Color | None:
        occ = self[sq]
        return None if occ is None else occ.color

    def kind_at(self, sq: Square) -> PieceKind | None:
        occ = self[sq]
        return None if occ is None else occ.kind

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def occupied_squares(self) -> list[Square]:
        return [
            Square(f, r)
            for r in range(BOARD_SIZE)
            for f in range(BOARD_SIZE)
            if self._cells[r][f] is not None
        ]

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OccupancyIndex):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                occ = self._cells[rank][file]
                row.append(str(occ) if occ else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
