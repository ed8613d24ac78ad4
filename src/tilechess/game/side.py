"""Side: one player's live pieces and accumulated score."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from tilechess.core.enums import Color, PieceKind
from tilechess.core.piece import Piece
from tilechess.core.types import Square


class Side:
    """A participant owning a collection of live pieces.

    Pieces are removed only when captured; kings are never removed.
    """

    __slots__ = ("_color", "_pieces", "_score")

    def __init__(self, color: Color, pieces: Iterable[Piece] = ()) -> None:
        self._color = color
        self._pieces: list[Piece] = []
        self._score = 0
        for piece in pieces:
            self.add(piece)

    @property
    def color(self) -> Color:
        return self._color

    @property
    def score(self) -> int:
        return self._score

    @property
    def pieces(self) -> tuple[Piece, ...]:
        return tuple(self._pieces)

    # ── Mutation ─────────────────────────────────────────────────────────

    def add(self, piece: Piece) -> None:
        if piece.color != self._color:
            raise ValueError(f"{piece!r} does not belong to {self._color!s}")
        self._pieces.append(piece)

    def remove(self, piece: Piece) -> None:
        """Drop a captured piece from play."""
        if piece.kind == PieceKind.KING:
            raise ValueError("Kings cannot be removed from play")
        try:
            self._pieces.remove(piece)
        except ValueError:
            raise ValueError(f"{piece!r} is not a live {self._color!s} piece") from None

    def credit(self, points: int) -> None:
        self._score += points

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        for piece in self._pieces:
            if piece.square == sq:
                return piece
        return None

    def king(self) -> Piece:
        for piece in self._pieces:
            if piece.kind == PieceKind.KING:
                return piece
        raise ValueError(f"No {self._color.name} king on board")

    def __contains__(self, piece: object) -> bool:
        return any(p is piece for p in self._pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(tuple(self._pieces))

    def __len__(self) -> int:
        return len(self._pieces)

    def __repr__(self) -> str:
        return f"Side({self._color!s}, pieces={len(self._pieces)}, score={self._score})"
