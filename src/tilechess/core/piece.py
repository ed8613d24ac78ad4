"""Piece entity: kind, owner, current and original square."""

from __future__ import annotations

from dataclasses import dataclass, field

from tilechess.core.enums import Color, PieceKind
from tilechess.core.types import Square

# Kings are never captured, so they carry no point value.
PIECE_VALUES: dict[PieceKind, int | None] = {
    PieceKind.PAWN: 1,
    PieceKind.KNIGHT: 3,
    PieceKind.BISHOP: 3,
    PieceKind.ROOK: 5,
    PieceKind.QUEEN: 9,
    PieceKind.KING: None,
}

# FEN character ↔ (Color, PieceKind)
_CHAR_MAP: dict[str, tuple[Color, PieceKind]] = {
    "P": (Color.WHITE, PieceKind.PAWN),
    "N": (Color.WHITE, PieceKind.KNIGHT),
    "B": (Color.WHITE, PieceKind.BISHOP),
    "R": (Color.WHITE, PieceKind.ROOK),
    "Q": (Color.WHITE, PieceKind.QUEEN),
    "K": (Color.WHITE, PieceKind.KING),
    "p": (Color.BLACK, PieceKind.PAWN),
    "n": (Color.BLACK, PieceKind.KNIGHT),
    "b": (Color.BLACK, PieceKind.BISHOP),
    "r": (Color.BLACK, PieceKind.ROOK),
    "q": (Color.BLACK, PieceKind.QUEEN),
    "k": (Color.BLACK, PieceKind.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


def piece_char(color: Color, kind: PieceKind) -> str:
    """FEN character for a (color, kind) pair."""
    return _FEN_CHARS[(color, kind)]


_UNICODE: dict[tuple[Color, PieceKind], str] = {
    (Color.WHITE, PieceKind.PAWN): "♙",
    (Color.WHITE, PieceKind.KNIGHT): "♘",
    (Color.WHITE, PieceKind.BISHOP): "♗",
    (Color.WHITE, PieceKind.ROOK): "♖",
    (Color.WHITE, PieceKind.QUEEN): "♕",
    (Color.WHITE, PieceKind.KING): "♔",
    (Color.BLACK, PieceKind.PAWN): "♟",
    (Color.BLACK, PieceKind.KNIGHT): "♞",
    (Color.BLACK, PieceKind.BISHOP): "♝",
    (Color.BLACK, PieceKind.ROOK): "♜",
    (Color.BLACK, PieceKind.QUEEN): "♛",
    (Color.BLACK, PieceKind.KING): "♚",
}


@dataclass(eq=False, slots=True)
class Piece:
    """A live piece on the board.

    Identity matters: two pieces of the same kind and color are distinct
    objects, so equality is the default identity comparison.
    """

    kind: PieceKind
    color: Color
    square: Square
    origin: Square = field(init=False)
    has_castled: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self.square = Square(*self.square)
        self.origin = self.square

    # ── Derived state ────────────────────────────────────────────────────

    @property
    def has_moved(self) -> bool:
        """Whether the piece has left its original square."""
        return self.square != self.origin

    @property
    def value(self) -> int | None:
        return PIECE_VALUES[self.kind]

    @property
    def forward(self) -> int:
        """Rank direction of travel, fixed by the half it started on."""
        return 1 if self.origin.rank < 4 else -1

    def is_friend(self, color: Color | None) -> bool:
        return color == self.color

    def is_enemy(self, color: Color | None) -> bool:
        return color is not None and color != self.color

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.kind)]

    def __repr__(self) -> str:
        return f"Piece({self.color!s} {self.kind!s} @ {self.square!s})"

    @classmethod
    def from_char(cls, char: str, square: Square) -> Piece:
        """Create piece from FEN character, e.g. ``'N'`` → white knight."""
        try:
            color, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color, square)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.kind)]
