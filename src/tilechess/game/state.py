"""Game state — both sides, the active pointer, selection and occupancy."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from tilechess.core.enums import Color, PieceKind
from tilechess.core.move_generator import MoveGenerator
from tilechess.core.occupancy import OccupancyIndex
from tilechess.core.piece import Piece
from tilechess.core.types import BOARD_SIZE, Square, check_square
from tilechess.game.settings import GameSettings
from tilechess.game.side import Side

BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Description of one executed move."""

    piece_kind: PieceKind
    color: Color
    from_sq: Square
    to_sq: Square
    captured: PieceKind | None = None
    points: int = 0
    castled: bool = False


def initial_pieces(white_on_top: bool = True) -> list[Piece]:
    """The 32 pieces of the opening layout."""
    pieces: list[Piece] = []
    for color in (Color.WHITE, Color.BLACK):
        on_top = (color == Color.WHITE) == white_on_top
        back = 0 if on_top else BOARD_SIZE - 1
        pawn_rank = back + (1 if on_top else -1)
        for f in range(BOARD_SIZE):
            pieces.append(Piece(PieceKind.PAWN, color, Square(f, pawn_rank)))
        for f, kind in enumerate(BACK_RANK):
            pieces.append(Piece(kind, color, Square(f, back)))
    return pieces


@dataclass
class GameState:
    """Single owner of all mutable game data.

    This is a pure data/logic class — no threading, no UI.  The occupancy
    index is derived from the sides' pieces and is rebuilt, never patched.
    """

    sides: dict[Color, Side] = field(init=False)
    active: Color = field(default=Color.WHITE, init=False)
    selected: Piece | None = field(default=None, init=False)
    occupancy: OccupancyIndex = field(default_factory=OccupancyIndex, init=False)

    def __post_init__(self) -> None:
        self.sides = {Color.WHITE: Side(Color.WHITE), Color.BLACK: Side(Color.BLACK)}

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, settings: GameSettings | None = None) -> None:
        """Initialise (or reset) the game to the opening layout."""
        settings = settings or GameSettings()
        self._load(initial_pieces(settings.white_on_top), settings.first_to_move)

    @classmethod
    def from_pieces(
        cls, pieces: Iterable[Piece], active: Color = Color.WHITE
    ) -> GameState:
        """Build a state from an arbitrary set of pieces."""
        state = cls()
        state._load(list(pieces), active)
        return state

    def _load(self, pieces: list[Piece], active: Color) -> None:
        seen: set[Square] = set()
        for piece in pieces:
            sq = check_square(piece.square)
            if sq in seen:
                raise ValueError(f"Two pieces on square {sq}")
            seen.add(sq)

        self.sides = {
            color: Side(color, (p for p in pieces if p.color == color))
            for color in (Color.WHITE, Color.BLACK)
        }
        self.active = active
        self.selected = None
        self.rebuild_occupancy()

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def active_side(self) -> Side:
        return self.sides[self.active]

    @property
    def opposing_side(self) -> Side:
        return self.sides[self.active.opposite]

    def live_pieces(self) -> list[Piece]:
        return [*self.sides[Color.WHITE], *self.sides[Color.BLACK]]

    def piece_at(self, sq: Square) -> Piece | None:
        for side in self.sides.values():
            piece = side.piece_at(sq)
            if piece is not None:
                return piece
        return None

    def owner(self, piece: Piece) -> Side | None:
        side = self.sides[piece.color]
        return side if piece in side else None

    def move_generator(self) -> MoveGenerator:
        return MoveGenerator(self.occupancy, self.live_pieces())

    # ── Mutation ─────────────────────────────────────────────────────────

    def rebuild_occupancy(self) -> None:
        self.occupancy.rebuild(self.live_pieces())

    def swap_sides(self) -> None:
        self.active = self.active.opposite

    def apply_move(self, piece: Piece, dest: Square) -> MoveRecord:
        """Move *piece* to *dest*, removing and scoring any captured piece.

        Caller is responsible for the legality check, including refusing
        king captures.
        """
        from_sq = piece.square
        target = self.piece_at(dest)
        captured: PieceKind | None = None
        points = 0
        if target is not None and target is not piece:
            self.sides[target.color].remove(target)
            captured = target.kind
            points = target.value or 0
            self.sides[piece.color].credit(points)

        castled = (
            piece.kind == PieceKind.KING
            and not piece.has_moved
            and abs(dest.file - from_sq.file) == 2
            and dest.rank == from_sq.rank
        )
        piece.square = dest
        if castled:
            piece.has_castled = True

        return MoveRecord(
            piece_kind=piece.kind,
            color=piece.color,
            from_sq=from_sq,
            to_sq=dest,
            captured=captured,
            points=points,
            castled=castled,
        )
