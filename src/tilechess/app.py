"""Console entry point: a minimal text front-end over the turn controller."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from tilechess.core.enums import Color, TurnPhase
from tilechess.core.errors import InvalidSquare
from tilechess.core.types import parse_square
from tilechess.game.controller import TurnController
from tilechess.game.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING") -> None:
    """Install a basic stderr handler at *level*."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tilechess",
        description="Play a two-player game by typing square names (e.g. e2).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--black-on-top",
        action="store_true",
        help="Place black's back rank on rank 1 instead of white's.",
    )
    return parser


def render(ctrl: TurnController) -> str:
    """Board, scores and side to move as text."""
    lines = [repr(ctrl.state.occupancy)]
    lines.append(
        f"white {ctrl.score(Color.WHITE)} - black {ctrl.score(Color.BLACK)}"
        f" | {ctrl.active_side()!s} to move"
    )
    return "\n".join(lines)


def play(ctrl: TurnController, lines: Iterable[str], out: TextIO) -> None:
    """Feed square names from *lines* to the controller."""
    print(render(ctrl), file=out)
    for raw in lines:
        text = raw.strip().lower()
        if not text:
            continue
        if text in ("q", "quit", "exit"):
            break
        try:
            square = parse_square(text)
        except InvalidSquare:
            print(f"not a square: {text}", file=out)
            continue

        before = ctrl.active_side()
        phase = ctrl.handle_click(square)
        if phase == TurnPhase.SELECTED and ctrl.selected is not None:
            targets = " ".join(sorted(str(sq) for sq in ctrl.legal_destinations(ctrl.selected)))
            print(f"selected {ctrl.selected.kind!s} on {square}: {targets or '-'}", file=out)
        elif ctrl.active_side() != before:
            print(render(ctrl), file=out)


def main(argv: list[str] | None = None) -> int:
    """Launch the console game."""
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    settings = GameSettings(white_on_top=not args.black_on_top)
    ctrl = TurnController()
    ctrl.new_game(settings)
    _LOGGER.info("Starting console game")
    play(ctrl, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
