"""Tests for the console front-end."""

from __future__ import annotations

import io

import pytest

from tilechess import app
from tilechess.game.controller import TurnController


class TestPlay:
    def test_move_prints_board_and_turn(self) -> None:
        ctrl = TurnController()
        out = io.StringIO()
        app.play(ctrl, ["e2", "e4"], out)
        text = out.getvalue()
        assert "white to move" in text
        assert "selected pawn on e2: e3 e4" in text
        assert "black to move" in text

    def test_bad_square_reported(self) -> None:
        out = io.StringIO()
        app.play(TurnController(), ["z9", ""], out)
        assert "not a square: z9" in out.getvalue()

    def test_quit_stops_reading(self) -> None:
        ctrl = TurnController()
        out = io.StringIO()
        app.play(ctrl, ["quit", "e2", "e4"], out)
        assert ctrl.selected is None
        assert "black to move" not in out.getvalue()

    def test_render_scores(self) -> None:
        assert "white 0 - black 0" in app.render(TurnController())


class TestMain:
    def test_main_reads_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("e2\ne4\nq\n"))
        out = io.StringIO()
        monkeypatch.setattr("sys.stdout", out)
        assert app.main(["--log-level", "DEBUG"]) == 0
        assert "black to move" in out.getvalue()

    def test_black_on_top(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("e7\ne5\n"))
        out = io.StringIO()
        monkeypatch.setattr("sys.stdout", out)
        assert app.main(["--black-on-top"]) == 0
        assert "selected pawn on e7: e5 e6" in out.getvalue()
