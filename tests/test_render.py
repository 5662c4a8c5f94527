"""Rysowanie planszy w terminalu"""
import re

from rich.console import Console

from pasjans import render
from pasjans.config import Difficulty
from pasjans.game import Game
from pasjans.leaderboard import ScoreEntry

from conftest import build_piles, down, up

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(lines):
    return [ANSI.sub("", line) for line in lines]


class TestCardFace:

    def test_face_up_card(self):
        lines = plain(render.card_face_lines(up("10♥")))
        assert lines[1] == "│10   │"
        assert lines[2] == "│  ♥  │"
        assert len(lines) == render.CARD_HEIGHT

    def test_face_down_card(self):
        assert plain(render.card_face_lines(down("10♥")))[1] == "│││││││"

    def test_empty_slot(self):
        assert plain(render.card_face_lines(None))[1] == "│     │"

    def test_partial_card(self):
        lines = plain(render.card_face_lines(up("Q♠"), render.DRAW3_PARTIAL_WIDTH))
        assert all(len(line) == render.DRAW3_PARTIAL_WIDTH for line in lines)


class TestBoard:

    def test_tableau_lines(self):
        tableau, *_ = build_piles(columns=[[down("2♣"), up("9♥")], [up("10♠")]])
        lines = plain(render.tableau_lines(tableau))
        text = "\n".join(lines)
        assert "9" in text and "♥" in text and "10" in text
        assert lines[0].split() == ["1", "2", "3", "4", "5", "6", "7"]

    def test_top_row_hard_shows_fan(self):
        piles = build_piles(waste=[up("4♦"), up("5♣"), up("6♥")], draw_count=3)
        _, draw_pile, waste, foundation = piles
        text = "\n".join(plain(render.top_row_lines(draw_pile, waste, foundation)))
        assert "4" in text and "5" in text and "6" in text

    def test_top_row_easy_shows_top_only(self):
        piles = build_piles(waste=[up("4♦"), up("6♥")], draw_count=1)
        _, draw_pile, waste, foundation = piles
        text = "\n".join(plain(render.top_row_lines(draw_pile, waste, foundation)))
        assert "♦" not in text
        assert "♥" in text

    def test_display_game(self, rng, capsys):
        game = Game(Difficulty.HARD, rng=rng)
        console = Console(width=120)
        render.display_game(game, console, "Ruch niemożliwy.", failed=True)
        out = capsys.readouterr().out
        assert "Ruchy: 0" in out
        assert "Ruch niemożliwy." in out


class TestLeaderboardView:

    def test_empty(self):
        console = Console(record=True, width=100)
        assert not render.display_leaderboard(console, [])
        assert "Brak zapisanych wyników" in console.export_text()

    def test_table(self):
        console = Console(record=True, width=100)
        scores = [ScoreEntry("Ala", 95, Difficulty.HARD, "2026-01-01 10:00:00")]
        assert render.display_leaderboard(console, scores, highlight=scores[0], top_n=5)
        text = console.export_text()
        assert "Ala" in text
        assert "95" in text
        assert "Trudny" in text
