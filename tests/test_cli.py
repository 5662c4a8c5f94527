"""Obsługa poleceń menu"""
import pytest

pytest.importorskip("keyboard")

from pasjans import cli
from pasjans.cards import Suit
from pasjans.errors import MoveError
from pasjans.game import Game

from conftest import build_piles, down, make_foundation, up


def answers(*values):
    it = iter(values)
    return lambda prompt: next(it)


class TestExecute:

    def test_column_to_column_uses_one_based_columns(self):
        game = Game(piles=build_piles(columns=[[down("2♣"), up("9♥")], [up("10♠")]]))
        result = cli.execute(game, "1", answers("1", "2", "1"))
        assert result.ok
        assert game.tableau.column(1) == (up("10♠"), up("9♥"))

    def test_bad_number(self, rng):
        game = Game(rng=rng)
        assert cli.execute(game, "1", answers("x", "2", "1")).error is MoveError.INVALID_COLUMN
        assert cli.execute(game, "1", answers("1", "2", "dużo")).error is MoveError.INVALID_COUNT
        assert cli.execute(game, "3", answers("")).error is MoveError.INVALID_COLUMN
        assert game.move_count == 0

    def test_draw_and_undo(self, rng):
        game = Game(rng=rng)
        assert cli.execute(game, "2", answers())
        assert cli.execute(game, cli.UNDO, answers())
        assert game.move_count == 0

    def test_foundation_to_column_by_suit_letter(self):
        foundation = make_foundation("A♥", "2♥")
        game = Game(piles=build_piles(columns=[[up("3♠")]], foundation=foundation))
        assert cli.execute(game, "6", answers("h", "1"))
        assert game.foundation.top(Suit.HEARTS) == up("A♥")

    def test_unknown_choice(self, rng):
        assert cli.execute(Game(rng=rng), "42", answers()) is None

    def test_unknown_suit(self):
        foundation = make_foundation("A♥", "2♥")
        game = Game(piles=build_piles(columns=[[up("3♠")]], foundation=foundation))
        assert cli.execute(game, "6", answers("x", "1")).error is MoveError.INVALID_SUIT
        assert game.foundation.top(Suit.HEARTS) == up("2♥")
        assert game.move_count == 0
