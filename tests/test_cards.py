"""Karty, kolory i zasady układania"""
import pytest

from pasjans.cards import VALUES, Card, Suit, new_deck
from pasjans.rules import (
    can_place_on_column,
    can_place_on_foundation,
    check_column_target,
    check_foundation_target,
    is_one_lower,
    is_valid_run,
    opposite_color,
)
from pasjans.errors import MoveError

from conftest import down, up


class TestCard:

    def test_rank_order(self):
        assert up("A♠").rank == 0
        assert up("10♥").rank == 9
        assert up("K♣").rank == 12

    def test_colors(self):
        assert up("5♥").is_red()
        assert up("5♦").is_red()
        assert not up("5♣").is_red()
        assert not up("5♠").is_red()

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            Card("1", Suit.HEARTS)
        with pytest.raises(ValueError):
            Card("A", "♥")

    def test_copy_is_independent(self):
        card = down("7♦")
        clone = card.copy()
        assert clone == card
        assert clone is not card
        clone.hidden = False
        assert card.hidden

    def test_equality_includes_visibility(self):
        assert up("Q♠") != down("Q♠")
        assert up("Q♠").key == down("Q♠").key

    def test_repr(self):
        assert repr(down("10♣")) == "Card(10♣H)"
        assert str(up("J♥")) == "J♥"


class TestDeck:

    def test_deck_has_52_unique_cards(self):
        deck = new_deck()
        assert len(deck) == 52
        assert len({card.key for card in deck}) == 52
        assert all(card.hidden for card in deck)

    def test_each_suit_has_all_values(self):
        deck = new_deck()
        for suit in Suit:
            assert [c.value for c in deck if c.suit == suit] == VALUES


class TestSuitParse:

    @pytest.mark.parametrize("text,suit", [
        ("♥", Suit.HEARTS), ("h", Suit.HEARTS), ("D", Suit.DIAMONDS),
        ("◆", Suit.DIAMONDS), ("c", Suit.CLUBS), ("spades", Suit.SPADES), (" pik ", Suit.SPADES),
    ])
    def test_known(self, text, suit):
        assert Suit.parse(text) is suit

    def test_unknown(self):
        assert Suit.parse("x") is None


class TestRules:

    def test_opposite_color(self):
        assert opposite_color(up("10♠"), up("9♥"))
        assert not opposite_color(up("10♠"), up("9♣"))

    def test_is_one_lower(self):
        assert is_one_lower(up("10♠"), up("9♥"))
        assert not is_one_lower(up("10♠"), up("8♥"))
        assert not is_one_lower(up("9♥"), up("10♠"))
        assert is_one_lower(up("2♦"), up("A♣"))

    def test_column_target(self):
        assert can_place_on_column(up("10♠"), up("9♥"))
        assert check_column_target(up("10♠"), up("9♣")) is MoveError.RULE_MISMATCH
        assert check_column_target(up("10♠"), up("8♥")) is MoveError.RULE_MISMATCH

    def test_empty_column_requires_king(self):
        assert check_column_target(None, up("Q♠")) is MoveError.KING_REQUIRED
        assert can_place_on_column(None, up("K♠"))

    def test_foundation_target(self):
        assert can_place_on_foundation(None, up("A♥"))
        assert check_foundation_target(None, up("2♥")) is MoveError.ACE_REQUIRED
        assert can_place_on_foundation(up("A♥"), up("2♥"))
        assert check_foundation_target(up("A♥"), up("2♦")) is MoveError.FOUNDATION_MISMATCH
        assert check_foundation_target(up("A♥"), up("3♥")) is MoveError.FOUNDATION_MISMATCH

    def test_valid_run(self):
        assert is_valid_run([up("K♠"), up("Q♥"), up("J♣")])
        assert is_valid_run([up("5♦")])
        assert not is_valid_run([up("K♠"), up("Q♥"), up("J♦")])
