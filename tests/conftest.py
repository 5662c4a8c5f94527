"""Shared card and pile builders for the test suite."""
import random

import pytest

from pasjans.cards import Card, Suit, new_deck
from pasjans.foundation import Foundation
from pasjans.stock import DrawPile, Waste
from pasjans.tableau import COLUMN_COUNT, Tableau


def up(text):
    """Face-up card from text such as '9♥' or '10♠'."""
    return Card(text[:-1], Suit(text[-1]), hidden=False)


def down(text):
    return Card(text[:-1], Suit(text[-1]), hidden=True)


def make_tableau(*columns):
    tableau = Tableau()
    cols = list(columns) + [[]] * (COLUMN_COUNT - len(columns))
    tableau.set_columns(cols)
    return tableau


def make_foundation(*texts):
    foundation = Foundation()
    for text in texts:
        assert foundation.add(up(text)), text
    return foundation


def fill_foundation(foundation, suit, up_to):
    """Put A..up_to of ``suit`` on the foundation."""
    for card in new_deck():
        if card.suit == suit:
            foundation.add(card)
            if card.value == up_to:
                break


def build_piles(columns=(), waste=(), foundation=None, stock=None, draw_count=1, rng=None):
    """Build the four piles; cards not placed anywhere end up face-down in the stock."""
    tableau = make_tableau(*columns)
    foundation = foundation if foundation is not None else Foundation()
    waste_pile = Waste(draw_count)
    waste_pile.set_cards(waste)
    if stock is None:
        used = {card.key for card in tableau.all_cards() + list(waste) + foundation.all_cards()}
        stock = [card for card in new_deck() if card.key not in used]
    draw_pile = DrawPile([card.copy() for card in stock], draw_count, rng or random.Random(0))
    return tableau, draw_pile, waste_pile, foundation


def snapshot_of(tableau, draw_pile, waste, foundation):
    """Plain comparable dump of every pile."""
    return (
        [[c.get_raw_data() for c in col] for col in tableau.columns],
        [c.get_raw_data() for c in draw_pile.cards],
        [c.get_raw_data() for c in waste.cards],
        {suit: [c.get_raw_data() for c in pile] for suit, pile in foundation.piles.items()},
    )


@pytest.fixture
def rng():
    return random.Random(1234)
