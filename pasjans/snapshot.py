from collections import deque
from dataclasses import dataclass
from typing import Dict, Tuple

from pasjans.cards import Card, Suit
from pasjans.config import MAX_UNDO_HISTORY


def _copy_cards(cards):
    return tuple(card.copy() for card in cards)


@dataclass(frozen=True)
class GameState:
    """Independent copy of every pile, taken before a move is attempted."""

    tableau: Tuple[Tuple[Card, ...], ...]
    draw_pile: Tuple[Card, ...]
    waste: Tuple[Card, ...]
    foundation: Dict[Suit, Tuple[Card, ...]]

    @classmethod
    def capture(cls, tableau, draw_pile, waste, foundation):
        return cls(
            tableau=tuple(_copy_cards(column) for column in tableau.columns),
            draw_pile=_copy_cards(draw_pile.cards),
            waste=_copy_cards(waste.cards),
            foundation={suit: _copy_cards(pile) for suit, pile in foundation.piles.items()},
        )

    # Przywraca stan w miejscu, kontenery pozostają tymi samymi obiektami
    def restore(self, tableau, draw_pile, waste, foundation):
        tableau.set_columns(self.tableau)
        draw_pile.set_cards(self.draw_pile)
        waste.set_cards(self.waste)
        foundation.set_piles(self.foundation)


# Ograniczona historia stanów do cofania ruchów, najstarszy wypada
class UndoHistory:
    def __init__(self, limit=MAX_UNDO_HISTORY):
        self._states = deque(maxlen=limit)

    @property
    def limit(self):
        return self._states.maxlen

    def __len__(self):
        return len(self._states)

    def push(self, state):
        self._states.append(state)

    def pop(self):
        return self._states.pop() if self._states else None
