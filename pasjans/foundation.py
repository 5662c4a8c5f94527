from pasjans.cards import VALUES, Suit
from pasjans.rules import check_foundation_target


# Cztery stosy końcowe, po jednym na każdy kolor
class Foundation:
    def __init__(self):
        self._piles = {suit: [] for suit in Suit}

    def pile(self, suit):
        return tuple(self._piles[suit])

    @property
    def piles(self):
        return {suit: tuple(cards) for suit, cards in self._piles.items()}

    def top(self, suit):
        pile = self._piles[suit]
        return pile[-1] if pile else None

    def check(self, card):
        return check_foundation_target(self.top(card.suit), card)

    # Sprawdza czy daną kartę można umieścić na kupce końcowej jej koloru
    def accept(self, card):
        return card is not None and self.check(card) is None

    def add(self, card):
        if not self.accept(card):
            return False
        card.hidden = False
        self._piles[card.suit].append(card)
        return True

    # Zdejmuje wierzchnią kartę (ruch foundation -> kolumna sprawdza kolumna)
    def remove_top(self, suit):
        pile = self._piles[suit]
        return pile.pop() if pile else None

    def is_complete(self):
        return all(len(pile) == len(VALUES) for pile in self._piles.values())

    def all_cards(self):
        return [card for pile in self._piles.values() for card in pile]

    def __len__(self):
        return sum(len(pile) for pile in self._piles.values())

    # Nadpisuje zawartość stosów w miejscu (używane przy cofaniu ruchów)
    def set_piles(self, piles):
        for suit in Suit:
            self._piles[suit][:] = [card.copy() for card in piles.get(suit, ())]
