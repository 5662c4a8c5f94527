import logging
import random

logger = logging.getLogger(__name__)

WASTE_FAN_SIZE = 3


# Talia, z której gracz dobiera karty (wierzch to koniec listy)
class DrawPile:
    def __init__(self, cards=(), draw_count=1, rng=None):
        if draw_count not in (1, 3):
            raise ValueError(f"draw_count must be 1 or 3, got {draw_count}")
        self._cards = list(cards)
        for card in self._cards:
            card.hidden = True
        self._draw_count = draw_count
        self._rng = rng if rng is not None else random.Random()

    @property
    def draw_count(self):
        return self._draw_count

    @property
    def cards(self):
        return tuple(self._cards)

    def __len__(self):
        return len(self._cards)

    def has_cards(self):
        return bool(self._cards)

    # Dobiera do draw_count kart z wierzchu, odkryte, w kolejności zdejmowania
    def draw(self):
        drawn = []
        while self._cards and len(drawn) < self._draw_count:
            card = self._cards.pop()
            card.hidden = False
            drawn.append(card)
        return drawn

    # Tasuje odrzucone karty i dokłada je zakryte pod talię
    def recycle(self, cards):
        cards = list(cards)
        self._rng.shuffle(cards)
        for card in cards:
            card.hidden = True
        self._cards.extend(cards)
        logger.debug("Recycled %d waste cards into the draw pile", len(cards))

    def set_cards(self, cards):
        self._cards[:] = [card.copy() for card in cards]


# Stos kart odrzuconych, grywalna jest tylko wierzchnia karta
class Waste:
    def __init__(self, draw_count=1):
        self._cards = []
        self._draw_count = draw_count

    @property
    def draw_count(self):
        return self._draw_count

    @property
    def cards(self):
        return tuple(self._cards)

    def __len__(self):
        return len(self._cards)

    def has_card(self):
        return bool(self._cards)

    def add_cards(self, cards):
        self._cards.extend(cards)

    def peek(self):
        return self._cards[-1] if self._cards else None

    def remove_top(self):
        return self._cards.pop() if self._cards else None

    # Karty do wyświetlenia: w trybie trudnym do trzech, ostatnia jest grywalna
    def visible(self):
        if not self._cards:
            return ()
        if self._draw_count == 1:
            return (self._cards[-1],)
        return tuple(self._cards[-WASTE_FAN_SIZE:])

    def empty_all(self):
        cards = self._cards[:]
        self._cards.clear()
        return cards

    def set_cards(self, cards):
        self._cards[:] = [card.copy() for card in cards]
