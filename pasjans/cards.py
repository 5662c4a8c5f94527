from enum import Enum

VALUES = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
ACE = "A"
KING = "K"


class Suit(Enum):
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"
    SPADES = "♠"

    @property
    def is_red(self):
        return self in (Suit.HEARTS, Suit.DIAMONDS)

    # Rozpoznaje kolor po symbolu, literze (h/d/c/s) lub nazwie
    @classmethod
    def parse(cls, text):
        key = text.strip().lower()
        aliases = {
            "h": cls.HEARTS, "kier": cls.HEARTS, "♥": cls.HEARTS,
            "d": cls.DIAMONDS, "karo": cls.DIAMONDS, "♦": cls.DIAMONDS, "◆": cls.DIAMONDS,
            "c": cls.CLUBS, "trefl": cls.CLUBS, "♣": cls.CLUBS,
            "s": cls.SPADES, "pik": cls.SPADES, "♠": cls.SPADES,
        }
        if key in aliases:
            return aliases[key]
        for suit in cls:
            if suit.name.lower() == key:
                return suit
        return None


# Pojedyncza karta do gry
class Card:
    def __init__(self, value, suit, hidden=False):
        if value not in VALUES:
            raise ValueError(f"Unknown card value: {value!r}")
        if not isinstance(suit, Suit):
            raise ValueError(f"Unknown suit: {suit!r}")
        self.value = value
        self.suit = suit
        self.hidden = hidden

    def __repr__(self):
        return f"Card({self.value}{self.suit.value}{'H' if self.hidden else ''})"

    def __str__(self):
        return f"{self.value}{self.suit.value}"

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.get_raw_data() == other.get_raw_data()

    __hash__ = None

    @property
    def rank(self):
        return VALUES.index(self.value)

    @property
    def key(self):
        return (self.value, self.suit)

    def is_red(self):
        return self.suit.is_red

    # Zwraca surowe dane karty do zapisu stanu
    def get_raw_data(self):
        return [self.value, self.suit, self.hidden]

    def copy(self):
        return Card(self.value, self.suit, self.hidden)


# Tworzy pełną, nieprzetasowaną talię 52 zakrytych kart
def new_deck():
    return [Card(v, s, hidden=True) for s in Suit for v in VALUES]
