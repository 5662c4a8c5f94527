from pasjans.cards import ACE, KING
from pasjans.errors import MoveError


# Sprawdza czy karty są przeciwnego koloru (czerwona/czarna)
def opposite_color(a, b):
    return a.is_red() != b.is_red()


# Sprawdza czy karta 'lower' jest dokładnie o jedną wartość niższa od 'higher'
def is_one_lower(higher, lower):
    return lower.rank + 1 == higher.rank


# Powód, dla którego karta nie może trafić na kolumnę z wierzchnią 'top', albo None
def check_column_target(top, card):
    if top is None:
        return None if card.value == KING else MoveError.KING_REQUIRED
    if opposite_color(top, card) and is_one_lower(top, card):
        return None
    return MoveError.RULE_MISMATCH


# To samo dla stosu końcowego: ten sam kolor, wartość o jeden wyższa, na pusty tylko As
def check_foundation_target(top, card):
    if top is None:
        return None if card.value == ACE else MoveError.ACE_REQUIRED
    if top.suit == card.suit and is_one_lower(card, top):
        return None
    return MoveError.FOUNDATION_MISMATCH


def can_place_on_column(top, card):
    return check_column_target(top, card) is None


def can_place_on_foundation(top, card):
    return check_foundation_target(top, card) is None


# Sekwencja jest poprawna, gdy każda kolejna karta pasuje na poprzednią
def is_valid_run(cards):
    for lower_idx in range(1, len(cards)):
        if not can_place_on_column(cards[lower_idx - 1], cards[lower_idx]):
            return False
    return True
