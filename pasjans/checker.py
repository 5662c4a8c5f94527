from collections import Counter

from pasjans.cards import VALUES, Suit
from pasjans.errors import InvariantError
from pasjans.tableau import COLUMN_COUNT


DECK_SIZE = len(VALUES) * len(Suit)


# Sprawdza czy gracz nie ma już żadnego dostępnego ruchu, patrzy tylko na obecne stosy
def is_lost(tableau, draw_pile, waste, foundation):
    waste_card = waste.peek()
    if waste_card is not None:
        if foundation.accept(waste_card):
            return False
        if can_move_waste_to_tableau(tableau, waste):
            return False
    if can_move_within_tableau(tableau):
        return False
    if can_move_tableau_to_foundation(tableau, foundation):
        return False
    if can_move_foundation_to_tableau(foundation, tableau):
        return False
    if has_draw_pile_cards(draw_pile, waste):
        return False
    return True


def can_move_waste_to_tableau(tableau, waste):
    return any(tableau.check_from_waste(waste, col) is None for col in range(COLUMN_COUNT))


# Każda sekwencja zaczynająca się od odkrytej karty, na każdą inną kolumnę
def can_move_within_tableau(tableau):
    for src in range(COLUMN_COUNT):
        run = tableau.face_up_run(src)
        for count in range(1, len(run) + 1):
            for dst in range(COLUMN_COUNT):
                if dst == src:
                    continue
                if tableau.check_sequence_move(src, dst, count) is None:
                    return True
    return False


def can_move_tableau_to_foundation(tableau, foundation):
    return any(tableau.check_to_foundation(col, foundation) is None for col in range(COLUMN_COUNT))


def can_move_foundation_to_tableau(foundation, tableau):
    for suit in Suit:
        for col in range(COLUMN_COUNT):
            if tableau.check_from_foundation(foundation, suit, col) is None:
                return True
    return False


# Można dobierać, dopóki talia albo waste (do przetasowania) nie są puste
def has_draw_pile_cards(draw_pile, waste):
    return draw_pile.has_cards() or waste.has_card()


# Rzuca InvariantError, jeśli na stosach nie ma dokładnie jednej spójnej talii
def check_invariants(tableau, draw_pile, waste, foundation):
    every_card = tableau.all_cards() + list(draw_pile.cards) + list(waste.cards) + foundation.all_cards()
    counts = Counter(card.key for card in every_card)
    duplicates = sorted(f"{value}{suit.value}" for (value, suit), n in counts.items() if n > 1)
    if duplicates:
        raise InvariantError(f"Duplicated cards: {', '.join(duplicates)}")
    if len(counts) != DECK_SIZE:
        raise InvariantError(f"Expected {DECK_SIZE} cards in play, found {len(counts)}")

    for suit, pile in foundation.piles.items():
        for expected, card in zip(VALUES, pile):
            if card.suit != suit or card.value != expected or card.hidden:
                raise InvariantError(f"Foundation {suit.value} is not a contiguous run from Ace: {list(pile)}")

    if any(card.hidden for card in waste.cards):
        raise InvariantError("Face-down card in the waste")

    for index, column in enumerate(tableau.columns):
        if column and column[-1].hidden:
            raise InvariantError(f"Column {index + 1} has a face-down top card")
