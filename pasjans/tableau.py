from pasjans.cards import Suit
from pasjans.errors import MoveError, MoveResult
from pasjans.rules import check_column_target, is_valid_run

COLUMN_COUNT = 7
DEAL_SIZE = COLUMN_COUNT * (COLUMN_COUNT + 1) // 2


class Tableau:
    """Seven playing columns, each ordered bottom to top.

    Every move comes as a pure ``check_*`` method returning the reason a move
    is illegal (or None) and a mover that calls the check before touching any
    pile, so a rejected move never mutates anything.
    """

    def __init__(self, cards=None):
        self._columns = [[] for _ in range(COLUMN_COUNT)]
        if cards is not None:
            self.deal(cards)

    # Rozdaje karty do kolumn: kolumna i dostaje i kart, odkryta tylko ostatnia
    def deal(self, cards):
        cards = list(cards)
        if len(cards) != DEAL_SIZE:
            raise ValueError(f"Tableau deal needs exactly {DEAL_SIZE} cards, got {len(cards)}")
        card_counter = 0
        for i, column in enumerate(self._columns):
            column.clear()
            for j in range(i + 1):
                card = cards[card_counter]
                card.hidden = (j != i)
                column.append(card)
                card_counter += 1

    @property
    def columns(self):
        return tuple(tuple(column) for column in self._columns)

    def column(self, index):
        return tuple(self._columns[index])

    def __len__(self):
        return sum(len(column) for column in self._columns)

    def all_cards(self):
        return [card for column in self._columns for card in column]

    def is_valid_index(self, index):
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        return 0 <= index < COLUMN_COUNT

    def top(self, index):
        column = self._columns[index]
        return column[-1] if column else None

    # Indeks pierwszej odkrytej karty w kolumnie albo None
    def first_face_up_index(self, index):
        for row, card in enumerate(self._columns[index]):
            if not card.hidden:
                return row
        return None

    def face_up_run(self, index):
        start = self.first_face_up_index(index)
        if start is None:
            return ()
        return tuple(self._columns[index][start:])

    def _reveal_top(self, index):
        column = self._columns[index]
        if column:
            column[-1].hidden = False

    def check_sequence_move(self, from_col, to_col, count):
        if not (self.is_valid_index(from_col) and self.is_valid_index(to_col)):
            return MoveError.INVALID_COLUMN
        if from_col == to_col:
            return MoveError.SAME_COLUMN
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            return MoveError.INVALID_COUNT
        src = self._columns[from_col]
        if not src:
            return MoveError.EMPTY_COLUMN
        run = self.face_up_run(from_col)
        if count > len(run):
            return MoveError.COUNT_EXCEEDS_RUN
        seq = src[-count:]
        if any(card.hidden for card in seq):
            return MoveError.FACE_DOWN
        if not is_valid_run(seq):
            return MoveError.BROKEN_RUN
        return check_column_target(self.top(to_col), seq[0])

    # Przenosi sekwencję kart między kolumnami
    def move_sequence(self, from_col, to_col, count):
        error = self.check_sequence_move(from_col, to_col, count)
        if error is not None:
            return MoveResult.failure(error)
        src = self._columns[from_col]
        seq = src[-count:]
        del src[-count:]
        self._columns[to_col].extend(seq)
        self._reveal_top(from_col)
        return MoveResult.success(f"Przeniesiono {count} kart(y) na kolumnę {to_col + 1}.")

    def check_from_waste(self, waste, to_col):
        if not self.is_valid_index(to_col):
            return MoveError.INVALID_COLUMN
        card = waste.peek()
        if card is None:
            return MoveError.EMPTY_WASTE
        return check_column_target(self.top(to_col), card)

    # Przenosi kartę z waste na wskazaną kolumnę
    def move_from_waste(self, waste, to_col):
        error = self.check_from_waste(waste, to_col)
        if error is not None:
            return MoveResult.failure(error)
        card = waste.remove_top()
        card.hidden = False
        self._columns[to_col].append(card)
        return MoveResult.success(f"Karta {card} na kolumnie {to_col + 1}.")

    def check_to_foundation(self, from_col, foundation):
        if not self.is_valid_index(from_col):
            return MoveError.INVALID_COLUMN
        card = self.top(from_col)
        if card is None:
            return MoveError.EMPTY_COLUMN
        if card.hidden:
            return MoveError.FACE_DOWN
        return foundation.check(card)

    # Przenosi wierzchnią kartę z kolumny na foundation
    def move_to_foundation(self, from_col, foundation):
        error = self.check_to_foundation(from_col, foundation)
        if error is not None:
            return MoveResult.failure(error)
        card = self._columns[from_col].pop()
        foundation.add(card)
        self._reveal_top(from_col)
        return MoveResult.success(f"Przeniesiono {card} do foundation.")

    def check_from_foundation(self, foundation, suit, to_col):
        if not self.is_valid_index(to_col):
            return MoveError.INVALID_COLUMN
        if not isinstance(suit, Suit):
            return MoveError.INVALID_SUIT
        card = foundation.top(suit)
        if card is None:
            return MoveError.EMPTY_FOUNDATION
        return check_column_target(self.top(to_col), card)

    # Przenosi kartę z foundation na kolumnę
    def move_from_foundation(self, foundation, suit, to_col):
        error = self.check_from_foundation(foundation, suit, to_col)
        if error is not None:
            return MoveResult.failure(error)
        card = foundation.remove_top(suit)
        self._columns[to_col].append(card)
        return MoveResult.success(f"Karta {card} wróciła na kolumnę {to_col + 1}.")

    # Nadpisuje kolumny w miejscu (używane przy cofaniu ruchów)
    def set_columns(self, columns):
        columns = list(columns)
        if len(columns) != COLUMN_COUNT:
            raise ValueError(f"Expected {COLUMN_COUNT} columns, got {len(columns)}")
        for column, saved in zip(self._columns, columns):
            column[:] = [card.copy() for card in saved]
