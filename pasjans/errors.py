from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Powody odrzucenia ruchu, wartości to komunikaty dla gracza
class MoveError(Enum):
    INVALID_COLUMN = "Nieprawidłowa kolumna."
    SAME_COLUMN = "Kolumna źródłowa i docelowa są takie same."
    INVALID_COUNT = "Nieprawidłowa liczba kart."
    EMPTY_COLUMN = "Kolumna jest pusta."
    COUNT_EXCEEDS_RUN = "Za mało odkrytych kart w kolumnie."
    BROKEN_RUN = "Karty nie tworzą poprawnej sekwencji."
    RULE_MISMATCH = "Ruch niemożliwy: zły kolor lub wartość."
    KING_REQUIRED = "Na pustą kolumnę tylko Król."
    ACE_REQUIRED = "Na pusty stos końcowy tylko As."
    FOUNDATION_MISMATCH = "Nie można przenieść tej karty do foundation."
    FACE_DOWN = "Karta musi być odkryta."
    EMPTY_WASTE = "Waste pusty."
    EMPTY_FOUNDATION = "Brak karty w tym foundation."
    INVALID_SUIT = "Nieprawidłowy kolor foundation."
    NO_CARDS = "Brak kart do dobierania."
    NOTHING_TO_UNDO = "Brak ruchów do cofnięcia."
    GAME_OVER = "Gra jest zakończona."


class InvariantError(AssertionError):
    """Raised when the piles no longer hold a consistent 52-card layout."""


@dataclass(frozen=True)
class MoveResult:
    ok: bool
    error: Optional[MoveError] = None
    detail: str = ""

    def __bool__(self):
        return self.ok

    @property
    def message(self):
        if self.error is not None:
            return self.error.value
        return self.detail

    @classmethod
    def success(cls, detail=""):
        return cls(True, None, detail)

    @classmethod
    def failure(cls, error):
        return cls(False, error)
