"""
Pasjans - silnik gry Klondike

Modules:
    cards: karty, kolory i kolejność wartości
    rules: zasady układania kart
    foundation, stock, tableau: stosy gry
    snapshot: zapis stanu i cofanie ruchów
    checker: wykrywanie przegranej
    game: silnik rozgrywki
"""
from .cards import Card, Suit, VALUES, new_deck
from .config import Difficulty, Settings, load_settings
from .errors import InvariantError, MoveError, MoveResult
from .foundation import Foundation
from .stock import DrawPile, Waste
from .tableau import Tableau
from .snapshot import GameState, UndoHistory
from .checker import check_invariants, is_lost
from .game import Game, Phase, new_game

__all__ = [
    "Card",
    "Suit",
    "VALUES",
    "new_deck",
    "Difficulty",
    "Settings",
    "load_settings",
    "InvariantError",
    "MoveError",
    "MoveResult",
    "Foundation",
    "DrawPile",
    "Waste",
    "Tableau",
    "GameState",
    "UndoHistory",
    "check_invariants",
    "is_lost",
    "Game",
    "Phase",
    "new_game",
]
