import logging
import random
from enum import Enum

from pasjans import checker
from pasjans.cards import new_deck
from pasjans.config import MAX_UNDO_HISTORY, Difficulty
from pasjans.errors import MoveError, MoveResult
from pasjans.foundation import Foundation
from pasjans.snapshot import GameState, UndoHistory
from pasjans.stock import DrawPile, Waste
from pasjans.tableau import DEAL_SIZE, Tableau

logger = logging.getLogger(__name__)


class Phase(Enum):
    DEALING = "dealing"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


# Tworzy nową grę z losowym ułożeniem kart: 28 na planszę, 24 do talii
def new_game(draw_count=1, rng=None):
    rng = rng if rng is not None else random.Random()
    deck = new_deck()
    rng.shuffle(deck)
    tableau = Tableau(deck[:DEAL_SIZE])
    draw_pile = DrawPile(deck[DEAL_SIZE:], draw_count, rng)
    return tableau, draw_pile, Waste(draw_count), Foundation()


class Game:
    """A single deal played to a win or a loss.

    Every intent returns a MoveResult. The piles are captured as a snapshot
    before each intent runs; the snapshot lands in the undo history and the
    move counter goes up whether or not the move is legal, so undoing a
    rejected attempt only gives the counter back. After each applied move the
    piles are checked for consistency and the phase is re-evaluated.

    ``on_win`` is called once with ``(move_count, difficulty)`` when the last
    card reaches the foundation.
    """

    def __init__(self, difficulty=Difficulty.EASY, rng=None, undo_limit=MAX_UNDO_HISTORY,
                 on_win=None, piles=None):
        self.difficulty = difficulty
        self.phase = Phase.DEALING
        if piles is None:
            piles = new_game(difficulty.draw_count, rng)
        self.tableau, self.draw_pile, self.waste, self.foundation = piles
        self.history = UndoHistory(undo_limit)
        self.move_count = 0
        self._on_win = on_win
        checker.check_invariants(*self.piles)
        self.phase = Phase.PLAYING
        self._update_phase()

    @property
    def piles(self):
        return self.tableau, self.draw_pile, self.waste, self.foundation

    @property
    def undo_available(self):
        return len(self.history)

    @property
    def is_over(self):
        return self.phase in (Phase.WON, Phase.LOST)

    def is_won(self):
        return self.foundation.is_complete()

    def is_lost(self):
        return not self.is_won() and checker.is_lost(*self.piles)

    def _update_phase(self):
        if self.is_won():
            self.phase = Phase.WON
            logger.info("Game won in %d moves (%s)", self.move_count, self.difficulty.label)
            if self._on_win is not None:
                self._on_win(self.move_count, self.difficulty)
        elif checker.is_lost(*self.piles):
            self.phase = Phase.LOST
            logger.info("No legal moves left after %d moves", self.move_count)

    def _play(self, name, move):
        if self.phase is not Phase.PLAYING:
            return MoveResult.failure(MoveError.GAME_OVER)
        self.history.push(GameState.capture(*self.piles))
        self.move_count += 1
        result = move()
        if not result:
            logger.debug("%s rejected: %s, move %d", name, result.error.name, self.move_count)
            return result
        logger.debug("%s applied, move %d", name, self.move_count)
        checker.check_invariants(*self.piles)
        self._update_phase()
        return result

    def move_cards(self, from_col, to_col, count):
        return self._play("column->column",
                          lambda: self.tableau.move_sequence(from_col, to_col, count))

    def move_waste_to_column(self, to_col):
        return self._play("waste->column",
                          lambda: self.tableau.move_from_waste(self.waste, to_col))

    def move_column_to_foundation(self, from_col):
        return self._play("column->foundation",
                          lambda: self.tableau.move_to_foundation(from_col, self.foundation))

    def move_foundation_to_column(self, suit, to_col):
        return self._play("foundation->column",
                          lambda: self.tableau.move_from_foundation(self.foundation, suit, to_col))

    def move_waste_to_foundation(self):
        return self._play("waste->foundation", self._waste_to_foundation)

    def draw(self):
        return self._play("draw", self._draw)

    def _waste_to_foundation(self):
        card = self.waste.peek()
        if card is None:
            return MoveResult.failure(MoveError.EMPTY_WASTE)
        error = self.foundation.check(card)
        if error is not None:
            return MoveResult.failure(error)
        self.foundation.add(self.waste.remove_top())
        return MoveResult.success(f"Przeniesiono {card} do foundation.")

    # Dobiera z talii, a gdy jest pusta przetasowuje waste i dobiera ponownie
    def _draw(self):
        drawn = self.draw_pile.draw()
        if drawn:
            self.waste.add_cards(drawn)
            return MoveResult.success(f"Dobrano {len(drawn)} kart z talii.")
        if not self.waste.has_card():
            return MoveResult.failure(MoveError.NO_CARDS)
        self.draw_pile.recycle(self.waste.empty_all())
        drawn = self.draw_pile.draw()
        self.waste.add_cards(drawn)
        return MoveResult.success(f"Ponowne tasowanie talii. Dobrano {len(drawn)} kart.")

    # Cofa ostatni wykonany ruch
    def undo(self):
        if self.phase is not Phase.PLAYING:
            return MoveResult.failure(MoveError.GAME_OVER)
        state = self.history.pop()
        if state is None:
            return MoveResult.failure(MoveError.NOTHING_TO_UNDO)
        state.restore(*self.piles)
        self.move_count -= 1
        logger.debug("Undo, back to move %d", self.move_count)
        return MoveResult.success("Ruch cofnięty.")
