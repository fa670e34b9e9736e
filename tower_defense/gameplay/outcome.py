"""
Win/loss evaluation.
NO UI DEPENDENCIES.
"""
from enum import Enum, auto

from .state import GameState


class Outcome(Enum):
    """Result of evaluating the state after a tick."""
    ONGOING = auto()
    WIN = auto()
    LOSS = auto()

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.ONGOING


class WinLossEvaluator:
    """
    Inspects post-settlement state.

    Win is checked before Loss, so an empty map with no lives left is a Win.
    Nothing in the core reduces lives, so Loss only happens if lives were
    already <= 0.
    """

    def evaluate(self, state: GameState) -> Outcome:
        if not state.enemies:
            return Outcome.WIN
        if state.lives <= 0:
            return Outcome.LOSS
        return Outcome.ONGOING
