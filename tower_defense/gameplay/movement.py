"""
Movement system - advances every enemy once per tick.
NO UI DEPENDENCIES.
"""
from .entities import Enemy
from .state import GameState


class MovementSystem:
    """Straight-line march toward decreasing x. No pathfinding."""

    def advance(self, enemy: Enemy, elapsed_frame_time: float) -> None:
        """Move one enemy by speed * elapsed_frame_time along -x."""
        enemy.advance(elapsed_frame_time)

    def advance_all(self, state: GameState, elapsed_frame_time: float) -> None:
        for enemy in state.enemies:
            self.advance(enemy, elapsed_frame_time)
