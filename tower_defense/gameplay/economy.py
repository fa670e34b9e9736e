"""
Economy ledger - removes defeated enemies and pays out their rewards.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass, field
from typing import List

from .entities import Enemy
from .state import GameState


@dataclass
class Settlement:
    """Result of settling one tick."""
    defeated: List[Enemy] = field(default_factory=list)
    reward: int = 0


class EconomyLedger:
    """Settles a tick: drop every enemy with hit_points <= 0 and credit once."""

    def settle(self, state: GameState) -> Settlement:
        defeated = [e for e in state.enemies if not e.is_alive]
        if not defeated:
            return Settlement()

        reward = sum(e.enemy_type.reward for e in defeated)
        state.enemies = [e for e in state.enemies if e.is_alive]
        state.resources += reward
        return Settlement(defeated=defeated, reward=reward)
