"""
Wave spawner - decides how many and which enemies enter the map each tick.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Sequence

from .catalog import EnemyType
from .entities import Enemy
from .geometry import Point
from .state import GameState
from .constants import ENEMIES_PER_WAVE_STEP, SPAWN_X, SPAWN_Y


def wave_number(live_enemies: int) -> int:
    """
    Wave size for the current tick.

    Grows with the number of enemies still alive, not the number ever
    spawned, so pressure only eases when enemies are killed.
    """
    return live_enemies // ENEMIES_PER_WAVE_STEP + 1


@dataclass
class SpawnResult:
    """What a single spawn tick produced."""
    wave: int
    count: int
    enemy_type: EnemyType


class WaveSpawner:
    """
    Appends a wave of enemies to the state every tick.

    The enemy catalog must be non-empty; that is checked once when the
    game is built, not here.
    """

    def __init__(self, spawn_point: Point = Point(SPAWN_X, SPAWN_Y)):
        self.spawn_point = spawn_point

    def spawn(
        self,
        state: GameState,
        enemy_types: Sequence[EnemyType],
        elapsed_frame_time: float,
    ) -> SpawnResult:
        """
        Spawn `wave` enemies of type enemy_types[wave % len(enemy_types)].
        Wave size does not depend on elapsed time.
        """
        wave = wave_number(len(state.enemies))
        enemy_type = enemy_types[wave % len(enemy_types)]
        for _ in range(wave):
            state.enemies.append(Enemy.spawn(enemy_type, self.spawn_point))
        return SpawnResult(wave=wave, count=wave, enemy_type=enemy_type)
