"""
GameState - the authoritative snapshot of one session.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass, field
from typing import List, Tuple

from .entities import Tower, Enemy
from .geometry import Point, ORIGIN
from .constants import STARTING_RESOURCES, STARTING_LIVES


@dataclass
class GameState:
    """
    Aggregate root for a session.

    Created at session start, mutated each tick, discarded at session end.
    Tower and enemy order is insertion order.
    """
    resources: int = STARTING_RESOURCES
    lives: int = STARTING_LIVES
    towers: List[Tower] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    camera_position: Point = ORIGIN

    def snapshot(self) -> 'RenderSnapshot':
        """Copy out everything the renderer needs."""
        return RenderSnapshot(
            resources=self.resources,
            lives=self.lives,
            towers=tuple((t.position, t.tower_type.name) for t in self.towers),
            enemies=tuple((e.position, e.enemy_type.name) for e in self.enemies),
            camera_position=self.camera_position,
        )


@dataclass(frozen=True)
class RenderSnapshot:
    """Read-only view of GameState, pulled once per frame."""
    resources: int
    lives: int
    towers: Tuple[Tuple[Point, str], ...]
    enemies: Tuple[Tuple[Point, str], ...]
    camera_position: Point
