"""
Live entities on the map - towers and enemies.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass

from .catalog import TowerType, EnemyType
from .geometry import Point


@dataclass
class Tower:
    """
    A tower placed by the player.
    Towers are never removed once built.
    """
    position: Point
    tower_type: TowerType

    def in_range(self, point: Point) -> bool:
        """True if a point is strictly inside this tower's range."""
        return self.position.distance_to(point) < self.tower_type.range


@dataclass
class Enemy:
    """
    An enemy marching across the map.
    Starts at full health; removed by settlement once hit_points <= 0.
    """
    enemy_type: EnemyType
    position: Point
    hit_points: int

    @classmethod
    def spawn(cls, enemy_type: EnemyType, position: Point) -> 'Enemy':
        """Create a fresh enemy at full health."""
        return cls(enemy_type=enemy_type, position=position, hit_points=enemy_type.max_hit_points)

    def advance(self, dt: float) -> None:
        """Move toward decreasing x."""
        self.position = self.position.offset(-self.enemy_type.speed * dt, 0.0)

    def apply_damage(self, damage: int) -> None:
        self.hit_points -= damage

    @property
    def is_alive(self) -> bool:
        return self.hit_points > 0
