"""
Catalog types - immutable templates for buildable towers and spawnable enemies.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import List, Sequence

from .errors import ConfigurationError


@dataclass(frozen=True)
class TowerType:
    """A kind of tower the player can build."""
    name: str
    cost: int            # resources debited on placement
    damage: int          # hit points removed per tick from each enemy in range
    range: float         # enemies strictly closer than this are hit
    rate_of_fire: float  # shots per second; not consulted by combat


@dataclass(frozen=True)
class EnemyType:
    """A kind of enemy a wave can contain."""
    name: str
    max_hit_points: int
    speed: float         # units per second along -x
    reward: int          # resources credited on defeat


def default_tower_types() -> List[TowerType]:
    """The towers available in a standard session."""
    return [
        TowerType(name="Archer Tower", cost=50, damage=5, range=100.0, rate_of_fire=1.0),
        TowerType(name="Mage Tower", cost=75, damage=10, range=200.0, rate_of_fire=2.0),
    ]


def default_enemy_types() -> List[EnemyType]:
    """The enemies that appear in a standard session."""
    return [
        EnemyType(name="Goblin", max_hit_points=10, speed=2.0, reward=20),
        EnemyType(name="Orc", max_hit_points=20, speed=1.5, reward=30),
    ]


def validate_catalog(
    tower_types: Sequence[TowerType],
    enemy_types: Sequence[EnemyType],
) -> None:
    """
    Check that both catalogs can run a game.
    Raises ConfigurationError if either one is empty.
    """
    if not tower_types:
        raise ConfigurationError("Tower catalog is empty")
    if not enemy_types:
        raise ConfigurationError("Enemy catalog is empty")
