"""
Simulation core for Tower Defense.
NO UI DEPENDENCIES.
"""
from .geometry import Point, distance_to
from .catalog import TowerType, EnemyType, default_tower_types, default_enemy_types
from .entities import Tower, Enemy
from .errors import TowerDefenseError, ConfigurationError, InsufficientResources, UnknownTowerType
from .outcome import Outcome
from .state import GameState, RenderSnapshot
from .commands import Direction, MoveCamera, PlaceTower
from .game import Game

__all__ = [
    "Point", "distance_to",
    "TowerType", "EnemyType", "default_tower_types", "default_enemy_types",
    "Tower", "Enemy",
    "TowerDefenseError", "ConfigurationError", "InsufficientResources", "UnknownTowerType",
    "Outcome",
    "GameState", "RenderSnapshot",
    "Direction", "MoveCamera", "PlaceTower",
    "Game",
]
