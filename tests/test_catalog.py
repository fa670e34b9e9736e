"""
Tests for catalog types and validation.
"""
import dataclasses

import pytest
from tower_defense.gameplay.catalog import (
    TowerType, EnemyType, default_tower_types, default_enemy_types, validate_catalog
)
from tower_defense.gameplay.errors import ConfigurationError


class TestDefaultCatalog:
    """Tests for the standard catalog."""

    def test_default_towers(self):
        """Standard towers match the game's tuning."""
        archer, mage = default_tower_types()
        assert archer == TowerType("Archer Tower", cost=50, damage=5, range=100.0, rate_of_fire=1.0)
        assert mage == TowerType("Mage Tower", cost=75, damage=10, range=200.0, rate_of_fire=2.0)

    def test_default_enemies(self):
        """Standard enemies match the game's tuning."""
        goblin, orc = default_enemy_types()
        assert goblin == EnemyType("Goblin", max_hit_points=10, speed=2.0, reward=20)
        assert orc == EnemyType("Orc", max_hit_points=20, speed=1.5, reward=30)

    def test_types_are_immutable(self):
        """Catalog entries can't be changed during play."""
        tower_type = default_tower_types()[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            tower_type.damage = 99


class TestValidateCatalog:
    """Tests for start-up catalog checks."""

    def test_valid_catalog(self):
        """Non-empty catalogs pass."""
        validate_catalog(default_tower_types(), default_enemy_types())

    def test_empty_enemy_catalog(self):
        """Empty enemy catalog is a configuration error."""
        with pytest.raises(ConfigurationError):
            validate_catalog(default_tower_types(), [])

    def test_empty_tower_catalog(self):
        """Empty tower catalog is a configuration error."""
        with pytest.raises(ConfigurationError):
            validate_catalog([], default_enemy_types())
