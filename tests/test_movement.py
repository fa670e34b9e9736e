"""
Tests for enemy movement.
"""
import pytest
from tower_defense.gameplay.catalog import EnemyType
from tower_defense.gameplay.entities import Enemy
from tower_defense.gameplay.geometry import Point
from tower_defense.gameplay.movement import MovementSystem
from tower_defense.gameplay.state import GameState


GOBLIN = EnemyType("Goblin", max_hit_points=10, speed=2.0, reward=20)
ORC = EnemyType("Orc", max_hit_points=20, speed=1.5, reward=30)


class TestMovementSystem:
    """Tests for MovementSystem."""

    @pytest.mark.parametrize("dt", [0.01, 0.016, 0.5, 2.0])
    def test_moves_along_negative_x(self, dt):
        """x drops by speed * dt and y stays put."""
        enemy = Enemy.spawn(GOBLIN, Point(5.0, 7.0))

        MovementSystem().advance(enemy, dt)

        assert enemy.position.x == pytest.approx(5.0 - GOBLIN.speed * dt)
        assert enemy.position.x < 5.0
        assert enemy.position.y == 7.0

    def test_speed_comes_from_type(self):
        """Each enemy moves at its own type's speed."""
        state = GameState()
        state.enemies = [Enemy.spawn(GOBLIN, Point(0.0, 0.0)), Enemy.spawn(ORC, Point(0.0, 0.0))]

        MovementSystem().advance_all(state, 1.0)

        assert state.enemies[0].position.x == pytest.approx(-2.0)
        assert state.enemies[1].position.x == pytest.approx(-1.5)

    def test_variable_frame_time(self):
        """Two half steps cover the same ground as one full step."""
        stepped = Enemy.spawn(ORC, Point(0.0, 0.0))
        single = Enemy.spawn(ORC, Point(0.0, 0.0))
        movement = MovementSystem()

        movement.advance(stepped, 0.25)
        movement.advance(stepped, 0.25)
        movement.advance(single, 0.5)

        assert stepped.position.x == pytest.approx(single.position.x)
