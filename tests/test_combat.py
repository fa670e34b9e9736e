"""
Tests for combat resolution.
"""
from tower_defense.gameplay.catalog import TowerType, EnemyType
from tower_defense.gameplay.combat import CombatResolver
from tower_defense.gameplay.entities import Tower, Enemy
from tower_defense.gameplay.geometry import Point
from tower_defense.gameplay.state import GameState


ARCHER = TowerType("Archer Tower", cost=50, damage=5, range=100.0, rate_of_fire=1.0)
MAGE = TowerType("Mage Tower", cost=75, damage=10, range=200.0, rate_of_fire=2.0)
ORC = EnemyType("Orc", max_hit_points=20, speed=1.5, reward=30)


def make_state(towers, enemy_positions) -> GameState:
    state = GameState()
    state.towers = list(towers)
    state.enemies = [Enemy.spawn(ORC, p) for p in enemy_positions]
    return state


class TestCombatResolver:
    """Tests for CombatResolver."""

    def test_in_range_enemy_takes_damage(self):
        """An enemy inside range loses the tower's damage."""
        state = make_state([Tower(Point(0.0, 0.0), ARCHER)], [Point(30.0, 40.0)])

        dealt = CombatResolver().resolve(state)

        assert dealt == 5
        assert state.enemies[0].hit_points == 15

    def test_range_boundary_is_exclusive(self):
        """Enemy exactly at range distance is not hit."""
        tower_type = TowerType("Short", cost=1, damage=5, range=5.0, rate_of_fire=1.0)
        state = make_state([Tower(Point(0.0, 0.0), tower_type)], [Point(3.0, 4.0), Point(2.999, 4.0)])

        CombatResolver().resolve(state)

        assert state.enemies[0].hit_points == 20
        assert state.enemies[1].hit_points == 15

    def test_tower_hits_every_enemy_in_range(self):
        """One tower damages all enemies in range each tick."""
        state = make_state(
            [Tower(Point(0.0, 0.0), ARCHER)],
            [Point(0.0, 0.0), Point(50.0, 0.0), Point(150.0, 0.0)],
        )

        CombatResolver().resolve(state)

        assert [e.hit_points for e in state.enemies] == [15, 15, 20]

    def test_damage_from_multiple_towers_stacks(self):
        """An enemy in range of several towers takes damage from each."""
        state = make_state(
            [Tower(Point(0.0, 0.0), ARCHER), Tower(Point(10.0, 0.0), MAGE)],
            [Point(5.0, 0.0)],
        )

        CombatResolver().resolve(state)

        assert state.enemies[0].hit_points == 5

    def test_no_falloff_with_distance(self):
        """Damage is the same near the tower and near the edge of range."""
        state = make_state([Tower(Point(0.0, 0.0), ARCHER)], [Point(1.0, 0.0), Point(99.0, 0.0)])

        CombatResolver().resolve(state)

        assert state.enemies[0].hit_points == state.enemies[1].hit_points

    def test_rate_of_fire_not_throttled(self):
        """Consecutive ticks each deal full damage regardless of rate_of_fire."""
        slow = TowerType("Slow", cost=1, damage=3, range=10.0, rate_of_fire=0.001)
        state = make_state([Tower(Point(0.0, 0.0), slow)], [Point(0.0, 0.0)])
        resolver = CombatResolver()

        for _ in range(4):
            resolver.resolve(state)

        assert state.enemies[0].hit_points == 20 - 4 * 3

    def test_repeated_resolution_is_deterministic(self):
        """Same layout always yields the same cumulative damage."""
        def run() -> list:
            state = make_state(
                [Tower(Point(0.0, 0.0), ARCHER), Tower(Point(150.0, 0.0), MAGE)],
                [Point(20.0, 0.0), Point(120.0, 0.0), Point(400.0, 0.0)],
            )
            for _ in range(3):
                CombatResolver().resolve(state)
            return [e.hit_points for e in state.enemies]

        assert run() == run() == [-25, -10, 20]

    def test_no_towers_no_damage(self):
        """Without towers nothing is hit."""
        state = make_state([], [Point(0.0, 0.0)])
        assert CombatResolver().resolve(state) == 0
        assert state.enemies[0].hit_points == 20
