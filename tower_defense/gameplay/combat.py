"""
Combat resolver - towers damage every enemy in range, every tick.
NO UI DEPENDENCIES.
"""
from .state import GameState


class CombatResolver:
    """
    Applies tower damage for one tick.

    Every in-range (tower, enemy) pair deals the tower's full damage.
    There is no cooldown: rate_of_fire is carried on TowerType but not
    read here, and there is no falloff with distance.
    """

    def resolve(self, state: GameState) -> int:
        """
        Resolve one tick of combat.
        Returns the total damage dealt.
        """
        total = 0
        for tower in state.towers:
            for enemy in state.enemies:
                if tower.in_range(enemy.position):
                    enemy.apply_damage(tower.tower_type.damage)
                    total += tower.tower_type.damage
        return total
