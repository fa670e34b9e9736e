"""
Input Handler - Translates key presses to gameplay commands.
This is a THIN ADAPTER - no game logic here.
"""
import pygame

from tower_defense.gameplay.commands import Direction, MoveCamera, PlaceTower
from tower_defense.gameplay.game import Game


CAMERA_KEYS = {
    pygame.K_w: Direction.UP,
    pygame.K_a: Direction.LEFT,
    pygame.K_s: Direction.DOWN,
    pygame.K_d: Direction.RIGHT,
}

# 1-9 select a tower type by catalog index
TOWER_KEYS = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
    pygame.K_5: 4,
    pygame.K_6: 5,
    pygame.K_7: 6,
    pygame.K_8: 7,
    pygame.K_9: 8,
}


class InputHandler:
    """
    Handles keyboard input and queues game commands.

    Commands are submitted, not applied, so they land on the next
    tick boundary.
    """

    def __init__(self, game: Game):
        self.game = game
        self.selected_tower = 0

    def handle_key(self, key: int) -> bool:
        """
        Handle a single key press.
        Returns True if the game should quit.
        """
        if key == pygame.K_ESCAPE:
            return True

        if key in CAMERA_KEYS:
            self.game.submit(MoveCamera(CAMERA_KEYS[key]))

        elif key in TOWER_KEYS:
            index = TOWER_KEYS[key]
            if index < len(self.game.tower_types):
                self.selected_tower = index

        elif key == pygame.K_SPACE:
            self.game.submit(PlaceTower(self.selected_tower))

        return False

