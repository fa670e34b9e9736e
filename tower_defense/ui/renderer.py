"""
Renderer - Reads a state snapshot and draws it with pygame.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Optional

import pygame

from tower_defense.gameplay.game import Game
from tower_defense.gameplay.outcome import Outcome


# Visual constants
BASE_SIZE = 50
UNIT_SIZE = 25
FONT_SIZE = 20

# Colors
COLOR_BACKGROUND = (255, 255, 255)
COLOR_BASE = (0, 128, 0)
COLOR_TEXT = (0, 0, 0)
COLOR_TOWER = (128, 128, 128)
COLOR_ENEMY = (255, 0, 0)
COLOR_CAMERA = (0, 0, 255)
COLOR_WARNING = (200, 60, 0)

OUTCOME_BANNERS = {
    Outcome.WIN: "You win!",
    Outcome.LOSS: "You lose!",
}


class Renderer:
    """
    Draws the game each frame.

    This class reads from Game but never modifies it.
    """

    def __init__(self, game: Game, surface: pygame.Surface):
        self.game = game
        self.surface = surface
        self.font = pygame.font.Font(None, FONT_SIZE)

        # Feedback text set by the input handler
        self.message: Optional[str] = None

    def render(self) -> None:
        snapshot = self.game.snapshot()
        self.surface.fill(COLOR_BACKGROUND)

        # Player's base
        pygame.draw.rect(self.surface, COLOR_BASE, pygame.Rect(0, 0, BASE_SIZE, BASE_SIZE))

        self._draw_text(f"Resources: {snapshot.resources}", 0, 50)
        self._draw_text(f"Lives: {snapshot.lives}", 0, 70)

        for position, _name in snapshot.towers:
            pygame.draw.ellipse(
                self.surface, COLOR_TOWER,
                pygame.Rect(position.x, position.y, UNIT_SIZE, UNIT_SIZE)
            )

        for position, _name in snapshot.enemies:
            pygame.draw.rect(
                self.surface, COLOR_ENEMY,
                pygame.Rect(position.x, position.y, UNIT_SIZE, UNIT_SIZE)
            )

        camera = snapshot.camera_position
        pygame.draw.circle(self.surface, COLOR_CAMERA, (camera.x, camera.y), 3)

        if self.message:
            self._draw_text(self.message, 0, 90, COLOR_WARNING)

        banner = OUTCOME_BANNERS.get(self.game.outcome)
        if banner:
            width, height = self.surface.get_size()
            self._draw_text(banner, width // 2 - 40, height // 2)

    def _draw_text(self, text: str, x: int, y: int, color=COLOR_TEXT) -> None:
        self.surface.blit(self.font.render(text, True, color), (x, y))
