"""
Tower Defense - Main Entry Point

Build towers to hold off an ever-growing stream of enemies.

Usage:
    tower-defense

Controls:
    W/A/S/D: Move camera
    1-9: Select tower type
    Space: Place selected tower at the camera
    Escape: Quit
"""
import logging

import pygame

from tower_defense.config import Settings, get_settings
from tower_defense.gameplay.catalog import default_tower_types, default_enemy_types
from tower_defense.gameplay.game import Game, PlacementRejectedEvent, TowerPlacedEvent
from tower_defense.gameplay.geometry import Point
from tower_defense.ui.input_handler import InputHandler
from tower_defense.ui.renderer import Renderer

logger = logging.getLogger(__name__)


def create_game(settings: Settings) -> Game:
    """Build a game from settings and the standard catalog."""
    return Game(
        tower_types=default_tower_types(),
        enemy_types=default_enemy_types(),
        starting_resources=settings.starting_resources,
        starting_lives=settings.starting_lives,
        frame_time=settings.frame_time,
        camera_speed=settings.camera_speed,
        spawn_point=Point(settings.spawn_x, settings.spawn_y),
    )


def main():
    """Main entry point."""
    settings = get_settings()

    # Configure logging
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    game = create_game(settings)

    pygame.init()
    pygame.display.set_caption("Tower Defense")
    screen = pygame.display.set_mode((settings.window_width, settings.window_height))
    clock = pygame.time.Clock()

    renderer = Renderer(game, screen)
    input_handler = InputHandler(game)

    logger.info("Starting game loop...")
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if input_handler.handle_key(event.key):
                    running = False

        for event in game.update():
            if isinstance(event, PlacementRejectedEvent):
                renderer.message = f"Need {event.cost} resources (have {event.available})"
            elif isinstance(event, TowerPlacedEvent):
                renderer.message = None

        renderer.render()
        pygame.display.flip()
        clock.tick(settings.fps)

    pygame.quit()
    logger.info("Tower Defense stopped.")


if __name__ == "__main__":
    main()
