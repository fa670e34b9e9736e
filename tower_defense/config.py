"""
Configuration management for Tower Defense.
Uses pydantic-settings for environment variable parsing.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field

from tower_defense.gameplay.constants import (
    STARTING_RESOURCES, STARTING_LIVES, FRAME_TIME, CAMERA_SPEED, SPAWN_X, SPAWN_Y
)


class Settings(BaseSettings):
    """Game settings loaded from environment variables."""

    # Player
    starting_resources: int = Field(
        default=STARTING_RESOURCES,
        ge=0,
        description="Resources the player starts with"
    )
    starting_lives: int = Field(
        default=STARTING_LIVES,
        description="Lives the player starts with"
    )

    # Simulation
    frame_time: float = Field(
        default=FRAME_TIME,
        gt=0,
        description="Seconds of simulated time per tick"
    )
    spawn_x: float = Field(default=SPAWN_X, description="X coordinate where enemies enter")
    spawn_y: float = Field(default=SPAWN_Y, description="Y coordinate where enemies enter")

    # Camera
    camera_speed: float = Field(
        default=CAMERA_SPEED,
        gt=0,
        description="Units the camera moves per key press"
    )

    # Window
    window_width: int = Field(default=640, gt=0)
    window_height: int = Field(default=480, gt=0)
    fps: int = Field(default=60, gt=0, description="Target frames per second")

    # Logging
    log_level: str = Field(default="INFO", description="Root logging level")

    class Config:
        env_prefix = "TOWER_DEFENSE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
