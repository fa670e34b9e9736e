"""
Main Game class - runs the tick pipeline over a GameState.
NO UI DEPENDENCIES.

This is the central gameplay module. It can be fully tested
without any UI framework.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .catalog import TowerType, EnemyType, validate_catalog
from .combat import CombatResolver
from .commands import Command, CommandQueue, MoveCamera, PlaceTower, move_camera, place_tower
from .economy import EconomyLedger
from .entities import Tower
from .errors import InsufficientResources, UnknownTowerType
from .geometry import Point
from .movement import MovementSystem
from .outcome import Outcome, WinLossEvaluator
from .spawner import WaveSpawner
from .state import GameState, RenderSnapshot
from .constants import (
    STARTING_RESOURCES, STARTING_LIVES, FRAME_TIME, CAMERA_SPEED, SPAWN_X, SPAWN_Y
)

logger = logging.getLogger(__name__)


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class WaveSpawnedEvent(GameEvent):
    """A wave of enemies entered the map."""
    wave: int
    count: int
    enemy_type: EnemyType


@dataclass
class EnemiesDefeatedEvent(GameEvent):
    """Settlement removed defeated enemies and paid their rewards."""
    count: int
    reward: int


@dataclass
class TowerPlacedEvent(GameEvent):
    """A tower was built."""
    tower: Tower


@dataclass
class PlacementRejectedEvent(GameEvent):
    """A tower could not be afforded."""
    cost: int
    available: int


@dataclass
class OutcomeChangedEvent(GameEvent):
    """The game reached a terminal outcome."""
    old_outcome: Outcome
    new_outcome: Outcome


class Game:
    """
    Owns one session: the catalogs, the state and the tick systems.

    Usage:
        game = Game(default_tower_types(), default_enemy_types())
        game.submit(PlaceTower(0))
        while not game.outcome.is_terminal:
            events = game.update()
            # UI pulls game.snapshot() and renders
    """

    def __init__(
        self,
        tower_types: Sequence[TowerType],
        enemy_types: Sequence[EnemyType],
        starting_resources: int = STARTING_RESOURCES,
        starting_lives: int = STARTING_LIVES,
        frame_time: float = FRAME_TIME,
        camera_speed: float = CAMERA_SPEED,
        spawn_point: Point = Point(SPAWN_X, SPAWN_Y),
    ):
        validate_catalog(tower_types, enemy_types)

        self.tower_types = list(tower_types)
        self.enemy_types = list(enemy_types)
        self.frame_time = frame_time
        self.camera_speed = camera_speed

        self.state = GameState(resources=starting_resources, lives=starting_lives)

        # Tick pipeline
        self.spawner = WaveSpawner(spawn_point)
        self.movement = MovementSystem()
        self.combat = CombatResolver()
        self.economy = EconomyLedger()
        self.evaluator = WinLossEvaluator()

        self.commands = CommandQueue()
        self.outcome = Outcome.ONGOING
        self.tick_number = 0

        # Event queue for UI notifications
        self._events: List[GameEvent] = []

        logger.info(
            f"Game started with {len(self.tower_types)} tower type(s), "
            f"{len(self.enemy_types)} enemy type(s), "
            f"{starting_resources} resources, {starting_lives} lives"
        )

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def submit(self, command: Command) -> None:
        """
        Queue a command for the next tick boundary.
        Invalid commands raise here, before queueing, so every queued
        command can be applied at the drain.
        """
        if isinstance(command, PlaceTower):
            self._check_tower_index(command.tower_type_index)
        elif not isinstance(command, MoveCamera):
            raise TypeError(f"Unknown command: {command!r}")
        self.commands.push(command)

    def apply(self, command: Command) -> List[GameEvent]:
        """
        Apply a command right away. Only call this between ticks.
        Returns the events it produced.
        """
        events: List[GameEvent] = []
        if isinstance(command, MoveCamera):
            move_camera(self.state, command.direction, self.camera_speed)
        elif isinstance(command, PlaceTower):
            events.append(self._place(command.tower_type_index))
        else:
            raise TypeError(f"Unknown command: {command!r}")
        return events

    def _check_tower_index(self, index: int) -> None:
        if not 0 <= index < len(self.tower_types):
            raise UnknownTowerType(index, len(self.tower_types))

    def _place(self, index: int) -> GameEvent:
        self._check_tower_index(index)

        tower_type = self.tower_types[index]
        try:
            tower = place_tower(self.state, tower_type)
        except InsufficientResources as e:
            logger.info(f"Cannot place {tower_type.name}: {e}")
            return PlacementRejectedEvent(e.cost, e.available)

        logger.info(
            f"Placed {tower_type.name} at ({tower.position.x:.1f}, {tower.position.y:.1f}), "
            f"{self.state.resources} resources left"
        )
        return TowerPlacedEvent(tower)

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def update(self, dt: Optional[float] = None) -> List[GameEvent]:
        """
        Apply queued commands, then advance one tick.
        Returns list of events that occurred.
        """
        self._events = []
        if self.outcome.is_terminal:
            return self._events

        for command in self.commands.drain():
            self._events.extend(self.apply(command))

        self._tick(self.frame_time if dt is None else dt)
        return self._events

    def _tick(self, dt: float) -> None:
        self.tick_number += 1

        spawned = self.spawner.spawn(self.state, self.enemy_types, dt)
        self._events.append(WaveSpawnedEvent(spawned.wave, spawned.count, spawned.enemy_type))
        logger.debug(f"Tick {self.tick_number}: wave {spawned.wave} spawned {spawned.count} {spawned.enemy_type.name}")

        self.movement.advance_all(self.state, dt)
        self.combat.resolve(self.state)

        settlement = self.economy.settle(self.state)
        if settlement.defeated:
            self._events.append(EnemiesDefeatedEvent(len(settlement.defeated), settlement.reward))
            logger.debug(
                f"Tick {self.tick_number}: {len(settlement.defeated)} enemies defeated, "
                f"+{settlement.reward} resources"
            )

        outcome = self.evaluator.evaluate(self.state)
        if outcome.is_terminal:
            old_outcome = self.outcome
            self.outcome = outcome
            self._events.append(OutcomeChangedEvent(old_outcome, outcome))
            logger.info(f"Game over at tick {self.tick_number}: {outcome.name}")

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    def snapshot(self) -> RenderSnapshot:
        return self.state.snapshot()

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, seconds: float, dt: Optional[float] = None) -> List[GameEvent]:
        """
        Run ticks for a number of seconds or until the game ends.
        Returns all events that occurred.
        """
        step = self.frame_time if dt is None else dt
        all_events = []
        elapsed = 0.0
        while elapsed < seconds and not self.outcome.is_terminal:
            all_events.extend(self.update(step))
            elapsed += step
        return all_events
