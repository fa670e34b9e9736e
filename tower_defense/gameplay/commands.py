"""
Player commands and the queue that hands them to the tick loop.
NO UI DEPENDENCIES.

Commands are applied between ticks, never during one. Input may be
captured on another thread, so the queue is lock-protected and drained
at the tick boundary.
"""
import logging
import threading
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Tuple, Union

from .catalog import TowerType
from .entities import Tower
from .errors import InsufficientResources
from .state import GameState

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Camera directions. UP increases y."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    def delta(self) -> Tuple[int, int]:
        """Return (dx, dy) for this direction."""
        deltas = {
            Direction.UP: (0, 1),
            Direction.DOWN: (0, -1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }
        return deltas[self]


@dataclass(frozen=True)
class MoveCamera:
    """Shift the camera one step in a direction."""
    direction: Direction


@dataclass(frozen=True)
class PlaceTower:
    """Build a tower of the given catalog index at the camera position."""
    tower_type_index: int


Command = Union[MoveCamera, PlaceTower]


def place_tower(state: GameState, tower_type: TowerType) -> Tower:
    """
    Build a tower at the camera position and debit its cost.

    Raises InsufficientResources, leaving state untouched, if the player
    cannot afford it.
    """
    if state.resources < tower_type.cost:
        raise InsufficientResources(tower_type.cost, state.resources)

    tower = Tower(position=state.camera_position, tower_type=tower_type)
    state.towers.append(tower)
    state.resources -= tower_type.cost
    return tower


def move_camera(state: GameState, direction: Direction, speed: float) -> None:
    """Move the camera by `speed` units."""
    dx, dy = direction.delta()
    state.camera_position = state.camera_position.offset(dx * speed, dy * speed)


class CommandQueue:
    """
    Commands waiting for the next tick boundary.
    Lock-protected so pushes from an input thread never race a drain.
    """

    def __init__(self):
        self._commands: List[Command] = []
        self._lock = threading.Lock()

    def push(self, command: Command) -> None:
        with self._lock:
            self._commands.append(command)

    def drain(self) -> List[Command]:
        """Take every queued command, in submission order."""
        with self._lock:
            commands, self._commands = self._commands, []
        if commands:
            logger.debug(f"Draining {len(commands)} queued command(s)")
        return commands

    def __len__(self) -> int:
        with self._lock:
            return len(self._commands)
