"""
data_models.py: Data structures for the game state.
"""

import enum
from dataclasses import dataclass, field
from typing import List

from .constants import GROUND_HEIGHT, PLAYER_X, PLAYER_WIDTH, PLAYER_HEIGHT


class GamePhase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class Player:
    """The runner. y is the top edge; the player rests at y == ground height."""
    x: float = PLAYER_X
    y: float = GROUND_HEIGHT
    width: float = PLAYER_WIDTH
    height: float = PLAYER_HEIGHT
    velocity_y: float = 0.0
    airborne: bool = False
    rotation: float = 0.0


@dataclass
class Obstacle:
    x: float
    y: float
    width: float
    height: float
    counted: bool = False           # Already contributed to the score?

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class Star:
    """Decorative background point."""
    x: float
    y: float
    size: float


@dataclass
class GameState:
    """Everything a session mutates. Owned by a single GameEngine."""
    player: Player = field(default_factory=Player)
    obstacles: List[Obstacle] = field(default_factory=list)
    stars: List[Star] = field(default_factory=list)
    score: int = 0
    game_over: bool = False
    game_started: bool = False
    frame_count: int = 0

    @property
    def phase(self) -> GamePhase:
        if not self.game_started:
            return GamePhase.IDLE
        if self.game_over:
            return GamePhase.GAME_OVER
        return GamePhase.RUNNING
