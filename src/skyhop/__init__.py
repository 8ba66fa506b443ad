"""SkyHop: an endless jump-over-obstacles runner."""

from .constants import ConfigError, GameConfig, SpawnPolicy
from .data_models import GamePhase, GameState, Obstacle, Player, Star
from .game_engine import GameEngine
from .presentation import NullPresenter, Presenter

__version__ = "0.1.0"
