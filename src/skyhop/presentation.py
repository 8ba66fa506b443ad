"""
presentation.py: The drawing interface the engine talks to, plus player colors.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Tuple

from .data_models import Player, Obstacle, Star

PLAYER_COLORS = ("#4caf50", "#2196f3", "#f44336", "#ffeb3b", "#9c27b0")


def adjust_color(color: str, amount: int) -> str:
    """Shifts each channel of a '#rrggbb' color by amount, clamped to 0..255."""
    hex_value = color.lstrip("#")
    channels = (int(hex_value[i:i + 2], 16) for i in (0, 2, 4))
    return "#" + "".join(f"{max(0, min(255, c + amount)):02x}" for c in channels)


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Converts a '#rrggbb' color into the (r, g, b) tuple pygame expects."""
    hex_value = color.lstrip("#")
    return tuple(int(hex_value[i:i + 2], 16) for i in (0, 2, 4))


@dataclass
class PlayerPalette:
    primary: str = PLAYER_COLORS[0]
    secondary: str = "#2e7d32"
    outline: str = "#1b5e20"

    def cycle(self):
        """Moves to the next preset color and derives the darker shades from it."""
        try:
            index = PLAYER_COLORS.index(self.primary)
        except ValueError:
            index = -1
        self.primary = PLAYER_COLORS[(index + 1) % len(PLAYER_COLORS)]
        self.secondary = adjust_color(self.primary, -30)
        self.outline = adjust_color(self.primary, -50)


class Presenter(ABC):
    """
    Renders one frame of game state. The engine calls these in a fixed order
    every tick; it never draws anything itself.
    """

    def begin_frame(self):
        pass

    @abstractmethod
    def draw_background(self, stars: Iterable[Star]):
        pass

    @abstractmethod
    def draw_ground(self):
        pass

    @abstractmethod
    def draw_obstacle(self, obstacle: Obstacle):
        pass

    @abstractmethod
    def draw_player(self, player: Player):
        pass

    @abstractmethod
    def set_score_display(self, score: int):
        pass

    @abstractmethod
    def show_game_over(self, score: int):
        pass

    @abstractmethod
    def hide_game_over(self):
        pass

    def end_frame(self):
        pass


class NullPresenter(Presenter):
    """Discards every call. Used for headless simulation."""

    def draw_background(self, stars):
        pass

    def draw_ground(self):
        pass

    def draw_obstacle(self, obstacle):
        pass

    def draw_player(self, player):
        pass

    def set_score_display(self, score):
        pass

    def show_game_over(self, score):
        pass

    def hide_game_over(self):
        pass
