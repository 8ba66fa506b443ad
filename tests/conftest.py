import random

import pytest

from skyhop.constants import GameConfig
from skyhop.game_engine import GameEngine
from skyhop.presentation import Presenter


class RecordingPresenter(Presenter):
    """Keeps every call so tests can check what the engine rendered."""

    def __init__(self):
        self.calls = []

    def _record(self, name, *args):
        self.calls.append((name,) + args)

    def begin_frame(self):
        self._record("begin_frame")

    def draw_background(self, stars):
        self._record("draw_background")

    def draw_ground(self):
        self._record("draw_ground")

    def draw_obstacle(self, obstacle):
        self._record("draw_obstacle", obstacle)

    def draw_player(self, player):
        self._record("draw_player", player)

    def set_score_display(self, score):
        self._record("set_score_display", score)

    def show_game_over(self, score):
        self._record("show_game_over", score)

    def hide_game_over(self):
        self._record("hide_game_over")

    def end_frame(self):
        self._record("end_frame")

    def names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def config():
    return GameConfig(star_count=5)


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def engine(config, presenter):
    return GameEngine(config, presenter, random.Random(1234))
