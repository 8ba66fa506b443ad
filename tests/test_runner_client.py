import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from skyhop.__main__ import parse_args
from skyhop.constants import GameConfig
from skyhop.data_models import GamePhase, Obstacle, Player, Star
from skyhop.presentation import PLAYER_COLORS
from skyhop.runner_client import OBSTACLE_COLOR, PygamePresenter, RunnerClient


@pytest.fixture
def surface_presenter():
    config = GameConfig()
    surface = pygame.Surface((config.world_width, config.world_height))
    return PygamePresenter(surface, config)


def test_draws_obstacle_pixels(surface_presenter):
    surface_presenter.draw_background([Star(x=5, y=5, size=1)])
    surface_presenter.draw_obstacle(Obstacle(x=400, y=330, width=40, height=60))
    assert surface_presenter.surface.get_at((410, 350))[:3] == OBSTACLE_COLOR


def test_game_over_banner_toggles(surface_presenter):
    surface_presenter.show_game_over(7)
    assert surface_presenter.final_score == 7
    surface_presenter.end_frame()
    surface_presenter.hide_game_over()
    assert surface_presenter.final_score is None


def test_draws_tilted_player(surface_presenter):
    surface_presenter.draw_ground()
    surface_presenter.draw_player(Player(x=150, y=300, airborne=True, rotation=45))
    surface_presenter.set_score_display(150)
    surface_presenter.end_frame()
    assert surface_presenter.score == 150


def test_parse_args():
    args = parse_args(["--seed", "3", "--policy", "periodic", "--ceiling"])
    assert args.seed == 3
    assert args.policy == "periodic"
    assert args.ceiling
    assert not args.debug


@pytest.fixture
def client():
    client = RunnerClient(GameConfig(star_count=3), rng=random.Random(2))
    pygame.event.clear()
    yield client
    pygame.quit()


def end_game(client):
    client.engine.on_start()
    client.engine.state.game_over = True


@pytest.mark.parametrize("key", ["K_SPACE", "K_UP"])
def test_jump_keys_start_from_idle_then_jump(client, key):
    key = getattr(pygame, key)
    assert client._handle_key(key)
    assert client.engine.phase is GamePhase.RUNNING
    assert client.engine.session == 1

    assert client._handle_key(key)
    player = client.engine.state.player
    assert player.airborne
    assert player.velocity_y == client.config.jump_force
    assert client.engine.session == 1


def test_up_does_not_start_again_when_running(client):
    client._handle_key(pygame.K_UP)
    client._handle_key(pygame.K_UP)
    client._handle_key(pygame.K_SPACE)
    assert client.engine.session == 1


def test_enter_starts_from_idle(client):
    assert client._handle_key(pygame.K_RETURN)
    assert client.engine.phase is GamePhase.RUNNING
    assert client.engine.session == 1


def test_enter_while_running_is_ignored(client):
    client._handle_key(pygame.K_RETURN)
    client._handle_key(pygame.K_RETURN)
    assert client.engine.phase is GamePhase.RUNNING
    assert client.engine.session == 1


def test_enter_restarts_after_game_over(client):
    end_game(client)
    assert client._handle_key(pygame.K_RETURN)
    assert client.engine.phase is GamePhase.RUNNING
    assert client.engine.session == 2
    assert client.presenter.final_score is None


def test_space_at_game_over_does_not_restart(client):
    end_game(client)
    client._handle_key(pygame.K_SPACE)
    assert client.engine.phase is GamePhase.GAME_OVER
    assert client.engine.session == 1


def test_c_cycles_palette_in_every_phase(client):
    assert client._handle_key(pygame.K_c)
    assert client.palette.primary == PLAYER_COLORS[1]
    assert client.presenter.palette is client.palette

    client.engine.on_start()
    client._handle_key(pygame.K_c)
    assert client.palette.primary == PLAYER_COLORS[2]
    assert client.engine.session == 1


def test_escape_quits(client):
    assert not client._handle_key(pygame.K_ESCAPE)
    assert client.engine.phase is GamePhase.IDLE


def test_run_drops_frame_from_replaced_session(client):
    end_game(client)
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    client.run()

    assert client.engine.session == 2
    assert client.engine.phase is GamePhase.RUNNING
    assert client.engine.state.frame_count == 0


def test_run_ticks_current_session_and_mouse_jumps(client):
    client.engine.on_start()
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    client.run()

    assert client.engine.state.frame_count == 1
    assert client.engine.state.player.airborne


def test_quit_is_not_undone_by_later_keys(client):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_c))
    client.run()
    assert client.palette.primary == PLAYER_COLORS[1]
