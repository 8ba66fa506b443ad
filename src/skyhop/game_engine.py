"""
game_engine.py: The simulation loop and its state transitions.
"""

import logging
import random
from typing import Optional

from .constants import GameConfig
from .data_models import GamePhase, GameState, Player
from .obstacles import ObstacleGenerator
from .physics_core import PhysicsCore
from .presentation import NullPresenter, Presenter
from .starfield import drift_stars, generate_stars

logger = logging.getLogger(__name__)


class GameEngine(PhysicsCore):
    """
    Owns the GameState and advances it one frame per tick().
    Inherits the player/obstacle rules from PhysicsCore.

    The engine never schedules itself; a host calls tick() once per rendered
    frame and forwards input as on_start / on_jump / on_restart. Every start
    or restart opens a new session. Hosts that capture the session number
    when they schedule a frame can pass it back to tick(), and frames from
    a superseded session are then dropped without touching the new state.
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 presenter: Optional[Presenter] = None,
                 rng: Optional[random.Random] = None):
        super().__init__(config or GameConfig())
        self.presenter = presenter or NullPresenter()
        self.rng = rng or random.Random()
        self.generator = ObstacleGenerator(self.config, self.rng)
        self.session = 0
        self.state = GameState(
            player=self._new_player(),
            stars=generate_stars(self.config.star_count, self.config.world_width,
                                 self.config.world_height, self.rng),
        )

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    def _new_player(self) -> Player:
        return Player(
            x=self.config.player_x,
            y=self.config.ground_height,
            width=self.config.player_width,
            height=self.config.player_height,
        )

    def _begin_session(self):
        self.session += 1
        self.state = GameState(
            player=self._new_player(),
            stars=self.state.stars,
            game_started=True,
        )
        self.presenter.hide_game_over()
        self.presenter.set_score_display(0)

    # ---------- Commands ----------

    def on_start(self) -> bool:
        if self.phase is not GamePhase.IDLE:
            logger.debug("Ignoring start while %s", self.phase.value)
            return False
        self._begin_session()
        logger.info("Game started (session %d)", self.session)
        return True

    def on_restart(self) -> bool:
        if self.phase is not GamePhase.GAME_OVER:
            logger.debug("Ignoring restart while %s", self.phase.value)
            return False
        self._begin_session()
        logger.info("Game restarted (session %d)", self.session)
        return True

    def on_jump(self) -> bool:
        if self.phase is not GamePhase.RUNNING:
            logger.debug("Ignoring jump while %s", self.phase.value)
            return False
        return self.jump(self.state.player)

    # ---------- Frame ----------

    def tick(self, session: Optional[int] = None) -> bool:
        """
        Runs one frame: simulation (only while running) followed by rendering.
        Returns False if the frame belonged to a superseded session.
        """
        if session is not None and session != self.session:
            logger.debug("Dropping stale frame from session %d (current %d)",
                         session, self.session)
            return False

        if self.phase is GamePhase.RUNNING:
            self._step()
        self._render()
        return True

    def _step(self):
        state = self.state
        config = self.config
        state.frame_count += 1

        # 1. Player physics
        self.integrate(state.player)

        # 2. Spawn and scroll obstacles
        self.generator.spawn(state.obstacles, state.frame_count)
        self.generator.scroll(state.obstacles)
        drift_stars(state.stars, config.obstacle_speed, config.world_width, config.world_height, self.rng)

        # 3. Score passes before anything is pruned
        state.score += self.score_passed(state.player, state.obstacles)
        self.generator.prune(state.obstacles)

        # 4. Collisions
        if self.check_collision(state.player, state.obstacles):
            state.game_over = True
            logger.info("Game over on frame %d. Final score: %d",
                        state.frame_count, state.score)
            self.presenter.show_game_over(state.score)

    def _render(self):
        state = self.state
        presenter = self.presenter
        presenter.begin_frame()
        presenter.draw_background(state.stars)
        presenter.draw_ground()
        for obstacle in state.obstacles:
            presenter.draw_obstacle(obstacle)
        if self.phase is GamePhase.RUNNING:
            presenter.draw_player(state.player)
        presenter.set_score_display(state.score)
        presenter.end_frame()
