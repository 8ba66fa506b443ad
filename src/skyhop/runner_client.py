"""
runner_client.py

Pygame window: draws the engine's state and turns key/mouse events into
engine commands. Uses the modular core: constants, game_engine, presentation.
"""

import logging
import math
from typing import Optional

import pygame

from .constants import GameConfig, RENDER_FPS
from .data_models import GamePhase
from .game_engine import GameEngine
from .presentation import Presenter, PlayerPalette, hex_to_rgb

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (0, 0, 51)
STAR_COLOR = (255, 255, 255)
GROUND_COLOR = (51, 51, 51)
OBSTACLE_COLOR = (255, 87, 34)
PROGRESS_COLOR = (76, 175, 80)
WHITE = (255, 255, 255)


# ----------------- Presenter (rendering) -----------------

class PygamePresenter(Presenter):
    """Draws flat rectangles and circles onto a pygame Surface."""

    def __init__(self, surface: pygame.Surface, config: GameConfig,
                 palette: Optional[PlayerPalette] = None):
        self.surface = surface
        self.config = config
        self.palette = palette or PlayerPalette()

        if not pygame.font.get_init():
            pygame.font.init()
        self.large_font = pygame.font.Font(None, 40)
        self.font = pygame.font.Font(None, 24)

        self.score = 0
        self.final_score: Optional[int] = None

    def draw_background(self, stars):
        self.surface.fill(BACKGROUND_COLOR)
        for star in stars:
            pygame.draw.circle(self.surface, STAR_COLOR,
                               (int(star.x), int(star.y)), max(1, int(star.size)))

    def draw_ground(self):
        top = int(self.config.ground_line)
        pygame.draw.rect(self.surface, GROUND_COLOR,
                         (0, top, self.config.world_width, self.config.world_height - top))

    def draw_obstacle(self, obstacle):
        pygame.draw.rect(self.surface, OBSTACLE_COLOR,
                         (int(obstacle.x), int(obstacle.y), int(obstacle.width), int(obstacle.height)))

    def draw_player(self, player):
        w, h = int(player.width), int(player.height)
        body = pygame.Surface((w, h), pygame.SRCALPHA)
        body.fill(hex_to_rgb(self.palette.primary))
        pygame.draw.rect(body, hex_to_rgb(self.palette.secondary), (w // 4, h // 4, w // 2, h // 2))
        pygame.draw.rect(body, hex_to_rgb(self.palette.outline), (0, 0, w, h), 2)
        if player.rotation:
            body = pygame.transform.rotate(body, -player.rotation)

        center = (player.x + player.width / 2, player.y + player.height / 2)
        self.surface.blit(body, body.get_rect(center=(int(center[0]), int(center[1]))))

    def set_score_display(self, score):
        self.score = score

    def show_game_over(self, score):
        self.final_score = score

    def hide_game_over(self):
        self.final_score = None

    def end_frame(self):
        """HUD: score, level progress and the game-over banner."""
        width = self.config.world_width
        score_text = self.large_font.render(f"Score: {self.score}", True, WHITE)
        self.surface.blit(score_text, (width // 2 - score_text.get_width() // 2, 20))

        bar_width = 200
        progress = min(self.score, 100) / 100
        pygame.draw.rect(self.surface, GROUND_COLOR, (10, 10, bar_width, 8))
        pygame.draw.rect(self.surface, PROGRESS_COLOR, (10, 10, math.floor(bar_width * progress), 8))

        if self.final_score is not None:
            banner = self.large_font.render(f"Game Over - Score: {self.final_score}", True, (255, 50, 50))
            hint = self.font.render("Press ENTER to restart", True, WHITE)
            mid_y = self.config.world_height // 2
            self.surface.blit(banner, (width // 2 - banner.get_width() // 2, mid_y - 30))
            self.surface.blit(hint, (width // 2 - hint.get_width() // 2, mid_y + 10))


# ----------------- Game Client (input / frame clock) -----------------

class RunnerClient:
    def __init__(self, config: Optional[GameConfig] = None, fps: int = RENDER_FPS,
                 rng=None):
        pygame.init()
        self.config = config or GameConfig()
        self.fps = fps
        self.screen = pygame.display.set_mode((self.config.world_width, self.config.world_height))
        pygame.display.set_caption("SkyHop")

        self.palette = PlayerPalette()
        self.presenter = PygamePresenter(self.screen, self.config, self.palette)
        self.engine = GameEngine(self.config, self.presenter, rng)
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop."""
        logger.info("Running at %d FPS", self.fps)
        running = True
        while running:
            self.clock.tick(self.fps)
            session = self.engine.session

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not self._handle_key(event.key):
                        running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self.engine.on_jump()

            # A restart during event handling opens a new session; this frame
            # was scheduled for the old one and is dropped.
            if self.engine.tick(session):
                if self.engine.phase is GamePhase.IDLE:
                    self._draw_title()
                pygame.display.flip()

        pygame.quit()

    def _handle_key(self, key) -> bool:
        phase = self.engine.phase
        if key == pygame.K_ESCAPE:
            return False
        if key in (pygame.K_SPACE, pygame.K_UP):
            if phase is GamePhase.IDLE:
                self.engine.on_start()
            else:
                self.engine.on_jump()
        elif key == pygame.K_RETURN:
            if phase is GamePhase.IDLE:
                self.engine.on_start()
            else:
                self.engine.on_restart()
        elif key == pygame.K_c:
            self.palette.cycle()
            logger.debug("Player color is now %s", self.palette.primary)
        return True

    def _draw_title(self):
        font = self.presenter.large_font
        small = self.presenter.font
        title = font.render("SkyHop", True, WHITE)
        instr = small.render(
            "Space / Enter = Play | Space / Up / Click = Jump | C = Color | Esc = Quit", True, (200, 200, 200))
        width, mid_y = self.config.world_width, self.config.world_height // 2
        self.screen.blit(title, (width // 2 - title.get_width() // 2, mid_y - 40))
        self.screen.blit(instr, (width // 2 - instr.get_width() // 2, mid_y + 10))
