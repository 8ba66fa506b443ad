"""
physics_core.py: Deterministic kinematics, collision and scoring rules.
"""

from typing import Iterable

from .constants import GameConfig, JUMP_TILT_DEGREES
from .data_models import Player, Obstacle


def overlaps(ax: float, ay: float, aw: float, ah: float,
             bx: float, by: float, bw: float, bh: float) -> bool:
    """Strict axis-aligned box overlap. Boxes sharing only an edge do not overlap."""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


class PhysicsCore:
    """
    Per-tick rules shared by the engine: gravity, jumping, ground clamping,
    player/obstacle collision and pass scoring.
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def integrate(self, player: Player):
        """Advances the player one tick under gravity, then clamps to the ground."""
        player.velocity_y += self.config.gravity
        player.y += player.velocity_y

        if player.y > self.config.ground_height:
            player.y = self.config.ground_height
            player.velocity_y = 0.0
            player.airborne = False
        elif self.config.clamp_ceiling and player.y < 0:
            player.y = 0.0
            player.velocity_y = 0.0

        player.rotation = JUMP_TILT_DEGREES if player.airborne else 0.0

    def jump(self, player: Player) -> bool:
        """Applies the jump impulse. Returns False (and does nothing) if airborne."""
        if player.airborne:
            return False
        player.velocity_y = self.config.jump_force
        player.airborne = True
        return True

    def check_collision(self, player: Player, obstacles: Iterable[Obstacle]) -> bool:
        for obstacle in obstacles:
            if overlaps(player.x, player.y, player.width, player.height,
                        obstacle.x, obstacle.y, obstacle.width, obstacle.height):
                return True
        return False

    def score_passed(self, player: Player, obstacles: Iterable[Obstacle]) -> int:
        """Marks obstacles whose trailing edge cleared the player; returns how many."""
        passed = 0
        for obstacle in obstacles:
            if not obstacle.counted and obstacle.right < player.x:
                obstacle.counted = True
                passed += 1
        return passed
