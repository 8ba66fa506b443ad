"""
obstacles.py: Procedural obstacle stream (spawn, scroll, prune).
"""

import logging
import random
from typing import List, Optional

from .constants import GameConfig, SpawnPolicy
from .data_models import Obstacle

logger = logging.getLogger(__name__)


class ObstacleGenerator:
    """
    Keeps the obstacle list stocked ahead of the player.

    Obstacles are appended in spawn order, so the last element is always the
    rightmost one. Scrolling is uniform and removal is a stable filter, so
    that ordering holds for the whole session.
    """

    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random()

    def _should_spawn(self, obstacles: List[Obstacle], frame_count: int) -> bool:
        if not obstacles:
            return True
        if self.config.spawn_policy is SpawnPolicy.PERIODIC:
            return frame_count % self.config.spawn_interval == 0
        return obstacles[-1].x <= self.config.world_width - self.config.min_distance

    def _next_x(self, obstacles: List[Obstacle]) -> float:
        edge = float(self.config.world_width)
        if not obstacles:
            return edge
        if self.config.spawn_policy is SpawnPolicy.PERIODIC:
            # Jitter is measured from the spawn edge, not from the previous obstacle.
            jitter = self.rng.uniform(0, self.config.max_distance - self.config.min_distance)
            return max(edge + jitter, obstacles[-1].x + self.config.min_distance)
        gap = self.rng.uniform(self.config.min_distance, self.config.max_distance)
        # Never materialise on-screen, even if the previous one has scrolled far left.
        return max(edge, obstacles[-1].x + gap)

    def spawn(self, obstacles: List[Obstacle], frame_count: int) -> Optional[Obstacle]:
        """Appends a new obstacle if the policy calls for one this tick."""
        if not self._should_spawn(obstacles, frame_count):
            return None

        height = self.rng.uniform(self.config.min_height, self.config.max_height)
        obstacle = Obstacle(
            x=self._next_x(obstacles),
            y=self.config.ground_line - height,
            width=self.config.obstacle_width,
            height=height,
        )
        obstacles.append(obstacle)
        logger.debug("Spawned obstacle at x=%.1f (h=%.1f) on frame %d",
                     obstacle.x, obstacle.height, frame_count)
        return obstacle

    def scroll(self, obstacles: List[Obstacle]):
        for obstacle in obstacles:
            obstacle.x -= self.config.obstacle_speed

    def prune(self, obstacles: List[Obstacle]) -> int:
        """Drops obstacles fully past the left edge, in place. Returns how many."""
        kept = [o for o in obstacles if o.right >= 0]
        removed = len(obstacles) - len(kept)
        obstacles[:] = kept
        return removed
