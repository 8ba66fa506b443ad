"""
starfield.py: Cosmetic background stars.

Stars scroll with the world at the same speed as the obstacles.
"""

import random
from typing import List

from .data_models import Star


def generate_stars(count: int, width: float, height: float, rng: random.Random) -> List[Star]:
    return [
        Star(
            x=rng.random() * width,
            y=rng.random() * height,
            size=rng.random() * 2 + 1,
        )
        for _ in range(count)
    ]


def drift_stars(stars: List[Star], speed: float, width: float, height: float, rng: random.Random):
    """Moves stars left by speed; any that leave the screen wrap to the right edge."""
    for star in stars:
        star.x -= speed
        if star.x < 0:
            star.x = width
            star.y = rng.random() * height
