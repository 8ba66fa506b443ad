import random

from skyhop.data_models import Star
from skyhop.starfield import drift_stars, generate_stars


def test_generate_stars_within_bounds():
    stars = generate_stars(50, 800, 450, random.Random(0))
    assert len(stars) == 50
    for star in stars:
        assert 0 <= star.x < 800 and 0 <= star.y < 450
        assert 1 <= star.size <= 3


def test_stars_scroll_uniformly_and_wrap():
    stars = [Star(x=4, y=10, size=1), Star(x=100, y=20, size=2)]
    drift_stars(stars, 6, 800, 450, random.Random(0))
    assert stars[0].x == 800
    assert 0 <= stars[0].y < 450
    assert stars[1].x == 94
    assert stars[1].y == 20
