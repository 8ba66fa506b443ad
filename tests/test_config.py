import pytest

from skyhop.constants import ConfigError, GameConfig, SpawnPolicy


def test_defaults_match_tuning():
    config = GameConfig()
    assert config.gravity == 0.7
    assert config.jump_force == -12
    assert config.ground_height == 350
    assert config.obstacle_speed == 6
    assert (config.min_distance, config.max_distance) == (300, 500)
    assert (config.min_height, config.max_height) == (20, 80)
    assert config.spawn_policy is SpawnPolicy.DISTANCE
    assert not config.clamp_ceiling
    assert config.ground_line == 390


@pytest.mark.parametrize("kwargs", [
    {"min_distance": 600, "max_distance": 500},
    {"min_height": 0},
    {"min_height": 90, "max_height": 80},
    {"jump_force": 5.0},
    {"player_width": 0},
    {"obstacle_speed": 0},
    {"spawn_interval": 0},
    {"star_count": -1},
    {"world_width": 0},
])
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ConfigError):
        GameConfig(**kwargs)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_config_is_frozen():
    config = GameConfig()
    with pytest.raises(AttributeError):
        config.gravity = 1.0
