"""
Tests for configuration loading and validation.
"""

from dataclasses import FrozenInstanceError

import pytest
import yaml

from gridsnake.snake_core.config_loader import load_config, reload_config, get_config
from gridsnake.snake_core.game import create_initial_state, step_state
from gridsnake.snake_core.geometry import Direction, Position


def _raw_config(**sections):
    raw = {
        "grid": {"size": 16},
        "timing": {"tick_ms": 140},
        "snake": {"start_length": 3},
        "rng": {"multiplier": 48271, "modulus": 2147483647},
    }
    for name, values in sections.items():
        raw[name] = {**raw[name], **values}
    return raw


@pytest.fixture
def write_config(tmp_path):
    def _write(**sections):
        path = tmp_path / "game_config.yaml"
        path.write_text(yaml.safe_dump(_raw_config(**sections)))
        return str(path)
    return _write


class TestDefaultConfig:
    """Test the shipped game_config.yaml."""

    def test_fixed_constants(self):
        """Shipped config holds the classic board parameters."""
        config = load_config()

        assert config.grid_size == 16
        assert config.cell_count == 256
        assert config.timing.tick_ms == 140
        assert config.snake.start_length == 3
        assert config.rng.multiplier == 48271
        assert config.rng.modulus == 2147483647

    def test_tick_seconds(self):
        assert load_config().timing.tick_seconds == pytest.approx(0.14)

    def test_config_is_frozen(self):
        """Config values cannot be reassigned."""
        config = load_config()
        with pytest.raises(FrozenInstanceError):
            config.grid.size = 20

    def test_get_config_is_cached(self):
        assert get_config() is get_config()


class TestValidation:
    """Test rejection of inconsistent configs."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_valid_custom_file(self, write_config):
        config = load_config(write_config(grid={"size": 8}))
        assert config.grid_size == 8

    def test_grid_too_small(self, write_config):
        with pytest.raises(ValueError, match="grid.size"):
            load_config(write_config(grid={"size": 1}))

    def test_non_positive_tick(self, write_config):
        with pytest.raises(ValueError, match="tick_ms"):
            load_config(write_config(timing={"tick_ms": 0}))

    def test_snake_longer_than_half_board(self, write_config):
        """Body extends left from the center, so it must fit."""
        with pytest.raises(ValueError, match="start_length"):
            load_config(write_config(grid={"size": 8}, snake={"start_length": 6}))

    def test_zero_length_snake(self, write_config):
        with pytest.raises(ValueError, match="start_length"):
            load_config(write_config(snake={"start_length": 0}))

    def test_start_direction_is_not_configurable(self, write_config):
        """A stray start_direction key cannot turn the snake into its own body."""
        config = load_config(write_config(snake={"start_direction": "left"}))
        assert not hasattr(config.snake, "start_direction")

        state = create_initial_state(1, config)
        assert state.direction is Direction.RIGHT

        after = step_state(state.evolve(running=True))
        assert not after.game_over
        assert after.head == Position(9, 8)

    def test_bad_rng_constants(self, write_config):
        with pytest.raises(ValueError, match="rng"):
            load_config(write_config(rng={"modulus": 1}))


class TestReload:
    """Test swapping the cached singleton."""

    def test_reload_replaces_cache(self, write_config):
        default = get_config()
        try:
            custom = reload_config(write_config(grid={"size": 10}))
            assert get_config() is custom
            assert get_config().grid_size == 10
        finally:
            reload_config()
        assert get_config() == default
