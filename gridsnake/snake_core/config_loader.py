"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridConfig:
    """Board geometry."""
    size: int  # Cells per side (board is square)


@dataclass(frozen=True)
class TimingConfig:
    """Host loop timing."""
    tick_ms: int  # Milliseconds between ticks

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0


@dataclass(frozen=True)
class SnakeConfig:
    """Initial snake layout."""
    start_length: int


@dataclass(frozen=True)
class RngConfig:
    """Linear congruential generator parameters."""
    multiplier: int
    modulus: int


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    grid: GridConfig
    timing: TimingConfig
    snake: SnakeConfig
    rng: RngConfig

    @property
    def grid_size(self) -> int:
        return self.grid.size

    @property
    def cell_count(self) -> int:
        """Total number of cells on the board."""
        return self.grid.size * self.grid.size


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if config.grid.size < 2:
        raise ValueError(f"grid.size must be at least 2, got {config.grid.size}")

    if config.timing.tick_ms <= 0:
        raise ValueError(f"timing.tick_ms must be positive, got {config.timing.tick_ms}")

    # The body extends left from the center cell, so it has to fit on the board
    max_length = config.grid.size // 2 + 1
    if not 1 <= config.snake.start_length <= max_length:
        raise ValueError(
            f"snake.start_length must be in [1, {max_length}] for a "
            f"{config.grid.size}x{config.grid.size} grid, got {config.snake.start_length}"
        )

    if config.rng.modulus <= 1 or config.rng.multiplier <= 0:
        raise ValueError(
            f"rng.multiplier and rng.modulus must be positive (modulus > 1), "
            f"got multiplier={config.rng.multiplier}, modulus={config.rng.modulus}"
        )


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    grid = GridConfig(size=int(raw["grid"]["size"]))

    timing = TimingConfig(tick_ms=int(raw["timing"]["tick_ms"]))

    snake_data = raw["snake"]
    snake = SnakeConfig(
        start_length=int(snake_data["start_length"])
    )

    rng_data = raw.get("rng", {})
    rng = RngConfig(
        multiplier=int(rng_data.get("multiplier", 48271)),
        modulus=int(rng_data.get("modulus", 2147483647))
    )

    config = GameConfig(grid=grid, timing=timing, snake=snake, rng=rng)

    _validate_config(config)
    logger.debug("Loaded game config from %s", config_path)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
