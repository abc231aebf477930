"""
RNG - Lehmer Random Source
==========================

Provides deterministic food placement through a multiplicative linear
congruential generator. Two sources built from the same seed yield the
same sequence, which makes whole games reproducible from their seed.
"""

from __future__ import annotations

import time
from typing import Optional

from gridsnake.snake_core.config_loader import GameConfig, get_config


def default_seed(modulus: int = 2147483647) -> int:
    """Time-derived seed (milliseconds since epoch, reduced by the modulus)."""
    return (time.time_ns() // 1_000_000) % modulus


class RandomSource:
    """
    Stateful generator of floats in [0, 1).

    Each draw advances the internal counter with
    ``value = (value * multiplier) % modulus`` and returns ``value / modulus``.
    The counter is owned by this object alone; restarting the sequence is
    only possible through ``reset``.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize random source.

        Args:
            seed: Integer seed. Time-derived if None.
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._multiplier = config.rng.multiplier
        self._modulus = config.rng.modulus
        self._seed = 0
        self._value = 0
        self.reset(seed)

    @property
    def seed(self) -> int:
        """Seed the current sequence started from."""
        return self._seed

    def random(self) -> float:
        """Advance the counter and return the next value in [0, 1)."""
        self._value = (self._value * self._multiplier) % self._modulus
        return self._value / self._modulus

    __call__ = random

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Restart the sequence.

        Args:
            seed: New seed. Time-derived if None.
        """
        if seed is None:
            seed = default_seed(self._modulus)
        self._seed = int(seed) % self._modulus
        self._value = self._seed

    def get_state(self) -> int:
        """Current counter value (for checkpointing)."""
        return self._value

    def set_state(self, value: int) -> None:
        """Restore a counter value captured with get_state()."""
        self._value = int(value) % self._modulus

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed}, state={self._value})"
