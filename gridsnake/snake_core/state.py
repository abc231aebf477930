"""
Game State
==========

Immutable record of one moment of a game. Every engine call returns a new
GameState derived from the old one with ``evolve``; nothing edits a state
in place, so hosts may keep earlier states around for replay or testing.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from gridsnake.snake_core.config_loader import GameConfig
from gridsnake.snake_core.geometry import Direction, Position
from gridsnake.snake_core.rng import RandomSource


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of a single game.

    ``rng`` is shared by every state derived from the same initial state;
    it is the only mutable part and is advanced only by food placement.
    """
    seed: int
    snake: Tuple[Position, ...]       # Head first
    direction: Direction              # Applied on the last tick
    pending_direction: Direction      # Applied on the next tick
    food: Optional[Position]          # None once the board is full
    rng: RandomSource = field(compare=False, repr=False)
    score: int = 0
    running: bool = False             # First tick has been triggered
    paused: bool = False
    game_over: bool = False
    # Engine falls back to get_config() when None
    config: Optional[GameConfig] = field(default=None, compare=False, repr=False)

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def board_full(self) -> bool:
        """True when no free cell is left for food."""
        return self.food is None

    @property
    def phase(self) -> str:
        """One of "not_started", "running", "paused", "game_over"."""
        if self.game_over:
            return "game_over"
        if self.paused:
            return "paused"
        if self.running:
            return "running"
        return "not_started"

    def evolve(self, **changes) -> "GameState":
        """Copy of this state with the named fields replaced."""
        return replace(self, **changes)
