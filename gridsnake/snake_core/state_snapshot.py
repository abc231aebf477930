"""
State Snapshot
==============

Maps a GameState onto a fixed-size cell grid plus the status line shown to
the player. Renderers draw from these; nothing here touches a display.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np

from gridsnake.snake_core.config_loader import get_config
from gridsnake.snake_core.state import GameState


class Cell(IntEnum):
    """Contents of one board cell."""
    EMPTY = 0
    FOOD = 1
    SNAKE = 2
    HEAD = 3


STATUS_GAME_OVER = "Game over. Press Restart or R to play again."
STATUS_PAUSED = "Paused. Press Space to resume."
STATUS_NOT_STARTED = "Press any arrow key to start."
STATUS_BOARD_FULL = "Board full. You win!"


def status_text(state: GameState) -> str:
    """Status line for the current phase, empty while playing normally."""
    if state.game_over:
        return STATUS_GAME_OVER
    if state.paused:
        return STATUS_PAUSED
    if state.food is None:
        return STATUS_BOARD_FULL
    if not state.running:
        return STATUS_NOT_STARTED
    return ""


def build_board(state: GameState, grid_size: Optional[int] = None) -> np.ndarray:
    """
    Paint the state onto a (grid_size, grid_size) int8 array indexed [y, x].

    Food is painted first, then the body, then the head, so later layers win.
    """
    if grid_size is None:
        grid_size = state.config.grid_size if state.config is not None else get_config().grid_size

    board = np.full((grid_size, grid_size), Cell.EMPTY, dtype=np.int8)

    if state.food is not None:
        fx, fy = state.food
        board[fy, fx] = Cell.FOOD

    for x, y in state.snake:
        if 0 <= x < grid_size and 0 <= y < grid_size:
            board[y, x] = Cell.SNAKE

    hx, hy = state.head
    if 0 <= hx < grid_size and 0 <= hy < grid_size:
        board[hy, hx] = Cell.HEAD

    return board


@dataclass
class GameSnapshot:
    """Render-ready view of one GameState."""
    board: np.ndarray                   # (grid, grid) int8 of Cell values
    score: int
    length: int
    head: Tuple[int, int]
    food: Optional[Tuple[int, int]]
    direction: str
    phase: str
    status: str

    @classmethod
    def from_state(cls, state: GameState) -> "GameSnapshot":
        return cls(
            board=build_board(state),
            score=state.score,
            length=state.length,
            head=tuple(state.head),
            food=tuple(state.food) if state.food is not None else None,
            direction=state.direction.value,
            phase=state.phase,
            status=status_text(state),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Plain-Python view, suitable for logging or JSON."""
        return {
            "board": self.board.tolist(),
            "score": self.score,
            "length": self.length,
            "head": list(self.head),
            "food": list(self.food) if self.food is not None else None,
            "direction": self.direction,
            "phase": self.phase,
            "status": self.status,
        }

    def to_text(self) -> str:
        """ASCII rendering, one row per line."""
        glyphs = {Cell.EMPTY: ".", Cell.FOOD: "*", Cell.SNAKE: "o", Cell.HEAD: "@"}
        rows = ["".join(glyphs[Cell(int(v))] for v in row) for row in self.board]
        return "\n".join(rows)
