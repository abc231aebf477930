"""
Tests for board snapshots and status text.
"""

import numpy as np
import pytest

from gridsnake.snake_core.config_loader import load_config
from gridsnake.snake_core.game import create_initial_state, start, toggle_pause
from gridsnake.snake_core.geometry import Position
from gridsnake.snake_core.state_snapshot import (
    STATUS_BOARD_FULL,
    STATUS_GAME_OVER,
    STATUS_NOT_STARTED,
    STATUS_PAUSED,
    Cell,
    GameSnapshot,
    build_board,
    status_text,
)


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def state(config):
    return create_initial_state(seed=42, config=config).evolve(food=Position(2, 3))


class TestBuildBoard:
    """Test cell painting."""

    def test_shape_and_dtype(self, state):
        board = build_board(state)
        assert board.shape == (16, 16)
        assert board.dtype == np.int8

    def test_cells(self, state):
        board = build_board(state)

        assert board[8, 8] == Cell.HEAD
        assert board[8, 7] == Cell.SNAKE
        assert board[8, 6] == Cell.SNAKE
        assert board[3, 2] == Cell.FOOD
        assert np.count_nonzero(board == Cell.EMPTY) == 256 - 4

    def test_no_food(self, state):
        board = build_board(state.evolve(food=None))
        assert np.count_nonzero(board == Cell.FOOD) == 0


class TestStatusText:
    """Test the status line for each phase."""

    def test_not_started(self, state):
        assert status_text(state) == STATUS_NOT_STARTED

    def test_running(self, state):
        assert status_text(start(state)) == ""

    def test_paused(self, state):
        assert status_text(toggle_pause(start(state))) == STATUS_PAUSED

    def test_game_over(self, state):
        assert status_text(state.evolve(game_over=True)) == STATUS_GAME_OVER

    def test_board_full(self, state):
        assert status_text(start(state).evolve(food=None)) == STATUS_BOARD_FULL

    def test_paused_wins_over_board_full(self, state):
        paused_full = toggle_pause(start(state)).evolve(food=None)
        assert status_text(paused_full) == STATUS_PAUSED


class TestGameSnapshot:
    """Test the render-ready view."""

    def test_from_state(self, state):
        snap = GameSnapshot.from_state(state)

        assert snap.score == 0
        assert snap.length == 3
        assert snap.head == (8, 8)
        assert snap.food == (2, 3)
        assert snap.direction == "right"
        assert snap.phase == "not_started"
        assert snap.status == STATUS_NOT_STARTED

    def test_to_dict_is_plain(self, state):
        data = GameSnapshot.from_state(state).to_dict()

        assert isinstance(data["board"], list)
        assert len(data["board"]) == 16
        assert data["head"] == [8, 8]
        assert data["food"] == [2, 3]

    def test_to_text(self, state):
        rows = GameSnapshot.from_state(state).to_text().splitlines()

        assert len(rows) == 16
        assert rows[8][6:9] == "oo@"
        assert rows[3][2] == "*"
