"""
Core Game
=========

Pure state-transition engine: build the initial state, apply directional
input, advance one tick. Each function takes a GameState and returns a new
one; the previous state is never modified.

CoreGame wraps the engine for hosts that want to hold a single current-state
slot (the human play tool, scripted runs).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from gridsnake.snake_core.config_loader import GameConfig, get_config
from gridsnake.snake_core.food import place_food
from gridsnake.snake_core.geometry import Direction, Position, in_bounds, same_pos
from gridsnake.snake_core.rng import RandomSource
from gridsnake.snake_core.state import GameState

logger = logging.getLogger(__name__)

_default_config = get_config()

GRID_SIZE = _default_config.grid_size
TICK_MS = _default_config.timing.tick_ms
START_LENGTH = _default_config.snake.start_length

DirectionLike = Union[Direction, str]


def initial_snake(config: Optional[GameConfig] = None) -> List[Position]:
    """Horizontal snake with its head on the center cell, body to the left."""
    if config is None:
        config = get_config()
    mid = config.grid_size // 2
    return [Position(mid - i, mid) for i in range(config.snake.start_length)]


def create_initial_state(
    seed: Optional[int] = None,
    config: Optional[GameConfig] = None
) -> GameState:
    """
    Build a fresh game. Used both for the first game and for every restart.

    Args:
        seed: Random seed for food placement. Time-derived if None.
        config: Game configuration. Uses default if None.

    Returns:
        A not-yet-started GameState with food already placed.
    """
    if config is None:
        config = get_config()

    rng = RandomSource(seed, config)
    snake = tuple(initial_snake(config))
    # The body trails towards negative x, so only RIGHT is a safe first move
    direction = Direction.RIGHT

    return GameState(
        seed=rng.seed,
        snake=snake,
        direction=direction,
        pending_direction=direction,
        food=place_food(snake, rng, config.grid_size),
        score=0,
        running=False,
        paused=False,
        game_over=False,
        rng=rng,
        config=config,
    )


def apply_direction(
    state: GameState,
    direction: Optional[DirectionLike] = None
) -> GameState:
    """
    Queue a direction for the next tick.

    Reversals are checked against the committed direction, not the pending
    one, so several turns can be queued between ticks but the snake can
    never fold back onto its own neck. Only the latest accepted request
    survives until the next tick.

    Raises:
        ValueError: If ``direction`` is a string that names no direction.
    """
    if direction is None or state.game_over:
        return state

    direction = Direction.parse(direction)
    if direction.is_reverse_of(state.direction):
        return state

    return state.evolve(pending_direction=direction)


def _game_over(state: GameState, reason: str) -> GameState:
    logger.debug("Game over (%s) with score %d, length %d", reason, state.score, state.length)
    return state.evolve(game_over=True, running=False)


def step_state(state: GameState) -> GameState:
    """
    Advance the game by one tick.

    Ticks are no-ops until the game is started, while paused and after game
    over. A move off the board or into the body ends the game and leaves
    snake, direction, food and score exactly as they were before the tick.
    """
    if not state.running or state.paused or state.game_over:
        return state

    config = state.config if state.config is not None else get_config()
    grid_size = config.grid_size

    direction = state.pending_direction
    next_head = state.head.moved(direction)

    # No wrap-around: leaving the board is fatal
    if not in_bounds(next_head, grid_size):
        return _game_over(state, "wall")

    will_grow = state.food is not None and same_pos(next_head, state.food)
    next_snake = (next_head,) + state.snake
    if not will_grow:
        next_snake = next_snake[:-1]

    if next_head in next_snake[1:]:
        return _game_over(state, "self")

    if will_grow:
        food = place_food(next_snake, state.rng, grid_size)
        score = state.score + 1
        if food is None:
            logger.debug("Board full at score %d", score)
    else:
        food = state.food
        score = state.score

    return state.evolve(
        snake=next_snake,
        direction=direction,
        food=food,
        score=score,
    )


# --- Host controls ---

def start(state: GameState) -> GameState:
    """Mark the game as running if it has not started yet."""
    if state.running or state.game_over:
        return state
    return state.evolve(running=True)


def toggle_pause(state: GameState) -> GameState:
    """Pause or resume. Starts a not-yet-started game in the paused state."""
    if state.game_over:
        return state
    state = start(state)
    return state.evolve(paused=not state.paused)


def handle_direction(
    state: GameState,
    direction: Optional[DirectionLike] = None
) -> GameState:
    """Directional key press: start the game if needed, then queue the turn."""
    return apply_direction(start(state), direction)


def restart(
    seed: Optional[int] = None,
    config: Optional[GameConfig] = None
) -> GameState:
    """Discard the current game and build a new one."""
    return create_initial_state(seed, config)


class CoreGame:
    """
    Holds the current GameState for a host loop.

    The host calls ``tick`` once per tick period and ``turn`` /
    ``toggle_pause`` / ``reset`` from its input handlers. All calls happen
    on one thread; each simply replaces ``state`` with the engine result.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize game.

        Args:
            config: Game configuration. Uses default if None.
            seed: Random seed for reproducibility. Time-derived if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._seed = seed
        self._state = create_initial_state(seed, config)
        self._ticks = 0

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> GameState:
        """Current game state."""
        return self._state

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def ticks(self) -> int:
        """Ticks that moved the snake since the last reset."""
        return self._ticks

    @property
    def is_over(self) -> bool:
        return self._state.game_over

    def reset(self, seed: Optional[int] = None) -> GameState:
        """
        Restart the game.

        Args:
            seed: New random seed. Uses the constructor seed if None.
        """
        if seed is not None:
            self._seed = seed
        self._state = restart(self._seed, self._config)
        self._ticks = 0
        return self._state

    def turn(self, direction: DirectionLike) -> GameState:
        self._state = handle_direction(self._state, direction)
        return self._state

    def toggle_pause(self) -> GameState:
        self._state = toggle_pause(self._state)
        return self._state

    def tick(self) -> GameState:
        """Advance one tick."""
        before = self._state
        self._state = step_state(before)
        if self._state.snake is not before.snake:
            self._ticks += 1
        return self._state
