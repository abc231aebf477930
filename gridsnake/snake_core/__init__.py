"""
Snake Core - The deterministic game engine.

Main exports:
- create_initial_state / apply_direction / step_state: the pure engine
- place_food: free-cell food placement
- RandomSource: seeded Lehmer generator used for food placement
- GameState: immutable game record
- CoreGame: current-state holder for host loops
- GameSnapshot: render-ready board view
- GameConfig: Configuration loaded from game_config.yaml
"""

from gridsnake.snake_core.config_loader import GameConfig, get_config, load_config
from gridsnake.snake_core.food import place_food
from gridsnake.snake_core.game import (
    GRID_SIZE,
    START_LENGTH,
    TICK_MS,
    CoreGame,
    apply_direction,
    create_initial_state,
    handle_direction,
    restart,
    start,
    step_state,
    toggle_pause,
)
from gridsnake.snake_core.geometry import Direction, Position
from gridsnake.snake_core.rng import RandomSource
from gridsnake.snake_core.state import GameState
from gridsnake.snake_core.state_snapshot import Cell, GameSnapshot, build_board, status_text

__all__ = [
    "GameConfig",
    "get_config",
    "load_config",
    "GRID_SIZE",
    "START_LENGTH",
    "TICK_MS",
    "Direction",
    "Position",
    "RandomSource",
    "GameState",
    "place_food",
    "create_initial_state",
    "apply_direction",
    "step_state",
    "start",
    "toggle_pause",
    "handle_direction",
    "restart",
    "CoreGame",
    "Cell",
    "GameSnapshot",
    "build_board",
    "status_text",
]
