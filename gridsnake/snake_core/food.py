"""
Food Placement
==============

Picks a free cell uniformly at random for the next food item.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from gridsnake.snake_core.config_loader import get_config
from gridsnake.snake_core.geometry import Position, in_bounds
from gridsnake.snake_core.rng import RandomSource


def free_cells(snake: Sequence[Position], grid_size: int) -> np.ndarray:
    """
    Cells not covered by the snake, in row-major order.

    Returns:
        (N, 2) int array of (x, y) pairs, sorted by y then x.
    """
    occupied = np.zeros((grid_size, grid_size), dtype=bool)
    for segment in snake:
        if in_bounds(segment, grid_size):
            occupied[segment[1], segment[0]] = True

    # nonzero walks the [y, x] mask row by row
    ys, xs = np.nonzero(~occupied)
    return np.stack([xs, ys], axis=1)


def place_food(
    snake: Sequence[Position],
    rng: RandomSource,
    grid_size: Optional[int] = None
) -> Optional[Position]:
    """
    Choose a random free cell for food.

    Consumes exactly one value from ``rng`` when a free cell exists and
    none when the board is full.

    Args:
        snake: Current snake segments.
        rng: Random source, advanced by this call.
        grid_size: Board side length. Uses config if None.

    Returns:
        Food position, or None if the snake covers every cell.
    """
    if grid_size is None:
        grid_size = get_config().grid_size

    candidates = free_cells(snake, grid_size)
    if len(candidates) == 0:
        return None

    index = math.floor(rng() * len(candidates))
    x, y = candidates[index]
    return Position(int(x), int(y))
