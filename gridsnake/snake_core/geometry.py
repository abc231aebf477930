"""
Grid Geometry
=============

Positions, directions and bounds checks on the square board.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple, Tuple, Union


class Position(NamedTuple):
    """A cell on the board. y grows downwards."""
    x: int
    y: int

    def moved(self, direction: "Direction") -> "Position":
        """Neighbouring cell one step in the given direction."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)


class Direction(Enum):
    """The four movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit (dx, dy) step."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    def is_reverse_of(self, other: "Direction") -> bool:
        return self.opposite is other

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        """
        Coerce a Direction or its name ("up", "Left", ...) to a Direction.

        Raises:
            ValueError: If the name is not a known direction.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown direction: {value!r}") from None


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def same_pos(a: Position, b: Position) -> bool:
    return a[0] == b[0] and a[1] == b[1]


def in_bounds(pos: Position, grid_size: int) -> bool:
    """True if the position lies on a grid_size x grid_size board."""
    return 0 <= pos[0] < grid_size and 0 <= pos[1] < grid_size
