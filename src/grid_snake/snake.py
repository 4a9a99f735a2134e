"""Snake representation, movement and direction arbitration."""

from __future__ import annotations

import enum
from collections import deque

from grid_snake.point import Point2D


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values; y grows downward."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def unit(self) -> Point2D[int]:
        return Point2D.from_array(self.value)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def arbitrate_direction(
    current: Direction, requested: Direction, length: int,
) -> Direction:
    """Return the heading that results from requesting *requested*.

    A head-only snake may turn anywhere. Once it has a body, a 180°
    reversal is refused and *current* is kept.
    """
    if length > 1 and requested is current.opposite:
        return current
    return requested


class Snake:
    """A snake represented as an ordered deque of board coordinates.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self, start: Point2D[int], direction: Direction = Direction.RIGHT,
    ) -> None:
        self.body: deque[Point2D[int]] = deque([start])
        self.direction = direction

    @property
    def head(self) -> Point2D[int]:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Point2D[int]:
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)

    def __len__(self) -> int:
        return len(self.body)

    def propose_move(self, direction: Direction | None = None) -> Point2D[int]:
        """Compute the next head position without moving."""
        return self.head + (direction or self.direction).unit

    def commit_move(
        self, new_head: Point2D[int], grow: bool = False,
    ) -> Point2D[int] | None:
        """Push *new_head* to the front of the body.

        Returns the vacated tail cell, or ``None`` if the snake grew. The
        caller is responsible for *new_head* being a legal destination.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def occupies(self, pos: Point2D[int]) -> bool:
        """Check whether the snake occupies a given cell."""
        return pos in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [seg.to_list() for seg in self.body],
            "direction": self.direction.name.lower(),
            "length": self.length,
        }
