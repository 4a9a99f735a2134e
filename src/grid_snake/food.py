"""Food spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from grid_snake.cells import Cell

if TYPE_CHECKING:
    from grid_snake.board import Board
    from grid_snake.point import Point2D

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food uniformly at random on empty board cells.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(self, board: Board, rng: np.random.Generator | None = None) -> None:
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self) -> Point2D[int] | None:
        """Put one food on a random empty cell.

        Returns its position, or ``None`` when the board has no empty cell.
        """
        empty = self.board.empty_cells()
        if not empty:
            logger.warning("No empty cells available for food spawning.")
            return None

        pos = empty[int(self.rng.integers(len(empty)))]
        self.board.set_at(pos, Cell.food())
        logger.debug("Food spawned at (%d, %d).", pos.x, pos.y)
        return pos
