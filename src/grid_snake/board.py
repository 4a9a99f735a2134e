"""Board representation for the snake game."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

import numpy as np

from grid_snake.cells import BORDER, EMPTY, Cell, CellType, SnakePart
from grid_snake.point import Point2D

MIN_SIZE = 5


class InvalidDimensionsError(ValueError):
    """Raised when a board is requested smaller than the minimum size."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(
            f"Board must be at least {MIN_SIZE}x{MIN_SIZE} cells, "
            f"got {width}x{height}."
        )
        self.width = width
        self.height = height


class CellView(NamedTuple):
    """One entry of a row-major board walk."""

    index: int
    pos: Point2D[int]
    cell: Cell


class Board:
    """NumPy-backed, row-major board of cells.

    Cell kinds, snake roles and segment indices live in three flat arrays
    addressed by ``index = y * width + x``. The perimeter is border and
    cannot be overwritten once the board exists.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < MIN_SIZE or height < MIN_SIZE:
            raise InvalidDimensionsError(width, height)
        self.width = width
        self.height = height
        self.kinds = np.full(width * height, CellType.EMPTY, dtype=np.int8)
        self.parts = np.zeros(width * height, dtype=np.int8)
        self.segments = np.zeros(width * height, dtype=np.int32)

        frame = self.kinds.reshape(height, width)
        frame[0, :] = CellType.BORDER
        frame[-1, :] = CellType.BORDER
        frame[:, 0] = CellType.BORDER
        frame[:, -1] = CellType.BORDER

        self.set_at(self.center, Cell.snake(SnakePart.HEAD, 1))

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Point2D[int]:
        return Point2D(self.width, self.height) // Point2D(2, 2)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_perimeter(self, x: int, y: int) -> bool:
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    def index_of(self, x: int, y: int) -> int:
        """Map a coordinate to its flat index."""
        if not self.in_bounds(x, y):
            raise IndexError(
                f"({x}, {y}) is outside a {self.width}x{self.height} board."
            )
        return y * self.width + x

    def coords_of(self, index: int) -> Point2D[int]:
        """Map a flat index back to its coordinate."""
        if not 0 <= index < self.size:
            raise IndexError(
                f"Index {index} is outside a board of {self.size} cells."
            )
        y, x = divmod(index, self.width)
        return Point2D(x, y)

    def get_index(self, index: int) -> Cell | None:
        """Return the cell at a flat index, or ``None`` when out of range."""
        if not 0 <= index < self.size:
            return None
        kind = CellType(int(self.kinds[index]))
        if kind == CellType.SNAKE:
            return Cell.snake(
                SnakePart(int(self.parts[index])), int(self.segments[index]),
            )
        if kind == CellType.EMPTY:
            return EMPTY
        if kind == CellType.BORDER:
            return BORDER
        return Cell.food()

    def get(self, x: int, y: int) -> Cell | None:
        """Return the cell at ``(x, y)``, or ``None`` when out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self.get_index(y * self.width + x)

    def get_at(self, pos: Point2D[int]) -> Cell | None:
        return self.get(pos.x, pos.y)

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Overwrite the cell at ``(x, y)``.

        Raises ``IndexError`` outside the board and ``ValueError`` when the
        write would change the border.
        """
        index = self.index_of(x, y)
        if self.is_perimeter(x, y) or cell.kind == CellType.BORDER:
            raise ValueError(f"Border cells are fixed; cannot write ({x}, {y}).")
        self.kinds[index] = cell.kind
        self.parts[index] = cell.part or 0
        self.segments[index] = cell.segment

    def set_at(self, pos: Point2D[int], cell: Cell) -> None:
        self.set(pos.x, pos.y, cell)

    def empty_cells(self) -> list[Point2D[int]]:
        """Return the coordinates of all empty cells in row-major order."""
        return [
            self.coords_of(int(i))
            for i in np.flatnonzero(self.kinds == CellType.EMPTY)
        ]

    def count(self, kind: CellType) -> int:
        return int(np.count_nonzero(self.kinds == kind))

    def iter_cells(self) -> Iterator[CellView]:
        """Walk every cell in row-major order."""
        for index in range(self.size):
            yield CellView(index, self.coords_of(index), self.get_index(index))

    def render_text(self) -> str:
        """Dump the board as one line of glyphs per row."""
        rows = []
        for y in range(self.height):
            rows.append("".join(self.get(x, y).glyph() for x in range(self.width)))
        return "\n".join(rows)

    def to_dict(self) -> dict:
        """Serialize board state to a dictionary of named cells, row by row."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": [
                [self.get(x, y).to_dict() for x in range(self.width)]
                for y in range(self.height)
            ],
        }
