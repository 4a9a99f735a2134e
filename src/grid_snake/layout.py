"""Viewport geometry for renderers drawing the board."""

from __future__ import annotations

from dataclasses import dataclass

from grid_snake.point import Point2D


@dataclass(frozen=True)
class RenderLayout:
    """Maps board cells onto a pixel viewport.

    Each cell gets an equal share of the viewport along each axis, so
    cells are square only when the aspect ratios agree.
    """

    viewport_size: Point2D[int]
    grid_size: Point2D[int]

    def __post_init__(self) -> None:
        if min(self.viewport_size.as_array()) <= 0:
            raise ValueError("Viewport dimensions must be positive.")
        if min(self.grid_size.as_array()) <= 0:
            raise ValueError("Grid dimensions must be positive.")

    @classmethod
    def for_board(
        cls, viewport: tuple[int, int], board_dimensions: tuple[int, int],
    ) -> RenderLayout:
        return cls(Point2D.from_array(viewport), Point2D.from_array(board_dimensions))

    @property
    def cell_size(self) -> Point2D[float]:
        return self.viewport_size / self.grid_size

    def cell_rect(self, pos: Point2D[int]) -> tuple[float, float, float, float]:
        """Return ``(left, top, width, height)`` of the cell at *pos*."""
        size = self.cell_size
        return (pos.x * size.x, pos.y * size.y, size.x, size.y)
