"""Two-component coordinate value type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T", int, float)


@dataclass(frozen=True)
class Point2D(Generic[T]):
    """An immutable ``(x, y)`` pair with component-wise arithmetic.

    Board coordinates use ``x`` for the column and ``y`` for the row,
    with ``y`` increasing downward.
    """

    x: T
    y: T

    @classmethod
    def from_array(cls, xy: tuple[T, T] | list[T]) -> Point2D[T]:
        x, y = xy
        return cls(x, y)

    def as_array(self) -> tuple[T, T]:
        return (self.x, self.y)

    def __add__(self, other: Point2D[T]) -> Point2D[T]:
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D[T]) -> Point2D[T]:
        return Point2D(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Point2D[T]) -> Point2D[T]:
        return Point2D(self.x * other.x, self.y * other.y)

    def __truediv__(self, other: Point2D[T]) -> Point2D[float]:
        """Divide component-wise. A zero component in *other* raises."""
        return Point2D(self.x / other.x, self.y / other.y)

    def __floordiv__(self, other: Point2D[T]) -> Point2D[T]:
        return Point2D(self.x // other.x, self.y // other.y)

    def to_list(self) -> list[T]:
        return [self.x, self.y]
