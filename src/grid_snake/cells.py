"""Cell classification for board positions."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class CellType(enum.IntEnum):
    """Integer codes stored in the board array."""

    EMPTY = 0
    BORDER = 1
    SNAKE = 2
    FOOD = 3


class SnakePart(enum.IntEnum):
    """Role of a snake segment. ``0`` in the board array means no segment."""

    HEAD = 1
    BODY = 2
    TAIL = 3


# Glyphs used by the plain-text board dump.
_GLYPHS: dict[CellType, str] = {
    CellType.EMPTY: " ",
    CellType.BORDER: "#",
    CellType.FOOD: "Q",
}
_SNAKE_GLYPHS: dict[SnakePart, str] = {
    SnakePart.HEAD: "@",
    SnakePart.BODY: "*",
    SnakePart.TAIL: ".",
}


@dataclass(frozen=True, eq=False)
class Cell:
    """What occupies one board position.

    Snake cells carry a ``part`` and a 1-based ``segment`` counted from the
    tail (tail = 1). Equality compares ``kind`` only, so any two snake
    cells are equal; use :meth:`same_as` when the role matters.
    """

    kind: CellType
    part: SnakePart | None = None
    segment: int = 0

    def __post_init__(self) -> None:
        if self.kind == CellType.SNAKE:
            if self.part is None or self.segment < 1:
                raise ValueError("Snake cells need a part and a segment >= 1.")
        elif self.part is not None or self.segment:
            raise ValueError(f"{self.kind.name} cells carry no snake payload.")

    @classmethod
    def empty(cls) -> Cell:
        return EMPTY

    @classmethod
    def border(cls) -> Cell:
        return BORDER

    @classmethod
    def food(cls) -> Cell:
        return FOOD

    @classmethod
    def snake(cls, part: SnakePart, segment: int) -> Cell:
        return cls(CellType.SNAKE, part, segment)

    @property
    def is_snake(self) -> bool:
        return self.kind == CellType.SNAKE

    @property
    def is_head(self) -> bool:
        return self.part == SnakePart.HEAD

    def same_as(self, other: Cell) -> bool:
        """Strict comparison including role and segment index."""
        return (
            self.kind == other.kind
            and self.part == other.part
            and self.segment == other.segment
        )

    def glyph(self) -> str:
        if self.part is not None:
            return _SNAKE_GLYPHS[self.part]
        return _GLYPHS[self.kind]

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.name.lower(),
            "part": self.part.name.lower() if self.part is not None else None,
            "segment": self.segment,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        if self.part is not None:
            return f"Cell.snake({self.part.name}, {self.segment})"
        return f"Cell.{self.kind.name.lower()}()"


EMPTY = Cell(CellType.EMPTY)
BORDER = Cell(CellType.BORDER)
FOOD = Cell(CellType.FOOD)
