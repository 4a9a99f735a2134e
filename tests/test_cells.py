"""Tests for the cell model."""

import pytest

from grid_snake.cells import Cell, CellType, SnakePart


class TestCellEquality:
    def test_snake_cells_equal_regardless_of_role(self):
        head = Cell.snake(SnakePart.HEAD, 3)
        tail = Cell.snake(SnakePart.TAIL, 1)
        assert head == tail
        assert hash(head) == hash(tail)

    def test_different_kinds_differ(self):
        assert Cell.empty() != Cell.food()
        assert Cell.border() != Cell.snake(SnakePart.HEAD, 1)

    def test_same_as_is_strict(self):
        head = Cell.snake(SnakePart.HEAD, 2)
        assert head.same_as(Cell.snake(SnakePart.HEAD, 2))
        assert not head.same_as(Cell.snake(SnakePart.HEAD, 1))
        assert not head.same_as(Cell.snake(SnakePart.BODY, 2))

    def test_not_equal_to_other_types(self):
        assert Cell.empty() != CellType.EMPTY


class TestCellValidation:
    def test_snake_needs_payload(self):
        with pytest.raises(ValueError, match="part and a segment"):
            Cell(CellType.SNAKE)
        with pytest.raises(ValueError, match="part and a segment"):
            Cell(CellType.SNAKE, SnakePart.BODY, 0)

    def test_other_kinds_reject_payload(self):
        with pytest.raises(ValueError, match="FOOD cells carry no snake payload"):
            Cell(CellType.FOOD, SnakePart.HEAD, 1)


class TestCellPresentation:
    @pytest.mark.parametrize(("cell", "glyph"), [
        (Cell.empty(), " "),
        (Cell.border(), "#"),
        (Cell.food(), "Q"),
        (Cell.snake(SnakePart.HEAD, 3), "@"),
        (Cell.snake(SnakePart.BODY, 2), "*"),
        (Cell.snake(SnakePart.TAIL, 1), "."),
    ])
    def test_glyphs(self, cell, glyph):
        assert cell.glyph() == glyph

    def test_to_dict(self):
        assert Cell.snake(SnakePart.TAIL, 1).to_dict() == {
            "kind": "snake", "part": "tail", "segment": 1,
        }
        assert Cell.food().to_dict() == {
            "kind": "food", "part": None, "segment": 0,
        }

    def test_repr(self):
        assert repr(Cell.snake(SnakePart.HEAD, 2)) == "Cell.snake(HEAD, 2)"
        assert repr(Cell.border()) == "Cell.border()"
