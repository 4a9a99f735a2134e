"""Tests for the Point2D value type."""

import pytest

from grid_snake.point import Point2D


class TestPointArithmetic:
    def test_add_and_sub(self):
        assert Point2D(3, 4) + Point2D(1, -1) == Point2D(4, 3)
        assert Point2D(3, 4) - Point2D(1, -1) == Point2D(2, 5)

    def test_mul_and_div(self):
        assert Point2D(3, 4) * Point2D(2, 3) == Point2D(6, 12)
        assert Point2D(800, 600) / Point2D(20, 15) == Point2D(40.0, 40.0)
        assert Point2D(7, 9) // Point2D(2, 2) == Point2D(3, 4)

    def test_division_by_zero_raises(self):
        with pytest.raises(ZeroDivisionError):
            Point2D(1, 1) / Point2D(0, 1)


class TestPointConversion:
    def test_array_roundtrip(self):
        p = Point2D.from_array([2, 7])
        assert p == Point2D(2, 7)
        assert p.as_array() == (2, 7)
        assert p.to_list() == [2, 7]

    def test_hashable(self):
        assert len({Point2D(1, 2), Point2D(1, 2), Point2D(2, 1)}) == 2
