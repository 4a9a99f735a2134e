"""Grid Snake core game engine."""

from grid_snake.board import Board, CellView, InvalidDimensionsError
from grid_snake.cells import Cell, CellType, SnakePart
from grid_snake.config import GameConfig
from grid_snake.engine import GameEngine
from grid_snake.layout import RenderLayout
from grid_snake.point import Point2D
from grid_snake.snake import Direction, Snake, arbitrate_direction
from grid_snake.state import GameOverReason, GameState, GameStatus

__all__ = [
    "Board",
    "Cell",
    "CellType",
    "CellView",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameOverReason",
    "GameState",
    "GameStatus",
    "InvalidDimensionsError",
    "Point2D",
    "RenderLayout",
    "Snake",
    "SnakePart",
    "arbitrate_direction",
]
