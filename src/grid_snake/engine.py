"""Step-based game engine composing board, snake, and food logic."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import numpy as np

from grid_snake.board import Board, CellView
from grid_snake.cells import EMPTY, Cell, CellType, SnakePart
from grid_snake.config import GameConfig
from grid_snake.food import FoodSpawner
from grid_snake.snake import Direction, Snake, arbitrate_direction
from grid_snake.state import GameOverReason, GameState, GameStatus

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-snake, step-based game engine.

    The engine owns the board, snake, and food spawner. A new game starts
    paused with a head-only snake in the middle of the board; :meth:`play`
    starts it and each call to :meth:`advance_tick` moves the snake one
    cell. Collisions end the game through :attr:`state` and never raise.

    The engine does no locking; hosts must serialize calls.
    """

    def __init__(
        self,
        width: int = 20,
        height: int = 20,
        initial_food: int = 1,
        seed: int | None = None,
    ) -> None:
        if initial_food < 0:
            raise ValueError("initial_food must not be negative.")
        self.width = width
        self.height = height
        self.initial_food = initial_food
        self.rng = np.random.default_rng(seed)
        self._new_game()

    @classmethod
    def from_config(cls, config: GameConfig) -> GameEngine:
        return cls(
            width=config.width,
            height=config.height,
            initial_food=config.initial_food,
            seed=config.seed,
        )

    def _new_game(self) -> None:
        self.board = Board(self.width, self.height)
        self.snake = Snake(self.board.center, Direction.RIGHT)
        self.food = FoodSpawner(self.board, rng=self.rng)
        for _ in range(self.initial_food):
            self.food.spawn()

        self.state = GameState.paused()
        self.score = 0
        self.step_count = 0
        self._last_move = self.snake.direction

    def restart(self) -> None:
        """Discard the current game and start a fresh, paused one."""
        self._new_game()
        logger.debug("Game restarted on a %dx%d board.", self.width, self.height)

    def board_dimensions(self) -> tuple[int, int]:
        return self.board.width, self.board.height

    @property
    def direction(self) -> Direction:
        return self.snake.direction

    def play(self, direction: Direction) -> None:
        """Start or resume a paused game heading in *direction*."""
        if self.state.status is not GameStatus.PAUSED:
            logger.debug("play() ignored in state %s.", self.state.status.value)
            return
        self._steer(direction)
        self.state = GameState.playing()

    def pause(self) -> None:
        if self.state.is_playing:
            self.state = GameState.paused()

    def set_direction(self, requested: Direction) -> Direction:
        """Request a new heading; returns the heading actually in effect.

        Reversals are judged against the direction of the last move made,
        not the last heading requested, so several turns between two ticks
        can never point the head back into its neck.
        """
        if self.state.is_over:
            return self.snake.direction
        return self._steer(requested)

    def _steer(self, requested: Direction) -> Direction:
        effective = arbitrate_direction(
            self._last_move, requested, self.snake.length,
        )
        if effective is requested:
            self.snake.direction = requested
        else:
            logger.debug(
                "Reversal %s -> %s rejected.", self._last_move.name, requested.name,
            )
        return self.snake.direction

    def advance_tick(self) -> GameState:
        """Advance the game by one tick and return the resulting state."""
        if not self.state.is_playing:
            return self.state

        self.step_count += 1
        candidate = self.snake.propose_move()
        target = self.board.get_at(candidate)

        if target is None or target.kind == CellType.BORDER:
            return self._end(GameOverReason.BORDER_HIT)

        # The tail cell is vacated this same tick, so moving onto it is safe.
        if self.snake.occupies(candidate) and not (
            candidate == self.snake.tail and self.snake.length > 1
        ):
            return self._end(GameOverReason.SELF_BITE)

        grow = target.kind == CellType.FOOD
        vacated = self.snake.commit_move(candidate, grow=grow)
        if vacated is not None:
            self.board.set_at(vacated, EMPTY)
        self._paint_snake()
        self._last_move = self.snake.direction

        if grow:
            self.score += 1
            if self.food.spawn() is None:
                return self._end(GameOverReason.PLAYGROUND_FILLED)

        return self.state

    def _paint_snake(self) -> None:
        """Write every segment with its role and tail-relative index."""
        length = self.snake.length
        for i, pos in enumerate(self.snake.body):
            if i == 0:
                part = SnakePart.HEAD
            elif i == length - 1:
                part = SnakePart.TAIL
            else:
                part = SnakePart.BODY
            self.board.set_at(pos, Cell.snake(part, length - i))

    def _end(self, reason: GameOverReason) -> GameState:
        self.state = GameState.game_over(reason)
        logger.info(
            "Game over (%s) at step %d with score %d.",
            reason.value, self.step_count, self.score,
        )
        return self.state

    def iter_cells(self) -> Iterator[CellView]:
        """Yield ``(index, pos, cell)`` for every cell in row-major order."""
        return self.board.iter_cells()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "step": self.step_count,
            "score": self.score,
            "state": self.state.to_dict(),
            "board": self.board.to_dict(),
            "snake": self.snake.to_dict(),
        }
