"""Headless autopilot runs and throughput benchmarking."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from grid_snake.engine import GameEngine
from grid_snake.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


def run_autopilot(
    engine: GameEngine,
    rng: np.random.Generator,
    *,
    max_steps: int = 1_000,
    turn_probability: float = 0.2,
) -> int:
    """Play *engine* with random turns until it ends or *max_steps* pass.

    Returns the number of ticks played.
    """
    engine.play(engine.direction)
    steps = 0
    while steps < max_steps and not engine.state.is_over:
        if rng.random() < turn_probability:
            engine.set_direction(_DIRECTIONS[int(rng.integers(len(_DIRECTIONS)))])
        engine.advance_tick()
        steps += 1
    return steps


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_games: int
    total_steps: int
    wall_time_seconds: float
    games_per_second: float
    steps_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, {self.total_steps} steps in "
            f"{self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.steps_per_second:.1f} steps/s"
        )


def benchmark_throughput(
    *,
    num_games: int = 100,
    width: int = 20,
    height: int = 20,
    max_steps: int = 200,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw simulation throughput with a random-turn autopilot."""
    rng = np.random.default_rng(seed)
    engine = GameEngine(width=width, height=height, seed=seed)

    total_steps = 0
    start = time.perf_counter()
    for _ in range(num_games):
        engine.restart()
        total_steps += run_autopilot(engine, rng, max_steps=max_steps)

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        total_games=num_games,
        total_steps=total_steps,
        wall_time_seconds=elapsed,
        games_per_second=num_games / max(elapsed, 1e-9),
        steps_per_second=total_steps / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
