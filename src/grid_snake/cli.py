"""Headless command-line runner for Grid Snake."""

from __future__ import annotations

import argparse
import json
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Run Grid Snake games without a window.",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play one game with a random-turn autopilot.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    sim_p.add_argument("--width", type=int, default=None)
    sim_p.add_argument("--height", type=int, default=None)
    sim_p.add_argument("--initial-food", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--max-steps", type=int, default=500)
    sim_p.add_argument(
        "--json", action="store_true",
        help="Print the final state as JSON instead of a text board.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure simulation throughput.",
    )
    bench_p.add_argument("--num-games", type=int, default=100)
    bench_p.add_argument("--width", type=int, default=20)
    bench_p.add_argument("--height", type=int, default=20)
    bench_p.add_argument("--max-steps", type=int, default=200)
    bench_p.add_argument("--seed", type=int, default=42)

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    import numpy as np

    from grid_snake.benchmark import run_autopilot
    from grid_snake.config import GameConfig
    from grid_snake.engine import GameEngine

    overrides: dict = {}
    flag_map = {
        "width": "width",
        "height": "height",
        "initial_food": "initial_food",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    try:
        config = GameConfig.load(args.config) if args.config else GameConfig()
        if overrides:
            d = config.to_dict()
            d.update(overrides)
            config = GameConfig(**d)
        engine = GameEngine.from_config(config)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    steps = run_autopilot(
        engine, np.random.default_rng(config.seed), max_steps=args.max_steps,
    )
    if args.json:
        print(json.dumps(engine.get_state()))  # noqa: T201
    else:
        print(engine.board.render_text())  # noqa: T201
        status = engine.state.reason or engine.state.status
        print(  # noqa: T201
            f"{status.value} after {steps} steps, score {engine.score}",
        )
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from grid_snake.benchmark import benchmark_throughput

    try:
        result = benchmark_throughput(
            num_games=args.num_games,
            width=args.width,
            height=args.height,
            max_steps=args.max_steps,
            seed=args.seed,
        )
    except ValueError as exc:
        logger.error("%s", exc)
        return 2
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
