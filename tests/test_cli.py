"""Tests for the headless CLI and autopilot."""

import json

import numpy as np

from grid_snake.benchmark import BenchmarkResult, benchmark_throughput, run_autopilot
from grid_snake.cli import _build_parser, main
from grid_snake.config import GameConfig
from grid_snake.engine import GameEngine


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_simulate_defaults(self):
        args = _build_parser().parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.config is None
        assert args.width is None
        assert args.max_steps == 500
        assert not args.json

    def test_benchmark_defaults(self):
        args = _build_parser().parse_args(["benchmark"])
        assert args.num_games == 100
        assert args.seed == 42


class TestCLISimulate:
    def test_text_output(self, capsys):
        assert main(["simulate", "--width", "8", "--height", "6", "--seed", "1"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "#" * 8
        assert out[5] == "#" * 8
        assert "steps, score" in out[6]

    def test_json_output_uses_config_file(self, tmp_path, capsys):
        path = tmp_path / "game.json"
        GameConfig(width=9, height=7, seed=5).save(path)
        assert main(["simulate", "--config", str(path), "--json"]) == 0
        state = json.loads(capsys.readouterr().out)
        assert state["board"]["width"] == 9
        assert state["board"]["height"] == 7

    def test_invalid_dimensions(self):
        assert main(["simulate", "--width", "3"]) == 2

    def test_invalid_food_count(self):
        assert main(["simulate", "--initial-food", "-1"]) == 2

    def test_invalid_config_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"initial_food": -3}))
        assert main(["simulate", "--config", str(path)]) == 2

    def test_benchmark_invalid_dimensions(self):
        assert main(["benchmark", "--width", "3", "--num-games", "1"]) == 2


class TestAutopilot:
    def test_runs_until_game_over_or_limit(self):
        engine = GameEngine(width=8, height=8, seed=0)
        steps = run_autopilot(engine, np.random.default_rng(0), max_steps=50)
        assert 0 < steps <= 50
        assert engine.state.is_over or steps == 50

    def test_benchmark(self, capsys):
        result = benchmark_throughput(num_games=3, width=8, height=8, max_steps=20)
        assert isinstance(result, BenchmarkResult)
        assert result.total_games == 3
        assert 0 < result.total_steps <= 60
        assert "3 games" in result.summary()
