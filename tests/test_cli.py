"""Tests for the command-line launcher."""

import json

from frog_snake.cli import _build_parser, main
from frog_snake.config import GameConfig


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_simulate_defaults(self):
        args = _build_parser().parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.config is None
        assert args.ticks == 500
        assert args.show is False

    def test_simulate_flags(self):
        args = _build_parser().parse_args([
            "simulate", "--seed", "5", "--ticks", "20", "--grid-size", "10", "--show",
        ])
        assert args.seed == 5
        assert args.ticks == 20
        assert args.grid_size == 10
        assert args.show is True


class TestCLIConfig:
    def test_prints_defaults(self, capsys):
        assert main(["config"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == GameConfig().to_dict()

    def test_writes_file(self, tmp_path):
        path = tmp_path / "cfg.json"
        assert main(["config", "--output", str(path)]) == 0
        assert GameConfig.load(path) == GameConfig()


class TestCLISimulate:
    def test_simulate_runs(self, capsys):
        assert main(["simulate", "--seed", "1", "--ticks", "50"]) == 0
        assert "Simulation:" in capsys.readouterr().out

    def test_simulate_from_config_file(self, tmp_path, capsys):
        path = tmp_path / "cfg.json"
        GameConfig(grid_size=10).save(path)
        assert main(["simulate", "--config", str(path), "--ticks", "5", "--seed", "2"]) == 0

    def test_invalid_grid_size(self):
        assert main(["simulate", "--grid-size", "2"]) == 2
