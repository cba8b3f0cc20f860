"""Tests for the command-line driver."""

import pytest

from snake_sim.cli import _build_parser, _parse_moves, main


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_run_defaults(self):
        args = _build_parser().parse_args(["run"])
        assert args.command == "run"
        assert args.ticks == 50
        assert args.moves is None
        assert not args.render

    def test_benchmark_defaults(self):
        args = _build_parser().parse_args(["benchmark"])
        assert args.ticks == 10_000
        assert args.seed == 42


class TestParseMoves:
    def test_blank_entries_mean_no_input(self):
        assert _parse_moves("up,,Left,none") == [["up"], [], ["left"], []]

    def test_unknown_move(self):
        with pytest.raises(ValueError, match="Unknown move"):
            _parse_moves("up,jump")


class TestCLIRun:
    def test_random_run(self, capsys):
        assert main(["run", "--ticks", "20", "--seed", "1"]) == 0
        assert "Ran 20 ticks" in capsys.readouterr().out

    def test_scripted_run_with_render(self, capsys):
        result = main([
            "run", "--ticks", "3", "--seed", "0",
            "--moves", "right,up", "--render",
        ])
        assert result == 0
        out = capsys.readouterr().out
        assert "tick 3 length" in out
        assert "@" in out

    def test_config_file(self, tmp_path, capsys):
        from snake_sim.config import SimulationConfig

        path = tmp_path / "sim.json"
        SimulationConfig(width=6, height=6, spawn=(2, 2)).save(path)
        assert main(["run", "--config", str(path), "--ticks", "2"]) == 0
        assert "Ran 2 ticks" in capsys.readouterr().out


class TestCLIBenchmark:
    def test_benchmark(self, capsys):
        assert main(["benchmark", "--ticks", "200"]) == 0
        assert "ticks/s" in capsys.readouterr().out
