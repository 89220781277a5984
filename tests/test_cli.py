"""Tests for the command-line interface."""
import json

import pytest

from clickerengine.cli import build_parser, build_strategy, load_game, main
from clickerengine.definition import GameConfig
from clickerengine.strategy import ActiveClicker, GreedyProgression


def test_parser_defaults():
    args = build_parser().parse_args(["simulate"])
    assert args.game_module is None
    assert args.strategy == "greedy"
    assert args.fingers_per_hand == 5
    assert args.prestige == "first_opportunity"
    assert args.tick_resolution == 0.1
    assert args.terminal_time == 3600


def test_load_default_game():
    assert load_game(None) == GameConfig()


def test_load_missing_define_game():
    with pytest.raises(SystemExit):
        load_game("clickerengine.timer")


def test_build_strategy():
    assert isinstance(build_strategy("active", 5, "never"), ActiveClicker)
    greedy = build_strategy("greedy", 3, "never")
    assert isinstance(greedy, GreedyProgression)
    assert greedy.fingers_per_hand == 3


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 0
    assert "simulate" in capsys.readouterr().out


def test_simulate(capsys, tmp_path):
    json_path = tmp_path / "report.json"
    main([
        "simulate",
        "--strategy", "active",
        "--terminal-time", "5",
        "--export-json", str(json_path),
    ])
    out = capsys.readouterr().out
    assert "ClickerEngine Simulation Report" in out
    assert "JSON exported" in out
    data = json.loads(json_path.read_text())
    assert data["strategy"] == "ActiveClicker"
