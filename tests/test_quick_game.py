"""Integration test with the quick example game."""
import sys
import os

# Ensure examples can be imported
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from examples.quick_game import define_game
from clickerengine.formatting import format_text_report
from clickerengine.simulation import Simulation
from clickerengine.strategy import GreedyProgression
from clickerengine.terminal import Terminal


def test_quick_game_validates():
    config = define_game()
    assert config.validate() == []


def test_quick_game_simulation():
    sim = Simulation(
        config=define_game(),
        strategy=GreedyProgression(),
        terminal=Terminal.any(Terminal.finished(), Terminal.time(3600)),
        tick_resolution=0.1,
    )
    report = sim.run()

    assert report.finished
    assert report.finish_time < 3600
    assert len(report.prestiges) == 2
    assert [p.buildings for p in report.prestiges] == [2, 3]
    assert [p.cost for p in report.prestiges] == [300, 3_000]

    text = format_text_report(report)
    assert "Win threshold reached" in text
    assert "PRESTIGE:" in text
