"""Tests for simulation module."""
import json

import pytest

from clickerengine.definition import GameConfig
from clickerengine.export import export_csv, export_json
from clickerengine.formatting import format_text_report
from clickerengine.simulation import Simulation
from clickerengine.strategy import ActiveClicker, GreedyProgression
from clickerengine.terminal import Terminal


def _run_active(seconds: float = 10):
    sim = Simulation(
        config=GameConfig(),
        strategy=ActiveClicker(),
        terminal=Terminal.time(seconds),
        tick_resolution=0.1,
    )
    return sim.run()


def test_active_clicker_run():
    report = _run_active(10)
    assert report.outcome == "Terminal condition met"
    assert report.total_time >= 10
    assert 5 <= report.clicks_emitted <= 11
    assert report.purchases == []
    assert not report.finished


def test_samples_collected():
    report = _run_active(10)
    assert len(report.samples) >= 9
    times = [t for t, _ in report.series("stored_clicks")]
    assert times == sorted(times)


def test_greedy_makes_purchases():
    sim = Simulation(
        config=GameConfig(skip_welcome=True),
        strategy=GreedyProgression(),
        terminal=Terminal.time(120),
    )
    report = sim.run()
    counts = report.purchase_counts()
    assert counts.get("BuyFinger", 0) > 0
    assert report.purchases_per_minute > 0
    assert report.max_purchase_gap >= report.mean_purchase_gap


def test_stall_terminal():
    sim = Simulation(
        config=GameConfig(skip_welcome=True),
        strategy=ActiveClicker(),
        terminal=Terminal.stall(30),
    )
    report = sim.run()
    assert report.outcome == "Terminal condition met"
    assert report.total_time == pytest.approx(30, abs=0.2)


def test_game_finished_outcome():
    sim = Simulation(
        config=GameConfig(skip_welcome=True, win_threshold=3),
        strategy=ActiveClicker(),
        terminal=Terminal.time(3600),
    )
    report = sim.run()
    assert report.outcome == "Game finished"
    assert report.finished
    assert report.total_time < 10


def test_max_ticks():
    sim = Simulation(
        config=GameConfig(),
        strategy=ActiveClicker(),
        terminal=Terminal.time(3600),
        max_ticks=50,
    )
    report = sim.run()
    assert report.outcome == "Max ticks reached"
    assert report.total_time < 10


def test_bad_tick_resolution():
    with pytest.raises(ValueError):
        Simulation(GameConfig(), ActiveClicker(), Terminal.time(1), tick_resolution=0)


def test_text_report():
    text = format_text_report(_run_active(5))
    assert "ClickerEngine Simulation Report" in text
    assert "Strategy: ActiveClicker" in text
    assert "ECONOMY:" in text
    assert "PURCHASES:" in text


class TestExport:
    def test_csv(self, tmp_path):
        base = tmp_path / "run"
        export_csv(_run_active(5), base)
        economy = (tmp_path / "run_economy.csv").read_text().splitlines()
        assert economy[0].startswith("time,stored_clicks,multiplier")
        assert len(economy) > 1
        purchases = (tmp_path / "run_purchases.csv").read_text().splitlines()
        assert purchases[0] == "time,action,cost,stored_end_of_tick"
        assert (tmp_path / "run_prestiges.csv").exists()

    def test_json(self, tmp_path):
        path = tmp_path / "run.json"
        export_json(_run_active(5), path)
        data = json.loads(path.read_text())
        assert data["strategy"] == "ActiveClicker"
        assert data["terminal"] == "time(5)"
        assert data["purchase_count"] == 0
        assert data["clicks_emitted"] > 0
        assert data["finish_time"] is None


def test_plot(tmp_path):
    matplotlib = pytest.importorskip("matplotlib")
    matplotlib.use("Agg")
    from clickerengine.visualization import plot_simulation

    sim = Simulation(
        config=GameConfig(skip_welcome=True),
        strategy=GreedyProgression(),
        terminal=Terminal.time(60),
    )
    out = tmp_path / "run.png"
    plot_simulation(sim.run(), str(out))
    assert out.exists()
