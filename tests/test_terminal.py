"""Tests for terminal module."""
from clickerengine.controller import ProgressionController
from clickerengine.definition import GameConfig
from clickerengine.terminal import SimulationContext, Terminal


def _snapshot(stored: int = 0, elapsed: float = 0.0, buildings: int = 1, **overrides):
    overrides.setdefault("skip_welcome", True)
    ctrl = ProgressionController(GameConfig(**overrides))
    ctrl.economy.stored_clicks = stored
    ctrl.economy.buildings = buildings
    if elapsed:
        ctrl.tick(elapsed)
    return ctrl.snapshot()


def test_time():
    cond = Terminal.time(10)
    assert not cond.is_met(_snapshot(elapsed=5))
    assert cond.is_met(_snapshot(elapsed=10))
    assert cond.describe() == "time(10)"


def test_finished():
    cond = Terminal.finished()
    assert not cond.is_met(_snapshot())
    assert cond.is_met(_snapshot(stored=5, elapsed=0.1, win_threshold=5))
    assert cond.describe() == "finished()"


def test_clicks():
    cond = Terminal.clicks(">=", 100)
    assert not cond.is_met(_snapshot(stored=99))
    assert cond.is_met(_snapshot(stored=100))
    assert cond.describe() == 'clicks(">=", 100)'


def test_buildings():
    cond = Terminal.buildings(3)
    assert not cond.is_met(_snapshot(buildings=2))
    assert cond.is_met(_snapshot(buildings=3))
    assert cond.describe() == "buildings(3)"


def test_stall():
    cond = Terminal.stall(60)
    snap = _snapshot(elapsed=100)
    assert not cond.is_met(snap)
    assert cond.is_met(snap, SimulationContext(last_purchase_time=30))
    assert not cond.is_met(snap, SimulationContext(last_purchase_time=50))


def test_any_all():
    snap = _snapshot(stored=50, elapsed=20)
    either = Terminal.any(Terminal.time(10), Terminal.clicks(">=", 100))
    both = Terminal.all(Terminal.time(10), Terminal.clicks(">=", 100))
    assert either.is_met(snap)
    assert not both.is_met(snap)
    assert either.describe() == 'time(10) OR clicks(">=", 100)'
    assert both.describe() == 'time(10) AND clicks(">=", 100)'
