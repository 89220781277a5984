"""Tests for timer module."""
import pytest

from clickerengine.timer import CooldownTimer


def test_starts_unfinished():
    timer = CooldownTimer(1.0)
    assert not timer.finished()
    assert timer.progress() == 0.0


def test_tick_to_finished():
    timer = CooldownTimer(1.0)
    timer.tick(0.4)
    assert not timer.finished()
    assert timer.progress() == pytest.approx(0.4)
    timer.tick(0.6)
    assert timer.finished()
    assert timer.progress() == 1.0


def test_tick_saturates_at_duration():
    timer = CooldownTimer(1.0)
    timer.tick(5.0)
    assert timer.elapsed == 1.0
    assert timer.progress() == 1.0
    timer.tick(100.0)
    assert timer.elapsed == 1.0


def test_reset():
    timer = CooldownTimer(1.0)
    timer.tick(1.0)
    timer.reset()
    assert not timer.finished()
    assert timer.elapsed == 0.0
    timer.tick(1.0)
    assert timer.finished()


def test_small_ticks_reach_duration():
    timer = CooldownTimer(1.0)
    for _ in range(10):
        timer.tick(0.1)
    assert timer.finished()


def test_zero_tick_is_noop():
    timer = CooldownTimer(2.0)
    timer.tick(0.5)
    timer.tick(0.0)
    assert timer.progress() == pytest.approx(0.25)


def test_negative_delta_rejected():
    timer = CooldownTimer(1.0)
    with pytest.raises(ValueError):
        timer.tick(-0.1)


def test_non_positive_duration_rejected():
    with pytest.raises(ValueError):
        CooldownTimer(0.0)


@pytest.mark.parametrize("delta", [float("nan"), float("inf")])
def test_non_finite_delta_rejected(delta):
    timer = CooldownTimer(1.0)
    timer.tick(0.5)
    with pytest.raises(ValueError):
        timer.tick(delta)
    assert timer.elapsed == 0.5
    timer.tick(0.5)
    assert timer.finished()


@pytest.mark.parametrize("duration", [float("nan"), float("inf")])
def test_non_finite_duration_rejected(duration):
    with pytest.raises(ValueError):
        CooldownTimer(duration)
