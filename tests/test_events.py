"""Tests for events module."""
import pytest

from clickerengine._types import U64_MAX
from clickerengine.events import ClicksEmitted, EventLog


def test_drain_fifo():
    log = EventLog()
    log.emit(3)
    log.emit(1)
    log.emit(2)
    assert log.drain() == [ClicksEmitted(3), ClicksEmitted(1), ClicksEmitted(2)]


def test_drain_clears():
    log = EventLog()
    log.emit(5)
    assert len(log) == 1
    log.drain()
    assert len(log) == 0
    assert log.drain() == []


def test_zero_amount_kept():
    log = EventLog()
    log.emit(0)
    assert log.drain() == [ClicksEmitted(0)]


def test_out_of_range_amount():
    log = EventLog()
    with pytest.raises(ValueError):
        log.emit(-1)
    with pytest.raises(ValueError):
        log.emit(U64_MAX + 1)
    assert len(log) == 0
