import time

import pytest

import core.clock as clock_mod
from core.clock import ManualClock, SystemClock
from core.errors import ValidationError


def test_system_clock_returns_epoch_millis(monkeypatch):
    monkeypatch.setattr(clock_mod.time, "time_ns", lambda: 1_700_000_000_123_456_789)

    assert SystemClock().millis() == 1_700_000_000_123


def test_system_clock_tracks_wall_clock():
    before = time.time_ns() // 1_000_000
    now = SystemClock().millis()
    after = time.time_ns() // 1_000_000

    assert before <= now <= after


def test_manual_clock_starts_where_told():
    assert ManualClock().millis() == 0
    assert ManualClock(42).millis() == 42


def test_manual_clock_advance():
    c = ManualClock(100)

    assert c.advance(50) == 150
    assert c.advance(0) == 150
    assert c.millis() == 150


def test_manual_clock_advance_rejects_negative():
    c = ManualClock(100)

    with pytest.raises(ValidationError):
        c.advance(-1)
    assert c.millis() == 100


def test_manual_clock_set_moves_both_ways():
    c = ManualClock(100)

    c.set(500)
    assert c.millis() == 500

    c.set(10)
    assert c.millis() == 10
