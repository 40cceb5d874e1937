"""Tests for PlaybackClock."""

from __future__ import annotations

from datetime import timedelta

import pytest

from conftest import at
from gpxreplay.core.usecases.playback_clock import PlaybackClock


@pytest.fixture
def clock() -> PlaybackClock:
    # 100 ms * 1.0 * 10 -> 1 s of track time per tick
    c = PlaybackClock(interval_ms=100, time_scale=10.0)
    c.set_range(at(0), at(5))
    return c


# ---------------------------------------------------------------------------
# Construction and range
# ---------------------------------------------------------------------------


def test_invalid_interval_raises():
    with pytest.raises(ValueError):
        PlaybackClock(interval_ms=0, time_scale=10.0)


def test_without_range_clock_is_inert():
    c = PlaybackClock(interval_ms=100, time_scale=10.0)
    assert c.start() is False
    assert c.tick() is False
    c.seek(at(3))
    assert c.state.current_time is None
    assert c.state.is_playing is False


def test_set_range_initialises_current_time(clock):
    assert clock.state.current_time == at(0)
    assert clock.state.earliest_time == at(0)
    assert clock.state.latest_time == at(5)


def test_set_range_clamps_current_time():
    c = PlaybackClock(interval_ms=100, time_scale=10.0)
    c.set_range(at(0), at(100))
    c.seek(at(80))
    c.set_range(at(0), at(50))
    assert c.state.current_time == at(50)


def test_set_range_keeps_current_time_inside_new_range():
    c = PlaybackClock(interval_ms=100, time_scale=10.0)
    c.set_range(at(10), at(20))
    c.seek(at(15))
    c.set_range(at(0), at(30))
    assert c.state.current_time == at(15)


def test_inverted_range_raises():
    c = PlaybackClock(interval_ms=100, time_scale=10.0)
    with pytest.raises(ValueError):
        c.set_range(at(5), at(0))


def test_clearing_range_keeps_speed(clock):
    clock.set_speed(4)
    clock.set_range(None, None)
    assert clock.state.has_range is False
    assert clock.state.current_time is None
    assert clock.state.speed_multiplier == 4.0


# ---------------------------------------------------------------------------
# Ticking
# ---------------------------------------------------------------------------


def test_step_follows_speed(clock):
    assert clock.step == timedelta(seconds=1)
    clock.set_speed(0.25)
    assert clock.step == timedelta(milliseconds=250)


def test_tick_when_paused_does_nothing(clock):
    assert clock.tick() is False
    assert clock.state.current_time == at(0)


def test_tick_advances_time(clock):
    clock.start()
    assert clock.tick() is True
    assert clock.state.current_time == at(1)
    assert clock.state.is_playing is True


def test_clock_clamps_and_stops_at_end(clock):
    clock.set_speed(2)
    clock.start()
    clock.tick()
    clock.tick()
    assert clock.state.current_time == at(4)
    assert clock.state.is_playing is True

    clock.tick()
    assert clock.state.current_time == at(5)
    assert clock.state.is_playing is False

    assert clock.tick() is False
    assert clock.state.current_time == at(5)


def test_landing_exactly_on_end_stops(clock):
    clock.start()
    for _ in range(5):
        clock.tick()
    assert clock.state.current_time == at(5)
    assert clock.state.is_playing is False


def test_current_time_never_leaves_range(clock):
    clock.set_speed(8)
    clock.start()
    for _ in range(20):
        clock.tick()
        assert at(0) <= clock.state.current_time <= at(5)


# ---------------------------------------------------------------------------
# Transport controls
# ---------------------------------------------------------------------------


def test_start_at_end_replays_from_start(clock):
    clock.seek(at(5))
    assert clock.start() is True
    assert clock.state.current_time == at(0)
    assert clock.state.is_playing is True


def test_restart_returns_to_earliest_and_pauses(clock):
    clock.start()
    clock.tick()
    clock.tick()
    clock.restart()
    assert clock.state.current_time == at(0)
    assert clock.state.is_playing is False


def test_restart_when_paused_mid_track(clock):
    clock.seek(at(3))
    clock.restart()
    assert clock.state.current_time == at(0)
    assert clock.state.is_playing is False


def test_seek_clamps_and_pauses(clock):
    clock.start()
    clock.seek(at(99))
    assert clock.state.current_time == at(5)
    assert clock.state.is_playing is False

    clock.seek(at(-10))
    assert clock.state.current_time == at(0)


def test_pause_keeps_time(clock):
    clock.start()
    clock.tick()
    clock.pause()
    assert clock.state.current_time == at(1)
    assert clock.state.is_playing is False


@pytest.mark.parametrize("bad", [0, -1, float("nan"), float("inf")])
def test_invalid_speed_raises(clock, bad):
    with pytest.raises(ValueError):
        clock.set_speed(bad)
    assert clock.state.speed_multiplier == 1.0
