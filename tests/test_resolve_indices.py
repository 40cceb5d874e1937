"""Tests for resolve_index / resolve_indices."""

from __future__ import annotations

import pytest

from conftest import at, make_track
from gpxreplay.core.models.playback_models import NOT_STARTED
from gpxreplay.core.usecases.resolve_indices import resolve_index, resolve_indices
from gpxreplay.domain.gps_types import Track


@pytest.fixture
def tracks():
    return [make_track(1, [0, 5, 10]), make_track(2, [2, 8])]


# ---------------------------------------------------------------------------
# Reference scenarios
# ---------------------------------------------------------------------------


def test_two_tracks_mid_playback(tracks):
    assert resolve_indices(tracks, at(6)) == {1: 1, 2: 0}


def test_second_track_not_started(tracks):
    assert resolve_indices(tracks, at(1)) == {1: 0, 2: NOT_STARTED}


# ---------------------------------------------------------------------------
# Boundaries
# ---------------------------------------------------------------------------


def test_before_first_timestamp_is_not_started():
    track = make_track(1, [10, 20])
    assert resolve_index(track, at(9.999)) == NOT_STARTED


def test_exactly_first_timestamp_is_zero():
    track = make_track(1, [10, 20])
    assert resolve_index(track, at(10)) == 0


def test_after_last_timestamp_is_last_index():
    track = make_track(1, [0, 5, 10])
    assert resolve_index(track, at(10)) == 2
    assert resolve_index(track, at(3600)) == 2


def test_equal_timestamps_resolve_to_last_of_group():
    track = make_track(1, [0, 5, 5, 5, 9])
    assert resolve_index(track, at(5)) == 3


def test_no_current_time_is_not_started(tracks):
    assert resolve_indices(tracks, None) == {1: NOT_STARTED, 2: NOT_STARTED}


def test_empty_track_is_not_started():
    assert resolve_index(Track(id=7, name="empty"), at(0)) == NOT_STARTED


def test_no_tracks_gives_empty_map():
    assert resolve_indices([], at(0)) == {}


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


def test_resolution_is_idempotent(tracks):
    first = resolve_indices(tracks, at(7))
    second = resolve_indices(tracks, at(7))
    assert first == second


def test_index_is_monotonic_in_time():
    track = make_track(1, [0, 1, 1, 4, 9, 9, 15])
    previous = NOT_STARTED
    for tenth in range(-10, 200):
        index = resolve_index(track, at(tenth / 10))
        assert index >= previous
        previous = index


def test_resolved_point_is_not_after_current_time():
    track = make_track(1, [0, 3, 7, 12])
    for second in range(0, 15):
        index = resolve_index(track, at(second))
        assert track.points[index].timestamp <= at(second)
        if index + 1 < len(track.points):
            assert track.points[index + 1].timestamp > at(second)
