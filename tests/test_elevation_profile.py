"""Tests for elevation profile series."""

from __future__ import annotations

import pytest

from conftest import at
from gpxreplay.core.usecases.elevation_profile import build_profile, build_profiles, profile_extent
from gpxreplay.domain.gps_types import Track, TrackPoint


def _track(track_id: int, coords, color: str = "#112233") -> Track:
    points = tuple(
        TrackPoint(latitude=lat, longitude=lon, elevation=ele, timestamp=at(i))
        for i, (lat, lon, ele) in enumerate(coords)
    )
    return Track(id=track_id, name=f"t{track_id}", points=points, color=color)


def test_profile_distances_are_cumulative():
    track = _track(1, [(0.0, 0.0, 10.0), (1.0, 0.0, 20.0), (2.0, 0.0, 15.0)])
    profile = build_profile(track)

    assert profile.track_id == 1
    assert profile.color == "#112233"
    assert profile.distances_km[0] == 0.0
    assert profile.distances_km[1] == pytest.approx(111.195, abs=1e-3)
    assert profile.distances_km[2] == pytest.approx(2 * 111.195, abs=1e-3)
    assert profile.elevations_m == (10.0, 20.0, 15.0)


def test_distances_never_decrease():
    track = _track(1, [(55.0, -1.0, 0.0), (55.1, -1.1, 0.0), (55.0, -1.0, 0.0)])
    distances = build_profile(track).distances_km
    assert all(b >= a for a, b in zip(distances, distances[1:]))


def test_point_at():
    profile = build_profile(_track(1, [(0.0, 0.0, 10.0), (1.0, 0.0, 20.0)]))
    assert profile.point_at(1) == (profile.distances_km[1], 20.0)
    assert profile.point_at(-1) is None
    assert profile.point_at(2) is None


def test_empty_tracks_are_skipped():
    profiles = build_profiles([Track(id=1, name="empty"), _track(2, [(0.0, 0.0, 5.0)])])
    assert [p.track_id for p in profiles] == [2]


def test_profile_extent():
    profiles = build_profiles([
        _track(1, [(0.0, 0.0, 10.0), (1.0, 0.0, 40.0)]),
        _track(2, [(0.0, 0.0, -5.0), (0.5, 0.0, 20.0)]),
    ])
    max_distance, min_elevation, max_elevation = profile_extent(profiles)
    assert max_distance == pytest.approx(111.195, abs=1e-3)
    assert min_elevation == -5.0
    assert max_elevation == 40.0


def test_profile_extent_without_profiles():
    assert profile_extent([]) is None
