"""Tests for BearingReadoutUseCase."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from conftest import make_track
from gpxreplay.core.models.playback_models import NOT_STARTED
from gpxreplay.core.usecases.bearing_readout import BearingReadoutUseCase
from gpxreplay.domain.geo import haversine_km, true_bearing
from gpxreplay.domain.gps_types import CustomMarker

MARKER = CustomMarker(id=1, name="BullsEye", latitude=55.873529, longitude=-1.782049)


@pytest.fixture
def tracks():
    return [make_track(1, [0, 5, 10], name="alpha"), make_track(2, [2, 8], name="bravo")]


def test_reading_uses_current_position(tracks):
    readouts = BearingReadoutUseCase().execute(tracks, {1: 2, 2: 0}, [MARKER])

    assert [r.track_name for r in readouts] == ["alpha", "bravo"]
    position = tracks[0].points[2]
    reading = readouts[0].readings[0]
    assert reading.marker_name == "BullsEye"
    assert reading.distance_km == pytest.approx(
        haversine_km(MARKER.latitude, MARKER.longitude, position.latitude, position.longitude)
    )
    assert reading.magnetic_bearing == pytest.approx(
        true_bearing(MARKER.latitude, MARKER.longitude, position.latitude, position.longitude)
    )


def test_tracks_not_started_are_skipped(tracks):
    readouts = BearingReadoutUseCase().execute(tracks, {1: 0, 2: NOT_STARTED}, [MARKER])
    assert [r.track_id for r in readouts] == [1]


def test_out_of_range_index_is_skipped(tracks):
    readouts = BearingReadoutUseCase().execute(tracks, {1: 99}, [MARKER])
    assert readouts == []


def test_no_markers_gives_empty_readings(tracks):
    readouts = BearingReadoutUseCase().execute(tracks, {1: 0, 2: 0}, [])
    assert all(r.readings == () for r in readouts)


def test_declination_is_taken_at_marker(tracks):
    declination = Mock()
    declination.declination.return_value = 10.0
    readouts = BearingReadoutUseCase(declination).execute(tracks, {1: 1}, [MARKER])

    position = tracks[0].points[1]
    declination.declination.assert_called_once_with(
        MARKER.latitude, MARKER.longitude, position.elevation, position.timestamp
    )
    expected = (true_bearing(MARKER.latitude, MARKER.longitude, position.latitude, position.longitude) - 10.0) % 360
    assert readouts[0].readings[0].magnetic_bearing == pytest.approx(expected)


def test_declination_failure_falls_back_to_true_bearing(tracks, caplog):
    declination = Mock()
    declination.declination.side_effect = RuntimeError("model unavailable")
    readouts = BearingReadoutUseCase(declination).execute(tracks, {1: 0}, [MARKER])

    position = tracks[0].points[0]
    assert readouts[0].readings[0].magnetic_bearing == pytest.approx(
        true_bearing(MARKER.latitude, MARKER.longitude, position.latitude, position.longitude)
    )
    assert "Déclinaison indisponible" in caplog.text
