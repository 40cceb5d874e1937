"""Tests for PlaybackController: tick lifecycle, snapshots, tracks and markers."""

from __future__ import annotations

import random
from unittest.mock import Mock

import pytest

from conftest import at, make_parsed
from gpxreplay.core.models.playback_models import NOT_STARTED
from gpxreplay.domain.errors import MarkerInputError
from gpxreplay.services.playback_controller import PlaybackController, parse_marker_input
from gpxreplay.services.track_ingestion import ColorGenerator


@pytest.fixture
def controller(tick_source) -> PlaybackController:
    return PlaybackController(tick_source, colors=ColorGenerator(random.Random(42)))


@pytest.fixture
def loaded(controller) -> PlaybackController:
    controller.add_track(make_parsed("a.gpx", [0, 5, 10]))
    controller.add_track(make_parsed("b.gpx", [2, 8]))
    return controller


# ---------------------------------------------------------------------------
# Tracks
# ---------------------------------------------------------------------------


def test_track_ids_are_sequential(loaded):
    assert [t.id for t in loaded.tracks] == [1, 2]


def test_track_colors_are_hex(loaded):
    for track in loaded.tracks:
        assert track.color.startswith("#")
        assert len(track.color) == 7
        int(track.color[1:], 16)


def test_colors_are_reproducible_with_seeded_rng(tick_source):
    first = PlaybackController(tick_source, colors=ColorGenerator(random.Random(7)))
    second = PlaybackController(tick_source, colors=ColorGenerator(random.Random(7)))
    assert first.add_track(make_parsed("x.gpx", [0])).color == second.add_track(make_parsed("x.gpx", [0])).color


def test_range_covers_all_tracks(loaded):
    assert loaded.state.earliest_time == at(0)
    assert loaded.state.latest_time == at(10)
    assert loaded.state.current_time == at(0)


def test_range_spans_earliest_start_and_latest_end(controller):
    controller.add_track(make_parsed("late.gpx", [5, 20]))
    controller.add_track(make_parsed("early.gpx", [0, 12]))

    assert controller.state.earliest_time == at(0)
    assert controller.state.latest_time == at(20)


def test_adding_track_publishes_tracks_and_snapshot(controller):
    tracks_listener = Mock()
    snapshot_listener = Mock()
    controller.subscribe_tracks(tracks_listener)
    controller.subscribe(snapshot_listener)

    controller.add_track(make_parsed("a.gpx", [0, 5]))

    tracks_listener.assert_called_once()
    assert [t.name for t in tracks_listener.call_args[0][0]] == ["a.gpx"]
    snapshot = snapshot_listener.call_args[0][0]
    assert snapshot.indices == {1: 0}


def test_reset_clears_tracks_and_range(loaded, tick_source):
    loaded.start()
    loaded.reset()
    assert loaded.tracks == []
    assert loaded.state.has_range is False
    assert loaded.state.is_playing is False
    assert tick_source.is_active is False
    assert loaded.indices == {}


def test_track_ids_keep_increasing_after_reset(loaded):
    loaded.reset()
    track = loaded.add_track(make_parsed("c.gpx", [0]))
    assert track.id == 3


def test_start_without_tracks_does_nothing(controller, tick_source):
    assert controller.start() is False
    assert tick_source.is_active is False


# ---------------------------------------------------------------------------
# Tick lifecycle
# ---------------------------------------------------------------------------


def test_start_arms_single_tick_source(loaded, tick_source):
    loaded.start()
    loaded.start()
    assert tick_source.is_active is True
    assert tick_source.interval_ms == 100


def test_tick_advances_and_publishes(loaded, tick_source):
    listener = Mock()
    loaded.subscribe(listener)
    loaded.start()
    tick_source.fire(6)

    snapshot = listener.call_args[0][0]
    assert snapshot.state.current_time == at(6)
    assert snapshot.indices == {1: 1, 2: 0}


@pytest.mark.parametrize("action", ["pause", "restart", "seek"])
def test_transport_actions_cancel_ticks(loaded, tick_source, action):
    loaded.start()
    if action == "seek":
        loaded.seek(at(4))
    else:
        getattr(loaded, action)()
    assert tick_source.is_active is False
    assert loaded.state.is_playing is False


def test_end_of_playback_cancels_ticks(loaded, tick_source):
    loaded.start()
    tick_source.fire(50)
    assert loaded.state.current_time == at(10)
    assert loaded.state.is_playing is False
    assert tick_source.is_active is False


def test_shutdown_cancels_ticks_and_detaches_listeners(loaded, tick_source):
    listener = Mock()
    loaded.subscribe(listener)
    loaded.start()
    listener.reset_mock()

    loaded.shutdown()
    assert tick_source.is_active is False
    loaded.seek(at(3))
    listener.assert_not_called()


def test_toggle_play(loaded, tick_source):
    loaded.toggle_play()
    assert loaded.state.is_playing is True
    loaded.toggle_play()
    assert loaded.state.is_playing is False
    assert tick_source.is_active is False


def test_start_after_end_replays(loaded, tick_source):
    loaded.seek(at(10))
    loaded.start()
    assert loaded.state.current_time == at(0)
    assert tick_source.is_active is True


def test_set_speed_keeps_playing(loaded, tick_source):
    loaded.start()
    loaded.set_speed(4)
    tick_source.fire()
    assert loaded.state.current_time == at(4)
    assert loaded.state.is_playing is True


def test_seek_snapshot_is_consistent(loaded):
    seen = []
    loaded.subscribe(seen.append)
    loaded.seek(at(1))
    assert seen[-1].state.current_time == at(1)
    assert seen[-1].indices == {1: 0, 2: NOT_STARTED}


def test_unsubscribe_stops_notifications(loaded):
    listener = Mock()
    unsubscribe = loaded.subscribe(listener)
    unsubscribe()
    loaded.seek(at(2))
    listener.assert_not_called()


# ---------------------------------------------------------------------------
# Markers and readouts
# ---------------------------------------------------------------------------


def test_add_marker_parses_input(controller):
    listener = Mock()
    controller.subscribe_markers(listener)
    marker = controller.add_marker("  Tower ", "55,5", "-1.25")
    assert marker.id == 1
    assert marker.name == "Tower"
    assert marker.latitude == pytest.approx(55.5)
    assert marker.longitude == pytest.approx(-1.25)
    listener.assert_called_once()


@pytest.mark.parametrize(
    "name, lat, lon",
    [
        ("", "55", "-1"),
        ("A", "", "-1"),
        ("A", "55", " "),
        ("A", "north", "-1"),
        ("A", "91", "0"),
        ("A", "0", "-180.5"),
    ],
)
def test_invalid_marker_input_raises(name, lat, lon):
    with pytest.raises(MarkerInputError):
        parse_marker_input(name, lat, lon)


def test_invalid_marker_is_not_added(controller):
    with pytest.raises(MarkerInputError):
        controller.add_marker("A", "abc", "0")
    assert controller.markers == []


def test_bullseye_marker(controller):
    marker = controller.add_bullseye()
    assert marker.name == "BullsEye"
    assert marker.latitude == pytest.approx(55.873529)
    assert marker.longitude == pytest.approx(-1.782049)


def test_markers_survive_reset(loaded):
    loaded.add_bullseye()
    loaded.reset()
    assert len(loaded.markers) == 1


def test_readouts_only_for_started_tracks(loaded):
    loaded.add_bullseye()
    loaded.seek(at(1))
    readouts = loaded.compute_readouts()
    assert [r.track_id for r in readouts] == [1]
    assert len(readouts[0].readings) == 1


def test_summary(loaded):
    loaded.add_bullseye()
    summary = loaded.get_summary()
    assert summary["tracks"] == 2
    assert summary["points"] == 5
    assert summary["markers"] == 1
    assert summary["is_playing"] is False
