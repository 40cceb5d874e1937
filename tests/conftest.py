"""Shared fixtures and fakes for the GPX Replay test suite."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional, Sequence, Tuple

import pytest

from gpxreplay.domain.gps_types import Track, TrackPoint
from gpxreplay.infra.gpx.gpx_parser import ParsedTrack

T0 = datetime(2024, 5, 4, 10, 0, 0, tzinfo=timezone.utc)


class ManualTickSource:
    """Tick source driven by the test instead of a QTimer."""

    def __init__(self) -> None:
        self.callback: Optional[Callable[[], None]] = None
        self.interval_ms: Optional[int] = None
        self.start_calls = 0
        self.stop_calls = 0

    @property
    def is_active(self) -> bool:
        return self.callback is not None

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        assert self.callback is None, "tick source armed twice"
        self.start_calls += 1
        self.interval_ms = interval_ms
        self.callback = callback

    def stop(self) -> None:
        self.stop_calls += 1
        self.callback = None

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self.callback is None:
                return
            self.callback()


def at(seconds: float) -> datetime:
    return T0 + timedelta(seconds=seconds)


def make_point(
    seconds: float,
    lat: float = 55.0,
    lon: float = -1.5,
    elevation: float = 100.0,
) -> TrackPoint:
    return TrackPoint(latitude=lat, longitude=lon, elevation=elevation, timestamp=at(seconds))


def make_track(track_id: int, offsets: Sequence[float], name: str = "", **kwargs) -> Track:
    points = tuple(
        make_point(s, lat=55.0 + i * 0.01, lon=-1.5 + i * 0.01, **kwargs)
        for i, s in enumerate(offsets)
    )
    return Track(id=track_id, name=name or f"track-{track_id}", points=points)


def make_parsed(name: str, offsets: Sequence[float]) -> ParsedTrack:
    track = make_track(0, offsets, name=name)
    return ParsedTrack(name=name, points=track.points)


def gpx_document(points: Sequence[Tuple[float, float, Optional[str], Optional[float]]]) -> str:
    """Build a GPX 1.1 document from (lat, lon, iso_time, elevation) tuples."""
    rows: List[str] = []
    for lat, lon, time, ele in points:
        inner = ""
        if ele is not None:
            inner += f"<ele>{ele}</ele>"
        if time is not None:
            inner += f"<time>{time}</time>"
        rows.append(f'<trkpt lat="{lat}" lon="{lon}">{inner}</trkpt>')
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">'
        "<trk><name>test</name><trkseg>"
        + "".join(rows)
        + "</trkseg></trk></gpx>"
    )


@pytest.fixture
def tick_source() -> ManualTickSource:
    return ManualTickSource()
