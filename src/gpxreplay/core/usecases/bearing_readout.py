from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from gpxreplay.core.models.playback_models import NOT_STARTED, IndexMap
from gpxreplay.core.ports.declination import DeclinationPort
from gpxreplay.domain.geo import haversine_km, magnetic_bearing, true_bearing
from gpxreplay.domain.gps_types import CustomMarker, MarkerReading, Track, TrackPoint, TrackReadout

logger = logging.getLogger(__name__)


@dataclass
class BearingReadoutUseCase:
    """Distances et relèvements magnétiques marqueur -> position courante."""

    declination: Optional[DeclinationPort] = None

    def execute(
        self,
        tracks: Sequence[Track],
        indices: IndexMap,
        markers: Sequence[CustomMarker],
    ) -> List[TrackReadout]:
        readouts: List[TrackReadout] = []
        for track in tracks:
            index = indices.get(track.id, NOT_STARTED)
            if index == NOT_STARTED or not 0 <= index < len(track.points):
                continue
            position = track.points[index]
            readings = tuple(self._reading(marker, position) for marker in markers)
            readouts.append(TrackReadout(track_id=track.id, track_name=track.name, readings=readings))
        return readouts

    def _reading(self, marker: CustomMarker, position: TrackPoint) -> MarkerReading:
        distance = haversine_km(marker.latitude, marker.longitude, position.latitude, position.longitude)
        bearing = true_bearing(marker.latitude, marker.longitude, position.latitude, position.longitude)
        return MarkerReading(
            marker_id=marker.id,
            marker_name=marker.name,
            distance_km=distance,
            magnetic_bearing=magnetic_bearing(bearing, self._declination_at(marker, position)),
        )

    def _declination_at(self, marker: CustomMarker, position: TrackPoint) -> float:
        # Déclinaison au marqueur, altitude et date du point courant
        if self.declination is None:
            return 0.0
        try:
            return self.declination.declination(
                marker.latitude, marker.longitude, position.elevation, position.timestamp
            )
        except Exception as exc:
            logger.warning("Déclinaison indisponible pour %s: %s", marker.name, exc)
            return 0.0
