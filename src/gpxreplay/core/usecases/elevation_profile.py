from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from gpxreplay.domain.geo import haversine_km
from gpxreplay.domain.gps_types import Track


@dataclass(frozen=True)
class ElevationProfile:
    """Série (distance cumulée km, altitude m) d'une trace."""
    track_id: int
    name: str
    color: str
    distances_km: Tuple[float, ...]
    elevations_m: Tuple[float, ...]

    def point_at(self, index: int) -> Optional[Tuple[float, float]]:
        if not 0 <= index < len(self.distances_km):
            return None
        return (self.distances_km[index], self.elevations_m[index])


def build_profile(track: Track) -> ElevationProfile:
    distances: List[float] = []
    cumulative_km = 0.0
    prev = None
    for p in track.points:
        if prev is not None:
            cumulative_km += haversine_km(prev.latitude, prev.longitude, p.latitude, p.longitude)
        distances.append(cumulative_km)
        prev = p

    return ElevationProfile(
        track_id=track.id,
        name=track.name,
        color=track.color,
        distances_km=tuple(distances),
        elevations_m=tuple(p.elevation for p in track.points),
    )


def build_profiles(tracks: Sequence[Track]) -> List[ElevationProfile]:
    return [build_profile(t) for t in tracks if not t.is_empty()]


def profile_extent(profiles: Sequence[ElevationProfile]) -> Optional[Tuple[float, float, float]]:
    """
    Étendue commune des profils.

    Returns:
        Tuple (distance_max_km, altitude_min, altitude_max) ou None si aucun profil
    """
    if not profiles:
        return None
    max_distance = max(p.distances_km[-1] for p in profiles)
    min_elevation = min(min(p.elevations_m) for p in profiles)
    max_elevation = max(max(p.elevations_m) for p in profiles)
    return (max_distance, min_elevation, max_elevation)
