from __future__ import annotations

from bisect import bisect_right
from datetime import datetime
from typing import Iterable, Optional

from gpxreplay.core.models.playback_models import NOT_STARTED, IndexMap
from gpxreplay.domain.gps_types import Track


def resolve_index(track: Track, current_time: Optional[datetime]) -> int:
    """Dernier point dont l'horodatage est <= current_time, sinon NOT_STARTED."""
    if current_time is None or track.is_empty():
        return NOT_STARTED
    timestamps = [p.timestamp for p in track.points]
    # bisect_right: en cas d'égalité on retient le dernier point de même horodatage
    return bisect_right(timestamps, current_time) - 1


def resolve_indices(tracks: Iterable[Track], current_time: Optional[datetime]) -> IndexMap:
    """Calcule l'IndexMap complète; fonction pure de (tracks, current_time)."""
    return {track.id: resolve_index(track, current_time) for track in tracks}
