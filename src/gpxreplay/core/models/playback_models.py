from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

# Index de la trace -> position courante, -1 si la trace n'a pas commencé
IndexMap = Dict[int, int]

NOT_STARTED: int = -1


@dataclass(frozen=True)
class PlaybackState:
    current_time: Optional[datetime] = None
    earliest_time: Optional[datetime] = None
    latest_time: Optional[datetime] = None
    is_playing: bool = False
    speed_multiplier: float = 1.0

    @property
    def has_range(self) -> bool:
        return self.earliest_time is not None and self.latest_time is not None

    @property
    def is_at_end(self) -> bool:
        return self.current_time is not None and self.current_time == self.latest_time


@dataclass(frozen=True)
class PlaybackSnapshot:
    """État publié aux vues: temps courant et index toujours cohérents."""
    state: PlaybackState
    indices: IndexMap = field(default_factory=dict)
