from __future__ import annotations

from datetime import datetime
from typing import Protocol


class DeclinationPort(Protocol):
    """Déclinaison magnétique (degrés, positive vers l'Est)."""

    def declination(self, latitude: float, longitude: float, altitude_m: float, when: datetime) -> float: ...
