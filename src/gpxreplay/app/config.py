from __future__ import annotations

import os
from typing import List, Tuple


GPX_EXTENSION: str = ".gpx"

# Horloge de lecture: un tick toutes les 100 ms, le temps virtuel avance
# de interval * vitesse * TIME_SCALE (1 s de trace par tick en 1x).
TICK_INTERVAL_MS: int = 100
TIME_SCALE: float = 10.0
AVAILABLE_SPEEDS: List[float] = [0.25, 0.5, 1.0, 2.0, 4.0, 8.0]
DEFAULT_SPEED: float = 1.0

DISPLAY_TIMEZONE: str = "UTC"

# (sud-ouest, nord-est) - Royaume-Uni quand rien n'est chargé
DEFAULT_BOUNDS: Tuple[Tuple[float, float], Tuple[float, float]] = (
    (49.959999905, -7.57216793459),
    (58.6350001085, 1.68153079591),
)

BULLSEYE_NAME: str = "BullsEye"
BULLSEYE_LATITUDE: float = 55.873529
BULLSEYE_LONGITUDE: float = -1.782049

METERS_TO_FEET: float = 3.28084

LOG_LEVEL: str = os.environ.get("GPXREPLAY_LOG_LEVEL", "INFO")

APP_NAME: str = "GPX Replay"
APP_VERSION: str = "1.0.0"
