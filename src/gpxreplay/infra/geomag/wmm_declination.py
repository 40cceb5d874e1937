from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional, Tuple

from pygeomag import GeoMag

from gpxreplay.core.ports.declination import DeclinationPort


def decimal_year(when: datetime) -> float:
    """2024-07-01 -> ~2024.5 (format attendu par le modèle WMM)."""
    start = datetime(when.year, 1, 1, tzinfo=when.tzinfo)
    end = datetime(when.year + 1, 1, 1, tzinfo=when.tzinfo)
    return when.year + (when - start).total_seconds() / (end - start).total_seconds()


class WmmDeclination(DeclinationPort):
    """Déclinaison magnétique via le World Magnetic Model (pygeomag)."""

    def __init__(self, geo_mag: Optional[GeoMag] = None) -> None:
        self._geo_mag = geo_mag or GeoMag()
        self._cache: Dict[Tuple[float, float, float, float], float] = {}

    def declination(self, latitude: float, longitude: float, altitude_m: float, when: datetime) -> float:
        # Cache sur position arrondie (~100 m), altitude au km, date au dixième d'année
        key = (round(latitude, 3), round(longitude, 3), round(altitude_m / 1000.0), round(decimal_year(when), 1))
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        result = self._geo_mag.calculate(
            glat=latitude,
            glon=longitude,
            alt=altitude_m / 1000.0,
            time=decimal_year(when),
            allow_date_outside_lifespan=True,
        )
        self._cache[key] = float(result.d)
        return self._cache[key]
