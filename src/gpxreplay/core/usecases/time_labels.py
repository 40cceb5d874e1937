from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytz


def format_clock(dt: datetime, tz_name: str = "UTC") -> str:
    """Heure HH:MM:SS dans le fuseau d'affichage."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(pytz.timezone(tz_name)).strftime("%H:%M:%S")


def format_elapsed(td: timedelta) -> str:
    total_seconds = int(max(0, td.total_seconds()))
    minutes = total_seconds // 60
    hours = minutes // 60
    minutes = minutes % 60
    seconds = total_seconds % 60
    if hours > 0:
        return f"{hours}h{minutes:02d}"
    return f"{minutes}min{seconds:02d}"


def offset_seconds(dt: datetime, origin: datetime) -> int:
    """Décalage entier en secondes depuis origin (valeur du slider)."""
    return int((dt - origin).total_seconds())


def from_offset_seconds(origin: datetime, seconds: int) -> datetime:
    return origin + timedelta(seconds=seconds)
