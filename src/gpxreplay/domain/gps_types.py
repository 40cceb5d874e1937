#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Types de données GPS pour GPX Replay.
Définit les dataclasses utilisées dans toute l'application.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class TrackPoint:
    """
    Représente un point de trace GPX.

    Attributes:
        latitude: Latitude en degrés décimaux
        longitude: Longitude en degrés décimaux
        elevation: Altitude en mètres (0.0 si absente du fichier)
        timestamp: Horodatage du point (UTC, timezone-aware)
    """
    latitude: float
    longitude: float
    elevation: float
    timestamp: datetime

    def is_valid(self) -> bool:
        """Vérifie si le point a des coordonnées valides."""
        return -90 <= self.latitude <= 90 and -180 <= self.longitude <= 180


@dataclass(frozen=True)
class Track:
    """
    Représente une trace chargée dans la session.

    Attributes:
        id: Identifiant séquentiel (1, 2, 3...)
        name: Nom affiché (nom du fichier)
        points: Points triés chronologiquement
        color: Couleur de la trace (#RRGGBB)
    """
    id: int
    name: str
    points: Tuple[TrackPoint, ...] = field(default_factory=tuple)
    color: str = "#00E5FF"

    @property
    def start_time(self) -> Optional[datetime]:
        return self.points[0].timestamp if self.points else None

    @property
    def end_time(self) -> Optional[datetime]:
        return self.points[-1].timestamp if self.points else None

    def is_empty(self) -> bool:
        """Vérifie si la trace est vide."""
        return len(self.points) == 0

    def get_bounds(self) -> tuple:
        """
        Retourne les limites géographiques de la trace.

        Returns:
            Tuple (min_lat, min_lon, max_lat, max_lon)
        """
        if self.is_empty():
            return (0.0, 0.0, 0.0, 0.0)

        lats = [p.latitude for p in self.points]
        lons = [p.longitude for p in self.points]
        return (min(lats), min(lons), max(lats), max(lons))


@dataclass(frozen=True)
class CustomMarker:
    """Point de référence placé par l'utilisateur (relèvements, distances)."""
    id: int
    name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class MarkerReading:
    """Distance et relèvement magnétique d'un marqueur vers la position courante."""
    marker_id: int
    marker_name: str
    distance_km: float
    magnetic_bearing: float


@dataclass(frozen=True)
class TrackReadout:
    """Ensemble des lectures pour une trace démarrée."""
    track_id: int
    track_name: str
    readings: Tuple[MarkerReading, ...] = ()
