#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Parser de fichiers .gpx pour GPX Replay.
Extrait les points de trace horodatés via gpxpy.
"""

import logging
import os
from dataclasses import dataclass
from datetime import timezone
from typing import List, Optional, Tuple

import gpxpy
import gpxpy.gpx

from gpxreplay.app.config import GPX_EXTENSION
from gpxreplay.domain.errors import EmptyTrackError, UnsupportedFileTypeError
from gpxreplay.domain.gps_types import TrackPoint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedTrack:
    """Résultat du parsing, avant attribution d'un id et d'une couleur."""
    name: str
    points: Tuple[TrackPoint, ...]


def is_gpx_file(filepath: str) -> bool:
    return filepath.lower().endswith(GPX_EXTENSION)


class GpxParser:
    """
    Parser pour les fichiers GPX.
    Seuls les <trkpt> sont retenus (routes et waypoints ignorés).
    """

    def __init__(self, filepath: str) -> None:
        """
        Initialise le parser avec le chemin du fichier .gpx.

        Args:
            filepath: Chemin absolu vers le fichier .gpx
        """
        self.filepath = filepath
        self.name = os.path.basename(filepath)

    def parse(self) -> ParsedTrack:
        """
        Lit le fichier et retourne la trace.

        Raises:
            UnsupportedFileTypeError: extension autre que .gpx
            EmptyTrackError: fichier illisible ou sans point horodaté
        """
        if not is_gpx_file(self.filepath):
            raise UnsupportedFileTypeError(self.name)

        try:
            with open(self.filepath, "r", encoding="utf-8") as gpx_file:
                content = gpx_file.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise EmptyTrackError(self.name, str(exc)) from exc

        return self.parse_string(content)

    def parse_string(self, content: str) -> ParsedTrack:
        """Parse un contenu GPX déjà lu."""
        try:
            gpx = gpxpy.parse(content)
        except (gpxpy.gpx.GPXException, ValueError) as exc:
            logger.error("GPX illisible %s: %s", self.name, exc)
            raise EmptyTrackError(self.name, "XML invalide") from exc

        points: List[TrackPoint] = []
        index = 0
        for track in gpx.tracks:
            for segment in track.segments:
                for raw in segment.points:
                    point = self._to_point(raw, index)
                    if point is not None:
                        points.append(point)
                    index += 1

        if not points:
            logger.error("Aucun point de trace valide dans %s", self.name)
            raise EmptyTrackError(self.name)

        points = self._ensure_sorted(points)

        logger.info(
            "Fichier .gpx parsé: %s, %d points (%s -> %s)",
            self.name, len(points), points[0].timestamp, points[-1].timestamp,
        )
        return ParsedTrack(name=self.name, points=tuple(points))

    def _to_point(self, raw: gpxpy.gpx.GPXTrackPoint, index: int) -> Optional[TrackPoint]:
        """
        Convertit un point gpxpy.

        Returns:
            TrackPoint ou None si horodatage absent/illisible ou coordonnées hors limites
        """
        if raw.time is None:
            logger.warning("Horodatage invalide au point %d du fichier %s", index, self.name)
            return None

        timestamp = raw.time
        # Les horodatages GPX sont en UTC
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        else:
            timestamp = timestamp.astimezone(timezone.utc)

        point = TrackPoint(
            latitude=float(raw.latitude),
            longitude=float(raw.longitude),
            elevation=float(raw.elevation) if raw.elevation is not None else 0.0,
            timestamp=timestamp,
        )
        if not point.is_valid():
            logger.warning("Coordonnées invalides au point %d du fichier %s", index, self.name)
            return None
        return point

    def _ensure_sorted(self, points: List[TrackPoint]) -> List[TrackPoint]:
        in_order = all(a.timestamp <= b.timestamp for a, b in zip(points, points[1:]))
        if in_order:
            return points
        logger.warning("Points non chronologiques dans %s, tri appliqué", self.name)
        return sorted(points, key=lambda p: p.timestamp)
