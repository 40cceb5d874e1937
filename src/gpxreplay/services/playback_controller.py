#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Façade "application" utilisée par l'UI.

Objectif: l'UI PyQt ne manipule jamais l'horloge directement. Le contrôleur
possède les traces, les marqueurs, l'horloge et l'unique source de ticks,
et publie un PlaybackSnapshot cohérent après chaque changement d'état.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from gpxreplay.app.config import (
    BULLSEYE_LATITUDE, BULLSEYE_LONGITUDE, BULLSEYE_NAME,
    DEFAULT_SPEED, TICK_INTERVAL_MS, TIME_SCALE,
)
from gpxreplay.core.models.playback_models import IndexMap, PlaybackSnapshot, PlaybackState
from gpxreplay.core.ports.declination import DeclinationPort
from gpxreplay.core.ports.tick_source import TickSourcePort
from gpxreplay.core.usecases.bearing_readout import BearingReadoutUseCase
from gpxreplay.core.usecases.playback_clock import PlaybackClock
from gpxreplay.core.usecases.resolve_indices import resolve_indices
from gpxreplay.domain.errors import MarkerInputError
from gpxreplay.domain.gps_types import CustomMarker, Track, TrackReadout
from gpxreplay.infra.gpx.gpx_parser import ParsedTrack
from gpxreplay.services.track_ingestion import ColorGenerator

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[PlaybackSnapshot], None]
TracksListener = Callable[[List[Track]], None]
MarkersListener = Callable[[List[CustomMarker]], None]


def parse_marker_input(name: str, lat_text: str, lon_text: str) -> tuple:
    """
    Valide la saisie du formulaire de marqueur.

    Returns:
        Tuple (nom, latitude, longitude)

    Raises:
        MarkerInputError: champ manquant, valeur non numérique ou hors limites
    """
    name = (name or "").strip()
    lat_text = (lat_text or "").strip()
    lon_text = (lon_text or "").strip()
    if not name or not lat_text or not lon_text:
        raise MarkerInputError("Renseignez un nom, une latitude et une longitude.")

    try:
        lat = float(lat_text.replace(",", "."))
        lon = float(lon_text.replace(",", "."))
    except ValueError:
        raise MarkerInputError("Latitude et longitude doivent être des nombres.") from None

    if not -90 <= lat <= 90 or not -180 <= lon <= 180:
        raise MarkerInputError("Latitude entre -90 et 90, longitude entre -180 et 180.")
    return (name, lat, lon)


class PlaybackController:
    """
    Contrôleur de session: traces, marqueurs et lecture synchronisée.
    Seul point de mutation de l'état de lecture.
    """

    def __init__(
        self,
        tick_source: TickSourcePort,
        declination: Optional[DeclinationPort] = None,
        colors: Optional[ColorGenerator] = None,
        interval_ms: int = TICK_INTERVAL_MS,
        time_scale: float = TIME_SCALE,
    ) -> None:
        """
        Initialise le contrôleur.

        Args:
            tick_source: Source de ticks (QTimer en production)
            declination: Modèle de déclinaison magnétique (optionnel)
            colors: Générateur de couleurs des traces
            interval_ms: Intervalle entre deux ticks
            time_scale: Facteur temps virtuel / temps réel à vitesse 1x
        """
        self.tracks: List[Track] = []
        self.markers: List[CustomMarker] = []
        self.clock = PlaybackClock(interval_ms, time_scale, DEFAULT_SPEED)

        self._tick_source = tick_source
        self._colors = colors or ColorGenerator()
        self._readout = BearingReadoutUseCase(declination)
        self._indices: IndexMap = {}

        self._next_track_id = 1
        self._next_marker_id = 1

        self._snapshot_listeners: List[SnapshotListener] = []
        self._tracks_listeners: List[TracksListener] = []
        self._markers_listeners: List[MarkersListener] = []

    # ------------------------------------------------------------------
    # Abonnements
    # ------------------------------------------------------------------

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Abonne une vue aux snapshots; retourne la fonction de désabonnement."""
        self._snapshot_listeners.append(listener)
        return lambda: self._remove(self._snapshot_listeners, listener)

    def subscribe_tracks(self, listener: TracksListener) -> Callable[[], None]:
        self._tracks_listeners.append(listener)
        return lambda: self._remove(self._tracks_listeners, listener)

    def subscribe_markers(self, listener: MarkersListener) -> Callable[[], None]:
        self._markers_listeners.append(listener)
        return lambda: self._remove(self._markers_listeners, listener)

    @staticmethod
    def _remove(listeners: list, listener) -> None:
        if listener in listeners:
            listeners.remove(listener)

    # ------------------------------------------------------------------
    # Traces
    # ------------------------------------------------------------------

    def add_track(self, parsed: ParsedTrack) -> Track:
        """Ajoute une trace parsée (id séquentiel, couleur générée)."""
        track = Track(
            id=self._next_track_id,
            name=parsed.name,
            points=tuple(parsed.points),
            color=self._colors.next_color(),
        )
        self._next_track_id += 1
        self.tracks.append(track)
        logger.info("Trace %d ajoutée: %s (%d points)", track.id, track.name, len(track.points))

        self._refresh_range()
        self._publish_tracks()
        self._publish()
        return track

    def reset(self) -> None:
        """Réinitialise la session: plus aucune trace, horloge inerte."""
        self._cancel_ticks()
        self.tracks = []
        self.clock.set_range(None, None)
        logger.info("Session réinitialisée")
        self._publish_tracks()
        self._publish()

    def _refresh_range(self) -> None:
        populated = [t for t in self.tracks if not t.is_empty()]
        if not populated:
            self._cancel_ticks()
            self.clock.set_range(None, None)
            return
        self.clock.set_range(
            min(t.start_time for t in populated),
            max(t.end_time for t in populated),
        )

    # ------------------------------------------------------------------
    # Lecture
    # ------------------------------------------------------------------

    @property
    def state(self) -> PlaybackState:
        return self.clock.state

    @property
    def indices(self) -> IndexMap:
        return dict(self._indices)

    @property
    def snapshot(self) -> PlaybackSnapshot:
        return PlaybackSnapshot(state=self.clock.state, indices=dict(self._indices))

    def start(self) -> bool:
        if not self.clock.start():
            return False
        self._arm_ticks()
        logger.debug("Lecture démarrée à %s (x%s)", self.state.current_time, self.state.speed_multiplier)
        self._publish()
        return True

    def pause(self) -> None:
        self._cancel_ticks()
        self.clock.pause()
        self._publish()

    def toggle_play(self) -> None:
        if self.state.is_playing:
            self.pause()
        else:
            self.start()

    def restart(self) -> None:
        self._cancel_ticks()
        self.clock.restart()
        self._publish()

    def seek(self, target: datetime) -> None:
        self._cancel_ticks()
        self.clock.seek(target)
        self._publish()

    def set_speed(self, multiplier: float) -> None:
        self.clock.set_speed(multiplier)
        self._publish()

    def shutdown(self) -> None:
        """Arrête les ticks et détache les vues (fermeture de la fenêtre)."""
        self._cancel_ticks()
        self.clock.pause()
        self._snapshot_listeners.clear()
        self._tracks_listeners.clear()
        self._markers_listeners.clear()

    def _arm_ticks(self) -> None:
        # Jamais deux sources actives: on annule avant de réarmer
        self._tick_source.stop()
        self._tick_source.start(self.clock.interval_ms, self._on_tick)

    def _cancel_ticks(self) -> None:
        self._tick_source.stop()

    def _on_tick(self) -> None:
        if not self.clock.tick():
            self._cancel_ticks()
            return
        if not self.state.is_playing:
            self._cancel_ticks()
            logger.debug("Fin de lecture à %s", self.state.current_time)
        self._publish()

    # ------------------------------------------------------------------
    # Marqueurs et lectures
    # ------------------------------------------------------------------

    def add_marker(self, name: str, lat_text: str, lon_text: str) -> CustomMarker:
        """
        Ajoute un marqueur depuis la saisie utilisateur.

        Raises:
            MarkerInputError: saisie invalide
        """
        name, lat, lon = parse_marker_input(name, lat_text, lon_text)
        return self._append_marker(name, lat, lon)

    def add_bullseye(self) -> CustomMarker:
        """Ajoute le marqueur de référence BullsEye."""
        return self._append_marker(BULLSEYE_NAME, BULLSEYE_LATITUDE, BULLSEYE_LONGITUDE)

    def _append_marker(self, name: str, lat: float, lon: float) -> CustomMarker:
        marker = CustomMarker(id=self._next_marker_id, name=name, latitude=lat, longitude=lon)
        self._next_marker_id += 1
        self.markers.append(marker)
        logger.info("Marqueur ajouté: %s (%.4f, %.4f)", name, lat, lon)
        for listener in list(self._markers_listeners):
            listener(list(self.markers))
        self._publish()
        return marker

    def compute_readouts(self, indices: Optional[IndexMap] = None) -> List[TrackReadout]:
        """Distances / relèvements magnétiques pour les traces démarrées."""
        if indices is None:
            indices = self._indices
        return self._readout.execute(self.tracks, indices, self.markers)

    def get_summary(self) -> dict:
        """Retourne un résumé de la session."""
        state = self.state
        return {
            "tracks": len(self.tracks),
            "points": sum(len(t.points) for t in self.tracks),
            "markers": len(self.markers),
            "earliest_time": state.earliest_time,
            "latest_time": state.latest_time,
            "is_playing": state.is_playing,
        }

    # ------------------------------------------------------------------
    # Publication
    # ------------------------------------------------------------------

    def _publish(self) -> None:
        # Temps courant déjà à jour -> index -> vues
        self._indices = resolve_indices(self.tracks, self.clock.state.current_time)
        snapshot = self.snapshot
        for listener in list(self._snapshot_listeners):
            listener(snapshot)

    def _publish_tracks(self) -> None:
        for listener in list(self._tracks_listeners):
            listener(list(self.tracks))
