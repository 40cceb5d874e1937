#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Widget carte pour GPX Replay.
Affiche les traces, les avions animés et les marqueurs via folium.
Remonte les clics sur la carte pour pré-remplir le formulaire de marqueur.
"""

import json
import logging
import os
import tempfile
from typing import List, Optional, Sequence

from PyQt6.QtCore import QTimer, QUrl, pyqtSignal
from PyQt6.QtWebEngineCore import QWebEngineSettings
from PyQt6.QtWebEngineWidgets import QWebEngineView
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from gpxreplay.core.models.playback_models import IndexMap
from gpxreplay.domain.gps_types import CustomMarker, Track
from .map.console_interceptor import ConsoleInterceptor
from .map.map_html_generator import MapHTMLGenerator, build_position_payload, markers_to_js

logger = logging.getLogger(__name__)

# setHtml est limité à ~2 Mo: au-delà, passage par un fichier temporaire
MAX_INLINE_HTML_BYTES = 1_500_000


class MapWidget(QWidget):
    """
    Widget affichant une carte interactive avec traces et marqueurs.
    Les positions courantes sont poussées en JavaScript à chaque snapshot.
    """

    # Signal émis quand la carte est cliquée
    map_clicked = pyqtSignal(float, float)  # (lat, lon)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        """Initialise le widget carte."""
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        # WebView pour afficher la carte
        self.web_view = QWebEngineView()

        # Installer l'intercepteur
        self.page = ConsoleInterceptor(self)
        self.web_view.setPage(self.page)

        # Configurer pour permettre le chargement de ressources
        settings = self.web_view.settings()
        settings.setAttribute(QWebEngineSettings.WebAttribute.LocalContentCanAccessRemoteUrls, True)
        settings.setAttribute(QWebEngineSettings.WebAttribute.JavascriptEnabled, True)

        layout.addWidget(self.web_view)

        self.tracks: List[Track] = []
        self.markers: List[CustomMarker] = []
        self._ready = False
        self._pending_indices: Optional[IndexMap] = None
        self._pending_markers = False
        self._temp_path: Optional[str] = None

        self.web_view.setHtml("<html><body style='background-color: #222; color: white; display: flex; justify-content: center; align-items: center; height: 100%; margin: 0; font-family: sans-serif;'><h1>Chargement de la carte...</h1></body></html>")
        QTimer.singleShot(500, self.display_initial_map)

    def display_initial_map(self) -> None:
        """Affiche la carte vide initiale (Royaume-Uni)."""
        self.display(self.tracks, self.markers)

    def display(self, tracks: Sequence[Track], markers: Sequence[CustomMarker]) -> None:
        """Reconstruit la carte: traces, marqueurs et emprise."""
        self.tracks = list(tracks)
        self.markers = list(markers)
        self._pending_markers = False
        self._ready = False
        self._display_html(MapHTMLGenerator.generate(self.tracks, self.markers))

    def set_tracks(self, tracks: Sequence[Track]) -> None:
        self.display(tracks, self.markers)

    def set_markers(self, markers: Sequence[CustomMarker]) -> None:
        """Remplace les marqueurs sans recharger la page (vue conservée)."""
        self.markers = list(markers)
        if not self._ready:
            self._pending_markers = True
            return
        self.web_view.page().runJavaScript(f"setCustomMarkers({markers_to_js(self.markers)});")

    def update_positions(self, indices: IndexMap) -> None:
        """
        Met à jour les avions sur la carte.

        Args:
            indices: Index courant par trace (-1 = trace pas encore démarrée)
        """
        if not self._ready:
            # Rejoué dès que la page signale READY
            self._pending_indices = dict(indices)
            return
        payload = build_position_payload(self.tracks, indices)
        self.web_view.page().runJavaScript(f"updatePositions({json.dumps(payload)});")

    def on_map_ready(self) -> None:
        """Appelé par l'intercepteur quand la page Leaflet est chargée."""
        self._ready = True
        if self._pending_markers:
            self._pending_markers = False
            self.set_markers(self.markers)
        if self._pending_indices is not None:
            indices, self._pending_indices = self._pending_indices, None
            self.update_positions(indices)

    def _display_html(self, html: str) -> None:
        """Affiche le HTML."""
        if len(html.encode("utf-8")) <= MAX_INLINE_HTML_BYTES:
            self.web_view.setHtml(html, QUrl("https://raw.githubusercontent.com/"))
            return

        self._remove_temp_file()
        fd, path = tempfile.mkstemp(suffix=".html", prefix="gpxreplay_map_")
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(html)
        self._temp_path = path
        logger.debug("Carte volumineuse écrite dans %s", path)
        self.web_view.load(QUrl.fromLocalFile(path))

    def _remove_temp_file(self) -> None:
        if self._temp_path and os.path.exists(self._temp_path):
            try:
                os.remove(self._temp_path)
            except OSError as e:
                logger.warning("Suppression impossible de %s: %s", self._temp_path, e)
        self._temp_path = None

    def cleanup(self) -> None:
        self._remove_temp_file()
