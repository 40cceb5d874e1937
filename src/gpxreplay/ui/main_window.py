#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Fenêtre principale de l'application GPX Replay.
Orchestre les widgets (carte, profil, lecture, marqueurs) et le contrôleur.
"""

import logging
from typing import Callable, List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QDockWidget, QMainWindow, QMenuBar, QMessageBox, QVBoxLayout, QWidget
)

from gpxreplay.app.config import APP_NAME, APP_VERSION
from gpxreplay.core.models.playback_models import PlaybackSnapshot
from gpxreplay.domain.errors import MarkerInputError
from gpxreplay.domain.gps_types import CustomMarker, Track
from gpxreplay.infra.geomag.wmm_declination import WmmDeclination
from gpxreplay.infra.qt.qt_tick_source import QtTickSource
from gpxreplay.services.playback_controller import PlaybackController
from gpxreplay.workers.worker_threads import GpxLoadWorker
from .theme.styles import MENU_BAR_STYLE, WINDOW_STYLE
from .widgets.elevation_widget import ElevationWidget
from .widgets.file_loader_widget import FileLoaderWidget, local_paths
from .widgets.map_widget import MapWidget
from .widgets.marker_panel import MarkerPanel
from .widgets.playback_bar import PlaybackBar
from .widgets.progress_indicator import ProgressIndicator
from .widgets.readout_panel import ReadoutPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Fenêtre principale de l'application."""

    def __init__(self, controller: Optional[PlaybackController] = None) -> None:
        """Initialise la fenêtre."""
        super().__init__()

        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION} - Relecture de traces GPX")
        self.resize(1400, 900)
        self.setStyleSheet(WINDOW_STYLE)

        # Contrôleur
        self.controller = controller or PlaybackController(
            QtTickSource(self), declination=WmmDeclination()
        )

        # Worker thread
        self.worker: Optional[GpxLoadWorker] = None
        self._unsubscribers: List[Callable[[], None]] = []

        self.setAcceptDrops(True)

        self._init_ui()
        self._create_menu_bar()
        self._connect_controller()

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            event.accept()
        else:
            event.ignore()

    def dropEvent(self, event):
        paths = local_paths(event.mimeData().urls())
        if paths:
            self._load_files(paths)

    def _init_ui(self) -> None:
        """Initialise l'interface utilisateur avec Docking."""
        self.setDockOptions(QMainWindow.DockOption.AnimatedDocks | QMainWindow.DockOption.AllowNestedDocks)

        # 1. Central Widget (Map)
        self.map_widget = MapWidget()
        self.setCentralWidget(self.map_widget)

        # 2. Left Dock (Fichiers, marqueurs, lectures)
        self.dock_files = QDockWidget("Session", self)
        self.dock_files.setAllowedAreas(Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea)
        self.dock_files.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable | QDockWidget.DockWidgetFeature.DockWidgetFloatable)
        self.dock_files.setMinimumWidth(340)

        self.loader_widget = FileLoaderWidget()
        self.progress_bar = ProgressIndicator()
        self.marker_panel = MarkerPanel()
        self.readout_panel = ReadoutPanel()

        left_container = QWidget()
        left_layout = QVBoxLayout(left_container)
        left_layout.setContentsMargins(0, 0, 0, 0)
        left_layout.addWidget(self.loader_widget)
        left_layout.addWidget(self.progress_bar)
        left_layout.addWidget(self.marker_panel)
        left_layout.addWidget(self.readout_panel)
        left_layout.addStretch()

        self.dock_files.setWidget(left_container)
        self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, self.dock_files)

        # 3. Bottom Dock (Lecture + profil d'altitude)
        self.dock_playback = QDockWidget("Lecture", self)
        self.dock_playback.setFeatures(QDockWidget.DockWidgetFeature.DockWidgetMovable | QDockWidget.DockWidgetFeature.DockWidgetFloatable)
        self.dock_playback.setMinimumHeight(220)

        self.playback_bar = PlaybackBar()
        self.elevation_widget = ElevationWidget()

        bottom_container = QWidget()
        bottom_layout = QVBoxLayout(bottom_container)
        bottom_layout.setContentsMargins(0, 0, 0, 0)
        bottom_layout.addWidget(self.playback_bar)
        bottom_layout.addWidget(self.elevation_widget, stretch=1)

        self.dock_playback.setWidget(bottom_container)
        self.addDockWidget(Qt.DockWidgetArea.BottomDockWidgetArea, self.dock_playback)

        # Connexions vues -> contrôleur
        self.loader_widget.files_selected.connect(self._load_files)
        self.loader_widget.reset_requested.connect(self._reset_session)
        self.marker_panel.marker_submitted.connect(self._on_marker_submitted)
        self.marker_panel.bullseye_requested.connect(self.controller.add_bullseye)
        self.map_widget.map_clicked.connect(self.marker_panel.prefill_position)
        self.playback_bar.play_toggled.connect(self.controller.toggle_play)
        self.playback_bar.restart_requested.connect(self.controller.restart)
        self.playback_bar.speed_selected.connect(self.controller.set_speed)
        self.playback_bar.seek_requested.connect(self.controller.seek)

    def _connect_controller(self) -> None:
        """Abonne les vues aux publications du contrôleur."""
        self._unsubscribers = [
            self.controller.subscribe(self._on_snapshot),
            self.controller.subscribe_tracks(self._on_tracks_changed),
            self.controller.subscribe_markers(self._on_markers_changed),
        ]
        self._on_snapshot(self.controller.snapshot)

    def _on_snapshot(self, snapshot: PlaybackSnapshot) -> None:
        """Rend un snapshot: même temps et mêmes index pour toutes les vues."""
        self.playback_bar.update_snapshot(snapshot)
        self.map_widget.update_positions(snapshot.indices)
        self.elevation_widget.update_indices(snapshot.indices)
        self.readout_panel.set_readouts(self.controller.compute_readouts(snapshot.indices))

    def _on_tracks_changed(self, tracks: List[Track]) -> None:
        self.map_widget.set_tracks(tracks)
        self.elevation_widget.set_tracks(tracks)
        self.loader_widget.set_tracks(tracks)

    def _on_markers_changed(self, markers: List[CustomMarker]) -> None:
        self.map_widget.set_markers(markers)
        self.marker_panel.set_markers(markers)

    def _load_files(self, paths: List[str]) -> None:
        """Démarre le chargement d'un lot de fichiers."""
        if self.worker is not None and self.worker.isRunning():
            self.statusBar().showMessage("Chargement déjà en cours", 3000)
            return

        self.loader_widget.set_processing(True)
        self.progress_bar.start_progress()
        self.progress_bar.set_status("Chargement des traces...")

        # Créer et lancer le worker
        self.worker = GpxLoadWorker(paths)
        self.worker.progress.connect(self.progress_bar.set_progress)
        self.worker.track_parsed.connect(self.controller.add_track)
        self.worker.file_error.connect(self._on_file_error)
        self.worker.error.connect(self._on_error)
        self.worker.finished_loading.connect(self._on_loading_finished)
        self.worker.start()

    def _on_file_error(self, message: str) -> None:
        """Fichier rejeté: alerte, le reste du lot continue."""
        QMessageBox.warning(self, "Fichier ignoré", message)

    def _on_error(self, message: str) -> None:
        """Gère les erreurs inattendues du chargement."""
        self.progress_bar.set_status(f"Erreur: {message}")
        QMessageBox.critical(self, "Erreur", message)

    def _on_loading_finished(self) -> None:
        """Gère la fin du chargement."""
        self.loader_widget.set_processing(False)
        self.progress_bar.stop_progress()
        self.worker = None

        summary = self.controller.get_summary()
        self.progress_bar.set_status(
            f"{summary['tracks']} trace(s), {summary['points']} points"
        )

    def _on_marker_submitted(self, name: str, lat_text: str, lon_text: str) -> None:
        try:
            self.controller.add_marker(name, lat_text, lon_text)
        except MarkerInputError as e:
            QMessageBox.warning(self, "Marqueur invalide", str(e))
            return
        self.marker_panel.clear_form()

    def _reset_session(self) -> None:
        """Retire toutes les traces (les marqueurs sont conservés)."""
        if self.worker is not None and self.worker.isRunning():
            return
        self.controller.reset()
        self.progress_bar.set_status("Prêt")

    def closeEvent(self, event) -> None:
        """Gère la fermeture de la fenêtre."""
        if self.worker and self.worker.isRunning():
            self.worker.wait()

        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self.controller.shutdown()
        self.map_widget.cleanup()

        event.accept()

    def _create_menu_bar(self) -> None:
        """Crée la barre de menu."""
        menu_bar = QMenuBar(self)
        menu_bar.setStyleSheet(MENU_BAR_STYLE)
        self.setMenuBar(menu_bar)

        # Menu Fichier
        file_menu = menu_bar.addMenu("&Fichier")

        open_action = QAction("&Charger des fichiers GPX...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self.loader_widget.btn_load.click)
        file_menu.addAction(open_action)

        reset_action = QAction("&Réinitialiser", self)
        reset_action.setShortcut("Ctrl+R")
        reset_action.triggered.connect(self._reset_session)
        file_menu.addAction(reset_action)

        file_menu.addSeparator()

        quit_action = QAction("&Quitter", self)
        quit_action.setShortcut("Ctrl+Q")
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        # Menu Lecture
        playback_menu = menu_bar.addMenu("&Lecture")

        play_action = QAction("Lecture / Pause", self)
        play_action.setShortcut(QKeySequence(Qt.Key.Key_Space))
        play_action.triggered.connect(self.controller.toggle_play)
        playback_menu.addAction(play_action)

        restart_action = QAction("Revenir au début", self)
        restart_action.setShortcut(QKeySequence(Qt.Key.Key_Home))
        restart_action.triggered.connect(self.controller.restart)
        playback_menu.addAction(restart_action)

        bullseye_action = QAction("Ajouter le marqueur BullsEye", self)
        bullseye_action.triggered.connect(self.controller.add_bullseye)
        playback_menu.addAction(bullseye_action)
