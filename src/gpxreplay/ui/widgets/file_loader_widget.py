#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Widget de chargement de fichiers pour GPX Replay.
Zone de dépôt et sélection de fichiers .gpx, liste des traces chargées.
"""

import os
from typing import List, Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFileDialog, QGroupBox, QLabel, QListWidget, QListWidgetItem,
    QPushButton, QStyle, QVBoxLayout, QWidget
)
from PyQt6.QtGui import QColor

from gpxreplay.domain.gps_types import Track
from ..theme.styles import (
    BUTTON_SECONDARY_STYLE, DROP_ZONE_ACTIVE_STYLE, DROP_ZONE_STYLE,
    GROUPBOX_STYLE, LABEL_STYLE, LIST_STYLE
)


def local_paths(urls) -> List[str]:
    """Chemins locaux existants d'une liste de QUrl déposées."""
    paths = []
    for url in urls:
        path = url.toLocalFile()
        if path and os.path.isfile(path):
            paths.append(path)
    return paths


class DropZone(QLabel):
    """Zone de dépôt: accepte les fichiers, le tri .gpx se fait à l'import."""

    files_dropped = pyqtSignal(list)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__("Déposez vos fichiers .gpx ici", parent)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setMinimumHeight(90)
        self.setAcceptDrops(True)
        self.setStyleSheet(DROP_ZONE_STYLE)

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            self.setStyleSheet(DROP_ZONE_ACTIVE_STYLE)
            event.accept()
        else:
            event.ignore()

    def dragLeaveEvent(self, event):
        self.setStyleSheet(DROP_ZONE_STYLE)
        super().dragLeaveEvent(event)

    def dropEvent(self, event):
        self.setStyleSheet(DROP_ZONE_STYLE)
        paths = local_paths(event.mimeData().urls())
        if paths:
            self.files_dropped.emit(paths)
        event.accept()


class FileLoaderWidget(QWidget):
    """
    Widget permettant à l'utilisateur de charger des traces GPX.
    """

    # Signaux
    files_selected = pyqtSignal(list)   # Chemins des fichiers
    reset_requested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._init_ui()

    def _init_ui(self) -> None:
        """Initialise l'interface utilisateur."""
        layout = QVBoxLayout(self)
        layout.setSpacing(18)
        layout.setContentsMargins(16, 16, 16, 16)

        # --- Section Fichiers GPX ---
        group_files = QGroupBox("Traces GPX")
        group_files.setStyleSheet(GROUPBOX_STYLE)
        files_layout = QVBoxLayout(group_files)
        files_layout.setSpacing(12)

        self.drop_zone = DropZone()
        self.drop_zone.files_dropped.connect(self.files_selected.emit)
        files_layout.addWidget(self.drop_zone)

        self.btn_load = QPushButton("Charger des fichiers GPX")
        self.btn_load.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_DirOpenIcon))
        self.btn_load.setStyleSheet(BUTTON_SECONDARY_STYLE)
        self.btn_load.clicked.connect(self._browse_files)
        files_layout.addWidget(self.btn_load)

        self.lbl_status = QLabel("Aucune trace chargée")
        self.lbl_status.setStyleSheet(LABEL_STYLE + "font-style: italic; color: #8a8a8a;")
        self.lbl_status.setWordWrap(True)
        files_layout.addWidget(self.lbl_status)

        self.track_list = QListWidget()
        self.track_list.setStyleSheet(LIST_STYLE)
        self.track_list.setMaximumHeight(140)
        files_layout.addWidget(self.track_list)

        self.btn_reset = QPushButton("Réinitialiser")
        self.btn_reset.setStyleSheet(BUTTON_SECONDARY_STYLE)
        self.btn_reset.clicked.connect(self.reset_requested.emit)
        files_layout.addWidget(self.btn_reset)

        layout.addWidget(group_files)

    def _browse_files(self) -> None:
        """Ouvre un dialogue pour sélectionner des fichiers .gpx."""
        fnames, _ = QFileDialog.getOpenFileNames(
            self, "Sélectionner des fichiers GPX", "", "Traces GPX (*.gpx);;Tous les fichiers (*)"
        )
        if fnames:
            self.files_selected.emit(list(fnames))

    def set_processing(self, processing: bool) -> None:
        """
        Active ou désactive les contrôles pendant le chargement.

        Args:
            processing: True si chargement en cours
        """
        enabled = not processing
        self.btn_load.setEnabled(enabled)
        self.btn_reset.setEnabled(enabled)
        self.drop_zone.setAcceptDrops(enabled)
        if processing:
            self.btn_load.setText("Chargement...")
        else:
            self.btn_load.setText("Charger des fichiers GPX")

    def set_tracks(self, tracks: Sequence[Track]) -> None:
        """Liste les traces chargées avec leur couleur."""
        self.track_list.clear()
        for track in tracks:
            item = QListWidgetItem(f"{track.name}  ({len(track.points)} pts)")
            item.setForeground(QColor(track.color))
            self.track_list.addItem(item)

        if tracks:
            self.lbl_status.setText(f"{len(tracks)} trace(s) chargée(s)")
            self.lbl_status.setStyleSheet(LABEL_STYLE + "color: #6dd19c; font-weight: bold;")
        else:
            self.lbl_status.setText("Aucune trace chargée")
            self.lbl_status.setStyleSheet(LABEL_STYLE + "font-style: italic; color: #8a8a8a;")
