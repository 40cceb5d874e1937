#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Panneau des marqueurs personnalisés.
Saisie nom/latitude/longitude, marqueur BullsEye et liste des marqueurs.
"""

from typing import Optional, Sequence

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QFormLayout, QGroupBox, QHBoxLayout, QLineEdit, QListWidget,
    QPushButton, QVBoxLayout, QWidget
)

from gpxreplay.app.config import BULLSEYE_NAME
from gpxreplay.domain.gps_types import CustomMarker
from ..theme.styles import (
    BUTTON_SECONDARY_STYLE, BUTTON_STYLE, GROUPBOX_STYLE, INPUT_STYLE, LIST_STYLE
)


class MarkerPanel(QWidget):
    """Formulaire d'ajout et liste des marqueurs."""

    # Signaux
    marker_submitted = pyqtSignal(str, str, str)  # (nom, lat, lon) bruts
    bullseye_requested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 8, 16, 16)

        group = QGroupBox("Marqueurs")
        group.setStyleSheet(GROUPBOX_STYLE)
        group_layout = QVBoxLayout(group)
        group_layout.setSpacing(10)

        form = QFormLayout()
        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Nom du marqueur")
        self.lat_edit = QLineEdit()
        self.lat_edit.setPlaceholderText("Latitude (ex: 55.8735)")
        self.lon_edit = QLineEdit()
        self.lon_edit.setPlaceholderText("Longitude (ex: -1.7820)")
        for edit in (self.name_edit, self.lat_edit, self.lon_edit):
            edit.setStyleSheet(INPUT_STYLE)
            edit.returnPressed.connect(self._submit)
        form.addRow("Nom:", self.name_edit)
        form.addRow("Latitude:", self.lat_edit)
        form.addRow("Longitude:", self.lon_edit)
        group_layout.addLayout(form)

        buttons = QHBoxLayout()
        self.btn_add = QPushButton("Ajouter")
        self.btn_add.setStyleSheet(BUTTON_STYLE)
        self.btn_add.clicked.connect(self._submit)
        self.btn_bullseye = QPushButton(BULLSEYE_NAME)
        self.btn_bullseye.setToolTip("Ajouter le marqueur de test BullsEye")
        self.btn_bullseye.setStyleSheet(BUTTON_SECONDARY_STYLE)
        self.btn_bullseye.clicked.connect(self.bullseye_requested.emit)
        buttons.addWidget(self.btn_add)
        buttons.addWidget(self.btn_bullseye)
        group_layout.addLayout(buttons)

        self.marker_list = QListWidget()
        self.marker_list.setStyleSheet(LIST_STYLE)
        group_layout.addWidget(self.marker_list)

        layout.addWidget(group)

    def _submit(self) -> None:
        self.marker_submitted.emit(self.name_edit.text(), self.lat_edit.text(), self.lon_edit.text())

    def prefill_position(self, lat: float, lon: float) -> None:
        """Pré-remplit les coordonnées (clic sur la carte)."""
        self.lat_edit.setText(f"{lat:.6f}")
        self.lon_edit.setText(f"{lon:.6f}")
        self.name_edit.setFocus()

    def clear_form(self) -> None:
        for edit in (self.name_edit, self.lat_edit, self.lon_edit):
            edit.clear()

    def set_markers(self, markers: Sequence[CustomMarker]) -> None:
        self.marker_list.clear()
        for marker in markers:
            self.marker_list.addItem(f"{marker.name}  ({marker.latitude:.4f}, {marker.longitude:.4f})")
