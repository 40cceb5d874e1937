#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Barre de lecture pour GPX Replay.
Lecture/pause, retour au début, vitesses et curseur temporel.
"""

from datetime import datetime
from typing import Dict, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QButtonGroup, QHBoxLayout, QLabel, QSlider, QStyle, QToolButton, QWidget
)

from gpxreplay.app.config import AVAILABLE_SPEEDS, DISPLAY_TIMEZONE
from gpxreplay.core.models.playback_models import PlaybackSnapshot
from gpxreplay.core.usecases.time_labels import (
    format_clock, format_elapsed, from_offset_seconds, offset_seconds
)
from ..theme.styles import SLIDER_STYLE, SPEED_BUTTON_STYLE


def speed_label(speed: float) -> str:
    """0.25 -> '0.25x', 2.0 -> '2x'."""
    return f"{speed:g}x"


class PlaybackBar(QWidget):
    """
    Commandes de lecture.
    N'altère jamais l'horloge: émet des demandes, se redessine sur snapshot.
    """

    # Signaux
    play_toggled = pyqtSignal()
    restart_requested = pyqtSignal()
    speed_selected = pyqtSignal(float)
    seek_requested = pyqtSignal(datetime)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self._origin: Optional[datetime] = None
        self._updating = False
        self._speed_buttons: Dict[float, QToolButton] = {}

        layout = QHBoxLayout(self)
        layout.setContentsMargins(6, 4, 6, 4)
        layout.setSpacing(6)

        self.btn_play_pause = QToolButton()
        self.btn_play_pause.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_MediaPlay))
        self.btn_play_pause.setToolTip("Lecture / Pause")
        self.btn_play_pause.clicked.connect(self.play_toggled.emit)

        self.btn_restart = QToolButton()
        self.btn_restart.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_MediaSkipBackward))
        self.btn_restart.setToolTip("Revenir au début")
        self.btn_restart.clicked.connect(self.restart_requested.emit)

        for btn in (self.btn_play_pause, self.btn_restart):
            btn.setStyleSheet(SPEED_BUTTON_STYLE)
            layout.addWidget(btn)

        # Vitesses exclusives
        self.speed_group = QButtonGroup(self)
        self.speed_group.setExclusive(True)
        for speed in AVAILABLE_SPEEDS:
            btn = QToolButton()
            btn.setText(speed_label(speed))
            btn.setCheckable(True)
            btn.setStyleSheet(SPEED_BUTTON_STYLE)
            btn.clicked.connect(lambda _checked, s=speed: self.speed_selected.emit(s))
            self.speed_group.addButton(btn)
            self._speed_buttons[speed] = btn
            layout.addWidget(btn)

        self.slider = QSlider(Qt.Orientation.Horizontal)
        self.slider.setStyleSheet(SLIDER_STYLE)
        self.slider.setRange(0, 0)
        self.slider.setEnabled(False)
        self.slider.valueChanged.connect(self._on_slider_changed)
        layout.addWidget(self.slider, stretch=1)

        self.lbl_status = QLabel("")
        self.lbl_status.setStyleSheet("color: #d5d5d5; font-weight: 600; padding-left: 8px;")
        self.lbl_status.setMinimumWidth(190)
        layout.addWidget(self.lbl_status)

        self._set_controls_enabled(False)

    def update_snapshot(self, snapshot: PlaybackSnapshot) -> None:
        """Reflète l'état de l'horloge (slider, icône, vitesse, libellé)."""
        state = snapshot.state
        has_range = state.has_range
        self._set_controls_enabled(has_range)

        icon = QStyle.StandardPixmap.SP_MediaPause if state.is_playing else QStyle.StandardPixmap.SP_MediaPlay
        self.btn_play_pause.setIcon(self.style().standardIcon(icon))

        btn = self._speed_buttons.get(state.speed_multiplier)
        if btn is not None and not btn.isChecked():
            btn.setChecked(True)

        self._updating = True
        try:
            if not has_range:
                self._origin = None
                self.slider.setRange(0, 0)
                self.lbl_status.setText("")
                return

            # Secondes entières depuis earliest_time: la fraction finale de la plage est hors curseur
            self._origin = state.earliest_time
            self.slider.setRange(0, offset_seconds(state.latest_time, state.earliest_time))
            self.slider.setValue(offset_seconds(state.current_time, state.earliest_time))
        finally:
            self._updating = False

        elapsed = format_elapsed(state.current_time - state.earliest_time)
        total = format_elapsed(state.latest_time - state.earliest_time)
        clock = format_clock(state.current_time, DISPLAY_TIMEZONE)
        self.lbl_status.setText(f"{clock}  |  temps {elapsed} / {total}")

    def _on_slider_changed(self, value: int) -> None:
        # Mises à jour programmatiques ignorées
        if self._updating or self._origin is None:
            return
        self.seek_requested.emit(from_offset_seconds(self._origin, value))

    def _set_controls_enabled(self, enabled: bool) -> None:
        self.btn_play_pause.setEnabled(enabled)
        self.btn_restart.setEnabled(enabled)
        self.slider.setEnabled(enabled)
