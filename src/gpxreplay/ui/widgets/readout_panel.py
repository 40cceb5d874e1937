#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Panneau "Distance et relèvement magnétique"."""

import html
from typing import List, Optional, Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QGroupBox, QLabel, QVBoxLayout, QWidget

from gpxreplay.domain.gps_types import TrackReadout
from ..theme.styles import GROUPBOX_STYLE, LABEL_STYLE


def format_readouts(readouts: Sequence[TrackReadout]) -> str:
    """Rend les lectures en HTML (une section par trace)."""
    if not readouts:
        return "<i>Aucune trace en cours de lecture</i>"

    blocks: List[str] = []
    for readout in readouts:
        lines = [f"<b>{html.escape(readout.track_name)}</b>"]
        if not readout.readings:
            lines.append("&nbsp;&nbsp;Aucun marqueur")
        for reading in readout.readings:
            lines.append(
                f"&nbsp;&nbsp;{html.escape(reading.marker_name)}: "
                f"{reading.distance_km:.2f} km, {reading.magnetic_bearing:05.1f}° M"
            )
        blocks.append("<br/>".join(lines))
    return "<br/><br/>".join(blocks)


class ReadoutPanel(QWidget):
    """Distance et relèvement magnétique de chaque marqueur vers chaque avion."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 8, 16, 8)

        group = QGroupBox("Distance et relèvement magnétique")
        group.setStyleSheet(GROUPBOX_STYLE)
        group_layout = QVBoxLayout(group)

        self.lbl_readouts = QLabel()
        self.lbl_readouts.setStyleSheet(LABEL_STYLE)
        self.lbl_readouts.setTextFormat(Qt.TextFormat.RichText)
        self.lbl_readouts.setWordWrap(True)
        self.lbl_readouts.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        group_layout.addWidget(self.lbl_readouts)

        layout.addWidget(group)
        layout.addStretch()

        self.set_readouts([])

    def set_readouts(self, readouts: Sequence[TrackReadout]) -> None:
        self.lbl_readouts.setText(format_readouts(readouts))
