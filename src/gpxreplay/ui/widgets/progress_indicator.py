#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Indicateur de progression pour GPX Replay.
Barre de progression du chargement et message de statut.
"""

from typing import Optional

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QProgressBar, QWidget

from ..theme.styles import PROGRESS_BAR_STYLE


class ProgressIndicator(QWidget):
    """
    Widget affichant une barre de progression et un message de statut.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        """Initialise le widget."""
        super().__init__(parent)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 2, 16, 2)

        self.lbl_status = QLabel("Prêt")
        layout.addWidget(self.lbl_status, stretch=1)

        self.progress_bar = QProgressBar()
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setStyleSheet(PROGRESS_BAR_STYLE)
        self.progress_bar.setMaximumWidth(140)
        self.progress_bar.hide()
        layout.addWidget(self.progress_bar)

    def set_status(self, message: str) -> None:
        self.lbl_status.setText(message)

    def set_progress(self, current: int, total: int) -> None:
        """
        Met à jour la progression.

        Args:
            current: Fichiers traités
            total: Fichiers du lot
        """
        if total > 0:
            self.progress_bar.setValue(int((current / total) * 100))
            self.progress_bar.show()
            self.lbl_status.setText(f"Chargement {current}/{total}...")
        else:
            self.progress_bar.hide()

    def start_progress(self) -> None:
        self.progress_bar.setValue(0)
        self.progress_bar.show()

    def stop_progress(self) -> None:
        self.progress_bar.setValue(100)
        self.progress_bar.hide()
