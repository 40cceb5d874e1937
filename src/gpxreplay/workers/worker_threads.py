#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Workers QThread pour GPX Replay.
Parse les fichiers GPX en arrière-plan pour ne pas bloquer l'UI.
"""

from typing import List, Optional

from PyQt6.QtCore import QThread, pyqtSignal

from gpxreplay.services.track_ingestion import TrackIngestion


class GpxLoadWorker(QThread):
    """
    Worker de chargement d'un lot de fichiers GPX.

    Les traces parsées sont émises une par une; l'ajout à la session
    (id, couleur, horloge) est fait par le thread UI à la réception du signal.
    """

    # Signaux
    progress = pyqtSignal(int, int)      # (current, total)
    track_parsed = pyqtSignal(object)    # ParsedTrack
    file_error = pyqtSignal(str)         # Message utilisateur
    error = pyqtSignal(str)
    finished_loading = pyqtSignal()

    def __init__(self, paths: List[str], ingestion: Optional[TrackIngestion] = None) -> None:
        """
        Initialise le worker.

        Args:
            paths: Chemins des fichiers déposés ou sélectionnés
            ingestion: Service d'import (injectable)
        """
        super().__init__()
        self.paths = list(paths)
        self.ingestion = ingestion or TrackIngestion()

    def run(self) -> None:
        """Exécute le chargement en arrière-plan."""
        try:
            result = self.ingestion.load_files(
                self.paths,
                progress_callback=lambda current, total: self.progress.emit(current, total),
            )
            for parsed in result.tracks:
                self.track_parsed.emit(parsed)
            for message in result.errors:
                self.file_error.emit(message)
        except Exception as e:
            self.error.emit(f"Erreur de chargement: {str(e)}")
        finally:
            self.finished_loading.emit()
