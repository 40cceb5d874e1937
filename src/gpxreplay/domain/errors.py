"""Erreurs remontées à l'utilisateur (import de fichiers, saisie de marqueurs)."""

from __future__ import annotations


class GpxReplayError(Exception):
    """Base des erreurs applicatives."""


class UnsupportedFileTypeError(GpxReplayError):
    def __init__(self, filename: str) -> None:
        super().__init__(f"Type de fichier non supporté: {filename}")
        self.filename = filename


class EmptyTrackError(GpxReplayError):
    def __init__(self, filename: str, reason: str = "") -> None:
        message = f"Aucun point de trace valide dans le fichier GPX: {filename}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.filename = filename


class MarkerInputError(GpxReplayError):
    """Saisie de marqueur incomplète ou invalide."""
