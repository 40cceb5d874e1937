#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""Import d'un lot de fichiers GPX.

Chaque fichier est traité indépendamment: une erreur sur l'un n'empêche
pas le chargement des autres.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from gpxreplay.domain.errors import GpxReplayError
from gpxreplay.infra.gpx.gpx_parser import GpxParser, ParsedTrack

logger = logging.getLogger(__name__)


@dataclass
class IngestionResult:
    tracks: List[ParsedTrack] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


class ColorGenerator:
    """Couleurs aléatoires #RRGGBB pour distinguer les traces."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def next_color(self) -> str:
        return "#{:06X}".format(self._rng.randrange(0x1000000))


class TrackIngestion:
    """Parse une liste de chemins et collecte traces et erreurs."""

    def __init__(self, parser_factory: Callable[[str], GpxParser] = GpxParser) -> None:
        self._parser_factory = parser_factory

    def load_files(
        self,
        paths: Sequence[str],
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> IngestionResult:
        result = IngestionResult()
        total = len(paths)
        for idx, path in enumerate(paths, start=1):
            try:
                result.tracks.append(self._parser_factory(path).parse())
            except GpxReplayError as exc:
                logger.warning("Fichier ignoré: %s", exc)
                result.errors.append(str(exc))
            if progress_callback:
                progress_callback(idx, total)
        return result
