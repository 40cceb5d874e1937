from __future__ import annotations

import math
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional

from gpxreplay.core.models.playback_models import PlaybackState


class PlaybackClock:
    """
    Horloge virtuelle de lecture.

    Le temps courant reste borné par [earliest_time, latest_time]. Chaque tick
    l'avance de interval_ms * vitesse * time_scale; arrivé en fin de plage,
    l'horloge se bloque sur latest_time et la lecture s'arrête.
    Aucune dépendance Qt: la planification des ticks est faite par l'appelant.
    """

    def __init__(self, interval_ms: int, time_scale: float, speed: float = 1.0) -> None:
        if interval_ms <= 0:
            raise ValueError(f"Intervalle de tick invalide: {interval_ms}")
        self.interval_ms = interval_ms
        self.time_scale = time_scale
        self._state = PlaybackState(speed_multiplier=self._check_speed(speed))

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def step(self) -> timedelta:
        """Avance du temps virtuel pour un tick à la vitesse courante."""
        return timedelta(
            milliseconds=self.interval_ms * self._state.speed_multiplier * self.time_scale
        )

    def set_range(self, earliest: Optional[datetime], latest: Optional[datetime]) -> None:
        """Met à jour la plage après un changement de l'ensemble des traces."""
        if earliest is None or latest is None:
            self._state = PlaybackState(speed_multiplier=self._state.speed_multiplier)
            return
        if earliest > latest:
            raise ValueError(f"Plage temporelle invalide: {earliest} > {latest}")

        current = self._state.current_time
        if current is None:
            current = earliest
        else:
            current = min(max(current, earliest), latest)

        self._state = replace(
            self._state,
            current_time=current,
            earliest_time=earliest,
            latest_time=latest,
        )

    def start(self) -> bool:
        """Lance la lecture (repart du début si on est déjà en fin)."""
        if not self._state.has_range:
            return False
        current = self._state.current_time
        if self._state.is_at_end:
            current = self._state.earliest_time
        self._state = replace(self._state, current_time=current, is_playing=True)
        return True

    def pause(self) -> None:
        self._state = replace(self._state, is_playing=False)

    def restart(self) -> None:
        self._state = replace(
            self._state,
            current_time=self._state.earliest_time,
            is_playing=False,
        )

    def seek(self, target: datetime) -> None:
        """Positionnement manuel: borne la cible et met toujours en pause."""
        if not self._state.has_range:
            return
        clamped = min(max(target, self._state.earliest_time), self._state.latest_time)
        self._state = replace(self._state, current_time=clamped, is_playing=False)

    def set_speed(self, multiplier: float) -> None:
        self._state = replace(self._state, speed_multiplier=self._check_speed(multiplier))

    def tick(self) -> bool:
        """
        Avance l'horloge d'un pas.

        Returns:
            True si l'état a changé (temps courant ou fin de lecture)
        """
        state = self._state
        if not state.is_playing or not state.has_range or state.current_time is None:
            return False

        next_time = state.current_time + self.step
        if next_time >= state.latest_time:
            self._state = replace(state, current_time=state.latest_time, is_playing=False)
        else:
            self._state = replace(state, current_time=next_time)
        return True

    @staticmethod
    def _check_speed(multiplier: float) -> float:
        value = float(multiplier)
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"Vitesse de lecture invalide: {multiplier}")
        return value
