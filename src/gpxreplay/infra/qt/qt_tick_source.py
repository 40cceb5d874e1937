from __future__ import annotations

from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer

from gpxreplay.core.ports.tick_source import TickSourcePort


class QtTickSource(TickSourcePort):
    """Ticks périodiques sur le thread UI via un QTimer unique."""

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self.timer = QTimer(parent)
        self.timer.timeout.connect(self._on_timeout)
        self._callback: Optional[Callable[[], None]] = None

    @property
    def is_active(self) -> bool:
        return self.timer.isActive()

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None:
        # Un seul timer: relancer remplace le callback précédent
        self.timer.stop()
        self._callback = callback
        self.timer.setInterval(interval_ms)
        self.timer.start()

    def stop(self) -> None:
        self.timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()
