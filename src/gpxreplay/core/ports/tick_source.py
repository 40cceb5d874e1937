from __future__ import annotations

from typing import Callable, Protocol


class TickSourcePort(Protocol):
    """Source de ticks périodiques (QTimer côté UI, manuelle en test)."""

    @property
    def is_active(self) -> bool: ...

    def start(self, interval_ms: int, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...
