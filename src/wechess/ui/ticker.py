"""ClockTicker — feeds one-second ticks into a session from a QTimer."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer


class ClockTicker(QObject):
    """Calls *on_tick* once per second while started.

    ``start`` and ``stop`` are idempotent: starting a running ticker does
    not restart its interval, stopping a stopped one does nothing.
    """

    INTERVAL_MS = 1000

    def __init__(self, on_tick: Callable[[], None], parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._on_tick = on_tick
        self._timer = QTimer(self)
        self._timer.setInterval(self.INTERVAL_MS)
        self._timer.timeout.connect(self._fire)

    def start(self) -> None:
        if not self._timer.isActive():
            self._timer.start()

    def stop(self) -> None:
        if self._timer.isActive():
            self._timer.stop()

    def set_running(self, running: bool) -> None:
        if running:
            self.start()
        else:
            self.stop()

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def _fire(self) -> None:
        self._on_tick()
