from typing import Callable, Optional

from PyQt5 import QtCore

TICK_INTERVAL_MS = 1000


class PlaybackTicker(QtCore.QObject):
    """Fixed-cadence tick source that delivers one callback per timeout.

    Missed deadlines are not replayed: each timeout produces a single tick.
    """

    ticked = QtCore.pyqtSignal()

    def __init__(
        self,
        on_tick: Callable[[], object],
        interval_ms: int = TICK_INTERVAL_MS,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._on_tick = on_tick
        self._timer = QtCore.QTimer(self)
        self._timer.setTimerType(QtCore.Qt.PreciseTimer)
        self._timer.setInterval(max(1, int(interval_ms)))
        self._timer.timeout.connect(self._handle_timeout)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def is_running(self) -> bool:
        return self._timer.isActive()

    def sync(self, should_run: bool) -> None:
        if should_run and not self._timer.isActive():
            self._timer.start()
        elif not should_run and self._timer.isActive():
            self._timer.stop()

    def stop(self) -> None:
        self._timer.stop()

    def _handle_timeout(self) -> None:
        self._on_tick()
        self.ticked.emit()
