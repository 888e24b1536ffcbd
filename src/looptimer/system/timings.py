from PySide6.QtCore import QObject, QTimer, QElapsedTimer, Signal, Qt

from typing import Optional

TICK_INTERVAL_MS = 1000

class TickClock(QObject):
    """
    recurring tick source. the owner decides when it runs; nothing
    starts it implicitly.
    """

    tick = Signal(float)
    activeChanged = Signal(bool)

    def __init__(self, intervalMs: int = TICK_INTERVAL_MS, parent: Optional[QObject] = None):
        super().__init__(parent)

        self.timer = QTimer(self)
        self.timer.setTimerType(Qt.PreciseTimer)
        self.timer.setInterval(max(1, int(intervalMs)))

        self.elapsedTimer = QElapsedTimer()
        self.lastDelta = 0

        self.timer.timeout.connect(self._onTimeout)

    @property
    def intervalMs(self) -> int:
        return self.timer.interval()

    def _onTimeout(self):
        elapsedMs = self.elapsedTimer.restart()
        self.lastDelta = elapsedMs
        self.tick.emit(elapsedMs / 1000)

    def isActive(self) -> bool:
        return self.timer.isActive()

    def start(self) -> None:
        if self.timer.isActive():
            return

        self.elapsedTimer.start()
        self.timer.start()
        self.activeChanged.emit(True)

    def stop(self) -> None:
        if not self.timer.isActive():
            return

        self.timer.stop()
        self.activeChanged.emit(False)
