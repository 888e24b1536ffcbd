from .config.validation import parseRange
from .config import ConfigController

from .effects.selector import EffectBundle, selectEffects
from .system.timings import TickClock
from .errors import InvalidRangeConfig

from PySide6.QtCore import QObject, Signal

from typing import Optional
from enum import Enum

import logging
import random

logger = logging.getLogger(__name__)

class SchedulerState(Enum):
    IDLE = 0
    COUNTING_DOWN = 1

class CycleScheduler(QObject):
    """
    scheduler for the random looping countdown.

    each cycle waits a random number of seconds within the configured
    range, fires an effect bundle, then immediately starts the next
    cycle. the configuration is only read at cycle boundaries.
    """

    countdownChanged = Signal(int)
    effectsFired = Signal(object)
    effectsReset = Signal()
    validationFailed = Signal(str)
    runningChanged = Signal(bool)

    def __init__(
        self,
        config: ConfigController,
        rng: Optional[random.Random] = None,
        clock: Optional[TickClock] = None,
        parent: Optional[QObject] = None
    ):
        """
        Initialise the cycle scheduler.

        :param config: Configuration store read at every cycle boundary.
        :param rng: Randomness source for durations and effects.
        :param clock: One-second tick source; the scheduler takes ownership.
        :param parent: Optional Qt parent.
        """
        super().__init__(parent)

        self.config = config
        self.rng = rng or random.Random()

        self.clock = clock if clock is not None else TickClock(parent=self)
        self.clock.tick.connect(self._onTick)

        self.state = SchedulerState.IDLE
        self.remainingSeconds = 0
        self.currentDuration = 0
        self.cycleCount = 0
        self.isShutdown = False

        # bumped on every start/stop so a stale boundary can tell it was superseded
        self._generation = 0

        self.config.valueChanged.connect(self._onConfigChanged)

    @property
    def isRunning(self) -> bool:
        return self.state is SchedulerState.COUNTING_DOWN

    # config handlers
    def _onConfigChanged(self, path: str, value) -> None:
        if self.isRunning:
            logger.debug(f"Config {path} changed to {value!r}, applies from the next cycle")

    # control surface
    def start(self) -> bool:
        """
        Start counting down, unless already running.

        :return: True if a new countdown began
        :rtype: bool
        """
        if self.isRunning:
            logger.debug("Ignoring start: scheduler already running")
            return False

        duration = self._drawDuration()

        if duration is None:
            return False

        self._generation += 1
        self.state = SchedulerState.COUNTING_DOWN
        self.cycleCount = 0

        logger.debug("Scheduler started")
        self.runningChanged.emit(True)

        self._beginCountdown(duration)
        return True

    def stop(self) -> None:
        """
        Stop the countdown and reset rendered effects. No-op when idle.
        """
        if not self.isRunning:
            return

        self.clock.stop()
        self._generation += 1

        self.state = SchedulerState.IDLE
        self.remainingSeconds = 0
        self.currentDuration = 0

        logger.debug("Scheduler stopped")

        self.effectsReset.emit()
        self.countdownChanged.emit(0)
        self.runningChanged.emit(False)

    def shutdown(self) -> None:
        """
        Stop and detach from the tick source; safe to call more than once.
        """
        self.stop()

        if self.isShutdown:
            return

        self.isShutdown = True
        self.clock.tick.disconnect(self._onTick)

    # internal methods
    def _drawDuration(self) -> Optional[int]:
        """
        Validate the current range and draw a duration from it.

        :return: Duration in seconds, or None if the range is invalid
        :rtype: Optional[int]
        """
        settings = self.config.snapshot()

        try:
            minSeconds, maxSeconds = parseRange(
                settings.minSeconds,
                settings.maxSeconds
            )
        except InvalidRangeConfig as e:
            logger.warning(f"Invalid timer range: {e}")
            self.validationFailed.emit(str(e))
            return None

        return self.rng.randint(minSeconds, maxSeconds)

    def _beginCountdown(self, duration: int) -> None:
        self.remainingSeconds = duration
        self.currentDuration = duration

        logger.debug(f"Cycle {self.cycleCount + 1} counting down from {duration}s")

        self.clock.start()
        self.countdownChanged.emit(duration)

    def _onTick(self, elapsed: float = 0.0) -> None:
        """
        one-second tick of the active countdown
        """
        if not self.isRunning:
            return

        self.remainingSeconds = max(0, self.remainingSeconds - 1)

        if self.remainingSeconds > 0:
            self.countdownChanged.emit(self.remainingSeconds)
            return

        self._completeCycle()

    def _completeCycle(self) -> None:
        """
        Fire the effects for the finished cycle and roll straight into the next.
        """
        self.clock.stop()
        generation = self._generation

        bundle: EffectBundle = selectEffects(
            self.config.snapshot(),
            self.rng
        )

        self.cycleCount += 1
        logger.debug(f"Cycle {self.cycleCount} finished: {bundle}")

        self.effectsFired.emit(bundle)

        # a listener may have stopped (or restarted) us while handling the bundle
        if generation != self._generation or not self.isRunning:
            return

        duration = self._drawDuration()

        if duration is None:
            self._generation += 1
            self.state = SchedulerState.IDLE
            self.remainingSeconds = 0
            self.currentDuration = 0

            self.countdownChanged.emit(0)
            self.runningChanged.emit(False)
            return

        self._beginCountdown(duration)
