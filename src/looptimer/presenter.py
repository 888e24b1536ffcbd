from .config import ConfigController, SHOW_COUNTDOWN_PATH
from .effects.catalog import NEUTRAL_COLOR
from .effects.selector import EffectBundle
from .scheduler import CycleScheduler
from .system.sound import SoundManager

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QColor

from dataclasses import dataclass
from typing import Optional

import logging

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class RenderState:
    countdownText: str = ""
    backgroundColor: Optional[str] = None
    arrowVisible: bool = False
    arrowRotation: int = 0
    controlLabel: str = "Start"
    errorMessage: Optional[str] = None

class EffectPresenter(QObject):
    """
    Effect sink: realises scheduler output as audio plus a render state a
    view can bind to.

    The scheduler never touches this object; everything arrives through
    its signals.
    """

    renderChanged = Signal(object)
    errorRaised = Signal(str)

    def __init__(
        self,
        scheduler: CycleScheduler,
        config: ConfigController,
        soundManager: SoundManager,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)

        self.scheduler = scheduler
        self.config = config
        self.soundManager = soundManager

        self.countdown = 0
        self.backgroundColor: Optional[str] = None
        self.arrowVisible = False
        self.arrowRotation = 0
        self.isRunning = scheduler.isRunning
        self.errorMessage: Optional[str] = None

        scheduler.countdownChanged.connect(self.onCountdownChanged)
        scheduler.effectsFired.connect(self.onEffectsFired)
        scheduler.effectsReset.connect(self.onEffectsReset)
        scheduler.validationFailed.connect(self.onValidationFailed)
        scheduler.runningChanged.connect(self.onRunningChanged)

        config.valueChanged.connect(self._onConfigChanged)

    # render state
    @property
    def countdownText(self) -> str:
        if self.countdown <= 0 or not self.config.getShowCountdown():
            return ""

        return str(self.countdown)

    @property
    def controlLabel(self) -> str:
        return "Stop" if self.isRunning else "Start"

    def backgroundQColor(self) -> QColor:
        return QColor(self.backgroundColor or NEUTRAL_COLOR)

    def renderState(self) -> RenderState:
        return RenderState(
            countdownText=self.countdownText,
            backgroundColor=self.backgroundColor,
            arrowVisible=self.arrowVisible,
            arrowRotation=self.arrowRotation,
            controlLabel=self.controlLabel,
            errorMessage=self.errorMessage
        )

    def _publish(self) -> None:
        self.renderChanged.emit(self.renderState())

    # control surface
    def toggle(self) -> None:
        """
        the one start/stop button
        """
        if self.isRunning:
            self.scheduler.stop()
        else:
            self.scheduler.start()

    # scheduler handlers
    def onCountdownChanged(self, remaining: int) -> None:
        self.countdown = remaining

        if remaining > 0:
            logger.debug(f"Countdown: {remaining}")

        self._publish()

    def onEffectsFired(self, bundle: EffectBundle) -> None:
        logger.info(
            f"Effects fired: sound={bundle.soundChoice}, "
            f"color={bundle.colorChoice}, arrow={bundle.arrowRotationDegrees}"
        )

        if bundle.soundChoice is not None:
            self.soundManager.playSound(bundle.soundChoice)

        self.backgroundColor = bundle.colorChoice

        if bundle.arrowRotationDegrees is None:
            self.arrowVisible = False
            self.arrowRotation = 0
        else:
            self.arrowVisible = True
            self.arrowRotation = bundle.arrowRotationDegrees

        self._publish()

    def onEffectsReset(self) -> None:
        self.soundManager.release()

        self.backgroundColor = None
        self.arrowVisible = False
        self.arrowRotation = 0

        self._publish()

    def onValidationFailed(self, message: str) -> None:
        self.errorMessage = message
        self.errorRaised.emit(message)
        self._publish()

    def onRunningChanged(self, running: bool) -> None:
        self.isRunning = running

        if running:
            self.errorMessage = None

        logger.info("Timer running" if running else "Timer stopped")
        self._publish()

    def _onConfigChanged(self, path: str, value) -> None:
        if path == SHOW_COUNTDOWN_PATH:
            self._publish()

    # cleanup
    def shutdown(self) -> None:
        self.soundManager.shutdown()
