#!/usr/bin/env python3
from .config import ConfigController
from .effects.selector import EffectBundle

from .system.sound import SoundManager
from .scheduler import CycleScheduler
from .presenter import EffectPresenter

from PySide6.QtCore import QCoreApplication, QObject, QTimer

from pathlib import Path
from typing import Optional

import logging
import random
import signal
import sys

logger = logging.getLogger(__name__)

FINISH_DELAY_MS = 1500 # let the last sound ring out before quitting

class LoopingTimerApp(QObject):
    def __init__(
        self,
        configFile: Optional[Path] = None,
        seed: Optional[int] = None,
        maxCycles: Optional[int] = None,
        soundDirectory: Optional[Path] = None
    ) -> None:
        application = QCoreApplication.instance() or QCoreApplication(sys.argv)
        super().__init__()

        self.application = application

        ###################
        # 1) config store #
        ###################
        self.config = ConfigController(configFile, parent=self)

        ########################################
        # 2) scheduler + its randomness source #
        ########################################
        self.rng = random.Random(seed)
        self.scheduler = CycleScheduler(self.config, self.rng, parent=self)

        ##################
        # 3) effect sink #
        ##################
        self.soundManager = SoundManager(self, soundDirectory)
        self.presenter = EffectPresenter(
            self.scheduler,
            self.config,
            self.soundManager,
            self
        )

        #####################
        # 4) loop lifecycle #
        #####################
        self.maxCycles = maxCycles
        self.exitCode = 0
        self.isShuttingDown = False

        self.scheduler.effectsFired.connect(self._onEffectsFired)
        self.scheduler.runningChanged.connect(self._onRunningChanged)

    def _onEffectsFired(self, bundle: EffectBundle) -> None:
        if self.maxCycles is None or self.scheduler.cycleCount < self.maxCycles:
            return

        if self.isShuttingDown:
            return

        logger.info(f"Completed {self.scheduler.cycleCount} cycles, finishing")
        self.isShuttingDown = True

        QTimer.singleShot(FINISH_DELAY_MS, self.shutdown)

    def _onRunningChanged(self, running: bool) -> None:
        # the only way to go idle on our own is a bad range at a cycle boundary
        if running or self.isShuttingDown:
            return

        self.exitCode = 1
        self.shutdown()

    def shutdown(self) -> None:
        self.isShuttingDown = True

        self.scheduler.shutdown()
        self.presenter.shutdown()

        self.application.exit(self.exitCode)

    def startLoop(self) -> int:
        # ctrl+c should just kill us, qt would otherwise swallow it
        signal.signal(signal.SIGINT, signal.SIG_DFL)

        if not self.scheduler.start():
            self.presenter.shutdown()
            return 1

        return self.application.exec()
