from ..effects.catalog import SOUND_CATALOG
from ..errors import EffectResourceFailure
from ..asset import AssetController

from PySide6.QtMultimedia import QSoundEffect
from PySide6.QtCore import QObject, QUrl, Signal

from typing import Annotated, Callable, Optional
from dataclasses import dataclass
from pathlib import Path

import logging

logger = logging.getLogger(__name__)

@dataclass
class ValueRange:
    minValue: float = 0.0
    maxValue: float = 1.0

VOLUME_RANGE = ValueRange()

def clamp(value: float, rangeValues: ValueRange) -> float:
    return max(rangeValues.minValue, min(rangeValues.maxValue, value))

class SoundManager(QObject):
    """
    plays catalog sounds for fired effects.

    only one effect instance is ever held: the previous one is stopped and
    released before a new one is created.
    """

    mutedSignal = Signal(bool)
    playbackFailed = Signal(str)

    def __init__(
        self,
        parent: Optional[QObject] = None,
        soundDirectory: Optional[Path] = None,
        effectFactory: Optional[Callable[[QObject], QSoundEffect]] = None,
        masterVolume: float = 0.5
    ):
        super().__init__(parent)

        if soundDirectory is not None:
            self.soundAssets = AssetController(root=Path(soundDirectory))
        else:
            self.soundAssets = AssetController("sounds")

        self.effectFactory = effectFactory or QSoundEffect

        self.masterMuted = False
        self.masterVolume = clamp(masterVolume, VOLUME_RANGE)

        self.currentEffect: Optional[QSoundEffect] = None
        self.currentIndex: Optional[int] = None

    # internal methods
    def _getEffectiveVolume(self) -> float:
        if self.masterMuted:
            return 0.0

        return clamp(self.masterVolume, VOLUME_RANGE)

    def _reportFailure(self, error: EffectResourceFailure) -> None:
        logger.error(f"Failed to play sound: {error}")
        self.playbackFailed.emit(str(error))

    def _resolveSound(self, index: int) -> Path:
        """
        Map a catalog index to the asset file on disk.

        :raises EffectResourceFailure: if the index or the file is missing
        """
        if not (0 <= index < len(SOUND_CATALOG)):
            raise EffectResourceFailure(
                f"Sound index {index} is outside the catalog",
                index
            )

        path = self.soundAssets.getAsset(SOUND_CATALOG[index])

        if not path.is_file():
            raise EffectResourceFailure(
                f"Sound asset {path} does not exist",
                index
            )

        return path

    # master mix methods
    @property
    def isMasterMuted(self) -> bool:
        return self.masterMuted

    def setMasterVolume(
        self,
        volume: Annotated[float, VOLUME_RANGE]
    ) -> None:
        self.masterVolume = clamp(volume, VOLUME_RANGE)

        if self.currentEffect is not None:
            self.currentEffect.setVolume(self._getEffectiveVolume())

    def setMasterMuted(self, muted: bool) -> None:
        self.masterMuted = muted
        self.mutedSignal.emit(muted)

        if self.currentEffect is not None:
            self.currentEffect.setVolume(self._getEffectiveVolume())

    def toggleMasterMuted(self) -> None:
        self.setMasterMuted(not self.masterMuted)

    # playback methods
    def isPlaying(self) -> bool:
        return self.currentEffect is not None and self.currentEffect.isPlaying()

    def playSound(self, index: int) -> Optional[QSoundEffect]:
        """
        Play the catalog sound at `index`, replacing any earlier one.

        Returns straight away; playback runs on the Qt side. Failures are
        logged and reported through `playbackFailed`, never raised.

        :param index: Sound catalog index
        :type index: int
        :return: The effect instance now playing, or None on failure
        :rtype: Optional[QSoundEffect]
        """
        self.release()

        try:
            path = self._resolveSound(index)
        except EffectResourceFailure as e:
            self._reportFailure(e)
            return None

        soundInstance = self.effectFactory(self)

        def statusChangeHandler():
            if soundInstance is not self.currentEffect:
                return

            if soundInstance.status() != QSoundEffect.Status.Error:
                return

            self._reportFailure(
                EffectResourceFailure(f"Could not load sound {path.name}", index)
            )
            self.release()

        soundInstance.statusChanged.connect(statusChangeHandler)
        soundInstance.setSource(QUrl.fromLocalFile(str(path)))
        soundInstance.setVolume(self._getEffectiveVolume())

        self.currentEffect = soundInstance
        self.currentIndex = index

        logger.debug(f"Playing sound {index} ({path.name})")
        soundInstance.play()

        return soundInstance

    def release(self) -> None:
        """
        Stop and free the outstanding effect instance, if any.
        """
        soundInstance = self.currentEffect

        if soundInstance is None:
            return

        self.currentEffect = None
        self.currentIndex = None

        soundInstance.stop()
        soundInstance.deleteLater()

    # cleanup
    def shutdown(self) -> None:
        self.release()
