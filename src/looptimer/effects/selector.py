from ..config.validation import parseIntensity
from ..config import TimerSettings

from .catalog import SOUND_CATALOG, COLOR_CATALOG, FULL_TURN_DEGREES

from dataclasses import dataclass
from typing import Any, Optional

import random

@dataclass(frozen=True)
class EffectBundle:
    soundChoice: Optional[int] = None
    colorChoice: Optional[str] = None
    arrowRotationDegrees: Optional[int] = None

    @property
    def isEmpty(self) -> bool:
        return (
            self.soundChoice is None and
            self.colorChoice is None and
            self.arrowRotationDegrees is None
        )

def selectSound(soundIntensity: Any, rng: random.Random) -> Optional[int]:
    """
    Pick a sound catalog index for the given intensity.

    0 means silence, 1 always the first (default) sound, 2..5 a uniform
    pick among the first `soundIntensity` sounds.

    :param soundIntensity: Raw intensity value from the settings
    :param rng: Randomness source
    :return: Catalog index or None
    :rtype: Optional[int]
    """
    intensity = parseIntensity(soundIntensity)

    if not intensity:
        return None

    if intensity == 1:
        return 0

    return rng.randrange(min(intensity, len(SOUND_CATALOG)))

def selectColor(colorIntensity: Any, rng: random.Random) -> Optional[str]:
    """
    Pick a color from the first `colorIntensity` palette entries, or None.
    """
    intensity = parseIntensity(colorIntensity)

    if not intensity:
        return None

    return COLOR_CATALOG[rng.randrange(min(intensity, len(COLOR_CATALOG)))]

def selectArrowRotation(arrowEnabled: bool, rng: random.Random) -> Optional[int]:
    if not arrowEnabled:
        return None

    return rng.randrange(FULL_TURN_DEGREES)

def selectEffects(settings: TimerSettings, rng: random.Random) -> EffectBundle:
    """
    Build the effect bundle fired at the end of a cycle.

    The three choices are independent draws from the same rng, always
    made in the order sound, color, arrow.

    :param settings: Configuration snapshot taken at the cycle boundary
    :type settings: TimerSettings
    :param rng: Randomness source
    :type rng: random.Random
    :return: The bundle for the effect sink
    :rtype: EffectBundle
    """
    return EffectBundle(
        soundChoice=selectSound(settings.soundIntensity, rng),
        colorChoice=selectColor(settings.colorIntensity, rng),
        arrowRotationDegrees=selectArrowRotation(settings.arrowEnabled, rng)
    )
