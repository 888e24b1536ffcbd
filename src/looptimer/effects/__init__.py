from .catalog import SOUND_CATALOG, COLOR_CATALOG, NEUTRAL_COLOR
from .selector import EffectBundle, selectEffects, selectSound, selectColor, selectArrowRotation

__all__ = [
    "SOUND_CATALOG",
    "COLOR_CATALOG",
    "NEUTRAL_COLOR",
    "EffectBundle",
    "selectEffects",
    "selectSound",
    "selectColor",
    "selectArrowRotation"
]
