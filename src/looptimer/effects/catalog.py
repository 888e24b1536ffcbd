from typing import Tuple

# ordered, fixed size: selection only ever refers to these by index
SOUND_CATALOG: Tuple[str, ...] = (
    "sound1.wav",
    "sound2.wav",
    "sound3.wav",
    "sound4.wav",
    "sound5.wav"
)

COLOR_CATALOG: Tuple[str, ...] = (
    "#E53935", # red
    "#43A047", # green
    "#1E88E5", # blue
    "#FDD835", # yellow
    "#8E24AA"  # purple
)

NEUTRAL_COLOR = "#00000000"
FULL_TURN_DEGREES = 360
