from .timings import TickClock, TICK_INTERVAL_MS
from .sound import SoundManager

__all__ = ["TickClock", "TICK_INTERVAL_MS", "SoundManager"]
