from .config import ConfigController, TimerSettings
from .effects import EffectBundle, selectEffects
from .errors import TimerError, InvalidRangeConfig, EffectResourceFailure
from .scheduler import CycleScheduler, SchedulerState

__version__ = "1.0.0"

__all__ = [
    "ConfigController",
    "TimerSettings",
    "EffectBundle",
    "selectEffects",
    "TimerError",
    "InvalidRangeConfig",
    "EffectResourceFailure",
    "CycleScheduler",
    "SchedulerState"
]
