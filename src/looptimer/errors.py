class TimerError(Exception):
    """
    base class for looping timer errors
    """

class InvalidRangeConfig(TimerError, ValueError):
    """
    the min/max duration bounds are unparseable, negative, or min > max.
    recoverable: fix the configuration and start again.
    """

    def __init__(self, message: str, minValue=None, maxValue=None):
        super().__init__(message)

        self.minValue = minValue
        self.maxValue = maxValue

class EffectResourceFailure(TimerError):
    """
    an effect asset could not be loaded or played. never stops the loop.
    """

    def __init__(self, message: str, soundIndex=None):
        super().__init__(message)

        self.soundIndex = soundIndex
