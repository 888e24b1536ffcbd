from ..errors import InvalidRangeConfig

from typing import Any, Optional, Tuple

MAX_INTENSITY = 5

def parseWholeNumber(value: Any) -> Optional[int]:
    """
    Parse a non-negative integer from a stored config value.

    Accepts ints and strings of decimal digits (surrounding whitespace is
    ignored). Booleans, floats, signs and anything else give None.

    :param value: Raw value from the configuration store
    :return: The parsed integer or None
    :rtype: Optional[int]
    """
    if isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value if value >= 0 else None

    if isinstance(value, str):
        text = value.strip()

        if text and text.isascii() and text.isdigit():
            return int(text)

    return None

def parseRange(minValue: Any, maxValue: Any) -> Tuple[int, int]:
    """
    Validate the duration bounds of a cycle.

    :raises InvalidRangeConfig: if either bound is unparseable or min > max
    :return: (minSeconds, maxSeconds)
    """
    minSeconds = parseWholeNumber(minValue)
    maxSeconds = parseWholeNumber(maxValue)

    if minSeconds is None or maxSeconds is None:
        raise InvalidRangeConfig(
            f"Please enter valid min and max values (got min={minValue!r}, max={maxValue!r})",
            minValue,
            maxValue
        )

    if minSeconds > maxSeconds:
        raise InvalidRangeConfig(
            f"Min seconds ({minSeconds}) must not exceed max seconds ({maxSeconds})",
            minValue,
            maxValue
        )

    return minSeconds, maxSeconds

def parseIntensity(value: Any) -> Optional[int]:
    # out of range or garbage means "none", never an error
    intensity = parseWholeNumber(value)

    if intensity is None or intensity > MAX_INTENSITY:
        return None

    return intensity
