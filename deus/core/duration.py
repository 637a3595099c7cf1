"""
Duration helpers built on numpy.timedelta64.

datetime.timedelta stops at roughly 2.7 million years, well short of the
age of the universe, so particle times are numpy timedeltas.
"""

from fractions import Fraction
from typing import Optional

import numpy as np

from deus.config import DEFAULT_CONFIG, TimeConfig

SECONDS_PER_DAY = 86_400

_INT64_MAX = np.iinfo(np.int64).max

ZERO = np.timedelta64(0, DEFAULT_CONFIG.unit)

# 13.8 billion Julian years
BIG_BANG_AGE = np.timedelta64(435_494_880_000_000_000, 's')


def _whole(value, unit: str) -> np.timedelta64:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"Duration amount must be an integer, "
                        f"got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Duration amount must be non-negative, got {value}")
    return np.timedelta64(int(value), unit)


def microseconds(value: int) -> np.timedelta64:
    """Duration of `value` microseconds."""
    return _whole(value, 'us')


def milliseconds(value: int) -> np.timedelta64:
    """Duration of `value` milliseconds."""
    return _whole(value, 'ms')


def seconds(value: int) -> np.timedelta64:
    """Duration of `value` seconds."""
    return _whole(value, 's')


def zero(config: Optional[TimeConfig] = None) -> np.timedelta64:
    """Zero duration in the configured unit."""
    config = config or DEFAULT_CONFIG
    return np.timedelta64(0, config.unit)


def years(value: float, config: Optional[TimeConfig] = None) -> np.timedelta64:
    """
    Convert years to a duration in the configured unit.

    Parameters:
        value: Amount of years (may be fractional)
        config: Time configuration (DEFAULT_CONFIG if None)

    Returns:
        timedelta64 rounded to the nearest whole unit
    """
    config = config or DEFAULT_CONFIG
    if value < 0:
        raise ValueError(f"Duration amount must be non-negative, got {value}")

    nanoseconds = (Fraction(value) * Fraction(config.days_per_year)
                   * SECONDS_PER_DAY * 10**9)
    amount = round(nanoseconds / config.unit_nanoseconds)
    if amount > _INT64_MAX:
        raise OverflowError(f"{value} years does not fit in "
                            f"timedelta64[{config.unit}]")
    return np.timedelta64(amount, config.unit)


def to_years(duration: np.timedelta64,
             config: Optional[TimeConfig] = None) -> float:
    """Convert a duration to (fractional) years."""
    config = config or DEFAULT_CONFIG
    elapsed = duration / np.timedelta64(1, 's')
    return float(elapsed / (config.days_per_year * SECONDS_PER_DAY))
