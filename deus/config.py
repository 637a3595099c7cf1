"""
Configuration module for deus.

Holds the time parameters used when building durations. Values can be
loaded from a YAML file of the form:

    time:
      unit: s
      days_per_year: 365.25
"""

import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Union

import yaml

logger = logging.getLogger(__name__)

# Fixed-length numpy timedelta units, in nanoseconds
UNIT_NANOSECONDS = {
    'W': 604_800 * 10**9,
    'D': 86_400 * 10**9,
    'h': 3_600 * 10**9,
    'm': 60 * 10**9,
    's': 10**9,
    'ms': 10**6,
    'us': 10**3,
    'ns': 1,
}


@dataclass(frozen=True)
class TimeConfig:
    """Time parameters."""
    unit: str = 's'                 # numpy timedelta unit for new durations
    days_per_year: float = 365.25   # Julian year

    def __post_init__(self):
        if not isinstance(self.unit, str) or self.unit not in UNIT_NANOSECONDS:
            raise ValueError(f"Unsupported time unit {self.unit!r}. "
                             f"Available: {list(UNIT_NANOSECONDS.keys())}")
        days = self.days_per_year
        if (isinstance(days, bool) or not isinstance(days, (int, float))
                or not math.isfinite(days) or days <= 0):
            raise ValueError(f"days_per_year must be a finite positive "
                             f"number, got {days!r}")

    @property
    def unit_nanoseconds(self) -> int:
        """Length of one `unit` in nanoseconds."""
        return UNIT_NANOSECONDS[self.unit]


DEFAULT_CONFIG = TimeConfig()


def load_config(path: Union[str, Path]) -> TimeConfig:
    """
    Load time configuration from a YAML file.

    Parameters:
        path: YAML file with an optional top-level `time` mapping

    Returns:
        TimeConfig, with defaults for any missing field
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.debug(f"Empty config {path}, using defaults")
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping, "
                         f"got {type(data).__name__}")

    section = data.get('time')
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ValueError(f"'time' section in {path} must be a mapping")

    known = {f.name for f in fields(TimeConfig)}
    unknown = set(section) - known
    if unknown:
        raise ValueError(f"Unknown time options {sorted(unknown)}. "
                         f"Available: {sorted(known)}")

    config = TimeConfig(**section)
    logger.info(f"Loaded time config from {path}: unit={config.unit}, "
                f"days_per_year={config.days_per_year}")
    return config
