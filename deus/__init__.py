"""
Deus: particle data model

Minimal abstractions for physical particles: a shared capability exposing
a standardized symbol and a creation time, and its concrete variants.

Modules:
    core: Particle capability, concrete particles, duration helpers
    config: Time configuration loaded from YAML
"""

import logging

__version__ = "0.1.0"

from deus.core.particle import Particle
from deus.core.proton import Proton
from deus.core.duration import BIG_BANG_AGE, ZERO
from deus.config import TimeConfig, load_config

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Particle",
    "Proton",
    "BIG_BANG_AGE",
    "ZERO",
    "TimeConfig",
    "load_config",
]
