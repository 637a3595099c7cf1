"""Core module: Particle capability, particles and durations."""

from deus.core.particle import Particle
from deus.core.proton import Proton

__all__ = ["Particle", "Proton"]
