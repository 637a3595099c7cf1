"""
Particle capability shared by every particle-like type.

A particle is a size-varied object with a location in both space and time
and a combination of chemical and physical properties. Here it is reduced
to the two queries every variant must answer: its symbol and its time.
"""

from abc import ABC, abstractmethod

import numpy as np


class Particle(ABC):
    """
    Abstract particle.

    Variants implement `symbol` as a classmethod, so it can be queried on
    the class itself and never reads instance state, and `time` as an
    ordinary instance method.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def symbol(cls) -> str:
        """
        Standardized symbol for this particle.

        Follows the nomenclature of the IUPAP commission on Symbols, Units,
        Nomenclature, Atomic Masses and Fundamental Constants (SUNAMCO):
        a Greek letter when one exists, otherwise a Latin-alphabet one.
        """

    @abstractmethod
    def time(self) -> np.timedelta64:
        """Interval between the Big Bang and this particle's existence."""
