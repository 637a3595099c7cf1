"""Proton: subatomic nucleon with an electric charge of +1 e."""

import numpy as np

from deus.core.particle import Particle


class Proton(Particle):
    """
    Subatomic, nucleon particle with a positive electric charge of +1 e.

    Immutable once created: the only field is set in the constructor and
    attribute assignment raises AttributeError.
    """

    __slots__ = ("_time",)

    def __init__(self, time: np.timedelta64):
        """
        Instantiate a proton.

        Parameters:
            time: Interval between the Big Bang and this particle's existence.
                Stored as given, without validation or conversion.
        """
        object.__setattr__(self, "_time", time)

    @classmethod
    def symbol(cls) -> str:
        # No Greek symbol is standardized for the proton
        return "p"

    def time(self) -> np.timedelta64:
        return self._time

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # Rebuild through the constructor; __setattr__ rejects slot restores
        return (type(self), (self._time,))

    def __eq__(self, other):
        if not isinstance(other, Proton):
            return NotImplemented
        return bool(self._time == other._time)

    def __hash__(self):
        return hash((type(self), self._time))

    def __repr__(self) -> str:
        return f"Proton({self.symbol()}, t={self._time})"


if __name__ == "__main__":
    from deus.core.duration import BIG_BANG_AGE, ZERO, to_years

    print("Creating protons...")

    primordial = Proton(ZERO)
    present = Proton(BIG_BANG_AGE)

    print(f"\n{primordial}")
    print(f"{present}")
    print(f"  Symbol: {Proton.symbol()}")
    print(f"  Age: {to_years(present.time()):.3e} years")
