"""Uniform discrete random source."""

from typing import Optional, Protocol
import numpy as np
from numpy.typing import NDArray


class RandomSource(Protocol):
    """
    Protocol for the draws a Morris design needs.
    The only source of randomness; swap in a scripted one for testing.
    """

    def integer(self, k: int) -> int:
        """
        Draw an integer uniformly from [0, k).

        Args:
            k: Exclusive upper bound, k >= 1

        Returns:
            Integer in [0, k)
        """
        ...

    def permutation(self, d: int) -> NDArray:
        """
        Draw a uniformly random permutation of range(d).

        Args:
            d: Number of elements

        Returns:
            Integer array of shape (d,)
        """
        ...

    def directions(self, d: int) -> NDArray:
        """
        Draw d independent signs from {+1, -1} with equal probability.

        Args:
            d: Number of draws

        Returns:
            Float array of shape (d,) with entries +1.0 or -1.0
        """
        ...


class NumpyRandomSource:
    """numpy.random.Generator implementation of the random source."""

    _SIGNS = np.array([1.0, -1.0])

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def integer(self, k: int) -> int:
        return int(self._rng.integers(k))

    def permutation(self, d: int) -> NDArray:
        return self._rng.permutation(d)

    def directions(self, d: int) -> NDArray:
        return self._SIGNS[self._rng.integers(2, size=d)]

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed})"
