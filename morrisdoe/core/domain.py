"""Axis-aligned input domain."""

from dataclasses import dataclass
from functools import cached_property
import numpy as np
from numpy.typing import NDArray, ArrayLike

from morrisdoe.core.errors import DimensionMismatch, InvalidConfiguration


@dataclass(frozen=True)
class Interval:
    """Hyper-rectangle [lower_bound, upper_bound] in physical coordinates."""

    lower_bound: NDArray  # (d,)
    upper_bound: NDArray  # (d,)

    def __post_init__(self):
        lower = np.array(self.lower_bound, dtype=float).reshape(-1)
        upper = np.array(self.upper_bound, dtype=float).reshape(-1)
        if lower.shape != upper.shape:
            raise DimensionMismatch(
                f"Bounds should be of same size. Here, lower bound's size="
                f"{lower.size}, upper bound's size={upper.size}"
            )
        bad = np.flatnonzero(lower > upper)
        if bad.size > 0:
            k = int(bad[0])
            raise InvalidConfiguration(
                f"Lower bound exceeds upper bound; lower_bound[{k}]={lower[k]}, "
                f"upper_bound[{k}]={upper[k]}"
            )
        lower.setflags(write=False)
        upper.setflags(write=False)
        object.__setattr__(self, "lower_bound", lower)
        object.__setattr__(self, "upper_bound", upper)

    @classmethod
    def unit(cls, dimension: int) -> "Interval":
        """Unit hyper-rectangle [0, 1]^d."""
        return cls(np.zeros(dimension), np.ones(dimension))

    @cached_property
    def dimension(self) -> int:
        return self.lower_bound.size

    @cached_property
    def delta(self) -> NDArray:
        """Side lengths upper_bound - lower_bound."""
        return self.upper_bound - self.lower_bound

    def contains(self, points: ArrayLike, atol: float = 1e-12) -> bool:
        """True if every point lies inside the closed interval."""
        points = np.atleast_2d(np.asarray(points, dtype=float))
        return bool(
            np.all(points >= self.lower_bound - atol)
            and np.all(points <= self.upper_bound + atol)
        )

    def to_unit(self, points: ArrayLike) -> NDArray:
        """Map physical points into [0, 1]^d: (x - lower) / delta."""
        if np.any(self.delta <= 0.0):
            raise InvalidConfiguration(
                "Cannot normalize into a domain with a zero-width side; "
                f"delta={self.delta.tolist()}"
            )
        return (np.asarray(points, dtype=float) - self.lower_bound) / self.delta

    def from_unit(self, points: ArrayLike) -> NDArray:
        """Map unit-cube points into physical coordinates: delta * z + lower."""
        return self.delta * np.asarray(points, dtype=float) + self.lower_bound

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return np.array_equal(self.lower_bound, other.lower_bound) and np.array_equal(
            self.upper_bound, other.upper_bound
        )

    def __hash__(self):
        return hash((self.lower_bound.tobytes(), self.upper_bound.tobytes()))

    def __repr__(self) -> str:
        return (
            f"Interval(lower_bound={self.lower_bound.tolist()}, "
            f"upper_bound={self.upper_bound.tolist()})"
        )
