"""Configuration record for building a Morris experiment."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence
import numpy as np
from numpy.typing import NDArray

from morrisdoe.core.domain import Interval
from morrisdoe.core.errors import InvalidConfiguration


@dataclass
class MorrisSettings:
    """What the caller chose: base points, bounds, trajectory count, seed."""

    N: int
    levels: Optional[Sequence[int]] = None
    pool: Optional[NDArray] = None          # (size, d) space-filling design
    lower_bound: Optional[Sequence[float]] = None
    upper_bound: Optional[Sequence[float]] = None
    seed: Optional[int] = None

    def __post_init__(self):
        if (self.levels is None) == (self.pool is None):
            raise InvalidConfiguration(
                "Exactly one of 'levels' or 'pool' should be given"
            )
        if (self.lower_bound is None) != (self.upper_bound is None):
            raise InvalidConfiguration(
                "'lower_bound' and 'upper_bound' should be given together"
            )

    @property
    def domain(self) -> Optional[Interval]:
        """Explicit domain, or None for the unit hyper-rectangle."""
        if self.lower_bound is None:
            return None
        return Interval(self.lower_bound, self.upper_bound)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "MorrisSettings":
        """
        Build settings from a plain mapping, e.g. parsed JSON.

        Recognised keys: N, levels, pool, lower_bound, upper_bound, seed.
        Unknown keys are rejected so typos do not pass silently.
        """
        known = {"N", "levels", "pool", "lower_bound", "upper_bound", "seed"}
        unknown = set(mapping) - known
        if unknown:
            raise InvalidConfiguration(
                f"Unknown settings keys: {sorted(unknown)}"
            )
        if "N" not in mapping:
            raise InvalidConfiguration("Missing required setting 'N'")

        pool = mapping.get("pool")
        levels = mapping.get("levels")
        seed = mapping.get("seed")
        return cls(
            N=mapping["N"],
            levels=None if levels is None else [int(level) for level in levels],
            pool=None if pool is None else np.asarray(pool, dtype=float),
            lower_bound=mapping.get("lower_bound"),
            upper_bound=mapping.get("upper_bound"),
            seed=None if seed is None else int(seed),
        )
