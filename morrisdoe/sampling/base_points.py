"""Base-point strategies: regular grid or space-filling pool."""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np
from numpy.typing import NDArray

from morrisdoe.sampling.random_source import RandomSource

# Slack for 1/step values such as 2.9999999999999996 that stand for an integer
_LEVEL_TOL = 1e-9


class BasePointGenerator(ABC):
    """Supplies the unit-cube anchor point of each trajectory."""

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Input dimension d."""
        ...

    @abstractmethod
    def draw(self, random_source: RandomSource) -> NDArray:
        """
        Draw one base point.

        Args:
            random_source: Source of the uniform integer draws

        Returns:
            Base point in [0, 1]^d, shape (d,)
        """
        ...


class GridBasePoints(BasePointGenerator):
    """Virtual p-level grid described by its per-dimension step."""

    def __init__(self, step: NDArray) -> None:
        self.step = np.asarray(step, dtype=float)
        self.levels = grid_levels(self.step)

    @property
    def dimension(self) -> int:
        return self.step.size

    def draw(self, random_source: RandomSource) -> NDArray:
        """Independent level per dimension, never the top one."""
        x_base = np.zeros(self.dimension)
        for p in range(self.dimension):
            x_base[p] = self.step[p] * random_source.integer(self.levels[p] - 1)
        return x_base


class PoolBasePoints(BasePointGenerator):
    """Uniform draw, with replacement, from a fixed unit-cube sample."""

    def __init__(self, pool: NDArray) -> None:
        self.pool = np.asarray(pool, dtype=float)

    @property
    def dimension(self) -> int:
        return self.pool.shape[1]

    @property
    def size(self) -> int:
        return self.pool.shape[0]

    def draw(self, random_source: RandomSource) -> NDArray:
        return self.pool[random_source.integer(self.size)].copy()


def grid_levels(step: NDArray) -> NDArray:
    """Number of grid levels per dimension: floor(1 + 1/step)."""
    step = np.asarray(step, dtype=float)
    return np.floor(1.0 + 1.0 / step + _LEVEL_TOL).astype(int)


def create_base_point_generator(
    step: NDArray,
    pool: Optional[NDArray] = None,
) -> BasePointGenerator:
    """
    Pick the base-point strategy.

    Args:
        step: Per-dimension unit-cube step (d,)
        pool: Optional unit-cube sample (size, d)

    Returns:
        PoolBasePoints when a non-empty pool is given, GridBasePoints otherwise
    """
    if pool is not None and len(pool) > 0:
        return PoolBasePoints(pool)
    return GridBasePoints(step)
