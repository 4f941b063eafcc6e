"""Space-filling pools of base points."""

from typing import Optional
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.stats import qmc

from morrisdoe.core.errors import InvalidConfiguration, OutOfRangeInput


def latin_hypercube_pool(
    size: int, dimension: int, seed: Optional[int] = None
) -> NDArray:
    """
    Latin hypercube sample in [0, 1]^d.

    Args:
        size: Number of pool points
        dimension: Input dimension d
        seed: Seed for scipy's sampler

    Returns:
        Pool of shape (size, dimension)
    """
    sampler = qmc.LatinHypercube(d=dimension, seed=seed)
    return sampler.random(n=size)


def sobol_pool(size: int, dimension: int, seed: Optional[int] = None) -> NDArray:
    """Scrambled Sobol' sample in [0, 1]^d; size should be a power of 2."""
    sampler = qmc.Sobol(d=dimension, scramble=True, seed=seed)
    return sampler.random(n=size)


def as_pool(pool: ArrayLike) -> NDArray:
    """Validate shape: a non-empty 2-D float array (size, d)."""
    pool = np.array(pool, dtype=float)
    if pool.ndim != 2:
        raise InvalidConfiguration(
            f"Pool should be a 2-D array of points; got ndim={pool.ndim}"
        )
    if pool.shape[0] == 0:
        raise InvalidConfiguration("Pool should contain at least one point")
    return pool


def check_unit_cube(pool: NDArray) -> None:
    """Raise OutOfRangeInput unless every coordinate lies in [0, 1]."""
    if pool.size == 0:
        return
    x_min = pool.min(axis=0)
    x_max = pool.max(axis=0)
    for k in range(pool.shape[1]):
        if x_min[k] < 0.0 or x_max[k] > 1.0:
            raise OutOfRangeInput(
                f"Given design is not in [0,1]^d. xMin[{k}]={x_min[k]}, "
                f"xMax[{k}]={x_max[k]}"
            )
