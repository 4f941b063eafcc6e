"""Randomness and base-point strategies."""

from morrisdoe.sampling.random_source import RandomSource, NumpyRandomSource
from morrisdoe.sampling.base_points import (
    BasePointGenerator,
    GridBasePoints,
    PoolBasePoints,
    create_base_point_generator,
)
from morrisdoe.sampling.pools import latin_hypercube_pool, sobol_pool, check_unit_cube

__all__ = [
    "RandomSource",
    "NumpyRandomSource",
    "BasePointGenerator",
    "GridBasePoints",
    "PoolBasePoints",
    "create_base_point_generator",
    "latin_hypercube_pool",
    "sobol_pool",
    "check_unit_cube",
]
