"""Morris one-at-a-time trajectory design."""

from typing import Optional, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray
from loguru import logger

from morrisdoe.core.domain import Interval
from morrisdoe.core.errors import DimensionMismatch, InvalidConfiguration
from morrisdoe.experiment.orientation import orientation_column
from morrisdoe.sampling.base_points import BasePointGenerator, create_base_point_generator
from morrisdoe.sampling.pools import as_pool, check_unit_cube
from morrisdoe.sampling.random_source import RandomSource, NumpyRandomSource


# Slack for base points that sit exactly one step below the upper face
_UNIT_TOL = 1e-12


class MorrisExperiment:
    """
    Builds N Morris trajectories of d+1 points each.

    Every trajectory starts at a base point (grid level or pool point), then
    moves one input at a time by one step, in a random input order and with a
    random sign per input. The design is returned in physical coordinates.
    """

    def __init__(
        self,
        step: ArrayLike,
        N: int,
        domain: Optional[Interval] = None,
        pool: Optional[NDArray] = None,
        random_source: Optional[RandomSource] = None,
    ):
        """
        Initialize from an explicit step vector.

        Prefer from_levels / from_pool; this constructor takes the already
        derived state and is what load_experiment uses.

        Args:
            step: Unit-cube step per dimension (d,), all positive
            N: Number of trajectories
            domain: Physical bounds (unit hyper-rectangle if not provided)
            pool: Base points already expressed in [0, 1]^d, shape (size, d)
            random_source: Source of all draws (unseeded numpy if not provided)
        """
        step = np.array(step, dtype=float).reshape(-1)
        if np.any(~np.isfinite(step)) or np.any(step <= 0.0):
            raise InvalidConfiguration(
                f"Step should be finite and positive; step={step.tolist()}"
            )
        if np.any(step > 1.0):
            raise InvalidConfiguration(
                f"Step should not exceed 1; step={step.tolist()}"
            )
        if domain is None:
            domain = Interval.unit(step.size)
        if domain.dimension != step.size:
            raise DimensionMismatch(
                f"Step and interval should be of same size. Here, step's size="
                f"{step.size}, interval's size={domain.dimension}"
            )
        if pool is not None:
            pool = as_pool(pool)
            if pool.shape[1] != step.size:
                raise DimensionMismatch(
                    f"Step and design should have same dimension. Here, design's "
                    f"dimension={pool.shape[1]}, step's size={step.size}"
                )
            pool.setflags(write=False)
        step.setflags(write=False)

        self._step = step
        self._N = _check_trajectory_count(N)
        self._domain = domain
        self._pool = pool
        self._base_points: BasePointGenerator = create_base_point_generator(step, pool)
        self.random_source = (
            random_source if random_source is not None else NumpyRandomSource()
        )

    @classmethod
    def from_levels(
        cls,
        levels: Sequence[int],
        N: int,
        domain: Optional[Interval] = None,
        random_source: Optional[RandomSource] = None,
    ) -> "MorrisExperiment":
        """
        Base points on a regular p-level grid.

        Args:
            levels: Number of levels per dimension, each >= 2
            N: Number of trajectories
            domain: Physical bounds (unit hyper-rectangle if not provided)
            random_source: Source of all draws

        Returns:
            Experiment with step[k] = 1 / (levels[k] - 1)
        """
        levels = np.asarray(levels).reshape(-1)
        if domain is not None and levels.size != domain.dimension:
            raise DimensionMismatch(
                f"Levels and interval should be of same size. Here, level's size="
                f"{levels.size}, interval's size={domain.dimension}"
            )
        step = np.empty(levels.size)
        for k in range(levels.size):
            if levels[k] != np.floor(levels[k]):
                raise InvalidConfiguration(
                    f"Levels should be integers; levels[{k}]={levels[k]}"
                )
            if levels[k] <= 1:
                raise InvalidConfiguration(
                    f"Levels should be at least 2; levels[{k}]={levels[k]}"
                )
            step[k] = 1.0 / (levels[k] - 1.0)

        logger.debug(
            f"[MorrisExperiment] Grid design: levels={levels.tolist()}, N={N}"
        )
        return cls(step, N, domain=domain, random_source=random_source)

    @classmethod
    def from_pool(
        cls,
        pool: ArrayLike,
        N: int,
        domain: Optional[Interval] = None,
        random_source: Optional[RandomSource] = None,
    ) -> "MorrisExperiment":
        """
        Base points drawn from a space-filling design (e.g. an LHS).

        Without a domain the pool must already lie in [0, 1]^d. With a domain
        the pool is given in physical coordinates and is normalized into the
        unit cube once, here.

        Args:
            pool: Sample of shape (size, d)
            N: Number of trajectories
            domain: Physical bounds of the pool and of the design
            random_source: Source of all draws

        Returns:
            Experiment with step[k] = 0.5 / size for every k
        """
        pool = as_pool(pool)
        size, dimension = pool.shape

        if domain is None:
            check_unit_cube(pool)
        else:
            if dimension != domain.dimension:
                raise DimensionMismatch(
                    f"Levels and design should have same dimension. Here, design's "
                    f"dimension={dimension}, interval's size={domain.dimension}"
                )
            pool = domain.to_unit(pool)
            if np.any(pool < 0.0) or np.any(pool > 1.0):
                logger.warning(
                    "[MorrisExperiment] Pool has points outside the interval; "
                    "trajectories anchored there will leave the domain"
                )

        step = np.full(dimension, 0.5 / size)
        logger.debug(
            f"[MorrisExperiment] Pool design: size={size}, dimension={dimension}, N={N}"
        )
        return cls(step, N, domain=domain, pool=pool, random_source=random_source)

    @property
    def dimension(self) -> int:
        """Input dimension d."""
        return self._step.size

    @property
    def N(self) -> int:
        """Number of trajectories."""
        return self._N

    @property
    def size(self) -> int:
        """Number of points in a generated design: N * (d+1)."""
        return self._N * (self.dimension + 1)

    @property
    def step(self) -> NDArray:
        """Unit-cube step per dimension (read-only)."""
        return self._step

    @property
    def domain(self) -> Interval:
        return self._domain

    @property
    def pool(self) -> Optional[NDArray]:
        """Base-point pool in [0, 1]^d (read-only), or None for a grid design."""
        return self._pool

    def generate(self) -> NDArray:
        """
        Draw a fresh design.

        Per trajectory, draws happen in this order: base point, permutation
        of the inputs, one sign per input. Walk step p moves input
        permutation[p], so rows p and p+1 differ in that coordinate only.
        Pool points closer than one step to the upper face walk down from
        x_base - step instead, so the design stays inside the domain.

        Returns:
            Sample of shape (N * (d+1), d), grouped by trajectory
        """
        d = self.dimension
        step = self._step
        lower = self._domain.lower_bound
        delta = self._domain.delta
        sample = np.empty((self.size, d))

        for k in range(self._N):
            x_base = self._base_points.draw(self.random_source)
            # a walk leaving the unit cube is anchored one step lower
            x_base = np.where(x_base + step > 1.0 + _UNIT_TOL, x_base - step, x_base)
            permutation = self.random_source.permutation(d)
            directions = self.random_source.directions(d)

            rows = slice(k * (d + 1), (k + 1) * (d + 1))
            for p in range(d):
                # B * P: column p of B goes to input permutation[p]
                j = int(permutation[p])
                column = orientation_column(p, d)
                sample[rows, j] = (
                    delta[j]
                    * ((column * directions[j] + 1.0) * 0.5 * step[j] + x_base[j])
                    + lower[j]
                )

        logger.debug(
            f"[MorrisExperiment] Generated {self._N} trajectories, "
            f"sample shape={sample.shape}"
        )
        return sample

    def split_trajectories(self, sample: NDArray) -> NDArray:
        """
        View a generated sample trajectory by trajectory.

        Args:
            sample: Output of generate(), shape (N * (d+1), d)

        Returns:
            Array of shape (N, d+1, d)
        """
        sample = np.asarray(sample)
        if sample.shape != (self.size, self.dimension):
            raise DimensionMismatch(
                f"Sample should have shape {(self.size, self.dimension)}; "
                f"got {sample.shape}"
            )
        return sample.reshape(self._N, self.dimension + 1, self.dimension)

    def __repr__(self) -> str:
        mode = "grid" if self._pool is None else f"pool(size={len(self._pool)})"
        return (
            f"class=MorrisExperiment dimension={self.dimension} N={self._N} "
            f"base={mode} step={self._step.tolist()} domain={self._domain!r}"
        )


def _check_trajectory_count(N) -> int:
    if isinstance(N, bool) or not isinstance(N, (int, np.integer)):
        raise InvalidConfiguration(
            f"Number of trajectories should be an integer; got {N!r}"
        )
    if N < 0:
        raise InvalidConfiguration(
            f"Number of trajectories should be non-negative; N={N}"
        )
    return int(N)
