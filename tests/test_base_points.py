"""Tests for base-point strategies."""

import numpy as np

from morrisdoe.sampling.base_points import (
    GridBasePoints,
    PoolBasePoints,
    create_base_point_generator,
    grid_levels,
)
from morrisdoe.sampling.random_source import NumpyRandomSource


class ScriptedIntegers:
    """Replays fixed integer draws and records the bounds asked for."""

    def __init__(self, values):
        self.values = list(values)
        self.bounds = []

    def integer(self, k):
        self.bounds.append(k)
        return self.values.pop(0)


def test_grid_levels_from_step():
    """Test level counts recovered from unit-cube steps."""
    step = np.array([1.0, 0.5, 1.0 / 3.0, 0.25])

    assert grid_levels(step).tolist() == [2, 3, 4, 5]


def test_grid_levels_round_trip_many_levels():
    """Test 1/(L-1) maps back to L for many level counts."""
    levels = np.arange(2, 200)
    step = 1.0 / (levels - 1.0)

    assert np.array_equal(grid_levels(step), levels)


def test_grid_draw_never_uses_top_level():
    """Test grid draws exclude the top level of each input."""
    generator = GridBasePoints(np.array([0.5, 0.25]))
    source = ScriptedIntegers([1, 3])

    x_base = generator.draw(source)

    # 3 levels -> draw in [0, 2); 5 levels -> draw in [0, 4)
    assert source.bounds == [2, 4]
    assert np.allclose(x_base, [0.5, 0.75])


def test_grid_draws_stay_below_one_step_from_top():
    """Test grid base points leave room for one step."""
    step = np.array([0.5, 1.0 / 3.0, 1.0])
    generator = GridBasePoints(step)
    source = NumpyRandomSource(seed=3)

    points = np.array([generator.draw(source) for _ in range(300)])

    assert np.all(points >= 0.0)
    assert np.all(points + step <= 1.0 + 1e-12)
    # two-level dimension always anchors at 0
    assert np.all(points[:, 2] == 0.0)


def test_pool_draw_returns_indexed_point():
    """Test pool draws return the indexed pool point."""
    pool = np.array([[0.1, 0.2], [0.3, 0.4], [0.5, 0.6]])
    generator = PoolBasePoints(pool)
    source = ScriptedIntegers([2, 0, 2])

    draws = [generator.draw(source) for _ in range(3)]

    assert source.bounds == [3, 3, 3]
    assert np.array_equal(draws[0], pool[2])
    assert np.array_equal(draws[1], pool[0])
    assert np.array_equal(draws[2], pool[2])


def test_pool_draw_is_a_copy():
    """Test pool draws do not alias the pool."""
    pool = np.array([[0.1, 0.2]])
    generator = PoolBasePoints(pool)

    x_base = generator.draw(ScriptedIntegers([0]))
    x_base[0] = 0.9

    assert pool[0, 0] == 0.1


def test_factory_dispatch():
    """Test strategy selection from step and pool."""
    step = np.array([0.5, 0.5])

    assert isinstance(create_base_point_generator(step), GridBasePoints)
    assert isinstance(create_base_point_generator(step, np.empty((0, 2))), GridBasePoints)
    assert isinstance(
        create_base_point_generator(step, np.array([[0.5, 0.5]])), PoolBasePoints
    )
