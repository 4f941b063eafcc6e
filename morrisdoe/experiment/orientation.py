"""Orientation matrix of a Morris trajectory, column by column."""

import numpy as np
from numpy.typing import NDArray

from morrisdoe.core.errors import IndexOutOfRange


def orientation_column(p: int, dimension: int) -> NDArray:
    """
    p-th column of the (d+1, d) orientation matrix B.

    Rows 0..p hold -1 (coordinate not moved yet), rows p+1..d hold +1.

    Args:
        p: Column index, 0 <= p < dimension
        dimension: Input dimension d

    Returns:
        Column of shape (d+1,)
    """
    if p < 0 or p >= dimension:
        raise IndexOutOfRange(
            f"Could not build the column; p={p}, dimension={dimension}"
        )
    column = np.ones(dimension + 1)
    column[: p + 1] = -1.0
    return column


def orientation_matrix(dimension: int) -> NDArray:
    """Full orientation matrix B (d+1, d), strictly lower triangular in {-1, +1}."""
    B = np.empty((dimension + 1, dimension))
    for p in range(dimension):
        B[:, p] = orientation_column(p, dimension)
    return B
