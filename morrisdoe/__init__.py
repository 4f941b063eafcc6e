"""
Morrisdoe: trajectory designs for Morris one-at-a-time screening.

This library builds the input sample for the Morris elementary-effects method:
- Regular p-level grids or externally supplied space-filling pools as base points
- Random input ordering and perturbation direction per trajectory
- Affine rescaling into bounded, problem-specific coordinates
- Lossless save/load of generator state
"""

__version__ = "0.1.0"

from morrisdoe.core.domain import Interval
from morrisdoe.core.errors import (
    MorrisError,
    InvalidConfiguration,
    DimensionMismatch,
    OutOfRangeInput,
    IndexOutOfRange,
)
from morrisdoe.core.settings import MorrisSettings
from morrisdoe.sampling.random_source import RandomSource, NumpyRandomSource
from morrisdoe.experiment.morris import MorrisExperiment
from morrisdoe.experiment.factory import build_experiment

__all__ = [
    "Interval",
    "MorrisError",
    "InvalidConfiguration",
    "DimensionMismatch",
    "OutOfRangeInput",
    "IndexOutOfRange",
    "MorrisSettings",
    "RandomSource",
    "NumpyRandomSource",
    "MorrisExperiment",
    "build_experiment",
]
