"""Core abstractions for Morris designs."""

from morrisdoe.core.domain import Interval
from morrisdoe.core.errors import (
    MorrisError,
    InvalidConfiguration,
    DimensionMismatch,
    OutOfRangeInput,
    IndexOutOfRange,
)
from morrisdoe.core.settings import MorrisSettings

__all__ = [
    "Interval",
    "MorrisError",
    "InvalidConfiguration",
    "DimensionMismatch",
    "OutOfRangeInput",
    "IndexOutOfRange",
    "MorrisSettings",
]
