"""Construction errors."""


class MorrisError(Exception):
    """Base class for all errors raised by morrisdoe."""


class InvalidConfiguration(MorrisError, ValueError):
    """A parameter value is not admissible (e.g. a level count <= 1)."""


class DimensionMismatch(MorrisError, ValueError):
    """Levels, pool and domain disagree on the input dimension."""


class OutOfRangeInput(MorrisError, ValueError):
    """A base-point pool has coordinates outside [0, 1]."""


class IndexOutOfRange(MorrisError, IndexError):
    """An orientation column index is not below the dimension."""
