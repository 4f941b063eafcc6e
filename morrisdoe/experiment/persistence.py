"""Save and reload a MorrisExperiment through a numpy .npz archive."""

import os
from typing import Any, Optional, Union
import numpy as np

from morrisdoe.core.domain import Interval
from morrisdoe.core.errors import InvalidConfiguration
from morrisdoe.experiment.morris import MorrisExperiment
from morrisdoe.sampling.random_source import RandomSource

FORMAT_VERSION = 1

_KEYS = ("format_version", "lower_bound", "upper_bound", "pool", "step", "N")


def to_state(experiment: MorrisExperiment) -> dict[str, Any]:
    """
    Full generator state as plain numpy arrays.

    A grid design stores an empty (0, d) pool.
    """
    d = experiment.dimension
    pool = experiment.pool if experiment.pool is not None else np.empty((0, d))
    return {
        "format_version": np.int64(FORMAT_VERSION),
        "lower_bound": np.array(experiment.domain.lower_bound, dtype=np.float64),
        "upper_bound": np.array(experiment.domain.upper_bound, dtype=np.float64),
        "pool": np.array(pool, dtype=np.float64),
        "step": np.array(experiment.step, dtype=np.float64),
        "N": np.int64(experiment.N),
    }


def from_state(
    state: dict[str, Any],
    random_source: Optional[RandomSource] = None,
) -> MorrisExperiment:
    """Rebuild an experiment from to_state output."""
    missing = [key for key in _KEYS if key not in state]
    if missing:
        raise InvalidConfiguration(f"Saved state is missing {missing}")
    version = int(state["format_version"])
    if version != FORMAT_VERSION:
        raise InvalidConfiguration(
            f"Unsupported format version {version}; expected {FORMAT_VERSION}"
        )

    pool = np.asarray(state["pool"], dtype=np.float64)
    return MorrisExperiment(
        step=np.asarray(state["step"], dtype=np.float64),
        N=int(state["N"]),
        domain=Interval(state["lower_bound"], state["upper_bound"]),
        pool=pool if len(pool) > 0 else None,
        random_source=random_source,
    )


def save_experiment(
    experiment: MorrisExperiment, path: Union[str, os.PathLike]
) -> None:
    """Write the experiment to an uncompressed .npz archive.

    numpy appends ".npz" to a path without that suffix; load_experiment
    does the same, so both accept the bare name.
    """
    np.savez(path, **to_state(experiment))


def load_experiment(
    path: Union[str, os.PathLike],
    random_source: Optional[RandomSource] = None,
) -> MorrisExperiment:
    """
    Read an experiment written by save_experiment.

    Args:
        path: Archive path
        random_source: Source for the reloaded generator's draws

    Returns:
        Experiment whose generate() matches the saved one for the same draws
    """
    path = os.fspath(path)
    if not path.endswith(".npz"):
        path += ".npz"
    with np.load(path, allow_pickle=False) as archive:
        state = {key: archive[key] for key in archive.files}
    return from_state(state, random_source=random_source)
