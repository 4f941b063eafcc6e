"""Morris trajectory generation."""

from morrisdoe.experiment.orientation import orientation_column, orientation_matrix
from morrisdoe.experiment.morris import MorrisExperiment
from morrisdoe.experiment.persistence import (
    to_state,
    from_state,
    save_experiment,
    load_experiment,
)
from morrisdoe.experiment.factory import build_experiment

__all__ = [
    "orientation_column",
    "orientation_matrix",
    "MorrisExperiment",
    "to_state",
    "from_state",
    "save_experiment",
    "load_experiment",
    "build_experiment",
]
