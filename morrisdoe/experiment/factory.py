"""Experiment factory and dispatch logic."""

from morrisdoe.core.settings import MorrisSettings
from morrisdoe.experiment.morris import MorrisExperiment
from morrisdoe.sampling.random_source import NumpyRandomSource


def build_experiment(settings: MorrisSettings) -> MorrisExperiment:
    """
    Pick the construction mode from what the settings provide.

    Args:
        settings: Levels or pool, optional bounds, N, optional seed

    Returns:
        MorrisExperiment drawing from NumpyRandomSource(settings.seed)
    """
    random_source = NumpyRandomSource(settings.seed)

    if settings.levels is not None:
        return MorrisExperiment.from_levels(
            settings.levels,
            settings.N,
            domain=settings.domain,
            random_source=random_source,
        )

    return MorrisExperiment.from_pool(
        settings.pool,
        settings.N,
        domain=settings.domain,
        random_source=random_source,
    )
