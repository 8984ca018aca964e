"""Initialization strategies for clustering."""

from typing import Union

from ..base.interfaces import InitializationStrategy, SeedStrategy
from .random import BoundingBoxInit
from .kmeans_plusplus import DASVInit


def get_initialization_strategy(
        seed: Union[SeedStrategy, str, InitializationStrategy]) -> InitializationStrategy:
    """Resolve a seed strategy name or instance to an initialization strategy.

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(seed, InitializationStrategy):
        return seed

    try:
        seed = SeedStrategy(seed)
    except ValueError:
        raise ValueError(f"Unknown seed strategy: {seed!r}") from None

    if seed is SeedStrategy.DASV:
        return DASVInit()
    return BoundingBoxInit()


__all__ = [
    'BoundingBoxInit',
    'DASVInit',
    'get_initialization_strategy'
]
