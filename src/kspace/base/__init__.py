"""Base classes, data structures and the clustering engine of K-Space."""

from .exceptions import (
    SpaceConfigurationError,
    InvalidOperationError,
    ConvergenceWarning
)

from .interfaces import (
    SeedStrategy,
    DistanceMetric,
    InitializationStrategy
)

from .data_structures import (
    Point,
    Cluster
)

from .space import Space

__all__ = [
    # Errors
    'SpaceConfigurationError',
    'InvalidOperationError',
    'ConvergenceWarning',

    # Interfaces
    'SeedStrategy',
    'DistanceMetric',
    'InitializationStrategy',

    # Data structures
    'Point',
    'Cluster',

    # Engine
    'Space'
]
