"""
K-Space: K-means clustering of points in a metric space.

This package partitions the points of a Space into K clusters by repeatedly
moving every point to its nearest centroid and every centroid to the mean of
its points, until no point moves. It provides:
- Euclidean and great-circle (geographic) distance metrics
- Bounding-box and K-means++ (DASV) seeding
- A fit/predict KMeans estimator for tensors and arrays

Example usage:
    >>> from kspace import Space, SeedStrategy
    >>>
    >>> space = Space(2, random_state=0)
    >>> for x, y in [(0, 0), (0, 1), (9, 9), (10, 10)]:
    ...     _ = space.add_point([x, y], payload=(x, y))
    >>>
    >>> clusters = space.solve(2, seed=SeedStrategy.DASV)
    >>> [sorted(p.payload for p in c.members) for c in clusters]
"""

__version__ = '0.1.0'

# Core engine
from .base import (
    Space,
    Point,
    Cluster,
    SeedStrategy,
    DistanceMetric,
    InitializationStrategy,
    SpaceConfigurationError,
    InvalidOperationError,
    ConvergenceWarning
)

from .distances import EuclideanDistance, GreatCircleDistance
from .initialization import BoundingBoxInit, DASVInit
from .algorithms.kmeans import KMeans
from .utils.metrics import total_sse, cluster_sizes, cluster_labels, cluster_centers

# Import visualization
from .visualization import plot_space_clusters

__all__ = [
    # Engine
    'Space',
    'Point',
    'Cluster',
    'SeedStrategy',

    # Strategies
    'DistanceMetric',
    'InitializationStrategy',
    'EuclideanDistance',
    'GreatCircleDistance',
    'BoundingBoxInit',
    'DASVInit',

    # Estimator
    'KMeans',

    # Metrics
    'total_sse',
    'cluster_sizes',
    'cluster_labels',
    'cluster_centers',

    # Errors
    'SpaceConfigurationError',
    'InvalidOperationError',
    'ConvergenceWarning',

    # Visualization
    'plot_space_clusters',

    # Version
    '__version__'
]
