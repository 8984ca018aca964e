"""
Core interfaces for the K-Space clustering engine.

This module defines the abstract base classes that pluggable components must
implement: the distance metric used by a Space and the seeding strategy used
to place the initial clusters.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .data_structures import Point, Cluster
    from .space import Space


class SeedStrategy(str, Enum):
    """Built-in seeding methods for the initial cluster centroids."""

    # centroids sampled at random inside the bounding box of the points
    DEFAULT = 'default'
    # David Arthur and Sergei Vassilvitskii seeding (k-means++)
    DASV = 'dasv'


class DistanceMetric(ABC):
    """Abstract base class for point-to-point distance computations.

    A metric works in two modes. The precise mode returns a true distance.
    The comparison mode returns a monotonic surrogate that is cheaper to
    compute and is only meaningful for ordering (nearest cluster search,
    SSE accumulation, k-means++ weights).
    """

    @abstractmethod
    def compute(self, a: 'Point', b: 'Point', precise: bool = True) -> float:
        """Compute the distance between two points of the same space.

        Args:
            a: First point
            b: Second point
            precise: Return the true distance (True) or the cheaper
                monotonic surrogate (False)

        Returns:
            Scalar distance
        """
        pass

    def validate_dimension(self, dimension: int) -> None:
        """Reject space dimensions this metric is not defined for.

        Raises:
            ValueError: If the metric cannot work in ``dimension`` dimensions
        """
        pass


class InitializationStrategy(ABC):
    """Abstract base class for cluster seeding strategies."""

    @abstractmethod
    def initialize(self, space: 'Space', n_clusters: int) -> List['Cluster']:
        """Create the initial clusters of a space.

        Implementations draw every random number from ``space.generator`` and
        return clusters without members; the space distributes the points.

        Args:
            space: Space holding the points to cluster
            n_clusters: Number of clusters to create

        Returns:
            List of exactly ``n_clusters`` clusters
        """
        pass
