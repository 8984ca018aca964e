"""
K-means++ initialization strategy.

Seeding method by David Arthur and Sergei Vassilvitskii: centroids are
chosen among the dataset points, each new one with a probability
proportional to its distance to the closest centroid already chosen.
"""

from typing import Dict, List, TYPE_CHECKING
import torch

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Cluster, Point
from ..utils.sampling import randint_inclusive

if TYPE_CHECKING:
    from ..base.space import Space


class DASVInit(InitializationStrategy):
    """K-means++ seeding over the points of a space.

    Algorithm:
    1. Choose the first centroid uniformly among the points
    2. For each remaining centroid:
       - Compute the comparison distance from each point to its closest
         centroid and sum them
       - Draw an integer r uniformly in [0, int(sum)]
       - Walk the points in space order subtracting their distance from r;
         the first point where r drops to zero or below becomes the centroid

    The walk is deterministic for a fixed draw, so the whole seeding is
    reproducible given the space's generator.
    """

    def initialize(self, space: 'Space', n_clusters: int) -> List[Cluster]:
        """Initialize clusters using K-means++.

        Args:
            space: Space holding the points
            n_clusters: Number of clusters

        Returns:
            List of empty clusters centered on dataset points
        """
        points = space.points
        n_points = len(points)

        if n_points == 0:
            raise ValueError("Cannot seed clusters from a space without points")

        first_idx = torch.randint(n_points, (1,), generator=space.generator).item()
        clusters = [Cluster(space, points[first_idx].coordinates)]

        for _ in range(1, n_clusters):
            distances: Dict[Point, float] = {}
            total = 0.0

            for point in points:
                distance = point.distance_to(point.closest_among(clusters), precise=False)
                distances[point] = distance
                total += distance

            remainder = randint_inclusive(0, int(total), space.generator)

            # Round-off may keep the remainder positive past the last point
            chosen = points[-1]
            for point in points:
                remainder -= distances[point]
                if remainder <= 0:
                    chosen = point
                    break

            clusters.append(Cluster(space, chosen.coordinates))

        return clusters
