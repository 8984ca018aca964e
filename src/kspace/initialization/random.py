"""
Bounding-box initialization strategy.

Places every initial centroid at a random location inside the axis-aligned
bounding box of the space's points.
"""

from typing import List, TYPE_CHECKING

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Cluster

if TYPE_CHECKING:
    from ..base.space import Space


class BoundingBoxInit(InitializationStrategy):
    """Random centroids within the space boundaries.

    Seeds need not coincide with dataset points. Coordinates are sampled as
    integers (see ``Space.get_random_point``). A space without points seeds
    every cluster at the origin.
    """

    def initialize(self, space: 'Space', n_clusters: int) -> List[Cluster]:
        """Initialize clusters at random points of the bounding box.

        Args:
            space: Space holding the points
            n_clusters: Number of clusters

        Returns:
            List of empty clusters
        """
        boundaries = space.get_boundaries()

        if boundaries is None:
            origin = [0.0] * space.dimension
            return [Cluster(space, origin) for _ in range(n_clusters)]

        min_point, max_point = boundaries
        return [
            Cluster(space, space.get_random_point(min_point, max_point).coordinates)
            for _ in range(n_clusters)
        ]
