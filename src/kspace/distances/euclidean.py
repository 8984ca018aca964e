"""
Euclidean distance metric for clustering.

The default metric of a Space, and the one for which K-means is guaranteed
to converge.
"""

import torch

from ..base.interfaces import DistanceMetric
from ..base.data_structures import Point


class EuclideanDistance(DistanceMetric):
    """Euclidean distance between two points.

    Computes sum_i (a_i - b_i)^2; the precise mode takes the square root.
    """

    def compute(self, a: Point, b: Point, precise: bool = True) -> float:
        """Compute the Euclidean distance between two points.

        Args:
            a: First point
            b: Second point
            precise: If False, return the squared distance

        Returns:
            Distance (or squared distance)
        """
        diff = a.coordinates - b.coordinates
        squared_distance = torch.dot(diff, diff)

        if precise:
            return torch.sqrt(squared_distance).item()
        return squared_distance.item()

    def __repr__(self) -> str:
        return "EuclideanDistance()"
