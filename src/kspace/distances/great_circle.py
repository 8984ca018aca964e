"""
Great-circle distance for geographic coordinates.

Points are (latitude, longitude) pairs in degrees. Distances follow the
spherical law of cosines on a sphere of Earth's mean radius.
"""

import torch

from ..base.interfaces import DistanceMetric
from ..base.data_structures import Point

# Earth mean radius in kilometers
EARTH_RADIUS_KM = 6371.0


class GreatCircleDistance(DistanceMetric):
    """Great-circle distance between two (latitude, longitude) points.

    The coordinate-wise mean used to recompute centroids is not the minimizer
    of spherical distance, so K-means with this metric is not guaranteed to
    converge. Pass ``max_iter`` to ``Space.solve`` when that matters.
    """

    def __init__(self, scaling: float = 1.0):
        """
        Args:
            scaling: Factor applied to the Earth radius
        """
        self.scaling = scaling

    def validate_dimension(self, dimension: int) -> None:
        if dimension != 2:
            raise ValueError(f"Great-circle distance needs (latitude, longitude) points, "
                             f"got dimension {dimension}")

    def compute(self, a: Point, b: Point, precise: bool = True) -> float:
        """Compute the great-circle distance in (scaled) kilometers.

        Args:
            a: First point
            b: Second point
            precise: If False, return the squared distance

        Returns:
            Distance (or squared distance)
        """
        # acos is ill-conditioned near 1, identical points would drift off zero
        if torch.equal(a.coordinates, b.coordinates):
            return 0.0

        lat1, lon1 = torch.deg2rad(a.coordinates)
        lat2, lon2 = torch.deg2rad(b.coordinates)

        cosine = (torch.sin(lat1) * torch.sin(lat2)
                  + torch.cos(lat1) * torch.cos(lat2) * torch.cos(lon2 - lon1))
        # Round-off can push the cosine slightly outside acos' domain
        cosine = torch.clamp(cosine, -1.0, 1.0)

        distance = (self.scaling * torch.acos(cosine) * EARTH_RADIUS_KM).item()

        if precise:
            return distance
        return distance * distance

    def __repr__(self) -> str:
        return f"GreatCircleDistance(scaling={self.scaling})"
