"""Distance metrics for clustering."""

from .euclidean import EuclideanDistance
from .great_circle import GreatCircleDistance, EARTH_RADIUS_KM

__all__ = [
    'EuclideanDistance',
    'GreatCircleDistance',
    'EARTH_RADIUS_KM'
]
