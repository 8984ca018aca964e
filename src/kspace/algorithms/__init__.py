"""Clustering estimators built on the K-Space engine."""

from .kmeans import KMeans

__all__ = [
    'KMeans'
]
