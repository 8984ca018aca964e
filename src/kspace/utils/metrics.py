"""
Clustering quality metrics and result summaries.

Helpers that work on the clusters returned by ``Space.solve``.
"""

from typing import Sequence
import torch
from torch import Tensor

from ..base.data_structures import Cluster
from ..base.space import Space


def total_sse(clusters: Sequence[Cluster]) -> float:
    """Sum of squared errors over all clusters (inertia).

    Uses each metric's comparison distance, which is the squared distance
    for both built-in metrics.
    """
    return sum(cluster.sum_of_squared_error() for cluster in clusters)


def cluster_sizes(clusters: Sequence[Cluster]) -> Tensor:
    """(k,) tensor of member counts."""
    return torch.tensor([cluster.size for cluster in clusters], dtype=torch.long)


def cluster_labels(space: Space, clusters: Sequence[Cluster]) -> Tensor:
    """Cluster index of every point of a space.

    Args:
        space: Space whose points are labelled, in insertion order
        clusters: Clusters returned by ``space.solve``

    Returns:
        (n,) long tensor; -1 marks points that belong to no cluster
    """
    index = {}
    for k, cluster in enumerate(clusters):
        for point in cluster.members:
            index[point] = k

    return torch.tensor([index.get(point, -1) for point in space.points], dtype=torch.long)


def cluster_centers(clusters: Sequence[Cluster]) -> Tensor:
    """(k, d) tensor of centroid coordinates."""
    return torch.stack([cluster.coordinates for cluster in clusters])
