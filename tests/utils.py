# tests/utils.py
"""
Small, reusable helpers used across the K-Space test suite.

Functions:
- assert_partition(space, clusters): every point of the space is owned by exactly one cluster.
- payload_groups(clusters): members' payloads per cluster, as sorted tuples.
- perm_invariant_accuracy(y_pred, split_index): best accuracy over label swap for 2-way splits.
- FixedSeeds: initialization strategy placing centroids at given coordinates.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from kspace import Cluster, InitializationStrategy


class FixedSeeds(InitializationStrategy):
    """Seed clusters at predetermined coordinates."""

    def __init__(self, *centroids: Sequence[float]):
        self.centroids = centroids

    def initialize(self, space, n_clusters: int) -> List[Cluster]:
        return [Cluster(space, list(c)) for c in self.centroids[:n_clusters]]


def assert_partition(space, clusters) -> None:
    """Assert the clusters' memberships partition the space's points."""
    owners = {}
    for k, cluster in enumerate(clusters):
        for point in cluster.members:
            assert point not in owners, f"{point!r} owned by clusters {owners[point]} and {k}"
            owners[point] = k

    assert len(owners) == len(space)
    for point in space.points:
        assert point in owners, f"{point!r} lost during clustering"


def payload_groups(clusters) -> List[Tuple]:
    """Sorted payloads of each cluster, in cluster order."""
    return [tuple(sorted(p.payload for p in cluster.members)) for cluster in clusters]


def perm_invariant_accuracy(y_pred: np.ndarray, split_index: int) -> float:
    """
    Best accuracy over label swaps for 2-way synthetic datasets where the
    first `split_index` points belong to class 0 and the rest to class 1.
    """
    y_pred = np.asarray(y_pred)
    if y_pred.ndim != 1:
        raise ValueError(f"y_pred must be 1D, got shape {y_pred.shape}")
    n = y_pred.size
    if not (0 <= split_index <= n):
        raise ValueError(f"split_index must be in [0, {n}], got {split_index}")

    first = y_pred[:split_index]
    second = y_pred[split_index:]

    acc_a = (np.sum(first == 0) + np.sum(second == 1)) / max(1, n)
    acc_b = (np.sum(first == 1) + np.sum(second == 0)) / max(1, n)

    return float(max(acc_a, acc_b))
