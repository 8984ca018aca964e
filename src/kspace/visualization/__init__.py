"""Visualization utilities for clustering results."""

from .plot_clusters import plot_space_clusters

__all__ = [
    'plot_space_clusters'
]
