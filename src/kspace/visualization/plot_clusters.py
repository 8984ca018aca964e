"""
Cluster visualization utilities.

Scatter plots of a 2D space's points coloured by the cluster that owns them,
with the centroids marked on top.
"""

from typing import List, Optional, Sequence
import matplotlib.pyplot as plt
import numpy as np

from ..base.data_structures import Cluster
from ..base.space import Space
from ..distances.great_circle import GreatCircleDistance
from ..utils.metrics import cluster_labels


def plot_space_clusters(space: Space,
                        clusters: Sequence[Cluster],
                        ax: Optional[plt.Axes] = None,
                        colors: Optional[List[str]] = None,
                        alpha: float = 0.7,
                        center_marker: str = 'X',
                        center_size: int = 200,
                        point_size: int = 50,
                        show_legend: bool = True,
                        title: Optional[str] = None) -> plt.Axes:
    """Plot the clusters of a 2D space.

    For geographic spaces the first coordinate (latitude) goes on the y axis
    so the plot reads like a map.

    Args:
        space: 2D space whose points are plotted
        clusters: Clusters returned by ``space.solve``
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centroids
        center_size: Size of centroid markers
        point_size: Size of data points
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if space.dimension != 2:
        raise ValueError(f"Can only plot 2D spaces, got dimension {space.dimension}")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    if colors is None:
        cmap = plt.get_cmap('tab10')
        colors = [cmap(k % 10) for k in range(len(clusters))]

    geographic = isinstance(space.metric, GreatCircleDistance)
    x_axis, y_axis = (1, 0) if geographic else (0, 1)

    if len(space):
        coords = np.array([point.to_list() for point in space.points])
        labels = cluster_labels(space, clusters).numpy()

        for k in range(len(clusters)):
            mask = labels == k
            if not mask.any():
                continue
            ax.scatter(coords[mask, x_axis], coords[mask, y_axis],
                       c=[colors[k % len(colors)]], alpha=alpha, s=point_size,
                       label=f'Cluster {k}')

        unassigned = labels < 0
        if unassigned.any():
            ax.scatter(coords[unassigned, x_axis], coords[unassigned, y_axis],
                       c='lightgray', alpha=alpha, s=point_size, label='Unassigned')

    if clusters:
        centers = np.array([cluster.to_list() for cluster in clusters])
        ax.scatter(centers[:, x_axis], centers[:, y_axis], c='black',
                   marker=center_marker, s=center_size, linewidths=2,
                   label='Centroids')

    if geographic:
        ax.set_xlabel('Longitude')
        ax.set_ylabel('Latitude')
    else:
        ax.set_xlabel('Feature 1')
        ax.set_ylabel('Feature 2')

    if title:
        ax.set_title(title)

    if show_legend and ax.get_legend_handles_labels()[0]:
        ax.legend()

    ax.grid(True, alpha=0.3)

    return ax
