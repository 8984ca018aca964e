"""
Space: the container of points and the K-means engine.

A Space owns a set of points of a fixed dimension, the distance metric used
to compare them and the random generator used for seeding. ``solve`` runs
the classic alternating loop: every point moves to its nearest centroid,
then every centroid moves to the mean of its points, until a round moves
no point at all.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union
import numbers
import time
import warnings

import torch
from torch import Tensor

from .data_structures import Point, Cluster
from .exceptions import SpaceConfigurationError, InvalidOperationError, ConvergenceWarning
from .interfaces import DistanceMetric, InitializationStrategy, SeedStrategy
from ..distances.euclidean import EuclideanDistance
from ..distances.great_circle import GreatCircleDistance
from ..initialization import get_initialization_strategy
from ..utils.sampling import randint_inclusive
from ..utils.validation import (
    check_callback, check_max_iter, check_n_clusters, check_random_state
)

IterationCallback = Callable[['Space', List[Cluster]], Any]


class Space:
    """A set of points in a metric space, clustered with K-means.

    Example:
        >>> space = Space(2, random_state=0)
        >>> for x, y in [(0, 0), (0, 1), (10, 10), (10, 11)]:
        ...     _ = space.add_point([x, y])
        >>> clusters = space.solve(2, seed=SeedStrategy.DASV)
    """

    def __init__(self,
                 dimension: int,
                 metric: Optional[DistanceMetric] = None,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 verbose: int = 0):
        """
        Args:
            dimension: Number of coordinates of every point
            metric: Distance metric (Euclidean if None)
            random_state: Seed or generator for every random draw
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
        """
        if (isinstance(dimension, bool) or not isinstance(dimension, numbers.Integral)
                or dimension < 1):
            raise SpaceConfigurationError(
                f"a space dimension must be a positive integer, got {dimension!r}")

        self._dimension = int(dimension)
        self._metric = metric if metric is not None else EuclideanDistance()

        try:
            self._metric.validate_dimension(self._dimension)
        except ValueError as exc:
            raise SpaceConfigurationError(str(exc)) from exc

        self.random_state = random_state
        self.generator = check_random_state(random_state)
        self.verbose = verbose

        self._points: Dict[Point, None] = {}

        # Outcome of the last solve
        self.n_iter_ = 0
        self.converged_ = False

    @classmethod
    def earth(cls, scaling: float = 1.0,
              random_state: Optional[Union[int, torch.Generator]] = None,
              verbose: int = 0) -> 'Space':
        """Space of (latitude, longitude) points in degrees using great-circle distance.

        Args:
            scaling: Factor applied to the Earth radius
        """
        return cls(2, metric=GreatCircleDistance(scaling),
                   random_state=random_state, verbose=verbose)

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def metric(self) -> DistanceMetric:
        return self._metric

    # Points

    def new_point(self, coordinates: Union[Tensor, Sequence[float]], payload: Any = None) -> Point:
        """Create a point of this space without attaching it.

        Raises:
            ValueError: If the number of coordinates differs from the dimension
        """
        return Point(self, coordinates, payload)

    def add_point(self, coordinates: Union[Tensor, Sequence[float]], payload: Any = None) -> Point:
        """Create a point and attach it to this space."""
        return self.attach(self.new_point(coordinates, payload))

    def attach(self, point: Point) -> Point:
        """Attach an existing point. Attaching twice is a no-op."""
        if isinstance(point, Cluster) or not isinstance(point, Point):
            raise InvalidOperationError("can only attach points to spaces")
        if point.space is not self:
            raise InvalidOperationError("can only attach points created by this space")

        self._points[point] = None
        return point

    def detach(self, point: Point) -> Point:
        self._points.pop(point, None)
        return point

    @property
    def points(self) -> Tuple[Point, ...]:
        """Snapshot of the attached points in insertion order."""
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def contains(self, point: Point) -> bool:
        return point in self._points

    # Geometry

    def distance(self, a: Union[Point, Cluster], b: Union[Point, Cluster],
                 precise: bool = True) -> float:
        """Distance between two points (or cluster centroids) of this space.

        Raises:
            InvalidOperationError: If either point belongs to another space
        """
        if isinstance(a, Cluster):
            a = a.centroid
        if isinstance(b, Cluster):
            b = b.centroid

        if not isinstance(a, Point) or not isinstance(b, Point):
            raise InvalidOperationError("distances are only defined between points")
        if a.space is not self or b.space is not self:
            raise InvalidOperationError(
                "can only calculate distances from points in the same space")

        return self._metric.compute(a, b, precise)

    def get_boundaries(self) -> Optional[Tuple[Point, Point]]:
        """Axis-aligned bounding box of the attached points.

        Returns:
            (min_point, max_point), two unattached points, or None if the
            space has no points
        """
        if not self._points:
            return None

        stacked = torch.stack([point.coordinates for point in self._points])
        return (self.new_point(stacked.min(dim=0).values),
                self.new_point(stacked.max(dim=0).values))

    def get_random_point(self, min_point: Point, max_point: Point) -> Point:
        """Unattached point with coordinates drawn uniformly within the given bounds.

        Each coordinate is an integer drawn from [int(min[i]), int(max[i])],
        bounds truncated toward zero and inclusive.
        """
        coordinates = []
        for n in range(self._dimension):
            low, high = int(min_point[n]), int(max_point[n])
            value = randint_inclusive(low, high, self.generator)
            coordinates.append(float(value))

        return self.new_point(coordinates)

    # Clustering

    def solve(self,
              n_clusters: int,
              seed: Union[SeedStrategy, str, InitializationStrategy] = SeedStrategy.DEFAULT,
              iteration_callback: Optional[IterationCallback] = None,
              max_iter: Optional[int] = None) -> List[Cluster]:
        """Partition the points into ``n_clusters`` clusters.

        The callback is called with ``(space, clusters)`` before every
        assignment round, including the final round that finds no movement,
        so it runs ``n_iter_ + 1`` times when the loop converges. Its return
        value is ignored.

        Args:
            n_clusters: Number of clusters K
            seed: Seeding strategy (name, enum member or strategy instance)
            iteration_callback: Observer called before each round
            max_iter: Stop after this many rounds with movement. None (the
                default) iterates until convergence

        Returns:
            The K clusters in seeding order. Some may be empty.
        """
        check_n_clusters(n_clusters)
        check_callback(iteration_callback)
        check_max_iter(max_iter)

        if self.verbose:
            print(f"Initializing {n_clusters} clusters...")

        start_time = time.time()
        clusters = self.initialize_clusters(n_clusters, seed)

        self.n_iter_ = 0
        self.converged_ = False

        while True:
            if iteration_callback is not None:
                iteration_callback(self, clusters)

            iter_start_time = time.time()
            moved = self._iterate(clusters)

            if self.verbose >= 2:
                sse = sum(cluster.sum_of_squared_error() for cluster in clusters)
                iter_time = time.time() - iter_start_time
                print(f"Iteration {self.n_iter_:3d}: moved = {moved:6d}, "
                      f"sse = {sse:.6f} ({iter_time:.3f}s)")

            if not moved:
                self.converged_ = True
                break

            self.n_iter_ += 1
            if max_iter is not None and self.n_iter_ >= max_iter:
                break

        if self.verbose:
            if self.converged_:
                print(f"Converged at iteration {self.n_iter_}")
            print(f"Total solving time: {time.time() - start_time:.3f}s")

        if not self.converged_:
            warnings.warn(f"Failed to converge after {max_iter} iterations",
                          ConvergenceWarning)

        return clusters

    def initialize_clusters(self, n_clusters: int,
                            seed: Union[SeedStrategy, str, InitializationStrategy]
                            = SeedStrategy.DEFAULT) -> List[Cluster]:
        """Seed ``n_clusters`` clusters and attach every point to the first one.

        The first assignment round moves the points to their actual nearest
        cluster.
        """
        check_n_clusters(n_clusters)
        strategy = get_initialization_strategy(seed)

        clusters = strategy.initialize(self, n_clusters)
        if len(clusters) != n_clusters:
            raise RuntimeError(f"{type(strategy).__name__} produced {len(clusters)} "
                               f"clusters, expected {n_clusters}")

        clusters[0].attach_all(self._points)
        return clusters

    def iterate(self, clusters: List[Cluster]) -> bool:
        """Run one assignment round.

        Returns:
            True if at least one point changed cluster
        """
        return self._iterate(clusters) > 0

    def _iterate(self, clusters: List[Cluster]) -> int:
        """Reassign points to their closest cluster and recompute centroids.

        Moves are staged during the scan and applied afterwards so that the
        scan sees the memberships of the previous round only.

        Returns:
            Number of points that changed cluster
        """
        attach: Dict[Cluster, List[Point]] = {}
        detach: Dict[Cluster, List[Point]] = {}
        moved = 0

        for cluster in clusters:
            for point in cluster.members:
                closest = point.closest_among(clusters)

                if closest is not cluster:
                    attach.setdefault(closest, []).append(point)
                    detach.setdefault(cluster, []).append(point)
                    moved += 1

        for cluster, points in attach.items():
            cluster.attach_all(points)

        for cluster, points in detach.items():
            cluster.detach_all(points)

        for cluster in clusters:
            cluster.recompute_centroid()

        return moved

    def __repr__(self) -> str:
        return (f"Space(dimension={self._dimension}, metric={self._metric!r}, "
                f"n_points={len(self._points)})")
