"""
Core data structures for the K-Space clustering engine.

A Point is a coordinate vector bound to the Space that created it. A Cluster
pairs a centroid Point with the set of Points currently assigned to it.

Points never define structural equality: two points with identical
coordinates are distinct objects, so dictionaries keyed by Point behave as
identity-keyed, insertion-ordered sets.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union, TYPE_CHECKING
import numbers
import torch
from torch import Tensor

from .exceptions import InvalidOperationError

if TYPE_CHECKING:
    from .space import Space


class Point:
    """Coordinate vector of a Space, optionally carrying a caller payload.

    The payload is never inspected by the clustering logic; it only travels
    with the point so callers can map results back to their own objects.
    """

    __slots__ = ('_space', '_coordinates', '_payload')

    def __init__(self, space: 'Space', coordinates: Union[Tensor, Sequence[float]],
                 payload: Any = None):
        """
        Args:
            space: Space this point belongs to
            coordinates: Exactly ``space.dimension`` real numbers
            payload: Opaque caller data
        """
        coordinates = torch.as_tensor(coordinates, dtype=torch.float64).clone()
        if coordinates.dim() != 1 or coordinates.shape[0] != space.dimension:
            raise ValueError(f"{tuple(coordinates.reshape(-1).tolist())} is not a point "
                             f"of a {space.dimension}-dimensional space")
        self._space = space
        self._coordinates = coordinates
        self._payload = payload

    @property
    def space(self) -> 'Space':
        """Space this point belongs to."""
        return self._space

    @property
    def dimension(self) -> int:
        return self._space.dimension

    @property
    def coordinates(self) -> Tensor:
        """Copy of the (d,) float64 coordinates."""
        return self._coordinates.clone()

    @property
    def payload(self) -> Any:
        return self._payload

    def __getitem__(self, index: int) -> float:
        if (isinstance(index, bool) or not isinstance(index, numbers.Integral)
                or not 0 <= index < self.dimension):
            raise IndexError(f"coordinate index {index!r} out of range for "
                             f"dimension {self.dimension}")
        return self._coordinates[int(index)].item()

    def to_list(self) -> List[float]:
        """Snapshot of the coordinates as Python floats."""
        return self._coordinates.tolist()

    def distance_to(self, other: Union['Point', 'Cluster'], precise: bool = True) -> float:
        """Distance to another point (or cluster centroid) of the same space."""
        return self._space.distance(self, other, precise)

    def closest_among(self, clusters: Iterable['Cluster']) -> Optional['Cluster']:
        """Return the cluster whose centroid is nearest to this point.

        Uses the comparison (non-precise) distance. On ties the first
        cluster reaching the minimum in the given order wins.

        Returns:
            Closest cluster, or None if ``clusters`` is empty
        """
        closest = None
        min_distance = None
        for cluster in clusters:
            distance = self._space.distance(self, cluster.centroid, precise=False)
            if min_distance is None or distance < min_distance:
                min_distance = distance
                closest = cluster
        return closest

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_list()})"


class Cluster:
    """A centroid point owning the set of points currently assigned to it.

    Membership only changes through ``attach``/``detach`` and their bulk
    variants, and the centroid only through ``recompute_centroid``.
    """

    def __init__(self, space: 'Space', coordinates: Union[Tensor, Sequence[float]]):
        """
        Args:
            space: Space the cluster lives in
            coordinates: Initial centroid location
        """
        self._centroid = Point(space, coordinates)
        self._members: Dict[Point, None] = {}

    @property
    def centroid(self) -> Point:
        return self._centroid

    @property
    def space(self) -> 'Space':
        return self._centroid.space

    @property
    def dimension(self) -> int:
        return self._centroid.dimension

    @property
    def coordinates(self) -> Tensor:
        """Centroid coordinates."""
        return self._centroid.coordinates

    def __getitem__(self, index: int) -> float:
        return self._centroid[index]

    def to_list(self) -> List[float]:
        return self._centroid.to_list()

    def distance_to(self, other: Union[Point, 'Cluster'], precise: bool = True) -> float:
        return self._centroid.distance_to(other, precise)

    # Membership

    @property
    def members(self) -> Tuple[Point, ...]:
        """Snapshot of member points in attachment order."""
        return tuple(self._members)

    @property
    def size(self) -> int:
        return len(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def contains(self, point: Point) -> bool:
        return point in self._members

    def _check_attachable(self, point: Any) -> None:
        if isinstance(point, Cluster):
            raise InvalidOperationError("cannot attach a cluster to another")
        if not isinstance(point, Point):
            raise InvalidOperationError(f"can only attach points to clusters, "
                                        f"got {type(point).__name__}")
        if point.space is not self.space:
            raise InvalidOperationError("can only attach points of the cluster's space")

    def attach(self, point: Point) -> Point:
        """Add a point to the membership. Attaching twice is a no-op."""
        self._check_attachable(point)
        self._members[point] = None
        return point

    def detach(self, point: Point) -> Point:
        """Remove a point from the membership if present."""
        self._members.pop(point, None)
        return point

    def attach_all(self, points: Iterable[Point]) -> None:
        """Attach several points; nothing is attached if any point is rejected."""
        points = list(points)
        for point in points:
            self._check_attachable(point)
        for point in points:
            self._members[point] = None

    def detach_all(self, points: Iterable[Point]) -> None:
        for point in points:
            self._members.pop(point, None)

    # Centroid

    def recompute_centroid(self) -> None:
        """Move the centroid to the mean of the members.

        An empty cluster keeps its previous centroid.
        """
        if not self._members:
            return
        stacked = torch.stack([point._coordinates for point in self._members])
        self._centroid = Point(self.space, stacked.mean(dim=0))

    def sum_of_squared_error(self) -> float:
        """Sum of comparison distances from each member to the centroid."""
        sse = 0.0
        for point in self._members:
            sse += self.space.distance(self._centroid, point, precise=False)
        return sse

    def __repr__(self) -> str:
        return f"Cluster(centroid={self.to_list()}, size={self.size})"
