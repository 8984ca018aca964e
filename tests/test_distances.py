# tests/test_distances.py
"""
Distance metrics: Euclidean and great-circle, precise and comparison modes,
and the same-space requirement.
"""

from __future__ import annotations

import math

import pytest

from kspace import (
    Space, Cluster, EuclideanDistance, GreatCircleDistance,
    InvalidOperationError, SpaceConfigurationError
)
from kspace.distances import EARTH_RADIUS_KM

PARIS = (48.8566, 2.3522)
LONDON = (51.5074, -0.1278)


def test_euclidean_precise_and_squared():
    space = Space(2)
    a = space.new_point([0, 0])
    b = space.new_point([3, 4])

    assert a.distance_to(b) == pytest.approx(5.0)
    assert a.distance_to(b, precise=False) == pytest.approx(25.0)
    assert space.distance(b, a) == pytest.approx(5.0)


def test_euclidean_is_default_metric():
    assert isinstance(Space(4).metric, EuclideanDistance)


def test_distance_to_cluster_uses_centroid():
    space = Space(1)
    point = space.new_point([1])
    cluster = Cluster(space, [4])

    assert point.distance_to(cluster) == pytest.approx(3.0)
    assert cluster.distance_to(point, precise=False) == pytest.approx(9.0)


def test_distance_across_spaces_is_rejected():
    # Same dimension, still two distinct spaces
    a = Space(2).new_point([0, 0])
    b = Space(2).new_point([0, 0])

    with pytest.raises(InvalidOperationError):
        a.distance_to(b)
    with pytest.raises(InvalidOperationError):
        a.space.distance(a, b)


def test_great_circle_identity_and_symmetry():
    earth = Space.earth()
    paris = earth.new_point(PARIS)
    london = earth.new_point(LONDON)

    assert paris.distance_to(paris) == 0.0
    assert paris.distance_to(earth.new_point(PARIS)) == 0.0
    assert paris.distance_to(london) == pytest.approx(london.distance_to(paris))


def test_great_circle_known_distances():
    earth = Space.earth()

    quarter = earth.new_point([0, 0]).distance_to(earth.new_point([0, 90]))
    assert quarter == pytest.approx(math.pi / 2 * EARTH_RADIUS_KM)

    paris_london = earth.new_point(PARIS).distance_to(earth.new_point(LONDON))
    assert paris_london == pytest.approx(343.5, abs=2.0)


def test_great_circle_antipodes_stay_in_acos_domain():
    earth = Space.earth()
    d = earth.new_point([0, 0]).distance_to(earth.new_point([0, 180]))

    assert d == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_great_circle_scaling_and_comparison_mode():
    plain = Space.earth()
    scaled = Space.earth(scaling=2.0)

    d1 = plain.new_point(PARIS).distance_to(plain.new_point(LONDON))
    d2 = scaled.new_point(PARIS).distance_to(scaled.new_point(LONDON))
    squared = plain.new_point(PARIS).distance_to(plain.new_point(LONDON), precise=False)

    assert d2 == pytest.approx(2.0 * d1)
    assert squared == pytest.approx(d1 * d1)


def test_great_circle_requires_two_dimensions():
    with pytest.raises(SpaceConfigurationError):
        Space(3, metric=GreatCircleDistance())

    earth = Space.earth()
    assert earth.dimension == 2
    assert isinstance(earth.metric, GreatCircleDistance)
