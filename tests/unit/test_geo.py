import math

import pytest

from app.models.internal_models import Coordinate
from app.services.geo import (
    centroid,
    distance,
    distance_to_polyline,
    nearest_index,
    polyline_length,
)

FLINDERS = Coordinate(-37.8183, 144.9671)
MELBOURNE_CENTRAL = Coordinate(-37.8102, 144.9628)


def test_distance_is_zero_for_same_point():
    assert distance(FLINDERS, FLINDERS) == 0.0


def test_distance_is_symmetric_and_plausible():
    d = distance(FLINDERS, MELBOURNE_CENTRAL)
    assert d == pytest.approx(distance(MELBOURNE_CENTRAL, FLINDERS))
    assert 0.9 < d < 1.0


def test_distance_along_meridian_matches_arc_length():
    a = Coordinate(-37.0, 145.0)
    b = Coordinate(-38.0, 145.0)
    assert distance(a, b) == pytest.approx(6371 * math.pi / 180)


def test_polyline_length_short_inputs():
    assert polyline_length([]) == 0.0
    assert polyline_length([FLINDERS]) == 0.0


def test_polyline_length_sums_legs():
    mid = Coordinate(-37.8140, 144.9650)
    expected = distance(FLINDERS, mid) + distance(mid, MELBOURNE_CENTRAL)
    assert polyline_length([FLINDERS, mid, MELBOURNE_CENTRAL]) == pytest.approx(expected)


def test_centroid():
    assert centroid([]) is None
    c = centroid([Coordinate(-37.0, 144.0), Coordinate(-38.0, 146.0)])
    assert c == Coordinate(-37.5, 145.0)


def test_nearest_index_and_distance_to_polyline():
    line = [Coordinate(-37.80, 144.96), Coordinate(-37.81, 144.96), Coordinate(-37.82, 144.96)]
    probe = Coordinate(-37.8095, 144.9601)
    assert nearest_index(probe, line) == 1
    assert distance_to_polyline(probe, line) == pytest.approx(distance(probe, line[1]))
    assert distance_to_polyline(probe, []) == math.inf
