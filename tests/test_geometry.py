"""Mini README: Tests for the great-circle geometry helpers.

Covers the haversine distance against a known equatorial reference, its
symmetry and zero cases, and the normalisation of initial headings.
"""

from __future__ import annotations

import math

import pytest

from flightplanner.geometry import EARTH_RADIUS_MILES, great_circle_distance, initial_heading
from flightplanner.models import GeoPoint

SAMPLE_POINTS = [
    GeoPoint(0.0, 0.0),
    GeoPoint(47.449, -122.3093),
    GeoPoint(-33.9461, 151.1772),
    GeoPoint(51.47, -0.4543),
    GeoPoint(89.5, 10.0),
    GeoPoint(-12.5, -179.9),
]


@pytest.mark.parametrize("point", SAMPLE_POINTS)
def test_distance_to_self_is_zero(point: GeoPoint) -> None:
    assert great_circle_distance(point, point) == 0.0


def test_distance_is_symmetric() -> None:
    for first in SAMPLE_POINTS:
        for second in SAMPLE_POINTS:
            forward = great_circle_distance(first, second)
            backward = great_circle_distance(second, first)
            assert forward == pytest.approx(backward, rel=1e-6)


def test_distance_matches_equatorial_reference() -> None:
    """Two points 100 statute miles apart along the equator."""

    span_degrees = math.degrees(100.0 / EARTH_RADIUS_MILES)
    distance = great_circle_distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, span_degrees))
    assert distance == pytest.approx(100.0, abs=1e-6)


def test_ten_degrees_of_longitude_at_equator() -> None:
    distance = great_circle_distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, 10.0))
    assert distance == pytest.approx(690.98, abs=0.05)


def test_antipodal_points_stay_finite() -> None:
    distance = great_circle_distance(GeoPoint(0.0, 0.0), GeoPoint(0.0, 180.0))
    assert not math.isnan(distance)
    assert distance == pytest.approx(math.pi * EARTH_RADIUS_MILES, rel=1e-6)


def test_heading_due_east_and_north() -> None:
    origin = GeoPoint(0.0, 0.0)
    assert initial_heading(origin, GeoPoint(0.0, 10.0)) == pytest.approx(90.0)
    assert initial_heading(origin, GeoPoint(10.0, 0.0)) == pytest.approx(0.0)
    assert initial_heading(origin, GeoPoint(0.0, -10.0)) == pytest.approx(270.0)
    assert initial_heading(origin, GeoPoint(-10.0, 0.0)) == pytest.approx(180.0)


def test_heading_is_within_compass_range() -> None:
    for first in SAMPLE_POINTS:
        for second in SAMPLE_POINTS:
            if first == second:
                continue
            heading = initial_heading(first, second)
            assert 0.0 <= heading < 360.0


def test_heading_is_not_symmetric() -> None:
    seattle = GeoPoint(47.449, -122.3093)
    boston = GeoPoint(42.3643, -71.0052)
    assert initial_heading(seattle, boston) != pytest.approx(initial_heading(boston, seattle))
