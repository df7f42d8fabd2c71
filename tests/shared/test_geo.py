"""
Tests for shared geographic functions.

Tests the haversine distance and grade calculations.
"""

import typing

import pytest

from route_terrain.features.terrain.models import GeoPoint
from route_terrain.shared.geo import (
    haversine_m,
    distance_between,
    grade_percent,
    EARTH_RADIUS_M,
)


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:
    """Tests for haversine_m function."""

    def test_same_point(self):
        """Distance between same point should be 0."""
        dist = haversine_m(43.0, 76.0, 43.0, 76.0)
        assert dist == 0.0

    def test_known_distance_almaty_astana(self):
        """Test with known distance (Almaty to Astana ~974km)."""
        dist = haversine_m(43.238949, 76.945465, 51.169392, 71.449074)
        assert 950_000 < dist < 1_000_000

    def test_small_distance(self):
        """0.001 degree latitude ≈ 111 meters."""
        dist = haversine_m(0.0, 0.0, 0.001, 0.0)
        assert dist == pytest.approx(111.19, abs=0.01)

    def test_tiny_distance_keeps_precision(self):
        """Sub-meter steps stay positive and proportional."""
        one = haversine_m(45.0, 7.0, 45.000001, 7.0)
        two = haversine_m(45.0, 7.0, 45.000002, 7.0)
        assert one > 0
        assert two == pytest.approx(2 * one, rel=1e-6)

    def test_symmetry(self):
        """Distance A->B should equal B->A."""
        pairs = [
            ((43.0, 76.0), (44.0, 77.0)),
            ((-33.8688, 151.2093), (-37.8136, 144.9631)),
            ((0.0, 179.5), (0.0, -179.5)),
            ((10.0, 20.0), (-10.0, -160.0)),
        ]
        for (lat1, lon1), (lat2, lon2) in pairs:
            assert haversine_m(lat1, lon1, lat2, lon2) == pytest.approx(
                haversine_m(lat2, lon2, lat1, lon1), rel=1e-12
            )

    def test_east_west_distance(self):
        """At equator, 1 degree longitude ≈ 111 km."""
        dist = haversine_m(0.0, 0.0, 0.0, 1.0)
        assert 110_000 < dist < 112_000

    def test_earth_radius_constant(self):
        assert EARTH_RADIUS_M == 6_371_000

    def test_poles(self):
        """North Pole to South Pole is half a circumference."""
        dist = haversine_m(90.0, 0.0, -90.0, 0.0)
        assert dist == pytest.approx(3.141592653589793 * EARTH_RADIUS_M, rel=1e-9)

    def test_antipodal(self):
        """Antipodal points stay finite."""
        dist = haversine_m(10.0, 20.0, -10.0, -160.0)
        assert dist == pytest.approx(3.141592653589793 * EARTH_RADIUS_M, rel=1e-6)

    def test_antimeridian(self):
        """Crossing 180° longitude takes the short way."""
        dist = haversine_m(0.0, 179.0, 0.0, -179.0)
        assert 220_000 < dist < 225_000


class TestDistanceBetween:
    """Tests for distance_between on GeoPoints."""

    def test_matches_haversine(self):
        a = GeoPoint(lat=46.5, lon=8.0)
        b = GeoPoint(lat=46.6, lon=8.1)
        assert distance_between(a, b) == haversine_m(46.5, 8.0, 46.6, 8.1)

    def test_identical_points(self):
        a = GeoPoint(lat=-12.3, lon=45.6)
        assert distance_between(a, a) == 0.0

    def test_symmetric(self):
        a = GeoPoint(lat=51.5, lon=-0.12)
        b = GeoPoint(lat=48.85, lon=2.35)
        assert distance_between(a, b) == pytest.approx(distance_between(b, a), rel=1e-12)

    def test_annotated_with_geopoint(self):
        hints = typing.get_type_hints(distance_between, localns={"GeoPoint": GeoPoint})
        assert hints == {"a": GeoPoint, "b": GeoPoint, "return": float}


# =============================================================================
# Test Grade
# =============================================================================

class TestGradePercent:
    """Tests for grade_percent function."""

    def test_zero_distance(self):
        """Zero distance should return 0 grade."""
        assert grade_percent(100.0, 0.0) == 0.0

    def test_10_percent(self):
        """100m rise over 1km = 10%."""
        assert grade_percent(100.0, 1000.0) == pytest.approx(10.0)

    def test_descent_is_absolute(self):
        """Sign of the elevation change is ignored."""
        assert grade_percent(-50.0, 1000.0) == pytest.approx(5.0)

    def test_flat(self):
        assert grade_percent(0.0, 250.0) == 0.0
