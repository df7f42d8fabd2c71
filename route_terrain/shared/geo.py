"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.
"""
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from route_terrain.features.terrain.models import GeoPoint

# Mean Earth radius (spherical approximation)
EARTH_RADIUS_M = 6_371_000.0


def _central_angle(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """Central angle between two points in radians (haversine form)."""
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(lat1_rad) * math.cos(lat2_rad) *
        math.sin(delta_lon / 2) ** 2
    )
    # Rounding can push `a` a hair past 1 near antipodes
    a = min(a, 1.0)
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def haversine_m(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in meters
    """
    return EARTH_RADIUS_M * _central_angle(lat1, lon1, lat2, lon2)


def distance_between(a: "GeoPoint", b: "GeoPoint") -> float:
    """
    Distance in meters between two GeoPoints.

    Symmetric and exactly 0 for identical points.
    """
    return haversine_m(a.lat, a.lon, b.lat, b.lon)


def grade_percent(elevation_diff_m: float, distance_m: float) -> float:
    """
    Absolute grade between two points as percent.

    Args:
        elevation_diff_m: Elevation difference in meters (sign ignored)
        distance_m: Horizontal distance in meters

    Returns:
        Grade in percent (10.0 = 10%), 0.0 for zero distance
    """
    if distance_m <= 0:
        return 0.0
    return abs(elevation_diff_m) / distance_m * 100
