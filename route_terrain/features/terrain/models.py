"""
Terrain value types.

Plain frozen dataclasses with NO external imports beyond shared,
so the analyzer stays usable without the web stack.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from route_terrain.shared.terrain import TerrainClass


@dataclass(frozen=True)
class GeoPoint:
    """A position in decimal degrees."""
    lat: float
    lon: float

    def __post_init__(self):
        # Caller precondition; only checked when assertions are on
        assert -90.0 <= self.lat <= 90.0, f"latitude out of range: {self.lat}"
        assert -180.0 <= self.lon <= 180.0, f"longitude out of range: {self.lon}"


@dataclass(frozen=True)
class ElevationSample:
    """Elevation (meters, signed) at a point along the route."""
    elevation: float
    location: GeoPoint

    @classmethod
    def at(cls, lat: float, lon: float, elevation: float) -> "ElevationSample":
        return cls(elevation=elevation, location=GeoPoint(lat=lat, lon=lon))


@dataclass(frozen=True)
class RouteStats:
    """
    Statistics computed over a route.

    Grades are absolute (direction-free) percentages; avg_grade_percent is
    weighted by segment distance.
    """
    total_ascent_m: float = 0.0
    total_descent_m: float = 0.0
    max_elevation_m: float = 0.0
    min_elevation_m: float = 0.0
    max_grade_percent: float = 0.0
    avg_grade_percent: float = 0.0

    # Informational
    total_distance_m: float = 0.0
    samples_count: int = 0


@dataclass(frozen=True)
class ProfileAnalysis:
    """RouteStats together with the classification derived from them."""
    stats: RouteStats = field(default_factory=RouteStats)
    classification: TerrainClass = TerrainClass.FLAT


def samples_from_points(
    points: Iterable[Tuple[float, float, float]]
) -> List[ElevationSample]:
    """
    Build samples from (lat, lon, elevation) tuples, keeping order.

    Args:
        points: Iterable of (lat, lon, elevation) tuples

    Returns:
        List of ElevationSample
    """
    return [ElevationSample.at(lat, lon, ele) for lat, lon, ele in points]
