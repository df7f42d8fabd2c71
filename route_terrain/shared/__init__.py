"""
Shared utilities (NOT business logic).

Usage:
    from route_terrain.shared import haversine_m, classify_terrain
"""
from .geo import (
    haversine_m,
    distance_between,
    grade_percent,
    EARTH_RADIUS_M,
)
from .terrain import (
    TerrainClass,
    TERRAIN_THRESHOLDS,
    FLAT_MAX_ASCENT_M,
    FLAT_MAX_GRADE_PERCENT,
    HILLY_MAX_ASCENT_M,
    HILLY_MAX_GRADE_PERCENT,
    classify_terrain,
)

__all__ = [
    # geo
    "haversine_m",
    "distance_between",
    "grade_percent",
    "EARTH_RADIUS_M",
    # terrain
    "TerrainClass",
    "TERRAIN_THRESHOLDS",
    "FLAT_MAX_ASCENT_M",
    "FLAT_MAX_GRADE_PERCENT",
    "HILLY_MAX_ASCENT_M",
    "HILLY_MAX_GRADE_PERCENT",
    "classify_terrain",
]
