"""
Terrain classification for whole routes.

Single source of truth for the flat / hilly / mountainous thresholds.
A route lands in a tier only when BOTH its total ascent and its steepest
grade are below that tier's bounds (strict "<"). Tiers are checked in order,
first match wins.
"""

from enum import Enum


class TerrainClass(str, Enum):
    """Route terrain category."""
    FLAT = "flat"
    HILLY = "hilly"
    MOUNTAINOUS = "mountainous"


FLAT_MAX_ASCENT_M = 100.0
FLAT_MAX_GRADE_PERCENT = 3.0

HILLY_MAX_ASCENT_M = 1000.0
HILLY_MAX_GRADE_PERCENT = 6.0

# Ordered (category, ascent bound, grade bound); anything past these is mountainous
TERRAIN_THRESHOLDS = (
    (TerrainClass.FLAT, FLAT_MAX_ASCENT_M, FLAT_MAX_GRADE_PERCENT),
    (TerrainClass.HILLY, HILLY_MAX_ASCENT_M, HILLY_MAX_GRADE_PERCENT),
)


def classify_terrain(total_ascent_m: float, max_grade_percent: float) -> TerrainClass:
    """
    Classify a route by total ascent and steepest grade.

    Args:
        total_ascent_m: Cumulative ascent in meters
        max_grade_percent: Steepest segment grade in percent

    Returns:
        TerrainClass (e.g. TerrainClass.HILLY)
    """
    for category, max_ascent, max_grade in TERRAIN_THRESHOLDS:
        if total_ascent_m < max_ascent and max_grade_percent < max_grade:
            return category
    return TerrainClass.MOUNTAINOUS
