"""
Terrain analysis module.

Usage:
    from route_terrain.features.terrain import analyze_profile, ElevationSample

Components:
- analyze_profile / ProfileAccumulator: ascent, descent, grades, terrain class
- GeoPoint, ElevationSample, RouteStats, ProfileAnalysis: value types
- extract_samples: GPX bytes -> samples

The Google-backed route service lives in .service (imports the client).
"""

from route_terrain.shared.terrain import TerrainClass, classify_terrain
from .models import (
    GeoPoint,
    ElevationSample,
    RouteStats,
    ProfileAnalysis,
    samples_from_points,
)
from .analyzer import ProfileAccumulator, analyze_profile
from .gpx import extract_samples

__all__ = [
    # Types
    "GeoPoint",
    "ElevationSample",
    "RouteStats",
    "ProfileAnalysis",
    "TerrainClass",
    "samples_from_points",
    # Analysis
    "ProfileAccumulator",
    "analyze_profile",
    "classify_terrain",
    # Inputs
    "extract_samples",
]
