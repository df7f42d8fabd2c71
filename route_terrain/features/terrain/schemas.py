"""
Terrain analysis schemas.

Pydantic models for terrain API requests and responses.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from route_terrain.shared.terrain import TerrainClass
from .models import ElevationSample, ProfileAnalysis, RouteStats


# === Request Models ===

class SampleInput(BaseModel):
    """Single elevation sample along a route."""
    elevation: float
    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)

    def to_sample(self) -> ElevationSample:
        return ElevationSample.at(self.lat, self.lon, self.elevation)


class AnalyzeRequest(BaseModel):
    """Samples in travel order."""
    samples: List[SampleInput] = Field(default_factory=list)


# === Response Models ===

class RouteStatsResponse(BaseModel):
    """Route statistics."""
    total_ascent_m: float
    total_descent_m: float
    max_elevation_m: float
    min_elevation_m: float
    max_grade_percent: float
    avg_grade_percent: float
    total_distance_m: float
    samples_count: int

    @classmethod
    def from_stats(cls, stats: RouteStats) -> "RouteStatsResponse":
        return cls(
            total_ascent_m=stats.total_ascent_m,
            total_descent_m=stats.total_descent_m,
            max_elevation_m=stats.max_elevation_m,
            min_elevation_m=stats.min_elevation_m,
            max_grade_percent=stats.max_grade_percent,
            avg_grade_percent=stats.avg_grade_percent,
            total_distance_m=stats.total_distance_m,
            samples_count=stats.samples_count,
        )


class TerrainAnalysisResponse(BaseModel):
    """Result of analyzing a sample sequence."""
    classification: TerrainClass
    stats: RouteStatsResponse

    @classmethod
    def from_analysis(cls, analysis: ProfileAnalysis) -> "TerrainAnalysisResponse":
        return cls(
            classification=analysis.classification,
            stats=RouteStatsResponse.from_stats(analysis.stats),
        )


class RouteClassificationResponse(TerrainAnalysisResponse):
    """Terrain analysis of a driving route, with route metadata."""
    origin: str
    destination: str
    route: Dict[str, Any] = Field(default_factory=dict)
