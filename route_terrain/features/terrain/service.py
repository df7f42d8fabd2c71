"""
Route classification service.

Orchestrates: Routes API -> Elevation API -> analyze_profile.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from route_terrain.config import settings
from route_terrain.features.google.client import GoogleMapsClient, get_google_client
from route_terrain.shared.terrain import TerrainClass
from .analyzer import analyze_profile
from .models import RouteStats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteClassification:
    """Terrain class and stats for a driving route, plus route metadata."""
    classification: TerrainClass
    stats: RouteStats
    route: dict = field(default_factory=dict)


async def classify_route_elevation(
    origin: str,
    destination: str,
    client: Optional[GoogleMapsClient] = None,
    samples: Optional[int] = None,
) -> RouteClassification:
    """
    Decide whether the driving route between two places is flat, hilly or
    mountainous.

    Args:
        origin: Address or "lat,lng"
        destination: Address or "lat,lng"
        client: Google Maps client (defaults to the configured singleton)
        samples: Elevation samples along the path (default from settings)

    Returns:
        RouteClassification; `route` merges the route's travel advisory
        and localized values (duration, distance, tolls...)

    Raises:
        GoogleMapsError: If either API call fails
    """
    client = client or get_google_client()
    samples = samples or settings.elevation_samples

    route = await client.compute_route(origin, destination)
    logger.info(
        f"Route computed: {origin!r} -> {destination!r} "
        f"({len(route.path)} polyline vertices)"
    )

    elevation_samples = await client.sample_elevations(route.encoded_polyline, samples)
    analysis = analyze_profile(elevation_samples)

    logger.info(
        f"Route classified as {analysis.classification.value}: "
        f"ascent={analysis.stats.total_ascent_m:.0f}m, "
        f"max_grade={analysis.stats.max_grade_percent:.1f}%"
    )

    return RouteClassification(
        classification=analysis.classification,
        stats=analysis.stats,
        route={**route.travel_advisory, **route.localized_values},
    )
