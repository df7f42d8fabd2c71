"""
Terrain Routes

Endpoints for analyzing elevation profiles and classifying routes.
"""

import logging
from typing import Optional

from fastapi import APIRouter, UploadFile, File, Depends, HTTPException, Query

from route_terrain.features.google.client import (
    GoogleMapsClient,
    GoogleMapsError,
    get_google_client,
)
from route_terrain.features.terrain import analyze_profile, extract_samples
from route_terrain.features.terrain.service import classify_route_elevation
from route_terrain.features.terrain.schemas import (
    AnalyzeRequest,
    TerrainAnalysisResponse,
    RouteClassificationResponse,
    RouteStatsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

MAX_GPX_BYTES = 20 * 1024 * 1024  # 20MB


def google_client() -> GoogleMapsClient:
    """Configured Google Maps client, 503 when no API key is set."""
    try:
        return get_google_client()
    except GoogleMapsError as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.post("/analyze", response_model=TerrainAnalysisResponse)
async def analyze_samples(request: AnalyzeRequest):
    """Analyze elevation samples given in travel order."""
    analysis = analyze_profile(s.to_sample() for s in request.samples)
    return TerrainAnalysisResponse.from_analysis(analysis)


@router.post("/gpx", response_model=TerrainAnalysisResponse)
async def analyze_gpx(file: UploadFile = File(...)):
    """
    Upload a GPX file and analyze its elevation profile.

    Track points are used when present, route points otherwise.
    """
    if not file.filename or not file.filename.lower().endswith('.gpx'):
        raise HTTPException(status_code=400, detail="Only .gpx files are allowed")

    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if len(content) > MAX_GPX_BYTES:
        raise HTTPException(status_code=400, detail="File too large (max 20MB)")

    try:
        samples = extract_samples(content)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return TerrainAnalysisResponse.from_analysis(analyze_profile(samples))


@router.get("/route", response_model=RouteClassificationResponse)
async def classify_route(
    origin: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
    samples: Optional[int] = Query(default=None, ge=2, le=512),
    client: GoogleMapsClient = Depends(google_client),
):
    """Classify the driving route between two addresses."""
    try:
        result = await classify_route_elevation(
            origin, destination, client=client, samples=samples
        )
    except GoogleMapsError as e:
        logger.error(f"Route classification failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return RouteClassificationResponse(
        origin=origin,
        destination=destination,
        classification=result.classification,
        stats=RouteStatsResponse.from_stats(result.stats),
        route=result.route,
    )
