"""
GPX input

Reads elevation samples out of GPX files for terrain analysis.
"""

import logging
from typing import List, Tuple

import gpxpy
import gpxpy.gpx

from .models import ElevationSample, samples_from_points

logger = logging.getLogger(__name__)


def extract_points(gpx: gpxpy.gpx.GPX) -> List[Tuple[float, float, float]]:
    """
    Collect (lat, lon, elevation) tuples from a parsed GPX document.

    Track points are used when present, route points otherwise.
    Missing elevation is taken as 0.

    Raises:
        ValueError: If a point lies outside lat [-90, 90] / lon [-180, 180]
    """
    points: List[Tuple[float, float, float]] = []

    for track in gpx.tracks:
        for segment in track.segments:
            for point in segment.points:
                ele = point.elevation if point.elevation else 0
                points.append((point.latitude, point.longitude, ele))

    if not points:
        for route in gpx.routes:
            for point in route.points:
                ele = point.elevation if point.elevation else 0
                points.append((point.latitude, point.longitude, ele))

    for lat, lon, _ in points:
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
            raise ValueError(f"GPX point out of range: lat={lat}, lon={lon}")

    return points


def extract_samples(content: bytes) -> List[ElevationSample]:
    """
    Parse GPX content into elevation samples in file order.

    Args:
        content: GPX file content as bytes

    Returns:
        List of ElevationSample

    Raises:
        ValueError: If GPX is invalid, has no points, or has points
            with out-of-range coordinates
    """
    try:
        gpx = gpxpy.parse(content.decode('utf-8'))
    except (UnicodeDecodeError, gpxpy.gpx.GPXException) as e:
        logger.error(f"Failed to parse GPX: {e}")
        raise ValueError(f"Invalid GPX file: {e}")

    points = extract_points(gpx)
    if not points:
        raise ValueError("GPX file contains no track or route points")

    return samples_from_points(points)
