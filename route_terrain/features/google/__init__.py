"""
Google Maps Platform client (Routes + Elevation APIs).
"""

from .client import (
    GoogleMapsClient,
    GoogleMapsError,
    RoutesAPIError,
    ElevationAPIError,
    RouteSummary,
    decode_path,
    get_google_client,
)

__all__ = [
    "GoogleMapsClient",
    "GoogleMapsError",
    "RoutesAPIError",
    "ElevationAPIError",
    "RouteSummary",
    "decode_path",
    "get_google_client",
]
