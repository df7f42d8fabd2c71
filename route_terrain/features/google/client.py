"""
Google Maps Platform client.

Fetches the raw input for terrain analysis:
- Routes API: driving route between two addresses (encoded polyline,
  travel advisory, localized values)
- Elevation API: elevation samples spaced evenly along that polyline

No retries: a failed call surfaces as a GoogleMapsError subclass.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import httpx
import polyline

from route_terrain.config import settings
from route_terrain.features.terrain.models import ElevationSample, GeoPoint

logger = logging.getLogger(__name__)

ROUTES_FIELD_MASK = "routes.polyline,routes.travelAdvisory,routes.localizedValues"


# =============================================================================
# Exceptions
# =============================================================================

class GoogleMapsError(Exception):
    """Base Google Maps error."""
    pass


class RoutesAPIError(GoogleMapsError):
    """Routes API returned an error or no route."""
    pass


class ElevationAPIError(GoogleMapsError):
    """Elevation API returned a non-OK status."""
    pass


# =============================================================================
# Results
# =============================================================================

@dataclass
class RouteSummary:
    """First route returned by the Routes API."""
    encoded_polyline: str
    travel_advisory: dict = field(default_factory=dict)
    localized_values: dict = field(default_factory=dict)

    @property
    def path(self) -> List[GeoPoint]:
        return decode_path(self.encoded_polyline)


def decode_path(encoded: str) -> List[GeoPoint]:
    """Decode a Google encoded polyline into points."""
    return [GeoPoint(lat=lat, lon=lon) for lat, lon in polyline.decode(encoded)]


# =============================================================================
# Client
# =============================================================================

# Module-level singleton
_google_client: Optional["GoogleMapsClient"] = None


def get_google_client() -> "GoogleMapsClient":
    """
    Get or create GoogleMapsClient singleton.

    Raises:
        GoogleMapsError: If no API key is configured
    """
    global _google_client
    if _google_client is not None:
        return _google_client
    if not settings.google_maps_api_key:
        raise GoogleMapsError("GOOGLE_MAPS_API_KEY is not configured")
    _google_client = GoogleMapsClient(
        api_key=settings.google_maps_api_key,
        routes_url=settings.routes_api_url,
        elevation_url=settings.elevation_api_url,
        travel_mode=settings.travel_mode,
        timeout=settings.http_timeout,
    )
    logger.info("GoogleMapsClient initialized")
    return _google_client


class GoogleMapsClient:
    """
    Thin async wrapper over the Routes and Elevation APIs.

    `transport` is passed through to httpx (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        api_key: str,
        routes_url: str = "https://routes.googleapis.com/directions/v2:computeRoutes",
        elevation_url: str = "https://maps.googleapis.com/maps/api/elevation/json",
        travel_mode: str = "DRIVE",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.routes_url = routes_url
        self.elevation_url = elevation_url
        self.travel_mode = travel_mode
        self.timeout = timeout
        self._transport = transport

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def compute_route(self, origin: str, destination: str) -> RouteSummary:
        """
        Compute a route between two addresses (or "lat,lng" strings).

        Raises:
            RoutesAPIError: On transport failure, non-2xx, or empty result
        """
        body = {
            "origin": {"address": origin},
            "destination": {"address": destination},
            "travelMode": self.travel_mode,
        }
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": ROUTES_FIELD_MASK,
        }

        try:
            async with self._http() as client:
                response = await client.post(self.routes_url, json=body, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("Routes API request failed: %s", e)
            raise RoutesAPIError(f"Routes API error: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        routes = data.get("routes") or []
        if not response.is_success or not routes:
            message = (data.get("error") or {}).get("message") or response.reason_phrase
            logger.warning(
                f"Routes API error {response.status_code} for "
                f"{origin!r} -> {destination!r}: {message}"
            )
            raise RoutesAPIError(f"Routes API error: {message}")

        route = routes[0]
        encoded = (route.get("polyline") or {}).get("encodedPolyline")
        if not encoded:
            raise RoutesAPIError("Routes API error: route has no polyline")

        return RouteSummary(
            encoded_polyline=encoded,
            travel_advisory=route.get("travelAdvisory") or {},
            localized_values=route.get("localizedValues") or {},
        )

    async def sample_elevations(
        self,
        encoded_path: str,
        samples: int = 256
    ) -> List[ElevationSample]:
        """
        Sample elevations evenly along an encoded polyline.

        Args:
            encoded_path: Google encoded polyline
            samples: Number of samples along the path (2..512)

        Returns:
            ElevationSample list in path order

        Raises:
            ElevationAPIError: On transport failure or status != "OK"
        """
        params = {
            "path": f"enc:{encoded_path}",
            "samples": samples,
            "key": self.api_key,
        }

        try:
            async with self._http() as client:
                response = await client.get(self.elevation_url, params=params)
            data = response.json()
        except httpx.HTTPError as e:
            logger.warning("Elevation API request failed: %s", e)
            raise ElevationAPIError(f"Elevation API error: {e}") from e
        except ValueError as e:
            raise ElevationAPIError(
                f"Elevation API error: HTTP {response.status_code} non-JSON response"
            ) from e
        if not isinstance(data, dict):
            raise ElevationAPIError(
                f"Elevation API error: HTTP {response.status_code} unexpected response"
            )

        status = data.get("status", "UNKNOWN")
        if status != "OK":
            error_message = data.get("error_message", "")
            raise ElevationAPIError(f"Elevation API error: {status} {error_message}".rstrip())

        results = data.get("results", [])
        logger.debug(f"Elevation API returned {len(results)} samples")

        return [
            ElevationSample.at(
                result["location"]["lat"],
                result["location"]["lng"],
                result["elevation"],
            )
            for result in results
        ]
