"""
Places lookup client - text search against the Google Places API.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from app.config.settings import PlacesSettings, get_settings
from app.core.exceptions import ExternalSourceError, ResponseParseError
from app.models.internal_models import Coordinate, PointOfInterest

logger = logging.getLogger(__name__)

SOURCE = "places"
_SUCCESS_STATUSES = ("OK", "ZERO_RESULTS")


class PlacesClient:
    """Client for the Places Text Search endpoint."""

    def __init__(
        self,
        settings: Optional[PlacesSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or get_settings().places
        self.api_url = self.settings.api_url
        self.api_key = self.settings.api_key
        self.timeout = self.settings.timeout_seconds
        self._http_client = http_client

        if not self.api_key:
            logger.warning(
                "Places API key not configured. "
                "Set PLACES_API_KEY in .env file."
            )

    async def search_text(
        self,
        query: str,
        center: Coordinate,
        radius_km: float,
        limit: Optional[int] = None,
        default_category: str = "general",
    ) -> List[PointOfInterest]:
        """
        Search for places matching ``query`` around ``center``.

        Args:
            query: Free-text search, e.g. "Degraves Street cafes"
            center: Search centre
            radius_km: Search radius in kilometers
            limit: Maximum number of places (defaults to settings)
            default_category: Category used when a result carries no types

        Returns:
            Up to ``limit`` points of interest; empty when nothing matched

        Raises:
            ExternalSourceError: On transport errors or a failing API status
        """
        if not self.api_key:
            return []

        limit = limit or self.settings.max_results
        params = {
            "query": query,
            "location": f"{center.lat},{center.lng}",
            "radius": int(radius_km * 1000),
            "key": self.api_key,
        }
        data = await self._get(f"{self.api_url}/place/textsearch/json", params)

        status = data.get("status")
        if status not in _SUCCESS_STATUSES:
            raise ExternalSourceError(
                SOURCE,
                f"API returned status {status}",
                {"query": query, "error_message": data.get("error_message")},
            )

        results = data.get("results", [])
        if not isinstance(results, list):
            raise ResponseParseError(SOURCE, "'results' is not a list", {"query": query})

        places = []
        skipped = 0
        for item in results:
            place = self._parse_place(item, default_category)
            if place is None:
                skipped += 1
                continue
            places.append(place)
            if len(places) >= limit:
                break

        if skipped:
            logger.warning(f"Skipped {skipped} places without a usable location for '{query}'")
        logger.info(f"Found {len(places)} places for '{query}'")
        return places

    async def _get(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, params=params, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url, params=params)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise ExternalSourceError(SOURCE, "request timed out") from e
        except httpx.HTTPError as e:
            raise ExternalSourceError(SOURCE, str(e)) from e

        try:
            data = response.json()
        except ValueError as e:
            raise ResponseParseError(SOURCE, "response is not JSON") from e
        if not isinstance(data, dict):
            raise ResponseParseError(SOURCE, "response is not a JSON object")
        return data

    @staticmethod
    def _parse_place(item: Any, default_category: str) -> Optional[PointOfInterest]:
        """Map one search result to a PointOfInterest; None if it has no usable location."""
        if not isinstance(item, dict):
            return None
        try:
            location = item["geometry"]["location"]
            coordinate = Coordinate(lat=float(location["lat"]), lng=float(location["lng"]))
        except (KeyError, TypeError, ValueError):
            return None

        try:
            rating = float(item["rating"]) if item.get("rating") is not None else None
        except (TypeError, ValueError):
            rating = None

        types = item.get("types")
        if isinstance(types, list) and types and isinstance(types[0], str):
            category = types[0]
        else:
            category = default_category

        opening_hours = item.get("opening_hours")
        open_now = opening_hours.get("open_now") if isinstance(opening_hours, dict) else None

        return PointOfInterest(
            name=str(item.get("name") or "Unknown"),
            coordinate=coordinate,
            category=category,
            rating=rating,
            open_now=open_now if isinstance(open_now, bool) else None,
            address=item.get("formatted_address"),
        )
