"""
Street geometry lookup client - named ways from the OpenStreetMap Overpass API.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from app.config.settings import OverpassSettings, get_settings
from app.core.exceptions import ExternalSourceError, ResponseParseError
from app.models.internal_models import Coordinate, Segment

logger = logging.getLogger(__name__)

SOURCE = "overpass"


def build_street_query(name: str, center: Coordinate, radius_m: int, timeout_seconds: int) -> str:
    """Overpass QL selecting highway ways named exactly ``name`` near ``center``."""
    escaped = name.replace("\\", "\\\\").replace('"', '\\"')
    return (
        f"[out:json][timeout:{timeout_seconds}];\n"
        f'way["highway"]["name"="{escaped}"]'
        f"(around:{radius_m},{center.lat},{center.lng});\n"
        "out geom;"
    )


class OverpassClient:
    """Client for the Overpass interpreter endpoint."""

    def __init__(
        self,
        settings: Optional[OverpassSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or get_settings().overpass
        self.api_url = self.settings.api_url
        self.timeout = self.settings.timeout_seconds
        self._http_client = http_client

    async def fetch_street_segments(
        self,
        name: str,
        center: Coordinate,
        radius_m: Optional[int] = None,
    ) -> List[Segment]:
        """
        Fetch the raw line fragments of the street called ``name``.

        Fragments come back in whatever order and direction OSM stores them
        and may include a same-named street inside the radius. Ways with
        fewer than two nodes are skipped.

        Raises:
            ExternalSourceError: On transport errors or an unexpected response
        """
        radius_m = radius_m or self.settings.search_radius_m
        query = build_street_query(name, center, radius_m, self.timeout)
        data = await self._post(query)

        elements = data.get("elements")
        if not isinstance(elements, list):
            raise ResponseParseError(SOURCE, "'elements' missing from response", {"street": name})

        segments: List[Segment] = []
        for element in elements:
            if not isinstance(element, dict) or element.get("type") != "way":
                continue
            geometry = element.get("geometry") or []
            try:
                segment = [Coordinate(lat=float(pt["lat"]), lng=float(pt["lon"])) for pt in geometry]
            except (KeyError, TypeError, ValueError) as e:
                raise ResponseParseError(SOURCE, f"malformed way geometry: {e}", {"street": name}) from e
            if len(segment) >= 2:
                segments.append(segment)

        logger.info(f"Fetched {len(segments)} fragments for '{name}'")
        return segments

    async def _post(self, query: str) -> Dict[str, Any]:
        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    self.api_url, data={"data": query}, timeout=self.timeout
                )
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.api_url, data={"data": query})
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
