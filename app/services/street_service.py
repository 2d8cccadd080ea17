"""
Street reconstruction service.

Turns candidate street names into short highlight polylines. Places are
looked up first and the street geometry is fetched around their centroid.
Merged geometry is clipped to where the places sit; without geometry a path
is synthesised from the densest place cluster instead.

Every external lookup failure is contained to the street it belongs to;
a street with no data still yields an (empty) record.
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from app.config.settings import StreetSettings, get_settings
from app.core.exceptions import ExternalSourceError
from app.models.internal_models import (
    CandidateStreet,
    Coordinate,
    PointOfInterest,
    Polyline,
    Segment,
    StreetRecord,
)
from app.services.geo import centroid, distance, distance_to_polyline
from app.services.length_trimmer import trim_to_length
from app.services.overpass_client import OverpassClient
from app.services.place_clusterer import densest_cluster
from app.services.places_client import PlacesClient
from app.services.section_clipper import clip_section
from app.services.segment_merger import merge_segments

logger = logging.getLogger(__name__)

MIN_CLIP_POINTS = 4
MIN_PLACES = 2


class StreetReconstructionService:
    """Builds one StreetRecord per candidate street."""

    def __init__(
        self,
        places_client: Optional[PlacesClient] = None,
        geometry_client: Optional[OverpassClient] = None,
        settings: Optional[StreetSettings] = None,
    ):
        self.places = places_client or PlacesClient()
        self.geometry = geometry_client or OverpassClient()
        self.settings = settings or get_settings().streets

    async def reconstruct_streets(
        self,
        candidates: Sequence[CandidateStreet],
        user_location: Coordinate,
        radius_km: float,
    ) -> List[StreetRecord]:
        """
        Reconstruct all candidates concurrently.

        Returns:
            One record per candidate, sorted by ascending distance from the user
        """
        semaphore = asyncio.Semaphore(self.settings.max_concurrent_streets)

        async def bounded(candidate: CandidateStreet) -> StreetRecord:
            async with semaphore:
                return await self.reconstruct_street(candidate, user_location, radius_km)

        results = await asyncio.gather(
            *(bounded(c) for c in candidates), return_exceptions=True
        )

        records: List[StreetRecord] = []
        for candidate, result in zip(candidates, results):
            if isinstance(result, BaseException):
                logger.error(
                    f"Reconstruction of '{candidate.name}' failed: {result!r}",
                    exc_info=result,
                )
                result = self._empty_record(candidate)
            records.append(result)

        records.sort(key=lambda r: r.distance_km)
        with_geometry = sum(1 for r in records if r.has_geometry)
        logger.info(f"{with_geometry}/{len(records)} streets with geometry")
        return records

    async def reconstruct_street(
        self,
        candidate: CandidateStreet,
        user_location: Coordinate,
        radius_km: float,
    ) -> StreetRecord:
        """Run the full pipeline for a single street."""
        places = await self._fetch_places(candidate, user_location, radius_km)

        center = centroid(p.coordinate for p in places) or user_location
        segments = await self._fetch_segments(candidate, center)
        path = merge_segments(segments)

        nearby_km = self.settings.nearby_place_m / 1000
        nearby = [p for p in places if distance_to_polyline(p.coordinate, path) < nearby_km]
        logger.info(
            f"'{candidate.name}': {len(nearby)}/{len(places)} places near "
            f"{len(path)}-point geometry"
        )

        if len(path) > MIN_CLIP_POINTS and len(nearby) >= MIN_PLACES:
            clipped = clip_section(path, nearby)
            logger.info(
                f"'{candidate.name}': clipped to [{clipped.start_index}, "
                f"{clipped.end_index}] of {len(path)} points"
            )
            path = clipped.path
        elif not path and len(places) >= MIN_PLACES:
            nearby = densest_cluster(places, self.settings.cluster_radius_km)
            path = self._path_through(nearby)
            logger.info(
                f"'{candidate.name}': no geometry, using {len(nearby)}-place cluster"
            )

        path = trim_to_length(path)
        if len(path) < 2:
            path = []

        anchor = path[len(path) // 2] if path else center
        return StreetRecord(
            name=candidate.display_name,
            category=candidate.category,
            distance_km=round(distance(user_location, anchor), 1),
            path=path,
            places=nearby,
        )

    async def _fetch_places(
        self,
        candidate: CandidateStreet,
        user_location: Coordinate,
        radius_km: float,
    ) -> List[PointOfInterest]:
        try:
            return await self.places.search_text(
                candidate.places_query,
                user_location,
                radius_km,
                default_category=candidate.category,
            )
        except ExternalSourceError as e:
            logger.warning(f"Places lookup for '{candidate.name}' failed: {e.message}")
            return []

    async def _fetch_segments(self, candidate: CandidateStreet, center: Coordinate) -> List[Segment]:
        try:
            return await self.geometry.fetch_street_segments(candidate.name, center)
        except ExternalSourceError as e:
            logger.warning(f"Geometry lookup for '{candidate.name}' failed: {e.message}")
            return []

    @staticmethod
    def _path_through(places: Sequence[PointOfInterest]) -> Polyline:
        """Connect places in order of lat + lng; a cheap linear proxy, not a route."""
        ordered = sorted(places, key=lambda p: p.coordinate.lat + p.coordinate.lng)
        return [p.coordinate for p in ordered]

    @staticmethod
    def _empty_record(candidate: CandidateStreet) -> StreetRecord:
        return StreetRecord(
            name=candidate.display_name,
            category=candidate.category,
            distance_km=0.0,
        )


_service: Optional[StreetReconstructionService] = None


def get_street_service() -> StreetReconstructionService:
    """Get the street reconstruction service singleton."""
    global _service
    if _service is None:
        _service = StreetReconstructionService()
    return _service
