"""Street highlight endpoints."""
import logging

from fastapi import APIRouter, Depends

from app.config.settings import get_settings
from app.core.metrics_streets import record_geometry_coverage, record_street_latency
from app.core.validation import validate_radius
from app.schemas.base import Envelope
from app.schemas.street import StreetListResponse, StreetRead, StreetsRequest
from app.services.street_service import StreetReconstructionService, get_street_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["streets"])


@router.post("/streets", response_model=Envelope[StreetListResponse])
async def reconstruct_streets(
    request: StreetsRequest,
    service: StreetReconstructionService = Depends(get_street_service),
):
    """
    Build highlight geometry for each candidate street.

    Always answers with one record per candidate, sorted by distance from
    the user; streets whose lookups failed come back with an empty path.
    """
    radius_km = validate_radius(request.radius_km or get_settings().streets.default_radius_km)
    candidates = [s.to_candidate() for s in request.streets]

    with record_street_latency():
        records = await service.reconstruct_streets(
            candidates, request.user_location.to_coordinate(), radius_km
        )

    with_geometry = sum(1 for r in records if r.has_geometry)
    record_geometry_coverage(len(records), with_geometry)

    payload = StreetListResponse(
        streets=[StreetRead.from_record(r) for r in records],
        total=len(records),
        with_geometry=with_geometry,
    )
    return Envelope[StreetListResponse](status="ok", data=payload, error=None)
