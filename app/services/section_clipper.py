"""
Narrow a street polyline to the stretch where its places actually sit.

Long streets looked up by name can run for kilometres while the interesting
part is a few blocks. Places further than ``RELEVANCE_THRESHOLD_KM`` from every
vertex are ignored; the rest are snapped to their nearest vertex and the
polyline is cut to the spanned index range plus a small buffer.
"""
import logging
from typing import List, Sequence

from app.models.internal_models import ClipResult, PointOfInterest, Polyline
from app.services.geo import distance_to_polyline, nearest_index

logger = logging.getLogger(__name__)

RELEVANCE_THRESHOLD_KM = 0.15
BUFFER_FRACTION = 0.03
MIN_BUFFER = 2
MAX_BUFFER = 5


def filter_relevant_places(
    polyline: Sequence,
    places: Sequence[PointOfInterest],
    threshold_km: float = RELEVANCE_THRESHOLD_KM,
) -> List[PointOfInterest]:
    """Keep places strictly closer than ``threshold_km`` to some polyline vertex."""
    return [
        p for p in places
        if distance_to_polyline(p.coordinate, polyline) < threshold_km
    ]


def buffer_size(point_count: int) -> int:
    """Vertices kept either side of the place span: 3% of the line, within [2, 5]."""
    return max(MIN_BUFFER, min(MAX_BUFFER, int(BUFFER_FRACTION * point_count)))


def clip_section(
    polyline: Polyline,
    places: Sequence[PointOfInterest],
    threshold_km: float = RELEVANCE_THRESHOLD_KM,
) -> ClipResult:
    """
    Clip ``polyline`` to the index range covering the relevant places.

    With fewer than two relevant places the polyline is returned whole. The
    result is always a contiguous slice of the input, so it never gains or
    reorders points.
    """
    relevant = filter_relevant_places(polyline, places, threshold_km)
    last = len(polyline) - 1
    if len(relevant) < 2:
        return ClipResult(path=list(polyline), relevant_places=relevant,
                          start_index=0, end_index=last)

    indices = [nearest_index(p.coordinate, polyline) for p in relevant]
    buffer = buffer_size(len(polyline))
    start = max(0, min(indices) - buffer)
    end = min(last, max(indices) + buffer)

    logger.debug(
        f"Clipped {len(polyline)} points to [{start}, {end}] "
        f"using {len(relevant)} places (buffer {buffer})"
    )
    return ClipResult(path=polyline[start:end + 1], relevant_places=relevant,
                      start_index=start, end_index=end)
