"""Densest-cluster selection for points of interest."""
from typing import List, Sequence

from app.models.internal_models import PointOfInterest
from app.services.geo import distance

DEFAULT_CLUSTER_RADIUS_KM = 0.5
MIN_CLUSTER_INPUT = 3


def densest_cluster(
    places: Sequence[PointOfInterest],
    radius_km: float = DEFAULT_CLUSTER_RADIUS_KM,
) -> List[PointOfInterest]:
    """
    Return the places within ``radius_km`` of the place with most neighbours.

    Three or fewer places are returned unchanged. The first place reaching the
    highest neighbour count is the centre; it is always part of the result,
    and input order is preserved.
    """
    if len(places) <= MIN_CLUSTER_INPUT:
        return list(places)

    best_center = places[0]
    best_count = -1
    for candidate in places:
        count = sum(
            1 for other in places
            if distance(candidate.coordinate, other.coordinate) <= radius_km
        )
        if count > best_count:
            best_center, best_count = candidate, count

    return [
        p for p in places
        if distance(best_center.coordinate, p.coordinate) <= radius_km
    ]
