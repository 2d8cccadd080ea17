"""Great-circle helpers shared by the street pipeline. Distances are in km."""
import math
from typing import Iterable, Optional, Sequence

from app.models.internal_models import Coordinate

EARTH_RADIUS_KM = 6371.0


def distance(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance between two coordinates in kilometers."""
    phi1, phi2 = math.radians(a.lat), math.radians(b.lat)
    dphi = math.radians(b.lat - a.lat)
    dlam = math.radians(b.lng - a.lng)
    h = (
        math.sin(dphi / 2) ** 2 +
        math.cos(phi1) * math.cos(phi2) * math.sin(dlam / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def polyline_length(polyline: Sequence[Coordinate]) -> float:
    """Sum of distances between consecutive points; 0 for fewer than two."""
    return sum(distance(polyline[i], polyline[i + 1]) for i in range(len(polyline) - 1))


def centroid(coordinates: Iterable[Coordinate]) -> Optional[Coordinate]:
    """Arithmetic mean of the coordinates, or None when there are none."""
    points = list(coordinates)
    if not points:
        return None
    return Coordinate(
        lat=sum(p.lat for p in points) / len(points),
        lng=sum(p.lng for p in points) / len(points),
    )


def nearest_index(point: Coordinate, polyline: Sequence[Coordinate]) -> int:
    """Index of the polyline vertex closest to ``point`` (first on ties)."""
    best_index = -1
    best_distance = math.inf
    for i, vertex in enumerate(polyline):
        d = distance(point, vertex)
        if d < best_distance:
            best_index, best_distance = i, d
    return best_index


def distance_to_polyline(point: Coordinate, polyline: Sequence[Coordinate]) -> float:
    """Distance to the closest polyline vertex; infinite for an empty polyline."""
    return min((distance(point, vertex) for vertex in polyline), default=math.inf)
