"""Cap a polyline's length by trimming it symmetrically around its midpoint."""
from app.models.internal_models import Polyline
from app.services.geo import distance, polyline_length

MAX_LENGTH_KM = 1.2
TARGET_LENGTH_KM = 0.8


def trim_to_length(
    polyline: Polyline,
    max_km: float = MAX_LENGTH_KM,
    target_km: float = TARGET_LENGTH_KM,
) -> Polyline:
    """
    Return ``polyline`` unchanged when it is at most ``max_km`` long, otherwise
    the sub-range reached by walking out from the midpoint index until each
    side has covered half of ``target_km`` or run out of points.
    """
    if polyline_length(polyline) <= max_km:
        return list(polyline)

    half = target_km / 2
    mid = len(polyline) // 2

    left, covered = mid, 0.0
    while left > 0 and covered < half:
        covered += distance(polyline[left - 1], polyline[left])
        left -= 1

    right, covered = mid, 0.0
    while right < len(polyline) - 1 and covered < half:
        covered += distance(polyline[right], polyline[right + 1])
        right += 1

    return polyline[left:right + 1]
