"""
Stitch disconnected street fragments into one polyline.

The merge is a greedy nearest-endpoint chain builder: starting from the first
fragment, each round attaches whichever remaining fragment has an endpoint
closest to either end of the path built so far, flipping it when needed. It
does not backtrack, so the result is not a globally shortest ordering. Ties
go to the first fragment (and first endpoint pairing) encountered.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from app.models.internal_models import Polyline, Segment
from app.services.geo import distance

logger = logging.getLogger(__name__)


def _best_attachment(path: Polyline, remaining: List[Segment]) -> Tuple[int, bool, bool]:
    """Return (segment index, attach at tail, reverse segment) for the closest join."""
    path_head, path_tail = path[0], path[-1]
    best: Optional[Tuple[float, int, bool, bool]] = None
    for i, segment in enumerate(remaining):
        head, tail = segment[0], segment[-1]
        options = (
            (distance(head, path_tail), True, False),
            (distance(tail, path_tail), True, True),
            (distance(tail, path_head), False, False),
            (distance(head, path_head), False, True),
        )
        for d, at_tail, reverse in options:
            if best is None or d < best[0]:
                best = (d, i, at_tail, reverse)
    _, index, at_tail, reverse = best
    return index, at_tail, reverse


def merge_segments(segments: Sequence[Segment]) -> Polyline:
    """Concatenate every fragment into one polyline, joining nearest endpoints."""
    fragments = [list(s) for s in segments if s]
    if not fragments:
        return []

    path: Polyline = fragments[0]
    remaining = fragments[1:]
    while remaining:
        index, at_tail, reverse = _best_attachment(path, remaining)
        segment = remaining.pop(index)
        if reverse:
            segment.reverse()
        path = path + segment if at_tail else segment + path

    if len(fragments) > 1:
        logger.debug(f"Merged {len(fragments)} fragments into {len(path)} points")
    return path
