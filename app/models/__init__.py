"""
Models package for the street highlight backend.

Internal dataclasses shared by the reconstruction pipeline.
"""

from .internal_models import (
    Coordinate,
    Segment,
    Polyline,
    PointOfInterest,
    CandidateStreet,
    ClipResult,
    StreetRecord,
)

__all__ = [
    "Coordinate",
    "Segment",
    "Polyline",
    "PointOfInterest",
    "CandidateStreet",
    "ClipResult",
    "StreetRecord",
]
