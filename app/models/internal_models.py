"""
Internal data models for the street reconstruction pipeline.

These dataclasses flow between the external clients, the pure geometry
functions and the reconstruction service. API-facing Pydantic models live in
``app.schemas``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
import uuid


@dataclass(frozen=True)
class Coordinate:
    """A (latitude, longitude) pair in decimal degrees."""
    lat: float
    lng: float

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


# A segment is one contiguous fragment of street geometry; a polyline is the
# stitched result. Both are plain ordered lists of coordinates.
Segment = List[Coordinate]
Polyline = List[Coordinate]


@dataclass
class PointOfInterest:
    """A named venue returned by the places lookup."""
    name: str
    coordinate: Coordinate
    category: str = "general"
    rating: Optional[float] = None
    open_now: Optional[bool] = None
    address: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "lat": self.coordinate.lat,
            "lng": self.coordinate.lng,
            "category": self.category,
            "rating": self.rating,
            "open_now": self.open_now,
            "address": self.address,
        }


@dataclass
class CandidateStreet:
    """A street suggested for highlighting, as supplied by the caller."""
    name: str
    category: str = "street"
    section: Optional[str] = None
    search_query: Optional[str] = None
    suburb: Optional[str] = None

    @property
    def display_name(self) -> str:
        if self.section:
            return f"{self.name} ({self.section})"
        return self.name

    @property
    def places_query(self) -> str:
        if self.search_query:
            return self.search_query
        return f"{self.name} {self.suburb or ''}".strip()


@dataclass
class ClipResult:
    """Outcome of clipping a polyline to where its places sit."""
    path: Polyline
    relevant_places: List[PointOfInterest]
    start_index: int
    end_index: int


@dataclass
class StreetRecord:
    """Per-street output of one reconstruction request."""
    name: str
    category: str
    distance_km: float
    path: Polyline = field(default_factory=list)
    places: List[PointOfInterest] = field(default_factory=list)
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def has_geometry(self) -> bool:
        return len(self.path) >= 2

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "distance_km": self.distance_km,
            "path": [c.to_dict() for c in self.path],
            "places": [p.to_dict() for p in self.places],
            "created_at": self.created_at.isoformat(),
        }
