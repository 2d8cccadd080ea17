from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from app.core.validation import ValidationError, validate_latitude, validate_longitude, validate_street_name
from app.models.internal_models import CandidateStreet, Coordinate, PointOfInterest, StreetRecord


class CoordinateIn(BaseModel):
    lat: float
    lng: float

    @field_validator('lat')
    @classmethod
    def check_lat(cls, v):
        try:
            return validate_latitude(v)
        except ValidationError as e:
            raise ValueError(str(e))

    @field_validator('lng')
    @classmethod
    def check_lng(cls, v):
        try:
            return validate_longitude(v)
        except ValidationError as e:
            raise ValueError(str(e))

    def to_coordinate(self) -> Coordinate:
        return Coordinate(lat=self.lat, lng=self.lng)


class CandidateStreetIn(BaseModel):
    name: str = Field(max_length=200)
    category: str = Field(default="street", max_length=50)
    section: Optional[str] = Field(default=None, max_length=100)
    search_query: Optional[str] = Field(default=None, max_length=200)
    suburb: Optional[str] = Field(default=None, max_length=100)

    @field_validator('name')
    @classmethod
    def check_name(cls, v):
        try:
            return validate_street_name(v)
        except ValidationError as e:
            raise ValueError(str(e))

    def to_candidate(self) -> CandidateStreet:
        return CandidateStreet(
            name=self.name,
            category=self.category,
            section=self.section,
            search_query=self.search_query,
            suburb=self.suburb,
        )


class StreetsRequest(BaseModel):
    user_location: CoordinateIn
    radius_km: Optional[float] = Field(default=None, gt=0, le=50)
    streets: List[CandidateStreetIn] = Field(min_length=1, max_length=25)


class PlaceRead(BaseModel):
    name: str
    lat: float
    lng: float
    category: str
    rating: Optional[float] = None
    open_now: Optional[bool] = None
    address: Optional[str] = None

    @classmethod
    def from_place(cls, place: PointOfInterest) -> "PlaceRead":
        return cls(**place.to_dict())


class StreetRead(BaseModel):
    id: str
    name: str
    category: str
    distance_km: float
    path: List[CoordinateIn]
    places: List[PlaceRead]
    created_at: datetime

    @classmethod
    def from_record(cls, record: StreetRecord) -> "StreetRead":
        return cls(
            id=record.id,
            name=record.name,
            category=record.category,
            distance_km=record.distance_km,
            path=[CoordinateIn(lat=c.lat, lng=c.lng) for c in record.path],
            places=[PlaceRead.from_place(p) for p in record.places],
            created_at=record.created_at,
        )


class StreetListResponse(BaseModel):
    streets: List[StreetRead]
    total: int
    with_geometry: int
