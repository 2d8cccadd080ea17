"""
Edge case tests for request validation and domain helpers.
"""
import pytest
from app.core.validation import (
    validate_latitude,
    validate_longitude,
    validate_radius,
    validate_street_name,
    ValidationError
)
from app.core.exceptions import ErrorCode, ExternalSourceError, ResponseParseError
from app.models.internal_models import CandidateStreet, Coordinate, StreetRecord


class TestCoordinateValidation:
    """Test coordinate range checks."""

    def test_boundaries_accepted(self):
        assert validate_latitude(-90.0) == -90.0
        assert validate_latitude(90.0) == 90.0
        assert validate_longitude(-180.0) == -180.0
        assert validate_longitude(180.0) == 180.0

    def test_out_of_range_rejected(self):
        with pytest.raises(ValidationError, match="Latitude"):
            validate_latitude(90.0001)
        with pytest.raises(ValidationError, match="Longitude"):
            validate_longitude(-180.5)


class TestRadiusValidation:

    def test_positive_radius(self):
        assert validate_radius(2.5) == 2.5

    def test_zero_and_oversized_rejected(self):
        with pytest.raises(ValidationError, match="positive"):
            validate_radius(0)
        with pytest.raises(ValidationError, match="exceeds"):
            validate_radius(51)


class TestStreetNameValidation:

    def test_whitespace_collapsed(self):
        assert validate_street_name("  Degraves   Street ") == "Degraves Street"

    def test_blank_rejected(self):
        with pytest.raises(ValidationError, match="empty"):
            validate_street_name(" \t ")

    def test_control_characters_rejected(self):
        with pytest.raises(ValidationError, match="control"):
            validate_street_name("Hosier\x00Lane")

    def test_punctuation_preserved(self):
        assert validate_street_name("O'Connell St") == "O'Connell St"


def test_candidate_display_name_and_query():
    plain = CandidateStreet(name="Hosier Lane")
    assert plain.display_name == "Hosier Lane"
    assert plain.places_query == "Hosier Lane"

    sectioned = CandidateStreet(name="Brunswick Street", section="north end", suburb="Fitzroy")
    assert sectioned.display_name == "Brunswick Street (north end)"
    assert sectioned.places_query == "Brunswick Street Fitzroy"

    queried = CandidateStreet(name="Brunswick Street", search_query="Brunswick St bars")
    assert queried.places_query == "Brunswick St bars"


def test_street_record_serialization():
    record = StreetRecord(
        name="Hosier Lane",
        category="laneway",
        distance_km=1.2,
        path=[Coordinate(-37.8165, 144.9691), Coordinate(-37.8159, 144.9693)],
    )
    data = record.to_dict()
    assert record.has_geometry
    assert data["path"][0] == {"lat": -37.8165, "lng": 144.9691}
    assert data["places"] == []
    assert data["created_at"].endswith("+00:00")
    assert StreetRecord(name="x", category="y", distance_km=0.0).id != record.id


def test_external_errors_carry_source():
    err = ExternalSourceError("overpass", "timed out")
    assert err.error_code == ErrorCode.EXTERNAL_SOURCE_FAILED
    assert err.status_code == 502
    assert err.details["source"] == "overpass"

    parse = ResponseParseError("places", "not JSON")
    assert isinstance(parse, ExternalSourceError)
    assert parse.error_code == ErrorCode.RESPONSE_PARSE_FAILED
    assert str(parse) == "places lookup failed: not JSON"
