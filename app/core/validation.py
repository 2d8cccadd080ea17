"""
Input validation utilities for request payloads
"""
import re


class ValidationError(Exception):
    """Custom validation error"""
    pass


def validate_latitude(lat: float) -> float:
    """
    Validate latitude coordinate

    Args:
        lat: Latitude value

    Returns:
        Validated latitude

    Raises:
        ValidationError: If latitude is out of range
    """
    if not -90.0 <= lat <= 90.0:
        raise ValidationError(f"Latitude {lat} out of range (must be -90 to 90)")

    return lat


def validate_longitude(lon: float) -> float:
    """
    Validate longitude coordinate

    Args:
        lon: Longitude value

    Returns:
        Validated longitude

    Raises:
        ValidationError: If longitude is out of range
    """
    if not -180.0 <= lon <= 180.0:
        raise ValidationError(f"Longitude {lon} out of range (must be -180 to 180)")

    return lon


def validate_radius(radius_km: float, max_radius_km: float = 50.0) -> float:
    """
    Validate search radius (in kilometers)

    Raises:
        ValidationError: If radius is not positive or exceeds the maximum
    """
    if radius_km <= 0:
        raise ValidationError("Radius must be positive")

    if radius_km > max_radius_km:
        raise ValidationError(f"Radius {radius_km}km exceeds maximum {max_radius_km}km")

    return radius_km


def validate_street_name(name: str) -> str:
    """
    Validate and normalize a street name.

    Collapses internal whitespace; the result is used verbatim in the exact
    name match against map data, so nothing else is rewritten.

    Raises:
        ValidationError: If the name is blank or contains control characters
    """
    name = re.sub(r'\s+', ' ', name).strip()

    if not name:
        raise ValidationError("Street name cannot be empty")

    if re.search(r'[\x00-\x1f\x7f]', name):
        raise ValidationError("Street name contains control characters")

    return name
