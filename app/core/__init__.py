"""
Core utilities for the street highlight backend: exceptions, error handlers,
logging, validation and metrics.
"""

from .exceptions import (
    ErrorCode,
    StreetMapException,
    ExternalSourceError,
    ResponseParseError
)

__all__ = [
    "ErrorCode",
    "StreetMapException",
    "ExternalSourceError",
    "ResponseParseError",
]
