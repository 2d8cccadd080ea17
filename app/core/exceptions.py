"""
Custom exceptions for the street highlight backend.

External-source failures are raised by the places and geometry clients and
recovered per street by the reconstruction service, so they never reach the
HTTP layer.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # External source errors
    EXTERNAL_SOURCE_FAILED = "EXTERNAL_SOURCE_FAILED"
    RESPONSE_PARSE_FAILED = "RESPONSE_PARSE_FAILED"

    # Input errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # System errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class StreetMapException(Exception):
    """Base exception for the street highlight backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class ExternalSourceError(StreetMapException):
    """Raised when a places or geometry lookup fails."""

    def __init__(self, source: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"{source} lookup failed: {message}",
            error_code=ErrorCode.EXTERNAL_SOURCE_FAILED,
            details={"source": source, **(details or {})},
            status_code=502
        )
        self.source = source


class ResponseParseError(ExternalSourceError):
    """Raised when an external source answers with an unexpected shape."""

    def __init__(self, source: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(source, message, details)
        self.error_code = ErrorCode.RESPONSE_PARSE_FAILED

