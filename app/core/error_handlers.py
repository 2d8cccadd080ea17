"""
Error handlers for the FastAPI application.

Failures inside the street pipeline are contained per street and never reach
these handlers; they cover request validation, routing errors and bugs.
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional

from app.core.exceptions import ErrorCode

logger = logging.getLogger(__name__)

_HTTP_ERROR_CODES = {
    400: ErrorCode.VALIDATION_ERROR,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
}


class ErrorHandler:
    """Builds error envelopes and counts errors per code."""

    def __init__(self):
        self.error_counts: Dict[str, int] = {}

    async def handle_validation_error(
        self,
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """
        Handle Pydantic validation errors with per-field details.
        """
        request_id = getattr(request.state, 'request_id', 'unknown')

        validation_errors = [
            {
                'field': '.'.join(str(loc) for loc in error['loc']),
                'message': error['msg'],
                'type': error['type'],
            }
            for error in exc.errors()
        ]

        logger.warning(
            f"Validation error in request {request_id}: {len(validation_errors)} field errors",
            extra={
                'request_id': request_id,
                'validation_errors': validation_errors,
                'request_path': request.url.path
            }
        )

        return self._create_error_response(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Request validation failed",
            details={'validation_errors': validation_errors},
            request_id=request_id,
            status_code=422
        )

    async def handle_http_exception(
        self,
        request: Request,
        exc: StarletteHTTPException
    ) -> JSONResponse:
        request_id = getattr(request.state, 'request_id', 'unknown')
        error_code = _HTTP_ERROR_CODES.get(exc.status_code, ErrorCode.INTERNAL_SERVER_ERROR)

        logger.warning(
            f"HTTP exception in request {request_id}: {exc.status_code} - {exc.detail}",
            extra={'request_id': request_id, 'request_path': request.url.path}
        )

        return self._create_error_response(
            error_code=error_code,
            message=str(exc.detail),
            request_id=request_id,
            status_code=exc.status_code
        )

    async def handle_generic_exception(
        self,
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """
        Handle unexpected exceptions with full error logging.
        """
        request_id = getattr(request.state, 'request_id', 'unknown')

        logger.error(
            f"Unhandled exception in request {request_id}: {type(exc).__name__}: {exc}",
            exc_info=exc,
            extra={
                'request_id': request_id,
                'request_path': request.url.path,
                'request_method': request.method,
            }
        )

        return self._create_error_response(
            error_code=ErrorCode.INTERNAL_SERVER_ERROR,
            message="An internal server error occurred",
            request_id=request_id,
            status_code=500
        )

    def _create_error_response(
        self,
        error_code: ErrorCode,
        message: str,
        request_id: str,
        status_code: int,
        details: Optional[Dict[str, Any]] = None
    ) -> JSONResponse:
        """Count the error and wrap it in the same envelope as successful responses."""
        self.error_counts[error_code.value] = self.error_counts.get(error_code.value, 0) + 1
        return JSONResponse(
            status_code=status_code,
            content={
                "status": "error",
                "data": None,
                "error": {
                    "error_code": error_code.value,
                    "message": message,
                    "details": details,
                    "request_id": request_id,
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                },
            }
        )

    def get_error_statistics(self) -> Dict[str, Any]:
        return {
            'error_counts': dict(self.error_counts),
            'total_errors': sum(self.error_counts.values())
        }


# Global error handler instance
error_handler = ErrorHandler()


def setup_error_handlers(app):
    """
    Set up all error handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return await error_handler.handle_validation_error(request, exc)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return await error_handler.handle_http_exception(request, exc)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        return await error_handler.handle_generic_exception(request, exc)
