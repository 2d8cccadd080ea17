"""
Health check and metrics endpoints.

- GET /health: liveness with application version and error statistics
- GET /metrics: in-process latency and geometry coverage counters
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.config.settings import get_settings
from app.core.error_handlers import error_handler
from app.core.metrics_streets import snapshot_metrics

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Liveness check; the service holds no state beyond counters."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment.value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "error_statistics": error_handler.get_error_statistics(),
    }


@router.get("/metrics")
async def metrics():
    return {"status": "ok", "data": snapshot_metrics(), "error": None}
