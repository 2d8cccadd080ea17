# API endpoints and routers

from .streets_endpoints import router as streets_router
from .health_endpoints import router as health_router

__all__ = [
    "streets_router",
    "health_router",
]
