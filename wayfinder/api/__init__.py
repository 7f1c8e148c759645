"""API endpoints for the wayfinder service."""

from .search import router as search_router
from .destinations import router as destinations_router
from .routes import router as routes_router
from .health import router as health_router

__all__ = [
    "search_router",
    "destinations_router",
    "routes_router",
    "health_router",
]
