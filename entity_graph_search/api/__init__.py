"""API endpoints for the entity graph search service."""

from .search import router as search_router
from .nodes import router as nodes_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "search_router",
    "nodes_router",
    "health_router",
    "metrics_router",
]
