"""API routers for the REST API."""

from roomplanner.web.routers.analyze import router as analyze_router
from roomplanner.web.routers.geometry import router as geometry_router
from roomplanner.web.routers.templates import router as templates_router
from roomplanner.web.routers.validate import router as validate_router

__all__ = [
    "analyze_router",
    "geometry_router",
    "templates_router",
    "validate_router",
]
