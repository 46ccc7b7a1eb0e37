"""API routers for the REST API."""

from drawers.web.routers.export import router as export_router
from drawers.web.routers.layout import router as layout_router

__all__ = [
    "export_router",
    "layout_router",
]
