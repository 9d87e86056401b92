"""API routers for the REST API."""

from wardrobe.web.routers.export import router as export_router
from wardrobe.web.routers.layout import router as layout_router
from wardrobe.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "layout_router",
    "validate_router",
]
