"""FastAPI REST API for wardrobe layouts.

Provides endpoints for computing layouts, validating configurations and
exporting elevations.

Usage:
    uvicorn wardrobe.web:app --reload
"""

from wardrobe.web.app import app, create_app

__all__ = ["app", "create_app"]
