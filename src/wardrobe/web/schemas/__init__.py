"""Pydantic schemas for the REST API."""

from wardrobe.web.schemas.requests import (
    ConfigValidateRequest,
    LayoutFromConfigRequest,
    LayoutRequest,
)
from wardrobe.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    IssueSchema,
    LayoutResponseSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "LayoutFromConfigRequest",
    "LayoutRequest",
    # Responses
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "IssueSchema",
    "LayoutResponseSchema",
    "ValidationResultSchema",
]
