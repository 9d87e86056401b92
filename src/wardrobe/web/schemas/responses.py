"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class LayoutResponseSchema(BaseModel):
    """A computed layout with lengths in the requested units."""

    is_valid: bool = Field(..., description="Whether the layout was computed")
    units: str = Field(default="mm", description="Units for lengths in the layout")
    notes: list[str] = Field(
        default_factory=list, description="Slot count adjustments and similar notes"
    )
    layout: dict[str, Any] | None = Field(
        default=None, description="Members, regions, soffit, slots and dimensions"
    )
    labels: dict[str, str] = Field(
        default_factory=dict, description="Dimension labels, always in mm"
    )


class IssueSchema(BaseModel):
    """One error or warning, located by its configuration path."""

    path: str | None = Field(default=None, description="Dotted configuration path")
    message: str
    value: Any = Field(default=None, description="Offending value, for errors")
    suggestion: str | None = Field(default=None, description="Remedy, for warnings")


class ValidationResultSchema(BaseModel):
    is_valid: bool
    errors: list[IssueSchema] = Field(default_factory=list)
    warnings: list[IssueSchema] = Field(default_factory=list)


class ExportFormatsSchema(BaseModel):
    formats: list[str] = Field(..., description="Registered export format names")


class ErrorResponseSchema(BaseModel):
    """Body of every 4xx response raised by the exception handlers."""

    error: str
    error_type: str = Field(..., description="invalid_config, validation, unsupported_format, ...")
    details: list[dict[str, Any]] | dict[str, Any] | None = None
