"""Pydantic request schemas for the REST API."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from wardrobe.application.config import SpaceConfigSchema


class LayoutRequest(SpaceConfigSchema):
    """Request for computing a layout from space parameters.

    Accepts every field of the configuration's ``space`` section plus the
    units of the returned geometry.
    """

    units: Literal["mm", "m"] = Field(
        default="mm", description="Units for lengths in the response"
    )


class LayoutFromConfigRequest(BaseModel):
    """Request for computing a layout from a full configuration."""

    config: dict[str, Any] = Field(..., description="Full wardrobe configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Wardrobe configuration JSON")
