"""Layout computation endpoints."""

from fastapi import APIRouter

from wardrobe.application import LayoutOutput
from wardrobe.application.config import (
    config_to_space_config,
    load_config_from_dict,
    space_config_from_schema,
)
from wardrobe.infrastructure.exporters import JsonLayoutExporter
from wardrobe.web.dependencies import LayoutCommandDep
from wardrobe.web.exceptions import LayoutComputationError
from wardrobe.web.schemas.requests import LayoutFromConfigRequest, LayoutRequest
from wardrobe.web.schemas.responses import LayoutResponseSchema

router = APIRouter(prefix="/layout", tags=["layout"])


def _layout_output_to_schema(output: LayoutOutput, units: str) -> LayoutResponseSchema:
    """Convert LayoutOutput to response schema."""
    if not output.is_valid:
        raise LayoutComputationError(output.errors)

    data = JsonLayoutExporter(units=units).build(output)
    return LayoutResponseSchema(
        is_valid=True,
        units=units,
        notes=output.notes,
        layout=data["layout"],
        labels=data["labels"],
    )


@router.post("", response_model=LayoutResponseSchema)
async def compute_layout(
    request: LayoutRequest,
    command: LayoutCommandDep,
) -> LayoutResponseSchema:
    """Compute a layout from space parameters.

    Raises:
        InvalidConfigError: If the geometry is infeasible (422).
    """
    space_config = space_config_from_schema(request)
    output = command.execute(space_config)
    return _layout_output_to_schema(output, request.units)


@router.post("/from-config", response_model=LayoutResponseSchema)
async def compute_layout_from_config(
    request: LayoutFromConfigRequest,
    command: LayoutCommandDep,
) -> LayoutResponseSchema:
    """Compute a layout from a full configuration document.

    Output units follow the configuration's ``output.units``.

    Raises:
        ConfigError: If the configuration fails schema validation (422).
        InvalidConfigError: If the geometry is infeasible (422).
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config_to_space_config(config))
    return _layout_output_to_schema(output, config.output.units)
