"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from wardrobe.application import LayoutOutput
from wardrobe.application.config import (
    config_to_space_config,
    load_config_from_dict,
    space_config_from_schema,
)
from wardrobe.infrastructure.exporters import ExporterRegistry
from wardrobe.web.dependencies import LayoutCommandDep
from wardrobe.web.exceptions import LayoutComputationError
from wardrobe.web.schemas.requests import LayoutFromConfigRequest, LayoutRequest
from wardrobe.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES: dict[str, str] = {
    "json": "application/json",
    "svg": "image/svg+xml",
    "dxf": "application/dxf",
}


def _export_response(format_name: str, output: LayoutOutput, units: str) -> Response:
    """Render a computed layout with the exporter for ``format_name``.

    Raises:
        UnsupportedFormatError: If the format is not registered (400).
        LayoutComputationError: If the layout failed (422).
    """
    exporter = ExporterRegistry.create(format_name, units=units)
    if not output.is_valid:
        raise LayoutComputationError(output.errors)

    content = exporter.export_string(output)
    filename = f"wardrobe.{exporter.file_extension}"
    return Response(
        content=content,
        media_type=MEDIA_TYPES.get(format_name, "text/plain"),
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_layout(
    format_name: str,
    request: LayoutRequest,
    command: LayoutCommandDep,
) -> Response:
    """Export the layout for space parameters to a registered format."""
    # Fail on the format before doing any layout work
    ExporterRegistry.get(format_name)
    output = command.execute(space_config_from_schema(request))
    return _export_response(format_name, output, request.units)


@router.post("/{format_name}/from-config")
async def export_layout_from_config(
    format_name: str,
    request: LayoutFromConfigRequest,
    command: LayoutCommandDep,
) -> Response:
    """Export the layout for a full configuration document."""
    ExporterRegistry.get(format_name)
    config = load_config_from_dict(request.config)
    output = command.execute(config_to_space_config(config))
    return _export_response(format_name, output, config.output.units)
