"""Infrastructure layer - external concerns and formatters."""

from .elevation_renderer import ElevationRenderer
from .formatters import (
    DimensionFormatter,
    ElevationDiagramFormatter,
    LayoutSummaryFormatter,
)

from .exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonLayoutExporter,
    SvgExporter,
    UnsupportedFormatError,
)

__all__ = [
    # Rendering
    "ElevationRenderer",
    # Formatters
    "DimensionFormatter",
    "ElevationDiagramFormatter",
    "LayoutSummaryFormatter",
    # Exporter framework
    "DxfExporter",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "JsonLayoutExporter",
    "SvgExporter",
    "UnsupportedFormatError",
]
