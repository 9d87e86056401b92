"""Exporter framework for wardrobe layouts.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: DXF front elevation for CAD, layered
- json: Full layout decomposition in mm or m
- svg: SVG front elevation with dimension labels

Usage:
    from wardrobe.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    svg_exporter = ExporterRegistry.get("svg")()
    content = svg_exporter.export_string(layout_output)

    manager = ExportManager(output_dir=Path("./output"), units="m")
    results = manager.export_all(["json", "dxf"], layout_output, project_name="hallway")
"""

from wardrobe.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    UnsupportedFormatError,
    create_exporter,
    summary_of,
)

# Import exporters to trigger registration
from wardrobe.infrastructure.exporters.dxf import DxfExporter
from wardrobe.infrastructure.exporters.json_exporter import JsonLayoutExporter
from wardrobe.infrastructure.exporters.svg import SvgExporter

__all__ = [
    # Framework
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "UnsupportedFormatError",
    "create_exporter",
    "summary_of",
    # Registered exporters
    "DxfExporter",
    "JsonLayoutExporter",
    "SvgExporter",
]
