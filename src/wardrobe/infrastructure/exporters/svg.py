"""SVG exporter for front elevations.

Wraps ElevationRenderer to write the elevation drawing of a layout as an
SVG file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from wardrobe.infrastructure.elevation_renderer import ElevationRenderer
from wardrobe.infrastructure.exporters.base import ExporterRegistry, summary_of

if TYPE_CHECKING:
    from wardrobe.infrastructure.exporters.base import ExportSource


logger = logging.getLogger(__name__)


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for front elevation drawings.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(self, scale: float = 0.2, show_dimensions: bool = True) -> None:
        """Initialize the SVG exporter.

        Args:
            scale: Pixels per millimeter (default 0.2).
            show_dimensions: Whether to draw dimension labels (default True).
        """
        self.renderer = ElevationRenderer(scale=scale, show_dimensions=show_dimensions)

    def export(self, output: ExportSource, path: Path) -> None:
        path.write_text(self.export_string(output))
        logger.info(f"Exported SVG elevation to {path}")

    def export_string(self, output: ExportSource) -> str:
        return self.renderer.render_svg(summary_of(output))
