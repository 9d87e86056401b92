"""DXF format exporter for wardrobe elevations.

Generates a 2D front elevation (R2010 format) for CAD. Members, slots, the
soffit and labels go on separate layers so they can be toggled in a CAD
program. Coordinates keep the layout's axes: x centered on the enclosure,
y up from the floor.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf

from wardrobe.domain import LayoutSummary, format_dimension
from wardrobe.infrastructure.exporters.base import ExporterRegistry, summary_of

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from wardrobe.infrastructure.exporters.base import ExportSource


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "OUTLINE": {"color": 8, "linetype": "DASHED"},  # Gray - space outline
    "MEMBERS": {"color": 7, "linetype": "CONTINUOUS"},  # White - structural members
    "SLOTS": {"color": 3, "linetype": "CONTINUOUS"},  # Green - door slots
    "SOFFIT": {"color": 1, "linetype": "CONTINUOUS"},  # Red - soffit footprint
    "LABELS": {"color": 5, "linetype": "CONTINUOUS"},  # Blue - text labels
}

UNIT_SCALES: dict[str, float] = {"mm": 1.0, "m": 0.001}

# $INSUNITS codes
_INSUNITS = {"mm": 4, "m": 6}


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports wardrobe elevations to DXF.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    supports_units: ClassVar[bool] = True

    def __init__(self, units: str = "mm", text_height: float = 40.0) -> None:
        """Initialize the DXF exporter.

        Args:
            units: Output units - "mm" or "m".
            text_height: Label height in millimeters.
        """
        if units not in UNIT_SCALES:
            raise ValueError(f"Invalid units: {units}. Must be 'mm' or 'm'")
        self.units = units
        self.scale = UNIT_SCALES[units]
        self.text_height = text_height * self.scale

    def export(self, output: ExportSource, path: Path) -> None:
        doc = self.build_document(summary_of(output))
        doc.saveas(path)
        logger.info(f"Exported DXF elevation to {path}")

    def export_string(self, output: ExportSource) -> str:
        doc = self.build_document(summary_of(output))
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build_document(self, summary: LayoutSummary) -> Drawing:
        """Create a DXF document containing the elevation."""
        doc = self._create_document()
        msp = doc.modelspace()
        self._draw_outline(msp, summary)
        self._draw_soffit(msp, summary)
        self._draw_slots(msp, summary)
        self._draw_members(msp, summary)
        return doc

    def _create_document(self) -> Drawing:
        doc = ezdxf.new("R2010")
        doc.header["$INSUNITS"] = _INSUNITS[self.units]
        self._setup_layers(doc)
        return doc

    def _setup_layers(self, doc: Drawing) -> None:
        for name, props in LAYERS.items():
            layer = doc.layers.add(name, color=cast(int, props["color"]))
            if props["linetype"] == "DASHED":
                if "DASHED" not in doc.linetypes:
                    doc.linetypes.add(
                        "DASHED",
                        pattern=[0.5, 0.25, -0.25],
                        description="Dashed line",
                    )
                layer.dxf.linetype = "DASHED"

    def _rect(
        self,
        msp: Modelspace,
        x1: float,
        x2: float,
        y1: float,
        y2: float,
        layer: str,
    ) -> None:
        s = self.scale
        points = [
            (x1 * s, y1 * s),
            (x2 * s, y1 * s),
            (x2 * s, y2 * s),
            (x1 * s, y2 * s),
            (x1 * s, y1 * s),  # Close the polyline
        ]
        msp.add_lwpolyline(points, dxfattribs={"layer": layer})

    def _label(self, msp: Modelspace, text: str, x: float, y: float) -> None:
        msp.add_mtext(
            text,
            dxfattribs={
                "layer": "LABELS",
                "char_height": self.text_height,
                "insert": (x * self.scale, y * self.scale),
                "attachment_point": 5,  # MIDDLE_CENTER
            },
        )

    def _draw_outline(self, msp: Modelspace, summary: LayoutSummary) -> None:
        half = summary.config.width / 2
        self._rect(msp, -half, half, 0.0, summary.config.height, "OUTLINE")
        # Overall width below the floor line
        self._label(msp, format_dimension(summary.config.width), 0.0, -half / 20)

    def _draw_members(self, msp: Modelspace, summary: LayoutSummary) -> None:
        for member in summary.members:
            self._rect(
                msp,
                member.span.start,
                member.span.end,
                member.extent.start,
                member.extent.end,
                "MEMBERS",
            )

    def _draw_slots(self, msp: Modelspace, summary: LayoutSummary) -> None:
        bottom = summary.base.extent.end if summary.base else summary.config.floor_offset
        top = summary.top.extent.start if summary.top else summary.config.height
        label = format_dimension(summary.allocation.slot_width)
        for slot in summary.slots:
            self._rect(msp, slot.left_boundary, slot.right_boundary, bottom, top, "SLOTS")
            self._label(msp, label, slot.center, (bottom + top) / 2)

    def _draw_soffit(self, msp: Modelspace, summary: LayoutSummary) -> None:
        soffit = summary.config.soffit
        if summary.soffit is None or soffit is None:
            return
        footprint = summary.soffit.footprint
        height = summary.config.height
        self._rect(msp, footprint.start, footprint.end, height - soffit.height, height, "SOFFIT")
        self._label(
            msp,
            format_dimension(summary.soffit.region.width),
            summary.soffit.region.center,
            summary.soffit.clear_height / 2,
        )


__all__ = ["DxfExporter", "LAYERS"]
