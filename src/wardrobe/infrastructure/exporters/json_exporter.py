"""JSON exporter for layout summaries.

Exports the full decomposition of the enclosure: members, regions, soffit
sub-layout, slots and the dimension table. Lengths are millimeters unless
``units="m"`` is requested; conversion happens only here, at the output
boundary.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from wardrobe.infrastructure.exporters.base import ExporterRegistry, summary_of

if TYPE_CHECKING:
    from wardrobe.infrastructure.exporters.base import ExportSource


logger = logging.getLogger(__name__)


# Current schema version for JSON output
SCHEMA_VERSION = "1.0"

UNIT_SCALES: dict[str, float] = {"mm": 1.0, "m": 0.001}

# Keys whose values are counts or flags rather than lengths
_UNSCALED_KEYS = frozenset(
    {"index", "requested_count", "count", "count_range", "slot_count", "adjusted"}
)


def _scale_lengths(data: Any, scale: float, key: str | None = None) -> Any:
    if isinstance(data, dict):
        return {k: _scale_lengths(v, scale, k) for k, v in data.items()}
    if isinstance(data, list):
        return [_scale_lengths(v, scale, key) for v in data]
    if isinstance(data, bool) or key in _UNSCALED_KEYS:
        return data
    if isinstance(data, (int, float)):
        return data * scale
    return data


@ExporterRegistry.register("json")
class JsonLayoutExporter:
    """JSON exporter for wardrobe layouts.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    supports_units: ClassVar[bool] = True

    def __init__(self, units: str = "mm", indent: int = 2) -> None:
        if units not in UNIT_SCALES:
            raise ValueError(f"Invalid units: {units}. Must be 'mm' or 'm'")
        self.units = units
        self.indent = indent

    def export(self, output: ExportSource, path: Path) -> None:
        content = self.export_string(output)
        path.write_text(content)
        logger.info(f"Exported JSON layout to {path}")

    def export_string(self, output: ExportSource) -> str:
        return json.dumps(self.build(output), indent=self.indent)

    def build(self, output: ExportSource) -> dict[str, Any]:
        """Build the JSON structure as plain data."""
        summary = summary_of(output)
        layout = summary.to_dict()
        # Labels are display strings and always stay in millimeters
        labels = layout.pop("labels")
        data: dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "units": self.units,
            "layout": _scale_lengths(layout, UNIT_SCALES[self.units]),
            "labels": labels,
        }
        notes = getattr(output, "notes", None)
        if notes:
            data["notes"] = list(notes)
        return data
