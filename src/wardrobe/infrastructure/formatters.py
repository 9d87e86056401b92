"""Output formatters for wardrobe layouts."""

from __future__ import annotations

from wardrobe.domain import (
    InstallationType,
    LayoutSummary,
    StructuralMember,
    format_dimension,
)


def _member_line(name: str, member: StructuralMember | None) -> str:
    if member is None:
        return f"{name:<14} {'-':<10}"
    return (
        f"{name:<14} {member.kind.value:<10} "
        f"{member.span.start:>9.1f} {member.span.end:>9.1f} "
        f"{member.extent.start:>8.1f} {member.extent.end:>8.1f}"
    )


class LayoutSummaryFormatter:
    """Formats a layout summary as a text report.

    The report lists structural members, the opening regions and the door
    slots, all in millimeters on the centered width axis.
    """

    def format(self, summary: LayoutSummary | None) -> str:
        if summary is None:
            return "No layout to display."

        config = summary.config
        lines = [
            "WARDROBE LAYOUT",
            "=" * 70,
            (
                f"Space: {format_dimension(config.width)} W x "
                f"{format_dimension(config.height)} H x "
                f"{format_dimension(config.depth)} D"
            ),
            f"Installation: {config.installation_type.value}"
            + (
                f" (wall on {config.wall_side.value})"
                if config.wall_side is not None
                and config.installation_type is InstallationType.SEMI_STANDING
                else ""
            ),
            "",
            "MEMBERS",
            "-" * 70,
            f"{'Member':<14} {'Kind':<10} {'Left':>9} {'Right':>9} {'Bottom':>8} {'Top':>8}",
            "-" * 70,
            _member_line("Left", summary.left),
            _member_line("Right", summary.right),
            _member_line("Top frame", summary.top),
            _member_line("Base", summary.base),
        ]
        if summary.soffit is not None:
            lines.append(_member_line("Soffit top", summary.soffit.top_member))
            lines.append(_member_line("Soffit base", summary.soffit.base_member))

        lines.extend(
            [
                "",
                "REGIONS",
                "-" * 70,
                (
                    f"Interior:  {summary.interior.left_boundary:.1f} to "
                    f"{summary.interior.right_boundary:.1f} "
                    f"({format_dimension(summary.interior.width)})"
                ),
                (
                    f"Regular:   {summary.regular_region.left_boundary:.1f} to "
                    f"{summary.regular_region.right_boundary:.1f} "
                    f"({format_dimension(summary.regular_region.width)})"
                ),
            ]
        )
        if summary.soffit is not None:
            region = summary.soffit.region
            lines.append(
                f"Soffit:    {region.left_boundary:.1f} to {region.right_boundary:.1f} "
                f"({format_dimension(region.width)}, "
                f"{format_dimension(summary.soffit.clear_height)} clear, "
                f"{summary.soffit.side.value})"
            )

        allocation = summary.allocation
        lines.extend(
            [
                "",
                "SLOTS",
                "-" * 70,
                f"{'#':<4} {'Center':>9} {'Left':>9} {'Right':>9} {'Width':>9}",
            ]
        )
        for slot in summary.slots:
            lines.append(
                f"{slot.index + 1:<4} {slot.center:>9.1f} {slot.left_boundary:>9.1f} "
                f"{slot.right_boundary:>9.1f} {slot.width:>9.1f}"
            )
        lines.append("-" * 70)
        fewest, most = allocation.count_range
        lines.append(f"Allowed slot counts: {fewest} to {most}")
        count_line = f"{allocation.slot_count} slots of {format_dimension(allocation.slot_width)}"
        if allocation.was_adjusted:
            count_line += f" (requested {allocation.requested_count})"
        lines.append(count_line)

        return "\n".join(lines)


class DimensionFormatter:
    """Formats the dimension table shown next to the elevation."""

    LABELS: dict[str, str] = {
        "opening_inner_width": "Opening inner width",
        "top_inner_width": "Top frame inner width",
        "base_inner_width": "Base inner width",
        "soffit_inner_width": "Soffit inner width",
        "left_member_height": "Left member height",
        "right_member_height": "Right member height",
        "slot_width": "Slot width",
    }

    def format(self, summary: LayoutSummary | None) -> str:
        if summary is None:
            return "No dimensions to display."

        labels = summary.dimensions.labels()
        lines = ["DIMENSIONS", "=" * 40]
        for key, value in labels.items():
            lines.append(f"{self.LABELS[key]:<26} {value:>12}")
        lines.append(f"{'Slot count':<26} {summary.dimensions.slot_count:>12}")
        return "\n".join(lines)


class ElevationDiagramFormatter:
    """Formats an ASCII front elevation of the enclosure."""

    def format(self, summary: LayoutSummary | None, width: int = 60, height: int = 16) -> str:
        """Generate an ASCII elevation with slot divisions and the soffit."""
        if summary is None:
            return "No layout to display."

        config = summary.config
        grid = [[" " for _ in range(width)] for _ in range(height)]

        def col(x: float) -> int:
            return min(width - 1, max(0, round((x + config.width / 2) / config.width * (width - 1))))

        def row(z: float) -> int:
            return min(height - 1, max(0, round((config.height - z) / config.height * (height - 1))))

        for member in summary.members:
            x1, x2 = col(member.span.start), col(member.span.end)
            y1, y2 = row(member.extent.end), row(member.extent.start)
            for y in range(y1, y2 + 1):
                for x in range(x1, x2 + 1):
                    grid[y][x] = "#"

        # Slot divisions between the base and the top frame
        slot_top = row(summary.top.extent.start) + 1 if summary.top else 0
        slot_bottom = row(summary.base.extent.end) - 1 if summary.base else height - 1
        for edge in summary.allocation.boundaries[1:-1]:
            x = col(edge)
            for y in range(slot_top, slot_bottom + 1):
                if grid[y][x] == " ":
                    grid[y][x] = "|"

        if summary.soffit is not None:
            underside = row(config.height - config.soffit.height) if config.soffit else 0
            footprint = summary.soffit.footprint
            for y in range(0, underside):
                for x in range(col(footprint.start), col(footprint.end) + 1):
                    grid[y][x] = "/"

        lines = ["ELEVATION", "=" * width]
        lines.extend("".join(r) for r in grid)
        return "\n".join(lines)
