"""Front elevation rendering of wardrobe layouts.

Renders the enclosure as seen from the room: side members, top frame,
base, soffit and door slots, with dimension labels read from the layout's
dimension table.
"""

from __future__ import annotations

from wardrobe.domain import LayoutSummary, MemberKind, StructuralMember, format_dimension

# Fill colors by member kind
MEMBER_KIND_COLORS: dict[MemberKind, str] = {
    MemberKind.FRAME: "#C8A27A",  # Tan
    MemberKind.END_PANEL: "#E8D5B7",  # Light wood
    MemberKind.BASE: "#8B6B4A",  # Dark wood
}

SLOT_FILL = "#F8F8F8"
SOFFIT_FILL = "#B0B0B0"
SOFFIT_REGION_FILL = "#E6E6FA"  # Lavender


class ElevationRenderer:
    """Renders front elevations in SVG format.

    Attributes:
        scale: Pixels per millimeter (default 0.2).
        margin: Blank border around the drawing in pixels.
        stroke: Outline color.
        text_color: Color for labels and dimensions.
        show_dimensions: Whether to draw dimension labels.
    """

    def __init__(
        self,
        scale: float = 0.2,
        margin: float = 40.0,
        stroke: str = "#000000",
        text_color: str = "#000000",
        show_dimensions: bool = True,
    ) -> None:
        if scale <= 0:
            raise ValueError("Scale must be positive")
        self.scale = scale
        self.margin = margin
        self.stroke = stroke
        self.text_color = text_color
        self.show_dimensions = show_dimensions

    def render_svg(self, summary: LayoutSummary) -> str:
        """Generate the SVG elevation for a layout.

        Args:
            summary: Layout to render.

        Returns:
            SVG document as a string.
        """
        config = summary.config
        self._half_width = config.width / 2
        self._height = config.height

        svg_width = config.width * self.scale + 2 * self.margin
        svg_height = config.height * self.scale + 2 * self.margin

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            "",
            "  <!-- Background -->",
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
            "",
            "  <!-- Space outline -->",
            self._rect(
                "space",
                -self._half_width,
                self._half_width,
                0.0,
                config.height,
                fill="none",
                extra='stroke-dasharray="5,5"',
            ),
        ]

        if summary.soffit is not None and config.soffit is not None:
            parts.append("")
            parts.append("  <!-- Soffit -->")
            footprint = summary.soffit.footprint
            parts.append(
                self._rect(
                    "soffit",
                    footprint.start,
                    footprint.end,
                    config.height - config.soffit.height,
                    config.height,
                    fill=SOFFIT_FILL,
                )
            )
            region = summary.soffit.region
            parts.append(
                self._rect(
                    "soffit-region",
                    region.left_boundary,
                    region.right_boundary,
                    self._opening_bottom(summary, summary.soffit.base_member),
                    self._opening_top(summary.soffit.top_member, summary.soffit.clear_height),
                    fill=SOFFIT_REGION_FILL,
                )
            )

        parts.append("")
        parts.append("  <!-- Door slots -->")
        bottom = self._opening_bottom(summary, summary.base)
        top = self._opening_top(summary.top, summary.config.height)
        for slot in summary.slots:
            parts.append(
                self._rect(
                    f"slot-{slot.index}",
                    slot.left_boundary,
                    slot.right_boundary,
                    bottom,
                    top,
                    fill=SLOT_FILL,
                    css_class="slot",
                )
            )

        parts.append("")
        parts.append("  <!-- Structural members -->")
        parts.append(self._render_member("member-left", summary.left))
        parts.append(self._render_member("member-right", summary.right))
        if summary.top is not None:
            parts.append(self._render_member("member-top", summary.top))
        if summary.base is not None:
            parts.append(self._render_member("member-base", summary.base))
        if summary.soffit is not None:
            if summary.soffit.top_member is not None:
                parts.append(self._render_member("soffit-top", summary.soffit.top_member))
            if summary.soffit.base_member is not None:
                parts.append(self._render_member("soffit-base", summary.soffit.base_member))

        if self.show_dimensions:
            parts.append("")
            parts.append("  <!-- Dimensions -->")
            parts.append(self._render_dimensions(summary, bottom, top))

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def _x(self, x: float) -> float:
        return self.margin + (x + self._half_width) * self.scale

    def _y(self, z: float) -> float:
        return self.margin + (self._height - z) * self.scale

    def _rect(
        self,
        element_id: str,
        x1: float,
        x2: float,
        z1: float,
        z2: float,
        fill: str,
        css_class: str | None = None,
        extra: str = "",
    ) -> str:
        class_attr = f' class="{css_class}"' if css_class else ""
        extra_attr = f" {extra}" if extra else ""
        return (
            f'  <rect id="{element_id}"{class_attr} x="{self._x(x1)}" y="{self._y(z2)}" '
            f'width="{(x2 - x1) * self.scale}" height="{(z2 - z1) * self.scale}" '
            f'fill="{fill}" stroke="{self.stroke}"{extra_attr}/>'
        )

    def _render_member(self, element_id: str, member: StructuralMember) -> str:
        return self._rect(
            element_id,
            member.span.start,
            member.span.end,
            member.extent.start,
            member.extent.end,
            fill=MEMBER_KIND_COLORS[member.kind],
            css_class=f"member {member.kind.value}",
        )

    def _opening_bottom(
        self, summary: LayoutSummary, base: StructuralMember | None
    ) -> float:
        return base.extent.end if base is not None else summary.config.floor_offset

    def _opening_top(self, top: StructuralMember | None, fallback: float) -> float:
        return top.extent.start if top is not None else fallback

    def _text(self, x: float, y: float, label: str, size: float = 12.0) -> str:
        return (
            f'  <text class="dimension" x="{x}" y="{y}" text-anchor="middle" '
            f'font-family="Arial, sans-serif" font-size="{size}" '
            f'fill="{self.text_color}">{label}</text>'
        )

    def _render_dimensions(
        self, summary: LayoutSummary, bottom: float, top: float
    ) -> str:
        labels = summary.dimensions.labels()
        lines: list[str] = []

        # Overall width below the drawing
        lines.append(
            self._text(
                self._x(0.0),
                self._y(0.0) + self.margin * 0.6,
                format_dimension(summary.config.width),
            )
        )

        # Slot widths at mid-height of the opening
        mid = self._y((bottom + top) / 2)
        for slot in summary.slots:
            lines.append(self._text(self._x(slot.center), mid, labels["slot_width"], 10.0))

        if "top_inner_width" in labels and summary.top is not None:
            lines.append(
                self._text(
                    self._x(summary.top.span.center),
                    self._y(summary.top.extent.end) - 4,
                    labels["top_inner_width"],
                    10.0,
                )
            )

        if summary.soffit is not None and "soffit_inner_width" in labels:
            lines.append(
                self._text(
                    self._x(summary.soffit.region.center),
                    mid,
                    labels["soffit_inner_width"],
                    10.0,
                )
            )

        # Member heights beside each side member
        for member, key, offset in (
            (summary.left, "left_member_height", -self.margin / 2),
            (summary.right, "right_member_height", self.margin / 2),
        ):
            lines.append(
                self._text(
                    self._x(member.span.center) + offset,
                    self._y(member.extent.center),
                    labels[key],
                    10.0,
                )
            )

        return "\n".join(lines)
