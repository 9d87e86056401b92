"""Structural member resolution for wardrobe enclosures.

Decides, per side, whether the enclosure is closed by a structural frame or
a thin end panel, and places the top frame and floor base over the part of
the opening that is not covered by a soffit.

Left and right are resolved by the same function, parameterized by ``Side``;
offsets are signed so the right side is the exact mirror of the left.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..value_objects import (
    InstallationType,
    Interval,
    InvalidConfigError,
    MemberKind,
    MemberRole,
    Side,
    SpaceConfig,
    StructuralMember,
)

if TYPE_CHECKING:
    from .soffit_partitioner import SoffitPartition

__all__ = [
    "FrameResolution",
    "FrameResolver",
    "SideMembers",
    "resolve_side_kind",
    "resolve_side_member",
]

_SIDE_ROLES: dict[Side, MemberRole] = {
    Side.LEFT: MemberRole.LEFT,
    Side.RIGHT: MemberRole.RIGHT,
}


def resolve_side_kind(config: SpaceConfig, side: Side) -> MemberKind:
    """Pick the member kind closing one side of the enclosure.

    Args:
        config: Space configuration.
        side: Side to resolve.

    Returns:
        ``FRAME`` where the side meets a wall, ``END_PANEL`` where it is open.

    Raises:
        InvalidConfigError: If a semi-standing unit has no wall side.
    """
    if config.installation_type is InstallationType.BUILT_IN:
        return MemberKind.FRAME
    if config.installation_type is InstallationType.FREE_STANDING:
        return MemberKind.END_PANEL
    if config.wall_side is None:
        raise InvalidConfigError(
            "Semi-standing installation requires a wall side (left or right)",
            field="wall_side",
        )
    return MemberKind.FRAME if side is config.wall_side else MemberKind.END_PANEL


def resolve_side_member(config: SpaceConfig, side: Side) -> StructuralMember:
    """Build the vertical member on one side of the enclosure.

    The member runs from the floor offset up to the ceiling, or up to the
    underside of the soffit when the soffit hangs over this side.
    """
    kind = resolve_side_kind(config, side)
    thickness = (
        config.frame_thickness if kind is MemberKind.FRAME else config.end_panel_thickness
    )
    if thickness >= config.width / 2:
        raise InvalidConfigError(
            f"{side.value.capitalize()} {kind.value.replace('_', ' ')} thickness "
            f"({thickness:g}mm) must be less than half the width ({config.width / 2:g}mm)",
            field="frame_thickness" if kind is MemberKind.FRAME else "end_panel_thickness",
            value=thickness,
        )

    outer = side.sign * config.width / 2
    inner = outer - side.sign * thickness

    if config.floor_offset >= config.height:
        raise InvalidConfigError(
            f"Floor finish and raise height ({config.floor_offset:g}mm) exceed the "
            f"height ({config.height:g}mm)",
            field="height",
            value=config.height,
        )

    top = config.height
    soffit = config.soffit
    if soffit is not None and soffit.side is side:
        top = config.height - soffit.height
        if top <= config.floor_offset:
            raise InvalidConfigError(
                f"Soffit height ({soffit.height:g}mm) leaves no room for the "
                f"{side.value} member",
                field="soffit.height",
                value=soffit.height,
            )

    return StructuralMember(
        role=_SIDE_ROLES[side],
        kind=kind,
        thickness=thickness,
        span=Interval(min(outer, inner), max(outer, inner)),
        extent=Interval(config.floor_offset, top),
    )


@dataclass(frozen=True)
class SideMembers:
    """The two vertical members closing the enclosure."""

    left: StructuralMember
    right: StructuralMember

    def on(self, side: Side) -> StructuralMember:
        return self.left if side is Side.LEFT else self.right

    def inner_edge(self, side: Side) -> float:
        """Width-axis coordinate of the member face looking into the opening."""
        member = self.on(side)
        return member.span.end if side is Side.LEFT else member.span.start

    @property
    def total_thickness(self) -> float:
        return self.left.thickness + self.right.thickness


@dataclass(frozen=True)
class FrameResolution:
    """All structural members of the enclosure.

    Attributes:
        left: Left vertical member.
        right: Right vertical member.
        top: Top frame over the regular region (None for free-standing units).
        base: Floor base under the regular region (None for free-standing units).
        soffit_top: Top frame segment under the soffit, if any.
        soffit_base: Base segment under the soffit region, if any.
    """

    left: StructuralMember
    right: StructuralMember
    top: StructuralMember | None = None
    base: StructuralMember | None = None
    soffit_top: StructuralMember | None = None
    soffit_base: StructuralMember | None = None

    @property
    def sides(self) -> SideMembers:
        return SideMembers(self.left, self.right)

    @property
    def members(self) -> list[StructuralMember]:
        """Every member present, in left, right, top, base order."""
        candidates = [
            self.left,
            self.right,
            self.top,
            self.base,
            self.soffit_top,
            self.soffit_base,
        ]
        return [m for m in candidates if m is not None]


class FrameResolver:
    """Resolves the structural members of an enclosure."""

    def resolve_sides(self, config: SpaceConfig) -> SideMembers:
        """Resolve the left and right members with the same per-side rule."""
        return SideMembers(
            left=resolve_side_member(config, Side.LEFT),
            right=resolve_side_member(config, Side.RIGHT),
        )

    def resolve(
        self,
        config: SpaceConfig,
        sides: SideMembers | None = None,
        partition: SoffitPartition | None = None,
    ) -> FrameResolution:
        """Resolve every structural member of the enclosure.

        The top frame and base span exactly the regular region produced by the
        soffit partition: the width minus the active side members, minus the
        soffit footprint (which already contains the member on its side).
        Soffit segments span exactly the soffit region.

        Args:
            config: Space configuration.
            sides: Previously resolved side members (resolved here if omitted).
            partition: Previously computed soffit partition (computed here if
                omitted).

        Returns:
            FrameResolution with every member present in this topology.

        Raises:
            InvalidConfigError: If the configuration cannot be built.
        """
        if sides is None:
            sides = self.resolve_sides(config)
        if partition is None:
            from .soffit_partitioner import SoffitPartitioner

            partition = SoffitPartitioner().partition(config, sides)

        if not config.has_top_and_base:
            return FrameResolution(left=sides.left, right=sides.right)

        top_extent = Interval(config.height - config.top_frame_height, config.height)
        base_extent = Interval(
            config.floor_offset, config.floor_offset + config.base_height
        )
        if base_extent.end >= top_extent.start:
            raise InvalidConfigError(
                f"Top frame ({config.top_frame_height:g}mm) and base "
                f"({config.base_height:g}mm) leave no door opening in a height of "
                f"{config.height:g}mm",
                field="height",
                value=config.height,
            )

        # Soffit-side member lies inside the soffit width; never subtract it twice
        regular = partition.regular_region.as_interval()
        top = StructuralMember(
            role=MemberRole.TOP,
            kind=MemberKind.FRAME,
            thickness=config.top_frame_height,
            span=regular,
            extent=top_extent,
        )
        base = StructuralMember(
            role=MemberRole.BASE,
            kind=MemberKind.BASE,
            thickness=config.base_height,
            span=regular,
            extent=base_extent,
        )

        soffit_top = soffit_base = None
        if partition.soffit_region is not None and config.soffit is not None:
            underside = config.height - config.soffit.height
            soffit_top_extent = Interval(underside - config.top_frame_height, underside)
            if base_extent.end >= soffit_top_extent.start:
                raise InvalidConfigError(
                    f"Soffit height ({config.soffit.height:g}mm) leaves no door "
                    f"opening under the soffit",
                    field="soffit.height",
                    value=config.soffit.height,
                )
            soffit_span = partition.soffit_region.as_interval()
            soffit_top = StructuralMember(
                role=MemberRole.TOP,
                kind=MemberKind.FRAME,
                thickness=config.top_frame_height,
                span=soffit_span,
                extent=soffit_top_extent,
            )
            soffit_base = StructuralMember(
                role=MemberRole.BASE,
                kind=MemberKind.BASE,
                thickness=config.base_height,
                span=soffit_span,
                extent=base_extent,
            )

        return FrameResolution(
            left=sides.left,
            right=sides.right,
            top=top,
            base=base,
            soffit_top=soffit_top,
            soffit_base=soffit_base,
        )
