"""Soffit partitioning of the enclosure opening.

A soffit hangs over one side of the enclosure. Its footprint is measured
from the enclosure's outer edge, so the side member on that side lies inside
the footprint. The part of the footprint between the side member and the
footprint's inner edge is the soffit region: it gets its own top frame
segment and never hosts a door slot. Everything else between the side
members is the regular region.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import (
    HorizontalRegion,
    Interval,
    InvalidConfigError,
    Side,
    SpaceConfig,
)
from .frame_resolver import SideMembers

__all__ = [
    "SoffitPartition",
    "SoffitPartitioner",
    "soffit_inner_edge",
]


def soffit_inner_edge(config: SpaceConfig) -> float:
    """Width-axis coordinate where the soffit footprint ends inside the opening.

    Raises:
        ValueError: If the configuration has no soffit.
    """
    if config.soffit is None:
        raise ValueError("Configuration has no soffit")
    side = config.soffit.side
    return side.sign * (config.width / 2 - config.soffit.width)


@dataclass(frozen=True)
class SoffitPartition:
    """Horizontal decomposition of the opening between the side members.

    Attributes:
        interior: Span between the inner faces of the side members.
        regular_region: Region that receives door slots.
        soffit_region: Region under the soffit, inside the side member
            (None without soffit).
        footprint: Full soffit footprint from the outer edge (None without
            soffit).
        soffit_side: Side the soffit hangs over (None without soffit).
    """

    interior: HorizontalRegion
    regular_region: HorizontalRegion
    soffit_region: HorizontalRegion | None = None
    footprint: Interval | None = None
    soffit_side: Side | None = None

    @property
    def has_soffit(self) -> bool:
        return self.soffit_region is not None

    @property
    def regions(self) -> list[HorizontalRegion]:
        """Regions ordered left to right."""
        if self.soffit_region is None:
            return [self.regular_region]
        if self.soffit_side is Side.LEFT:
            return [self.soffit_region, self.regular_region]
        return [self.regular_region, self.soffit_region]


class SoffitPartitioner:
    """Splits the opening into a soffit region and a regular region."""

    def partition(self, config: SpaceConfig, sides: SideMembers) -> SoffitPartition:
        """Partition the opening between the side members.

        Without a soffit the regular region spans the whole interior. With a
        soffit of width ``w`` on side S, the soffit region runs from the inner
        face of the S member to the footprint's inner edge, so its width is
        ``w`` minus that member's thickness. The regular region is the rest of
        the interior: ``width - w - (thickness of the opposite member)``.

        Args:
            config: Space configuration.
            sides: Resolved side members.

        Returns:
            SoffitPartition describing the regions.

        Raises:
            InvalidConfigError: If the soffit would consume the opening or
                would not reach past its side member.
        """
        interior = HorizontalRegion(
            sides.inner_edge(Side.LEFT), sides.inner_edge(Side.RIGHT)
        )
        soffit = config.soffit
        if soffit is None:
            return SoffitPartition(interior=interior, regular_region=interior)

        if soffit.width >= config.width - config.frame_thickness * 2:
            raise InvalidConfigError(
                f"Soffit width ({soffit.width:g}mm) must be less than the width "
                f"minus two frames ({config.width - config.frame_thickness * 2:g}mm)",
                field="soffit.width",
                value=soffit.width,
            )

        covered = sides.on(soffit.side)
        if soffit.width <= covered.thickness:
            raise InvalidConfigError(
                f"Soffit width ({soffit.width:g}mm) must exceed the {soffit.side.value} "
                f"member thickness ({covered.thickness:g}mm)",
                field="soffit.width",
                value=soffit.width,
            )

        edge = soffit_inner_edge(config)
        outer = soffit.side.sign * config.width / 2
        inner_face = sides.inner_edge(soffit.side)
        opposite_face = sides.inner_edge(soffit.side.opposite)

        if (opposite_face - edge) * soffit.side.sign >= 0:
            raise InvalidConfigError(
                f"Soffit width ({soffit.width:g}mm) leaves no regular region",
                field="soffit.width",
                value=soffit.width,
            )

        soffit_region = HorizontalRegion(min(inner_face, edge), max(inner_face, edge))
        regular_region = HorizontalRegion(
            min(edge, opposite_face), max(edge, opposite_face)
        )
        return SoffitPartition(
            interior=interior,
            regular_region=regular_region,
            soffit_region=soffit_region,
            footprint=Interval(min(outer, edge), max(outer, edge)),
            soffit_side=soffit.side,
        )
