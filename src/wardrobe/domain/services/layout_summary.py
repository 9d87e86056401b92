"""Layout summary: the full decomposition of a wardrobe enclosure.

``compute_layout`` runs the whole pipeline once: side members, soffit
partition, top and base members, slot subdivision of the regular region.
The dimension table shown to the user is read back from that geometry and
never recomputed on its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from ..value_objects import (
    HorizontalRegion,
    Interval,
    Side,
    Slot,
    SpaceConfig,
    StructuralMember,
)
from .frame_resolver import FrameResolution, FrameResolver
from .slot_subdivider import SlotAllocation, SlotSubdivider
from .soffit_partitioner import SoffitPartition, SoffitPartitioner

__all__ = [
    "DimensionTable",
    "LayoutCalculator",
    "LayoutSummary",
    "SoffitLayout",
    "cached_compute_layout",
    "compute_layout",
    "format_dimension",
]


def format_dimension(value: float, with_unit: bool = True) -> str:
    """Format a length for display, rounded to whole millimeters.

    Example:
        >>> format_dimension(4700.0)
        '4700mm'
        >>> format_dimension(316.666, with_unit=False)
        '317'
    """
    rounded = int(round(value))
    return f"{rounded}mm" if with_unit else f"{rounded}"


@dataclass(frozen=True)
class DimensionTable:
    """Clear-opening measurements for on-screen labels.

    Attributes:
        opening_inner_width: Span between the side members.
        top_inner_width: Span of the top frame (None without top frame).
        base_inner_width: Span of the base (None without base).
        soffit_inner_width: Span of the soffit region (None without soffit).
        left_member_height: Height of the left member.
        right_member_height: Height of the right member.
        slot_width: Width of each door slot.
        slot_count: Number of door slots.
    """

    opening_inner_width: float
    top_inner_width: float | None
    base_inner_width: float | None
    soffit_inner_width: float | None
    left_member_height: float
    right_member_height: float
    slot_width: float
    slot_count: int

    def labels(self) -> dict[str, str]:
        """Formatted labels for every dimension present."""
        values: dict[str, float | None] = {
            "opening_inner_width": self.opening_inner_width,
            "top_inner_width": self.top_inner_width,
            "base_inner_width": self.base_inner_width,
            "soffit_inner_width": self.soffit_inner_width,
            "left_member_height": self.left_member_height,
            "right_member_height": self.right_member_height,
            "slot_width": self.slot_width,
        }
        return {
            name: format_dimension(value)
            for name, value in values.items()
            if value is not None
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "opening_inner_width": self.opening_inner_width,
            "top_inner_width": self.top_inner_width,
            "base_inner_width": self.base_inner_width,
            "soffit_inner_width": self.soffit_inner_width,
            "left_member_height": self.left_member_height,
            "right_member_height": self.right_member_height,
            "slot_width": self.slot_width,
            "slot_count": self.slot_count,
        }


@dataclass(frozen=True)
class SoffitLayout:
    """Sub-layout of the area under the soffit.

    Attributes:
        side: Side the soffit hangs over.
        footprint: Full soffit footprint measured from the outer edge.
        region: Part of the footprint inside the side member.
        clear_height: Height from the floor to the soffit underside.
        top_member: Top frame segment under the soffit (None when free-standing).
        base_member: Base segment under the soffit region (None when free-standing).
    """

    side: Side
    footprint: Interval
    region: HorizontalRegion
    clear_height: float
    top_member: StructuralMember | None = None
    base_member: StructuralMember | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "side": self.side.value,
            "footprint": self.footprint.to_dict(),
            "region": self.region.to_dict(),
            "clear_height": self.clear_height,
            "top_member": self.top_member.to_dict() if self.top_member else None,
            "base_member": self.base_member.to_dict() if self.base_member else None,
        }


@dataclass(frozen=True)
class LayoutSummary:
    """Complete, internally consistent decomposition of an enclosure."""

    config: SpaceConfig
    frames: FrameResolution
    partition: SoffitPartition
    allocation: SlotAllocation
    soffit: SoffitLayout | None
    dimensions: DimensionTable

    @property
    def left(self) -> StructuralMember:
        return self.frames.left

    @property
    def right(self) -> StructuralMember:
        return self.frames.right

    @property
    def top(self) -> StructuralMember | None:
        return self.frames.top

    @property
    def base(self) -> StructuralMember | None:
        return self.frames.base

    @property
    def members(self) -> list[StructuralMember]:
        return self.frames.members

    @property
    def interior(self) -> HorizontalRegion:
        return self.partition.interior

    @property
    def regular_region(self) -> HorizontalRegion:
        return self.partition.regular_region

    @property
    def soffit_region(self) -> HorizontalRegion | None:
        return self.partition.soffit_region

    @property
    def slots(self) -> tuple[Slot, ...]:
        return self.allocation.slots

    @property
    def slot_count_adjusted(self) -> bool:
        return self.allocation.was_adjusted

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form of the summary, in millimeters."""
        return {
            "width": self.config.width,
            "height": self.config.height,
            "depth": self.config.depth,
            "installation_type": self.config.installation_type.value,
            "wall_side": self.config.wall_side.value if self.config.wall_side else None,
            "members": {
                "left": self.left.to_dict(),
                "right": self.right.to_dict(),
                "top": self.top.to_dict() if self.top else None,
                "base": self.base.to_dict() if self.base else None,
            },
            "interior": self.interior.to_dict(),
            "regular_region": self.regular_region.to_dict(),
            "soffit": self.soffit.to_dict() if self.soffit else None,
            "slots": {
                "requested_count": self.allocation.requested_count,
                "count": self.allocation.slot_count,
                "width": self.allocation.slot_width,
                "adjusted": self.allocation.was_adjusted,
                "count_range": list(self.allocation.count_range),
                "items": [slot.to_dict() for slot in self.slots],
            },
            "dimensions": self.dimensions.to_dict(),
            "labels": self.dimensions.labels(),
        }


class LayoutCalculator:
    """Runs the layout pipeline for a space configuration."""

    def __init__(
        self,
        frame_resolver: FrameResolver | None = None,
        soffit_partitioner: SoffitPartitioner | None = None,
        slot_subdivider: SlotSubdivider | None = None,
    ) -> None:
        self.frame_resolver = frame_resolver or FrameResolver()
        self.soffit_partitioner = soffit_partitioner or SoffitPartitioner()
        self.slot_subdivider = slot_subdivider or SlotSubdivider()

    def compute(self, config: SpaceConfig) -> LayoutSummary:
        """Compute the full layout.

        The soffit region is never subdivided; only the regular region
        receives door slots. Slots always use ``config.slot_width_bounds``,
        not the bounds the injected SlotSubdivider was built with.

        Args:
            config: Space configuration.

        Returns:
            The complete LayoutSummary.

        Raises:
            InvalidConfigError: If the configuration cannot be built. No
                partial summary is ever returned.
        """
        sides = self.frame_resolver.resolve_sides(config)
        partition = self.soffit_partitioner.partition(config, sides)
        frames = self.frame_resolver.resolve(config, sides=sides, partition=partition)
        allocation = self.slot_subdivider.subdivide(
            partition.regular_region,
            config.requested_slot_count,
            config.slot_width_bounds,
        )

        soffit_layout = None
        if (
            config.soffit is not None
            and partition.soffit_region is not None
            and partition.footprint is not None
        ):
            side_member = frames.sides.on(config.soffit.side)
            soffit_layout = SoffitLayout(
                side=config.soffit.side,
                footprint=partition.footprint,
                region=partition.soffit_region,
                clear_height=side_member.extent.end,
                top_member=frames.soffit_top,
                base_member=frames.soffit_base,
            )

        dimensions = DimensionTable(
            opening_inner_width=partition.interior.width,
            top_inner_width=frames.top.span.length if frames.top else None,
            base_inner_width=frames.base.span.length if frames.base else None,
            soffit_inner_width=soffit_layout.region.width if soffit_layout else None,
            left_member_height=frames.left.height,
            right_member_height=frames.right.height,
            slot_width=allocation.slot_width,
            slot_count=allocation.slot_count,
        )

        return LayoutSummary(
            config=config,
            frames=frames,
            partition=partition,
            allocation=allocation,
            soffit=soffit_layout,
            dimensions=dimensions,
        )


def compute_layout(config: SpaceConfig) -> LayoutSummary:
    """Compute the layout of an enclosure with the default services."""
    return LayoutCalculator().compute(config)


@lru_cache(maxsize=256)
def cached_compute_layout(config: SpaceConfig) -> LayoutSummary:
    """Memoized ``compute_layout``; the output depends only on the config."""
    return compute_layout(config)
