"""Domain layer - enclosure layout engine."""

from .services import (
    DimensionTable,
    FrameResolution,
    FrameResolver,
    LayoutCalculator,
    LayoutSummary,
    SlotAllocation,
    SlotSubdivider,
    SoffitLayout,
    SoffitPartition,
    SoffitPartitioner,
    cached_compute_layout,
    compute_layout,
    format_dimension,
    resolve_slot_count,
    slot_count_range,
)
from .value_objects import (
    HorizontalRegion,
    InstallationType,
    Interval,
    InvalidConfigError,
    MemberKind,
    MemberRole,
    Placement,
    Side,
    Slot,
    SlotWidthBounds,
    Soffit,
    SpaceConfig,
    StructuralMember,
)

__all__ = [
    "DimensionTable",
    "FrameResolution",
    "FrameResolver",
    "HorizontalRegion",
    "InstallationType",
    "Interval",
    "InvalidConfigError",
    "LayoutCalculator",
    "LayoutSummary",
    "MemberKind",
    "MemberRole",
    "Placement",
    "Side",
    "Slot",
    "SlotAllocation",
    "SlotSubdivider",
    "SlotWidthBounds",
    "Soffit",
    "SoffitLayout",
    "SoffitPartition",
    "SoffitPartitioner",
    "SpaceConfig",
    "StructuralMember",
    "cached_compute_layout",
    "compute_layout",
    "format_dimension",
    "resolve_slot_count",
    "slot_count_range",
]
