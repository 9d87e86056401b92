"""Domain services for the enclosure layout pipeline.

- FrameResolver: side members, top frame, floor base
- SoffitPartitioner: soffit region and regular region
- SlotSubdivider: equal-width door slots under the width policy
- LayoutCalculator: the whole pipeline and the dimension table
"""

from .frame_resolver import (
    FrameResolution,
    FrameResolver,
    SideMembers,
    resolve_side_kind,
    resolve_side_member,
)
from .layout_summary import (
    DimensionTable,
    LayoutCalculator,
    LayoutSummary,
    SoffitLayout,
    cached_compute_layout,
    compute_layout,
    format_dimension,
)
from .slot_subdivider import (
    SlotAllocation,
    SlotSubdivider,
    resolve_slot_count,
    slot_count_range,
)
from .soffit_partitioner import SoffitPartition, SoffitPartitioner, soffit_inner_edge

__all__ = [
    # Frames
    "FrameResolution",
    "FrameResolver",
    "SideMembers",
    "resolve_side_kind",
    "resolve_side_member",
    # Soffit
    "SoffitPartition",
    "SoffitPartitioner",
    "soffit_inner_edge",
    # Slots
    "SlotAllocation",
    "SlotSubdivider",
    "resolve_slot_count",
    "slot_count_range",
    # Summary
    "DimensionTable",
    "LayoutCalculator",
    "LayoutSummary",
    "SoffitLayout",
    "cached_compute_layout",
    "compute_layout",
    "format_dimension",
]
