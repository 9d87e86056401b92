"""Door slot subdivision of a horizontal region.

Resolves how many equal-width door slots fit a region under the slot width
policy, and tiles the region with them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..value_objects import HorizontalRegion, Slot, SlotWidthBounds

__all__ = [
    "SlotAllocation",
    "SlotSubdivider",
    "resolve_slot_count",
    "slot_count_range",
]

# Guards floor/ceil against widths like 1799.9999999 produced by float edges
_COUNT_EPSILON = 1e-9


def resolve_slot_count(
    available_width: float,
    requested_count: int,
    bounds: SlotWidthBounds,
) -> int:
    """Resolve the final slot count for a region.

    Algorithm:
    1. ``naive = width / requested``. Accept the request when the naive width
       lies within ``[bounds.min, bounds.max]``.
    2. Too narrow: use the largest count whose width stays at or above
       ``bounds.min`` (at least 1).
    3. Too wide: use the smallest count whose width stays at or below
       ``bounds.max``.

    A region narrower than ``bounds.min`` resolves to a single slot spanning
    the region; it cannot be split further.

    Args:
        available_width: Width of the region in mm.
        requested_count: Slot count the user asked for (>= 1).
        bounds: Allowed slot width range.

    Returns:
        The resolved slot count.

    Raises:
        ValueError: If the width or requested count is not positive.

    Example:
        >>> resolve_slot_count(1900.0, 8, SlotWidthBounds())
        6
        >>> resolve_slot_count(3850.0, 6, SlotWidthBounds())
        7
    """
    if available_width <= 0:
        raise ValueError("Available width must be positive")
    if requested_count < 1:
        raise ValueError("Requested slot count must be at least 1")

    naive_width = available_width / requested_count
    if bounds.contains(naive_width):
        return requested_count
    if naive_width < bounds.min:
        return max(1, math.floor(available_width / bounds.min + _COUNT_EPSILON))
    return max(1, math.ceil(available_width / bounds.max - _COUNT_EPSILON))


def slot_count_range(width: float, bounds: SlotWidthBounds) -> tuple[int, int]:
    """Smallest and largest slot counts whose width stays within ``bounds``.

    This is the range a slot count input should offer for a region. A region
    narrower than ``bounds.min`` allows exactly one slot. With bounds closer
    than a factor of two some widths admit no count at all; the range then
    collapses to the smallest count that respects ``bounds.max``.

    Example:
        >>> slot_count_range(4700.0, SlotWidthBounds())
        (8, 15)
        >>> slot_count_range(250.0, SlotWidthBounds())
        (1, 1)
    """
    if not width > 0:
        raise ValueError("Width must be positive")
    fewest = max(1, math.ceil(width / bounds.max - _COUNT_EPSILON))
    most = max(1, math.floor(width / bounds.min + _COUNT_EPSILON))
    return fewest, max(fewest, most)


@dataclass(frozen=True)
class SlotAllocation:
    """Resolved slot tiling of a region.

    Attributes:
        region: Region being tiled.
        requested_count: Slot count the caller asked for.
        slot_count: Slot count actually used.
        slot_width: Width of every slot (region width / slot_count).
        slots: Slots ordered left to right.
        count_range: Fewest and most slots the region allows under the
            width bounds it was tiled with.
    """

    region: HorizontalRegion
    requested_count: int
    slot_count: int
    slot_width: float
    slots: tuple[Slot, ...]
    count_range: tuple[int, int]

    @property
    def was_adjusted(self) -> bool:
        """True when the slot count differs from the requested count."""
        return self.slot_count != self.requested_count

    @property
    def boundaries(self) -> list[float]:
        """Slot edges from the region's left boundary to its right boundary."""
        edges = [self.region.left_boundary + i * self.slot_width for i in range(self.slot_count)]
        edges.append(self.region.right_boundary)
        return edges


class SlotSubdivider:
    """Tiles a region with equal-width door slots.

    The constructor bounds are only a default for direct ``subdivide`` calls.
    LayoutCalculator always passes the configuration's own bounds.
    """

    def __init__(self, bounds: SlotWidthBounds | None = None) -> None:
        self.bounds = bounds or SlotWidthBounds()

    def subdivide(
        self,
        region: HorizontalRegion,
        requested_count: int,
        bounds: SlotWidthBounds | None = None,
    ) -> SlotAllocation:
        """Resolve the slot count and lay the slots out across the region.

        Slot ``i`` is centered at ``left + (i + 0.5) * width`` where ``width``
        is the region width divided by the resolved count, so the slots tile
        the region with no gap and no remainder.

        Args:
            region: Region to tile.
            requested_count: Slot count the caller asked for.
            bounds: Width bounds overriding the subdivider's default.

        Returns:
            SlotAllocation with the resolved count and the slots.
        """
        active_bounds = bounds or self.bounds
        count = resolve_slot_count(region.width, requested_count, active_bounds)
        slot_width = region.width / count
        slots = tuple(
            Slot(
                index=i,
                center=region.left_boundary + (i + 0.5) * slot_width,
                width=slot_width,
            )
            for i in range(count)
        )
        return SlotAllocation(
            region=region,
            requested_count=requested_count,
            slot_count=count,
            slot_width=slot_width,
            slots=slots,
            count_range=slot_count_range(region.width, active_bounds),
        )
