"""Value objects for the wardrobe enclosure layout engine.

All linear values are millimeters. The width axis is centered on 0, so an
enclosure of width ``W`` spans ``[-W/2, +W/2]``. The vertical axis starts at
the room floor (0) and ends at the ceiling (``height``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class InvalidConfigError(ValueError):
    """Raised when a space configuration is geometrically infeasible.

    Attributes:
        message: Human-readable description of the problem.
        field: Dotted path of the offending configuration field, if known
            (e.g. ``"soffit.width"``).
        value: The offending value, if known.
    """

    def __init__(
        self, message: str, field: str | None = None, value: Any = None
    ) -> None:
        self.message = message
        self.field = field
        self.value = value
        super().__init__(message)


class InstallationType(str, Enum):
    """How the enclosure sits between the surrounding walls.

    Attributes:
        BUILT_IN: Walls on both sides; structural frames on both sides.
        SEMI_STANDING: One side against a wall, the other side open.
        FREE_STANDING: Neither side enclosed; end panels on both sides.
    """

    BUILT_IN = "built-in"
    SEMI_STANDING = "semi-standing"
    FREE_STANDING = "free-standing"


class Side(str, Enum):
    """Horizontal side of the enclosure."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def sign(self) -> int:
        """Direction of the outer edge on the width axis (-1 left, +1 right)."""
        return -1 if self is Side.LEFT else 1

    @property
    def opposite(self) -> Side:
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


class MemberRole(str, Enum):
    """Position of a structural member in the enclosure."""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BASE = "base"


class MemberKind(str, Enum):
    """Construction of a structural member.

    Attributes:
        FRAME: Full structural frame (``frame_thickness`` wide).
        END_PANEL: Thin finishing panel used where no wall is present.
        BASE: Floor plinth carrying the doors.
    """

    FRAME = "frame"
    END_PANEL = "end_panel"
    BASE = "base"


class Placement(str, Enum):
    """How the unit stands on the floor."""

    FLOOR = "floor"
    RAISED = "raised"


# Slot width policy in millimeters
DEFAULT_MIN_SLOT_WIDTH: float = 300.0
DEFAULT_MAX_SLOT_WIDTH: float = 600.0

# Member defaults in millimeters
DEFAULT_FRAME_THICKNESS: float = 50.0
DEFAULT_END_PANEL_THICKNESS: float = 20.0
DEFAULT_TOP_FRAME_HEIGHT: float = 50.0
DEFAULT_BASE_HEIGHT: float = 80.0
MIN_RAISE_HEIGHT: float = 20.0

# Tolerance for geometric comparisons in millimeters
TOLERANCE: float = 1e-6


def _require_positive(value: float, path: str, label: str) -> None:
    """Reject non-finite and non-positive lengths."""
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfigError(f"{label} must be positive", field=path, value=value)


def _require_finite(value: float, path: str, label: str) -> None:
    if not math.isfinite(value):
        raise InvalidConfigError(
            f"{label} must be a finite number", field=path, value=value
        )


@dataclass(frozen=True)
class Interval:
    """Closed 1-D interval on the width or vertical axis."""

    start: float
    end: float

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(
                f"Interval end ({self.end}) must be greater than start ({self.start})"
            )

    @property
    def length(self) -> float:
        return self.end - self.start

    @property
    def center(self) -> float:
        return (self.start + self.end) / 2

    def overlaps(self, other: Interval, tolerance: float = TOLERANCE) -> bool:
        """Check whether the interiors of two intervals intersect."""
        return self.start < other.end - tolerance and other.start < self.end - tolerance

    def to_dict(self) -> dict[str, float]:
        return {"start": self.start, "end": self.end, "length": self.length}


@dataclass(frozen=True)
class HorizontalRegion:
    """A region of the opening on the width axis.

    Attributes:
        left_boundary: Left edge in mm (width axis centered on 0).
        right_boundary: Right edge in mm, always greater than left_boundary.
    """

    left_boundary: float
    right_boundary: float

    def __post_init__(self) -> None:
        if self.right_boundary <= self.left_boundary:
            raise ValueError(
                f"Region right boundary ({self.right_boundary}) must be greater "
                f"than left boundary ({self.left_boundary})"
            )

    @property
    def width(self) -> float:
        return self.right_boundary - self.left_boundary

    @property
    def center(self) -> float:
        return (self.left_boundary + self.right_boundary) / 2

    def as_interval(self) -> Interval:
        return Interval(self.left_boundary, self.right_boundary)

    def to_dict(self) -> dict[str, float]:
        return {
            "left_boundary": self.left_boundary,
            "right_boundary": self.right_boundary,
            "width": self.width,
        }


@dataclass(frozen=True)
class SlotWidthBounds:
    """Allowed door slot width range in millimeters."""

    min: float = DEFAULT_MIN_SLOT_WIDTH
    max: float = DEFAULT_MAX_SLOT_WIDTH

    def __post_init__(self) -> None:
        _require_positive(self.min, "slot_width_bounds.min", "Minimum slot width")
        _require_finite(self.max, "slot_width_bounds.max", "Maximum slot width")
        if self.max < self.min:
            raise InvalidConfigError(
                f"Maximum slot width ({self.max}) must not be less than "
                f"minimum slot width ({self.min})",
                field="slot_width_bounds.max",
                value=self.max,
            )

    def contains(self, width: float) -> bool:
        return self.min <= width <= self.max


@dataclass(frozen=True)
class Soffit:
    """Ceiling-mounted obstruction (ducting, air conditioner bulkhead).

    Attributes:
        side: Side of the enclosure the soffit hangs over.
        width: Footprint width measured from the enclosure's outer edge.
        height: How far the soffit drops from the ceiling.
    """

    side: Side
    width: float
    height: float

    def __post_init__(self) -> None:
        _require_positive(self.width, "soffit.width", "Soffit width")
        _require_positive(self.height, "soffit.height", "Soffit height")


@dataclass(frozen=True)
class SpaceConfig:
    """Immutable description of the enclosure and its installation context.

    Only geometry that can be checked in isolation is validated here.
    Cross-field feasibility (member thickness against width, soffit against
    the opening) is checked by the resolvers that consume the config.
    """

    width: float
    height: float
    depth: float
    installation_type: InstallationType = InstallationType.BUILT_IN
    wall_side: Side | None = None
    frame_thickness: float = DEFAULT_FRAME_THICKNESS
    end_panel_thickness: float = DEFAULT_END_PANEL_THICKNESS
    soffit: Soffit | None = None
    requested_slot_count: int = 1
    slot_width_bounds: SlotWidthBounds = field(default_factory=SlotWidthBounds)
    top_frame_height: float = DEFAULT_TOP_FRAME_HEIGHT
    base_height: float = DEFAULT_BASE_HEIGHT
    floor_finish_thickness: float = 0.0
    placement: Placement = Placement.FLOOR
    raise_height: float = 0.0

    def __post_init__(self) -> None:
        for name in (
            "width",
            "height",
            "depth",
            "frame_thickness",
            "end_panel_thickness",
            "top_frame_height",
            "base_height",
        ):
            label = name.replace("_", " ").capitalize()
            _require_positive(getattr(self, name), name, label)
        _require_finite(
            self.floor_finish_thickness, "floor_finish_thickness", "Floor finish thickness"
        )
        _require_finite(self.raise_height, "raise_height", "Raise height")
        if self.floor_finish_thickness < 0:
            raise InvalidConfigError(
                "Floor finish thickness cannot be negative",
                field="floor_finish_thickness",
                value=self.floor_finish_thickness,
            )
        if self.placement is Placement.RAISED and self.raise_height < MIN_RAISE_HEIGHT:
            raise InvalidConfigError(
                f"Raised placement requires a raise height of at least "
                f"{MIN_RAISE_HEIGHT:.0f}mm",
                field="raise_height",
                value=self.raise_height,
            )
        # bool is an int subclass but never a slot count
        if isinstance(self.requested_slot_count, bool) or not isinstance(
            self.requested_slot_count, int
        ):
            raise InvalidConfigError(
                "Requested slot count must be a whole number",
                field="requested_slot_count",
                value=self.requested_slot_count,
            )
        if self.requested_slot_count < 1:
            raise InvalidConfigError(
                "Requested slot count must be at least 1",
                field="requested_slot_count",
                value=self.requested_slot_count,
            )

    @property
    def floor_offset(self) -> float:
        """Height at which vertical members and the base start."""
        raise_height = self.raise_height if self.placement is Placement.RAISED else 0.0
        return self.floor_finish_thickness + raise_height

    @property
    def has_top_and_base(self) -> bool:
        """Free-standing units are open-topped and carry no top or base member."""
        return self.installation_type is not InstallationType.FREE_STANDING


@dataclass(frozen=True)
class StructuralMember:
    """A frame, end panel, top frame or base of the enclosure.

    Attributes:
        role: Where the member sits.
        kind: How it is constructed.
        thickness: Width for side members, height for top and base members.
        span: Horizontal interval the member occupies.
        extent: Vertical interval the member occupies.
    """

    role: MemberRole
    kind: MemberKind
    thickness: float
    span: Interval
    extent: Interval

    @property
    def height(self) -> float:
        return self.extent.length

    @property
    def width(self) -> float:
        return self.span.length

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role.value,
            "kind": self.kind.value,
            "thickness": self.thickness,
            "span": self.span.to_dict(),
            "extent": self.extent.to_dict(),
        }


@dataclass(frozen=True)
class Slot:
    """One equal-width door position inside a region."""

    index: int
    center: float
    width: float

    @property
    def left_boundary(self) -> float:
        return self.center - self.width / 2

    @property
    def right_boundary(self) -> float:
        return self.center + self.width / 2

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "center": self.center,
            "width": self.width,
            "left_boundary": self.left_boundary,
            "right_boundary": self.right_boundary,
        }
