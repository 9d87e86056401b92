"""Validation structures and layout advisory checks.

Schema validation is handled by Pydantic when a configuration is loaded.
This module adds the checks that need the domain: geometric feasibility
(reported as errors) and layout advisories such as an auto-corrected slot
count (reported as warnings).
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from wardrobe.application.config.adapter import config_to_space_config
from wardrobe.application.config.schema import WardrobeConfiguration
from wardrobe.domain.services import LayoutSummary, compute_layout, format_dimension
from wardrobe.domain.value_objects import InstallationType, InvalidConfigError

logger = logging.getLogger(__name__)


@dataclass
class ValidationError:
    """A problem that blocks layout, located by its configuration path."""

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A layout that will be produced, but not quite as requested."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors and warnings collected while checking one configuration.

    ``exit_code`` follows the ``wardrobe validate`` convention: 1 when any
    error is present, 2 for warnings only and 0 for a clean configuration.
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        return 1 if self.errors else 2 if self.warnings else 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path, message, value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(ValidationWarning(path, message, suggestion))
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Append another result's errors and warnings to this one."""
        self.errors += other.errors
        self.warnings += other.warnings
        return self


def check_layout_advisories(
    config: WardrobeConfiguration, summary: LayoutSummary
) -> ValidationResult:
    """Check a computed layout for results the user may not expect.

    Advisories checked:
    - Requested slot count was changed to respect the slot width policy
    - Soffit region is narrower than the minimum slot width
    - Regular region is narrower than the minimum slot width
    - wall_side given for a topology that ignores it
    """
    result = ValidationResult()
    space = config.space
    bounds = summary.config.slot_width_bounds

    allocation = summary.allocation
    if allocation.was_adjusted:
        fewest, most = allocation.count_range
        result.add_warning(
            path="space.slot_count",
            message=(
                f"Requested {allocation.requested_count} slots would be "
                f"{format_dimension(allocation.region.width / allocation.requested_count)} "
                f"wide; using {allocation.slot_count} slots of "
                f"{format_dimension(allocation.slot_width)}"
            ),
            suggestion=(
                f"Request between {fewest} and {most} slots to keep slot widths "
                f"between {format_dimension(bounds.min)} and {format_dimension(bounds.max)}"
            ),
        )

    if summary.soffit is not None and summary.soffit.region.width < bounds.min:
        result.add_warning(
            path="space.soffit.width",
            message=(
                f"Soffit region is only {format_dimension(summary.soffit.region.width)} "
                f"wide, narrower than the minimum slot width of "
                f"{format_dimension(bounds.min)}"
            ),
            suggestion="Consider a filler panel under the soffit",
        )

    if summary.regular_region.width < bounds.min:
        result.add_warning(
            path="space.width",
            message=(
                f"Regular region is only {format_dimension(summary.regular_region.width)} "
                f"wide and will hold a single narrow slot"
            ),
        )

    if (
        space.wall_side is not None
        and space.installation_type is not InstallationType.SEMI_STANDING
    ):
        result.add_warning(
            path="space.wall_side",
            message=(
                f"wall_side is ignored for {space.installation_type.value} "
                f"installation"
            ),
        )

    return result


def validate_config(config: WardrobeConfiguration) -> ValidationResult:
    """Perform full validation of a wardrobe configuration.

    The layout is computed once. Infeasible geometry becomes a single
    error pointing at the offending field; a feasible layout is checked
    for advisories.

    Args:
        config: A WardrobeConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = ValidationResult()

    try:
        summary = compute_layout(config_to_space_config(config))
    except InvalidConfigError as e:
        path = f"space.{e.field}" if e.field else "space"
        logger.debug(f"Configuration rejected at {path}: {e.message}")
        result.add_error(path=path, message=e.message, value=e.value)
        return result

    result.merge(check_layout_advisories(config, summary))
    return result
