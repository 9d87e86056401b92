"""Application commands (use cases) for wardrobe layout."""

from __future__ import annotations

import logging

from wardrobe.domain import (
    InvalidConfigError,
    LayoutCalculator,
    SpaceConfig,
    format_dimension,
)

from .dtos import LayoutOutput

logger = logging.getLogger(__name__)


class ComputeLayoutCommand:
    """Command to compute the layout of a wardrobe enclosure."""

    def __init__(self, layout_calculator: LayoutCalculator | None = None) -> None:
        self.layout_calculator = layout_calculator or LayoutCalculator()

    def execute(self, space_config: SpaceConfig) -> LayoutOutput:
        """Execute the layout computation.

        Infeasible configurations are reported in ``errors`` instead of
        being raised, so callers can present them alongside other input
        problems.

        Args:
            space_config: Space configuration.

        Returns:
            LayoutOutput with the summary, or with errors and no summary.
        """
        logger.debug(
            f"Computing layout for {space_config.width}x{space_config.height}mm "
            f"{space_config.installation_type.value} space"
        )
        try:
            summary = self.layout_calculator.compute(space_config)
        except InvalidConfigError as e:
            logger.info(f"Layout rejected: {e.message}")
            return LayoutOutput(summary=None, errors=[e.message])

        notes: list[str] = []
        allocation = summary.allocation
        if allocation.was_adjusted:
            note = (
                f"Slot count adjusted from {allocation.requested_count} to "
                f"{allocation.slot_count} ({format_dimension(allocation.slot_width)} "
                f"per slot)"
            )
            logger.info(note)
            notes.append(note)

        logger.debug(
            f"Layout computed: {allocation.slot_count} slots of "
            f"{allocation.slot_width:.1f}mm"
        )
        return LayoutOutput(summary=summary, notes=notes)
