"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from wardrobe.domain import LayoutSummary


@dataclass
class LayoutOutput:
    """Output DTO containing the computed layout.

    Attributes:
        summary: The layout summary, or None when computation failed.
        errors: Error messages if computation failed.
        notes: Informational messages, such as an auto-corrected slot count.
    """

    summary: LayoutSummary | None
    errors: list[str] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the layout was computed successfully."""
        return len(self.errors) == 0 and self.summary is not None
