"""FastAPI dependency injection for layout services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from wardrobe.application.commands import ComputeLayoutCommand
from wardrobe.domain import LayoutCalculator


@lru_cache(maxsize=1)
def get_layout_calculator() -> LayoutCalculator:
    """Get the shared LayoutCalculator; it holds no per-request state."""
    return LayoutCalculator()


def get_layout_command(
    calculator: Annotated[LayoutCalculator, Depends(get_layout_calculator)],
) -> ComputeLayoutCommand:
    """Dependency for ComputeLayoutCommand."""
    return ComputeLayoutCommand(layout_calculator=calculator)


# Type aliases for cleaner endpoint signatures
LayoutCommandDep = Annotated[ComputeLayoutCommand, Depends(get_layout_command)]
