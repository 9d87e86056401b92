"""Pytest configuration and shared fixtures for wardrobe layout tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from wardrobe.domain import (
    InstallationType,
    Side,
    Soffit,
    SpaceConfig,
    compute_layout,
)

if TYPE_CHECKING:
    from wardrobe.application.commands import ComputeLayoutCommand
    from wardrobe.domain import LayoutSummary


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Space configurations
# =============================================================================


@pytest.fixture
def built_in_config() -> SpaceConfig:
    """Built-in 4800 x 2400 x 600 space asking for 8 doors."""
    return SpaceConfig(
        width=4800.0,
        height=2400.0,
        depth=600.0,
        installation_type=InstallationType.BUILT_IN,
        requested_slot_count=8,
    )


@pytest.fixture
def soffit_config() -> SpaceConfig:
    """Built-in space with a 900mm wide, 300mm deep soffit on the left."""
    return SpaceConfig(
        width=4800.0,
        height=2400.0,
        depth=600.0,
        soffit=Soffit(side=Side.LEFT, width=900.0, height=300.0),
        requested_slot_count=6,
    )


@pytest.fixture
def semi_standing_config() -> SpaceConfig:
    """Semi-standing space against a wall on the left."""
    return SpaceConfig(
        width=3000.0,
        height=2400.0,
        depth=600.0,
        installation_type=InstallationType.SEMI_STANDING,
        wall_side=Side.LEFT,
        requested_slot_count=5,
    )


@pytest.fixture
def free_standing_config() -> SpaceConfig:
    """Free-standing 1200mm unit asking for 2 doors."""
    return SpaceConfig(
        width=1200.0,
        height=2000.0,
        depth=600.0,
        installation_type=InstallationType.FREE_STANDING,
        requested_slot_count=2,
    )


# =============================================================================
# Computed layouts
# =============================================================================


@pytest.fixture
def built_in_summary(built_in_config: SpaceConfig) -> "LayoutSummary":
    return compute_layout(built_in_config)


@pytest.fixture
def soffit_summary(soffit_config: SpaceConfig) -> "LayoutSummary":
    return compute_layout(soffit_config)


@pytest.fixture
def layout_command() -> "ComputeLayoutCommand":
    """Create a ComputeLayoutCommand with the default calculator."""
    from wardrobe.application.commands import ComputeLayoutCommand

    return ComputeLayoutCommand()


# =============================================================================
# Configuration documents
# =============================================================================


@pytest.fixture
def config_data() -> dict:
    """Minimal valid configuration document."""
    return {
        "schema_version": "1.0",
        "space": {"width": 4800, "height": 2400, "depth": 600, "slot_count": 8},
    }


@pytest.fixture
def soffit_config_data() -> dict:
    """Configuration document with a soffit and every output format."""
    return {
        "schema_version": "1.0",
        "space": {
            "width": 4800,
            "height": 2400,
            "depth": 600,
            "installation_type": "built-in",
            "slot_count": 6,
            "soffit": {"side": "left", "width": 900, "height": 300},
        },
        "output": {"formats": ["text", "json", "svg", "dxf"], "units": "mm"},
    }
