"""Unit tests for merging CLI overrides into a configuration."""

import pytest

from wardrobe.application.config import (
    WardrobeConfiguration,
    load_config_from_dict,
    merge_config_with_cli,
)
from wardrobe.domain import InstallationType, Side


@pytest.fixture
def base_config(config_data: dict) -> WardrobeConfiguration:
    return load_config_from_dict(config_data)


@pytest.fixture
def soffit_base_config(soffit_config_data: dict) -> WardrobeConfiguration:
    return load_config_from_dict(soffit_config_data)


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli."""

    def test_no_overrides_keeps_values(self, base_config: WardrobeConfiguration) -> None:
        merged = merge_config_with_cli(base_config)
        assert merged == base_config
        assert merged is not base_config

    def test_dimension_overrides(self, base_config: WardrobeConfiguration) -> None:
        merged = merge_config_with_cli(base_config, width=3600.0, depth=450.0)
        assert merged.space.width == 3600.0
        assert merged.space.height == 2400.0
        assert merged.space.depth == 450.0

    def test_original_is_unchanged(self, base_config: WardrobeConfiguration) -> None:
        merge_config_with_cli(base_config, width=3600.0)
        assert base_config.space.width == 4800.0

    def test_installation_overrides_from_strings(
        self, base_config: WardrobeConfiguration
    ) -> None:
        merged = merge_config_with_cli(
            base_config, installation_type="semi-standing", wall_side="right"
        )
        assert merged.space.installation_type is InstallationType.SEMI_STANDING
        assert merged.space.wall_side is Side.RIGHT

    def test_slot_count_override(self, base_config: WardrobeConfiguration) -> None:
        merged = merge_config_with_cli(base_config, slot_count=3)
        assert merged.space.slot_count == 3

    def test_new_soffit_from_overrides(self, base_config: WardrobeConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config, soffit_side="right", soffit_width=700.0, soffit_height=250.0
        )
        assert merged.space.soffit is not None
        assert merged.space.soffit.side is Side.RIGHT
        assert merged.space.soffit.width == 700.0

    def test_partial_soffit_override_merges_fields(
        self, soffit_base_config: WardrobeConfiguration
    ) -> None:
        merged = merge_config_with_cli(soffit_base_config, soffit_width=1200.0)
        assert merged.space.soffit is not None
        assert merged.space.soffit.width == 1200.0
        assert merged.space.soffit.side is Side.LEFT
        assert merged.space.soffit.height == 300.0

    def test_partial_soffit_without_existing_soffit_fails(
        self, base_config: WardrobeConfiguration
    ) -> None:
        with pytest.raises(ValueError):
            merge_config_with_cli(base_config, soffit_width=700.0)

    def test_output_formats_override(self, base_config: WardrobeConfiguration) -> None:
        merged = merge_config_with_cli(base_config, output_formats=["svg", "dxf"])
        assert merged.output.formats == ["svg", "dxf"]

    def test_invalid_override_is_rejected(
        self, base_config: WardrobeConfiguration
    ) -> None:
        with pytest.raises(ValueError):
            merge_config_with_cli(base_config, width=50.0)

    def test_invalid_enum_override_is_rejected(
        self, base_config: WardrobeConfiguration
    ) -> None:
        with pytest.raises(ValueError):
            merge_config_with_cli(base_config, installation_type="wall-hung")

    def test_semi_standing_override_without_wall_side_fails(
        self, base_config: WardrobeConfiguration
    ) -> None:
        with pytest.raises(ValueError, match="wall_side is required"):
            merge_config_with_cli(base_config, installation_type="semi-standing")
