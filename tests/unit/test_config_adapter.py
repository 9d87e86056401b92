"""Unit tests for converting configuration documents to domain objects."""

from wardrobe.application.config import (
    config_to_space_config,
    load_config_from_dict,
    space_config_from_schema,
)
from wardrobe.application.config.adapter import soffit_from_schema
from wardrobe.domain import InstallationType, Placement, Side, Soffit, SpaceConfig


class TestConfigToSpaceConfig:
    def test_minimal_config(self, config_data: dict) -> None:
        space = config_to_space_config(load_config_from_dict(config_data))
        assert isinstance(space, SpaceConfig)
        assert space.width == 4800.0
        assert space.installation_type is InstallationType.BUILT_IN
        assert space.requested_slot_count == 8
        assert space.soffit is None

    def test_soffit_is_converted(self, soffit_config_data: dict) -> None:
        space = config_to_space_config(load_config_from_dict(soffit_config_data))
        assert space.soffit == Soffit(side=Side.LEFT, width=900.0, height=300.0)

    def test_member_and_placement_fields(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.1",
                "space": {
                    "width": 3000,
                    "height": 2400,
                    "depth": 600,
                    "installation_type": "semi-standing",
                    "wall_side": "right",
                    "frame_thickness": 40,
                    "end_panel_thickness": 18,
                    "top_frame_height": 60,
                    "base_height": 100,
                    "floor_finish_thickness": 15,
                    "placement": "raised",
                    "raise_height": 150,
                },
            }
        )
        space = space_config_from_schema(config.space)
        assert space.wall_side is Side.RIGHT
        assert space.frame_thickness == 40.0
        assert space.end_panel_thickness == 18.0
        assert space.top_frame_height == 60.0
        assert space.base_height == 100.0
        assert space.placement is Placement.RAISED
        assert space.floor_offset == 165.0


def test_soffit_from_schema_none() -> None:
    assert soffit_from_schema(None) is None
