"""Adapter from configuration schemas to domain value objects."""

from wardrobe.application.config.schema import (
    SoffitConfigSchema,
    SpaceConfigSchema,
    WardrobeConfiguration,
)
from wardrobe.domain.value_objects import Soffit, SpaceConfig


def soffit_from_schema(soffit: SoffitConfigSchema | None) -> Soffit | None:
    if soffit is None:
        return None
    return Soffit(side=soffit.side, width=soffit.width, height=soffit.height)


def space_config_from_schema(space: SpaceConfigSchema) -> SpaceConfig:
    """Build a domain SpaceConfig from the space section of a configuration.

    Raises:
        InvalidConfigError: If the values are rejected by the domain.
    """
    return SpaceConfig(
        width=space.width,
        height=space.height,
        depth=space.depth,
        installation_type=space.installation_type,
        wall_side=space.wall_side,
        frame_thickness=space.frame_thickness,
        end_panel_thickness=space.end_panel_thickness,
        soffit=soffit_from_schema(space.soffit),
        requested_slot_count=space.slot_count,
        top_frame_height=space.top_frame_height,
        base_height=space.base_height,
        floor_finish_thickness=space.floor_finish_thickness,
        placement=space.placement,
        raise_height=space.raise_height,
    )


def config_to_space_config(config: WardrobeConfiguration) -> SpaceConfig:
    """Convert a validated WardrobeConfiguration to a domain SpaceConfig.

    Example:
        >>> config = load_config(Path("hallway.json"))
        >>> space = config_to_space_config(config)
        >>> summary = compute_layout(space)
    """
    return space_config_from_schema(config.space)
