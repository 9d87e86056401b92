"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from wardrobe.application.config.schema import (
    OutputConfig,
    SpaceConfigSchema,
    WardrobeConfiguration,
)
from wardrobe.domain.value_objects import InstallationType, Side


def merge_config_with_cli(
    config: WardrobeConfiguration,
    *,
    width: float | None = None,
    height: float | None = None,
    depth: float | None = None,
    installation_type: InstallationType | str | None = None,
    wall_side: Side | str | None = None,
    slot_count: int | None = None,
    soffit_side: Side | str | None = None,
    soffit_width: float | None = None,
    soffit_height: float | None = None,
    output_formats: list[str] | None = None,
) -> WardrobeConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base WardrobeConfiguration to merge with
        width: Override for space.width
        height: Override for space.height
        depth: Override for space.depth
        installation_type: Override for space.installation_type
        wall_side: Override for space.wall_side
        slot_count: Override for space.slot_count
        soffit_side: Override for space.soffit.side
        soffit_width: Override for space.soffit.width
        soffit_height: Override for space.soffit.height
        output_formats: Override for output.formats

    Returns:
        A new WardrobeConfiguration with merged values. The result is
        validated again, so an override that breaks the schema raises
        pydantic's ValidationError.

    Example:
        >>> merged = merge_config_with_cli(config, width=3600.0)
        >>> merged.space.width
        3600.0
    """
    space_data = _build_space_data(
        config, width, height, depth, installation_type, wall_side, slot_count
    )
    soffit_data = _build_soffit_data(config, soffit_side, soffit_width, soffit_height)
    if soffit_data is not None:
        space_data["soffit"] = soffit_data
    output_data = config.output.model_dump()
    if output_formats is not None:
        output_data["formats"] = list(output_formats)

    return WardrobeConfiguration(
        schema_version=config.schema_version,
        space=SpaceConfigSchema.model_validate(space_data),
        output=OutputConfig.model_validate(output_data),
    )


def _build_space_data(
    config: WardrobeConfiguration,
    width: float | None,
    height: float | None,
    depth: float | None,
    installation_type: InstallationType | str | None,
    wall_side: Side | str | None,
    slot_count: int | None,
) -> dict[str, Any]:
    space_data = config.space.model_dump()

    if width is not None:
        space_data["width"] = width
    if height is not None:
        space_data["height"] = height
    if depth is not None:
        space_data["depth"] = depth
    if installation_type is not None:
        space_data["installation_type"] = InstallationType(installation_type)
    if wall_side is not None:
        space_data["wall_side"] = Side(wall_side)
    if slot_count is not None:
        space_data["slot_count"] = slot_count

    return space_data


def _build_soffit_data(
    config: WardrobeConfiguration,
    side: Side | str | None,
    width: float | None,
    height: float | None,
) -> dict[str, Any] | None:
    """Build soffit data with CLI overrides applied.

    Overrides are merged field by field into an existing soffit. Without
    one, all three values are needed to describe a new soffit; partial
    values are passed through so the schema reports what is missing.
    """
    if side is None and width is None and height is None:
        return None

    soffit_data: dict[str, Any] = (
        config.space.soffit.model_dump() if config.space.soffit is not None else {}
    )
    if side is not None:
        soffit_data["side"] = Side(side)
    if width is not None:
        soffit_data["width"] = width
    if height is not None:
        soffit_data["height"] = height
    return soffit_data
