"""Pydantic models for wardrobe configuration documents.

The configuration document is what the UI persists and what the CLI and
HTTP API accept. It describes the space and the user's intent; the layout
itself is always re-derived from it.

Enums are the domain's ``(str, Enum)`` classes so that JSON values map
directly to domain values.
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from wardrobe.domain.value_objects import (
    DEFAULT_BASE_HEIGHT,
    DEFAULT_END_PANEL_THICKNESS,
    DEFAULT_FRAME_THICKNESS,
    DEFAULT_TOP_FRAME_HEIGHT,
    MIN_RAISE_HEIGHT,
    InstallationType,
    Placement,
    Side,
)

# Supported schema versions for configuration files
# Version 1.0: Space, installation topology, soffit and slot count
# Version 1.1: Floor finish and raised placement
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

# Formats accepted in output.formats
OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json", "svg", "dxf"})

InstallationTypeConfig = InstallationType
SideConfig = Side
PlacementConfig = Placement


class SoffitConfigSchema(BaseModel):
    """Soffit (ceiling bulkhead) configuration.

    Attributes:
        side: Side of the space the soffit hangs over.
        width: Footprint width in mm, measured from the outer edge of the space.
        height: Drop from the ceiling in mm.
    """

    model_config = ConfigDict(extra="forbid")

    side: SideConfig = Field(..., description="Side the soffit hangs over")
    width: float = Field(..., gt=0, le=5000.0, description="Soffit width in mm")
    height: float = Field(..., gt=0, le=1000.0, description="Soffit drop in mm")


class SpaceConfigSchema(BaseModel):
    """Space dimensions and installation context.

    Attributes:
        width: Space width in mm (300 to 12000).
        height: Space height in mm (300 to 4000).
        depth: Space depth in mm (200 to 3000).
        installation_type: built-in, semi-standing or free-standing.
        wall_side: Wall side for semi-standing units.
        frame_thickness: Structural frame width in mm.
        end_panel_thickness: End panel width in mm.
        top_frame_height: Top frame height in mm.
        base_height: Floor base height in mm.
        floor_finish_thickness: Floor finish thickness in mm.
        placement: floor or raised.
        raise_height: Raise height in mm for raised placement.
        soffit: Optional soffit configuration.
        slot_count: Requested number of door slots.
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., ge=300.0, le=12000.0)
    height: float = Field(..., ge=300.0, le=4000.0)
    depth: float = Field(..., ge=200.0, le=3000.0)
    installation_type: InstallationTypeConfig = Field(
        default=InstallationTypeConfig.BUILT_IN,
        description="Installation topology",
    )
    wall_side: SideConfig | None = Field(
        default=None, description="Wall side for semi-standing units"
    )
    frame_thickness: float = Field(default=DEFAULT_FRAME_THICKNESS, gt=0, le=200.0)
    end_panel_thickness: float = Field(
        default=DEFAULT_END_PANEL_THICKNESS, gt=0, le=100.0
    )
    top_frame_height: float = Field(default=DEFAULT_TOP_FRAME_HEIGHT, gt=0, le=300.0)
    base_height: float = Field(default=DEFAULT_BASE_HEIGHT, gt=0, le=300.0)
    floor_finish_thickness: float = Field(default=0.0, ge=0, le=100.0)
    placement: PlacementConfig = Field(default=PlacementConfig.FLOOR)
    raise_height: float = Field(default=0.0, ge=0, le=500.0)
    soffit: SoffitConfigSchema | None = Field(
        default=None, description="Soffit configuration (optional)"
    )
    slot_count: int = Field(default=1, ge=1, le=40, description="Requested door slots")

    @model_validator(mode="after")
    def validate_wall_side(self) -> "SpaceConfigSchema":
        """Semi-standing units need to know which side touches the wall."""
        if (
            self.installation_type == InstallationTypeConfig.SEMI_STANDING
            and self.wall_side is None
        ):
            raise ValueError(
                "wall_side is required for semi-standing installation "
                "(use 'left' or 'right')"
            )
        return self

    @model_validator(mode="after")
    def validate_raise_height(self) -> "SpaceConfigSchema":
        """Raised placement needs a usable raise height."""
        if (
            self.placement == PlacementConfig.RAISED
            and self.raise_height < MIN_RAISE_HEIGHT
        ):
            raise ValueError(
                f"raise_height must be at least {MIN_RAISE_HEIGHT:.0f}mm "
                "for raised placement"
            )
        return self


class OutputConfig(BaseModel):
    """Output configuration.

    Attributes:
        formats: Output formats (text, json, svg, dxf).
        units: Units for exported geometry ("mm" or "m").
    """

    model_config = ConfigDict(extra="forbid")

    formats: list[str] = Field(default_factory=lambda: ["text"])
    units: Literal["mm", "m"] = "mm"

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: list[str]) -> list[str]:
        """Reject unknown output formats."""
        unknown = [f for f in v if f not in OUTPUT_FORMATS]
        if unknown:
            raise ValueError(
                f"Unknown output formats: {', '.join(unknown)}. "
                f"Supported: {', '.join(sorted(OUTPUT_FORMATS))}"
            )
        return v


class WardrobeConfiguration(BaseModel):
    """Root configuration model for wardrobe configuration documents.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        space: Space dimensions and installation context
        output: Output configuration

    Example:
        >>> config = WardrobeConfiguration(
        ...     schema_version="1.0",
        ...     space=SpaceConfigSchema(width=4800, height=2400, depth=600),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    space: SpaceConfigSchema
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
