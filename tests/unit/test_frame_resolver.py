"""Unit tests for structural member resolution.

Covers the per-side member choice for each installation type, the placement
of the top frame and base over the regular region, the soffit segments, and
the infeasible configurations that must be rejected.
"""

import pytest

from wardrobe.domain.services import (
    FrameResolver,
    resolve_side_kind,
    resolve_side_member,
)
from wardrobe.domain.value_objects import (
    InstallationType,
    InvalidConfigError,
    MemberKind,
    MemberRole,
    Placement,
    Side,
    Soffit,
    SpaceConfig,
)


def make_config(**overrides) -> SpaceConfig:
    values = {"width": 4800.0, "height": 2400.0, "depth": 600.0}
    values.update(overrides)
    return SpaceConfig(**values)


class TestResolveSideKind:
    """Tests for choosing frame or end panel per side."""

    @pytest.mark.parametrize("side", [Side.LEFT, Side.RIGHT])
    def test_built_in_uses_frames(self, side: Side) -> None:
        config = make_config(installation_type=InstallationType.BUILT_IN)
        assert resolve_side_kind(config, side) is MemberKind.FRAME

    @pytest.mark.parametrize("side", [Side.LEFT, Side.RIGHT])
    def test_free_standing_uses_end_panels(self, side: Side) -> None:
        config = make_config(installation_type=InstallationType.FREE_STANDING)
        assert resolve_side_kind(config, side) is MemberKind.END_PANEL

    @pytest.mark.parametrize(
        "wall_side,framed,paneled",
        [(Side.LEFT, Side.LEFT, Side.RIGHT), (Side.RIGHT, Side.RIGHT, Side.LEFT)],
    )
    def test_semi_standing_frames_wall_side(
        self, wall_side: Side, framed: Side, paneled: Side
    ) -> None:
        config = make_config(
            installation_type=InstallationType.SEMI_STANDING, wall_side=wall_side
        )
        assert resolve_side_kind(config, framed) is MemberKind.FRAME
        assert resolve_side_kind(config, paneled) is MemberKind.END_PANEL

    def test_semi_standing_without_wall_side_raises_error(self) -> None:
        config = make_config(installation_type=InstallationType.SEMI_STANDING)
        with pytest.raises(InvalidConfigError, match="wall side") as exc_info:
            resolve_side_kind(config, Side.LEFT)
        assert exc_info.value.field == "wall_side"

    def test_wall_side_ignored_for_built_in(self) -> None:
        config = make_config(wall_side=Side.LEFT)
        assert resolve_side_kind(config, Side.RIGHT) is MemberKind.FRAME


class TestResolveSideMember:
    """Tests for the geometry of one vertical member."""

    def test_left_frame_geometry(self) -> None:
        member = resolve_side_member(make_config(), Side.LEFT)
        assert member.role is MemberRole.LEFT
        assert member.kind is MemberKind.FRAME
        assert member.thickness == 50.0
        assert member.span.start == pytest.approx(-2400.0)
        assert member.span.end == pytest.approx(-2350.0)
        assert member.extent.start == 0.0
        assert member.extent.end == pytest.approx(2400.0)

    def test_right_member_mirrors_left(self) -> None:
        config = make_config()
        left = resolve_side_member(config, Side.LEFT)
        right = resolve_side_member(config, Side.RIGHT)
        assert right.span.start == pytest.approx(-left.span.end)
        assert right.span.end == pytest.approx(-left.span.start)
        assert right.extent == left.extent

    def test_soffit_shortens_member_on_its_side(self) -> None:
        config = make_config(soffit=Soffit(side=Side.LEFT, width=900.0, height=300.0))
        left = resolve_side_member(config, Side.LEFT)
        right = resolve_side_member(config, Side.RIGHT)
        assert left.height == pytest.approx(2100.0)
        assert right.height == pytest.approx(2400.0)

    def test_member_starts_at_floor_offset(self) -> None:
        config = make_config(
            floor_finish_thickness=20.0, placement=Placement.RAISED, raise_height=100.0
        )
        member = resolve_side_member(config, Side.RIGHT)
        assert member.extent.start == pytest.approx(120.0)

    def test_member_thicker_than_half_width_raises_error(self) -> None:
        config = make_config(width=300.0, frame_thickness=200.0)
        with pytest.raises(InvalidConfigError, match="less than half the width"):
            resolve_side_member(config, Side.LEFT)

    def test_floor_offset_above_height_raises_error(self) -> None:
        config = make_config(height=400.0, floor_finish_thickness=500.0)
        with pytest.raises(InvalidConfigError) as exc_info:
            resolve_side_member(config, Side.LEFT)
        assert exc_info.value.field == "height"

    def test_soffit_as_tall_as_space_raises_error(self) -> None:
        config = make_config(soffit=Soffit(side=Side.RIGHT, width=900.0, height=2400.0))
        with pytest.raises(InvalidConfigError) as exc_info:
            resolve_side_member(config, Side.RIGHT)
        assert exc_info.value.field == "soffit.height"


class TestFrameResolver:
    """Tests for the full member set."""

    def test_built_in_members(self) -> None:
        frames = FrameResolver().resolve(make_config())
        assert frames.top is not None
        assert frames.base is not None
        assert frames.top.span.length == pytest.approx(4700.0)
        assert frames.base.span.length == pytest.approx(4700.0)
        assert frames.top.extent.start == pytest.approx(2350.0)
        assert frames.base.extent.end == pytest.approx(80.0)
        assert frames.base.kind is MemberKind.BASE
        assert frames.soffit_top is None
        assert len(frames.members) == 4

    def test_free_standing_has_no_top_or_base(self) -> None:
        config = make_config(
            width=1200.0, installation_type=InstallationType.FREE_STANDING
        )
        frames = FrameResolver().resolve(config)
        assert frames.top is None
        assert frames.base is None
        assert [m.role for m in frames.members] == [MemberRole.LEFT, MemberRole.RIGHT]

    def test_top_and_base_span_regular_region_only(self) -> None:
        config = make_config(soffit=Soffit(side=Side.LEFT, width=900.0, height=300.0))
        frames = FrameResolver().resolve(config)
        assert frames.top is not None
        assert frames.top.span.start == pytest.approx(-1500.0)
        assert frames.top.span.end == pytest.approx(2350.0)
        assert frames.top.span.length == pytest.approx(3850.0)

    def test_soffit_segments(self) -> None:
        config = make_config(soffit=Soffit(side=Side.LEFT, width=900.0, height=300.0))
        frames = FrameResolver().resolve(config)
        assert frames.soffit_top is not None
        assert frames.soffit_base is not None
        assert frames.soffit_top.span.start == pytest.approx(-2350.0)
        assert frames.soffit_top.span.end == pytest.approx(-1500.0)
        assert frames.soffit_top.extent.end == pytest.approx(2100.0)
        assert frames.soffit_top.extent.start == pytest.approx(2050.0)
        assert frames.soffit_base.extent == frames.base.extent  # type: ignore[union-attr]
        assert len(frames.members) == 6

    def test_base_raised_with_floor_finish(self) -> None:
        frames = FrameResolver().resolve(make_config(floor_finish_thickness=20.0))
        assert frames.base is not None
        assert frames.base.extent.start == pytest.approx(20.0)
        assert frames.base.extent.end == pytest.approx(100.0)

    def test_no_door_opening_raises_error(self) -> None:
        config = make_config(height=120.0)
        with pytest.raises(InvalidConfigError, match="leave no door opening"):
            FrameResolver().resolve(config)

    def test_soffit_too_deep_for_doors_raises_error(self) -> None:
        config = make_config(soffit=Soffit(side=Side.LEFT, width=900.0, height=2300.0))
        with pytest.raises(InvalidConfigError, match="under the soffit"):
            FrameResolver().resolve(config)

    def test_sides_inner_edges(self) -> None:
        sides = FrameResolver().resolve_sides(make_config())
        assert sides.inner_edge(Side.LEFT) == pytest.approx(-2350.0)
        assert sides.inner_edge(Side.RIGHT) == pytest.approx(2350.0)
        assert sides.total_thickness == pytest.approx(100.0)
