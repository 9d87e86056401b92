"""Unit tests for soffit partitioning of the opening."""

import pytest

from wardrobe.domain.services import (
    FrameResolver,
    SoffitPartitioner,
    soffit_inner_edge,
)
from wardrobe.domain.value_objects import (
    InstallationType,
    InvalidConfigError,
    Side,
    Soffit,
    SpaceConfig,
)


def partition_for(config: SpaceConfig):
    sides = FrameResolver().resolve_sides(config)
    return SoffitPartitioner().partition(config, sides)


def make_config(soffit: Soffit | None = None, **overrides) -> SpaceConfig:
    values = {"width": 4800.0, "height": 2400.0, "depth": 600.0, "soffit": soffit}
    values.update(overrides)
    return SpaceConfig(**values)


class TestSoffitInnerEdge:
    def test_left_soffit_edge(self) -> None:
        config = make_config(Soffit(side=Side.LEFT, width=900.0, height=300.0))
        assert soffit_inner_edge(config) == pytest.approx(-1500.0)

    def test_right_soffit_edge(self) -> None:
        config = make_config(Soffit(side=Side.RIGHT, width=900.0, height=300.0))
        assert soffit_inner_edge(config) == pytest.approx(1500.0)

    def test_no_soffit_raises_error(self) -> None:
        with pytest.raises(ValueError, match="no soffit"):
            soffit_inner_edge(make_config())


class TestSoffitPartitioner:
    """Tests for SoffitPartitioner.partition."""

    def test_without_soffit_regular_region_is_interior(self) -> None:
        partition = partition_for(make_config())
        assert partition.has_soffit is False
        assert partition.soffit_region is None
        assert partition.footprint is None
        assert partition.regular_region == partition.interior
        assert partition.regular_region.width == pytest.approx(4700.0)
        assert partition.regions == [partition.regular_region]

    def test_left_soffit_regions(self) -> None:
        config = make_config(Soffit(side=Side.LEFT, width=900.0, height=300.0))
        partition = partition_for(config)

        assert partition.soffit_region is not None
        assert partition.soffit_region.left_boundary == pytest.approx(-2350.0)
        assert partition.soffit_region.right_boundary == pytest.approx(-1500.0)
        assert partition.soffit_region.width == pytest.approx(850.0)
        assert partition.regular_region.left_boundary == pytest.approx(-1500.0)
        assert partition.regular_region.width == pytest.approx(3850.0)
        assert partition.footprint is not None
        assert partition.footprint.start == pytest.approx(-2400.0)
        assert partition.footprint.length == pytest.approx(900.0)
        assert partition.regions == [partition.soffit_region, partition.regular_region]

    def test_right_soffit_mirrors_left(self) -> None:
        left = partition_for(make_config(Soffit(side=Side.LEFT, width=900.0, height=300.0)))
        right = partition_for(
            make_config(Soffit(side=Side.RIGHT, width=900.0, height=300.0))
        )
        assert right.soffit_region is not None and left.soffit_region is not None
        assert right.soffit_region.left_boundary == pytest.approx(
            -left.soffit_region.right_boundary
        )
        assert right.regular_region.right_boundary == pytest.approx(
            -left.regular_region.left_boundary
        )
        assert right.regions[-1] == right.soffit_region

    def test_soffit_over_end_panel(self) -> None:
        config = make_config(
            Soffit(side=Side.RIGHT, width=900.0, height=300.0),
            installation_type=InstallationType.SEMI_STANDING,
            wall_side=Side.LEFT,
        )
        partition = partition_for(config)
        assert partition.soffit_region is not None
        assert partition.soffit_region.width == pytest.approx(880.0)
        assert partition.regular_region.width == pytest.approx(3850.0)

    def test_regions_and_members_tile_width(self) -> None:
        config = make_config(Soffit(side=Side.LEFT, width=1234.5, height=300.0))
        sides = FrameResolver().resolve_sides(config)
        partition = SoffitPartitioner().partition(config, sides)
        total = (
            sides.total_thickness
            + partition.regular_region.width
            + partition.soffit_region.width  # type: ignore[union-attr]
        )
        assert total == pytest.approx(4800.0, abs=1e-6)

    def test_soffit_as_wide_as_opening_raises_error(self) -> None:
        config = make_config(Soffit(side=Side.LEFT, width=4700.0, height=300.0))
        with pytest.raises(InvalidConfigError) as exc_info:
            partition_for(config)
        assert exc_info.value.field == "soffit.width"
        assert exc_info.value.value == 4700.0

    def test_soffit_within_member_raises_error(self) -> None:
        config = make_config(Soffit(side=Side.LEFT, width=50.0, height=300.0))
        with pytest.raises(InvalidConfigError, match="must exceed the left member"):
            partition_for(config)
