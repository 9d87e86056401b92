"""Unit tests for the layout command and its output DTO."""

import logging

import pytest

from wardrobe.application import ComputeLayoutCommand, LayoutOutput
from wardrobe.domain import LayoutCalculator, Side, Soffit, SpaceConfig


class TestLayoutOutput:
    def test_is_valid_requires_summary(self) -> None:
        assert LayoutOutput(summary=None).is_valid is False

    def test_errors_make_output_invalid(self, built_in_summary) -> None:
        output = LayoutOutput(summary=built_in_summary, errors=["boom"])
        assert output.is_valid is False


class TestComputeLayoutCommand:
    """Tests for ComputeLayoutCommand."""

    def test_execute(
        self, layout_command: ComputeLayoutCommand, built_in_config: SpaceConfig
    ) -> None:
        output = layout_command.execute(built_in_config)
        assert output.is_valid
        assert output.summary is not None
        assert output.summary.allocation.slot_count == 8
        assert output.notes == []

    def test_adjusted_slot_count_adds_note(
        self, layout_command: ComputeLayoutCommand, soffit_config: SpaceConfig
    ) -> None:
        output = layout_command.execute(soffit_config)
        assert output.is_valid
        assert output.notes == ["Slot count adjusted from 6 to 7 (550mm per slot)"]

    def test_adjustment_is_logged(
        self,
        layout_command: ComputeLayoutCommand,
        soffit_config: SpaceConfig,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.INFO, logger="wardrobe.application.commands"):
            layout_command.execute(soffit_config)
        assert "Slot count adjusted from 6 to 7" in caplog.text

    def test_infeasible_config_returns_errors(
        self, layout_command: ComputeLayoutCommand
    ) -> None:
        config = SpaceConfig(
            width=4800.0,
            height=2400.0,
            depth=600.0,
            soffit=Soffit(side=Side.LEFT, width=4750.0, height=300.0),
        )
        output = layout_command.execute(config)
        assert output.is_valid is False
        assert output.summary is None
        assert "Soffit width (4750mm)" in output.errors[0]

    def test_injected_calculator(self, built_in_config: SpaceConfig) -> None:
        calculator = LayoutCalculator()
        command = ComputeLayoutCommand(layout_calculator=calculator)
        assert command.layout_calculator is calculator
        assert command.execute(built_in_config).is_valid
