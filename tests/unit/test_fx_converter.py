"""Unit tests for converting SIMM results into the calculation currency."""

from __future__ import annotations

import pytest

from simm_calc.contracts.bundles import AddOnMargin, SimmResult
from simm_calc.contracts.config import CalculationConfig
from simm_calc.domain.enums import MarginType
from simm_calc.engine.aggregator import build_breakdown
from simm_calc.engine.fx_converter import create_fx_converter


@pytest.fixture
def usd_result() -> SimmResult:
    return SimmResult(
        total=1100.0,
        add_on=100.0,
        breakdown=build_breakdown(1100.0, AddOnMargin(fixed=100.0), []),
        margin_by_type={MarginType.DELTA: 1000.0},
        simm_version="2.5",
    )


class TestFXConverter:
    def test_usd_result_unchanged(self, usd_result):
        converter = create_fx_converter()

        assert converter.convert_result(usd_result, CalculationConfig.v2_5()) is usd_result

    def test_every_amount_scaled(self, usd_result):
        converter = create_fx_converter()

        result = converter.convert_result(usd_result, CalculationConfig.v2_5("EUR", 0.92))

        assert result.currency == "EUR"
        assert result.total == pytest.approx(1012.0)
        assert result.add_on == pytest.approx(92.0)
        assert result.margin_by_type[MarginType.DELTA] == pytest.approx(920.0)
        assert result.breakdown["value"].to_list() == pytest.approx([1012.0, 92.0])

    def test_usd_at_other_rate_is_scaled(self, usd_result):
        converter = create_fx_converter()

        result = converter.convert_result(usd_result, CalculationConfig.v2_5("USD", 2.0))

        assert result.total == pytest.approx(2200.0)

    def test_input_not_mutated(self, usd_result):
        converter = create_fx_converter()

        converter.convert_result(usd_result, CalculationConfig.v2_5("EUR", 0.92))

        assert usd_result.total == 1100.0
        assert usd_result.breakdown["value"].to_list() == [1100.0, 100.0]
