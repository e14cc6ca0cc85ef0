"""Unit tests for the curvature margin calculator."""

from __future__ import annotations

import pytest

from simm_calc.domain.enums import MarginType, ProductClass, RiskClass, RiskType
from simm_calc.engine.aggregation import CURVATURE_QUANTILE_TERM
from simm_calc.engine.curvature import CurvatureMarginCalculator


@pytest.fixture
def calculator() -> CurvatureMarginCalculator:
    return CurvatureMarginCalculator()


class TestRatesCurvature:
    """CVR = SF(t) x s, margin divided by HVR_IR^2."""

    def test_positive_cvr(self, calculator, provider, net):
        s = net(RiskType.IR_VOL, "USD", 1e6, "", "2w")

        component = calculator.calculate(RiskClass.RATES, [s], provider)

        cvr = 0.5 * 1e6
        expected = (cvr + CURVATURE_QUANTILE_TERM * cvr) / 0.44**2
        assert component.margin_type == MarginType.CURVATURE
        assert component.value == pytest.approx(expected)

    def test_negative_cvr_floored_at_zero(self, calculator, provider, net):
        s = net(RiskType.IR_VOL, "USD", -1e6, "", "2w")

        component = calculator.calculate(RiskClass.RATES, [s], provider)

        assert component.value == pytest.approx(0.0, abs=1e-6)

    def test_long_tenor_is_scaled_down(self, calculator, provider, net):
        short = calculator.calculate(
            RiskClass.RATES, [net(RiskType.IR_VOL, "USD", 1e6, "", "2w")], provider
        )
        long = calculator.calculate(
            RiskClass.RATES, [net(RiskType.IR_VOL, "USD", 1e6, "", "1y")], provider
        )

        assert long.value == pytest.approx(short.value * 14.0 / 365.0)


class TestVolatilityCurvature:
    """Equity, Commodity and FX weight the vega by sigma."""

    def test_equity_sigma_weighting(self, calculator, provider, net):
        s = net(RiskType.EQUITY_VOL, "ACME", 1e6, "1", "2w", product_class=ProductClass.EQUITY)
        sigma = provider.volatility(RiskType.EQUITY_VOL, "1")

        component = calculator.calculate(RiskClass.EQUITY, [s], provider)

        cvr = 0.5 * sigma * 1e6
        assert component.value == pytest.approx(cvr * (1.0 + CURVATURE_QUANTILE_TERM))

    def test_equity_bucket_12_has_no_curvature(self, calculator, provider, net):
        s = net(RiskType.EQUITY_VOL, "VIX", 1e6, "12", "2w", product_class=ProductClass.EQUITY)

        assert calculator.calculate(RiskClass.EQUITY, [s], provider) is None

    def test_fx_inverse_pairs_merge(self, calculator, provider, net):
        a = net(RiskType.FX_VOL, "EURUSD", 1e6, "", "2w")
        b = net(RiskType.FX_VOL, "USDEUR", -1e6, "", "2w")

        component = calculator.calculate(RiskClass.FX, [a, b], provider)

        assert component.value == pytest.approx(0.0, abs=1e-6)

    def test_residual_floored_separately(self, calculator, provider, net):
        regular = net(RiskType.CREDIT_VOL, "A", -1e6, "1", "2w", product_class=ProductClass.CREDIT)
        residual = net(
            RiskType.CREDIT_VOL, "B", 1e6, "Residual", "2w", product_class=ProductClass.CREDIT
        )

        component = calculator.calculate(RiskClass.CREDIT_Q, [regular, residual], provider)

        # The negative regular bucket floors to zero on its own
        cvr = 0.5 * 1e6
        assert component.value == pytest.approx(cvr * (1.0 + CURVATURE_QUANTILE_TERM))


class TestCurvatureInputs:
    def test_delta_only(self, calculator, provider, net):
        s = net(RiskType.FX, "EUR", 1e6)

        assert calculator.calculate(RiskClass.FX, [s], provider) is None
