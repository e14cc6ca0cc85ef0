"""Unit tests for the vega margin calculator."""

from __future__ import annotations

import math

import pytest

from simm_calc.domain.enums import MarginType, ProductClass, RiskClass, RiskType
from simm_calc.engine.vega import VegaMarginCalculator


@pytest.fixture
def calculator() -> VegaMarginCalculator:
    return VegaMarginCalculator()


class TestRatesVega:
    """WS = IR_VRW x s x VCR per currency."""

    def test_single_ir_vol(self, calculator, provider, net):
        s = net(RiskType.IR_VOL, "USD", 1e6, "", "1y")

        component = calculator.calculate(RiskClass.RATES, [s], provider)

        assert component.margin_type == MarginType.VEGA
        assert component.value == pytest.approx(0.18e6)
        assert component.buckets[0].bucket == "USD"

    def test_vega_concentration(self, calculator, provider, net):
        s = net(RiskType.IR_VOL, "USD", 13200e6, "", "1y")

        component = calculator.calculate(RiskClass.RATES, [s], provider)

        assert component.buckets[0].concentration == pytest.approx(2.0)
        assert component.value == pytest.approx(0.18 * 13200e6 * 2.0)

    def test_label2_is_summed_per_tenor(self, calculator, provider, net):
        a = net(RiskType.IR_VOL, "USD", 1e6, "", "1y", "OIS")
        b = net(RiskType.IR_VOL, "USD", 2e6, "", "1y", "Libor3m")

        component = calculator.calculate(RiskClass.RATES, [a, b], provider)

        assert component.value == pytest.approx(0.18 * 3e6)


class TestVolatilityVega:
    """Equity and Commodity: VR = HVR x sigma x s."""

    def test_equity_vega(self, calculator, provider, net):
        s = net(RiskType.EQUITY_VOL, "ACME", 1e6, "1", "1y", product_class=ProductClass.EQUITY)
        sigma = provider.volatility(RiskType.EQUITY_VOL, "1")

        component = calculator.calculate(RiskClass.EQUITY, [s], provider)

        assert component.value == pytest.approx(0.45 * 0.58 * sigma * 1e6)

    def test_equity_bucket_12_vega_weight(self, calculator, provider, net):
        s = net(RiskType.EQUITY_VOL, "VIX", 1e3, "12", "1y", product_class=ProductClass.EQUITY)
        sigma = provider.volatility(RiskType.EQUITY_VOL, "12")

        component = calculator.calculate(RiskClass.EQUITY, [s], provider)

        assert component.value == pytest.approx(0.96 * 0.58 * sigma * 1e3)

    def test_tenors_merge_per_qualifier(self, calculator, provider, net):
        a = net(RiskType.COMMODITY_VOL, "GOLD", 1e3, "12", "1y", product_class=ProductClass.COMMODITY)
        b = net(RiskType.COMMODITY_VOL, "GOLD", -1e3, "12", "3y", product_class=ProductClass.COMMODITY)

        component = calculator.calculate(RiskClass.COMMODITY, [a, b], provider)

        assert component.value == pytest.approx(0.0)


class TestCreditVega:
    def test_credit_vol(self, calculator, provider, net):
        s = net(RiskType.CREDIT_VOL, "ISSUER", 1e6, "1", "5y", product_class=ProductClass.CREDIT)

        component = calculator.calculate(RiskClass.CREDIT_Q, [s], provider)

        assert component.value == pytest.approx(0.74e6)


class TestFXVega:
    """FX vega: inverse currency pairs are one risk factor."""

    def test_inverse_pairs_merge(self, calculator, provider, net):
        a = net(RiskType.FX_VOL, "EURUSD", 1e6, "", "1y")
        b = net(RiskType.FX_VOL, "USDEUR", 1e6, "", "1y")
        sigma = provider.volatility(RiskType.FX_VOL, "EURUSD")

        component = calculator.calculate(RiskClass.FX, [a, b], provider)

        assert len(component.buckets) == 1
        assert component.value == pytest.approx(0.47 * 0.52 * sigma * 2e6)

    def test_distinct_pairs_correlate(self, calculator, provider, net):
        a = net(RiskType.FX_VOL, "EURUSD", 1e6, "", "1y")
        b = net(RiskType.FX_VOL, "GBPUSD", 1e6, "", "1y")
        ws = 0.47 * 0.52 * provider.volatility(RiskType.FX_VOL, "EURUSD") * 1e6

        component = calculator.calculate(RiskClass.FX, [a, b], provider)

        assert component.value == pytest.approx(math.sqrt(2 * ws**2 + 2 * 0.5 * ws**2))


class TestVegaInputs:
    def test_no_vega_inputs(self, calculator, provider, net):
        delta = net(RiskType.IR_CURVE, "USD", 1e6, "1", "5y")

        assert calculator.calculate(RiskClass.RATES, [delta], provider) is None
