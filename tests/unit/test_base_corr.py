"""Unit tests for the base correlation margin."""

from __future__ import annotations

import math

import pytest

from simm_calc.domain.enums import MarginType, ProductClass, RiskClass, RiskType
from simm_calc.engine.base_corr import BaseCorrMarginCalculator


@pytest.fixture
def calculator() -> BaseCorrMarginCalculator:
    return BaseCorrMarginCalculator()


class TestBaseCorrMargin:
    def test_single_index(self, calculator, provider, net):
        s = net(RiskType.BASE_CORR, "CDX.IG", 1e3, product_class=ProductClass.CREDIT)

        component = calculator.calculate(RiskClass.CREDIT_Q, [s], provider)

        assert component.margin_type == MarginType.BASE_CORR
        assert component.value == pytest.approx(10.0 * 1e3)
        assert component.buckets[0].bucket == "All"

    def test_indices_correlate(self, calculator, provider, net):
        a = net(RiskType.BASE_CORR, "CDX.IG", 1e3, product_class=ProductClass.CREDIT)
        b = net(RiskType.BASE_CORR, "ITRAXX", 1e3, product_class=ProductClass.CREDIT)

        component = calculator.calculate(RiskClass.CREDIT_Q, [a, b], provider)

        ws = 10.0 * 1e3
        assert component.value == pytest.approx(math.sqrt(2 * ws**2 + 2 * 0.24 * ws**2))

    def test_tenors_merge_per_index(self, calculator, provider, net):
        a = net(RiskType.BASE_CORR, "CDX.IG", 1e3, "", "5y", product_class=ProductClass.CREDIT)
        b = net(RiskType.BASE_CORR, "CDX.IG", -1e3, "", "10y", product_class=ProductClass.CREDIT)

        component = calculator.calculate(RiskClass.CREDIT_Q, [a, b], provider)

        assert component.value == 0.0

    def test_no_base_corr_inputs(self, calculator, provider, net):
        s = net(RiskType.CREDIT_Q, "ISSUER", 1e3, "1", "5y", product_class=ProductClass.CREDIT)

        assert calculator.calculate(RiskClass.CREDIT_Q, [s], provider) is None
