"""Contract tests for the pipeline data bundles."""

from __future__ import annotations

import pytest

from simm_calc.contracts.bundles import (
    AddOnMargin,
    GroupedSensitivities,
    MarginComponent,
    RiskClassMargin,
    SimmResult,
)
from simm_calc.domain.enums import MarginType, ProductClass, RiskClass, RiskType
from simm_calc.engine.aggregator import build_breakdown


class TestNetSensitivity:
    def test_risk_class(self, net):
        assert net(RiskType.FX_VOL, "EURUSD", 1.0).risk_class == RiskClass.FX
        assert net(RiskType.BASE_CORR, "CDX", 1.0).risk_class == RiskClass.CREDIT_Q
        assert net(RiskType.NOTIONAL, "X", 1.0, product_class=None).risk_class is None

    def test_frozen(self, net):
        s = net(RiskType.FX, "EUR", 1.0)

        with pytest.raises(AttributeError):
            s.amount_usd = 2.0


class TestGroupedSensitivities:
    @pytest.fixture
    def grouped(self, net):
        return GroupedSensitivities(
            sensitivities=(
                net(RiskType.EQUITY, "ACME", 1.0, "1", product_class=ProductClass.EQUITY),
                net(RiskType.FX, "EUR", 1.0),
                net(RiskType.IR_CURVE, "USD", 1.0, "1", "5y"),
            ),
        )

    def test_product_classes_in_declaration_order(self, grouped):
        assert grouped.product_classes == [ProductClass.RATES_FX, ProductClass.EQUITY]

    def test_risk_classes_in_psi_order(self, grouped):
        assert grouped.risk_classes(ProductClass.RATES_FX) == [RiskClass.RATES, RiskClass.FX]

    def test_for_risk_class(self, grouped):
        selected = grouped.for_risk_class(ProductClass.RATES_FX, RiskClass.FX)

        assert [s.qualifier for s in selected] == ["EUR"]


class TestMargins:
    def test_risk_class_total_is_flat_sum(self):
        margin = RiskClassMargin(
            product_class=ProductClass.RATES_FX,
            risk_class=RiskClass.RATES,
            components=(
                MarginComponent(MarginType.DELTA, 10.0),
                MarginComponent(MarginType.CURVATURE, 2.5),
            ),
        )

        assert margin.total == 12.5
        assert margin.component(MarginType.CURVATURE).value == 2.5
        assert margin.component(MarginType.VEGA) is None

    def test_add_on_total(self):
        assert AddOnMargin(fixed=1.0, notional=2.0, multiplier=3.0).total == 6.0


class TestSimmResult:
    def test_accessors_default_to_zero(self):
        result = SimmResult(
            total=0.0, add_on=0.0, breakdown=build_breakdown(0.0, AddOnMargin(), [])
        )

        assert result.product_class_margin(ProductClass.CREDIT) == 0.0
        assert result.risk_class_margin(ProductClass.CREDIT, RiskClass.CREDIT_Q) == 0.0
        assert result.margin(ProductClass.CREDIT, RiskClass.CREDIT_Q, MarginType.DELTA) == 0.0
        assert result.bucket_margins(
            ProductClass.CREDIT, RiskClass.CREDIT_Q, MarginType.DELTA
        ).height == 0
        assert result.warnings == []
