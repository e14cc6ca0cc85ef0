"""
Unit tests for risk class and cross class aggregation.

Tests cover:
- RiskClassCombiner ordering and empty input
- Psi aggregation within a product class
- Per margin type SIMM
- Breakdown row order and levels
"""

from __future__ import annotations

import math

import pytest

from simm_calc.contracts.bundles import (
    AddOnMargin,
    BucketMargin,
    MarginComponent,
    ProductClassMargin,
    RiskClassMargin,
)
from simm_calc.data.schemas import BREAKDOWN_SCHEMA
from simm_calc.domain.enums import BreakdownLevel, MarginType, ProductClass, RiskClass
from simm_calc.engine.aggregator import (
    build_breakdown,
    create_cross_class_aggregator,
    create_risk_class_combiner,
    psi_aggregate,
)


def component(margin_type: MarginType, value: float, *buckets: str) -> MarginComponent:
    return MarginComponent(
        margin_type=margin_type,
        value=value,
        buckets=tuple(BucketMargin(bucket=b, k=value, s=value) for b in buckets),
    )


def risk_class_margin(
    risk_class: RiskClass,
    *components: MarginComponent,
    product_class: ProductClass = ProductClass.RATES_FX,
) -> RiskClassMargin:
    return RiskClassMargin(
        product_class=product_class, risk_class=risk_class, components=components
    )


# =============================================================================
# Risk class combiner
# =============================================================================


class TestRiskClassCombiner:
    def test_components_in_margin_type_order(self):
        combiner = create_risk_class_combiner()

        result = combiner.combine(
            ProductClass.RATES_FX,
            RiskClass.RATES,
            [component(MarginType.CURVATURE, 3.0), None, component(MarginType.DELTA, 1.0)],
        )

        assert [c.margin_type for c in result.components] == [
            MarginType.DELTA,
            MarginType.CURVATURE,
        ]
        assert result.total == 4.0

    def test_all_components_empty(self):
        combiner = create_risk_class_combiner()

        assert combiner.combine(ProductClass.RATES_FX, RiskClass.RATES, [None, None]) is None


# =============================================================================
# Cross class aggregation
# =============================================================================


class TestPsiAggregation:
    def test_single_risk_class(self, provider):
        value = psi_aggregate(ProductClass.RATES_FX, {RiskClass.RATES: 100.0}, provider)

        assert value == pytest.approx(100.0)

    def test_rates_and_fx(self, provider):
        value = psi_aggregate(
            ProductClass.RATES_FX, {RiskClass.FX: 50.0, RiskClass.RATES: 100.0}, provider
        )

        assert value == pytest.approx(math.sqrt(100.0**2 + 50.0**2 + 2 * 0.32 * 100.0 * 50.0))

    def test_no_risk_classes(self, provider):
        assert psi_aggregate(ProductClass.RATES_FX, {}, provider) == 0.0


class TestCrossClassAggregator:
    def test_constituents_in_psi_order(self, provider):
        aggregator = create_cross_class_aggregator()
        fx = risk_class_margin(RiskClass.FX, component(MarginType.DELTA, 50.0))
        rates = risk_class_margin(RiskClass.RATES, component(MarginType.DELTA, 100.0))

        result = aggregator.aggregate(ProductClass.RATES_FX, [fx, rates], provider)

        assert [rc.risk_class for rc in result.risk_classes] == [RiskClass.RATES, RiskClass.FX]
        assert result.value == pytest.approx(
            math.sqrt(100.0**2 + 50.0**2 + 2 * 0.32 * 100.0 * 50.0)
        )

    def test_margin_by_type(self, provider):
        aggregator = create_cross_class_aggregator()
        rates = risk_class_margin(
            RiskClass.RATES,
            component(MarginType.DELTA, 100.0),
            component(MarginType.VEGA, 10.0),
        )
        fx = risk_class_margin(RiskClass.FX, component(MarginType.DELTA, 50.0))
        equity = risk_class_margin(
            RiskClass.EQUITY, component(MarginType.DELTA, 20.0), product_class=ProductClass.EQUITY
        )
        product_margins = [
            aggregator.aggregate(ProductClass.RATES_FX, [rates, fx], provider),
            aggregator.aggregate(ProductClass.EQUITY, [equity], provider),
        ]

        by_type = aggregator.margin_by_type(product_margins, provider)

        expected_delta = math.sqrt(100.0**2 + 50.0**2 + 2 * 0.32 * 100.0 * 50.0) + 20.0
        assert set(by_type) == {MarginType.DELTA, MarginType.VEGA}
        assert by_type[MarginType.DELTA] == pytest.approx(expected_delta)
        assert by_type[MarginType.VEGA] == pytest.approx(10.0)


# =============================================================================
# Breakdown
# =============================================================================


class TestBuildBreakdown:
    @pytest.fixture
    def breakdown(self):
        rates = risk_class_margin(
            RiskClass.RATES, component(MarginType.DELTA, 100.0, "EUR", "USD")
        )
        product = ProductClassMargin(
            product_class=ProductClass.RATES_FX, value=100.0, risk_classes=(rates,)
        )
        return build_breakdown(105.0, AddOnMargin(fixed=5.0), [product])

    def test_schema(self, breakdown):
        assert dict(breakdown.schema) == BREAKDOWN_SCHEMA

    def test_depth_first_order(self, breakdown):
        assert breakdown["level"].to_list() == [
            BreakdownLevel.TOTAL.value,
            BreakdownLevel.ADD_ON.value,
            BreakdownLevel.PRODUCT_CLASS.value,
            BreakdownLevel.RISK_CLASS.value,
            BreakdownLevel.MARGIN_TYPE.value,
            BreakdownLevel.BUCKET.value,
            BreakdownLevel.BUCKET.value,
        ]
        assert breakdown["bucket"].to_list()[-2:] == ["EUR", "USD"]

    def test_values(self, breakdown):
        assert breakdown["value"].to_list() == [105.0, 5.0, 100.0, 100.0, 100.0, 100.0, 100.0]

    def test_total_rows_have_no_keys(self, breakdown):
        top = breakdown.head(2)

        assert top["product_class"].null_count() == 2
        assert top["risk_class"].null_count() == 2

    def test_empty_portfolio(self):
        breakdown = build_breakdown(0.0, AddOnMargin(), [])

        assert breakdown.height == 2
        assert breakdown["value"].to_list() == [0.0, 0.0]
