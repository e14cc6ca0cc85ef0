"""
Unit tests for the Polars breakdown namespaces.

Tests cover:
- expr.simm.format_amount
- df.simm.level filtering
- df.simm.risk_class_table pivot
- df.simm.with_labels path column
"""

from __future__ import annotations

import polars as pl
import pytest

import simm_calc.engine.breakdown_namespace  # noqa: F401
from simm_calc.contracts.bundles import (
    AddOnMargin,
    BucketMargin,
    MarginComponent,
    ProductClassMargin,
    RiskClassMargin,
)
from simm_calc.domain.enums import BreakdownLevel, MarginType, ProductClass, RiskClass
from simm_calc.engine.aggregator import build_breakdown


@pytest.fixture
def breakdown() -> pl.DataFrame:
    rates = RiskClassMargin(
        product_class=ProductClass.RATES_FX,
        risk_class=RiskClass.RATES,
        components=(
            MarginComponent(
                MarginType.DELTA, 100.0, (BucketMargin(bucket="USD", k=100.0, s=100.0),)
            ),
            MarginComponent(MarginType.VEGA, 10.0),
        ),
    )
    fx = RiskClassMargin(
        product_class=ProductClass.RATES_FX,
        risk_class=RiskClass.FX,
        components=(MarginComponent(MarginType.DELTA, 50.0),),
    )
    product = ProductClassMargin(
        product_class=ProductClass.RATES_FX, value=140.0, risk_classes=(rates, fx)
    )
    return build_breakdown(140.0, AddOnMargin(), [product])


class TestFormatAmount:
    def test_rounds_to_decimals(self):
        df = pl.DataFrame({"value": [1234.5678]})

        result = df.select(pl.col("value").simm.format_amount(2))

        assert result["value"][0] == "1234.57"


class TestLevel:
    def test_level_filter(self, breakdown):
        rows = breakdown.simm.level(BreakdownLevel.RISK_CLASS)

        assert rows["risk_class"].to_list() == ["Rates", "FX"]


class TestRiskClassTable:
    def test_one_row_per_risk_class(self, breakdown):
        table = breakdown.simm.risk_class_table()

        assert table.height == 2
        assert table.columns == [
            "product_class",
            "risk_class",
            "total",
            "Delta",
            "Vega",
            "Curvature",
            "BaseCorr",
        ]

    def test_absent_margin_types_are_zero(self, breakdown):
        table = breakdown.simm.risk_class_table()
        rates = table.filter(pl.col("risk_class") == "Rates").row(0, named=True)
        fx = table.filter(pl.col("risk_class") == "FX").row(0, named=True)

        assert rates["Delta"] == 100.0
        assert rates["Vega"] == 10.0
        assert rates["Curvature"] == 0.0
        assert rates["total"] == 110.0
        assert fx["Vega"] == 0.0


class TestWithLabels:
    def test_bucket_path(self, breakdown):
        labelled = breakdown.simm.with_labels()
        bucket = labelled.filter(pl.col("level") == BreakdownLevel.BUCKET.value)

        assert bucket["path"][0] == "RatesFX / Rates / Delta / USD"

    def test_custom_separator(self, breakdown):
        labelled = breakdown.simm.with_labels(separator=">")
        risk_class = labelled.filter(pl.col("level") == BreakdownLevel.RISK_CLASS.value)

        assert risk_class["path"].to_list() == ["RatesFX>Rates", "RatesFX>FX"]
