"""
Risk class and cross class aggregation for the SIMM calculator.

Pipeline position:
    Margin calculators -> RiskClassCombiner -> CrossClassAggregator -> AddOnCombiner

Key responsibilities:
- Sum margin types into a risk class margin (no correlation across types)
- Combine risk class margins of a product class with psi:
      SIMM_p = sqrt(max(sum_r sum_s psi_rs K_r K_s, 0))
- Sum product class margins with no diversification
- Per margin type SIMM (the psi aggregation restricted to one margin type)
- Build the hierarchical breakdown DataFrame

Usage:
    from simm_calc.engine.aggregator import create_cross_class_aggregator

    aggregator = create_cross_class_aggregator()
    product_margin = aggregator.aggregate(ProductClass.RATES_FX, risk_class_margins, provider)
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

import numpy as np
import polars as pl

from simm_calc.contracts.bundles import (
    AddOnMargin,
    MarginComponent,
    ProductClassMargin,
    RiskClassMargin,
)
from simm_calc.data.schemas import BREAKDOWN_SCHEMA
from simm_calc.domain.enums import BreakdownLevel, MarginType, ProductClass, RiskClass

if TYPE_CHECKING:
    from simm_calc.contracts.protocols import WeightsAndCorrelationsProtocol


# =============================================================================
# Risk class combiner
# =============================================================================


class RiskClassCombiner:
    """Flat sum of the margin types of one risk class."""

    def combine(
        self,
        product_class: ProductClass,
        risk_class: RiskClass,
        components: Iterable[MarginComponent | None],
    ) -> RiskClassMargin | None:
        """
        Collect the non-empty components in MarginType order.

        Returns:
            RiskClassMargin, or None if every component is empty
        """
        present = {c.margin_type: c for c in components if c is not None}
        if not present:
            return None
        return RiskClassMargin(
            product_class=product_class,
            risk_class=risk_class,
            components=tuple(present[mt] for mt in MarginType if mt in present),
        )


# =============================================================================
# Cross class aggregator
# =============================================================================


def psi_aggregate(
    product_class: ProductClass,
    margins: dict[RiskClass, float],
    provider: WeightsAndCorrelationsProtocol,
) -> float:
    """sqrt(max(sum_r sum_s psi_rs K_r K_s, 0)) over risk classes in psi order."""
    ordered = [rc for rc in RiskClass if rc in margins]
    if not ordered:
        return 0.0
    k = np.array([margins[rc] for rc in ordered])
    psi = np.array(
        [
            [
                1.0 if a == b else provider.cross_class_correlation(product_class, a, b)
                for b in ordered
            ]
            for a in ordered
        ]
    )
    return math.sqrt(max(float(k @ psi @ k), 0.0))


class CrossClassAggregator:
    """
    Psi aggregation of risk class margins.

    Stateless; the provider supplies psi per call.
    """

    def aggregate(
        self,
        product_class: ProductClass,
        risk_classes: Sequence[RiskClassMargin],
        provider: WeightsAndCorrelationsProtocol,
    ) -> ProductClassMargin:
        """
        Compute the margin of one product class.

        Args:
            product_class: Product class being aggregated
            risk_classes: Risk class margins of the product class
            provider: Versioned weights and correlations

        Returns:
            ProductClassMargin with constituents in psi order
        """
        by_class = {rc.risk_class: rc for rc in risk_classes}
        ordered = tuple(by_class[rc] for rc in RiskClass if rc in by_class)
        value = psi_aggregate(
            product_class, {rc.risk_class: rc.total for rc in ordered}, provider
        )
        return ProductClassMargin(product_class=product_class, value=value, risk_classes=ordered)

    def margin_by_type(
        self,
        product_margins: Sequence[ProductClassMargin],
        provider: WeightsAndCorrelationsProtocol,
    ) -> dict[MarginType, float]:
        """
        Portfolio SIMM restricted to each margin type.

        The psi aggregation is applied to the single margin type within each
        product class and the product class results are summed.
        """
        result: dict[MarginType, float] = {}
        for margin_type in MarginType:
            total = 0.0
            found = False
            for pm in product_margins:
                values = {}
                for rc in pm.risk_classes:
                    component = rc.component(margin_type)
                    if component is not None:
                        values[rc.risk_class] = component.value
                if values:
                    found = True
                    total += psi_aggregate(pm.product_class, values, provider)
            if found:
                result[margin_type] = total
        return result


# =============================================================================
# Breakdown
# =============================================================================


def build_breakdown(
    total: float,
    add_on: AddOnMargin,
    product_margins: Sequence[ProductClassMargin],
) -> pl.DataFrame:
    """
    Hierarchical breakdown following BREAKDOWN_SCHEMA.

    Rows are emitted depth first: total, add-on, then each product class
    followed by its risk classes, margin types and buckets.
    """
    rows: list[tuple[str, str | None, str | None, str | None, str | None, float]] = [
        (BreakdownLevel.TOTAL.value, None, None, None, None, total),
        (BreakdownLevel.ADD_ON.value, None, None, None, None, add_on.total),
    ]

    for pm in product_margins:
        pc = pm.product_class.value
        rows.append((BreakdownLevel.PRODUCT_CLASS.value, pc, None, None, None, pm.value))
        for rc_margin in pm.risk_classes:
            rc = rc_margin.risk_class.value
            rows.append((BreakdownLevel.RISK_CLASS.value, pc, rc, None, None, rc_margin.total))
            for component in rc_margin.components:
                mt = component.margin_type.value
                rows.append((BreakdownLevel.MARGIN_TYPE.value, pc, rc, None, mt, component.value))
                rows.extend(
                    (BreakdownLevel.BUCKET.value, pc, rc, b.bucket, mt, b.k)
                    for b in component.buckets
                )

    return pl.DataFrame(rows, schema=BREAKDOWN_SCHEMA, orient="row")


def create_risk_class_combiner() -> RiskClassCombiner:
    return RiskClassCombiner()


def create_cross_class_aggregator() -> CrossClassAggregator:
    """
    Create a cross class aggregator instance.

    Returns:
        CrossClassAggregator ready for use
    """
    return CrossClassAggregator()
