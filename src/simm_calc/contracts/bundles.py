"""
Data transfer bundles for the SIMM calculator pipeline.

Defines immutable dataclass containers for passing data between
pipeline components. Each bundle represents the output of one
component and input to the next:

    Loader -> CRIF LazyFrame
                    |
            SensitivityGrouper -> GroupedSensitivities
                                        |
                      Delta / Vega / Curvature / BaseCorr -> MarginComponent
                                                                  |
                                                  RiskClassCombiner -> RiskClassMargin
                                                                          |
                                          CrossClassAggregator -> ProductClassMargin
                                                                          |
                                                   AddOnCombiner -> SimmResult

Intermediate bundles are plain Python values; the final SimmResult carries
the audit breakdown as a Polars DataFrame.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import polars as pl

from simm_calc.domain.enums import (
    BreakdownLevel,
    MarginType,
    ProductClass,
    RiskClass,
    RiskType,
)

if TYPE_CHECKING:
    from simm_calc.contracts.errors import CalculationError


@dataclass(frozen=True)
class NetSensitivity:
    """
    One netted risk factor produced by the sensitivity grouper.

    Records sharing (product_class, risk_type, qualifier, bucket, label1,
    label2) are summed into a single NetSensitivity. Missing text fields
    are normalised to "" and tenors to lower case.

    Attributes:
        product_class: CRIF product class (None for add-on parameter rows)
        risk_type: CRIF risk type
        qualifier: Currency, issuer, index or currency pair
        bucket: CRIF bucket ("" when not applicable)
        label1: Tenor
        label2: Sub-curve or secondary label
        amount_usd: Net sensitivity in USD
    """

    product_class: ProductClass | None
    risk_type: RiskType
    qualifier: str
    bucket: str
    label1: str
    label2: str
    amount_usd: float

    @property
    def risk_class(self) -> RiskClass | None:
        """Risk class derived from the risk type."""
        return self.risk_type.risk_class


@dataclass(frozen=True)
class GroupedSensitivities:
    """
    Output from the sensitivity grouper.

    Attributes:
        sensitivities: Netted sensitivities in deterministic key order
        parameters: Netted add-on parameter rows in deterministic key order
        record_count: Number of input CRIF records
    """

    sensitivities: tuple[NetSensitivity, ...]
    parameters: tuple[NetSensitivity, ...] = ()
    record_count: int = 0

    @property
    def product_classes(self) -> list[ProductClass]:
        """Product classes present, in declaration order."""
        present = {s.product_class for s in self.sensitivities}
        return [pc for pc in ProductClass if pc in present]

    def for_risk_class(
        self,
        product_class: ProductClass,
        risk_class: RiskClass,
    ) -> tuple[NetSensitivity, ...]:
        """Sensitivities of one (product class, risk class) pair."""
        return tuple(
            s for s in self.sensitivities
            if s.product_class == product_class and s.risk_class == risk_class
        )

    def risk_classes(self, product_class: ProductClass) -> list[RiskClass]:
        """Risk classes present in a product class, in psi order."""
        present = {
            s.risk_class for s in self.sensitivities if s.product_class == product_class
        }
        return [rc for rc in RiskClass if rc in present]


@dataclass(frozen=True)
class BucketMargin:
    """
    Aggregated risk of one bucket.

    Attributes:
        bucket: Bucket identifier (currency for Rates)
        k: Bucket risk K_b, always >= 0
        s: Bucket sum S_b clamped to [-K_b, K_b]
        concentration: Concentration risk factor applied to the bucket
        is_residual: Whether this is a Residual bucket
    """

    bucket: str
    k: float
    s: float
    concentration: float = 1.0
    is_residual: bool = False


@dataclass(frozen=True)
class MarginComponent:
    """
    One margin type (Delta, Vega, Curvature, BaseCorr) of a risk class.

    Attributes:
        margin_type: Risk measure
        value: Margin amount, always >= 0
        buckets: Bucket level results in deterministic order
    """

    margin_type: MarginType
    value: float
    buckets: tuple[BucketMargin, ...] = ()


@dataclass(frozen=True)
class RiskClassMargin:
    """
    Margin of one risk class within a product class.

    The total is a flat sum of the components; no correlation is applied
    across margin types.
    """

    product_class: ProductClass
    risk_class: RiskClass
    components: tuple[MarginComponent, ...]

    @property
    def total(self) -> float:
        return sum(c.value for c in self.components)

    def component(self, margin_type: MarginType) -> MarginComponent | None:
        for c in self.components:
            if c.margin_type == margin_type:
                return c
        return None


@dataclass(frozen=True)
class ProductClassMargin:
    """
    Psi-aggregated margin of one product class.

    Attributes:
        product_class: CRIF product class
        value: sqrt(sum_r sum_s psi_rs K_r K_s), always >= 0
        risk_classes: Constituent risk class margins in psi order
    """

    product_class: ProductClass
    value: float
    risk_classes: tuple[RiskClassMargin, ...]


@dataclass(frozen=True)
class AddOnMargin:
    """
    Add-on amounts summed linearly onto the SIMM total.

    Attributes:
        fixed: Sum of Param_AddOnFixedAmount rows
        notional: Sum over qualifiers of factor / 100 x Notional
        multiplier: Sum over product classes of (m - 1) x product class margin
    """

    fixed: float = 0.0
    notional: float = 0.0
    multiplier: float = 0.0

    @property
    def total(self) -> float:
        return self.fixed + self.notional + self.multiplier


@dataclass(frozen=True)
class SimmResult:
    """
    Final output of a SIMM calculation.

    The breakdown DataFrame follows BREAKDOWN_SCHEMA and holds one row per
    node of the aggregation hierarchy (total, add-on, product class, risk
    class, margin type and bucket) in deterministic order. It is the single
    source of the reported numbers; accessors read from it.

    Attributes:
        total: SIMM including add-ons
        add_on: Total add-on amount
        breakdown: Hierarchical breakdown (BREAKDOWN_SCHEMA)
        margin_by_type: Portfolio SIMM restricted to each margin type
        simm_version: Calibration used ("2.5", "2.6", "2.7")
        currency: Currency of every amount in the result
        warnings: Non-fatal data quality issues
    """

    total: float
    add_on: float
    breakdown: pl.DataFrame
    margin_by_type: dict[MarginType, float] = field(default_factory=dict)
    simm_version: str = ""
    currency: str = "USD"
    warnings: list[CalculationError] = field(default_factory=list)

    def _level_value(self, level: BreakdownLevel, **keys: str) -> float:
        frame = self.breakdown.filter(pl.col("level") == level.value)
        for column, value in keys.items():
            frame = frame.filter(pl.col(column) == value)
        if frame.height == 0:
            return 0.0
        return float(frame["value"].sum())

    def product_class_margin(self, product_class: ProductClass) -> float:
        """Psi-aggregated margin of a product class (0 if absent)."""
        return self._level_value(
            BreakdownLevel.PRODUCT_CLASS, product_class=product_class.value
        )

    def risk_class_margin(self, product_class: ProductClass, risk_class: RiskClass) -> float:
        """Margin of a risk class within a product class (0 if absent)."""
        return self._level_value(
            BreakdownLevel.RISK_CLASS,
            product_class=product_class.value,
            risk_class=risk_class.value,
        )

    def margin(
        self,
        product_class: ProductClass,
        risk_class: RiskClass,
        margin_type: MarginType,
    ) -> float:
        """Single margin component (0 if absent)."""
        return self._level_value(
            BreakdownLevel.MARGIN_TYPE,
            product_class=product_class.value,
            risk_class=risk_class.value,
            margin_type=margin_type.value,
        )

    def bucket_margins(
        self,
        product_class: ProductClass,
        risk_class: RiskClass,
        margin_type: MarginType,
    ) -> pl.DataFrame:
        """Bucket level K_b rows of one margin component."""
        return self.breakdown.filter(
            (pl.col("level") == BreakdownLevel.BUCKET.value)
            & (pl.col("product_class") == product_class.value)
            & (pl.col("risk_class") == risk_class.value)
            & (pl.col("margin_type") == margin_type.value)
        )
