"""
Delta margin calculator.

Computes the Delta component of each risk class:

    WS_k = RW_k x s_k x CR_b
    K_b  = sqrt(max(sum WS^2 + sum rho WS WS, 0)),  S_b = clamp(sum WS, -K_b, K_b)
    Delta margin = sqrt(max(sum K_b^2 + sum gamma_bc S_b S_c, 0)) + sum K_residual

Risk class specifics:
- Rates: the bucket is the currency. Factors are IRCurve (sub-curve, tenor)
  pairs, Inflation and XCcyBasis. XCcyBasis is excluded from the
  concentration input and never scaled. gamma is scaled by g_bc.
- Credit: factors are (issuer, tenor, label2) with a Residual bucket.
- Equity, Commodity: one factor per qualifier.
- FX: a single bucket of currencies without concentration.

Usage:
    from simm_calc.engine.delta import DeltaMarginCalculator

    component = DeltaMarginCalculator().calculate(RiskClass.RATES, sensitivities, provider)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from simm_calc.contracts.bundles import BucketMargin, MarginComponent, NetSensitivity
from simm_calc.data.tables import ir_vol_bucket
from simm_calc.domain.enums import MarginType, RiskClass, RiskType
from simm_calc.engine.aggregation import aggregate_bucket, aggregate_buckets, correlation_matrix
from simm_calc.engine.concentration import (
    concentration_factor,
    concentration_input,
    concentration_ratio,
)
from simm_calc.engine.factors import (
    SINGLE_BUCKET,
    RiskFactor,
    is_residual,
    merge_factors,
    split_buckets,
)

if TYPE_CHECKING:
    from simm_calc.contracts.protocols import WeightsAndCorrelationsProtocol


def is_delta(sensitivity: NetSensitivity) -> bool:
    """Delta inputs: every sensitivity except vega and base correlation."""
    return not sensitivity.risk_type.is_vega and sensitivity.risk_type != RiskType.BASE_CORR


class DeltaMarginCalculator:
    """
    Delta margin of one risk class.

    Stateless; all parameters come from the provider passed per call.
    """

    def calculate(
        self,
        risk_class: RiskClass,
        sensitivities: Sequence[NetSensitivity],
        provider: WeightsAndCorrelationsProtocol,
    ) -> MarginComponent | None:
        """
        Compute the Delta component.

        Args:
            risk_class: Risk class of the sensitivities
            sensitivities: Netted sensitivities of one (product class, risk class)
            provider: Versioned weights and correlations

        Returns:
            MarginComponent, or None if there are no delta sensitivities
        """
        inputs = [s for s in sensitivities if is_delta(s)]
        if not inputs:
            return None

        if risk_class == RiskClass.RATES:
            buckets = self._rates_buckets(inputs, provider)
        elif risk_class == RiskClass.FX:
            buckets = [self._fx_bucket(inputs, provider)]
        else:
            buckets = self._bucketed(risk_class, inputs, provider)

        if risk_class == RiskClass.RATES:
            def gamma(b: BucketMargin, c: BucketMargin) -> float:
                return provider.inter_bucket_correlation(
                    risk_class, b.bucket, c.bucket
                ) * concentration_ratio(b.concentration, c.concentration)
        else:
            def gamma(b: BucketMargin, c: BucketMargin) -> float:
                return provider.inter_bucket_correlation(risk_class, b.bucket, c.bucket)

        return MarginComponent(
            margin_type=MarginType.DELTA,
            value=aggregate_buckets(buckets, gamma),
            buckets=tuple(buckets),
        )

    # =========================================================================
    # Rates
    # =========================================================================

    def _rates_buckets(
        self,
        inputs: list[NetSensitivity],
        provider: WeightsAndCorrelationsProtocol,
    ) -> list[BucketMargin]:
        buckets = []
        for currency, members in split_buckets(inputs, lambda s: s.qualifier):
            weighted = [(s, self._rates_weight(s, currency, provider) * s.amount_usd) for s in members]
            factors = merge_factors(weighted, _rates_factor_key)

            scaled = [f for f in factors if f.sensitivity.risk_type != RiskType.XCCY_BASIS]
            cr = concentration_factor(
                concentration_input(f.amount for f in scaled),
                provider.threshold(RiskClass.RATES, currency, MarginType.DELTA),
            )
            ws = [
                f.weighted if f.sensitivity.risk_type == RiskType.XCCY_BASIS else f.weighted * cr
                for f in factors
            ]
            buckets.append(
                self._aggregate(RiskClass.RATES, currency, factors, ws, cr, provider)
            )
        return buckets

    @staticmethod
    def _rates_weight(
        sensitivity: NetSensitivity,
        currency: str,
        provider: WeightsAndCorrelationsProtocol,
    ) -> float:
        if sensitivity.risk_type == RiskType.IR_CURVE:
            vol_group = sensitivity.bucket or ir_vol_bucket(currency)
            return provider.weight(RiskType.IR_CURVE, vol_group, sensitivity.label1)
        return provider.weight(sensitivity.risk_type, "")

    # =========================================================================
    # FX
    # =========================================================================

    def _fx_bucket(
        self,
        inputs: list[NetSensitivity],
        provider: WeightsAndCorrelationsProtocol,
    ) -> BucketMargin:
        weighted = [(s, provider.weight(RiskType.FX, s.qualifier) * s.amount_usd) for s in inputs]
        factors = merge_factors(weighted, lambda s: (s.qualifier,))
        return self._aggregate(
            RiskClass.FX, SINGLE_BUCKET, factors, [f.weighted for f in factors], 1.0, provider
        )

    # =========================================================================
    # Credit, Equity, Commodity
    # =========================================================================

    def _bucketed(
        self,
        risk_class: RiskClass,
        inputs: list[NetSensitivity],
        provider: WeightsAndCorrelationsProtocol,
    ) -> list[BucketMargin]:
        credit = risk_class in (RiskClass.CREDIT_Q, RiskClass.CREDIT_NON_Q)
        buckets = []
        for bucket, members in split_buckets(inputs):
            weighted = [(s, provider.weight(s.risk_type, bucket) * s.amount_usd) for s in members]
            if credit:
                factors = merge_factors(weighted, lambda s: (s.qualifier, s.label1, s.label2))
            else:
                factors = merge_factors(weighted, lambda s: (s.qualifier,))

            cr = concentration_factor(
                concentration_input(f.amount for f in factors),
                provider.threshold(risk_class, bucket, MarginType.DELTA),
            )
            buckets.append(
                self._aggregate(
                    risk_class, bucket, factors, [f.weighted * cr for f in factors], cr, provider
                )
            )
        return buckets

    @staticmethod
    def _aggregate(
        risk_class: RiskClass,
        bucket: str,
        factors: list[RiskFactor],
        ws: list[float],
        cr: float,
        provider: WeightsAndCorrelationsProtocol,
    ) -> BucketMargin:
        rho = correlation_matrix(
            factors,
            lambda a, b: provider.intra_bucket_correlation(
                risk_class, bucket, a.sensitivity, b.sensitivity, MarginType.DELTA
            ),
        )
        return aggregate_bucket(bucket, ws, rho, cr, is_residual(bucket))


def _rates_factor_key(s: NetSensitivity) -> tuple:
    if s.risk_type == RiskType.IR_CURVE:
        return (s.risk_type.value, s.label2, s.label1)
    return (s.risk_type.value, "", "")
