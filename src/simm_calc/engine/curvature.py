"""
Curvature margin calculator.

Curvature risk is derived from vega sensitivities:

    CVR_k = sum SF(t) x w x s_k,t

with w = 1 for Rates and Credit and w = sigma for Equity, Commodity and FX.
Buckets aggregate with squared correlations, and the risk class margin is
floored with the theta / lambda adjustment (see aggregation.aggregate_curvature).
The Rates curvature margin is additionally divided by HVR_IR^2.

Equity bucket 12 carries no curvature.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from simm_calc.contracts.bundles import BucketMargin, MarginComponent, NetSensitivity
from simm_calc.domain.enums import MarginType, RiskClass, RiskType
from simm_calc.engine.aggregation import aggregate_bucket, aggregate_curvature, correlation_matrix
from simm_calc.engine.factors import (
    SINGLE_BUCKET,
    RiskFactor,
    fx_pair_key,
    is_residual,
    merge_factors,
    split_buckets,
)

if TYPE_CHECKING:
    from simm_calc.contracts.protocols import WeightsAndCorrelationsProtocol

EQUITY_NO_CURVATURE_BUCKET = "12"


class CurvatureMarginCalculator:
    """Curvature margin of one risk class."""

    def calculate(
        self,
        risk_class: RiskClass,
        sensitivities: Sequence[NetSensitivity],
        provider: WeightsAndCorrelationsProtocol,
    ) -> MarginComponent | None:
        """
        Compute the Curvature component.

        Returns:
            MarginComponent, or None if there are no vega sensitivities
        """
        inputs = [s for s in sensitivities if s.risk_type.is_vega]
        if risk_class == RiskClass.EQUITY:
            inputs = [s for s in inputs if s.bucket != EQUITY_NO_CURVATURE_BUCKET]
        if not inputs:
            return None

        if risk_class == RiskClass.RATES:
            grouped = split_buckets(inputs, lambda s: s.qualifier)
        elif risk_class == RiskClass.FX:
            grouped = [(SINGLE_BUCKET, inputs)]
        else:
            grouped = split_buckets(inputs)
        key = _factor_key(risk_class)

        buckets: list[BucketMargin] = []
        cvr_by_bucket: dict[str, list[float]] = {}
        for bucket, members in grouped:
            curvature_risk = [
                (s, provider.curvature_scaling(s.label1) * self._weight(risk_class, s, provider) * s.amount_usd)
                for s in members
            ]
            factors = merge_factors(curvature_risk, key)
            cvr = [f.weighted for f in factors]
            cvr_by_bucket[bucket] = cvr
            buckets.append(_aggregate(risk_class, bucket, factors, cvr, provider))

        def gamma(b: BucketMargin, c: BucketMargin) -> float:
            return provider.inter_bucket_correlation(risk_class, b.bucket, c.bucket)

        value = aggregate_curvature(buckets, cvr_by_bucket, gamma)
        if risk_class == RiskClass.RATES:
            value /= provider.historical_volatility_ratio(RiskClass.RATES) ** 2

        return MarginComponent(
            margin_type=MarginType.CURVATURE,
            value=value,
            buckets=tuple(buckets),
        )

    @staticmethod
    def _weight(
        risk_class: RiskClass,
        sensitivity: NetSensitivity,
        provider: WeightsAndCorrelationsProtocol,
    ) -> float:
        """Vega to curvature conversion factor w."""
        if risk_class in (RiskClass.EQUITY, RiskClass.COMMODITY):
            return provider.volatility(sensitivity.risk_type, sensitivity.bucket)
        if risk_class == RiskClass.FX:
            return provider.volatility(RiskType.FX_VOL, sensitivity.qualifier)
        return 1.0


def _factor_key(risk_class: RiskClass) -> Callable[[NetSensitivity], tuple]:
    if risk_class == RiskClass.RATES:
        return lambda s: (s.risk_type.value, s.label1)
    if risk_class == RiskClass.FX:
        return lambda s: (fx_pair_key(s.qualifier),)
    if risk_class in (RiskClass.CREDIT_Q, RiskClass.CREDIT_NON_Q):
        return lambda s: (s.qualifier, s.label1, s.label2)
    return lambda s: (s.qualifier,)


def _aggregate(
    risk_class: RiskClass,
    bucket: str,
    factors: list[RiskFactor],
    cvr: list[float],
    provider: WeightsAndCorrelationsProtocol,
) -> BucketMargin:
    rho = correlation_matrix(
        factors,
        lambda a, b: provider.intra_bucket_correlation(
            risk_class, bucket, a.sensitivity, b.sensitivity, MarginType.CURVATURE
        ),
        squared=True,
    )
    return aggregate_bucket(bucket, cvr, rho, is_residual=is_residual(bucket))
