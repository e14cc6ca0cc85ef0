"""
Vega margin calculator.

Vega risk per factor and vega concentration VCR per bucket:

- Rates:   WS = IR_VRW x s x VCR, bucket = currency, factors (type, tenor)
- Credit:  WS = VRW x s x VCR, factors (issuer, tenor, label2)
- Equity / Commodity:
           VR = HVR x sigma_b x sum s,  WS = VRW_b x VR x VCR,
           VCR = max(1, sqrt(sum |VR| / VT_b))
- FX:      VR = FX_HVR x sigma_pair x sum s, WS = FX_VRW x VR, no VCR;
           USDKRW and KRWUSD are one factor

Inter-bucket aggregation follows delta, with g_bc computed from VCR for
Rates.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from simm_calc.contracts.bundles import BucketMargin, MarginComponent, NetSensitivity
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
    fx_pair_key,
    is_residual,
    merge_factors,
    split_buckets,
)

if TYPE_CHECKING:
    from simm_calc.contracts.protocols import WeightsAndCorrelationsProtocol


class VegaMarginCalculator:
    """Vega margin of one risk class."""

    def calculate(
        self,
        risk_class: RiskClass,
        sensitivities: Sequence[NetSensitivity],
        provider: WeightsAndCorrelationsProtocol,
    ) -> MarginComponent | None:
        """
        Compute the Vega component.

        Returns:
            MarginComponent, or None if there are no vega sensitivities
        """
        inputs = [s for s in sensitivities if s.risk_type.is_vega]
        if not inputs:
            return None

        if risk_class == RiskClass.RATES:
            buckets = self._rates_buckets(inputs, provider)
        elif risk_class == RiskClass.FX:
            buckets = [self._fx_bucket(inputs, provider)]
        elif risk_class in (RiskClass.CREDIT_Q, RiskClass.CREDIT_NON_Q):
            buckets = self._credit_buckets(risk_class, inputs, provider)
        else:
            buckets = self._volatility_buckets(risk_class, inputs, provider)

        if risk_class == RiskClass.RATES:
            def gamma(b: BucketMargin, c: BucketMargin) -> float:
                return provider.inter_bucket_correlation(
                    risk_class, b.bucket, c.bucket
                ) * concentration_ratio(b.concentration, c.concentration)
        else:
            def gamma(b: BucketMargin, c: BucketMargin) -> float:
                return provider.inter_bucket_correlation(risk_class, b.bucket, c.bucket)

        return MarginComponent(
            margin_type=MarginType.VEGA,
            value=aggregate_buckets(buckets, gamma),
            buckets=tuple(buckets),
        )

    def _rates_buckets(
        self,
        inputs: list[NetSensitivity],
        provider: WeightsAndCorrelationsProtocol,
    ) -> list[BucketMargin]:
        buckets = []
        for currency, members in split_buckets(inputs, lambda s: s.qualifier):
            weighted = [(s, provider.vega_weight(s.risk_type) * s.amount_usd) for s in members]
            factors = merge_factors(weighted, lambda s: (s.risk_type.value, s.label1))
            vcr = concentration_factor(
                concentration_input(f.amount for f in factors),
                provider.threshold(RiskClass.RATES, currency, MarginType.VEGA),
            )
            buckets.append(
                _aggregate(
                    RiskClass.RATES, currency, factors, [f.weighted * vcr for f in factors], vcr, provider
                )
            )
        return buckets

    def _credit_buckets(
        self,
        risk_class: RiskClass,
        inputs: list[NetSensitivity],
        provider: WeightsAndCorrelationsProtocol,
    ) -> list[BucketMargin]:
        buckets = []
        for bucket, members in split_buckets(inputs):
            weighted = [(s, provider.vega_weight(s.risk_type, bucket) * s.amount_usd) for s in members]
            factors = merge_factors(weighted, lambda s: (s.qualifier, s.label1, s.label2))
            vcr = concentration_factor(
                concentration_input(f.amount for f in factors),
                provider.threshold(risk_class, bucket, MarginType.VEGA),
            )
            buckets.append(
                _aggregate(
                    risk_class, bucket, factors, [f.weighted * vcr for f in factors], vcr, provider
                )
            )
        return buckets

    def _volatility_buckets(
        self,
        risk_class: RiskClass,
        inputs: list[NetSensitivity],
        provider: WeightsAndCorrelationsProtocol,
    ) -> list[BucketMargin]:
        hvr = provider.historical_volatility_ratio(risk_class)
        buckets = []
        for bucket, members in split_buckets(inputs):
            risk_type = members[0].risk_type
            sigma = provider.volatility(risk_type, bucket)
            # weighted carries the vega risk VR before VRW and VCR
            vega_risk = [(s, hvr * sigma * s.amount_usd) for s in members]
            factors = merge_factors(vega_risk, lambda s: (s.qualifier,))
            vcr = concentration_factor(
                concentration_input(f.weighted for f in factors),
                provider.threshold(risk_class, bucket, MarginType.VEGA),
            )
            vrw = provider.vega_weight(risk_type, bucket)
            buckets.append(
                _aggregate(
                    risk_class, bucket, factors, [vrw * f.weighted * vcr for f in factors], vcr, provider
                )
            )
        return buckets

    def _fx_bucket(
        self,
        inputs: list[NetSensitivity],
        provider: WeightsAndCorrelationsProtocol,
    ) -> BucketMargin:
        hvr = provider.historical_volatility_ratio(RiskClass.FX)
        vrw = provider.vega_weight(RiskType.FX_VOL)
        vega_risk = [
            (s, hvr * provider.volatility(RiskType.FX_VOL, s.qualifier) * s.amount_usd)
            for s in inputs
        ]
        factors = merge_factors(vega_risk, lambda s: (fx_pair_key(s.qualifier),))
        return _aggregate(
            RiskClass.FX, SINGLE_BUCKET, factors, [vrw * f.weighted for f in factors], 1.0, provider
        )


def _aggregate(
    risk_class: RiskClass,
    bucket: str,
    factors: list[RiskFactor],
    ws: list[float],
    vcr: float,
    provider: WeightsAndCorrelationsProtocol,
) -> BucketMargin:
    rho = correlation_matrix(
        factors,
        lambda a, b: provider.intra_bucket_correlation(
            risk_class, bucket, a.sensitivity, b.sensitivity, MarginType.VEGA
        ),
    )
    return aggregate_bucket(bucket, ws, rho, vcr, is_residual(bucket))
