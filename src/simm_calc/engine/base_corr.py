"""
Base correlation margin for qualifying credit.

WS_q = BaseCorrWeight x s_q per index qualifier, aggregated in a single
bucket with the base correlation rho. No concentration applies.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from simm_calc.contracts.bundles import MarginComponent, NetSensitivity
from simm_calc.domain.enums import MarginType, RiskClass, RiskType
from simm_calc.engine.aggregation import aggregate_bucket, correlation_matrix
from simm_calc.engine.factors import SINGLE_BUCKET, merge_factors

if TYPE_CHECKING:
    from simm_calc.contracts.protocols import WeightsAndCorrelationsProtocol


class BaseCorrMarginCalculator:
    """BaseCorr component of the CreditQ risk class."""

    def calculate(
        self,
        risk_class: RiskClass,
        sensitivities: Sequence[NetSensitivity],
        provider: WeightsAndCorrelationsProtocol,
    ) -> MarginComponent | None:
        inputs = [s for s in sensitivities if s.risk_type == RiskType.BASE_CORR]
        if not inputs:
            return None

        weight = provider.base_corr_weight()
        factors = merge_factors(((s, weight * s.amount_usd) for s in inputs), lambda s: (s.qualifier,))
        rho = correlation_matrix(
            factors,
            lambda a, b: provider.intra_bucket_correlation(
                risk_class, SINGLE_BUCKET, a.sensitivity, b.sensitivity, MarginType.BASE_CORR
            ),
        )
        bucket = aggregate_bucket(SINGLE_BUCKET, [f.weighted for f in factors], rho)
        return MarginComponent(
            margin_type=MarginType.BASE_CORR,
            value=bucket.k,
            buckets=(bucket,),
        )
