"""
Weights and correlations provider for the SIMM calculator.

Wraps one SimmParameters calibration behind WeightsAndCorrelationsProtocol
and adds the lookup rules that are common to every SIMM version:
bucket indexing, rates volatility groups, FX volatility regimes, vega to
volatility conversion and the curvature scaling function.

Classes:
    WeightsAndCorrelations: Versioned lookup capability

Usage:
    from simm_calc.engine.weights import get_weights_and_correlations

    provider = get_weights_and_correlations(SimmVersion.V2_6)
    rw = provider.weight(RiskType.IR_CURVE, "1", "5y")

Every lookup is total over valid input. A combination the calibration
does not define raises ConfigurationError rather than falling back to a
default, since a silently substituted weight would corrupt the margin.
"""

from __future__ import annotations

import math
import re
from functools import lru_cache
from typing import TYPE_CHECKING

from scipy.stats import norm

from simm_calc.contracts.errors import missing_parameter_error
from simm_calc.data.tables import (
    COMMODITY_BUCKETS,
    CREDIT_NON_Q_BUCKETS,
    CREDIT_Q_BUCKETS,
    EQUITY_BUCKETS,
    RESIDUAL_BUCKET,
    SIMM_TENORS,
    get_simm_parameters,
    ir_currency_group,
)
from simm_calc.domain.enums import MarginType, ProductClass, RiskClass, RiskType, SimmVersion

if TYPE_CHECKING:
    from simm_calc.contracts.bundles import NetSensitivity
    from simm_calc.data.tables import SimmParameters


# Thresholds are published in USD millions
_THRESHOLD_UNIT = 1_000_000.0

# sigma = RW x sqrt(365 / 14) / Phi^-1(0.99)
_VOLATILITY_SCALE = math.sqrt(365.0 / 14.0) / norm.ppf(0.99)

_TENOR_PATTERN = re.compile(r"^(\d+)([dwmy])$")

_RISK_CLASS_ORDER = list(RiskClass)


def tenor_days(tenor: str) -> float | None:
    """Length of a tenor label ("2w", "3m", "10y") in days, None if not a tenor."""
    match = _TENOR_PATTERN.match(tenor.strip().lower())
    if match is None or int(match.group(1)) == 0:
        return None
    unit_days = {"d": 1.0, "w": 7.0, "m": 365.0 / 12.0, "y": 365.0}[match.group(2)]
    return int(match.group(1)) * unit_days


class WeightsAndCorrelations:
    """
    Risk weights, correlations and thresholds of one SIMM calibration.

    Immutable after construction and safe to share across worker threads.

    Attributes:
        parameters: Calibration table backing the lookups
        calculation_currency: Drives the FX delta weight and FX correlation
            regime
    """

    def __init__(self, parameters: SimmParameters, calculation_currency: str = "USD") -> None:
        self._parameters = parameters
        self._calculation_currency = calculation_currency
        self._calc_ccy_high_vol = calculation_currency in parameters.fx_high_vol_currencies

    @property
    def parameters(self) -> SimmParameters:
        return self._parameters

    @property
    def version(self) -> str:
        return self._parameters.version

    @property
    def calculation_currency(self) -> str:
        return self._calculation_currency

    # =========================================================================
    # Risk weights
    # =========================================================================

    def weight(self, risk_type: RiskType, bucket: str, tenor: str = "") -> float:
        """
        Delta risk weight.

        Args:
            risk_type: Delta risk type
            bucket: Volatility group "1"/"2"/"3" for Risk_IRCurve, currency
                for Risk_FX, CRIF bucket otherwise
            tenor: SIMM tenor, only used by Risk_IRCurve

        Returns:
            Risk weight (basis point or percentage scaled, as published)

        Raises:
            ConfigurationError: If the calibration has no weight for the key
        """
        p = self._parameters

        if risk_type == RiskType.IR_CURVE:
            weights = {
                "1": p.ir_rw_regular_vol,
                "2": p.ir_rw_low_vol,
                "3": p.ir_rw_high_vol,
            }.get(bucket)
            if weights is None:
                raise missing_parameter_error("ir_risk_weight", f"bucket {bucket!r}")
            return weights[self._tenor_index(tenor)]
        if risk_type == RiskType.INFLATION:
            return p.inflation_rw
        if risk_type == RiskType.XCCY_BASIS:
            return p.xccy_basis_rw
        if risk_type == RiskType.CREDIT_Q:
            return p.credit_q_rw[self._bucket_index(RiskClass.CREDIT_Q, bucket)]
        if risk_type == RiskType.CREDIT_NON_Q:
            return p.credit_non_q_rw[self._bucket_index(RiskClass.CREDIT_NON_Q, bucket)]
        if risk_type == RiskType.EQUITY:
            return p.equity_rw[self._bucket_index(RiskClass.EQUITY, bucket)]
        if risk_type == RiskType.COMMODITY:
            return p.commodity_rw[self._bucket_index(RiskClass.COMMODITY, bucket)]
        if risk_type == RiskType.FX:
            if bucket == self._calculation_currency:
                return 0.0
            return p.fx_rw[self._fx_regime(self._calc_ccy_high_vol, self.is_fx_high_vol(bucket))]
        if risk_type == RiskType.BASE_CORR:
            return p.base_corr_weight

        raise missing_parameter_error("risk_weight", risk_type.value)

    def vega_weight(self, risk_type: RiskType, bucket: str = "") -> float:
        """Vega risk weight (VRW) of a vega risk type."""
        p = self._parameters
        if risk_type in (RiskType.IR_VOL, RiskType.INFLATION_VOL):
            return p.ir_vrw
        if risk_type == RiskType.CREDIT_VOL:
            return p.credit_q_vrw
        if risk_type == RiskType.CREDIT_VOL_NON_Q:
            return p.credit_non_q_vrw
        if risk_type == RiskType.EQUITY_VOL:
            return p.equity_vrw_bucket_12 if bucket == "12" else p.equity_vrw
        if risk_type == RiskType.COMMODITY_VOL:
            return p.commodity_vrw
        if risk_type == RiskType.FX_VOL:
            return p.fx_vrw
        raise missing_parameter_error("vega_risk_weight", risk_type.value)

    def historical_volatility_ratio(self, risk_class: RiskClass) -> float:
        p = self._parameters
        hvr = {
            RiskClass.RATES: p.ir_hvr,
            RiskClass.EQUITY: p.equity_hvr,
            RiskClass.COMMODITY: p.commodity_hvr,
            RiskClass.FX: p.fx_hvr,
        }.get(risk_class)
        if hvr is None:
            raise missing_parameter_error("historical_volatility_ratio", risk_class.value)
        return hvr

    def volatility(self, risk_type: RiskType, bucket: str) -> float:
        """
        Volatility sigma implied by the delta risk weight.

        For Risk_FXVol the bucket is the six letter currency pair and the
        weight is the one applying between the two currencies.
        """
        p = self._parameters
        if risk_type == RiskType.EQUITY_VOL:
            rw = p.equity_rw[self._bucket_index(RiskClass.EQUITY, bucket)]
        elif risk_type == RiskType.COMMODITY_VOL:
            rw = p.commodity_rw[self._bucket_index(RiskClass.COMMODITY, bucket)]
        elif risk_type == RiskType.FX_VOL:
            if len(bucket) != 6:
                raise missing_parameter_error("fx_volatility", f"currency pair {bucket!r}")
            rw = p.fx_rw[
                self._fx_regime(self.is_fx_high_vol(bucket[:3]), self.is_fx_high_vol(bucket[3:]))
            ]
        else:
            raise missing_parameter_error("volatility", risk_type.value)
        return rw * _VOLATILITY_SCALE

    def base_corr_weight(self) -> float:
        return self._parameters.base_corr_weight

    # =========================================================================
    # Concentration thresholds
    # =========================================================================

    def threshold(
        self,
        risk_class: RiskClass,
        bucket: str,
        margin_type: MarginType = MarginType.DELTA,
    ) -> float:
        """
        Concentration threshold in USD.

        Args:
            risk_class: Risk class of the concentration group
            bucket: Currency for Rates, CRIF bucket otherwise
            margin_type: DELTA or VEGA

        Raises:
            ConfigurationError: For FX (no concentration) or unmapped keys
        """
        if margin_type not in (MarginType.DELTA, MarginType.VEGA):
            raise missing_parameter_error("concentration_threshold", margin_type.value)

        p = self._parameters
        delta = margin_type == MarginType.DELTA

        if risk_class == RiskClass.RATES:
            table = p.ir_delta_ct if delta else p.ir_vega_ct
            value = table[ir_currency_group(bucket)]
        elif risk_class == RiskClass.CREDIT_Q:
            if delta:
                value = p.credit_q_delta_ct[self._bucket_index(risk_class, bucket)]
            else:
                value = p.credit_q_vega_ct
        elif risk_class == RiskClass.CREDIT_NON_Q:
            if delta:
                value = p.credit_non_q_delta_ct[self._bucket_index(risk_class, bucket)]
            else:
                value = p.credit_non_q_vega_ct
        elif risk_class == RiskClass.EQUITY:
            table = p.equity_delta_ct if delta else p.equity_vega_ct
            value = table[self._bucket_index(risk_class, bucket)]
        elif risk_class == RiskClass.COMMODITY:
            table = p.commodity_delta_ct if delta else p.commodity_vega_ct
            value = table[self._bucket_index(risk_class, bucket)]
        else:
            raise missing_parameter_error(
                "concentration_threshold", f"{risk_class.value} {margin_type.value}"
            )

        return value * _THRESHOLD_UNIT

    # =========================================================================
    # Correlations
    # =========================================================================

    def intra_bucket_correlation(
        self,
        risk_class: RiskClass,
        bucket: str,
        factor_i: NetSensitivity,
        factor_j: NetSensitivity,
        margin_type: MarginType = MarginType.DELTA,
    ) -> float:
        """
        Correlation rho between two distinct risk factors of one bucket.

        Curvature uses the vega factor correlations; the caller squares them.
        """
        p = self._parameters

        if margin_type == MarginType.BASE_CORR:
            return p.credit_q_corr[3]

        if risk_class == RiskClass.RATES:
            if margin_type == MarginType.DELTA:
                return self._rates_delta_correlation(factor_i, factor_j)
            return self._rates_vega_correlation(factor_i, factor_j)

        if risk_class in (RiskClass.CREDIT_Q, RiskClass.CREDIT_NON_Q):
            if risk_class == RiskClass.CREDIT_Q:
                corr = p.credit_q_corr
                same_issuer = factor_i.qualifier == factor_j.qualifier
            else:
                corr = p.credit_non_q_corr
                same_issuer = factor_i.label2 == factor_j.label2
            if bucket == RESIDUAL_BUCKET:
                return corr[2]
            return corr[0] if same_issuer else corr[1]

        if risk_class == RiskClass.EQUITY:
            return p.equity_corr[self._bucket_index(risk_class, bucket)]

        if risk_class == RiskClass.COMMODITY:
            return p.commodity_corr[self._bucket_index(risk_class, bucket)]

        if risk_class == RiskClass.FX:
            if margin_type != MarginType.DELTA:
                return p.fx_vega_corr
            table = p.fx_corr_high if self._calc_ccy_high_vol else p.fx_corr_regular
            return table[int(self.is_fx_high_vol(factor_i.qualifier))][
                int(self.is_fx_high_vol(factor_j.qualifier))
            ]

        raise missing_parameter_error("intra_bucket_correlation", risk_class.value)

    def inter_bucket_correlation(self, risk_class: RiskClass, bucket_b: str, bucket_c: str) -> float:
        """
        Correlation gamma between two buckets of a risk class.

        For Rates this is the cross currency correlation before the
        concentration adjustment g_bc, which the caller applies. Any pair
        involving a Residual bucket has zero correlation.
        """
        if RESIDUAL_BUCKET in (bucket_b, bucket_c):
            return 0.0

        p = self._parameters
        if risk_class == RiskClass.RATES:
            return p.ir_gamma
        if risk_class == RiskClass.CREDIT_NON_Q:
            self._bucket_index(risk_class, bucket_b)
            self._bucket_index(risk_class, bucket_c)
            return p.credit_non_q_gamma

        matrix = {
            RiskClass.CREDIT_Q: p.credit_q_gamma,
            RiskClass.EQUITY: p.equity_gamma,
            RiskClass.COMMODITY: p.commodity_gamma,
        }.get(risk_class)
        if matrix is None:
            raise missing_parameter_error("inter_bucket_correlation", risk_class.value)
        b = self._bucket_index(risk_class, bucket_b)
        c = self._bucket_index(risk_class, bucket_c)
        return matrix[b - 1][c - 1]

    def cross_class_correlation(
        self,
        product_class: ProductClass,
        risk_class_a: RiskClass,
        risk_class_b: RiskClass,
    ) -> float:
        """Correlation psi between two risk classes. Identical for every product class."""
        return self._parameters.psi[_RISK_CLASS_ORDER.index(risk_class_a)][
            _RISK_CLASS_ORDER.index(risk_class_b)
        ]

    # =========================================================================
    # Curvature
    # =========================================================================

    def curvature_scaling(self, tenor: str) -> float:
        """
        Curvature scaling function SF(t) = 0.5 x min(1, 14 / days(t)).

        Months count as 365/12 days and years as 365 days, so "2w" maps
        to 0.5 and "1y" to 14/730.
        """
        days = tenor_days(tenor)
        if days is None:
            raise missing_parameter_error("curvature_scaling", f"tenor {tenor!r}")
        return 0.5 * min(1.0, 14.0 / days)

    # =========================================================================
    # Helpers
    # =========================================================================

    def is_fx_high_vol(self, currency: str) -> bool:
        return currency in self._parameters.fx_high_vol_currencies

    @staticmethod
    def _fx_regime(first_high: bool, second_high: bool) -> int:
        """Index into fx_rw: regular/regular, mixed, high/high."""
        return int(first_high) + int(second_high)

    @staticmethod
    def _tenor_index(tenor: str) -> int:
        try:
            return SIMM_TENORS.index(tenor.strip().lower())
        except ValueError:
            raise missing_parameter_error("tenor", repr(tenor)) from None

    @staticmethod
    def _bucket_index(risk_class: RiskClass, bucket: str) -> int:
        """Position of a bucket in the bucket-indexed tables (Residual = 0)."""
        count, residual = {
            RiskClass.CREDIT_Q: (CREDIT_Q_BUCKETS, True),
            RiskClass.CREDIT_NON_Q: (CREDIT_NON_Q_BUCKETS, True),
            RiskClass.EQUITY: (EQUITY_BUCKETS, True),
            RiskClass.COMMODITY: (COMMODITY_BUCKETS, False),
        }.get(risk_class, (0, False))
        if residual and bucket == RESIDUAL_BUCKET:
            return 0
        if bucket.isdigit() and 1 <= int(bucket) <= count:
            return int(bucket)
        raise missing_parameter_error("bucket", f"{risk_class.value} {bucket!r}")

    def _rates_delta_correlation(self, a: NetSensitivity, b: NetSensitivity) -> float:
        p = self._parameters
        kinds = {a.risk_type, b.risk_type}
        if kinds == {RiskType.IR_CURVE}:
            rho = p.ir_tenor_corr[self._tenor_index(a.label1)][self._tenor_index(b.label1)]
            return rho if a.label2 == b.label2 else rho * p.sub_curves_corr
        if RiskType.XCCY_BASIS in kinds:
            return 1.0 if len(kinds) == 1 else p.xccy_basis_corr
        if RiskType.INFLATION in kinds:
            return 1.0 if len(kinds) == 1 else p.inflation_corr
        raise missing_parameter_error(
            "rates_delta_correlation", f"{a.risk_type.value}/{b.risk_type.value}"
        )

    def _rates_vega_correlation(self, a: NetSensitivity, b: NetSensitivity) -> float:
        p = self._parameters
        kinds = {a.risk_type, b.risk_type}
        if kinds == {RiskType.IR_VOL}:
            return p.ir_tenor_corr[self._tenor_index(a.label1)][self._tenor_index(b.label1)]
        if kinds == {RiskType.INFLATION_VOL}:
            return 1.0
        if kinds == {RiskType.IR_VOL, RiskType.INFLATION_VOL}:
            return p.inflation_corr
        raise missing_parameter_error(
            "rates_vega_correlation", f"{a.risk_type.value}/{b.risk_type.value}"
        )


@lru_cache(maxsize=None)
def get_weights_and_correlations(
    version: SimmVersion,
    calculation_currency: str = "USD",
) -> WeightsAndCorrelations:
    """
    Provider for a SIMM version, selected once per calculation.

    Instances are cached; they hold no mutable state.
    """
    return WeightsAndCorrelations(get_simm_parameters(version), calculation_currency)
