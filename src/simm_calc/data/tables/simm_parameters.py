"""
SIMM calibration parameter container.

Every SIMM version publishes the same set of parameters with different
values. SimmParameters holds one calibration; the simm_v2_5, simm_v2_6 and
simm_v2_7 modules each define one frozen instance.

Conventions:
    - Bucket-indexed tuples use index 0 for the Residual bucket
      (Commodity has no Residual bucket; index 0 is unused).
    - Inter-bucket matrices exclude the Residual bucket (row 0 = bucket 1).
    - Concentration thresholds are in USD millions.
    - Tenor-indexed tuples follow SIMM_TENORS.
"""

from __future__ import annotations

from dataclasses import dataclass


# =============================================================================
# VERSION-INDEPENDENT CONSTANTS
# =============================================================================

SIMM_TENORS: tuple[str, ...] = (
    "2w", "1m", "3m", "6m", "1y", "2y", "3y", "5y", "10y", "15y", "20y", "30y",
)

RESIDUAL_BUCKET = "Residual"

# Rates delta risk weight buckets
IR_REGULAR_VOL_CURRENCIES = frozenset({
    "USD", "EUR", "GBP", "CHF", "AUD", "NZD", "CAD",
    "SEK", "NOK", "DKK", "HKD", "KRW", "SGD", "TWD",
})
IR_LOW_VOL_CURRENCIES = frozenset({"JPY"})

# Rates concentration threshold groups
IR_WELL_TRADED_CURRENCIES = frozenset({"USD", "EUR", "GBP"})
IR_LESS_WELL_TRADED_CURRENCIES = frozenset({
    "AUD", "CAD", "CHF", "DKK", "HKD", "KRW", "NOK", "NZD", "SEK", "SGD", "TWD",
})

# Number of non-residual buckets per risk class
CREDIT_Q_BUCKETS = 12
CREDIT_NON_Q_BUCKETS = 2
EQUITY_BUCKETS = 12
COMMODITY_BUCKETS = 17

Matrix = tuple[tuple[float, ...], ...]


def ir_currency_group(currency: str) -> str:
    """Concentration threshold group of a rates currency."""
    if currency in IR_WELL_TRADED_CURRENCIES:
        return "well_traded"
    if currency in IR_LESS_WELL_TRADED_CURRENCIES:
        return "less_well_traded"
    if currency in IR_LOW_VOL_CURRENCIES:
        return "low_vol"
    return "other"


def ir_vol_bucket(currency: str) -> str:
    """Rates delta risk weight bucket: 1 regular, 2 low, 3 high volatility."""
    if currency in IR_REGULAR_VOL_CURRENCIES:
        return "1"
    if currency in IR_LOW_VOL_CURRENCIES:
        return "2"
    return "3"


@dataclass(frozen=True)
class SimmParameters:
    """
    Complete calibration of one SIMM version.

    Attributes are grouped by risk class. Values are the published
    ISDA SIMM parameters; lookups with business logic live in
    simm_calc.engine.weights.
    """

    version: str

    # Interest rates
    ir_rw_regular_vol: tuple[float, ...]
    ir_rw_low_vol: tuple[float, ...]
    ir_rw_high_vol: tuple[float, ...]
    inflation_rw: float
    xccy_basis_rw: float
    ir_hvr: float
    ir_vrw: float
    ir_tenor_corr: Matrix
    sub_curves_corr: float
    inflation_corr: float
    xccy_basis_corr: float
    ir_gamma: float
    ir_delta_ct: dict[str, float]
    ir_vega_ct: dict[str, float]

    # Qualifying credit
    credit_q_rw: tuple[float, ...]
    credit_q_vrw: float
    base_corr_weight: float
    # (same issuer, different issuer, residual, base correlation)
    credit_q_corr: tuple[float, float, float, float]
    credit_q_gamma: Matrix
    credit_q_delta_ct: tuple[float, ...]
    credit_q_vega_ct: float

    # Non-qualifying credit
    credit_non_q_rw: tuple[float, ...]
    credit_non_q_vrw: float
    # (same issuer, different issuer, residual)
    credit_non_q_corr: tuple[float, float, float]
    credit_non_q_gamma: float
    credit_non_q_delta_ct: tuple[float, ...]
    credit_non_q_vega_ct: float

    # Equity
    equity_rw: tuple[float, ...]
    equity_hvr: float
    equity_vrw: float
    equity_vrw_bucket_12: float
    equity_corr: tuple[float, ...]
    equity_gamma: Matrix
    equity_delta_ct: tuple[float, ...]
    equity_vega_ct: tuple[float, ...]

    # Commodity
    commodity_rw: tuple[float, ...]
    commodity_hvr: float
    commodity_vrw: float
    commodity_corr: tuple[float, ...]
    commodity_gamma: Matrix
    commodity_delta_ct: tuple[float, ...]
    commodity_vega_ct: tuple[float, ...]

    # FX
    fx_high_vol_currencies: frozenset[str]
    # (regular/regular, regular/high, high/high)
    fx_rw: tuple[float, float, float]
    fx_hvr: float
    fx_vrw: float
    # [given currency vol][other currency vol] for a regular vol calculation currency
    fx_corr_regular: Matrix
    # same, for a high vol calculation currency
    fx_corr_high: Matrix
    fx_vega_corr: float

    # Cross risk class correlation in RiskClass declaration order
    psi: Matrix

