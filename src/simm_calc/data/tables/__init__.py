"""
ISDA SIMM calibration tables.

Each module defines one frozen SimmParameters instance holding the risk
weights, correlations and concentration thresholds of a SIMM version.

Modules:
    simm_parameters: Parameter container and version-independent constants
    simm_v2_5: SIMM 2.5 calibration
    simm_v2_6: SIMM 2.6 calibration
    simm_v2_7: SIMM 2.7 calibration
"""

from simm_calc.domain.enums import SimmVersion

from .simm_parameters import (
    COMMODITY_BUCKETS,
    CREDIT_NON_Q_BUCKETS,
    CREDIT_Q_BUCKETS,
    EQUITY_BUCKETS,
    RESIDUAL_BUCKET,
    SIMM_TENORS,
    SimmParameters,
    ir_currency_group,
    ir_vol_bucket,
)
from .simm_v2_5 import SIMM_V2_5
from .simm_v2_6 import SIMM_V2_6
from .simm_v2_7 import SIMM_V2_7

SIMM_PARAMETERS: dict[SimmVersion, SimmParameters] = {
    SimmVersion.V2_5: SIMM_V2_5,
    SimmVersion.V2_6: SIMM_V2_6,
    SimmVersion.V2_7: SIMM_V2_7,
}


def get_simm_parameters(version: SimmVersion) -> SimmParameters:
    """Calibration table for a SIMM version."""
    return SIMM_PARAMETERS[version]


__all__ = [
    # Container and constants
    "SimmParameters",
    "SIMM_TENORS",
    "RESIDUAL_BUCKET",
    "CREDIT_Q_BUCKETS",
    "CREDIT_NON_Q_BUCKETS",
    "EQUITY_BUCKETS",
    "COMMODITY_BUCKETS",
    "ir_currency_group",
    "ir_vol_bucket",
    # Calibrations
    "SIMM_V2_5",
    "SIMM_V2_6",
    "SIMM_V2_7",
    "SIMM_PARAMETERS",
    "get_simm_parameters",
]
