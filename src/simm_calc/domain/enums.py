"""
Domain enums for the SIMM calculator.

Defines core enumerations used throughout the calculation pipeline:
- SimmVersion: ISDA SIMM calibration (2.5, 2.6, 2.7)
- ProductClass: CRIF product classes margined independently
- RiskClass: The six SIMM risk classes
- MarginType: Risk measures combined within a risk class
- RiskType: CRIF RiskType vocabulary (sensitivities and parameter rows)
- BreakdownLevel: Hierarchy levels of the result breakdown
- ErrorSeverity / ErrorCategory: Error classification

These enums provide type safety and self-documenting code for the
multi-version support of the calculator.
"""

from enum import Enum


class SimmVersion(Enum):
    """
    ISDA SIMM calibration version.

    Each version ships its own risk weights, correlations and concentration
    thresholds. The aggregation methodology is identical across versions.
    """

    V2_5 = "2.5"
    V2_6 = "2.6"
    V2_7 = "2.7"

    @classmethod
    def parse(cls, value: "str | SimmVersion") -> "SimmVersion":
        """Parse "2.6", "2_6" or "v2_6" style version strings."""
        if isinstance(value, SimmVersion):
            return value
        normalized = str(value).strip().lower().lstrip("v").replace("_", ".")
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unsupported SIMM version: {value!r}")


class ProductClass(Enum):
    """
    CRIF product classes.

    SIMM is computed separately for each product class and the product
    class margins are added with no diversification between them.
    """

    RATES_FX = "RatesFX"
    CREDIT = "Credit"
    EQUITY = "Equity"
    COMMODITY = "Commodity"


class RiskClass(Enum):
    """
    SIMM risk classes.

    Declaration order matches the rows of the cross risk class
    correlation matrix (psi) in every calibration.
    """

    RATES = "Rates"
    CREDIT_Q = "CreditQ"
    CREDIT_NON_Q = "CreditNonQ"
    EQUITY = "Equity"
    COMMODITY = "Commodity"
    FX = "FX"


class MarginType(Enum):
    """
    Risk measures within a risk class.

    BASE_CORR only arises for qualifying credit (Risk_BaseCorr).
    """

    DELTA = "Delta"
    VEGA = "Vega"
    CURVATURE = "Curvature"
    BASE_CORR = "BaseCorr"


class RiskType(Enum):
    """
    CRIF RiskType values understood by the calculator.

    Sensitivity types map to a risk class; parameter types feed the
    add-on combiner and carry no risk class.
    """

    # Interest rates
    IR_CURVE = "Risk_IRCurve"
    INFLATION = "Risk_Inflation"
    XCCY_BASIS = "Risk_XCcyBasis"
    IR_VOL = "Risk_IRVol"
    INFLATION_VOL = "Risk_InflationVol"

    # Qualifying credit
    CREDIT_Q = "Risk_CreditQ"
    CREDIT_VOL = "Risk_CreditVol"
    BASE_CORR = "Risk_BaseCorr"

    # Non-qualifying credit
    CREDIT_NON_Q = "Risk_CreditNonQ"
    CREDIT_VOL_NON_Q = "Risk_CreditVolNonQ"

    # Equity
    EQUITY = "Risk_Equity"
    EQUITY_VOL = "Risk_EquityVol"

    # Commodity
    COMMODITY = "Risk_Commodity"
    COMMODITY_VOL = "Risk_CommodityVol"

    # Foreign exchange
    FX = "Risk_FX"
    FX_VOL = "Risk_FXVol"

    # Add-on parameters
    ADDON_FIXED_AMOUNT = "Param_AddOnFixedAmount"
    ADDON_NOTIONAL_FACTOR = "Param_AddOnNotionalFactor"
    NOTIONAL = "Notional"
    PRODUCT_CLASS_MULTIPLIER = "Param_ProductClassMultiplier"

    @property
    def is_parameter(self) -> bool:
        """Whether this row is an add-on parameter rather than a sensitivity."""
        return self in _PARAMETER_TYPES

    @property
    def risk_class(self) -> RiskClass | None:
        """Risk class of a sensitivity type (None for parameter rows)."""
        return _RISK_CLASS_BY_TYPE.get(self)

    @property
    def is_vega(self) -> bool:
        """Whether the sensitivity is a vega (feeds vega and curvature)."""
        return self in _VEGA_TYPES


class BreakdownLevel(Enum):
    """Hierarchy levels of the SIMM result breakdown, from top to bottom."""

    TOTAL = "SIMM Total"
    ADD_ON = "Add-On"
    PRODUCT_CLASS = "Product Class"
    RISK_CLASS = "Risk Class"
    MARGIN_TYPE = "Risk Measure"
    BUCKET = "Bucket"


class ErrorSeverity(Enum):
    """
    Severity levels for calculation errors.

    Used to classify issues encountered during SIMM calculation.
    """

    # Informational warning - calculation proceeds
    WARNING = "warning"

    # Error that invalidates the input
    ERROR = "error"

    # Critical error that prevents any result
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """
    Categories for calculation errors.

    Enables filtering and analysis of error types.
    """

    # Missing or invalid input data
    DATA_QUALITY = "data_quality"

    # Schema validation failures
    SCHEMA_VALIDATION = "schema_validation"

    # Configuration or calibration issues
    CONFIGURATION = "configuration"

    # Internal calculation errors
    CALCULATION = "calculation"


_PARAMETER_TYPES = frozenset({
    RiskType.ADDON_FIXED_AMOUNT,
    RiskType.ADDON_NOTIONAL_FACTOR,
    RiskType.NOTIONAL,
    RiskType.PRODUCT_CLASS_MULTIPLIER,
})

_VEGA_TYPES = frozenset({
    RiskType.IR_VOL,
    RiskType.INFLATION_VOL,
    RiskType.CREDIT_VOL,
    RiskType.CREDIT_VOL_NON_Q,
    RiskType.EQUITY_VOL,
    RiskType.COMMODITY_VOL,
    RiskType.FX_VOL,
})

_RISK_CLASS_BY_TYPE = {
    RiskType.IR_CURVE: RiskClass.RATES,
    RiskType.INFLATION: RiskClass.RATES,
    RiskType.XCCY_BASIS: RiskClass.RATES,
    RiskType.IR_VOL: RiskClass.RATES,
    RiskType.INFLATION_VOL: RiskClass.RATES,
    RiskType.CREDIT_Q: RiskClass.CREDIT_Q,
    RiskType.CREDIT_VOL: RiskClass.CREDIT_Q,
    RiskType.BASE_CORR: RiskClass.CREDIT_Q,
    RiskType.CREDIT_NON_Q: RiskClass.CREDIT_NON_Q,
    RiskType.CREDIT_VOL_NON_Q: RiskClass.CREDIT_NON_Q,
    RiskType.EQUITY: RiskClass.EQUITY,
    RiskType.EQUITY_VOL: RiskClass.EQUITY,
    RiskType.COMMODITY: RiskClass.COMMODITY,
    RiskType.COMMODITY_VOL: RiskClass.COMMODITY,
    RiskType.FX: RiskClass.FX,
    RiskType.FX_VOL: RiskClass.FX,
}
