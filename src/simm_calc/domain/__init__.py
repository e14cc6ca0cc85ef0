"""
Domain module for the SIMM calculator.

Contains core enumerations used throughout the calculation pipeline.
"""

from simm_calc.domain.enums import (
    BreakdownLevel,
    ErrorCategory,
    ErrorSeverity,
    MarginType,
    ProductClass,
    RiskClass,
    RiskType,
    SimmVersion,
)

__all__ = [
    "BreakdownLevel",
    "ErrorCategory",
    "ErrorSeverity",
    "MarginType",
    "ProductClass",
    "RiskClass",
    "RiskType",
    "SimmVersion",
]
