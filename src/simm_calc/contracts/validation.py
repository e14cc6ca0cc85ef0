"""
Schema validation functions for the SIMM calculator.

Provides utilities for validating CRIF LazyFrame schemas without
materializing data. This enables early detection of malformed input at
the pipeline boundary, before any row level validation.

Key functions:
- validate_crif_frame: Structured errors for a CRIF frame
"""

from __future__ import annotations

import polars as pl

from simm_calc.contracts.errors import (
    ERROR_MISSING_FIELD,
    ERROR_TYPE_MISMATCH,
    CalculationError,
)
from simm_calc.data.schemas import CRIF_REQUIRED_COLUMNS, CRIF_SCHEMA
from simm_calc.domain.enums import ErrorCategory, ErrorSeverity


def _types_compatible(actual: pl.DataType, expected: pl.DataType) -> bool:
    """
    Check if actual type is compatible with expected type.

    Integer amounts are accepted where floats are expected, and a fully
    null column is compatible with anything.
    """
    if actual == expected:
        return True

    numeric_types = {
        pl.Int8, pl.Int16, pl.Int32, pl.Int64,
        pl.UInt8, pl.UInt16, pl.UInt32, pl.UInt64,
        pl.Float32, pl.Float64,
    }
    if actual in numeric_types and expected in numeric_types:
        return True

    if actual == pl.Null:
        return True

    return False


def validate_crif_frame(lf: pl.LazyFrame) -> list[CalculationError]:
    """
    Validate the columns of a CRIF frame and return structured errors.

    Only risk_type and amount_usd are mandatory; the remaining CRIF
    columns are optional and treated as empty when absent.
    """
    errors: list[CalculationError] = []
    actual_schema = lf.collect_schema()

    for col_name in CRIF_REQUIRED_COLUMNS:
        if col_name not in actual_schema:
            errors.append(
                CalculationError(
                    code=ERROR_MISSING_FIELD,
                    message=f"Missing column '{col_name}' in CRIF",
                    severity=ErrorSeverity.ERROR,
                    category=ErrorCategory.SCHEMA_VALIDATION,
                    field_name=col_name,
                    expected_value=str(CRIF_SCHEMA[col_name]),
                )
            )

    for col_name, expected_type in CRIF_SCHEMA.items():
        if col_name not in actual_schema:
            continue
        actual_type = actual_schema[col_name]
        if not _types_compatible(actual_type, expected_type):
            errors.append(
                CalculationError(
                    code=ERROR_TYPE_MISMATCH,
                    message=f"Type mismatch for '{col_name}' in CRIF",
                    severity=ErrorSeverity.ERROR,
                    category=ErrorCategory.SCHEMA_VALIDATION,
                    field_name=col_name,
                    expected_value=str(expected_type),
                    actual_value=str(actual_type),
                )
            )

    return errors
