"""
Error conversion utilities for the SIMM calculator API.

convert_to_api_error: Converts internal CalculationError to user-friendly APIError
convert_errors: Batch conversion of error lists
create_api_error: Factory function for creating APIError instances

Provides user-friendly error messages and categorization for display.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from simm_calc.api.models import APIError

if TYPE_CHECKING:
    from simm_calc.contracts.errors import CalculationError


# =============================================================================
# User-Friendly Error Messages
# =============================================================================


ERROR_MESSAGE_OVERRIDES: dict[str, str] = {
    "DQ001": "Required field is missing from the CRIF record",
    "DQ002": "Field contains an invalid value",
    "DQ003": "Field has incorrect data type",
    "DQ004": "RiskType is not part of the SIMM vocabulary",
    "DQ005": "Bucket is required for this RiskType",
    "DQ006": "Bucket is not valid for this RiskType",
    "DQ007": "Tenor label is not a recognised SIMM tenor",
    "CFG001": "Invalid configuration parameter",
    "CFG002": "No calibrated SIMM parameter for this combination",
    "CFG003": "Unsupported SIMM version",
}


CATEGORY_DISPLAY_NAMES: dict[str, str] = {
    "data_quality": "Data Quality",
    "schema_validation": "Schema Validation",
    "configuration": "Configuration",
    "calculation": "Calculation",
}


# =============================================================================
# Conversion Functions
# =============================================================================


def convert_to_api_error(error: CalculationError) -> APIError:
    """
    Convert internal CalculationError to user-friendly APIError.

    Args:
        error: Internal CalculationError from the calculation pipeline

    Returns:
        APIError with user-friendly message and details
    """
    category = error.category.value
    return APIError(
        code=error.code,
        message=_get_user_friendly_message(error),
        severity=error.severity.value,
        category=CATEGORY_DISPLAY_NAMES.get(category, category),
        details=_build_error_details(error),
    )


def convert_errors(errors: list[CalculationError]) -> list[APIError]:
    """Convert a list of CalculationErrors to APIErrors."""
    return [convert_to_api_error(error) for error in errors]


def create_api_error(
    code: str,
    message: str,
    severity: str = "error",
    category: str = "Calculation",
    **details: str | None,
) -> APIError:
    """
    Factory function to create APIError with optional details.

    Args:
        code: Error code
        message: Error message
        severity: Error severity (warning, error, critical)
        category: Error category
        **details: Additional context (path, field_name, etc.)

    Returns:
        APIError instance
    """
    filtered_details = {k: v for k, v in details.items() if v is not None}
    return APIError(
        code=code,
        message=message,
        severity=severity,
        category=category,
        details=filtered_details,
    )


# =============================================================================
# Helper Functions
# =============================================================================


def _get_user_friendly_message(error: CalculationError) -> str:
    """Override message with row and field context appended."""
    base_message = ERROR_MESSAGE_OVERRIDES.get(error.code, error.message)

    context_parts = []
    if error.row_index is not None:
        context_parts.append(f"Row: {error.row_index}")
    if error.field_name:
        context_parts.append(f"Field: {error.field_name}")
    if error.actual_value and error.expected_value:
        context_parts.append(f"Expected {error.expected_value}, got {error.actual_value}")

    if context_parts:
        return f"{base_message} ({', '.join(context_parts)})"
    return base_message


def _build_error_details(error: CalculationError) -> dict:
    details = {}

    if error.row_index is not None:
        details["row_index"] = error.row_index
    if error.risk_type:
        details["risk_type"] = error.risk_type
    if error.field_name:
        details["field_name"] = error.field_name
    if error.expected_value:
        details["expected_value"] = error.expected_value
    if error.actual_value:
        details["actual_value"] = error.actual_value

    return details


def create_validation_error(message: str, path: str | None = None) -> APIError:
    """Create an error for CRIF file validation failures."""
    details = {"path": path} if path else {}
    return APIError(
        code="VAL001",
        message=message,
        severity="error",
        category="Validation",
        details=details,
    )


def create_file_not_found_error(file_path: str) -> APIError:
    """Create an error for a missing CRIF file."""
    return APIError(
        code="VAL002",
        message=f"CRIF file not found: {file_path}",
        severity="error",
        category="Validation",
        details={"path": file_path},
    )


def create_missing_column_error(column: str, file_path: str) -> APIError:
    """Create an error for a required CRIF column absent from the file."""
    return APIError(
        code="VAL003",
        message=f"Required CRIF column missing: {column}",
        severity="error",
        category="Validation",
        details={"path": file_path, "column": column},
    )


def create_load_error(message: str, source: str | None = None) -> APIError:
    """Create an error for CRIF loading failures."""
    details = {"source": source} if source else {}
    return APIError(
        code="LOAD001",
        message=f"Failed to load data: {message}",
        severity="critical",
        category="Data Loading",
        details=details,
    )
