"""
Error handling contracts for the SIMM calculator.

Provides structured error representation:
- CalculationError: Immutable error details with field/value context
- SimmError: Base exception for failures surfaced to the caller
- ValidationError: Malformed CRIF input (carries CalculationError records)
- ConfigurationError: Invalid configuration or missing calibration parameter

Validation collects every data quality issue before raising so that a
single run reports all problems in the input, while the aggregation core
fails fast on the first missing regulatory parameter.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from simm_calc.domain.enums import ErrorCategory, ErrorSeverity


@dataclass(frozen=True)
class CalculationError:
    """
    Immutable representation of a calculation error or warning.

    Attributes:
        code: Unique error code (e.g., "DQ001", "CFG002")
        message: Human-readable description of the issue
        severity: Error severity level (WARNING, ERROR, CRITICAL)
        category: Error category for filtering (DATA_QUALITY, CONFIGURATION, ...)
        row_index: Optional zero-based CRIF row the issue refers to
        risk_type: Optional CRIF RiskType of the affected record
        field_name: Optional name of the problematic field
        expected_value: Optional description of expected value/format
        actual_value: Optional actual value that caused the error
    """

    code: str
    message: str
    severity: ErrorSeverity
    category: ErrorCategory
    row_index: int | None = None
    risk_type: str | None = None
    field_name: str | None = None
    expected_value: str | None = None
    actual_value: str | None = None

    def __str__(self) -> str:
        """Human-readable error representation."""
        parts = [f"[{self.code}] {self.severity.value.upper()}: {self.message}"]

        if self.row_index is not None:
            parts.append(f"Row: {self.row_index}")
        if self.risk_type:
            parts.append(f"RiskType: {self.risk_type}")

        return " | ".join(parts)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "severity": self.severity.value,
            "category": self.category.value,
            "row_index": self.row_index,
            "risk_type": self.risk_type,
            "field_name": self.field_name,
            "expected_value": self.expected_value,
            "actual_value": self.actual_value,
        }


# =============================================================================
# EXCEPTIONS
# =============================================================================


class SimmError(Exception):
    """Base class for errors surfaced by the SIMM calculator."""

    def __init__(self, message: str, errors: list[CalculationError] | None = None) -> None:
        self.message = message
        self.errors: list[CalculationError] = list(errors or [])
        super().__init__(message)

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        details = "; ".join(str(e) for e in self.errors[:5])
        more = f" (+{len(self.errors) - 5} more)" if len(self.errors) > 5 else ""
        return f"{self.message}: {details}{more}"


class ValidationError(SimmError):
    """
    Raised when CRIF input cannot be mapped onto the SIMM methodology.

    Never recovered internally: malformed input would silently corrupt
    a regulatory number.
    """


class ConfigurationError(SimmError):
    """
    Raised for invalid configuration or an unresolvable calibration lookup.

    The engine never substitutes a default for a missing regulatory parameter.
    """


@dataclass
class ErrorCollector:
    """Accumulates CalculationError records and raises them together."""

    errors: list[CalculationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Check if any ERROR or CRITICAL issues were collected."""
        return any(
            e.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)
            for e in self.errors
        )

    @property
    def warnings(self) -> list[CalculationError]:
        """Get only warning-level issues."""
        return [e for e in self.errors if e.severity == ErrorSeverity.WARNING]

    def add_error(self, error: CalculationError) -> None:
        """Add an error to the collector."""
        self.errors.append(error)

    def raise_if_errors(self, message: str) -> None:
        """Raise ValidationError carrying every collected issue."""
        if self.has_errors:
            raise ValidationError(message, self.errors)


# =============================================================================
# ERROR CODE CONSTANTS
# =============================================================================

# Data quality error codes
ERROR_MISSING_FIELD = "DQ001"
ERROR_INVALID_VALUE = "DQ002"
ERROR_TYPE_MISMATCH = "DQ003"
ERROR_UNKNOWN_RISK_TYPE = "DQ004"
ERROR_MISSING_BUCKET = "DQ005"
ERROR_INVALID_BUCKET = "DQ006"
ERROR_INVALID_TENOR = "DQ007"

# Configuration error codes
ERROR_INVALID_CONFIG = "CFG001"
ERROR_MISSING_PARAMETER = "CFG002"
ERROR_UNSUPPORTED_VERSION = "CFG003"


# =============================================================================
# ERROR FACTORY FUNCTIONS
# =============================================================================


def missing_field_error(
    field_name: str,
    row_index: int | None = None,
    risk_type: str | None = None,
) -> CalculationError:
    """Create a missing field error."""
    return CalculationError(
        code=ERROR_MISSING_FIELD,
        message=f"Required field '{field_name}' is missing or null",
        severity=ErrorSeverity.ERROR,
        category=ErrorCategory.DATA_QUALITY,
        row_index=row_index,
        risk_type=risk_type,
        field_name=field_name,
    )


def invalid_value_error(
    field_name: str,
    actual_value: str,
    expected_value: str,
    row_index: int | None = None,
    risk_type: str | None = None,
    code: str = ERROR_INVALID_VALUE,
) -> CalculationError:
    """Create an invalid value error."""
    return CalculationError(
        code=code,
        message=f"Invalid value for '{field_name}': expected {expected_value}, got {actual_value}",
        severity=ErrorSeverity.ERROR,
        category=ErrorCategory.DATA_QUALITY,
        row_index=row_index,
        risk_type=risk_type,
        field_name=field_name,
        expected_value=expected_value,
        actual_value=actual_value,
    )


def missing_parameter_error(parameter: str, key: str) -> ConfigurationError:
    """Create the exception raised when a calibration lookup fails."""
    record = CalculationError(
        code=ERROR_MISSING_PARAMETER,
        message=f"No calibrated value for {parameter} at {key}",
        severity=ErrorSeverity.CRITICAL,
        category=ErrorCategory.CONFIGURATION,
        field_name=parameter,
        actual_value=key,
    )
    return ConfigurationError(record.message, [record])


def invalid_config_error(field_name: str, actual_value: str, expected_value: str) -> ConfigurationError:
    """Create the exception raised for an invalid configuration value."""
    record = CalculationError(
        code=ERROR_INVALID_CONFIG,
        message=f"Invalid configuration '{field_name}': expected {expected_value}, got {actual_value}",
        severity=ErrorSeverity.CRITICAL,
        category=ErrorCategory.CONFIGURATION,
        field_name=field_name,
        expected_value=expected_value,
        actual_value=actual_value,
    )
    return ConfigurationError(record.message, [record])


def unsupported_version_error(version: str) -> ConfigurationError:
    """Create the exception raised for an unknown SIMM version string."""
    record = CalculationError(
        code=ERROR_UNSUPPORTED_VERSION,
        message=f"Unsupported SIMM version {version}",
        severity=ErrorSeverity.CRITICAL,
        category=ErrorCategory.CONFIGURATION,
        field_name="simm_version",
        expected_value="one of 2.5, 2.6, 2.7",
        actual_value=version,
    )
    return ConfigurationError(record.message, [record])
