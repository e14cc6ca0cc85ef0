"""
API request and response models for the SIMM calculator.

SimmService uses these models for clean interface contracts:
- CalculationRequest: Input parameters for a SIMM calculation
- ValidationRequest: Input for CRIF file validation
- CalculationResponse: Calculation results with summary statistics
- ValidationResponse: CRIF file validation results

All models are frozen dataclasses following existing project patterns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    import polars as pl


# =============================================================================
# Request Models
# =============================================================================


@dataclass(frozen=True)
class CalculationRequest:
    """
    Request model for a SIMM calculation.

    Attributes:
        crif_path: Path to a CRIF file (.csv, .json or .parquet)
        simm_version: SIMM calibration ("2.5", "2.6", "2.7")
        calculation_currency: ISO currency the margin is reported in
        exchange_rate: Units of calculation_currency per USD
        max_workers: Worker threads for per risk class fan-out (None runs
            sequentially)
    """

    crif_path: str | Path
    simm_version: str = "2.6"
    calculation_currency: str = "USD"
    exchange_rate: float = 1.0
    max_workers: int | None = None

    @property
    def path(self) -> Path:
        """Get crif_path as Path object."""
        return Path(self.crif_path)


@dataclass(frozen=True)
class ValidationRequest:
    """
    Request model for CRIF file validation.

    Used to check that a file exists, has a supported format and carries
    the required CRIF columns before running a calculation.
    """

    crif_path: str | Path

    @property
    def path(self) -> Path:
        """Get crif_path as Path object."""
        return Path(self.crif_path)


# =============================================================================
# Response Models - Summary Statistics
# =============================================================================


@dataclass(frozen=True)
class SummaryStatistics:
    """
    Headline numbers of a SIMM calculation.

    Attributes:
        total_simm: SIMM including add-ons
        total_add_on: Add-on amount included in total_simm
        record_count: Number of CRIF records read
        risk_factor_count: Number of netted risk factors
        margin_by_product_class: Product class margin keyed by CRIF name
        margin_by_type: Portfolio SIMM per margin type keyed by name
    """

    total_simm: float
    total_add_on: float
    record_count: int
    risk_factor_count: int
    margin_by_product_class: dict[str, float] = field(default_factory=dict)
    margin_by_type: dict[str, float] = field(default_factory=dict)


# =============================================================================
# Response Models - Errors
# =============================================================================


@dataclass(frozen=True)
class APIError:
    """
    User-friendly error representation for API responses.

    Converts internal CalculationError to a format suitable
    for display and logging.

    Attributes:
        code: Error code (e.g., "DQ004")
        message: User-friendly error message
        severity: Error severity ("warning", "error", "critical")
        category: Error category for grouping
        details: Additional context (row_index, field_name, etc.)
    """

    code: str
    message: str
    severity: Literal["warning", "error", "critical"]
    category: str
    details: dict = field(default_factory=dict)

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"[{self.code}] {self.severity.upper()}: {self.message}"


# =============================================================================
# Response Models - Performance
# =============================================================================


@dataclass(frozen=True)
class PerformanceMetrics:
    """
    Performance metrics for the calculation run.

    Attributes:
        started_at: Calculation start timestamp
        completed_at: Calculation end timestamp
        duration_seconds: Total calculation time in seconds
        record_count: Number of CRIF records processed
    """

    started_at: datetime
    completed_at: datetime
    duration_seconds: float
    record_count: int

    @property
    def records_per_second(self) -> float:
        """Calculate processing throughput."""
        if self.duration_seconds > 0:
            return self.record_count / self.duration_seconds
        return 0.0


# =============================================================================
# Response Models - Main Responses
# =============================================================================


@dataclass(frozen=True)
class CalculationResponse:
    """
    Response model for SIMM calculation results.

    Attributes:
        success: Whether calculation completed without errors
        simm_version: Calibration used for calculation
        currency: Currency of every amount in the response
        summary: Headline numbers
        breakdown: Hierarchical breakdown (BREAKDOWN_SCHEMA)
        risk_class_table: One row per (product class, risk class) with
            a column per margin type
        errors: Errors and warnings encountered
        performance: Performance metrics for the run
    """

    success: bool
    simm_version: str
    currency: str
    summary: SummaryStatistics
    breakdown: pl.DataFrame
    risk_class_table: pl.DataFrame | None = None
    errors: list[APIError] = field(default_factory=list)
    performance: PerformanceMetrics | None = None

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return any(e.severity == "warning" for e in self.errors)

    @property
    def has_errors(self) -> bool:
        """Check if there are any errors (not warnings)."""
        return any(e.severity in ("error", "critical") for e in self.errors)

    @property
    def warning_count(self) -> int:
        """Count of warnings."""
        return sum(1 for e in self.errors if e.severity == "warning")

    @property
    def error_count(self) -> int:
        """Count of errors (not warnings)."""
        return sum(1 for e in self.errors if e.severity in ("error", "critical"))


@dataclass(frozen=True)
class ValidationResponse:
    """
    Response model for CRIF file validation.

    Attributes:
        valid: Whether the file can be calculated
        crif_path: The validated path
        columns_found: Required CRIF columns present in the file
        columns_missing: Required CRIF columns absent from the file
        errors: List of validation errors
    """

    valid: bool
    crif_path: str
    columns_found: list[str] = field(default_factory=list)
    columns_missing: list[str] = field(default_factory=list)
    errors: list[APIError] = field(default_factory=list)

    @property
    def missing_count(self) -> int:
        """Count of missing columns."""
        return len(self.columns_missing)
