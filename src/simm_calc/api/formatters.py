"""
Result formatting utilities for the SIMM calculator API.

ResultFormatter: Formats SimmResult for API responses
export_breakdown: Writes a breakdown to CSV or JSON
render_report: Plain text report of a response

Uses the "simm" Polars namespaces for the breakdown tables.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

import polars as pl

import simm_calc.engine.breakdown_namespace  # noqa: F401
from simm_calc.api.errors import convert_errors
from simm_calc.api.models import (
    APIError,
    CalculationResponse,
    PerformanceMetrics,
    SummaryStatistics,
)
from simm_calc.data.schemas import BREAKDOWN_SCHEMA
from simm_calc.domain.enums import BreakdownLevel

if TYPE_CHECKING:
    from simm_calc.contracts.bundles import GroupedSensitivities, SimmResult


# =============================================================================
# Result Formatter
# =============================================================================


class ResultFormatter:
    """
    Formats pipeline results for API responses.

    Handles:
    - Summary statistics computation
    - Risk class table construction
    - Warning conversion to API format
    - Performance metrics calculation

    Usage:
        formatter = ResultFormatter()
        response = formatter.format_response(
            result=result,
            grouped=grouped,
            started_at=datetime.now(),
        )
    """

    def format_response(
        self,
        result: SimmResult,
        grouped: GroupedSensitivities,
        started_at: datetime,
    ) -> CalculationResponse:
        """
        Format SimmResult into CalculationResponse.

        Args:
            result: Result from the pipeline
            grouped: Netted sensitivities the result was computed from
            started_at: Calculation start time

        Returns:
            CalculationResponse ready for API return
        """
        completed_at = datetime.now()

        summary = self._compute_summary(result, grouped)
        errors = convert_errors(result.warnings) if result.warnings else []

        performance = PerformanceMetrics(
            started_at=started_at,
            completed_at=completed_at,
            duration_seconds=(completed_at - started_at).total_seconds(),
            record_count=grouped.record_count,
        )

        return CalculationResponse(
            success=not any(e.severity in ("error", "critical") for e in errors),
            simm_version=result.simm_version,
            currency=result.currency,
            summary=summary,
            breakdown=result.breakdown,
            risk_class_table=result.breakdown.simm.risk_class_table(),
            errors=errors,
            performance=performance,
        )

    def format_error_response(
        self,
        errors: list[APIError],
        simm_version: str,
        currency: str,
        started_at: datetime,
    ) -> CalculationResponse:
        """
        Format an error response when calculation fails.

        Args:
            errors: List of errors that caused failure
            simm_version: Calibration that was requested
            currency: Currency that was requested
            started_at: Calculation start time

        Returns:
            CalculationResponse indicating failure
        """
        completed_at = datetime.now()

        empty_summary = SummaryStatistics(
            total_simm=0.0,
            total_add_on=0.0,
            record_count=0,
            risk_factor_count=0,
        )

        performance = PerformanceMetrics(
            started_at=started_at,
            completed_at=completed_at,
            duration_seconds=(completed_at - started_at).total_seconds(),
            record_count=0,
        )

        return CalculationResponse(
            success=False,
            simm_version=simm_version,
            currency=currency,
            summary=empty_summary,
            breakdown=pl.DataFrame(schema=BREAKDOWN_SCHEMA),
            errors=errors,
            performance=performance,
        )

    def _compute_summary(
        self,
        result: SimmResult,
        grouped: GroupedSensitivities,
    ) -> SummaryStatistics:
        product_rows = result.breakdown.simm.level(BreakdownLevel.PRODUCT_CLASS)
        by_product_class = dict(
            zip(product_rows["product_class"].to_list(), product_rows["value"].to_list())
        )

        return SummaryStatistics(
            total_simm=result.total,
            total_add_on=result.add_on,
            record_count=grouped.record_count,
            risk_factor_count=len(grouped.sensitivities),
            margin_by_product_class=by_product_class,
            margin_by_type={mt.value: value for mt, value in result.margin_by_type.items()},
        )


# =============================================================================
# Convenience Functions
# =============================================================================


def export_breakdown(breakdown: pl.DataFrame, path: str | Path) -> Path:
    """
    Write a breakdown to CSV or JSON, chosen by file extension.

    Args:
        breakdown: BREAKDOWN_SCHEMA frame
        path: Target .csv or .json file

    Returns:
        The path written

    Raises:
        ValueError: If the extension is not .csv or .json
    """
    target = Path(path)
    suffix = target.suffix.lower()
    if suffix == ".csv":
        breakdown.write_csv(target)
    elif suffix == ".json":
        breakdown.write_json(target)
    else:
        raise ValueError(f"Unsupported export format: {suffix or '<none>'}")
    return target


def render_report(response: CalculationResponse, decimals: int = 2) -> str:
    """
    Render a response as plain text, one breakdown row per line.

    Bucket rows are omitted; the report stops at margin type level.
    """
    if not response.success:
        return "\n".join(str(e) for e in response.errors)

    rows = (
        response.breakdown.filter(pl.col("level") != BreakdownLevel.BUCKET.value)
        .simm.with_labels()
        .with_columns(pl.col("value").simm.format_amount(decimals).alias("amount"))
    )
    width = max((len(p) for p in rows["path"].to_list()), default=0)

    lines = [f"ISDA SIMM {response.simm_version} ({response.currency})"]
    lines.extend(
        f"{path.ljust(width)}  {amount:>20}"
        for path, amount in zip(rows["path"].to_list(), rows["amount"].to_list())
    )
    lines.extend(str(e) for e in response.errors)
    return "\n".join(lines)
