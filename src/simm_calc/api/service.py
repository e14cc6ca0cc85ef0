"""
SIMM Calculator API Service.

SimmService provides a clean facade for SIMM calculations:
- calculate: Run a SIMM calculation on a CRIF file
- validate_data_path: Check a CRIF file before calculation
- get_supported_versions: List available SIMM calibrations

This is the main entry point for CLI integration.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from simm_calc.api.errors import convert_errors, create_load_error
from simm_calc.api.formatters import ResultFormatter
from simm_calc.api.models import (
    CalculationRequest,
    CalculationResponse,
    ValidationRequest,
    ValidationResponse,
)
from simm_calc.api.validation import DataPathValidator
from simm_calc.contracts.config import CalculationConfig
from simm_calc.contracts.errors import SimmError
from simm_calc.domain.enums import SimmVersion
from simm_calc.engine.grouper import SensitivityGrouper
from simm_calc.engine.loader import DataLoadError, create_loader
from simm_calc.engine.pipeline import SimmPipeline


# =============================================================================
# SIMM Service
# =============================================================================


class SimmService:
    """
    High-level service for SIMM calculations.

    Wraps the SimmPipeline with a clean API surface. Handles
    configuration setup, CRIF loading and result formatting, and
    converts ValidationError, ConfigurationError and DataLoadError into
    APIError records on the response.

    Usage:
        from simm_calc.api import SimmService, CalculationRequest

        service = SimmService()
        response = service.calculate(
            CalculationRequest(crif_path="crif.csv", simm_version="2.6")
        )

        if response.success:
            print(f"SIMM: {response.summary.total_simm:,.0f}")
    """

    def __init__(self) -> None:
        """Initialize SimmService with default components."""
        self._validator = DataPathValidator()
        self._formatter = ResultFormatter()
        self._grouper = SensitivityGrouper()
        self._pipeline = SimmPipeline(grouper=self._grouper)

    def calculate(self, request: CalculationRequest) -> CalculationResponse:
        """
        Run a SIMM calculation with the specified parameters.

        Args:
            request: CalculationRequest with all parameters

        Returns:
            CalculationResponse with results or errors
        """
        started_at = datetime.now()

        validation = self._validator.validate(ValidationRequest(crif_path=request.crif_path))
        if not validation.valid:
            return self._formatter.format_error_response(
                errors=validation.errors,
                simm_version=str(request.simm_version),
                currency=request.calculation_currency,
                started_at=started_at,
            )

        try:
            config = self._create_config(request)
            crif = create_loader(request.path).load()
            grouped = self._grouper.group(crif, config)
            result = self._pipeline.run_grouped(grouped, config)
        except SimmError as e:
            return self._formatter.format_error_response(
                errors=convert_errors(e.errors),
                simm_version=str(request.simm_version),
                currency=request.calculation_currency,
                started_at=started_at,
            )
        except DataLoadError as e:
            return self._formatter.format_error_response(
                errors=[create_load_error(str(e), source=e.source)],
                simm_version=str(request.simm_version),
                currency=request.calculation_currency,
                started_at=started_at,
            )

        return self._formatter.format_response(
            result=result,
            grouped=grouped,
            started_at=started_at,
        )

    def validate_data_path(self, request: ValidationRequest) -> ValidationResponse:
        """Validate a CRIF file for calculation readiness."""
        return self._validator.validate(request)

    def get_supported_versions(self) -> list[dict[str, str]]:
        """
        Get list of supported SIMM calibrations.

        Returns:
            List of version descriptors with id and name
        """
        return [{"id": v.value, "name": f"ISDA SIMM {v.value}"} for v in SimmVersion]

    def _create_config(self, request: CalculationRequest) -> CalculationConfig:
        return CalculationConfig.for_version(
            request.simm_version,
            calculation_currency=request.calculation_currency,
            exchange_rate=request.exchange_rate,
            max_workers=request.max_workers,
        )


# =============================================================================
# Convenience Functions
# =============================================================================


def create_service() -> SimmService:
    """
    Factory function to create SimmService instance.

    Returns:
        Configured SimmService
    """
    return SimmService()


def quick_calculate(
    crif_path: str | Path,
    simm_version: str = "2.6",
    calculation_currency: str = "USD",
    exchange_rate: float = 1.0,
) -> CalculationResponse:
    """
    Run a quick calculation with minimal configuration.

    Example:
        response = quick_calculate("crif.csv", simm_version="2.6")
        print(f"SIMM: {response.summary.total_simm:,.0f}")
    """
    return SimmService().calculate(
        CalculationRequest(
            crif_path=crif_path,
            simm_version=simm_version,
            calculation_currency=calculation_currency,
            exchange_rate=exchange_rate,
        )
    )
