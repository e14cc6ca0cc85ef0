"""
SIMM Calculator API Module.

Public API for SIMM calculations providing:
- SimmService: Main service facade for calculations
- Request/Response models: Clean interface contracts
- Validation utilities: CRIF file validation

Usage:
    from simm_calc.api import SimmService, CalculationRequest

    service = SimmService()
    response = service.calculate(
        CalculationRequest(
            crif_path="crif.csv",
            simm_version="2.6",
            calculation_currency="EUR",
            exchange_rate=0.92,
        )
    )

    if response.success:
        print(f"SIMM: {response.summary.total_simm:,.0f} {response.currency}")
        print(response.risk_class_table)
    else:
        for error in response.errors:
            print(f"{error.code}: {error.message}")
"""

from simm_calc.api.formatters import ResultFormatter, export_breakdown, render_report
from simm_calc.api.models import (
    APIError,
    CalculationRequest,
    CalculationResponse,
    PerformanceMetrics,
    SummaryStatistics,
    ValidationRequest,
    ValidationResponse,
)
from simm_calc.api.service import (
    SimmService,
    create_service,
    quick_calculate,
)
from simm_calc.api.validation import (
    DataPathValidator,
    get_required_columns,
    validate_data_path,
)

__all__ = [
    # Service
    "SimmService",
    "create_service",
    "quick_calculate",
    # Request models
    "CalculationRequest",
    "ValidationRequest",
    # Response models
    "CalculationResponse",
    "ValidationResponse",
    "SummaryStatistics",
    "APIError",
    "PerformanceMetrics",
    # Formatting
    "ResultFormatter",
    "export_breakdown",
    "render_report",
    # Validation
    "DataPathValidator",
    "validate_data_path",
    "get_required_columns",
]
