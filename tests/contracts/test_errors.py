"""Contract tests for error records and exceptions."""

from __future__ import annotations

import pytest

from simm_calc.contracts.errors import (
    ERROR_MISSING_FIELD,
    ERROR_MISSING_PARAMETER,
    CalculationError,
    ConfigurationError,
    ErrorCollector,
    SimmError,
    ValidationError,
    invalid_value_error,
    missing_field_error,
    missing_parameter_error,
)
from simm_calc.domain.enums import ErrorCategory, ErrorSeverity


def warning(code: str = "W1") -> CalculationError:
    return CalculationError(
        code=code,
        message="note",
        severity=ErrorSeverity.WARNING,
        category=ErrorCategory.DATA_QUALITY,
    )


class TestCalculationError:
    def test_str_with_context(self):
        error = missing_field_error("qualifier", row_index=7, risk_type="Risk_FX")

        assert str(error) == (
            "[DQ001] ERROR: Required field 'qualifier' is missing or null | Row: 7 | RiskType: Risk_FX"
        )

    def test_to_dict(self):
        error = invalid_value_error("bucket", "99", "1..12", row_index=1)

        data = error.to_dict()

        assert data["severity"] == "error"
        assert data["category"] == "data_quality"
        assert data["actual_value"] == "99"
        assert data["expected_value"] == "1..12"


class TestExceptions:
    def test_hierarchy(self):
        assert issubclass(ValidationError, SimmError)
        assert issubclass(ConfigurationError, SimmError)

    def test_message_lists_errors(self):
        errors = [missing_field_error("amount_usd", i) for i in range(7)]

        text = str(ValidationError("Invalid CRIF", errors))

        assert text.startswith("Invalid CRIF: [DQ001]")
        assert text.endswith("(+2 more)")

    def test_missing_parameter_error(self):
        exc = missing_parameter_error("risk_weight", "Equity '13'")

        assert isinstance(exc, ConfigurationError)
        assert exc.errors[0].code == ERROR_MISSING_PARAMETER
        assert exc.errors[0].severity == ErrorSeverity.CRITICAL


class TestErrorCollector:
    def test_warnings_do_not_raise(self):
        collector = ErrorCollector()
        collector.add_error(warning())

        collector.raise_if_errors("boom")

        assert not collector.has_errors
        assert len(collector.warnings) == 1

    def test_errors_raise_together(self):
        collector = ErrorCollector()
        collector.add_error(missing_field_error("risk_type", 0))
        collector.add_error(warning())
        collector.add_error(missing_field_error("amount_usd", 1))

        with pytest.raises(ValidationError) as exc_info:
            collector.raise_if_errors("Invalid CRIF")

        assert len(exc_info.value.errors) == 3
        assert exc_info.value.errors[0].code == ERROR_MISSING_FIELD
