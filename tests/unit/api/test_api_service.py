"""
Unit tests for the API service module.

Tests cover:
- SimmService.calculate success and failure paths
- SimmService.validate_data_path
- create_service and quick_calculate
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from simm_calc.api.models import CalculationRequest, ValidationRequest
from simm_calc.api.service import SimmService, create_service, quick_calculate
from simm_calc.contracts.errors import missing_parameter_error


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def service() -> SimmService:
    return SimmService()


@pytest.fixture
def usd_crif(crif_file):
    return crif_file([
        ("RatesFX", "Risk_IRCurve", "USD", "1", "5y", "OIS", 1000000.0),
        ("", "Param_AddOnFixedAmount", "", "", "", "", 250.0),
    ])


# =============================================================================
# calculate
# =============================================================================


class TestCalculate:
    def test_success(self, service, usd_crif):
        response = service.calculate(CalculationRequest(crif_path=usd_crif, simm_version="2.5"))

        assert response.success
        assert response.simm_version == "2.5"
        assert response.summary.total_simm == pytest.approx(52e6 + 250.0)
        assert response.summary.total_add_on == 250.0
        assert response.summary.record_count == 2

    def test_version_spellings(self, service, usd_crif):
        response = service.calculate(CalculationRequest(crif_path=usd_crif, simm_version="v2_7"))

        assert response.success
        assert response.simm_version == "2.7"

    def test_unsupported_version(self, service, usd_crif):
        response = service.calculate(CalculationRequest(crif_path=usd_crif, simm_version="3.0"))

        assert not response.success
        assert response.errors[0].code == "CFG003"

    def test_invalid_currency(self, service, usd_crif):
        response = service.calculate(
            CalculationRequest(crif_path=usd_crif, calculation_currency="euro")
        )

        assert not response.success
        assert response.errors[0].code == "CFG001"

    def test_missing_file(self, service, tmp_path):
        response = service.calculate(CalculationRequest(crif_path=tmp_path / "none.csv"))

        assert not response.success
        assert response.errors[0].code == "VAL002"

    def test_invalid_records_reported_together(self, service, crif_file):
        path = crif_file([
            ("RatesFX", "Risk_Bogus", "USD", "1", "5y", "OIS", 1.0),
            ("Equity", "Risk_Equity", "ACME", "", "", "", 1.0),
        ])

        response = service.calculate(CalculationRequest(crif_path=path))

        assert not response.success
        assert [e.code for e in response.errors] == ["DQ004", "DQ005"]
        assert response.error_count == 2

    def test_calibration_error(self, service, usd_crif):
        with patch.object(
            service._pipeline,
            "run_grouped",
            side_effect=missing_parameter_error("risk_weight", "Risk_IRCurve"),
        ):
            response = service.calculate(CalculationRequest(crif_path=usd_crif))

        assert not response.success
        assert response.errors[0].code == "CFG002"

    def test_reporting_currency(self, service, usd_crif):
        response = service.calculate(
            CalculationRequest(
                crif_path=usd_crif,
                simm_version="2.5",
                calculation_currency="EUR",
                exchange_rate=0.5,
            )
        )

        assert response.currency == "EUR"
        assert response.summary.total_simm == pytest.approx((52e6 + 250.0) * 0.5)


# =============================================================================
# Other service methods
# =============================================================================


class TestServiceHelpers:
    def test_validate_data_path(self, service, usd_crif):
        response = service.validate_data_path(ValidationRequest(crif_path=usd_crif))

        assert response.valid

    def test_supported_versions(self, service):
        versions = service.get_supported_versions()

        assert [v["id"] for v in versions] == ["2.5", "2.6", "2.7"]
        assert versions[0]["name"] == "ISDA SIMM 2.5"

    def test_create_service(self):
        assert isinstance(create_service(), SimmService)

    def test_quick_calculate(self, usd_crif):
        response = quick_calculate(usd_crif, simm_version="2.6")

        assert response.success
        assert response.summary.total_simm == pytest.approx(60e6 + 250.0)
