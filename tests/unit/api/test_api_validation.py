"""Unit tests for CRIF file validation."""

from __future__ import annotations

from simm_calc.api.models import ValidationRequest
from simm_calc.api.validation import DataPathValidator, get_required_columns, validate_data_path


class TestDataPathValidator:
    def test_valid_file(self, crif_file):
        path = crif_file([("RatesFX", "Risk_FX", "EUR", "", "", "", 1.0)])

        response = DataPathValidator().validate(ValidationRequest(crif_path=path))

        assert response.valid
        assert response.columns_found == ["risk_type", "amount_usd"]
        assert response.columns_missing == []

    def test_missing_file(self, tmp_path):
        response = validate_data_path(tmp_path / "missing.csv")

        assert not response.valid
        assert response.errors[0].code == "VAL002"

    def test_directory(self, tmp_path):
        response = validate_data_path(tmp_path)

        assert not response.valid
        assert response.errors[0].code == "VAL001"

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "crif.txt"
        path.write_text("RiskType,AmountUSD\n")

        response = validate_data_path(path)

        assert not response.valid
        assert "Unsupported" in response.errors[0].message

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "crif.csv"
        path.write_text("RiskType,Qualifier\nRisk_FX,EUR\n")

        response = validate_data_path(path)

        assert not response.valid
        assert response.columns_missing == ["amount_usd"]
        assert response.missing_count == 1
        assert response.errors[0].code == "VAL003"

    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "crif.parquet"
        path.write_text("not parquet")

        response = validate_data_path(path)

        assert not response.valid
        assert response.errors[0].code == "LOAD001"


class TestRequiredColumns:
    def test_required_columns(self):
        assert get_required_columns() == ["risk_type", "amount_usd"]
