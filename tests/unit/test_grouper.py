"""
Unit tests for the sensitivity grouper.

Tests cover:
- Netting per risk factor and deterministic key order
- Text normalisation (trimmed, missing as "", lower case tenors)
- Parameter rows split from sensitivities
- Record validation with collected errors
- Schema validation of the frame
"""

from __future__ import annotations

import polars as pl
import pytest

from simm_calc.contracts.errors import (
    ERROR_INVALID_BUCKET,
    ERROR_INVALID_TENOR,
    ERROR_MISSING_BUCKET,
    ERROR_MISSING_FIELD,
    ERROR_TYPE_MISMATCH,
    ERROR_UNKNOWN_RISK_TYPE,
    ValidationError,
)
from simm_calc.domain.enums import ProductClass, RiskType
from simm_calc.engine.grouper import (
    SensitivityGrouper,
    create_sensitivity_grouper,
    validate_record,
)


@pytest.fixture
def grouper() -> SensitivityGrouper:
    return create_sensitivity_grouper()


def record(**overrides) -> dict:
    row = {
        "product_class": "RatesFX",
        "risk_type": "Risk_IRCurve",
        "qualifier": "USD",
        "bucket": "1",
        "label1": "5y",
        "label2": "OIS",
        "amount_usd": 1.0,
    }
    row.update(overrides)
    return row


class TestNetting:
    """Records sharing a risk factor key are summed."""

    def test_identical_keys_are_netted(self, grouper, crif, config):
        frame = crif([
            ("RatesFX", "Risk_IRCurve", "USD", "1", "5y", "OIS", 100.0),
            ("RatesFX", "Risk_IRCurve", "USD", "1", "5y", "OIS", -40.0),
            ("RatesFX", "Risk_IRCurve", "USD", "1", "10y", "OIS", 10.0),
        ])

        grouped = grouper.group(frame, config)

        assert grouped.record_count == 3
        assert [s.amount_usd for s in grouped.sensitivities] == [10.0, 60.0]
        assert [s.label1 for s in grouped.sensitivities] == ["10y", "5y"]

    def test_text_fields_normalised(self, grouper, crif, config):
        frame = crif([
            ("RatesFX", "Risk_IRCurve", " USD ", "1", "5Y", None, 1.0),
            ("RatesFX", "Risk_IRCurve", "USD", "1", "5y", "", 2.0),
        ])

        grouped = grouper.group(frame, config)

        assert len(grouped.sensitivities) == 1
        sensitivity = grouped.sensitivities[0]
        assert sensitivity.qualifier == "USD"
        assert sensitivity.label1 == "5y"
        assert sensitivity.label2 == ""
        assert sensitivity.amount_usd == 3.0
        assert sensitivity.product_class == ProductClass.RATES_FX
        assert sensitivity.risk_type == RiskType.IR_CURVE

    def test_parameter_rows_split_off(self, grouper, crif, config):
        frame = crif([
            ("RatesFX", "Risk_FX", "EUR", None, None, None, 1.0),
            (None, "Param_AddOnFixedAmount", None, None, None, None, 5.0),
        ])

        grouped = grouper.group(frame, config)

        assert len(grouped.sensitivities) == 1
        assert len(grouped.parameters) == 1
        assert grouped.parameters[0].risk_type == RiskType.ADDON_FIXED_AMOUNT
        assert grouped.parameters[0].product_class is None

    def test_lazy_frame_input(self, grouper, crif, config):
        frame = crif([("RatesFX", "Risk_FX", "EUR", None, None, None, 1.0)]).lazy()

        assert len(grouper.group(frame, config).sensitivities) == 1

    def test_optional_columns_may_be_absent(self, grouper, config):
        frame = pl.DataFrame({
            "product_class": ["RatesFX"],
            "risk_type": ["Risk_FX"],
            "qualifier": ["EUR"],
            "amount_usd": [1.0],
        })

        sensitivity = grouper.group(frame, config).sensitivities[0]

        assert sensitivity.bucket == ""
        assert sensitivity.label1 == ""

    def test_netting_is_permutation_invariant(self, grouper, crif, config):
        rows = [
            ("RatesFX", "Risk_FX", "EUR", None, None, None, 0.1),
            ("RatesFX", "Risk_FX", "EUR", None, None, None, 1e16),
            ("RatesFX", "Risk_FX", "EUR", None, None, None, -1e16),
            ("RatesFX", "Risk_FX", "EUR", None, None, None, 0.2),
        ]

        forward = grouper.group(crif(rows), config)
        backward = grouper.group(crif(list(reversed(rows))), config)

        assert forward == backward

    def test_empty_frame(self, grouper, crif, config):
        grouped = grouper.group(crif([]), config)

        assert grouped.sensitivities == ()
        assert grouped.parameters == ()
        assert grouped.product_classes == []


class TestFrameValidation:
    """Schema level errors raise before any record is read."""

    def test_missing_amount_column(self, grouper, config):
        frame = pl.DataFrame({"risk_type": ["Risk_FX"]})

        with pytest.raises(ValidationError) as exc_info:
            grouper.group(frame, config)

        assert exc_info.value.errors[0].code == ERROR_MISSING_FIELD

    def test_text_amount_column(self, grouper, config):
        frame = pl.DataFrame({"risk_type": ["Risk_FX"], "amount_usd": ["1.0"]})

        with pytest.raises(ValidationError) as exc_info:
            grouper.group(frame, config)

        assert exc_info.value.errors[0].code == ERROR_TYPE_MISMATCH


class TestRecordValidation:
    """Every invalid record is reported in one ValidationError."""

    def test_errors_collected_across_records(self, grouper, crif, config):
        frame = crif([
            ("RatesFX", "Risk_Unknown", "USD", "1", "5y", "", 1.0),
            ("Equity", "Risk_Equity", "ACME", "99", "", "", 1.0),
            ("RatesFX", "Risk_FX", "EUR", None, None, None, 1.0),
        ])

        with pytest.raises(ValidationError) as exc_info:
            grouper.group(frame, config)

        codes = [e.code for e in exc_info.value.errors]
        assert codes == [ERROR_UNKNOWN_RISK_TYPE, ERROR_INVALID_BUCKET]
        assert [e.row_index for e in exc_info.value.errors] == [0, 1]

    def test_valid_record(self):
        assert validate_record(record(), 0) == []

    def test_missing_risk_type(self):
        errors = validate_record(record(risk_type=""), 3)

        assert errors[0].code == ERROR_MISSING_FIELD
        assert errors[0].row_index == 3

    def test_missing_amount(self):
        errors = validate_record(record(amount_usd=None), 0)

        assert errors[0].field_name == "amount_usd"

    def test_non_finite_amount(self):
        errors = validate_record(record(amount_usd=float("inf")), 0)

        assert errors[0].field_name == "amount_usd"

    def test_invalid_product_class(self):
        errors = validate_record(record(product_class="Rates"), 0)

        assert errors[0].field_name == "product_class"

    def test_missing_qualifier(self):
        errors = validate_record(record(qualifier=""), 0)

        assert errors[0].field_name == "qualifier"

    def test_ir_curve_vol_group(self):
        assert validate_record(record(bucket=""), 0) == []
        assert validate_record(record(bucket="4"), 0)[0].code == ERROR_INVALID_BUCKET

    def test_ir_curve_tenor(self):
        errors = validate_record(record(label1="7y"), 0)

        assert errors[0].code == ERROR_INVALID_TENOR

    def test_credit_requires_bucket(self):
        errors = validate_record(
            record(product_class="Credit", risk_type="Risk_CreditQ", qualifier="ISSUER", bucket=""),
            0,
        )

        assert errors[0].code == ERROR_MISSING_BUCKET

    def test_credit_residual_bucket_allowed(self):
        row = record(
            product_class="Credit", risk_type="Risk_CreditQ", qualifier="ISSUER", bucket="Residual"
        )

        assert validate_record(row, 0) == []

    def test_commodity_residual_bucket_rejected(self):
        row = record(
            product_class="Commodity", risk_type="Risk_Commodity", qualifier="GOLD", bucket="Residual"
        )

        assert validate_record(row, 0)[0].code == ERROR_INVALID_BUCKET

    def test_vega_requires_tenor(self):
        row = record(
            product_class="Equity", risk_type="Risk_EquityVol", qualifier="ACME", bucket="1", label1=""
        )

        assert validate_record(row, 0)[0].code == ERROR_INVALID_TENOR

    def test_fx_vol_requires_currency_pair(self):
        row = record(risk_type="Risk_FXVol", qualifier="EUR", bucket="", label1="1y")

        assert validate_record(row, 0)[0].field_name == "qualifier"

    def test_parameter_rows_skip_sensitivity_checks(self):
        row = record(
            product_class="", risk_type="Param_AddOnFixedAmount", qualifier="", bucket="", label1=""
        )

        assert validate_record(row, 0) == []
