"""Contract tests for CRIF LazyFrame schema validation."""

from __future__ import annotations

import polars as pl

from simm_calc.contracts.errors import ERROR_MISSING_FIELD, ERROR_TYPE_MISMATCH
from simm_calc.contracts.validation import validate_crif_frame


class TestValidateCrifFrame:
    def test_minimal_frame_is_valid(self):
        lf = pl.LazyFrame({"risk_type": ["Risk_FX"], "amount_usd": [1.0]})

        assert validate_crif_frame(lf) == []

    def test_integer_amount_accepted(self):
        lf = pl.LazyFrame({"risk_type": ["Risk_FX"], "amount_usd": [1]})

        assert validate_crif_frame(lf) == []

    def test_null_column_accepted(self):
        lf = pl.LazyFrame({"risk_type": ["Risk_FX"], "amount_usd": [1.0], "bucket": [None]})

        assert validate_crif_frame(lf) == []

    def test_extra_columns_ignored(self):
        lf = pl.LazyFrame({"risk_type": ["Risk_FX"], "amount_usd": [1.0], "trade_id": [7]})

        assert validate_crif_frame(lf) == []

    def test_missing_required(self):
        errors = validate_crif_frame(pl.LazyFrame({"qualifier": ["EUR"]}))

        assert [e.code for e in errors] == [ERROR_MISSING_FIELD, ERROR_MISSING_FIELD]
        assert [e.field_name for e in errors] == ["risk_type", "amount_usd"]

    def test_type_mismatch(self):
        lf = pl.LazyFrame({"risk_type": ["Risk_FX"], "amount_usd": ["1.0"]})

        errors = validate_crif_frame(lf)

        assert errors[0].code == ERROR_TYPE_MISMATCH
        assert errors[0].actual_value == "String"
