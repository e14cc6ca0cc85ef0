"""
Sensitivity grouper for the SIMM calculator.

Pipeline position:
    Loader -> SensitivityGrouper -> margin calculators

Key responsibilities:
- Validate the CRIF frame schema and every record against the SIMM
  vocabulary (risk types, buckets, tenors)
- Normalise text fields (trimmed, missing as "", tenors lower case)
- Net records sharing (product_class, risk_type, qualifier, bucket,
  label1, label2) into one NetSensitivity
- Split add-on parameter rows off for the add-on combiner

Netting sorts the amounts of each group before summing and emits groups
in sorted key order, so the result does not depend on record order.

Usage:
    from simm_calc.engine.grouper import create_sensitivity_grouper

    grouped = create_sensitivity_grouper().group(crif, config)
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import polars as pl

from simm_calc.contracts.bundles import GroupedSensitivities, NetSensitivity
from simm_calc.contracts.errors import (
    ERROR_INVALID_BUCKET,
    ERROR_INVALID_TENOR,
    ERROR_MISSING_BUCKET,
    ERROR_UNKNOWN_RISK_TYPE,
    CalculationError,
    ErrorCollector,
    ValidationError,
    invalid_value_error,
    missing_field_error,
)
from simm_calc.contracts.validation import validate_crif_frame
from simm_calc.data.schemas import CRIF_SCHEMA
from simm_calc.data.tables import (
    COMMODITY_BUCKETS,
    CREDIT_NON_Q_BUCKETS,
    CREDIT_Q_BUCKETS,
    EQUITY_BUCKETS,
    RESIDUAL_BUCKET,
    SIMM_TENORS,
)
from simm_calc.domain.enums import ErrorCategory, ErrorSeverity, ProductClass, RiskClass, RiskType
from simm_calc.engine.weights import tenor_days

if TYPE_CHECKING:
    from simm_calc.contracts.config import CalculationConfig

logger = logging.getLogger(__name__)

GROUP_KEYS = ["product_class", "risk_type", "qualifier", "bucket", "label1", "label2"]

_TEXT_COLUMNS = GROUP_KEYS

_RISK_TYPES = {rt.value: rt for rt in RiskType}
_PRODUCT_CLASSES = {pc.value: pc for pc in ProductClass}
_PARAMETER_VALUES = [rt.value for rt in RiskType if rt.is_parameter]

# (number of buckets, Residual allowed) for risk types that require a bucket
_BUCKET_RANGES: dict[RiskClass, tuple[int, bool]] = {
    RiskClass.CREDIT_Q: (CREDIT_Q_BUCKETS, True),
    RiskClass.CREDIT_NON_Q: (CREDIT_NON_Q_BUCKETS, True),
    RiskClass.EQUITY: (EQUITY_BUCKETS, True),
    RiskClass.COMMODITY: (COMMODITY_BUCKETS, False),
}

_SIMM_TENOR_TYPES = frozenset({RiskType.IR_CURVE, RiskType.IR_VOL, RiskType.INFLATION_VOL})

_IR_VOL_GROUPS = frozenset({"1", "2", "3"})


class SensitivityGrouper:
    """
    Validate CRIF records and net them per risk factor.

    Implements SensitivityGrouperProtocol. Validation collects every
    problem in the input before raising a single ValidationError.
    """

    def group(
        self,
        crif: pl.LazyFrame | pl.DataFrame,
        config: CalculationConfig,
    ) -> GroupedSensitivities:
        """
        Validate and net CRIF records.

        Args:
            crif: CRIF records following CRIF_SCHEMA column names
            config: Calculation configuration

        Returns:
            GroupedSensitivities with sensitivities and parameter rows

        Raises:
            ValidationError: If the frame or any record is invalid
        """
        lf = crif.lazy() if isinstance(crif, pl.DataFrame) else crif

        schema_errors = validate_crif_frame(lf)
        if schema_errors:
            raise ValidationError("CRIF schema validation failed", schema_errors)

        records = _prepare_frame(lf).collect()

        collector = ErrorCollector()
        for index, row in enumerate(records.iter_rows(named=True)):
            for error in validate_record(row, index):
                collector.add_error(error)
        collector.raise_if_errors(f"CRIF validation failed for {records.height} records")

        is_parameter = pl.col("risk_type").is_in(_PARAMETER_VALUES)
        sensitivities = _net(records.filter(~is_parameter))
        parameters = _net(records.filter(is_parameter))

        logger.debug(
            "Grouped %d CRIF records into %d risk factors and %d parameter rows",
            records.height,
            len(sensitivities),
            len(parameters),
        )

        return GroupedSensitivities(
            sensitivities=sensitivities,
            parameters=parameters,
            record_count=records.height,
        )


# =============================================================================
# Frame preparation and netting
# =============================================================================


def _prepare_frame(lf: pl.LazyFrame) -> pl.LazyFrame:
    """Add absent optional columns and normalise text fields."""
    present = set(lf.collect_schema().names())
    missing = [
        pl.lit(None, dtype=CRIF_SCHEMA[name]).alias(name)
        for name in _TEXT_COLUMNS
        if name not in present
    ]
    if missing:
        lf = lf.with_columns(missing)

    text = [
        pl.col(name).cast(pl.String).str.strip_chars().fill_null("").alias(name)
        for name in _TEXT_COLUMNS
    ]
    return lf.select(text + [pl.col("amount_usd").cast(pl.Float64)]).with_columns(
        pl.col("label1").str.to_lowercase()
    )


def _net(records: pl.DataFrame) -> tuple[NetSensitivity, ...]:
    if records.height == 0:
        return ()
    netted = (
        records.group_by(GROUP_KEYS)
        .agg(pl.col("amount_usd").sort().sum())
        .sort(GROUP_KEYS)
    )
    return tuple(
        NetSensitivity(
            product_class=_PRODUCT_CLASSES.get(row["product_class"]),
            risk_type=_RISK_TYPES[row["risk_type"]],
            qualifier=row["qualifier"],
            bucket=row["bucket"],
            label1=row["label1"],
            label2=row["label2"],
            amount_usd=row["amount_usd"],
        )
        for row in netted.iter_rows(named=True)
    )


# =============================================================================
# Record validation
# =============================================================================


def validate_record(row: dict, row_index: int) -> list[CalculationError]:
    """
    Validate one normalised CRIF record.

    Args:
        row: Record with CRIF_SCHEMA column names (text fields as "")
        row_index: Zero-based position in the CRIF input

    Returns:
        Errors found in the record (empty if valid)
    """
    errors: list[CalculationError] = []
    raw_type = row["risk_type"]

    if not raw_type:
        return [missing_field_error("risk_type", row_index)]

    risk_type = _RISK_TYPES.get(raw_type)
    if risk_type is None:
        return [
            invalid_value_error(
                "risk_type",
                raw_type,
                "a SIMM sensitivity or add-on parameter type",
                row_index,
                raw_type,
                code=ERROR_UNKNOWN_RISK_TYPE,
            )
        ]

    amount = row["amount_usd"]
    if amount is None:
        errors.append(missing_field_error("amount_usd", row_index, raw_type))
    elif not math.isfinite(amount):
        errors.append(
            invalid_value_error("amount_usd", repr(amount), "a finite number", row_index, raw_type)
        )

    if risk_type.is_parameter:
        return errors

    product_class = row["product_class"]
    if not product_class:
        errors.append(missing_field_error("product_class", row_index, raw_type))
    elif product_class not in _PRODUCT_CLASSES:
        errors.append(
            invalid_value_error(
                "product_class",
                product_class,
                "one of " + ", ".join(_PRODUCT_CLASSES),
                row_index,
                raw_type,
            )
        )

    if not row["qualifier"]:
        errors.append(missing_field_error("qualifier", row_index, raw_type))

    errors.extend(_validate_bucket(risk_type, row["bucket"], row_index))
    errors.extend(_validate_labels(risk_type, row, row_index))
    return errors


def _validate_bucket(risk_type: RiskType, bucket: str, row_index: int) -> list[CalculationError]:
    if risk_type == RiskType.IR_CURVE:
        if bucket and bucket not in _IR_VOL_GROUPS:
            return [
                invalid_value_error(
                    "bucket", bucket, "1, 2 or 3", row_index, risk_type.value,
                    code=ERROR_INVALID_BUCKET,
                )
            ]
        return []

    if risk_type == RiskType.BASE_CORR:
        return []

    bucket_range = _BUCKET_RANGES.get(risk_type.risk_class)
    if bucket_range is None:
        return []

    count, residual = bucket_range
    if not bucket:
        return [
            CalculationError(
                code=ERROR_MISSING_BUCKET,
                message=f"Bucket is required for {risk_type.value}",
                severity=ErrorSeverity.ERROR,
                category=ErrorCategory.DATA_QUALITY,
                row_index=row_index,
                risk_type=risk_type.value,
                field_name="bucket",
            )
        ]

    valid = (residual and bucket == RESIDUAL_BUCKET) or (
        bucket.isdigit() and 1 <= int(bucket) <= count
    )
    if not valid:
        expected = f"1..{count}" + (f" or {RESIDUAL_BUCKET}" if residual else "")
        return [
            invalid_value_error(
                "bucket", bucket, expected, row_index, risk_type.value,
                code=ERROR_INVALID_BUCKET,
            )
        ]
    return []


def _validate_labels(risk_type: RiskType, row: dict, row_index: int) -> list[CalculationError]:
    errors: list[CalculationError] = []
    tenor = row["label1"]

    if risk_type in _SIMM_TENOR_TYPES:
        if tenor not in SIMM_TENORS:
            errors.append(
                invalid_value_error(
                    "label1", tenor or "<empty>", "one of " + " ".join(SIMM_TENORS),
                    row_index, risk_type.value, code=ERROR_INVALID_TENOR,
                )
            )
    elif risk_type.is_vega and tenor_days(tenor) is None:
        errors.append(
            invalid_value_error(
                "label1", tenor or "<empty>", "a tenor such as 2w, 6m or 10y",
                row_index, risk_type.value, code=ERROR_INVALID_TENOR,
            )
        )

    qualifier = row["qualifier"]
    if risk_type == RiskType.FX_VOL and qualifier and len(qualifier) != 6:
        errors.append(
            invalid_value_error(
                "qualifier", qualifier, "a six letter currency pair",
                row_index, risk_type.value,
            )
        )
    return errors


def create_sensitivity_grouper() -> SensitivityGrouper:
    """
    Create a sensitivity grouper instance.

    Returns:
        SensitivityGrouper ready for use
    """
    return SensitivityGrouper()
