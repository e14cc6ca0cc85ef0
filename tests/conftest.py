"""
Shared fixtures for the SIMM calculator tests.

Provides CRIF frame builders, NetSensitivity builders and the versioned
weights and correlations providers.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import polars as pl
import pytest

from simm_calc.contracts.bundles import NetSensitivity
from simm_calc.contracts.config import CalculationConfig
from simm_calc.domain.enums import ProductClass, RiskType, SimmVersion
from simm_calc.engine.weights import WeightsAndCorrelations, get_weights_and_correlations

CRIF_COLUMNS = {
    "product_class": pl.String,
    "risk_type": pl.String,
    "qualifier": pl.String,
    "bucket": pl.String,
    "label1": pl.String,
    "label2": pl.String,
    "amount_usd": pl.Float64,
}


def build_crif(rows: list[tuple]) -> pl.DataFrame:
    """
    CRIF frame from (product_class, risk_type, qualifier, bucket, label1,
    label2, amount_usd) tuples. Text fields may be None.
    """
    return pl.DataFrame(rows, schema=CRIF_COLUMNS, orient="row")


# =============================================================================
# Builders
# =============================================================================


@pytest.fixture
def crif() -> Callable[[list[tuple]], pl.DataFrame]:
    """Builder for CRIF DataFrames."""
    return build_crif


@pytest.fixture
def net() -> Callable[..., NetSensitivity]:
    """Builder for NetSensitivity records."""

    def _net(
        risk_type: RiskType,
        qualifier: str,
        amount: float,
        bucket: str = "",
        label1: str = "",
        label2: str = "",
        product_class: ProductClass | None = ProductClass.RATES_FX,
    ) -> NetSensitivity:
        return NetSensitivity(
            product_class=product_class,
            risk_type=risk_type,
            qualifier=qualifier,
            bucket=bucket,
            label1=label1,
            label2=label2,
            amount_usd=float(amount),
        )

    return _net


# =============================================================================
# Providers and configuration
# =============================================================================


@pytest.fixture
def provider() -> WeightsAndCorrelations:
    """SIMM 2.5 provider with USD calculation currency."""
    return get_weights_and_correlations(SimmVersion.V2_5)


@pytest.fixture
def config() -> CalculationConfig:
    """SIMM 2.5 configuration in USD."""
    return CalculationConfig.v2_5()


# =============================================================================
# Files
# =============================================================================

CRIF_HEADER = "ProductClass,RiskType,Qualifier,Bucket,Label1,Label2,AmountUSD"


@pytest.fixture
def crif_file(tmp_path) -> Callable[..., Path]:
    """Writes CRIF rows to a CSV file with CRIF CamelCase headers."""

    def _write(rows: list[tuple], name: str = "crif.csv") -> Path:
        path = tmp_path / name
        lines = [CRIF_HEADER]
        lines.extend(",".join("" if v is None else str(v) for v in row) for row in rows)
        path.write_text("\n".join(lines) + "\n")
        return path

    return _write
