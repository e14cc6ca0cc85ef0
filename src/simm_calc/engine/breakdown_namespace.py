"""
Polars namespaces for the SIMM breakdown.

Provides reporting helpers over BREAKDOWN_SCHEMA frames:
- `expr.simm.format_amount(decimals)` - Format a margin amount
- `df.simm.level(level)` - Rows of one hierarchy level
- `df.simm.risk_class_table()` - One row per (product class, risk class)
  with a column per margin type
- `df.simm.with_labels()` - Adds a readable path column

Usage:
    import polars as pl
    import simm_calc.engine.breakdown_namespace  # Register namespace

    table = result.breakdown.simm.risk_class_table()
"""

from __future__ import annotations

import polars as pl

from simm_calc.domain.enums import BreakdownLevel, MarginType


# =============================================================================
# EXPRESSION NAMESPACE
# =============================================================================


@pl.api.register_expr_namespace("simm")
class SimmExpr:
    """
    Formatting namespace for margin amount expressions.

    Example:
        df.with_columns(pl.col("value").simm.format_amount().alias("formatted"))
    """

    def __init__(self, expr: pl.Expr) -> None:
        self._expr = expr

    def format_amount(self, decimals: int = 2) -> pl.Expr:
        """
        Format an amount with a fixed number of decimals.

        Args:
            decimals: Number of decimal places

        Returns:
            Expression formatted as string
        """
        return self._expr.round(decimals).cast(pl.String)


# =============================================================================
# DATAFRAME NAMESPACE
# =============================================================================


@pl.api.register_dataframe_namespace("simm")
class BreakdownFrame:
    """
    Reporting namespace for SIMM breakdown DataFrames.

    Example:
        result.breakdown.simm.level(BreakdownLevel.PRODUCT_CLASS)
    """

    def __init__(self, df: pl.DataFrame) -> None:
        self._df = df

    def level(self, level: BreakdownLevel) -> pl.DataFrame:
        """Rows of a single hierarchy level, in breakdown order."""
        return self._df.filter(pl.col("level") == level.value)

    def risk_class_table(self) -> pl.DataFrame:
        """
        Risk class margins with one column per margin type.

        Returns:
            DataFrame with product_class, risk_class, Delta, Vega,
            Curvature, BaseCorr and total columns (0 where absent)
        """
        rows = self.level(BreakdownLevel.MARGIN_TYPE)
        totals = self.level(BreakdownLevel.RISK_CLASS).select(
            "product_class", "risk_class", pl.col("value").alias("total")
        )
        amounts = [
            pl.col("value")
            .filter(pl.col("margin_type") == mt.value)
            .sum()
            .alias(mt.value)
            for mt in MarginType
        ]
        by_type = rows.group_by(["product_class", "risk_class"], maintain_order=True).agg(amounts)
        return totals.join(
            by_type, on=["product_class", "risk_class"], how="left", maintain_order="left"
        ).with_columns(
            pl.col([mt.value for mt in MarginType]).fill_null(0.0)
        )

    def with_labels(self, separator: str = " / ") -> pl.DataFrame:
        """Add a "path" column such as "RatesFX / Rates / Delta / USD"."""
        path = pl.concat_str(
            [pl.col(c) for c in ("product_class", "risk_class", "margin_type", "bucket")],
            separator=separator,
            ignore_nulls=True,
        )
        return self._df.with_columns(
            pl.when(path.is_null() | (path == ""))
            .then(pl.col("level"))
            .otherwise(path)
            .alias("path")
        )
