"""
FX conversion module for the SIMM calculator.

SIMM is aggregated in USD because concentration thresholds are USD
amounts. The finished result is converted into the calculation currency
with the caller supplied exchange rate.

Classes:
    FXConverter: Converts a SimmResult from USD to the calculation currency

Usage:
    from simm_calc.engine.fx_converter import FXConverter

    converter = FXConverter()
    result = converter.convert_result(result, config)
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

import polars as pl

if TYPE_CHECKING:
    from simm_calc.contracts.bundles import SimmResult
    from simm_calc.contracts.config import CalculationConfig

logger = logging.getLogger(__name__)


class FXConverter:
    """
    Convert SIMM amounts from USD to the calculation currency.

    Every amount of the result is scaled by config.exchange_rate: the
    total, the add-on, the per margin type SIMM and each breakdown row.
    The engine aggregates in USD against USD concentration thresholds and
    only the finished result is converted, so this is not the same as
    aggregating sensitivities converted into the calculation currency.
    """

    def convert_result(self, result: SimmResult, config: CalculationConfig) -> SimmResult:
        """
        Convert a USD result into config.calculation_currency.

        Args:
            result: Result with amounts in USD
            config: Calculation configuration with currency and rate

        Returns:
            Result with amounts in the calculation currency (unchanged if
            the rate is 1 and the currency USD)
        """
        if config.is_usd:
            return result

        rate = config.exchange_rate
        logger.debug(
            "Converting SIMM result from USD to %s at rate %s",
            config.calculation_currency,
            rate,
        )

        return replace(
            result,
            total=result.total * rate,
            add_on=result.add_on * rate,
            breakdown=result.breakdown.with_columns((pl.col("value") * rate).alias("value")),
            margin_by_type={mt: value * rate for mt, value in result.margin_by_type.items()},
            currency=config.calculation_currency,
        )


def create_fx_converter() -> FXConverter:
    """
    Create an FX converter instance.

    Returns:
        FXConverter ready for use
    """
    return FXConverter()
