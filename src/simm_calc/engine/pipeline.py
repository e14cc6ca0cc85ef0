"""
Pipeline orchestrator for the SIMM calculator.

Orchestrates the complete SIMM calculation, wiring together:
    SensitivityGrouper -> Delta / Vega / Curvature / BaseCorr calculators
        -> RiskClassCombiner -> CrossClassAggregator -> AddOnCombiner
        -> FXConverter

Key responsibilities:
- Select the weights and correlations provider once per calculation
- Fan out the margin calculators per (product class, risk class), either
  sequentially or on a worker pool, and fan the results back in sorted
  order so both modes produce identical output
- Build the SimmResult and its breakdown

Errors are never swallowed: ValidationError and ConfigurationError
propagate to the caller unchanged.

Usage:
    from simm_calc.engine.pipeline import create_pipeline

    pipeline = create_pipeline()
    result = pipeline.run(crif, CalculationConfig.v2_6())
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from simm_calc.contracts.bundles import GroupedSensitivities, RiskClassMargin, SimmResult
from simm_calc.domain.enums import ProductClass, RiskClass
from simm_calc.engine.addons import AddOnCombiner
from simm_calc.engine.aggregator import CrossClassAggregator, RiskClassCombiner, build_breakdown
from simm_calc.engine.base_corr import BaseCorrMarginCalculator
from simm_calc.engine.curvature import CurvatureMarginCalculator
from simm_calc.engine.delta import DeltaMarginCalculator
from simm_calc.engine.fx_converter import FXConverter
from simm_calc.engine.grouper import SensitivityGrouper
from simm_calc.engine.vega import VegaMarginCalculator
from simm_calc.engine.weights import get_weights_and_correlations

if TYPE_CHECKING:
    import polars as pl

    from simm_calc.contracts.config import CalculationConfig
    from simm_calc.contracts.protocols import (
        SensitivityGrouperProtocol,
        WeightsAndCorrelationsProtocol,
    )

logger = logging.getLogger(__name__)


class SimmPipeline:
    """
    Orchestrate the complete SIMM calculation.

    Implements PipelineProtocol. Components can be injected for testing;
    defaults are created otherwise.

    Usage:
        pipeline = SimmPipeline()
        result = pipeline.run(crif, config)
    """

    def __init__(
        self,
        grouper: SensitivityGrouperProtocol | None = None,
        provider: WeightsAndCorrelationsProtocol | None = None,
        fx_converter: FXConverter | None = None,
    ) -> None:
        """
        Initialize pipeline with components.

        Args:
            grouper: Sensitivity grouper
            provider: Weights and correlations override. When None the
                provider is selected from config.simm_version per run.
            fx_converter: Result currency converter
        """
        self._grouper = grouper or SensitivityGrouper()
        self._provider = provider
        self._fx_converter = fx_converter or FXConverter()
        self._calculators = (
            DeltaMarginCalculator(),
            VegaMarginCalculator(),
            CurvatureMarginCalculator(),
            BaseCorrMarginCalculator(),
        )
        self._combiner = RiskClassCombiner()
        self._cross_class = CrossClassAggregator()
        self._add_on = AddOnCombiner()

    # =========================================================================
    # Public API
    # =========================================================================

    def run(
        self,
        crif: pl.LazyFrame | pl.DataFrame,
        config: CalculationConfig,
    ) -> SimmResult:
        """
        Compute SIMM for a CRIF portfolio.

        Args:
            crif: CRIF records (CRIF_SCHEMA column names)
            config: Calculation configuration

        Returns:
            SimmResult in config.calculation_currency

        Raises:
            ValidationError: Malformed CRIF input
            ConfigurationError: Unresolvable calibration lookup
        """
        grouped = self._grouper.group(crif, config)
        return self.run_grouped(grouped, config)

    def run_grouped(
        self,
        grouped: GroupedSensitivities,
        config: CalculationConfig,
    ) -> SimmResult:
        """
        Compute SIMM from already netted sensitivities.

        Bypasses the grouper, useful for testing.
        """
        provider = self._provider or get_weights_and_correlations(
            config.simm_version, config.calculation_currency
        )

        tasks = [
            (pc, rc, grouped.for_risk_class(pc, rc))
            for pc in grouped.product_classes
            for rc in grouped.risk_classes(pc)
        ]
        logger.debug(
            "SIMM %s: %d risk factors in %d risk classes",
            provider.version,
            len(grouped.sensitivities),
            len(tasks),
        )

        if config.max_workers and len(tasks) > 1:
            with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
                # map preserves task order
                margins = list(
                    pool.map(lambda task: self._risk_class_margin(*task, provider), tasks)
                )
        else:
            margins = [self._risk_class_margin(*task, provider) for task in tasks]

        product_margins = []
        for pc in grouped.product_classes:
            risk_classes = [m for m in margins if m is not None and m.product_class == pc]
            if risk_classes:
                product_margins.append(self._cross_class.aggregate(pc, risk_classes, provider))

        add_on, warnings = self._add_on.combine(grouped.parameters, product_margins)
        simm = math.fsum(pm.value for pm in product_margins) + add_on.total

        result = SimmResult(
            total=simm,
            add_on=add_on.total,
            breakdown=build_breakdown(simm, add_on, product_margins),
            margin_by_type=self._cross_class.margin_by_type(product_margins, provider),
            simm_version=provider.version,
            currency="USD",
            warnings=warnings,
        )
        logger.debug("SIMM total %.2f USD", simm)
        return self._fx_converter.convert_result(result, config)

    # =========================================================================
    # Internals
    # =========================================================================

    def _risk_class_margin(
        self,
        product_class: ProductClass,
        risk_class: RiskClass,
        sensitivities: tuple,
        provider: WeightsAndCorrelationsProtocol,
    ) -> RiskClassMargin | None:
        components = [
            calculator.calculate(risk_class, sensitivities, provider)
            for calculator in self._calculators
        ]
        return self._combiner.combine(product_class, risk_class, components)


def create_pipeline(
    provider: WeightsAndCorrelationsProtocol | None = None,
) -> SimmPipeline:
    """
    Create a pipeline with default components.

    Args:
        provider: Optional weights and correlations override

    Returns:
        SimmPipeline ready for use
    """
    return SimmPipeline(provider=provider)
