"""
SIMM calculation engine components.

This package contains the production implementations of the calculator
pipeline stages:

    Loader -> SensitivityGrouper -> Delta/Vega/Curvature/BaseCorr calculators
        -> RiskClassCombiner -> CrossClassAggregator -> AddOnCombiner
        -> FXConverter

Each stage implements a protocol from simm_calc.contracts.protocols or is
a plain stateless class parametrised by the weights and correlations
provider.

Modules:
    loader: CRIF loading from CSV, JSON and Parquet
    grouper: Record validation and netting
    weights: Versioned weights, correlations and thresholds
    concentration: Concentration risk factor
    aggregation: Intra-bucket, inter-bucket and curvature aggregation
    delta, vega, curvature, base_corr: Margin type calculators
    aggregator: Risk class and cross class aggregation, breakdown
    addons: Add-on margin
    fx_converter: USD to calculation currency conversion
    pipeline: Pipeline orchestration

Polars Namespaces:
    Registered when this package is imported.
    - df.simm: Breakdown reporting
    - expr.simm: Amount formatting
"""

# Import namespace module to register namespaces on module load
import simm_calc.engine.breakdown_namespace  # noqa: F401

from .addons import AddOnCombiner, create_addon_combiner
from .aggregator import (
    CrossClassAggregator,
    RiskClassCombiner,
    create_cross_class_aggregator,
    create_risk_class_combiner,
)
from .base_corr import BaseCorrMarginCalculator
from .breakdown_namespace import BreakdownFrame, SimmExpr
from .curvature import CurvatureMarginCalculator
from .delta import DeltaMarginCalculator
from .fx_converter import FXConverter, create_fx_converter
from .grouper import SensitivityGrouper, create_sensitivity_grouper
from .loader import CSVLoader, DataLoadError, JSONLoader, ParquetLoader, create_loader
from .pipeline import SimmPipeline, create_pipeline
from .vega import VegaMarginCalculator
from .weights import WeightsAndCorrelations, get_weights_and_correlations

__all__ = [
    # Loaders
    "CSVLoader",
    "JSONLoader",
    "ParquetLoader",
    "DataLoadError",
    "create_loader",
    # Grouping and parameters
    "SensitivityGrouper",
    "create_sensitivity_grouper",
    "WeightsAndCorrelations",
    "get_weights_and_correlations",
    # Margin calculators
    "DeltaMarginCalculator",
    "VegaMarginCalculator",
    "CurvatureMarginCalculator",
    "BaseCorrMarginCalculator",
    # Aggregation
    "RiskClassCombiner",
    "create_risk_class_combiner",
    "CrossClassAggregator",
    "create_cross_class_aggregator",
    "AddOnCombiner",
    "create_addon_combiner",
    "FXConverter",
    "create_fx_converter",
    # Pipeline
    "SimmPipeline",
    "create_pipeline",
    # Namespace classes
    "BreakdownFrame",
    "SimmExpr",
]
