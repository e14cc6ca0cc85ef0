"""
Protocol definitions for SIMM calculator components.

Defines interfaces using Python's Protocol (PEP 544) for structural
typing. Components implementing these protocols can be:
- Easily mocked for unit testing
- Swapped for different implementations (e.g. a new SIMM calibration)

Pipeline stages:
    LoaderProtocol -> SensitivityGrouperProtocol -> margin calculators
        -> PipelineProtocol

Every margin calculator queries a WeightsAndCorrelationsProtocol selected
once per calculation from the SIMM version.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from simm_calc.domain.enums import MarginType

if TYPE_CHECKING:
    import polars as pl

    from simm_calc.contracts.bundles import (
        GroupedSensitivities,
        NetSensitivity,
        SimmResult,
    )
    from simm_calc.contracts.config import CalculationConfig
    from simm_calc.domain.enums import ProductClass, RiskClass, RiskType


@runtime_checkable
class LoaderProtocol(Protocol):
    """
    Protocol for CRIF loading components.

    Implementations read CRIF records from files (CSV, JSON) and return
    them as a LazyFrame following CRIF_SCHEMA.
    """

    def load(self) -> pl.LazyFrame:
        """
        Load CRIF records.

        Raises:
            DataLoadError: If the source cannot be read
        """
        ...


@runtime_checkable
class SensitivityGrouperProtocol(Protocol):
    """
    Protocol for the sensitivity grouper.

    Validates CRIF records and nets them per risk factor. The netting
    must be permutation invariant.
    """

    def group(
        self,
        crif: pl.LazyFrame | pl.DataFrame,
        config: CalculationConfig,
    ) -> GroupedSensitivities:
        """
        Validate and net CRIF records.

        Raises:
            ValidationError: If any record cannot be mapped onto SIMM
        """
        ...


@runtime_checkable
class WeightsAndCorrelationsProtocol(Protocol):
    """
    Versioned risk weight, correlation and threshold lookups.

    Read-only for the duration of a calculation and safe to share across
    worker threads. Every lookup is total over valid input; an unmapped
    combination raises ConfigurationError instead of returning a default.
    """

    @property
    def version(self) -> str:
        """SIMM version label ("2.5", "2.6", "2.7")."""
        ...

    @property
    def calculation_currency(self) -> str:
        """Calculation currency driving the FX weights and correlations."""
        ...

    def weight(self, risk_type: RiskType, bucket: str, tenor: str = "") -> float:
        """Delta risk weight. For Rates bucket is the volatility group, for FX the currency."""
        ...

    def vega_weight(self, risk_type: RiskType, bucket: str = "") -> float:
        """Vega risk weight."""
        ...

    def historical_volatility_ratio(self, risk_class: RiskClass) -> float:
        """Historical volatility ratio (HVR)."""
        ...

    def volatility(self, risk_type: RiskType, bucket: str) -> float:
        """Volatility sigma used to convert vega into vega risk and curvature risk."""
        ...

    def threshold(
        self,
        risk_class: RiskClass,
        bucket: str,
        margin_type: MarginType = MarginType.DELTA,
    ) -> float:
        """Concentration threshold in USD. For Rates bucket is the currency."""
        ...

    def intra_bucket_correlation(
        self,
        risk_class: RiskClass,
        bucket: str,
        factor_i: NetSensitivity,
        factor_j: NetSensitivity,
        margin_type: MarginType = MarginType.DELTA,
    ) -> float:
        """Correlation rho between two distinct risk factors of one bucket."""
        ...

    def inter_bucket_correlation(self, risk_class: RiskClass, bucket_b: str, bucket_c: str) -> float:
        """Correlation gamma between two non-residual buckets."""
        ...

    def cross_class_correlation(
        self,
        product_class: ProductClass,
        risk_class_a: RiskClass,
        risk_class_b: RiskClass,
    ) -> float:
        """Correlation psi between two risk classes of a product class."""
        ...

    def curvature_scaling(self, tenor: str) -> float:
        """Curvature scaling function SF(tenor)."""
        ...

    def base_corr_weight(self) -> float:
        """Risk weight of Risk_BaseCorr sensitivities."""
        ...


@runtime_checkable
class PipelineProtocol(Protocol):
    """Protocol for the end-to-end SIMM orchestrator."""

    def run(
        self,
        crif: pl.LazyFrame | pl.DataFrame,
        config: CalculationConfig,
    ) -> SimmResult:
        """
        Compute SIMM for a CRIF portfolio.

        Raises:
            ValidationError: Malformed CRIF input
            ConfigurationError: Unresolvable calibration lookup
        """
        ...
