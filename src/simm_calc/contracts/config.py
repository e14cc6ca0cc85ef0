"""
Configuration contracts for the SIMM calculator.

Provides the immutable CalculationConfig used by every pipeline stage:
- simm_version: Calibration whose weights and correlations are applied
- calculation_currency: Currency the margin is reported in
- exchange_rate: USD -> calculation currency rate for the final breakdown
- max_workers: Optional worker pool size for per risk class fan-out

Factory methods .v2_5(), .v2_6(), .v2_7() and .for_version() provide
self-documenting configuration for each calibration.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from simm_calc.contracts.errors import invalid_config_error, unsupported_version_error
from simm_calc.domain.enums import SimmVersion

_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


@dataclass(frozen=True)
class CalculationConfig:
    """
    Master configuration for SIMM calculations.

    Immutable configuration container validated on construction. Sensitivities
    are always aggregated in USD (concentration thresholds are USD amounts);
    exchange_rate converts the finished breakdown into calculation_currency.

    Attributes:
        simm_version: SIMM calibration (2.5, 2.6 or 2.7)
        calculation_currency: ISO currency code of the calculation (default USD).
            Also drives the FX delta risk weight and FX correlation regime.
        exchange_rate: Units of calculation_currency per USD (default 1.0)
        max_workers: Worker threads for per risk class fan-out. None runs
            sequentially.
    """

    simm_version: SimmVersion = SimmVersion.V2_5
    calculation_currency: str = "USD"
    exchange_rate: float = 1.0
    max_workers: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.simm_version, SimmVersion):
            raise invalid_config_error(
                "simm_version", repr(self.simm_version), "a SimmVersion member"
            )
        if not isinstance(self.calculation_currency, str) or not _CURRENCY_PATTERN.match(
            self.calculation_currency
        ):
            raise invalid_config_error(
                "calculation_currency",
                repr(self.calculation_currency),
                "three upper-case letters",
            )
        rate = self.exchange_rate
        if isinstance(rate, bool) or not isinstance(rate, (int, float)) or not math.isfinite(rate) or rate <= 0:
            raise invalid_config_error("exchange_rate", repr(rate), "a finite number > 0")
        if self.max_workers is not None and self.max_workers < 1:
            raise invalid_config_error("max_workers", repr(self.max_workers), "None or >= 1")

    @property
    def is_usd(self) -> bool:
        """Check if results stay in USD."""
        return self.calculation_currency == "USD" and self.exchange_rate == 1.0

    @property
    def version_label(self) -> str:
        """Version as printed in reports (e.g. "2.6")."""
        return self.simm_version.value

    @classmethod
    def for_version(
        cls,
        version: str | SimmVersion,
        calculation_currency: str = "USD",
        exchange_rate: float = 1.0,
        max_workers: int | None = None,
    ) -> CalculationConfig:
        """
        Create configuration from a version string.

        Accepts "2.5", "2_5" and "v2_5" spellings.

        Raises:
            ConfigurationError: If the version is not supported
        """
        try:
            parsed = SimmVersion.parse(version)
        except ValueError:
            raise unsupported_version_error(repr(version)) from None
        return cls(
            simm_version=parsed,
            calculation_currency=calculation_currency,
            exchange_rate=exchange_rate,
            max_workers=max_workers,
        )

    @classmethod
    def v2_5(cls, calculation_currency: str = "USD", exchange_rate: float = 1.0) -> CalculationConfig:
        """SIMM 2.5 configuration."""
        return cls(SimmVersion.V2_5, calculation_currency, exchange_rate)

    @classmethod
    def v2_6(cls, calculation_currency: str = "USD", exchange_rate: float = 1.0) -> CalculationConfig:
        """SIMM 2.6 configuration."""
        return cls(SimmVersion.V2_6, calculation_currency, exchange_rate)

    @classmethod
    def v2_7(cls, calculation_currency: str = "USD", exchange_rate: float = 1.0) -> CalculationConfig:
        """SIMM 2.7 configuration."""
        return cls(SimmVersion.V2_7, calculation_currency, exchange_rate)
