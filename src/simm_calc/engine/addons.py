"""
Add-on combiner for the SIMM calculator.

Add-ons are summed linearly onto the product class margins:
- Param_AddOnFixedAmount:      amount
- Param_AddOnNotionalFactor:   factor / 100 x Notional of the same qualifier
- Param_ProductClassMultiplier: (m - 1) x ProductClassMargin, where m is the
  sum of multiplier rows whose qualifier names the product class
  (rows summing to 0 are ignored)

Amounts are not rounded.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from simm_calc.contracts.bundles import AddOnMargin, NetSensitivity, ProductClassMargin
from simm_calc.contracts.errors import ERROR_INVALID_VALUE, CalculationError
from simm_calc.domain.enums import ErrorCategory, ErrorSeverity, RiskType

logger = logging.getLogger(__name__)


class AddOnCombiner:
    """
    Compute add-on margin from CRIF parameter rows.

    Returns the add-on amounts together with warnings for parameter rows
    that contribute nothing (a notional factor without a notional).
    """

    def combine(
        self,
        parameters: Sequence[NetSensitivity],
        product_margins: Sequence[ProductClassMargin],
    ) -> tuple[AddOnMargin, list[CalculationError]]:
        """
        Compute the add-on margin.

        Args:
            parameters: Netted parameter rows from the grouper
            product_margins: Psi aggregated product class margins

        Returns:
            Tuple of (AddOnMargin, warnings)
        """
        warnings: list[CalculationError] = []

        fixed = math.fsum(
            sorted(p.amount_usd for p in parameters if p.risk_type == RiskType.ADDON_FIXED_AMOUNT)
        )

        factors: dict[str, list[float]] = {}
        notionals: dict[str, list[float]] = {}
        for p in parameters:
            if p.risk_type == RiskType.ADDON_NOTIONAL_FACTOR:
                factors.setdefault(p.qualifier, []).append(p.amount_usd)
            elif p.risk_type == RiskType.NOTIONAL:
                notionals.setdefault(p.qualifier, []).append(p.amount_usd)

        notional_terms = []
        for qualifier in sorted(factors):
            factor = math.fsum(sorted(factors[qualifier])) / 100.0
            notional = math.fsum(sorted(notionals.get(qualifier, [])))
            if notional == 0.0:
                logger.warning("Add-on notional factor for %s has no notional", qualifier)
                warnings.append(
                    CalculationError(
                        code=ERROR_INVALID_VALUE,
                        message=f"Notional factor for '{qualifier}' has zero notional",
                        severity=ErrorSeverity.WARNING,
                        category=ErrorCategory.DATA_QUALITY,
                        risk_type=RiskType.ADDON_NOTIONAL_FACTOR.value,
                        field_name="qualifier",
                        actual_value=qualifier,
                    )
                )
            notional_terms.append(factor * notional)

        multiplier_terms = []
        for pm in product_margins:
            m = math.fsum(
                sorted(
                    p.amount_usd
                    for p in parameters
                    if p.risk_type == RiskType.PRODUCT_CLASS_MULTIPLIER
                    and p.qualifier == pm.product_class.value
                )
            )
            if m != 0.0:
                multiplier_terms.append((m - 1.0) * pm.value)

        add_on = AddOnMargin(
            fixed=fixed,
            notional=math.fsum(notional_terms),
            multiplier=math.fsum(multiplier_terms),
        )
        logger.debug("Add-on margin %.2f", add_on.total)
        return add_on, warnings


def create_addon_combiner() -> AddOnCombiner:
    return AddOnCombiner()
