"""
Concentration risk factor.

CR = max(1, sqrt(G / T)) where G is the sum of absolute net sensitivities
of a concentration group and T the group's threshold. Below the threshold
the factor is exactly 1.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from simm_calc.contracts.errors import invalid_config_error


def concentration_input(amounts: Iterable[float]) -> float:
    """Sum of absolute amounts, summed in sorted order."""
    return math.fsum(sorted(abs(a) for a in amounts))


def concentration_factor(total_abs: float, threshold: float) -> float:
    """
    Concentration risk factor for a group.

    Args:
        total_abs: G, sum of absolute net sensitivities (>= 0)
        threshold: T in USD (> 0)

    Returns:
        CR >= 1
    """
    if threshold <= 0 or not math.isfinite(threshold):
        raise invalid_config_error("threshold", repr(threshold), "a finite number > 0")
    return max(1.0, math.sqrt(total_abs / threshold))


def concentration_ratio(cr_b: float, cr_c: float) -> float:
    """g_bc = min(CR_b, CR_c) / max(CR_b, CR_c), used by Rates."""
    return min(cr_b, cr_c) / max(cr_b, cr_c)
