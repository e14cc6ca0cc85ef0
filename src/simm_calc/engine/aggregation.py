"""
Quadratic aggregation primitives shared by every margin type.

Intra-bucket:
    K_b = sqrt(max(sum_i WS_i^2 + sum_{i!=j} rho_ij WS_i WS_j, 0))
    S_b = clamp(sum_i WS_i, -K_b, K_b)

Inter-bucket:
    Margin = sqrt(max(sum_b K_b^2 + sum_{b!=c} gamma_bc S_b S_c, 0))
             + sum K_residual

Curvature floor:
    theta  = min(sum CVR, 0) / sum |CVR|
    lambda = (Phi^-1(0.995)^2 - 1)(1 + theta) - theta
    Margin = max(sum CVR + lambda x K, 0)

Quadratic forms are evaluated with numpy over the full correlation matrix
(diagonal 1), which covers both (i, j) and (j, i) terms even when a
published matrix is not exactly symmetric. Inputs are always supplied in
sorted factor order so results are reproducible.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import TypeVar

import numpy as np
from scipy.stats import norm

from simm_calc.contracts.bundles import BucketMargin

T = TypeVar("T")

# Phi^-1(0.995)^2 - 1
CURVATURE_QUANTILE_TERM = float(norm.ppf(0.995)) ** 2 - 1.0


# =============================================================================
# Correlation matrices
# =============================================================================


def correlation_matrix(
    factors: Sequence[T],
    rho: Callable[[T, T], float],
    squared: bool = False,
) -> np.ndarray:
    """
    Build the n x n correlation matrix of a list of factors.

    Args:
        factors: Risk factors in deterministic order
        rho: Pairwise correlation for distinct factors
        squared: Square the off-diagonal entries (curvature)

    Returns:
        Matrix with unit diagonal
    """
    n = len(factors)
    matrix = np.eye(n)
    for i in range(n):
        for j in range(n):
            if i != j:
                value = rho(factors[i], factors[j])
                matrix[i, j] = value * value if squared else value
    return matrix


def _quadratic_form(values: np.ndarray, matrix: np.ndarray) -> float:
    if values.size == 0:
        return 0.0
    return float(values @ matrix @ values)


# =============================================================================
# Intra-bucket aggregation
# =============================================================================


def aggregate_bucket(
    bucket: str,
    weighted: Sequence[float],
    correlations: np.ndarray,
    concentration: float = 1.0,
    is_residual: bool = False,
) -> BucketMargin:
    """
    Aggregate the weighted sensitivities of one bucket.

    Args:
        bucket: Bucket identifier
        weighted: WS_i (or CVR_i for curvature) in factor order
        correlations: Matrix from correlation_matrix() over the same factors
        concentration: CR recorded on the result
        is_residual: Whether the bucket is a Residual bucket

    Returns:
        BucketMargin with K_b >= 0 and |S_b| <= K_b
    """
    ws = np.asarray(weighted, dtype=float)
    k = math.sqrt(max(_quadratic_form(ws, correlations), 0.0))
    s = min(max(math.fsum(weighted), -k), k)
    return BucketMargin(
        bucket=bucket,
        k=k,
        s=s,
        concentration=concentration,
        is_residual=is_residual,
    )


# =============================================================================
# Inter-bucket aggregation
# =============================================================================


def inter_bucket_sum_of_squares(
    buckets: Sequence[BucketMargin],
    gamma: Callable[[BucketMargin, BucketMargin], float],
    squared: bool = False,
) -> float:
    """
    sum_b K_b^2 + sum_{b!=c} gamma_bc S_b S_c over non-residual buckets.

    May be negative; callers clamp before taking the root.
    """
    regular = [b for b in buckets if not b.is_residual]
    if not regular:
        return 0.0
    k = np.array([b.k for b in regular])
    s = np.array([b.s for b in regular])
    n = len(regular)
    gammas = np.zeros((n, n))
    for i in range(n):
        for j in range(n):
            if i != j:
                value = gamma(regular[i], regular[j])
                gammas[i, j] = value * value if squared else value
    return float(k @ k) + _quadratic_form(s, gammas)


def aggregate_buckets(
    buckets: Sequence[BucketMargin],
    gamma: Callable[[BucketMargin, BucketMargin], float],
) -> float:
    """
    Risk class margin of one margin type.

    Residual buckets never correlate with other buckets; their K is added
    outside the square root.
    """
    inner = inter_bucket_sum_of_squares(buckets, gamma)
    residual = math.fsum(b.k for b in buckets if b.is_residual)
    return math.sqrt(max(inner, 0.0)) + residual


# =============================================================================
# Curvature floor
# =============================================================================


def curvature_lambda(cvr: Sequence[float]) -> float:
    """lambda(theta) for a set of curvature risk values."""
    total_abs = math.fsum(abs(x) for x in cvr)
    theta = min(math.fsum(cvr), 0.0) / total_abs if total_abs != 0 else 0.0
    return CURVATURE_QUANTILE_TERM * (1.0 + theta) - theta


def curvature_floor(cvr: Sequence[float], k: float) -> float:
    """max(sum CVR + lambda x K, 0)."""
    return max(math.fsum(cvr) + curvature_lambda(cvr) * k, 0.0)


def aggregate_curvature(
    buckets: Sequence[BucketMargin],
    cvr_by_bucket: dict[str, Sequence[float]],
    gamma: Callable[[BucketMargin, BucketMargin], float],
) -> float:
    """
    Curvature margin of a risk class with squared correlations.

    Regular and Residual buckets are floored separately, each with its own
    theta and lambda, and the two results added.

    Args:
        buckets: Curvature bucket results (K_b from squared rho)
        cvr_by_bucket: CVR values per bucket identifier
        gamma: Inter-bucket correlation, squared here

    Returns:
        Curvature margin >= 0
    """
    regular_cvr = [
        x for b in buckets if not b.is_residual for x in cvr_by_bucket.get(b.bucket, ())
    ]
    residual_cvr = [
        x for b in buckets if b.is_residual for x in cvr_by_bucket.get(b.bucket, ())
    ]

    margin = 0.0
    if any(not b.is_residual for b in buckets):
        inner = inter_bucket_sum_of_squares(buckets, gamma, squared=True)
        margin += curvature_floor(regular_cvr, math.sqrt(max(inner, 0.0)))
    if any(b.is_residual for b in buckets):
        k_res = math.fsum(b.k for b in buckets if b.is_residual)
        margin += curvature_floor(residual_cvr, k_res)
    return margin
