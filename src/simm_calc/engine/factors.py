"""
Risk factor helpers shared by the margin calculators.

A RiskFactor is the unit an intra-bucket aggregation runs over: one or
more NetSensitivity records merged under a calculator specific key (for
example one IRCurve tenor of one sub-curve, or one equity issuer across
all its tenors).
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from simm_calc.contracts.bundles import NetSensitivity
from simm_calc.data.tables import RESIDUAL_BUCKET

# Bucket label used where a risk class has a single bucket (FX, BaseCorr)
SINGLE_BUCKET = "All"


@dataclass(frozen=True)
class RiskFactor:
    """
    Merged risk factor.

    Attributes:
        key: Merge key, unique within a bucket
        sensitivity: Representative record used for correlation lookups
        amount: Net amount in USD (concentration input)
        weighted: Risk weighted amount before concentration scaling
    """

    key: tuple
    sensitivity: NetSensitivity
    amount: float
    weighted: float


def merge_factors(
    items: Iterable[tuple[NetSensitivity, float]],
    key: Callable[[NetSensitivity], tuple],
) -> list[RiskFactor]:
    """
    Merge (sensitivity, weighted amount) pairs into risk factors.

    Amounts are summed in sorted order and factors returned in key order.
    """
    grouped: dict[tuple, list[tuple[NetSensitivity, float]]] = {}
    for sensitivity, weighted in items:
        grouped.setdefault(key(sensitivity), []).append((sensitivity, weighted))

    factors = []
    for factor_key in sorted(grouped):
        members = grouped[factor_key]
        factors.append(
            RiskFactor(
                key=factor_key,
                sensitivity=members[0][0],
                amount=math.fsum(sorted(s.amount_usd for s, _ in members)),
                weighted=math.fsum(sorted(w for _, w in members)),
            )
        )
    return factors


def bucket_sort_key(bucket: str) -> tuple:
    """Numeric buckets in numeric order, then other labels, Residual last."""
    if bucket.isdigit():
        return (0, int(bucket), "")
    if bucket == RESIDUAL_BUCKET:
        return (2, 0, bucket)
    return (1, 0, bucket)


def split_buckets(
    sensitivities: Iterable[NetSensitivity],
    bucket: Callable[[NetSensitivity], str] = lambda s: s.bucket,
) -> list[tuple[str, list[NetSensitivity]]]:
    """Group sensitivities by bucket, in deterministic bucket order."""
    grouped: dict[str, list[NetSensitivity]] = {}
    for s in sensitivities:
        grouped.setdefault(bucket(s), []).append(s)
    return [(b, grouped[b]) for b in sorted(grouped, key=bucket_sort_key)]


def fx_pair_key(pair: str) -> str:
    """Canonical currency pair so that USDKRW and KRWUSD share one factor."""
    first, second = pair[:3], pair[3:]
    return first + second if first <= second else second + first


def is_residual(bucket: str) -> bool:
    return bucket == RESIDUAL_BUCKET
