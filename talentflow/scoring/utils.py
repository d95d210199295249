"""
Decimal Utilities
talentflow/scoring/utils.py

Provides precision-safe decimal math for scoring calculations.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional


def to_decimal(value: float, places: Optional[int] = None) -> Decimal:
    """Convert float to Decimal, optionally quantized to ``places``."""
    result = Decimal(str(value))
    if places is None:
        return result
    return result.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def weighted_mean(
    values: List[Decimal],
    weights: List[Decimal],
    places: Optional[int] = 4,
) -> Decimal:
    """
    Calculate weighted mean.

    Formula: Σ(value_i × weight_i) / Σ(weight_i)
    Returns Decimal("0") if the total weight is not positive.
    Pass ``places=None`` to skip quantization.

    NaN or infinite inputs are computed with float arithmetic, so they
    propagate as Decimal NaN/Infinity (never quantized) instead of raising.
    """
    if len(values) != len(weights):
        raise ValueError("values and weights must have same length")

    if not all(x.is_finite() for x in (*values, *weights)):
        return _float_weighted_mean(values, weights)

    total_weight = sum(weights, Decimal("0"))
    if total_weight <= 0:
        return Decimal("0")

    numerator = sum((v * w for v, w in zip(values, weights)), Decimal("0"))
    result = numerator / total_weight
    if places is None:
        return result
    return result.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def _float_weighted_mean(values: List[Decimal], weights: List[Decimal]) -> Decimal:
    total_weight = sum(float(w) for w in weights)
    # NaN compares false, so a NaN total weight also yields 0
    if not total_weight > 0:
        return Decimal("0")
    numerator = sum(float(v) * float(w) for v, w in zip(values, weights))
    return Decimal(numerator / total_weight)


def round_score(value: float, places: int = 2) -> float:
    """Round a score for display (half-up, like toFixed)."""
    return float(to_decimal(value, places))
