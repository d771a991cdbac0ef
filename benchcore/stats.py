"""Summary statistics over repeated benchmark measurements."""

from __future__ import annotations

import math
from collections.abc import Sequence


def _sum(values: Sequence[float]) -> float:
    return sum(values, 0.0)


def _sum_squares(values: Sequence[float]) -> float:
    return sum((v * v for v in values), 0.0)


def _safe_sqrt(value: float) -> float:
    # Imprecision can push a true zero slightly negative; avoid NaN.
    if value < 0.0:
        return 0.0
    return math.sqrt(value)


def statistics_mean(values: Sequence[float]) -> float:
    """Return the arithmetic mean of *values*, or 0.0 when there are none."""
    if not values:
        return 0.0
    return _sum(values) * (1.0 / len(values))


def statistics_median(values: Sequence[float]) -> float:
    """Return the median; fewer than three samples fall back to the mean."""
    count = len(values)
    if count < 3:
        return statistics_mean(values)
    ordered = sorted(values)
    center = count // 2
    if count % 2 == 1:
        return float(ordered[center])
    return (ordered[center] + ordered[center - 1]) / 2.0


def statistics_stddev(values: Sequence[float]) -> float:
    """Return the sample standard deviation; 0.0 for zero or one sample."""
    mean = statistics_mean(values)
    if not values:
        return mean
    count = len(values)
    if count == 1:
        return 0.0
    avg_squares = _sum_squares(values) * (1.0 / count)
    return _safe_sqrt(count / (count - 1.0) * (avg_squares - mean * mean))