"""Least-squares trend over an indexed series."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bloom_tracker.analysis.models import Significance, TrendDirection, TrendResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bloom_tracker.datasources.vegetation.models import Sample

SIGNIFICANT_SLOPE = 0.01
BASE_CONFIDENCE = 0.85
FIT_CONFIDENCE_GAIN = 0.1


def _moments(values: Sequence[float]) -> tuple[float, float, float]:
    """Return (Sxx, Sxy, Syy) about the means, with x = 0..n-1."""
    n = len(values)
    x_mean = (n - 1) / 2
    y_mean = sum(values) / n
    sxx = sxy = syy = 0.0
    for i, y in enumerate(values):
        dx = i - x_mean
        dy = y - y_mean
        sxx += dx * dx
        sxy += dx * dy
        syy += dy * dy
    return sxx, sxy, syy


def linear_slope(values: Sequence[float]) -> float | None:
    """OLS slope of ``values`` against their index, or None for fewer than 2 values."""
    if len(values) < 2:
        return None
    sxx, sxy, _ = _moments(values)
    return sxy / sxx


def r_squared(values: Sequence[float]) -> float:
    """Coefficient of determination of the linear fit (0 for flat or short series)."""
    if len(values) < 2:
        return 0.0
    sxx, sxy, syy = _moments(values)
    if syy == 0:
        return 0.0
    return (sxy * sxy) / (sxx * syy)


def analyze_trend(series: Sequence[Sample]) -> TrendResult:
    """Fit a straight line through the series values.

    Confidence grows with goodness of fit: 0.85 for no linear structure up to
    0.95 for a perfect line.
    """
    values = [s.value for s in series]
    slope = linear_slope(values)
    if slope is None:
        return TrendResult(direction=TrendDirection.INSUFFICIENT_DATA, confidence=0.0)

    return TrendResult(
        direction=TrendDirection.INCREASING if slope > 0 else TrendDirection.DECREASING,
        magnitude=round(abs(slope), 4),
        confidence=BASE_CONFIDENCE + FIT_CONFIDENCE_GAIN * r_squared(values),
        significance=(
            Significance.SIGNIFICANT
            if abs(slope) > SIGNIFICANT_SLOPE
            else Significance.NOT_SIGNIFICANT
        ),
        slope=slope,
    )
