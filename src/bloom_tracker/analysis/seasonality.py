"""Monthly-average seasonal profile."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bloom_tracker.analysis.models import SeasonalityProfile

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bloom_tracker.datasources.vegetation.models import Sample

# English names regardless of locale (calendar.month_name is locale-dependent)
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

STRONG_AMPLITUDE = 0.2
MODERATE_AMPLITUDE = 0.05


def monthly_averages(series: Sequence[Sample]) -> list[float]:
    """Average value per calendar month (Jan..Dec) across all years; 0 for empty months."""
    sums = [0.0] * 12
    counts = [0] * 12
    for s in series:
        sums[s.date.month - 1] += s.value
        counts[s.date.month - 1] += 1
    return [total / count if count else 0.0 for total, count in zip(sums, counts, strict=True)]


def seasonal_strength(amplitude: float) -> str:
    if amplitude >= STRONG_AMPLITUDE:
        return "Strong"
    if amplitude >= MODERATE_AMPLITUDE:
        return "Moderate"
    return "Weak"


def analyze_seasonality(series: Sequence[Sample]) -> SeasonalityProfile:
    """Bucket samples by calendar month and find the peak and trough months.

    Ties resolve to the earliest month. Months with no samples average 0 and
    take part in the peak/trough search.
    """
    averages = monthly_averages(series)
    peak = averages.index(max(averages))
    trough = averages.index(min(averages))
    amplitude = averages[peak] - averages[trough]
    return SeasonalityProfile(
        peak_month=MONTH_NAMES[peak],
        trough_month=MONTH_NAMES[trough],
        monthly_averages=tuple(averages),
        amplitude=amplitude,
        seasonal_strength=seasonal_strength(amplitude),
    )
