"""Bloom onset/peak/end detection with an adaptive threshold.

The threshold sits 40% of the way from the series' 10th to 90th percentile,
so it adapts to each season's own baseline and amplitude:

    threshold = p10 + 0.4 * (p90 - p10)

The scan then looks for, in order:

1. onset: first rising crossing (previous < threshold <= current)
2. peak: first occurrence of the maximum smoothed value
3. end: last sample after the peak that is still at/above the threshold
   immediately before the series drops below it

Any crossing that is never found leaves the corresponding date as None.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bloom_tracker.analysis.models import BloomEvent

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bloom_tracker.datasources.vegetation.models import Sample

THRESHOLD_FRACTION = 0.4
CONFIDENCE_FLOOR = 0.5
CONFIDENCE_CEILING = 0.95
SPREAD_WEIGHT = 0.8
PARTIAL_DETECTION_PENALTY = 0.6


def empty_detection() -> BloomEvent:
    """Neutral result for a season with no samples."""
    return BloomEvent(confidence=CONFIDENCE_FLOOR)


def floor_percentile(sorted_values: Sequence[float], fraction: float) -> float:
    """Inclusive percentile without interpolation: rank floor(fraction * (n - 1))."""
    return sorted_values[int(fraction * (len(sorted_values) - 1))]


def adaptive_threshold(smoothed: Sequence[float]) -> tuple[float, float, float]:
    """Return (threshold, p10, p90) for a non-empty smoothed series."""
    ordered = sorted(smoothed)
    p10 = floor_percentile(ordered, 0.10)
    p90 = floor_percentile(ordered, 0.90)
    return p10 + THRESHOLD_FRACTION * (p90 - p10), p10, p90


def find_onset(smoothed: Sequence[float], threshold: float) -> int:
    """Index of the first rising crossing, or -1."""
    for i in range(1, len(smoothed)):
        if smoothed[i - 1] < threshold <= smoothed[i]:
            return i
    return -1


def find_peak(smoothed: Sequence[float]) -> int:
    """Index of the first occurrence of the maximum."""
    best = 0
    for i, value in enumerate(smoothed):
        if value > smoothed[best]:
            best = i
    return best


def find_end(smoothed: Sequence[float], threshold: float, peak_index: int) -> int:
    """Latest index after the peak where the next sample falls below threshold, or -1."""
    for i in range(len(smoothed) - 2, peak_index, -1):
        if smoothed[i + 1] < threshold <= smoothed[i]:
            return i
    return -1


def detect_bloom(series: Sequence[Sample], smoothed: Sequence[float]) -> BloomEvent:
    """Detect one bloom event in a season.

    Never raises on empty input; returns ``empty_detection()`` instead.

    Args:
        series: Dated samples, ordered by date.
        smoothed: Smoothed values aligned with ``series``.

    Returns:
        BloomEvent with dates from ``series`` and values from ``smoothed``.
    """
    if not series or not smoothed:
        return empty_detection()

    threshold, p10, p90 = adaptive_threshold(smoothed)
    onset_index = find_onset(smoothed, threshold)
    peak_index = find_peak(smoothed)
    end_index = find_end(smoothed, threshold, peak_index)

    onset_date = series[onset_index].date if onset_index >= 0 else None
    peak_date = series[peak_index].date
    end_date = series[end_index].date if end_index >= 0 else None

    duration_days = None
    if onset_date is not None and end_date is not None:
        duration_days = max(0, (end_date - onset_date).days)

    spread = max(0.0, p90 - p10)
    completeness = (
        1.0 if onset_date is not None and end_date is not None else PARTIAL_DETECTION_PENALTY
    )
    confidence = (
        max(CONFIDENCE_FLOOR, min(CONFIDENCE_CEILING, CONFIDENCE_FLOOR + spread * SPREAD_WEIGHT))
        * completeness
    )

    return BloomEvent(
        onset_date=onset_date,
        peak_date=peak_date,
        end_date=end_date,
        peak_value=smoothed[peak_index],
        duration_days=duration_days,
        confidence=confidence,
        onset_index=onset_index if onset_index >= 0 else None,
        peak_index=peak_index,
        end_index=end_index if end_index >= 0 else None,
    )
