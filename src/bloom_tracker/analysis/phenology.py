"""Multi-year bloom phenology.

Runs bloom detection once per calendar year and summarises where in the
year the peaks fall. The series for each year comes from an injected
``SampleSource``; this module performs no I/O of its own.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from bloom_tracker.analysis.bloom import detect_bloom
from bloom_tracker.analysis.models import BloomEvent, PhenologySummary, YearlyRecord
from bloom_tracker.analysis.smoothing import DEFAULT_WINDOW, moving_average
from bloom_tracker.datasources.vegetation.models import IndexType, Location
from bloom_tracker.datasources.vegetation.synthetic import synthetic_daily_series

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bloom_tracker.datasources.vegetation.client import SampleSource
    from bloom_tracker.datasources.vegetation.models import Sample


def detect_season(series: Sequence[Sample], window: int = DEFAULT_WINDOW) -> BloomEvent:
    """Smooth a season's values and detect its bloom."""
    smoothed = moving_average([s.value for s in series], window)
    return detect_bloom(series, smoothed)


def yearly_record(year: int, event: BloomEvent) -> YearlyRecord:
    """Attach a year to a detected event."""
    return YearlyRecord(
        year=year,
        onset_date=event.onset_date,
        peak_date=event.peak_date,
        end_date=event.end_date,
        peak_value=event.peak_value,
        duration_days=event.duration_days,
        confidence=event.confidence,
    )


def median_peak_day_of_year(records: Sequence[YearlyRecord]) -> int | None:
    """Middle peak day-of-year across records that have a peak.

    Takes the element at index ``count // 2`` of the sorted days; for an even
    count that is the upper of the two middle elements, not their average.
    """
    days = sorted(r.peak_day_of_year for r in records if r.peak_day_of_year is not None)
    if not days:
        return None
    return round(days[len(days) // 2])


def compute_phenology_summary(
    lat: float,
    lon: float,
    start_year: int,
    end_year: int,
    index_type: IndexType = IndexType.NDVI,
    *,
    source: SampleSource = synthetic_daily_series,
    window: int = DEFAULT_WINDOW,
) -> PhenologySummary:
    """Detect one bloom per calendar year and summarise the range.

    An inverted range (``end_year < start_year``) yields no years and null
    statistics rather than an error.

    Args:
        lat: Latitude of the location.
        lon: Longitude of the location.
        start_year: First calendar year (inclusive).
        end_year: Last calendar year (inclusive).
        index_type: Vegetation index to request from ``source``.
        source: Callable returning the daily series for one year.
        window: Moving-average window applied before detection.

    Returns:
        PhenologySummary with one YearlyRecord per year.
    """
    records: list[YearlyRecord] = []
    for year in range(start_year, end_year + 1):
        series = source(lat, lon, date(year, 1, 1), date(year, 12, 31), index_type)
        records.append(yearly_record(year, detect_season(series, window)))

    return PhenologySummary(
        location=Location(lat=lat, lon=lon),
        index_type=index_type,
        years=tuple(records),
        num_years=len(records),
        years_with_bloom=sum(1 for r in records if r.peak_date is not None),
        median_peak_day_of_year=median_peak_day_of_year(records),
    )
