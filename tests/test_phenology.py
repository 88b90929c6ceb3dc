"""Tests for multi-year phenology aggregation."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING
from unittest.mock import Mock

import pytest

from bloom_tracker.analysis.models import YearlyRecord
from bloom_tracker.analysis.phenology import (
    compute_phenology_summary,
    detect_season,
    median_peak_day_of_year,
)
from bloom_tracker.datasources.vegetation import IndexType, synthetic_daily_series

if TYPE_CHECKING:
    from collections.abc import Callable

    from bloom_tracker.datasources.vegetation.models import Sample

    SourceFactory = Callable[[dict[int, int]], Callable[..., list[Sample]]]


def _record(year: int, peak: date | None) -> YearlyRecord:
    return YearlyRecord(
        year=year,
        onset_date=None,
        peak_date=peak,
        end_date=None,
        peak_value=None,
        duration_days=None,
        confidence=0.5,
    )


class TestMedianPeakDayOfYear:
    """Middle-element statistic over peak days."""

    def test_no_peaks(self) -> None:
        assert median_peak_day_of_year([]) is None
        assert median_peak_day_of_year([_record(2020, None)]) is None

    def test_odd_count(self) -> None:
        records = [
            _record(2020, date(2020, 10, 26)),  # doy 300
            _record(2021, date(2021, 4, 10)),  # doy 100
            _record(2022, date(2022, 7, 19)),  # doy 200
        ]
        assert median_peak_day_of_year(records) == 200

    def test_even_count_takes_element_not_average(self) -> None:
        """Index count // 2 of the sorted days, never the mean of the middle two."""
        records = [
            _record(2021, date(2021, 4, 10)),  # 100
            _record(2022, date(2022, 7, 19)),  # 200
        ]
        assert median_peak_day_of_year(records) == 200

    def test_records_without_peak_are_skipped(self) -> None:
        records = [_record(2020, None), _record(2021, date(2021, 4, 10))]
        assert median_peak_day_of_year(records) == 100


class TestComputePhenologySummary:
    """Year-by-year detection driven through an injected source."""

    def test_three_years_median(self, hump_source: SourceFactory) -> None:
        source = hump_source({2020: 100, 2021: 200, 2022: 300})

        summary = compute_phenology_summary(45.0, -120.0, 2020, 2022, source=source)

        assert summary.num_years == 3
        assert summary.years_with_bloom == 3
        assert [r.year for r in summary.years] == [2020, 2021, 2022]
        assert [r.peak_day_of_year for r in summary.years] == [100, 200, 300]
        assert summary.median_peak_day_of_year == 200

    def test_even_number_of_years(self, hump_source: SourceFactory) -> None:
        source = hump_source({2019: 50, 2020: 100, 2021: 200, 2022: 300})
        summary = compute_phenology_summary(45.0, -120.0, 2019, 2022, source=source)
        assert summary.median_peak_day_of_year == 200

    def test_year_without_samples_has_no_bloom(self, hump_source: SourceFactory) -> None:
        source = hump_source({2020: 150})

        summary = compute_phenology_summary(45.0, -120.0, 2020, 2021, source=source)

        assert summary.num_years == 2
        assert summary.years_with_bloom == 1
        empty_year = summary.years[1]
        assert empty_year.peak_date is None
        assert empty_year.confidence == 0.5
        assert summary.median_peak_day_of_year == 150

    def test_inverted_range_is_empty(self) -> None:
        source = Mock(return_value=[])

        summary = compute_phenology_summary(45.0, -120.0, 2022, 2020, source=source)

        assert summary.years == ()
        assert summary.num_years == 0
        assert summary.years_with_bloom == 0
        assert summary.median_peak_day_of_year is None
        source.assert_not_called()

    def test_requests_full_calendar_years(self) -> None:
        source = Mock(return_value=[])

        compute_phenology_summary(10.0, 20.0, 2021, 2022, IndexType.EVI, source=source)

        assert source.call_count == 2
        source.assert_any_call(10.0, 20.0, date(2021, 1, 1), date(2021, 12, 31), IndexType.EVI)
        source.assert_any_call(10.0, 20.0, date(2022, 1, 1), date(2022, 12, 31), IndexType.EVI)

    def test_location_and_index_recorded(self, hump_source: SourceFactory) -> None:
        summary = compute_phenology_summary(
            -33.5, 151.2, 2020, 2020, IndexType.LAI, source=hump_source({2020: 10})
        )
        assert summary.location.lat == -33.5
        assert summary.location.lon == 151.2
        assert summary.index_type is IndexType.LAI

    def test_duration_matches_dates(self, hump_source: SourceFactory) -> None:
        summary = compute_phenology_summary(
            45.0, -120.0, 2021, 2021, source=hump_source({2021: 180})
        )
        record = summary.years[0]
        assert record.duration_days == (record.end_date - record.onset_date).days
        assert record.onset_date < record.peak_date < record.end_date

    def test_default_synthetic_source_is_reproducible(self) -> None:
        first = compute_phenology_summary(40.0, -105.0, 2020, 2021)
        second = compute_phenology_summary(40.0, -105.0, 2020, 2021)
        assert first == second
        assert first.years_with_bloom == 2


class TestDetectSeason:
    """Smoothing + detection for one season."""

    def test_empty(self) -> None:
        assert detect_season([]).peak_date is None

    def test_noise_free_synthetic_year(self) -> None:
        series = synthetic_daily_series(
            40.0, -105.0, date(2023, 1, 1), date(2023, 12, 31), noise=0.0
        )
        event = detect_season(series)
        # sin-shaped cycle peaks near day 91
        assert event.peak_date.timetuple().tm_yday == pytest.approx(91, abs=10)
        assert event.onset_date is not None
