"""Shared fixtures: deterministic series builders."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from datetime import date, timedelta

import pytest

from bloom_tracker.datasources.vegetation.models import Sample

SeriesFactory = Callable[..., list[Sample]]


def _series(values: Sequence[float], start: date = date(2023, 1, 1)) -> list[Sample]:
    return [Sample(date=start + timedelta(days=i), value=v) for i, v in enumerate(values)]


def _hump(
    n: int = 365,
    peak_index: int = 199,
    width: float = 20.0,
    baseline: float = 0.1,
    amplitude: float = 0.8,
) -> list[float]:
    return [baseline + amplitude * math.exp(-(((i - peak_index) / width) ** 2)) for i in range(n)]


@pytest.fixture
def make_series() -> SeriesFactory:
    """Build a daily series from raw values, one sample per day."""
    return _series


@pytest.fixture
def hump_values() -> Callable[..., list[float]]:
    """Single Gaussian bump on a flat baseline."""
    return _hump


@pytest.fixture
def hump_source() -> Callable[[dict[int, int]], Callable[..., list[Sample]]]:
    """Build a SampleSource whose yearly series peaks on a given day-of-year."""

    def build(peaks_by_year: dict[int, int]) -> Callable[..., list[Sample]]:
        def source(
            lat: float, lon: float, start: date, end: date, index_type: str
        ) -> list[Sample]:
            peak_doy = peaks_by_year.get(start.year)
            if peak_doy is None:
                return []
            n = (end - start).days + 1
            return _series(_hump(n=n, peak_index=peak_doy - 1), start)

        return source

    return build
