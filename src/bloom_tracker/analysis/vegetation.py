"""Single-season vegetation analysis report."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bloom_tracker.analysis.anomalies import detect_anomalies
from bloom_tracker.analysis.models import VegetationAnalysis, VegetationReport
from bloom_tracker.analysis.predictions import predict
from bloom_tracker.analysis.recommendations import generate_recommendations
from bloom_tracker.analysis.seasonality import analyze_seasonality
from bloom_tracker.analysis.trends import analyze_trend
from bloom_tracker.datasources.vegetation.models import IndexType, Location

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    from bloom_tracker.datasources.vegetation.client import SampleSource
    from bloom_tracker.datasources.vegetation.models import Sample


def compute_vegetation_analysis(
    series: Sequence[Sample], today: date | None = None
) -> VegetationAnalysis:
    """Run trend, anomaly, seasonality, prediction and advisory analysis.

    Args:
        series: Samples ordered by date.
        today: Anchor for prediction dates (defaults to ``date.today()``).
    """
    trend = analyze_trend(series)
    return VegetationAnalysis(
        trends=trend,
        anomalies=detect_anomalies(series),
        seasonality=analyze_seasonality(series),
        predictions=predict(series, today),
        recommendations=tuple(generate_recommendations(series, trend)),
    )


def analyze_location(
    lat: float,
    lon: float,
    start: date,
    end: date,
    source: SampleSource,
    index_type: IndexType = IndexType.NDVI,
    today: date | None = None,
    source_label: str | None = None,
) -> VegetationReport:
    """Fetch a series from ``source`` and wrap its analysis in a report.

    ``source_label`` names the source in the report (defaults to the
    callable's ``__name__``).
    """
    series = list(source(lat, lon, start, end, index_type))
    return VegetationReport(
        location=Location(lat=lat, lon=lon),
        start=start,
        end=end,
        index_type=index_type,
        analysis=compute_vegetation_analysis(series, today),
        sample_count=len(series),
        sources=(source_label or getattr(source, "__name__", type(source).__name__),),
    )
