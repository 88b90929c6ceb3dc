"""Vegetation-index signal processing.

Pure functions over ordered ``Sample`` sequences. Every call builds fresh
result objects; nothing is cached or shared between calls.

Dependency rule: analysis/ imports datasource *models* only. The one entry
point that touches data, ``compute_phenology_summary``, receives its
``SampleSource`` as an argument.

Modules:
  - smoothing: centered moving average with truncated edges
  - bloom: adaptive-threshold onset/peak/end detection
  - phenology: per-year detection + multi-year summary
  - trends, anomalies, seasonality, predictions: single-season analytics
  - recommendations: ordered (predicate, message) advisory rules
  - vegetation: combined analysis report
  - serialization: wire-format dicts

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function taking
   ``Sequence[Sample]`` and returning a frozen dataclass from ``models``.
2. No I/O, no HTTP, no Prefect decorators.
3. Add a serializer in ``serialization.py``, re-export here and add tests
   in ``tests/test_{name}.py``.
"""

from bloom_tracker.analysis.anomalies import detect_anomalies
from bloom_tracker.analysis.bloom import detect_bloom, empty_detection
from bloom_tracker.analysis.models import (
    AnomalyReport,
    BloomEvent,
    BloomStage,
    PhenologySummary,
    Prediction,
    PredictionConfidence,
    PredictionSet,
    SeasonalityProfile,
    Severity,
    Significance,
    TrendDirection,
    TrendResult,
    VegetationAnalysis,
    VegetationReport,
    YearlyRecord,
)
from bloom_tracker.analysis.phenology import (
    compute_phenology_summary,
    detect_season,
    median_peak_day_of_year,
)
from bloom_tracker.analysis.predictions import predict
from bloom_tracker.analysis.recommendations import generate_recommendations
from bloom_tracker.analysis.seasonality import analyze_seasonality
from bloom_tracker.analysis.smoothing import moving_average
from bloom_tracker.analysis.trends import analyze_trend, linear_slope
from bloom_tracker.analysis.vegetation import analyze_location, compute_vegetation_analysis

__all__ = [
    "AnomalyReport",
    "BloomEvent",
    "BloomStage",
    "PhenologySummary",
    "Prediction",
    "PredictionConfidence",
    "PredictionSet",
    "SeasonalityProfile",
    "Severity",
    "Significance",
    "TrendDirection",
    "TrendResult",
    "VegetationAnalysis",
    "VegetationReport",
    "YearlyRecord",
    "analyze_location",
    "analyze_seasonality",
    "analyze_trend",
    "compute_phenology_summary",
    "compute_vegetation_analysis",
    "detect_anomalies",
    "detect_bloom",
    "detect_season",
    "empty_detection",
    "generate_recommendations",
    "linear_slope",
    "median_peak_day_of_year",
    "moving_average",
    "predict",
]
