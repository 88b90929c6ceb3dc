"""Result types produced by the analysis layer.

All results are frozen dataclasses holding tuples, created fresh per call.
Enum values are the strings dashboards display.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

    from bloom_tracker.datasources.vegetation.models import IndexType, Location

# =============================================================================
# Bloom detection
# =============================================================================


class BloomStage(StrEnum):
    """Furthest point a threshold scan reached within one season."""

    BELOW_THRESHOLD = "Below threshold"
    ONSET_FOUND = "Onset found"
    PEAK = "Peak"
    END_FOUND = "End found"
    UNRESOLVED = "Unresolved"


@dataclass(frozen=True)
class BloomEvent:
    """Onset, peak and end of one bloom within a season.

    Indices point into the series the event was detected on and are None
    when the corresponding crossing was never found.
    """

    onset_date: date | None = None
    peak_date: date | None = None
    end_date: date | None = None
    peak_value: float | None = None
    duration_days: int | None = None
    confidence: float = 0.5
    onset_index: int | None = None
    peak_index: int | None = None
    end_index: int | None = None

    @property
    def is_complete(self) -> bool:
        """True when onset, peak and end were all found."""
        return None not in (self.onset_date, self.peak_date, self.end_date)

    @property
    def stage(self) -> BloomStage:
        """Terminal state of the onset -> peak -> end scan."""
        if self.peak_date is None:
            return BloomStage.UNRESOLVED
        if self.end_date is not None:
            return BloomStage.END_FOUND if self.onset_date is not None else BloomStage.PEAK
        if self.onset_date is not None:
            return BloomStage.ONSET_FOUND
        return BloomStage.BELOW_THRESHOLD


@dataclass(frozen=True)
class YearlyRecord:
    """Bloom event detected for one calendar year."""

    year: int
    onset_date: date | None
    peak_date: date | None
    end_date: date | None
    peak_value: float | None
    duration_days: int | None
    confidence: float

    @property
    def peak_day_of_year(self) -> int | None:
        """Day-of-year of the peak (Jan 1 = 1), or None without a peak."""
        return self.peak_date.timetuple().tm_yday if self.peak_date else None


@dataclass(frozen=True)
class PhenologySummary:
    """Bloom events across a range of years plus summary statistics."""

    location: Location
    index_type: IndexType
    years: tuple[YearlyRecord, ...] = ()
    num_years: int = 0
    years_with_bloom: int = 0
    median_peak_day_of_year: int | None = None


# =============================================================================
# Single-season analytics
# =============================================================================


class TrendDirection(StrEnum):
    """Sign of a fitted slope."""

    INCREASING = "Increasing"
    DECREASING = "Decreasing"
    INSUFFICIENT_DATA = "Insufficient data"


class Significance(StrEnum):
    """Whether a slope is large enough to matter."""

    SIGNIFICANT = "Significant"
    NOT_SIGNIFICANT = "Not significant"


@dataclass(frozen=True)
class TrendResult:
    """Linear trend over a series (indexed, not date-weighted)."""

    direction: TrendDirection
    magnitude: float | None = None
    confidence: float = 0.0
    significance: Significance | None = None
    slope: float | None = None

    @property
    def has_data(self) -> bool:
        return self.direction is not TrendDirection.INSUFFICIENT_DATA


class Severity(StrEnum):
    """Anomaly severity label."""

    MODERATE = "Moderate"
    NONE = "None"


POTENTIAL_ANOMALY_CAUSES = ("Weather events", "Human activity", "Natural disturbances")


@dataclass(frozen=True)
class AnomalyReport:
    """Samples more than two standard deviations from the mean."""

    count: int
    dates: tuple[date, ...]
    severity: Severity
    potential_causes: tuple[str, ...] = POTENTIAL_ANOMALY_CAUSES


@dataclass(frozen=True)
class SeasonalityProfile:
    """Monthly-average profile of a series, Jan..Dec."""

    peak_month: str
    trough_month: str
    monthly_averages: tuple[float, ...]
    amplitude: float
    seasonal_strength: str
    pattern_type: str = "Annual cycle"


class PredictionConfidence(StrEnum):
    """Overall confidence label of a prediction set."""

    LOW = "Low"
    MEDIUM = "Medium"


@dataclass(frozen=True)
class Prediction:
    """Forecast value for one future day."""

    date: date
    predicted_value: float
    confidence: float


@dataclass(frozen=True)
class PredictionSet:
    """Short-horizon forecast."""

    predictions: tuple[Prediction, ...]
    confidence: PredictionConfidence
    methodology: str | None = None
    assumptions: tuple[str, ...] = ()


@dataclass(frozen=True)
class VegetationAnalysis:
    """Trend, anomaly, seasonality, prediction and advisories for one series."""

    trends: TrendResult
    anomalies: AnomalyReport
    seasonality: SeasonalityProfile
    predictions: PredictionSet
    recommendations: tuple[str, ...]


@dataclass(frozen=True)
class VegetationReport:
    """A ``VegetationAnalysis`` with the request it answers."""

    location: Location
    start: date
    end: date
    index_type: IndexType
    analysis: VegetationAnalysis
    sample_count: int
    confidence: float = 0.89
    methodology: str = "Multi-temporal analysis of vegetation index series"
    sources: tuple[str, ...] = ()
