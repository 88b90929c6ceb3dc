"""Short-horizon linear extrapolation.

Fits a slope over the last ``RECENT_WINDOW`` values and projects it forward
``HORIZON_DAYS`` days from the last observed value. Prediction dates count
forward from the day the forecast is computed, not from the last sample.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING

from bloom_tracker.analysis.models import Prediction, PredictionConfidence, PredictionSet
from bloom_tracker.analysis.trends import linear_slope

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bloom_tracker.datasources.vegetation.models import Sample

MIN_SAMPLES = 30
RECENT_WINDOW = 10
HORIZON_DAYS = 30
METHODOLOGY = "Linear trend extrapolation"
ASSUMPTIONS = ("Current trends continue", "No major disturbances")


def prediction_confidence(days_ahead: int) -> float:
    """Confidence decays 0.01 per day from 0.9, floored at 0.5."""
    return max(0.5, 0.9 - 0.01 * days_ahead)


def predict(series: Sequence[Sample], today: date | None = None) -> PredictionSet:
    """Extrapolate the recent trend 30 days ahead.

    Args:
        series: Observed samples, ordered by date.
        today: Anchor for prediction dates (defaults to ``date.today()``).

    Returns:
        PredictionSet; empty with Low confidence for fewer than 30 samples.
    """
    if len(series) < MIN_SAMPLES:
        return PredictionSet(predictions=(), confidence=PredictionConfidence.LOW)

    anchor = today or date.today()
    recent = [s.value for s in series[-RECENT_WINDOW:]]
    slope = linear_slope(recent) or 0.0
    last_value = recent[-1]

    predictions = tuple(
        Prediction(
            date=anchor + timedelta(days=i),
            predicted_value=max(0.0, min(1.0, last_value + slope * i)),
            confidence=prediction_confidence(i),
        )
        for i in range(1, HORIZON_DAYS + 1)
    )
    return PredictionSet(
        predictions=predictions,
        confidence=PredictionConfidence.MEDIUM,
        methodology=METHODOLOGY,
        assumptions=ASSUMPTIONS,
    )
