"""Rule-based advisories.

Each rule is a (predicate, message) pair evaluated in order against a
``RecommendationContext``; the fixed advisories are always appended last.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bloom_tracker.analysis.models import TrendDirection, TrendResult
from bloom_tracker.analysis.predictions import MIN_SAMPLES
from bloom_tracker.analysis.trends import analyze_trend

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from bloom_tracker.datasources.vegetation.models import Sample

LOW_VEGETATION_THRESHOLD = 0.3

LOW_VEGETATION = "Low vegetation detected - consider environmental factors"
DECLINING_TREND = "Declining trend observed - investigate causes"
LIMITED_DATA = "Limited data available - continue monitoring"
MONITOR_WEATHER = "Monitor weather conditions for correlation"
SEASONAL_VARIATION = "Consider seasonal variations in analysis"


@dataclass(frozen=True)
class RecommendationContext:
    """Inputs the rules look at."""

    current_value: float
    trend: TrendResult
    sample_count: int

    @classmethod
    def from_series(
        cls, series: Sequence[Sample], trend: TrendResult | None = None
    ) -> RecommendationContext:
        return cls(
            current_value=series[-1].value if series else 0.0,
            trend=trend or analyze_trend(series),
            sample_count=len(series),
        )


@dataclass(frozen=True)
class Rule:
    """Emit ``message`` when ``applies`` holds."""

    name: str
    applies: Callable[[RecommendationContext], bool]
    message: str


RULES: tuple[Rule, ...] = (
    Rule(
        "low-vegetation",
        lambda ctx: ctx.current_value < LOW_VEGETATION_THRESHOLD,
        LOW_VEGETATION,
    ),
    Rule(
        "declining-trend",
        lambda ctx: ctx.trend.direction is TrendDirection.DECREASING,
        DECLINING_TREND,
    ),
    Rule(
        "limited-data",
        lambda ctx: ctx.sample_count < MIN_SAMPLES,
        LIMITED_DATA,
    ),
)

ALWAYS: tuple[str, ...] = (MONITOR_WEATHER, SEASONAL_VARIATION)


def generate_recommendations(
    series: Sequence[Sample], trend: TrendResult | None = None
) -> list[str]:
    """Evaluate ``RULES`` in order and append the fixed advisories.

    Args:
        series: Observed samples; the last one is the current value.
        trend: Precomputed trend for the same series (computed if omitted).
    """
    ctx = RecommendationContext.from_series(series, trend)
    messages = [rule.message for rule in RULES if rule.applies(ctx)]
    messages.extend(ALWAYS)
    return messages
