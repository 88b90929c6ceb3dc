"""Tests for rule-based advisories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bloom_tracker.analysis.models import TrendDirection, TrendResult
from bloom_tracker.analysis.recommendations import (
    ALWAYS,
    DECLINING_TREND,
    LIMITED_DATA,
    LOW_VEGETATION,
    MONITOR_WEATHER,
    RULES,
    SEASONAL_VARIATION,
    RecommendationContext,
    generate_recommendations,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from bloom_tracker.datasources.vegetation.models import Sample

    SeriesFactory = Callable[..., list[Sample]]


class TestRules:
    def test_rule_order(self) -> None:
        assert [r.name for r in RULES] == ["low-vegetation", "declining-trend", "limited-data"]

    def test_always_appended_last(self) -> None:
        assert ALWAYS == (MONITOR_WEATHER, SEASONAL_VARIATION)

    def test_each_rule_evaluated_independently(self) -> None:
        ctx = RecommendationContext(
            current_value=0.8,
            trend=TrendResult(direction=TrendDirection.DECREASING),
            sample_count=100,
        )
        fired = [r.name for r in RULES if r.applies(ctx)]
        assert fired == ["declining-trend"]


class TestGenerateRecommendations:
    def test_all_rules_fire_in_order(self, make_series: SeriesFactory) -> None:
        series = make_series([0.5, 0.4, 0.3, 0.2])
        assert generate_recommendations(series) == [
            LOW_VEGETATION,
            DECLINING_TREND,
            LIMITED_DATA,
            MONITOR_WEATHER,
            SEASONAL_VARIATION,
        ]

    def test_healthy_series_gets_fixed_advice_only(self, make_series: SeriesFactory) -> None:
        series = make_series([0.5 + 0.005 * i for i in range(40)])
        assert generate_recommendations(series) == [MONITOR_WEATHER, SEASONAL_VARIATION]

    def test_threshold_is_strict(self, make_series: SeriesFactory) -> None:
        """A current value of exactly 0.3 is not low."""
        series = make_series([0.25] * 40 + [0.3])
        assert LOW_VEGETATION not in generate_recommendations(series)

    def test_empty_series(self) -> None:
        """No samples: current value 0, no trend, limited data."""
        assert generate_recommendations([]) == [
            LOW_VEGETATION,
            LIMITED_DATA,
            MONITOR_WEATHER,
            SEASONAL_VARIATION,
        ]

    def test_uses_supplied_trend(self, make_series: SeriesFactory) -> None:
        series = make_series([0.5 + 0.01 * i for i in range(40)])
        trend = TrendResult(direction=TrendDirection.DECREASING)
        assert DECLINING_TREND in generate_recommendations(series, trend)
