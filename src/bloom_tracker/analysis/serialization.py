"""JSON serialization of analysis results.

Field names are the wire contract dashboards rely on: snake_case, ISO
dates, and ``None`` (JSON null) wherever a value was not found.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import date

    from bloom_tracker.analysis.models import (
        AnomalyReport,
        BloomEvent,
        PhenologySummary,
        PredictionSet,
        SeasonalityProfile,
        TrendResult,
        VegetationAnalysis,
        VegetationReport,
        YearlyRecord,
    )
    from bloom_tracker.datasources.vegetation.models import Location


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _location(location: Location) -> dict[str, float]:
    return {"lat": location.lat, "lon": location.lon}


def bloom_event_to_dict(event: BloomEvent) -> dict[str, Any]:
    """Serialize a single-season detection."""
    return {
        "onset_date": _iso(event.onset_date),
        "peak_date": _iso(event.peak_date),
        "end_date": _iso(event.end_date),
        "peak_value": event.peak_value,
        "duration_days": event.duration_days,
        "confidence": event.confidence,
        "stage": str(event.stage),
    }


def yearly_record_to_dict(record: YearlyRecord) -> dict[str, Any]:
    return {
        "year": record.year,
        "onset_date": _iso(record.onset_date),
        "peak_date": _iso(record.peak_date),
        "end_date": _iso(record.end_date),
        "peak_value": record.peak_value,
        "duration_days": record.duration_days,
        "confidence": record.confidence,
    }


def phenology_summary_to_dict(summary: PhenologySummary) -> dict[str, Any]:
    """Serialize a multi-year summary.

    Returns:
        Dict with location, index_type, years and a ``summary`` block.
    """
    return {
        "location": _location(summary.location),
        "index_type": str(summary.index_type),
        "years": [yearly_record_to_dict(r) for r in summary.years],
        "summary": {
            "num_years": summary.num_years,
            "years_with_bloom": summary.years_with_bloom,
            "median_peak_day_of_year": summary.median_peak_day_of_year,
        },
    }


def trend_to_dict(trend: TrendResult) -> dict[str, Any]:
    if not trend.has_data:
        return {"trend": str(trend.direction), "confidence": 0}
    return {
        "direction": str(trend.direction),
        "magnitude": f"{trend.magnitude:.4f}",
        "confidence": round(trend.confidence, 4),
        "significance": str(trend.significance),
    }


def anomalies_to_dict(report: AnomalyReport) -> dict[str, Any]:
    return {
        "count": report.count,
        "dates": [d.isoformat() for d in report.dates],
        "severity": str(report.severity),
        "potential_causes": list(report.potential_causes),
    }


def seasonality_to_dict(profile: SeasonalityProfile) -> dict[str, Any]:
    return {
        "peak_month": profile.peak_month,
        "trough_month": profile.trough_month,
        "seasonal_strength": profile.seasonal_strength,
        "pattern_type": profile.pattern_type,
        "amplitude": round(profile.amplitude, 4),
        "monthly_averages": list(profile.monthly_averages),
    }


def predictions_to_dict(prediction_set: PredictionSet) -> dict[str, Any]:
    data: dict[str, Any] = {
        "predictions": [
            {
                "date": p.date.isoformat(),
                "predicted_value": round(p.predicted_value, 3),
                "confidence": round(p.confidence, 2),
            }
            for p in prediction_set.predictions
        ],
        "confidence": str(prediction_set.confidence),
    }
    if prediction_set.methodology:
        data["methodology"] = prediction_set.methodology
        data["assumptions"] = list(prediction_set.assumptions)
    return data


def vegetation_analysis_to_dict(analysis: VegetationAnalysis) -> dict[str, Any]:
    """Serialize the five analysis sections."""
    return {
        "trends": trend_to_dict(analysis.trends),
        "anomalies": anomalies_to_dict(analysis.anomalies),
        "seasonality": seasonality_to_dict(analysis.seasonality),
        "predictions": predictions_to_dict(analysis.predictions),
        "recommendations": list(analysis.recommendations),
    }


def vegetation_report_to_dict(report: VegetationReport) -> dict[str, Any]:
    return {
        "location": _location(report.location),
        "period": {"start": report.start.isoformat(), "end": report.end.isoformat()},
        "index_type": str(report.index_type),
        "sample_count": report.sample_count,
        "analysis": vegetation_analysis_to_dict(report.analysis),
        "confidence": report.confidence,
        "methodology": report.methodology,
        "sources": list(report.sources),
    }
