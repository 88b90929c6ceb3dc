"""
Prefect flow that builds phenology and vegetation-analysis reports.

Yearly series are cached in the store (historical/ for completed years,
live/ for the current year) and reports in derived/, all keyed by location,
year range and index type.

Run locally:
    python -m bloom_tracker.flows.phenology
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Any

from prefect import flow, task

from bloom_tracker.analysis import analyze_location, compute_phenology_summary
from bloom_tracker.analysis.serialization import (
    phenology_summary_to_dict,
    vegetation_report_to_dict,
)
from bloom_tracker.config import get_settings
from bloom_tracker.datasources.vegetation import (
    IndexType,
    get_source,
    samples_from_dict,
    samples_to_dict,
)
from bloom_tracker.store import DataStore, cache_key

if TYPE_CHECKING:
    from bloom_tracker.datasources.vegetation import Sample

# Data store with tiered directories
store = DataStore(get_settings().data_dir)

# Completed years never change upstream
HISTORICAL_TTL = timedelta(days=90)


def series_path(lat: float, lon: float, year: int, index_type: str) -> Path:
    """Store path for one year's series."""
    tier = "historical" if year < date.today().year else "live"
    return Path(tier) / "series" / f"{cache_key(lat, lon, year, year, index_type)}.json"


def report_path(
    kind: str, lat: float, lon: float, start: object, end: object, index_type: str
) -> Path:
    """Store path for a derived report."""
    return Path("derived") / kind / f"{cache_key(lat, lon, start, end, index_type)}.json"


@task(name="fetch-series", retries=2, retry_delay_seconds=5)
def fetch_series(
    lat: float, lon: float, year: int, index_type: str, source_name: str
) -> list[Sample]:
    """Fetch one calendar year of samples from the named source."""
    source = get_source(source_name)
    return list(source(lat, lon, date(year, 1, 1), date(year, 12, 31), IndexType(index_type)))


@task(name="save-series")
def save_series(
    lat: float,
    lon: float,
    year: int,
    index_type: str,
    samples: list[Sample],
    source_name: str,
) -> Path:
    """Save a year's series via store."""
    if year < date.today().year:
        ttl = HISTORICAL_TTL
    else:
        ttl = timedelta(hours=get_settings().cache_ttl_hours)
    return store.write(
        series_path(lat, lon, year, index_type),
        samples_to_dict(samples, index_type),
        source=source_name,
        valid_until=datetime.now(UTC) + ttl,
        location={"lat": lat, "lon": lon},
        year=year,
    )


def load_or_fetch_series(
    lat: float, lon: float, year: int, index_type: str, source_name: str
) -> list[Sample]:
    """Reuse a fresh cached series or fetch and cache a new one."""
    path = series_path(lat, lon, year, index_type)
    if store.is_fresh(path) and store.read_meta(path).get("source") == source_name:
        print(f"{year} {index_type} series is fresh, skipping fetch.")
        return samples_from_dict(store.read(path) or {})

    print(f"Fetching {year} {index_type} series from {source_name}...")
    samples = fetch_series(lat, lon, year, index_type, source_name)
    save_series(lat, lon, year, index_type, samples, source_name)
    return samples


@task(name="compute-phenology")
def compute_phenology(
    lat: float,
    lon: float,
    start_year: int,
    end_year: int,
    series_by_year: dict[int, list[Sample]],
    index_type: str,
    window: int,
) -> dict[str, Any]:
    """Run multi-year bloom detection over already-fetched series."""

    def cached_source(
        _lat: float, _lon: float, start: date, _end: date, _index: IndexType
    ) -> list[Sample]:
        return series_by_year.get(start.year, [])

    summary = compute_phenology_summary(
        lat,
        lon,
        start_year,
        end_year,
        IndexType(index_type),
        source=cached_source,
        window=window,
    )
    return phenology_summary_to_dict(summary)


@task(name="compute-analysis")
def compute_analysis(
    lat: float,
    lon: float,
    year: int,
    series: list[Sample],
    index_type: str,
    source_name: str,
) -> dict[str, Any]:
    """Analyse one season (trend, anomalies, seasonality, predictions)."""
    report = analyze_location(
        lat,
        lon,
        date(year, 1, 1),
        date(year, 12, 31),
        lambda *_args: series,
        IndexType(index_type),
        source_label=source_name,
    )
    return vegetation_report_to_dict(report)


def report_matches(path: Path, source_name: str, **expected: Any) -> bool:
    """True if a fresh report exists that was built from the same source and parameters."""
    if not store.is_fresh(path):
        return False
    meta = store.read_meta(path)
    if meta.get("source") != source_name:
        return False
    return all(meta.get(key) == value for key, value in expected.items())


@task(name="save-report")
def save_report(
    path: Path, report: dict[str, Any], source_name: str, params: dict[str, Any]
) -> Path:
    """Save a derived report via store."""
    return store.write(
        path,
        report,
        source=source_name,
        valid_until=datetime.now(UTC) + timedelta(hours=get_settings().cache_ttl_hours),
        **params,
    )


@flow(name="phenology-report", log_prints=True)
def build_report(
    lat: float | None = None,
    lon: float | None = None,
    start_year: int | None = None,
    end_year: int | None = None,
    index_type: str | None = None,
    source_name: str | None = None,
    window: int | None = None,
) -> dict[str, Any]:
    """
    Build the phenology summary and latest-season analysis for a location.

    Unset arguments fall back to settings; the year range defaults to the
    five calendar years before the current one. Cached reports are reused
    only when they were built from the same source and smoothing window.
    """
    settings = get_settings()
    lat = settings.lat if lat is None else lat
    lon = settings.lon if lon is None else lon
    index_type = str(index_type or settings.index_type)
    source_name = source_name or settings.data_source
    window = settings.smoothing_window if window is None else window
    if end_year is None:
        end_year = date.today().year - 1
    if start_year is None:
        start_year = end_year - 4

    results: dict[str, Any] = {}
    params = {
        "location": {"lat": lat, "lon": lon},
        "start_year": start_year,
        "end_year": end_year,
        "index_type": index_type,
        "smoothing_window": window,
    }

    # --- Phenology summary ---
    phenology_file = report_path("phenology", lat, lon, start_year, end_year, index_type)
    series_by_year: dict[int, list[Sample]] = {}
    if report_matches(phenology_file, source_name, smoothing_window=window):
        print("Phenology report is fresh, skipping computation.")
        phenology = store.read(phenology_file) or {}
    else:
        for year in range(start_year, end_year + 1):
            series_by_year[year] = load_or_fetch_series(lat, lon, year, index_type, source_name)
        phenology = compute_phenology(
            lat,
            lon,
            start_year,
            end_year,
            series_by_year,
            index_type,
            window,
        )
        save_report(phenology_file, phenology, source_name, params)
        print(f"Saved phenology for {start_year}-{end_year} to {phenology_file}")

    summary = phenology.get("summary", {})
    results["num_years"] = summary.get("num_years", 0)
    results["years_with_bloom"] = summary.get("years_with_bloom", 0)
    results["median_peak_day_of_year"] = summary.get("median_peak_day_of_year")

    # --- Latest season analysis ---
    analysis_file = report_path("analysis", lat, lon, end_year, end_year, index_type)
    if end_year < start_year:
        analysis: dict[str, Any] = {}
    elif report_matches(analysis_file, source_name):
        print("Vegetation analysis is fresh, skipping computation.")
        analysis = store.read(analysis_file) or {}
    else:
        series = series_by_year.get(end_year) or load_or_fetch_series(
            lat, lon, end_year, index_type, source_name
        )
        analysis = compute_analysis(lat, lon, end_year, series, index_type, source_name)
        save_report(analysis_file, analysis, source_name, params)
        print(f"Saved {end_year} vegetation analysis to {analysis_file}")

    results["anomalies"] = analysis.get("analysis", {}).get("anomalies", {}).get("count", 0)
    results["recommendations"] = analysis.get("analysis", {}).get("recommendations", [])
    return results


if __name__ == "__main__":
    result = build_report()
    print(f"Flow complete: {result}")
