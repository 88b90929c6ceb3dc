"""Vegetation-index sample sources.

Every source is a plain function with the ``SampleSource`` signature
``(lat, lon, start, end, index_type) -> list[Sample]``, so analysis code and
tests can swap a real retrieval for a deterministic generator.

Public API:
  - models: IndexType, Sample, Location
  - client: SampleSource, MODIS_API, MODIS_PRODUCTS
  - synthetic: synthetic_daily_series, realistic_composite_series
  - modis: fetch_modis_dates, fetch_modis_series
  - serialization: samples_to_dict, samples_from_dict
"""

from bloom_tracker.datasources.vegetation.client import (
    MODIS_API,
    MODIS_PRODUCTS,
    SampleSource,
)
from bloom_tracker.datasources.vegetation.modis import fetch_modis_dates, fetch_modis_series
from bloom_tracker.datasources.vegetation.models import IndexType, Location, Sample
from bloom_tracker.datasources.vegetation.serialization import (
    samples_from_dict,
    samples_to_dict,
)
from bloom_tracker.datasources.vegetation.synthetic import (
    realistic_composite_series,
    synthetic_daily_series,
)

#: Sources selectable by name from settings and the CLI.
SOURCES: dict[str, SampleSource] = {
    "synthetic": synthetic_daily_series,
    "composite": realistic_composite_series,
    "modis": fetch_modis_series,
}


def get_source(name: str) -> SampleSource:
    """Look up a registered sample source.

    Raises:
        ValueError: If no source is registered under ``name``.
    """
    try:
        return SOURCES[name]
    except KeyError:
        msg = f"Unknown sample source: {name!r} (choose from {', '.join(sorted(SOURCES))})"
        raise ValueError(msg) from None


__all__ = [
    "MODIS_API",
    "MODIS_PRODUCTS",
    "SOURCES",
    "IndexType",
    "Location",
    "Sample",
    "SampleSource",
    "fetch_modis_dates",
    "fetch_modis_series",
    "get_source",
    "realistic_composite_series",
    "samples_from_dict",
    "samples_to_dict",
    "synthetic_daily_series",
]
