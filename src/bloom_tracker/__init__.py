"""Bloom Tracker - vegetation-index time series and bloom phenology.

Architecture::

    datasources/   Sample sources (synthetic seasonal models, MODIS web service)
    analysis/      Pure signal processing (smoothing, bloom detection,
                   multi-year phenology, trend/anomaly/seasonality/prediction)
    store.py       Tiered cache with TTL for computed reports
    flows/         Prefect orchestration (source -> analysis -> store)
    services/      Shared utilities (HTTP client with retry)

Data flow: datasources -> analysis -> store (derived/) -> dashboards

Extension points:
  - New sample source:  datasources/vegetation/__init__.py
  - New analysis:       analysis/__init__.py
"""

__version__ = "0.1.0"

from bloom_tracker.config import Settings

__all__ = ["Settings", "__version__"]
