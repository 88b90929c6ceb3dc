"""Deterministic synthetic vegetation series.

Two seasonal models stand in for satellite retrieval when no real data is
wanted (demos, dashboards under development, tests):

- ``synthetic_daily_series``: one sample per day from a sine-shaped annual
  cycle shifted by latitude, scaled per index type.
- ``realistic_composite_series``: one sample per 16-day MODIS composite with
  a spring green-up, summer plateau and autumn decline, mirrored for the
  southern hemisphere, plus occasional cloud contamination.

Both are seeded from a checksum of the request, so repeating a request
returns the identical series. Pass ``noise=0`` for noise-free curves.
"""

from __future__ import annotations

import math
import random
import zlib
from datetime import date, timedelta

from bloom_tracker.datasources.vegetation.models import IndexType, Sample

COMPOSITE_PERIOD_DAYS = 16
CLOUD_PROBABILITY = 0.15
CLOUD_DROP = 0.3

# (base, seasonal gain, latitude gain) per index
_INDEX_COEFFICIENTS: dict[str, tuple[float, float, float]] = {
    IndexType.NDVI: (0.3, 0.4, 1.0),
    IndexType.EVI: (0.2, 0.5, 1.0),
    IndexType.LAI: (1.0, 2.0, 0.5),
}
_DEFAULT_COEFFICIENTS = (0.5, 0.3, 1.0)


def request_seed(lat: float, lon: float, start: date, end: date, index_type: str) -> int:
    """Stable seed for a request (``hash()`` is salted per process)."""
    key = f"{lat:.4f}|{lon:.4f}|{start.isoformat()}|{end.isoformat()}|{index_type}"
    return zlib.crc32(key.encode())


def seasonal_factor(day_of_year: int) -> float:
    """Annual cycle in [0.4, 1.0]."""
    return math.sin((day_of_year / 365) * 2 * math.pi) * 0.3 + 0.7


def latitude_factor(lat: float) -> float:
    """Greener toward the equator."""
    return math.cos(math.radians(lat)) * 0.2


def synthetic_daily_series(
    lat: float,
    lon: float,
    start: date,
    end: date,
    index_type: IndexType = IndexType.NDVI,
    *,
    noise: float = 0.1,
    seed: int | None = None,
) -> list[Sample]:
    """Generate one sample per day from ``start`` through ``end`` inclusive.

    Args:
        lat: Latitude of the location.
        lon: Longitude of the location (only used for seeding).
        start: First day of the series.
        end: Last day of the series.
        index_type: Index to model; unknown values use a generic curve.
        noise: Peak-to-peak width of the uniform noise added to each value.
        seed: Random seed (defaults to a checksum of the request).

    Returns:
        Samples ordered by date, empty if ``end`` precedes ``start``.
    """
    if seed is None:
        seed = request_seed(lat, lon, start, end, index_type)
    rng = random.Random(seed)

    base, gain, lat_gain = _INDEX_COEFFICIENTS.get(index_type, _DEFAULT_COEFFICIENTS)
    lat_term = latitude_factor(lat) * lat_gain

    samples: list[Sample] = []
    day = start
    while day <= end:
        doy = day.timetuple().tm_yday
        value = base + seasonal_factor(doy) * gain + lat_term + (rng.random() - 0.5) * noise
        samples.append(
            Sample(date=day, value=round(value, 3), confidence=0.85 + rng.random() * 0.1)
        )
        day += timedelta(days=1)
    return samples


def _composite_baseline(day_of_year: int, southern: bool) -> float:
    """NDVI curve for a 16-day composite before noise and clouds."""
    if southern:
        day_of_year = (day_of_year + 183) % 365

    if 150 <= day_of_year <= 240:
        # Summer plateau
        return 0.7 + math.sin((day_of_year - 150) * math.pi / 90) * 0.2
    if 60 <= day_of_year < 150:
        # Spring green-up
        return 0.3 + (day_of_year - 60) * 0.4 / 90
    if 240 < day_of_year <= 330:
        # Autumn decline
        return 0.7 - (day_of_year - 240) * 0.4 / 90
    return 0.3


def realistic_composite_series(
    lat: float,
    lon: float,
    start: date,
    end: date,
    index_type: IndexType = IndexType.NDVI,
    *,
    noise: float = 0.1,
    cloud_probability: float = CLOUD_PROBABILITY,
    seed: int | None = None,
) -> list[Sample]:
    """Generate a MOD13Q1-like NDVI series, one sample every 16 days.

    Cloud-contaminated composites lose ``CLOUD_DROP`` and are reported with
    confidence 0.5. Values are clamped to [0, 1].
    """
    if seed is None:
        seed = request_seed(lat, lon, start, end, index_type)
    rng = random.Random(seed)
    southern = lat <= 0

    samples: list[Sample] = []
    day = start
    while day <= end:
        baseline = _composite_baseline(day.timetuple().tm_yday, southern)
        jitter = (rng.random() - 0.5) * noise
        cloudy = rng.random() < cloud_probability
        value = baseline + jitter - (CLOUD_DROP if cloudy else 0.0)
        samples.append(
            Sample(
                date=day,
                value=round(max(0.0, min(1.0, value)), 4),
                confidence=0.5 if cloudy else 1.0,
            )
        )
        day += timedelta(days=COMPOSITE_PERIOD_DAYS)
    return samples
