"""MODIS vegetation series from the ORNL DAAC subsets web service.

The service serves 16-day (MOD13Q1) and 8-day (MCD15A2H) composites for a
single pixel. A request may span at most ``MODIS_MAX_DATES_PER_REQUEST``
composites, so the available composite dates are listed first and then
fetched in chunks.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from bloom_tracker.datasources.vegetation.client import (
    MODIS_API,
    MODIS_MAX_DATES_PER_REQUEST,
    MODIS_PRODUCTS,
    ModisProduct,
)
from bloom_tracker.datasources.vegetation.models import IndexType, Sample
from bloom_tracker.services.http import session

#: Subset requests return up to 10 composites and routinely take longer than
#: the session default.
SUBSET_TIMEOUT: tuple[float, float] = (10.0, 180.0)


def _product_for(index_type: IndexType | str) -> ModisProduct:
    try:
        return MODIS_PRODUCTS[IndexType(index_type)]
    except (KeyError, ValueError):
        msg = f"No MODIS product for index type: {index_type}"
        raise ValueError(msg) from None


def fetch_modis_dates(lat: float, lon: float, product: str) -> list[tuple[str, date]]:
    """List composite dates available for a pixel.

    Returns:
        List of (modis_date, calendar_date) tuples, e.g. ("A2024001", 2024-01-01).

    Raises:
        requests.HTTPError: If the API request fails.
    """
    resp = session.get(
        f"{MODIS_API}/{product}/dates",
        params={"latitude": lat, "longitude": lon},
    )
    resp.raise_for_status()
    return [
        (entry["modis_date"], date.fromisoformat(entry["calendar_date"]))
        for entry in resp.json().get("dates", [])
    ]


def _decode_rows(rows: list[dict[str, Any]], product: ModisProduct) -> list[Sample]:
    samples: list[Sample] = []
    for row in rows:
        if row.get("band") != product.band:
            continue
        pixels = row.get("data") or []
        if not pixels:
            continue
        raw = pixels[len(pixels) // 2]
        if raw is None or not product.valid_min <= raw <= product.valid_max:
            continue  # fill value or out of valid range
        samples.append(
            Sample(date=date.fromisoformat(row["calendar_date"]), value=raw * product.scale)
        )
    return samples


def fetch_modis_series(
    lat: float,
    lon: float,
    start: date,
    end: date,
    index_type: IndexType = IndexType.NDVI,
) -> list[Sample]:
    """Fetch a vegetation-index series for one pixel.

    Args:
        lat: Latitude of the pixel.
        lon: Longitude of the pixel.
        start: First calendar date (inclusive).
        end: Last calendar date (inclusive).
        index_type: NDVI, EVI or LAI.

    Returns:
        Scaled samples ordered by date, one per valid composite.

    Raises:
        ValueError: If the index type has no MODIS product.
        requests.HTTPError: If an API request fails.
    """
    modis = _product_for(index_type)
    available = [
        modis_date
        for modis_date, calendar_date in fetch_modis_dates(lat, lon, modis.product)
        if start <= calendar_date <= end
    ]

    by_date: dict[date, Sample] = {}
    for i in range(0, len(available), MODIS_MAX_DATES_PER_REQUEST):
        chunk = available[i : i + MODIS_MAX_DATES_PER_REQUEST]
        resp = session.get(
            f"{MODIS_API}/{modis.product}/subset",
            params={
                "latitude": lat,
                "longitude": lon,
                "band": modis.band,
                "startDate": chunk[0],
                "endDate": chunk[-1],
                "kmAboveBelow": 0,
                "kmLeftRight": 0,
            },
            timeout=SUBSET_TIMEOUT,
        )
        resp.raise_for_status()
        for sample in _decode_rows(resp.json().get("subset", []), modis):
            by_date[sample.date] = sample

    return [by_date[d] for d in sorted(by_date)]
