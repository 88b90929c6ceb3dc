"""Sample source protocol and MODIS product constants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from bloom_tracker.datasources.vegetation.models import IndexType

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import date

    from bloom_tracker.datasources.vegetation.models import Sample

# ORNL DAAC MODIS/VIIRS land product subsets web service
MODIS_API = "https://modis.ornl.gov/rst/api/v1"

# The subset endpoint rejects requests spanning more than 10 composites
MODIS_MAX_DATES_PER_REQUEST = 10


class SampleSource(Protocol):
    """Anything that returns an ordered daily series for a location.

    Implementations must return samples in non-decreasing date order covering
    the requested range. The analysis layer makes no assumption about how the
    values were produced.
    """

    def __call__(
        self,
        lat: float,
        lon: float,
        start: date,
        end: date,
        index_type: IndexType,
    ) -> Sequence[Sample]: ...


@dataclass(frozen=True)
class ModisProduct:
    """Where an index lives in the MODIS catalogue and how to decode it."""

    product: str
    band: str
    scale: float
    valid_min: int
    valid_max: int


MODIS_PRODUCTS: dict[IndexType, ModisProduct] = {
    IndexType.NDVI: ModisProduct("MOD13Q1", "250m_16_days_NDVI", 0.0001, -2000, 10000),
    IndexType.EVI: ModisProduct("MOD13Q1", "250m_16_days_EVI", 0.0001, -2000, 10000),
    IndexType.LAI: ModisProduct("MCD15A2H", "Lai_500m", 0.1, 0, 100),
}
