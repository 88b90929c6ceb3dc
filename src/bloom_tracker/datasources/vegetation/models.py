"""Vegetation sample models and index types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date


class IndexType(StrEnum):
    """Vegetation indices a sample source can deliver."""

    NDVI = "NDVI"
    EVI = "EVI"
    LAI = "LAI"


@dataclass(frozen=True)
class Sample:
    """One vegetation-index observation for a calendar day."""

    date: date
    value: float
    confidence: float = 1.0


@dataclass(frozen=True)
class Location:
    """Point location a series was requested for."""

    lat: float
    lon: float
