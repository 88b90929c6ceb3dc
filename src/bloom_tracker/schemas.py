"""
Request models validated by callers before invoking the analysis layer.

The analysis functions accept any input and return neutral results for
empty or inverted ranges; rejecting bad requests is the caller's job.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, model_validator

from bloom_tracker.datasources.vegetation.models import IndexType


class LocationQuery(BaseModel):
    """Geographic point for a query."""

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class PhenologyQuery(LocationQuery):
    """Multi-year bloom summary request."""

    start_year: int = Field(..., ge=1900, le=2100)
    end_year: int = Field(..., ge=1900, le=2100)
    index_type: IndexType = IndexType.NDVI

    @model_validator(mode="after")
    def _check_year_range(self) -> PhenologyQuery:
        if self.end_year < self.start_year:
            msg = "end_year must be >= start_year"
            raise ValueError(msg)
        return self


class AnalysisQuery(LocationQuery):
    """Single-season vegetation analysis request."""

    start_date: date
    end_date: date
    index_type: IndexType = IndexType.NDVI

    @model_validator(mode="after")
    def _check_date_range(self) -> AnalysisQuery:
        if self.end_date < self.start_date:
            msg = "end_date must be >= start_date"
            raise ValueError(msg)
        return self
