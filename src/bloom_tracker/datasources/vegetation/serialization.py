"""JSON serialization helpers for sample series."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from bloom_tracker.datasources.vegetation.models import Sample

if TYPE_CHECKING:
    from collections.abc import Sequence


def samples_to_dict(samples: Sequence[Sample], index_type: str) -> dict[str, Any]:
    """Serialize a series to a JSON-compatible dict.

    Args:
        samples: Ordered samples.
        index_type: Index the values belong to.

    Returns:
        Dict with index_type and a ``series`` list of date/value/confidence.
    """
    return {
        "index_type": str(index_type),
        "series": [
            {
                "date": s.date.isoformat(),
                "value": round(s.value, 4),
                "confidence": round(s.confidence, 3),
            }
            for s in samples
        ],
    }


def samples_from_dict(data: dict[str, Any]) -> list[Sample]:
    """Inverse of ``samples_to_dict``; used when reading cached series."""
    return [
        Sample(
            date=date.fromisoformat(row["date"]),
            value=float(row["value"]),
            confidence=float(row.get("confidence", 1.0)),
        )
        for row in data.get("series", [])
    ]
