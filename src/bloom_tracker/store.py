"""Tiered data store with freshness-aware caching.

Manages read/write of JSON data files organized into tiers by update frequency:
  - historical/: Series for completed years, which no longer change
  - live/: Series that still include the current year
  - derived/: Computed reports (phenology summaries, vegetation analyses)

Every JSON file is wrapped in a metadata envelope with ``valid_until`` so
flows can reuse results that are still fresh. Report paths are keyed by
location, date range and index type; the analysis layer itself never caches.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any


def _coord(value: float) -> str:
    return f"{value:.4f}".replace("-", "m")


def cache_key(lat: float, lon: float, start: object, end: object, index_type: str) -> str:
    """File-name-safe key for one (location, range, index) request."""
    return f"{_coord(lat)}_{_coord(lon)}_{start}_{end}_{index_type}"


class DataStore:
    """Manages read/write of cached data files with TTL."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.historical = base_dir / "historical"
        self.live = base_dir / "live"
        self.derived = base_dir / "derived"

    def read(self, path: Path) -> dict[str, Any] | None:
        """Read data payload from a metadata-enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            envelope: dict[str, Any] = json.load(f)
        return envelope.get("data", envelope)

    def read_meta(self, path: Path) -> dict[str, Any]:
        """Read the ``meta`` block of an envelope ({} if missing)."""
        full = self._resolve(path)
        if not full.exists():
            return {}
        with full.open() as f:
            envelope: dict[str, Any] = json.load(f)
        return envelope.get("meta", {})

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``derived/phenology/x.json``).
            data: Payload to store under the ``data`` key.
            source: Producer identifier (e.g. ``"synthetic"``, ``"modis.ornl.gov"``).
            valid_until: Expiry timestamp. None means never fresh.
            **params: Extra metadata fields (location, query params, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        if params:
            meta.update(params)

        envelope = {"meta": meta, "data": data}
        with full.open("w") as f:
            json.dump(envelope, f, indent=2)

        return full

    def is_fresh(self, path: Path) -> bool:
        """Check if a file exists and hasn't expired.

        Returns False if the file is missing, has no ``valid_until``, or
        the expiry time has passed.
        """
        valid_until = self.read_meta(path).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full
