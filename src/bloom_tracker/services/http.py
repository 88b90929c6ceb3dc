"""
HTTP session for the ORNL DAAC MODIS subsets service.

The service is slow (a 10-composite subset can take tens of seconds) and
throttles bursts of requests, so the shared session:

- retries idempotent requests on throttling and gateway errors, honouring
  ``Retry-After`` when the service sends one
- applies a (connect, read) timeout to every request that does not set its own
- asks for JSON, since some endpoints default to CSV

Usage::

    from bloom_tracker.services.http import session

    resp = session.get(f"{MODIS_API}/MOD13Q1/dates", params={"latitude": 45.5, "longitude": -122.6})
    resp.raise_for_status()
"""

from __future__ import annotations

from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from bloom_tracker import __version__

RETRY_STATUSES = (429, 500, 502, 503, 504)

MODIS_RETRY = Retry(
    total=5,
    connect=3,
    backoff_factor=1.5,
    status_forcelist=RETRY_STATUSES,
    allowed_methods=frozenset({"GET"}),
    respect_retry_after_header=True,
    raise_on_status=False,  # callers use resp.raise_for_status()
)

#: (connect, read) seconds
DEFAULT_TIMEOUT: tuple[float, float] = (10.0, 60.0)


class TimeoutHTTPAdapter(HTTPAdapter):
    """HTTPAdapter that fills in a timeout when the caller gives none."""

    def __init__(
        self, *args: Any, timeout: float | tuple[float, float] = DEFAULT_TIMEOUT, **kwargs: Any
    ) -> None:
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(self, request: requests.PreparedRequest, **kwargs: Any) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def create_session(
    retry: Retry | None = None,
    timeout: float | tuple[float, float] = DEFAULT_TIMEOUT,
) -> requests.Session:
    """Build a session for JSON APIs with retry and a default timeout."""
    s = requests.Session()
    adapter = TimeoutHTTPAdapter(max_retries=retry or MODIS_RETRY, timeout=timeout)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers.update(
        {
            "Accept": "application/json",
            "User-Agent": f"bloom-tracker/{__version__}",
        }
    )
    return s


session: requests.Session = create_session()
