"""Two-sigma anomaly flagging."""

from __future__ import annotations

import statistics
from typing import TYPE_CHECKING

from bloom_tracker.analysis.models import AnomalyReport, Severity

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bloom_tracker.datasources.vegetation.models import Sample

SIGMA_MULTIPLIER = 2.0


def detect_anomalies(series: Sequence[Sample]) -> AnomalyReport:
    """Flag samples further than two population standard deviations from the mean.

    A flat series has zero deviation and therefore no anomalies.
    """
    if not series:
        return AnomalyReport(count=0, dates=(), severity=Severity.NONE)

    values = [s.value for s in series]
    mean = statistics.fmean(values)
    stddev = statistics.pstdev(values, mu=mean)

    flagged = tuple(s.date for s in series if abs(s.value - mean) > SIGMA_MULTIPLIER * stddev)
    return AnomalyReport(
        count=len(flagged),
        dates=flagged,
        severity=Severity.MODERATE if flagged else Severity.NONE,
    )
