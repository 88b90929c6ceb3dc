"""Centered moving average with truncated windows at the series edges."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_WINDOW = 5


def moving_average(values: Sequence[float], window: int = DEFAULT_WINDOW) -> list[float]:
    """Smooth a series with a centered window of ``window`` samples.

    Near the edges the window is truncated to the samples that exist; it is
    never padded. An even ``window`` behaves like the next odd size down
    plus one, i.e. ``window // 2`` samples on each side.

    Args:
        values: Raw values in series order.
        window: Window width, normally odd (default 5).

    Returns:
        List the same length as ``values``.
    """
    half = max(window, 1) // 2
    n = len(values)
    smoothed: list[float] = []
    for i in range(n):
        lo = max(0, i - half)
        hi = min(n, i + half + 1)
        smoothed.append(sum(values[lo:hi]) / (hi - lo))
    return smoothed
