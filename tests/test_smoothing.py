"""Tests for the centered moving average."""

from __future__ import annotations

import pytest

from bloom_tracker.analysis.smoothing import moving_average


class TestMovingAverage:
    """Truncated-window smoothing."""

    def test_empty_input(self) -> None:
        assert moving_average([], 5) == []

    def test_constant_series_unchanged(self) -> None:
        """A constant series smooths to the same constant everywhere."""
        result = moving_average([0.42] * 12, 5)
        assert result == pytest.approx([0.42] * 12)

    def test_preserves_length(self) -> None:
        assert len(moving_average([1.0, 2.0, 3.0], 5)) == 3

    def test_window_three(self) -> None:
        result = moving_average([1.0, 2.0, 3.0, 4.0, 5.0], 3)
        assert result == pytest.approx([1.5, 2.0, 3.0, 4.0, 4.5])

    def test_edges_are_truncated_not_padded(self) -> None:
        """Edge windows average only the samples that exist (no zero padding)."""
        result = moving_average([1.0, 2.0, 3.0, 4.0, 5.0], 5)
        # i=0 -> mean(1, 2, 3); i=1 -> mean(1..4)
        assert result == pytest.approx([2.0, 2.5, 3.0, 3.5, 4.0])

    def test_window_one_is_identity(self) -> None:
        values = [0.1, 0.9, 0.3]
        assert moving_average(values, 1) == pytest.approx(values)

    def test_window_wider_than_series(self) -> None:
        """Every output is the overall mean when the window covers everything."""
        result = moving_average([1.0, 2.0, 3.0], 11)
        assert result == pytest.approx([2.0, 2.0, 2.0])

    def test_does_not_mutate_input(self) -> None:
        values = [3.0, 1.0, 2.0]
        moving_average(values, 3)
        assert values == [3.0, 1.0, 2.0]
