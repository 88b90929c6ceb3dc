"""Tests for the MODIS (ORNL DAAC) sample source."""

from __future__ import annotations

from datetime import date, timedelta
from unittest.mock import Mock, patch

import pytest
import requests

from bloom_tracker.datasources.vegetation import IndexType
from bloom_tracker.datasources.vegetation.client import MODIS_API
from bloom_tracker.datasources.vegetation.modis import (
    SUBSET_TIMEOUT,
    fetch_modis_dates,
    fetch_modis_series,
)


def _response(payload: dict) -> Mock:
    resp = Mock()
    resp.json.return_value = payload
    resp.raise_for_status = Mock()
    return resp


def _dates_payload(start: date, count: int, step: int = 16) -> dict:
    dates = []
    for i in range(count):
        d = start + timedelta(days=i * step)
        dates.append({"modis_date": f"A{d.year}{d.timetuple().tm_yday:03d}", "calendar_date": d.isoformat()})
    return {"dates": dates}


def _subset_payload(rows: list[tuple[str, int]], band: str = "250m_16_days_NDVI") -> dict:
    return {
        "subset": [{"band": band, "calendar_date": d, "data": [raw]} for d, raw in rows],
    }


class TestFetchModisDates:
    @patch("bloom_tracker.datasources.vegetation.modis.session.get")
    def test_parses_dates(self, mock_get: Mock) -> None:
        mock_get.return_value = _response(_dates_payload(date(2023, 1, 1), 2))

        result = fetch_modis_dates(45.5, -122.6, "MOD13Q1")

        assert result == [("A2023001", date(2023, 1, 1)), ("A2023017", date(2023, 1, 17))]
        url = mock_get.call_args.args[0]
        assert url == f"{MODIS_API}/MOD13Q1/dates"
        assert mock_get.call_args.kwargs["params"] == {"latitude": 45.5, "longitude": -122.6}


class TestFetchModisSeries:
    @patch("bloom_tracker.datasources.vegetation.modis.session.get")
    def test_scales_and_orders_samples(self, mock_get: Mock) -> None:
        mock_get.side_effect = [
            _response(_dates_payload(date(2023, 1, 1), 2)),
            _response(_subset_payload([("2023-01-17", 4000), ("2023-01-01", 5000)])),
        ]

        series = fetch_modis_series(45.5, -122.6, date(2023, 1, 1), date(2023, 12, 31))

        assert [s.date for s in series] == [date(2023, 1, 1), date(2023, 1, 17)]
        assert series[0].value == pytest.approx(0.5)
        assert series[1].value == pytest.approx(0.4)
        params = mock_get.call_args.kwargs["params"]
        assert params["band"] == "250m_16_days_NDVI"
        assert params["startDate"] == "A2023001"
        assert params["endDate"] == "A2023017"

    @patch("bloom_tracker.datasources.vegetation.modis.session.get")
    def test_requests_are_chunked(self, mock_get: Mock) -> None:
        mock_get.side_effect = [
            _response(_dates_payload(date(2023, 1, 1), 12)),
            _response(_subset_payload([])),
            _response(_subset_payload([])),
        ]

        fetch_modis_series(45.5, -122.6, date(2023, 1, 1), date(2023, 12, 31))

        assert mock_get.call_count == 3
        last_params = mock_get.call_args.kwargs["params"]
        assert last_params["startDate"] == "A2023161"
        assert mock_get.call_args.kwargs["timeout"] == SUBSET_TIMEOUT
        assert "timeout" not in mock_get.call_args_list[0].kwargs

    @patch("bloom_tracker.datasources.vegetation.modis.session.get")
    def test_only_dates_in_range_requested(self, mock_get: Mock) -> None:
        mock_get.side_effect = [
            _response(_dates_payload(date(2022, 12, 20), 4)),
            _response(_subset_payload([])),
        ]

        fetch_modis_series(45.5, -122.6, date(2023, 1, 1), date(2023, 1, 31))

        params = mock_get.call_args.kwargs["params"]
        assert params["startDate"] == "A2023005"
        assert params["endDate"] == "A2023021"

    @patch("bloom_tracker.datasources.vegetation.modis.session.get")
    def test_fill_values_dropped(self, mock_get: Mock) -> None:
        mock_get.side_effect = [
            _response(_dates_payload(date(2023, 1, 1), 2)),
            _response(_subset_payload([("2023-01-01", -3000), ("2023-01-17", 6000)])),
        ]

        series = fetch_modis_series(45.5, -122.6, date(2023, 1, 1), date(2023, 1, 31))

        assert [s.date for s in series] == [date(2023, 1, 17)]

    @patch("bloom_tracker.datasources.vegetation.modis.session.get")
    def test_lai_uses_its_own_product(self, mock_get: Mock) -> None:
        mock_get.side_effect = [
            _response(_dates_payload(date(2023, 1, 1), 1, step=8)),
            _response(_subset_payload([("2023-01-01", 25)], band="Lai_500m")),
        ]

        series = fetch_modis_series(
            45.5, -122.6, date(2023, 1, 1), date(2023, 1, 8), IndexType.LAI
        )

        assert "MCD15A2H" in mock_get.call_args_list[0].args[0]
        assert series[0].value == pytest.approx(2.5)

    @patch("bloom_tracker.datasources.vegetation.modis.session.get")
    def test_no_dates_no_subset_requests(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({"dates": []})
        assert fetch_modis_series(45.5, -122.6, date(2023, 1, 1), date(2023, 1, 31)) == []
        assert mock_get.call_count == 1

    def test_unknown_index_type(self) -> None:
        with pytest.raises(ValueError, match="No MODIS product"):
            fetch_modis_series(45.5, -122.6, date(2023, 1, 1), date(2023, 1, 31), "SAVI")

    @patch("bloom_tracker.datasources.vegetation.modis.session.get")
    def test_http_error_propagates(self, mock_get: Mock) -> None:
        resp = Mock()
        resp.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
        mock_get.return_value = resp

        with pytest.raises(requests.HTTPError):
            fetch_modis_series(45.5, -122.6, date(2023, 1, 1), date(2023, 1, 31))
