"""CWA 36 小時預報 API 客戶端的測試，以 mock 取代 requests.get。"""

from unittest.mock import patch

import pytest
import requests

from config import CWA_FORECAST_36HR_API
from conftest import mock_response
from weather_today.cwa_today_api import CwaApiError, get_cwa_today_data


class TestGetCwaTodayData:
    def test_success_returns_payload(self, taipei_payload: dict):
        with patch("weather_today.cwa_today_api.requests.get", return_value=mock_response(200, taipei_payload)) as get:
            data = get_cwa_today_data("KEY", "臺北市")

        assert data == taipei_payload
        get.assert_called_once_with(
            CWA_FORECAST_36HR_API,
            params={
                "Authorization": "KEY",
                "locationName": "臺北市",
                "elementName": "Wx,PoP,MinT,MaxT,CI",
                "format": "JSON",
            },
            timeout=10,
        )

    def test_http_error_keeps_status_and_details(self):
        body = {"message": "Resource not found"}
        with patch("weather_today.cwa_today_api.requests.get", return_value=mock_response(401, body)):
            with pytest.raises(CwaApiError) as exc_info:
                get_cwa_today_data("BAD", "臺北市")

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Resource not found"
        assert exc_info.value.details == body

    def test_http_error_without_json_body(self):
        response = mock_response(502)
        response.json.side_effect = ValueError("no json")
        response.text = "Bad Gateway"
        with patch("weather_today.cwa_today_api.requests.get", return_value=response):
            with pytest.raises(CwaApiError) as exc_info:
                get_cwa_today_data("KEY", "臺北市")

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "無法取得天氣資料"
        assert exc_info.value.details == "Bad Gateway"

    def test_timeout_has_no_status(self):
        with patch("weather_today.cwa_today_api.requests.get", side_effect=requests.exceptions.Timeout()):
            with pytest.raises(CwaApiError) as exc_info:
                get_cwa_today_data("KEY", "臺北市")

        assert exc_info.value.status_code is None

    def test_connection_error_has_no_status(self):
        with patch("weather_today.cwa_today_api.requests.get", side_effect=requests.exceptions.ConnectionError("down")):
            with pytest.raises(CwaApiError) as exc_info:
                get_cwa_today_data("KEY", "臺北市")

        assert exc_info.value.status_code is None
        assert exc_info.value.details is None

    def test_invalid_json_on_success(self):
        response = mock_response(200)
        response.json.side_effect = ValueError("Expecting value")
        with patch("weather_today.cwa_today_api.requests.get", return_value=response):
            with pytest.raises(CwaApiError) as exc_info:
                get_cwa_today_data("KEY", "臺北市")

        assert exc_info.value.status_code is None
        assert exc_info.value.message == "中央氣象署 API 回應格式錯誤"
