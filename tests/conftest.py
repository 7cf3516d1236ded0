"""測試共用的 fixture 與假資料產生工具。"""

from unittest.mock import MagicMock

import pytest
import requests

import config
from main import app
from weather_today.today_handler import forecast_cache


def make_element(name: str, values: list) -> dict:
    """建立一個 CWA weatherElement 區塊，時間段為連續的 12 小時。"""
    starts = ["2026-10-19 18:00:00", "2026-10-20 06:00:00", "2026-10-20 18:00:00"]
    ends = ["2026-10-20 06:00:00", "2026-10-20 18:00:00", "2026-10-21 06:00:00"]
    return {
        "elementName": name,
        "time": [
            {
                "startTime": starts[i],
                "endTime": ends[i],
                "parameter": {"parameterName": value},
            }
            for i, value in enumerate(values)
        ],
    }


def make_payload(location_name: str, elements: list, description: str = "三十六小時天氣預報") -> dict:
    return {
        "success": "true",
        "records": {
            "datasetDescription": description,
            "location": [{"locationName": location_name, "weatherElement": elements}],
        },
    }


def mock_response(status_code: int = 200, json_data=None) -> MagicMock:
    """模擬 requests.Response，非 2xx 時 raise_for_status 會拋出 HTTPError。"""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.text = str(json_data)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def taipei_payload() -> dict:
    return make_payload(
        "臺北市",
        [
            make_element("Wx", ["多雲時晴", "晴時多雲", "多雲"]),
            make_element("PoP", ["20", "10", "0"]),
            make_element("MinT", ["22", "23", "21"]),
            make_element("MaxT", ["27", "30", "26"]),
            make_element("CI", ["舒適", "舒適至悶熱", "舒適"]),
        ],
        description="臺灣各縣市天氣預報資料及國際都市天氣預報",
    )


@pytest.fixture(autouse=True)
def clean_cache():
    forecast_cache.clear()
    yield
    forecast_cache.clear()


@pytest.fixture
def api_key(monkeypatch) -> str:
    monkeypatch.setattr(config, "CWA_API_KEY", "CWA-TEST-KEY")
    return "CWA-TEST-KEY"


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c
