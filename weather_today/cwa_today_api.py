# weather_today/cwa_today_api.py
"""
與中央氣象署的「今明 36 小時天氣預報」API (F-C0032-001) 進行互動。
主要職責：
1. 發送請求：根據給定的 API 金鑰和縣市正式名稱，向氣象署 API 發出 HTTP GET 請求。
2. 參數設定：只獲取需要的氣象元素（天氣現象、降雨機率、溫度、舒適度），並設定逾時時間。
3. 錯誤處理：把連線超時、網路問題、非 2xx 狀態碼、無效 JSON 統一轉成 `CwaApiError`，保留上游的狀態碼與訊息，讓呼叫者決定要回什麼給客戶端。
不做任何重試。
"""
import logging
from typing import Any, Optional

import requests

from config import CWA_FORECAST_36HR_API, CWA_FORECAST_ELEMENTS, CWA_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

class CwaApiError(Exception):
    """
    呼叫 CWA API 失敗。
    `status_code` 為上游回應的 HTTP 狀態碼；連線失敗、逾時或回應無法解析時為 None。
    `details` 為上游回應的內容（JSON 或原始文字），沒有回應時為 None。
    """

    def __init__(self, message: str, status_code: Optional[int] = None, details: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details

def _error_from_response(response: requests.Response) -> CwaApiError:
    """從非 2xx 的回應中取出狀態碼與上游提供的錯誤訊息。"""
    try:
        details = response.json()
    except ValueError:
        details = response.text

    message = None
    if isinstance(details, dict):
        message = details.get("message")

    return CwaApiError(message or "無法取得天氣資料", status_code=response.status_code, details=details)

def get_cwa_today_data(api_key: str, location_name: str) -> dict:
    """
    從中央氣象署 F-C0032-001 取得指定縣市的今明 36 小時天氣預報資料。
    `location_name` 必須已經是正式名稱（例如「臺中市」），正規化由呼叫者負責。
    成功時回傳原始的 JSON 字典；任何失敗都拋出 `CwaApiError`。
    """
    params = {
        "Authorization" : api_key,
        "locationName"  : location_name,
        "elementName"   : CWA_FORECAST_ELEMENTS,
        "format"        : "JSON"
    }

    try:
        logger.info(f"正在從中央氣象署 API ({CWA_FORECAST_36HR_API}) 取得 {location_name} 的 36 小時天氣資料..")
        response = requests.get(CWA_FORECAST_36HR_API, params=params, timeout=CWA_REQUEST_TIMEOUT)
        logger.debug(f"CWA API response status code: {response.status_code}")
        response.raise_for_status() # 非 2xx 會拋出 `HTTPError`

        data = response.json()
        logger.debug(f"接收到的 CWA API 原始資料: {data}")
        return data

    except requests.exceptions.Timeout as e:
        logger.error(f"從中央氣象署 API 取得 {location_name} 天氣資料時發生連線超時錯誤。")
        raise CwaApiError("連線中央氣象署 API 逾時") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"從中央氣象署 API 取得 {location_name} 天氣資料時發生 HTTP 錯誤: {e.response.status_code} - {e.response.text}")
        raise _error_from_response(e.response) from e
    except ValueError as e:
        logger.error(f"解析中央氣象署 36 小時天氣 API 回應時發生 JSON 解析錯誤: {e}", exc_info=True)
        raise CwaApiError("中央氣象署 API 回應格式錯誤") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"從中央氣象署 API 取得 {location_name} 天氣資料時發生網路錯誤: {e}", exc_info=True)
        raise CwaApiError("無法連線中央氣象署 API") from e
