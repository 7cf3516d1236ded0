# weather_today/today_handler.py
"""
處理「36 小時天氣預報」查詢的核心流程。
主要職責：
1. 處理用戶輸入：從 query string 或路徑取出縣市名稱，正規化並驗證是否為支援的縣市。
2. 快取：同一個縣市在 3 分鐘內重複查詢時，直接回傳快取的結果，不再呼叫氣象署。
3. 協調數據獲取：快取未命中時呼叫 `cwa_today_api` 取得原始資料，交給 `weather_today_parser` 整理後寫入快取。
4. 錯誤轉換：把設定錯誤、輸入錯誤、查無資料與上游錯誤都轉成結構化的 JSON 回應與對應的 HTTP 狀態碼。
"""
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

import config
from utils.forecast_cache import ForecastCache
from utils.location_constants import VALID_LOCATIONS
from utils.text_processing import normalize_city_name, is_valid_city

from .cwa_today_api import CwaApiError, get_cwa_today_data
from .weather_today_parser import parse_36hr_forecast, pick_first_location

logger = logging.getLogger(__name__)

# 所有請求共用的快取，鍵為縣市正式名稱
forecast_cache = ForecastCache(ttl_seconds=config.CACHE_TTL_SECONDS)

def _error(status: int, error: str, message: str, **extra: Any) -> Tuple[Dict[str, Any], int]:
    body = {"success": False, "error": error, "message": message}
    body.update(extra)
    return body, status

def resolve_city_input(args: Mapping[str, str], view_args: Optional[Mapping[str, str]] = None) -> str:
    """
    依序從 `?city=`、`?locationName=`、路徑參數 `city` / `location` 取出縣市名稱，都沒有就用預設縣市。
    """
    view_args = view_args or {}
    return (
        args.get("city")
        or args.get("locationName")
        or view_args.get("city")
        or view_args.get("location")
        or config.DEFAULT_CITY
    )

# --- 取得指定縣市 36 小時天氣 ---
def get_weather_by_location(raw_city: Optional[str]) -> Tuple[Dict[str, Any], int]:
    """
    查詢流程的入口：驗證設定與輸入 -> 查快取 -> 呼叫氣象署 -> 整理資料 -> 寫入快取。
    返回 (回應內容, HTTP 狀態碼)，由路由層轉成 JSON。
    """
    if not config.CWA_API_KEY:
        logger.error("CWA_API_KEY 未設定，無法查詢天氣。")
        return _error(500, "伺服器設定錯誤", "請在 .env 檔案中設定 CWA_API_KEY")

    location_name = normalize_city_name(raw_city)

    if not location_name:
        logger.info(f"未提供有效的縣市名稱: {raw_city!r}")
        return _error(400, "參數錯誤", "請提供 city 或 locationName，例如 /api/weather?city=宜蘭縣")

    if not is_valid_city(location_name):
        logger.info(f"不支援的地區: {location_name}（原始輸入: {raw_city}）")
        return _error(
            400, "地區不支援", f"不支援的地區：{location_name}",
            allowed=list(VALID_LOCATIONS),
            tip="請使用 /api/locations 取得可用地區清單",
        )

    cached = forecast_cache.get(location_name)
    if cached is not None:
        logger.info(f"{location_name} 命中快取。")
        return {"success": True, "data": cached, "cached": True}, 200

    try:
        raw_data = get_cwa_today_data(config.CWA_API_KEY, location_name)
    except CwaApiError as e:
        if e.status_code is not None:
            return _error(e.status_code, "CWA API 錯誤", e.message, details=e.details)
        return _error(500, "伺服器錯誤", "無法取得天氣資料，請稍後再試")

    records = raw_data.get("records") if isinstance(raw_data, dict) else None
    location_data = pick_first_location(records)

    if not location_data:
        logger.warning(f"CWA API 回應中沒有 {location_name} 的 location 資料。")
        return _error(404, "查無資料", f"無法取得 {location_name} 天氣資料")

    weather_data = parse_36hr_forecast(location_data, records.get("datasetDescription"))
    forecast_cache.set(location_name, weather_data)
    logger.info(f"成功取得 {location_name} 的 36 小時天氣資料。")

    return {"success": True, "data": weather_data}, 200
