# weather_today/weather_today_parser.py
"""
解析中央氣象署「36 小時天氣預報」API (F-C0032-001) 的原始數據。
主要職責：
1. 數據提取：從回應的 `records` 中取出第一筆縣市資料。
2. 數據對齊：以「天氣現象 (Wx)」的時間段作為基準時間軸，把其他天氣元素依照相同索引併入同一個時段。
3. 數據格式化：依元素種類加上單位，例如降雨機率加「%」、溫度加「°C」；沒有資料的欄位保持空字串。
"""
import logging
from typing import Any, Dict, List, Optional

from config import DEFAULT_UPDATE_TIME_LABEL

logger = logging.getLogger(__name__)

# --- 天氣元素名稱 -> (輸出欄位, 單位後綴) ---
# 不在這張表中的元素一律忽略
ELEMENT_FIELD_MAP = {
    "Wx"    : ("weather", ""),
    "PoP"   : ("rain", "%"),
    "PoP6h" : ("rain", "%"),
    "MinT"  : ("minTemp", "°C"),
    "MaxT"  : ("maxTemp", "°C"),
    "CI"    : ("comfort", ""),
}

def pick_first_location(records: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """取出 `records.location` 的第一筆資料；不存在、為空或格式不符時返回 None。"""
    if not isinstance(records, dict):
        return None
    locations = records.get("location")
    if not isinstance(locations, list) or not locations:
        return None
    first = locations[0]
    return first if isinstance(first, dict) else None

def _element_value(element: Dict[str, Any], index: int) -> Optional[str]:
    """
    取得某個天氣元素在第 `index` 個時間段的 parameterName。
    索引超出範圍、缺少 parameter 都視為沒有資料。
    """
    times = element.get("time") or []
    if index >= len(times):
        return None
    parameter = (times[index] or {}).get("parameter") or {}
    return parameter.get("parameterName")

def _empty_period(base_time: Dict[str, Any]) -> Dict[str, str]:
    return {
        "startTime" : base_time.get("startTime") or "",
        "endTime"   : base_time.get("endTime") or "",
        "weather"   : "",
        "rain"      : "",
        "minTemp"   : "",
        "maxTemp"   : "",
        "comfort"   : "",
        "windSpeed" : "", # 這份 dataset 沒有 WS，保留欄位讓前端格式一致
    }

# --- 將單一縣市的原始資料整理成前端使用的預報結構 ---
def parse_36hr_forecast(location_data: Dict[str, Any], update_time: Optional[str] = None) -> Dict[str, Any]:
    """
    將 F-C0032-001 中一筆縣市資料轉換成簡化的預報結構。

    以 Wx 的時間段為基準（沒有 Wx 就用第一個元素），逐一建立每個時段的預報，
    再把每個元素在相同索引的值填入對應欄位。這裡假設所有元素的時間段數量與順序都相同，不另外驗證。

    Args:
        location_data (dict): `records.location` 中的一筆資料，含 `locationName` 與 `weatherElement`。
        update_time (str | None): 資料集說明 (`records.datasetDescription`)，沒有時使用預設文字。

    Returns:
        dict: `{"city", "updateTime", "forecasts"}`，`forecasts` 依時間先後排列。
    """
    weather_elements: List[Dict[str, Any]] = location_data.get("weatherElement") or []

    # 以 Wx 的 time 當基準
    base_element = next((e for e in weather_elements if e.get("elementName") == "Wx"), None)
    if base_element is None and weather_elements:
        base_element = weather_elements[0]
    base_times = (base_element or {}).get("time") or []

    forecasts = []
    for i, base_time in enumerate(base_times):
        forecast = _empty_period(base_time or {})

        for element in weather_elements:
            mapping = ELEMENT_FIELD_MAP.get(element.get("elementName"))
            if mapping is None:
                continue

            val = _element_value(element, i)
            if val is None or val == "":
                continue # 沒有資料就保持空字串，不寫入只有單位的值

            field, suffix = mapping
            forecast[field] = f"{val}{suffix}"

        forecasts.append(forecast)

    city = location_data.get("locationName") or ""
    logger.info(f"解析完成: {city} 共 {len(forecasts)} 個時段天氣資料。")

    return {
        "city"       : city,
        "updateTime" : update_time or DEFAULT_UPDATE_TIME_LABEL,
        "forecasts"  : forecasts,
    }
