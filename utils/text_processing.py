# utils/text_processing.py
"""
文字處理工具模組，標準化和驗證用戶輸入的縣市名稱。
確保不同寫法的相同縣市（例如「台」和「臺」、英文 slug）在程式碼中被統一處理，避免因文字不匹配而導致的錯誤。
"""
from .location_constants import LOCATION_ALIASES, VALID_LOCATION_SET

def normalize_city_name(city_name) -> str:
    """
    將輸入的縣市名稱轉換為正式名稱，例如把「台北市」、「taipei」都轉成「臺北市」。
    先查別名表；查不到時只把開頭的「台」換成「臺」再查一次。
    都查不到就原樣返回，交給 `is_valid_city` 判斷是否支援，而不是默默換成預設縣市。
    """
    if not city_name: # `None` 或空字串直接返回空字串
        return ""
    raw = str(city_name).strip()

    # 先吃別名（含 slug / 常見中文）
    if raw in LOCATION_ALIASES:
        return LOCATION_ALIASES[raw]

    # 台→臺，只換開頭那個字，其他部分保持不變
    substituted = "臺" + raw[1:] if raw.startswith("台") else raw

    # 再吃一次別名
    if substituted in LOCATION_ALIASES:
        return LOCATION_ALIASES[substituted]

    return substituted

def is_valid_city(city_name: str) -> bool:
    """檢查名稱是否為 22 個支援的縣市之一。"""
    return city_name in VALID_LOCATION_SET
