# utils/forecast_cache.py
"""
記憶體內的簡單快取，避免短時間內重複呼叫中央氣象署 API。
每個項目在寫入時記下到期時間，讀取時才檢查是否過期（惰性淘汰），沒有背景清理工作。
鍵值只會是 22 個縣市的正式名稱，所以不需要容量上限。
"""
import logging
import time
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

logger = logging.getLogger(__name__)

class ForecastCache:
    """
    以固定 TTL 保存預報資料的快取。
    讀取不會延長存活時間；同一個縣市同時未命中時，多個請求各自寫入，以最後一次為準。
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[Hashable, Tuple[Any, float]] = {} # key -> (資料, 到期時間)

    def get(self, key: Hashable) -> Optional[Any]:
        """取得未過期的資料；不存在或已過期則返回 None，過期的項目會順便刪除。"""
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if expires_at < self._clock():
            # pop 而不是 del：另一個請求可能已經先刪掉了
            self._entries.pop(key, None)
            logger.debug(f"快取 {key} 已過期，已移除。")
            return None

        return value

    def set(self, key: Hashable, value: Any) -> None:
        """寫入或覆寫資料，到期時間從現在起算。"""
        self._entries[key] = (value, self._clock() + self.ttl_seconds)
        logger.debug(f"已快取 {key}，{self.ttl_seconds} 秒後過期。")

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
