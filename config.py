# config.py
"""
集中處理所有配置：
1. 環境變數的讀取，特別是中央氣象署 (CWA) API 的金鑰與伺服器埠號。
2. 全局日誌 (logging) 系統的設定，確保所有日誌都有統一的格式和輸出目的地。
3. 統整 36 小時天氣預報 API 端點、查詢元素、逾時與快取時間等常數，方便在其他模組中引用。
"""
import os # 操作作業系統環境變數
import sys
import logging
from dotenv import load_dotenv # 載入 .env 檔案中的環境變數
from logging.handlers import TimedRotatingFileHandler

# --- 載入 .env 檔案中的環境變數 ---
# load_dotenv() 會搜尋並讀取同層或父層的 .env，將其轉為系統環境變數，之後可用 os.getenv() 取得
load_dotenv()

# --- 環境變數設定 ---
# 控制 log 顯示的詳細程度
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
# 指定 log 儲存的檔名
LOG_FILE = os.getenv("LOG_FILE", "main.log")

# 把字串轉成 logging 模組用的數字等級；如果字串無效，就退回 INFO 等級
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)

# 執行環境名稱，只用於啟動日誌
APP_ENV = os.getenv("APP_ENV", "development")

# 是否啟用 debug 模式，部署到雲端時，通常預設是 False
IS_DEBUG_MODE = os.getenv("IS_DEBUG_MODE", "False").lower() == "true"

# 伺服器監聽的埠號，沒有設定就用 3000
PORT = int(os.getenv("PORT", "3000"))

# --- 建立全域 Logger 設定函式 ---
def setup_logging() -> None:
    """
    配置根日誌器，並添加處理器 (handler)：一個輸出到終端機，另一個（選用）輸出到 log 檔案。
    避免在多個檔案中重複設定日誌系統，讓整個專案共享相同的設定。
    """
    root = logging.getLogger()

    # 移除並關閉所有 handler，避免重複設定日誌
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()

    root.setLevel(LOG_LEVEL)

    # 共用的格式：時間 - logger 名稱 - 等級 - 檔案名稱:行號 - 訊息
    fmt = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
    )

    # console handler: 日誌直接輸出到標準輸出 (stdout)
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(LOG_LEVEL)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    # rotating file handler: 只有在 ENABLE_FILE_LOG 設定為 "true" 時才會啟用
    if os.getenv("ENABLE_FILE_LOG", "False").lower() == "true":
        # 每天午夜輪換檔案，保留 7 個備份
        fh = TimedRotatingFileHandler(LOG_FILE, when="midnight", interval=1, backupCount=7, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

setup_logging()
logger = logging.getLogger(__name__)

# --- 交通部中央氣象署 Open Data 平台 API 設定 ---
CWA_API_KEY = os.getenv("CWA_API_KEY")
CWA_BASE_URL = "https://opendata.cwa.gov.tw/api/v1/rest/datastore/" # API 基本網址 (共同前綴)

# --- 基本檢查：缺少金鑰不終止程式，每個天氣查詢都會回 500 直到補上設定 ---
if not CWA_API_KEY:
    logger.error("環境變數 CWA_API_KEY 未設定。天氣查詢將回傳設定錯誤，請設定後重新啟動程式。")

# 一般天氣預報-今明 36 小時天氣預報
CWA_FORECAST_36HR_DATASET_ID = "F-C0032-001"
CWA_FORECAST_36HR_API = CWA_BASE_URL + CWA_FORECAST_36HR_DATASET_ID

# 只拿回應會用到的元素：天氣現象, 降雨機率, 最低溫, 最高溫, 舒適度
CWA_FORECAST_ELEMENTS = "Wx,PoP,MinT,MaxT,CI"

# 呼叫 CWA API 的逾時秒數
CWA_REQUEST_TIMEOUT = 10

# 預報快取的存活時間 (3 分鐘)
CACHE_TTL_SECONDS = 3 * 60

# 沒有指定縣市時的預設查詢
DEFAULT_CITY = "高雄市"

# API 沒有提供 datasetDescription 時使用的說明文字
DEFAULT_UPDATE_TIME_LABEL = "三十六小時天氣預報"
