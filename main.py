# main.py
"""
36 小時天氣預報 API 的主入口檔案。
使用 Flask 框架建立一個 Web 伺服器，把前端的查詢轉送到中央氣象署並回傳整理後的 JSON。
主要職責：
1. 建立 Flask 應用程式並啟用 CORS，讓不同來源的前端可以直接呼叫。
2. 設定各個 API 路徑：服務說明、健康檢查、可用縣市清單、天氣查詢。
3. 統一處理 404 與未預期的錯誤，確保客戶端永遠收到結構化的 JSON，而不是堆疊追蹤。
"""
import logging
from datetime import datetime, timezone

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import APP_ENV, DEFAULT_CITY, IS_DEBUG_MODE, PORT
from utils.location_constants import VALID_LOCATIONS
from weather_today.today_handler import get_weather_by_location, resolve_city_input

logger = logging.getLogger(__name__)

# --- 初始化 Flask ---
app = Flask(__name__)
app.json.ensure_ascii = False # 回應中的中文保持原字，不轉成 \uXXXX
CORS(app, send_wildcard=True)  # 允許跨域請求，一律回 `*`

# --- 服務說明 ---
@app.route("/")
def index():
    return jsonify({
        "message": "歡迎使用 CWA 36 小時天氣預報 API",
        "endpoints": {
            "locations"       : "/api/locations",
            "weatherByQuery"  : "/api/weather?city=宜蘭縣",
            "weatherByParam"  : "/api/weather/宜蘭縣",
            "legacyKaohsiung" : "/api/weather/kaohsiung",
            "health"          : "/api/health",
        },
    })

# --- 健康檢查路由 ---
# 雲端服務（例如 Cloud Run）會定期呼叫這個端點來確認應用程式是否正常運行
@app.route("/api/health")
def health_check():
    return jsonify({"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()})

# --- 給前端做地區下拉選單 ---
@app.route("/api/locations")
def list_locations():
    return jsonify({
        "success": True,
        "data": [{"name": name, "value": name} for name in VALID_LOCATIONS],
    })

# --- 天氣查詢 ---
# 支援 ?city= / ?locationName= / /api/weather/<city>，city 可以是正式名稱、「台」開頭的寫法或英文 slug
@app.route("/api/weather")
@app.route("/api/weather/<city>")
def weather_by_location(city=None):
    raw_city = resolve_city_input(request.args, {"city": city})
    body, status = get_weather_by_location(raw_city)
    return jsonify(body), status

# 舊路徑：保留給原本就在使用的前端
@app.route("/api/weather/kaohsiung")
def weather_kaohsiung():
    body, status = get_weather_by_location(DEFAULT_CITY)
    return jsonify(body), status

# --- 錯誤處理 ---
@app.errorhandler(404)
def not_found(e):
    return jsonify({"success": False, "error": "找不到此路徑"}), 404

@app.errorhandler(Exception)
def handle_exception(e):
    # 404 以外的 HTTP 錯誤（例如 405）保留原本的狀態碼
    if isinstance(e, HTTPException):
        return jsonify({"success": False, "error": e.name, "message": e.description}), e.code

    logger.error("處理請求時發生未預期的錯誤。", exc_info=True)
    return jsonify({"success": False, "error": "伺服器錯誤", "message": str(e)}), 500

# --- 啟動 Flask ---
# 本機測試才用 Flask 內建伺服器，部署到雲端時由 WSGI 伺服器載入 `main:app`
if __name__ == "__main__":
    logger.info(f"🚀 伺服器運行於 port {PORT}")
    logger.info(f"📍 環境: {APP_ENV}")
    app.run(host="0.0.0.0", port=PORT, debug=IS_DEBUG_MODE)
