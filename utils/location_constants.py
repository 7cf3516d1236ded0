# utils/location_constants.py
# 存放縣市相關的靜態常數和對應表
from types import MappingProxyType

# 36 小時預報 (F-C0032-001) 的 22 個縣市正式名稱，多數資料會用「臺」
# 順序即為 /api/locations 下拉選單的顯示順序
VALID_LOCATIONS = (
    "臺北市", "新北市", "桃園市", "臺中市", "臺南市", "高雄市",
    "基隆市", "新竹市", "新竹縣", "苗栗縣", "彰化縣", "南投縣",
    "雲林縣", "嘉義市", "嘉義縣", "屏東縣", "宜蘭縣", "花蓮縣",
    "臺東縣", "澎湖縣", "金門縣", "連江縣",
)

VALID_LOCATION_SET = frozenset(VALID_LOCATIONS)

# 別名對應表：常見中文寫法 + 英文 slug，對應到正式名稱
LOCATION_ALIASES = MappingProxyType({
    # 常見中文（台/臺）
    "台北市" : "臺北市",
    "台中市" : "臺中市",
    "台南市" : "臺南市",
    "台東縣" : "臺東縣",

    # 英文 slug，前端路由如果用 kaohsiung 這種就會命中
    "taipei"         : "臺北市",
    "newtaipei"      : "新北市",
    "taoyuan"        : "桃園市",
    "taichung"       : "臺中市",
    "tainan"         : "臺南市",
    "kaohsiung"      : "高雄市",
    "keelung"        : "基隆市",
    "hsinchu_city"   : "新竹市",
    "hsinchu_county" : "新竹縣",
    "miaoli"         : "苗栗縣",
    "changhua"       : "彰化縣",
    "nantou"         : "南投縣",
    "yunlin"         : "雲林縣",
    "chiayi_city"    : "嘉義市",
    "chiayi_county"  : "嘉義縣",
    "pingtung"       : "屏東縣",
    "yilan"          : "宜蘭縣",
    "hualien"        : "花蓮縣",
    "taitung"        : "臺東縣",
    "penghu"         : "澎湖縣",
    "kinmen"         : "金門縣",
    "lienchiang"     : "連江縣",
})
