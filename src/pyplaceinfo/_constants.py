"""Internal constants shared across the library."""

NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"
RESTCOUNTRIES_BASE_URL = "https://restcountries.com/v3.1"
OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5"
GEONAMES_BASE_URL = "http://api.geonames.org"

# Nominatim's usage policy requires an identifying User-Agent.
USER_AGENT = "various-map-app"

# Administrative levels tried, in order, when deriving a region name.
REGION_KEYS: tuple[str, ...] = ("state", "city", "province", "county")

DEFAULT_WEATHER_UNITS = "metric"
DEFAULT_WEATHER_LANG = "ja"

# ja-JP rendering of a local date-time (``2026/10/17 20:15:00``).
DEFAULT_TIME_FORMAT = "%Y/%m/%d %H:%M:%S"

CURRENCY_TABLE_RESOURCE = "currency_ja.json"
LANGUAGE_TABLE_RESOURCE = "language_ja.json"

# Text shown for non-resolved fields by the text renderer.
PENDING_TEXT = "取得中..."
FAILED_TEXT = "取得失敗"

# Delay before the map widget is asked to re-measure itself after mount.
RELAYOUT_DELAY_S = 0.5
