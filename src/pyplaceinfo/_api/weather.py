"""Current weather endpoint (OpenWeatherMap 2.5).

Endpoint:
  - /weather?lat=..&lon=..&appid=..&units=..&lang=..
"""

from __future__ import annotations

import logging
from typing import Any

from pyplaceinfo._transport import Transport
from pyplaceinfo.config import PlaceInfoConfig
from pyplaceinfo.exceptions import WeatherError
from pyplaceinfo.models.weather import WeatherReport
from pyplaceinfo.normalize import safe_float, safe_str

_logger = logging.getLogger(__name__)


def _parse_weather(data: Any, *, endpoint: str = "") -> WeatherReport:
    if not isinstance(data, dict) or not data:
        raise WeatherError("Empty weather payload", endpoint=endpoint)

    conditions = data.get("weather")
    first = conditions[0] if isinstance(conditions, list) and conditions else None
    description = safe_str(first.get("description")) if isinstance(first, dict) else None

    main = data.get("main")
    temperature = safe_float(main.get("temp")) if isinstance(main, dict) else None

    if description is None or temperature is None:
        raise WeatherError("Weather payload lacks weather[0].description or main.temp", endpoint=endpoint)

    return WeatherReport(description=description, temperature_celsius=temperature, raw=data)


async def fetch_weather(
    config: PlaceInfoConfig,
    transport: Transport,
    lat: float,
    lng: float,
) -> WeatherReport:
    endpoint = f"{config.openweather_base_url}/weather"
    data = await transport.get_json(
        endpoint,
        params={
            "lat": lat,
            "lon": lng,
            "appid": config.require_openweather_api_key(),
            "units": config.weather_units,
            "lang": config.weather_lang,
        },
    )
    report = _parse_weather(data, endpoint=endpoint)
    _logger.debug("Weather at (%s, %s): %s", lat, lng, report.display)
    return report
