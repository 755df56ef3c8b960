"""Client configuration for pyplaceinfo."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyplaceinfo._constants import (
    DEFAULT_TIME_FORMAT,
    DEFAULT_WEATHER_LANG,
    DEFAULT_WEATHER_UNITS,
    GEONAMES_BASE_URL,
    NOMINATIM_BASE_URL,
    OPENWEATHER_BASE_URL,
    RESTCOUNTRIES_BASE_URL,
    USER_AGENT,
)
from pyplaceinfo.exceptions import PlaceInfoConfigError


@dataclasses.dataclass(frozen=True)
class PlaceInfoConfig:
    """Client configuration.

    Parameters
    ----------
    openweather_api_key : str or None
        OpenWeatherMap ``appid``. Required by the weather resolver.
    geonames_username : str or None
        GeoNames account name. Required by the local time resolver.
    user_agent : str
        Identifying header sent to the reverse-geocoding provider.
    weather_units : str
        OpenWeatherMap ``units`` parameter. ``"metric"`` yields °C.
    weather_lang : str
        OpenWeatherMap ``lang`` parameter for the condition text.
    time_format : str
        ``strftime`` pattern used to render the local time.
    currency_table : str or None
        Path to a currency localization JSON file. ``None`` uses the
        bundled Japanese table.
    language_table : str or None
        Path to a language localization JSON file. ``None`` uses the
        bundled Japanese table.
    strict_tables : bool
        Raise on a missing/malformed localization table instead of
        falling back to raw codes.
    request_timeout : float or None
        Total per-request timeout in seconds. ``None`` keeps the
        aiohttp session default.
    nominatim_base_url, restcountries_base_url, openweather_base_url, geonames_base_url : str
        Provider endpoints.
    """

    openweather_api_key: str | None = None
    geonames_username: str | None = None
    user_agent: str = USER_AGENT
    weather_units: str = DEFAULT_WEATHER_UNITS
    weather_lang: str = DEFAULT_WEATHER_LANG
    time_format: str = DEFAULT_TIME_FORMAT
    currency_table: str | None = None
    language_table: str | None = None
    strict_tables: bool = False
    request_timeout: float | None = None
    nominatim_base_url: str = NOMINATIM_BASE_URL
    restcountries_base_url: str = RESTCOUNTRIES_BASE_URL
    openweather_base_url: str = OPENWEATHER_BASE_URL
    geonames_base_url: str = GEONAMES_BASE_URL

    def require_openweather_api_key(self) -> str:
        if not self.openweather_api_key:
            raise PlaceInfoConfigError("openweather_api_key is not set (PLACEINFO_OPENWEATHER_API_KEY)")
        return self.openweather_api_key

    def require_geonames_username(self) -> str:
        if not self.geonames_username:
            raise PlaceInfoConfigError("geonames_username is not set (PLACEINFO_GEONAMES_USERNAME)")
        return self.geonames_username

    @classmethod
    def from_env(cls, **overrides: Any) -> PlaceInfoConfig:
        """Create configuration from ``PLACEINFO_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PLACEINFO_OPENWEATHER_API_KEY": "openweather_api_key",
            "PLACEINFO_GEONAMES_USERNAME": "geonames_username",
            "PLACEINFO_USER_AGENT": "user_agent",
            "PLACEINFO_WEATHER_UNITS": "weather_units",
            "PLACEINFO_WEATHER_LANG": "weather_lang",
            "PLACEINFO_TIME_FORMAT": "time_format",
            "PLACEINFO_CURRENCY_TABLE": "currency_table",
            "PLACEINFO_LANGUAGE_TABLE": "language_table",
            "PLACEINFO_NOMINATIM_BASE_URL": "nominatim_base_url",
            "PLACEINFO_RESTCOUNTRIES_BASE_URL": "restcountries_base_url",
            "PLACEINFO_OPENWEATHER_BASE_URL": "openweather_base_url",
            "PLACEINFO_GEONAMES_BASE_URL": "geonames_base_url",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("PLACEINFO_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = float(timeout_env)

        if "strict_tables" not in overrides:
            config_kwargs["strict_tables"] = _env_bool(env.get("PLACEINFO_STRICT_TABLES"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default
