"""Typed models for provider records and the display record."""

from pyplaceinfo.models.country import CountryInfo
from pyplaceinfo.models.display import (
    LOCATION_FIELDS,
    DisplayField,
    DisplayRecord,
    FieldState,
    FieldValue,
)
from pyplaceinfo.models.local_time import LocalTime
from pyplaceinfo.models.location import Coordinate, LocationDetails
from pyplaceinfo.models.weather import WeatherReport

__all__ = [
    "LOCATION_FIELDS",
    "Coordinate",
    "CountryInfo",
    "DisplayField",
    "DisplayRecord",
    "FieldState",
    "FieldValue",
    "LocalTime",
    "LocationDetails",
    "WeatherReport",
]
