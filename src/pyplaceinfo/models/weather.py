"""Current weather model."""

from __future__ import annotations

from pyplaceinfo.models._base import PlaceInfoBaseModel


class WeatherReport(PlaceInfoBaseModel):
    description: str
    temperature_celsius: float

    @property
    def display(self) -> str:
        """Text for the weather slot, e.g. ``"晴天(21.3°C)"``."""
        return f"{self.description}({self.temperature_celsius:g}°C)"
