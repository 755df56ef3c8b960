"""Custom exception hierarchy for pyplaceinfo."""

from __future__ import annotations


class PlaceInfoError(Exception):
    """Base exception for all pyplaceinfo errors."""


class PlaceInfoConfigError(PlaceInfoError):
    """Invalid or missing configuration."""


class LocalizationLoadError(PlaceInfoError):
    """A localization table resource is missing or malformed."""


class PlaceInfoTransportError(PlaceInfoError):
    """HTTP-level failure (network, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class ProviderError(PlaceInfoError):
    """A provider answered, but not with anything usable."""

    def __init__(
        self,
        message: str,
        *,
        endpoint: str = "",
    ) -> None:
        self.endpoint = endpoint
        super().__init__(message)


class ResolutionError(ProviderError):
    """Reverse geocoding produced no country code for the coordinate."""


class EnrichmentError(ProviderError):
    """No country record exists for the country code."""


class WeatherError(ProviderError):
    """Weather payload was empty or malformed."""


class TimeError(ProviderError):
    """Time provider returned a non-success status or no ``time`` field."""
