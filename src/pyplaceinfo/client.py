"""High-level async client for the place information providers."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pyplaceinfo._api import countries as _countries_api
from pyplaceinfo._api import geocoding as _geocoding_api
from pyplaceinfo._api import timezone as _timezone_api
from pyplaceinfo._api import weather as _weather_api
from pyplaceinfo._transport import HttpTransport, Transport
from pyplaceinfo.config import PlaceInfoConfig
from pyplaceinfo.exceptions import PlaceInfoError
from pyplaceinfo.localization import LocalizationTables, async_load_localization_tables
from pyplaceinfo.models.country import CountryInfo
from pyplaceinfo.models.display import DisplayRecord
from pyplaceinfo.models.local_time import LocalTime
from pyplaceinfo.models.location import LocationDetails
from pyplaceinfo.models.weather import WeatherReport
from pyplaceinfo.orchestrator import EnrichmentOrchestrator
from pyplaceinfo.presentation import MapWidget, Presenter, RecordingPresenter

_logger = logging.getLogger(__name__)


class PlaceInfoClient:
    """Async client for the reverse-geocoding, country, weather and time providers.

    Usage::

        async with PlaceInfoClient(PlaceInfoConfig.from_env()) as client:
            record = await client.lookup(35.6762, 139.6503)

    Parameters
    ----------
    config : PlaceInfoConfig
        Provider credentials and endpoints.
    session : aiohttp.ClientSession or None
        Externally owned HTTP session. Not closed on exit.
    transport : Transport or None
        Replaces the HTTP transport entirely (tests, tracing).
    tables : LocalizationTables or None
        Preloaded localization tables. Loaded from ``config`` on enter
        when omitted.
    """

    def __init__(
        self,
        config: PlaceInfoConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
        tables: LocalizationTables | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._injected_transport = transport
        self._transport: Transport | None = None
        self._tables = tables

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> PlaceInfoClient:
        # Tables first: a strict load failure must not leave a session open.
        if self._tables is None:
            self._tables = await async_load_localization_tables(
                self._config.currency_table,
                self._config.language_table,
                strict=self._config.strict_tables,
            )
        if self._injected_transport is not None:
            self._transport = self._injected_transport
        else:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise PlaceInfoError("Client not initialized. Use 'async with PlaceInfoClient(...) as client:'")
        return self._transport

    @property
    def tables(self) -> LocalizationTables:
        if self._tables is None:
            raise PlaceInfoError("Localization tables not loaded. Use 'async with PlaceInfoClient(...) as client:'")
        return self._tables

    # ------------------------------------------------------------------
    # Resolvers
    # ------------------------------------------------------------------

    async def resolve_location(self, lat: float, lng: float) -> LocationDetails:
        """Reverse-geocode a coordinate (longitude must already be normalized)."""
        return await _geocoding_api.fetch_location_details(self._config, self._require_transport(), lat, lng)

    async def resolve_country(self, country_code: str) -> CountryInfo:
        """Fetch country metadata with localized currency and language text."""
        return await _countries_api.fetch_country_info(
            self._config,
            self._require_transport(),
            country_code,
            self.tables,
        )

    async def resolve_weather(self, lat: float, lng: float) -> WeatherReport:
        return await _weather_api.fetch_weather(self._config, self._require_transport(), lat, lng)

    async def resolve_local_time(self, lat: float, lng: float) -> LocalTime:
        return await _timezone_api.fetch_local_time(self._config, self._require_transport(), lat, lng)

    # ------------------------------------------------------------------
    # Orchestration
    # ------------------------------------------------------------------

    def create_orchestrator(
        self,
        presenter: Presenter,
        map_widget: MapWidget | None = None,
        *,
        discard_stale: bool = False,
    ) -> EnrichmentOrchestrator:
        """Build the click handler for one map session."""
        self._require_transport()
        return EnrichmentOrchestrator(self, presenter, map_widget, discard_stale=discard_stale)

    async def lookup(self, lat: float, lng: float) -> DisplayRecord:
        """Run a single headless click and return the resulting record."""
        orchestrator = self.create_orchestrator(RecordingPresenter())
        return await orchestrator.handle_click(lat, lng)
