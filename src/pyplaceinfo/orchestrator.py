"""Click-driven enrichment pipeline.

One :class:`EnrichmentOrchestrator` exists per map session. For every
click it resolves three independent failure domains, one after another:

1. location + country (country, region, currency, language, flag)
2. weather
3. local time

A failure in one domain marks only its own slots as failed. The
orchestrator is the only component that writes presentation state and
the only owner of the map marker.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from pyplaceinfo._constants import RELAYOUT_DELAY_S
from pyplaceinfo.exceptions import ResolutionError
from pyplaceinfo.models.country import CountryInfo
from pyplaceinfo.models.display import LOCATION_FIELDS, DisplayField, DisplayRecord, FieldValue
from pyplaceinfo.models.local_time import LocalTime
from pyplaceinfo.models.location import Coordinate, LocationDetails
from pyplaceinfo.models.weather import WeatherReport
from pyplaceinfo.normalize import format_coordinate
from pyplaceinfo.presentation import MapWidget, Marker, Presenter

_logger = logging.getLogger(__name__)


class Resolvers(Protocol):
    """The four provider lookups, as implemented by :class:`~pyplaceinfo.client.PlaceInfoClient`."""

    async def resolve_location(self, lat: float, lng: float) -> LocationDetails:
        ...

    async def resolve_country(self, country_code: str) -> CountryInfo:
        ...

    async def resolve_weather(self, lat: float, lng: float) -> WeatherReport:
        ...

    async def resolve_local_time(self, lat: float, lng: float) -> LocalTime:
        ...


class EnrichmentOrchestrator:
    """Turns map clicks into display slot updates.

    Parameters
    ----------
    resolvers : Resolvers
        Provider lookups.
    presenter : Presenter
        Receives every slot update.
    map_widget : MapWidget or None
        Hosts the single marker. ``None`` runs headless.
    discard_stale : bool
        When true, updates from a click that has been superseded by a
        newer click are dropped. When false (default) overlapping clicks
        race and the last write wins.
    """

    def __init__(
        self,
        resolvers: Resolvers,
        presenter: Presenter,
        map_widget: MapWidget | None = None,
        *,
        discard_stale: bool = False,
    ) -> None:
        self._resolvers = resolvers
        self._presenter = presenter
        self._map = map_widget
        self._discard_stale = discard_stale
        self._marker: Marker | None = None
        self._click_seq = 0

    @property
    def marker(self) -> Marker | None:
        return self._marker

    def schedule_relayout(self, delay: float = RELAYOUT_DELAY_S) -> asyncio.TimerHandle | None:
        """Ask the map widget to re-measure itself shortly after mount."""
        if self._map is None:
            return None
        return asyncio.get_running_loop().call_later(delay, self._map.invalidate_size)

    async def handle_click(self, lat: float, lng: float) -> DisplayRecord:
        """Resolve every slot for a clicked coordinate.

        Returns the record as written by this click. With ``discard_stale``
        the presenter may hold a newer click's values instead.
        """
        coord = Coordinate(lat=lat, lng=lng)
        self._click_seq += 1
        click = _Click(self, self._click_seq)

        self._place_marker(lat, lng)

        for name in DisplayField:
            click.set(name, FieldValue.pending())
        click.set(DisplayField.LAT, FieldValue.resolved(format_coordinate(coord.lat)))
        click.set(DisplayField.LNG, FieldValue.resolved(format_coordinate(coord.normalized_lng)))

        await self._resolve_location_block(click, coord)
        await self._resolve_weather(click, coord)
        await self._resolve_local_time(click, coord)
        return click.record

    def _place_marker(self, lat: float, lng: float) -> None:
        # The pin sits where the user clicked, on whichever world copy.
        if self._map is None:
            return
        if self._marker is None:
            self._marker = self._map.add_marker(lat, lng)
        else:
            self._marker.move(lat, lng)

    async def _resolve_location_block(self, click: _Click, coord: Coordinate) -> None:
        try:
            details = await self._resolvers.resolve_location(coord.lat, coord.normalized_lng)
            if not details.country_code:
                raise ResolutionError("Location has no country code")
            country = await self._resolvers.resolve_country(details.country_code)
        except Exception:
            _logger.warning(
                "Location lookup failed at (%s, %s)",
                coord.lat,
                coord.normalized_lng,
                exc_info=True,
            )
            for name in LOCATION_FIELDS:
                click.set(name, FieldValue.failed())
            return

        click.set(DisplayField.COUNTRY, FieldValue.resolved(details.country_name))
        click.set(DisplayField.REGION, FieldValue.resolved(details.region))
        click.set(DisplayField.CURRENCY, FieldValue.resolved(country.currency_display))
        click.set(DisplayField.LANGUAGE, FieldValue.resolved(country.language_display))
        click.set(DisplayField.FLAG, FieldValue.resolved(country.flag_image_url))

    async def _resolve_weather(self, click: _Click, coord: Coordinate) -> None:
        try:
            report = await self._resolvers.resolve_weather(coord.lat, coord.normalized_lng)
        except Exception:
            _logger.warning("Weather lookup failed at (%s, %s)", coord.lat, coord.normalized_lng, exc_info=True)
            click.set(DisplayField.WEATHER, FieldValue.failed())
            return
        click.set(DisplayField.WEATHER, FieldValue.resolved(report.display))

    async def _resolve_local_time(self, click: _Click, coord: Coordinate) -> None:
        try:
            local_time = await self._resolvers.resolve_local_time(coord.lat, coord.normalized_lng)
        except Exception:
            _logger.warning("Local time lookup failed at (%s, %s)", coord.lat, coord.normalized_lng, exc_info=True)
            click.set(DisplayField.TIME, FieldValue.failed())
            return
        click.set(DisplayField.TIME, FieldValue.resolved(local_time.display))


class _Click:
    """Per-click write handle; tracks this click's record and staleness."""

    __slots__ = ("_owner", "seq", "record")

    def __init__(self, owner: EnrichmentOrchestrator, seq: int) -> None:
        self._owner = owner
        self.seq = seq
        self.record = DisplayRecord()

    @property
    def is_stale(self) -> bool:
        return self.seq != self._owner._click_seq  # noqa: SLF001

    def set(self, name: DisplayField, value: FieldValue) -> None:
        self.record = self.record.with_field(name, value)
        if self._owner._discard_stale and self.is_stale:  # noqa: SLF001
            _logger.debug("Dropping %s update from superseded click %d", name, self.seq)
            return
        self._owner._presenter.set_field(name, value)  # noqa: SLF001
