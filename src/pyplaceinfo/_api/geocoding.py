"""Reverse-geocoding endpoint (Nominatim).

Endpoint:
  - /reverse?format=json&lat=..&lon=..
"""

from __future__ import annotations

import logging
from typing import Any

from pyplaceinfo._constants import REGION_KEYS
from pyplaceinfo._transport import Transport
from pyplaceinfo.config import PlaceInfoConfig
from pyplaceinfo.exceptions import ResolutionError
from pyplaceinfo.models.location import LocationDetails
from pyplaceinfo.normalize import first_non_empty, safe_str

_logger = logging.getLogger(__name__)


def _parse_location_details(data: Any, *, endpoint: str = "") -> LocationDetails:
    """Extract country code, country name and region from a reverse result.

    Region naming granularity differs by country, so the first non-empty
    of state, city, province and county wins.
    """
    address = data.get("address") if isinstance(data, dict) else None
    if not isinstance(address, dict):
        raise ResolutionError("Reverse geocoding returned no address", endpoint=endpoint)

    code = safe_str(address.get("country_code"))
    if code is None:
        raise ResolutionError("Reverse geocoding returned no country_code", endpoint=endpoint)

    return LocationDetails(
        country_code=code.upper(),
        country_name=safe_str(address.get("country")),
        region=first_non_empty(address, REGION_KEYS),
        raw=data,
    )


async def fetch_location_details(
    config: PlaceInfoConfig,
    transport: Transport,
    lat: float,
    lng: float,
) -> LocationDetails:
    """Reverse-geocode a coordinate.

    Raises
    ------
    ResolutionError
        The provider found no country for the coordinate (open sea,
        Antarctica, ...).
    """
    endpoint = f"{config.nominatim_base_url}/reverse"
    data = await transport.get_json(
        endpoint,
        params={"format": "json", "lat": lat, "lon": lng},
        headers={"User-Agent": config.user_agent},
    )
    details = _parse_location_details(data, endpoint=endpoint)
    _logger.debug("Resolved (%s, %s) to %s / %s", lat, lng, details.country_code, details.region)
    return details
