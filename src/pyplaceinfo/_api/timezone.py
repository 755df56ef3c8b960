"""Local time endpoint (GeoNames timezoneJSON).

Endpoint:
  - /timezoneJSON?lat=..&lng=..&username=..

GeoNames answers credential and quota problems with HTTP 200 and a
``status`` object instead of ``time``; both cases surface as TimeError.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from pyplaceinfo._transport import Transport
from pyplaceinfo.config import PlaceInfoConfig
from pyplaceinfo.exceptions import PlaceInfoTransportError, TimeError
from pyplaceinfo.models.local_time import LocalTime
from pyplaceinfo.normalize import safe_str

_logger = logging.getLogger(__name__)


def _parse_local_time(data: Any, time_format: str, *, endpoint: str = "") -> LocalTime:
    raw_time = safe_str(data.get("time")) if isinstance(data, dict) else None
    if raw_time is None:
        status = data.get("status") if isinstance(data, dict) else None
        detail = f": {status.get('message')}" if isinstance(status, dict) and status.get("message") else ""
        raise TimeError(f"Time payload has no time field{detail}", endpoint=endpoint)

    try:
        # "2026-10-17 20:15"; the provider has already applied the local offset.
        timestamp = datetime.fromisoformat(raw_time)
    except ValueError as exc:
        raise TimeError(f"Unparseable time {raw_time!r}", endpoint=endpoint) from exc

    return LocalTime(timestamp=timestamp, display=timestamp.strftime(time_format), raw=data)


async def fetch_local_time(
    config: PlaceInfoConfig,
    transport: Transport,
    lat: float,
    lng: float,
) -> LocalTime:
    endpoint = f"{config.geonames_base_url}/timezoneJSON"
    try:
        data = await transport.get_json(
            endpoint,
            params={"lat": lat, "lng": lng, "username": config.require_geonames_username()},
        )
    except PlaceInfoTransportError as exc:
        if exc.status_code is None:
            raise
        raise TimeError(f"Time provider returned HTTP {exc.status_code}", endpoint=endpoint) from exc

    local_time = _parse_local_time(data, config.time_format, endpoint=endpoint)
    _logger.debug("Local time at (%s, %s): %s", lat, lng, local_time.display)
    return local_time
