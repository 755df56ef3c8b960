"""Local time model."""

from __future__ import annotations

from datetime import datetime

from pyplaceinfo.models._base import PlaceInfoBaseModel


class LocalTime(PlaceInfoBaseModel):
    """Wall-clock time at a coordinate, as reported by the provider.

    ``timestamp`` is naive: the provider already applied the local
    offset and no timezone arithmetic happens here.
    """

    timestamp: datetime
    display: str
