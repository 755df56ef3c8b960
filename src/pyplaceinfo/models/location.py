"""Coordinate and reverse-geocoding models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from pyplaceinfo.models._base import PlaceInfoBaseModel
from pyplaceinfo.normalize import normalize_lng


class Coordinate(BaseModel):
    """A clicked map position.

    ``lat`` is passed through unmodified. ``normalized_lng`` is always
    derived from ``lng`` and is the value sent to providers.
    """

    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90.0, le=90.0)
    lng: float

    @computed_field  # type: ignore[prop-decorator]
    @property
    def normalized_lng(self) -> float:
        return normalize_lng(self.lng)


class LocationDetails(PlaceInfoBaseModel):
    """Reverse-geocoding result for one click.

    Parameters
    ----------
    country_code : str or None
        ISO 3166-1 alpha-2 code, upper-cased.
    country_name : str or None
        Country name as the provider spells it.
    region : str or None
        First non-empty of state, city, province, county.
    """

    country_code: str | None = None
    country_name: str | None = None
    region: str | None = None
