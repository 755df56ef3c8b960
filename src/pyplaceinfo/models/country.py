"""Country metadata model."""

from __future__ import annotations

from pyplaceinfo.models._base import PlaceInfoBaseModel


class CountryInfo(PlaceInfoBaseModel):
    """Country metadata with localized display strings.

    Only the first currency and first language of the upstream record
    are kept.

    Parameters
    ----------
    currency_code : str
        ISO 4217 code (e.g. ``"JPY"``), empty when the record has none.
    currency_symbol : str
        Symbol of that currency, empty when absent.
    language_code : str
        First entry of the record's language mapping.
    flag_image_url : str
        PNG flag URL, used verbatim.
    currency_display : str
        ``"{localized name}({symbol})"``.
    language_display : str
        Localized language name, or the raw code.
    """

    currency_code: str = ""
    currency_symbol: str = ""
    language_code: str = ""
    flag_image_url: str = ""
    currency_display: str = ""
    language_display: str = ""
