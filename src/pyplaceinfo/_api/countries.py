"""Country metadata endpoint (REST Countries v3.1).

Endpoint:
  - /alpha/{code}
"""

from __future__ import annotations

import logging
from typing import Any

from pyplaceinfo._transport import Transport
from pyplaceinfo.config import PlaceInfoConfig
from pyplaceinfo.exceptions import EnrichmentError
from pyplaceinfo.localization import LocalizationTables
from pyplaceinfo.models.country import CountryInfo
from pyplaceinfo.normalize import first_key, first_value, safe_str

_logger = logging.getLogger(__name__)


def _first_record(data: Any) -> dict[str, Any] | None:
    if isinstance(data, list):
        data = data[0] if data else None
    return data if isinstance(data, dict) and data else None


def format_currency(localized_name: str, symbol: str) -> str:
    return f"{localized_name}({symbol})"


def _parse_country_info(data: Any, tables: LocalizationTables, *, endpoint: str = "") -> CountryInfo:
    """Build :class:`CountryInfo` from a REST Countries response.

    Only the first currency and first language are used. A missing symbol
    or an unknown code degrades the display text and never raises.
    """
    record = _first_record(data)
    if record is None:
        raise EnrichmentError("No country record returned", endpoint=endpoint)

    currencies = record.get("currencies")
    currency_code = first_key(currencies) or ""
    currency_symbol = ""
    if currency_code:
        entry = currencies.get(currency_code)
        if isinstance(entry, dict):
            currency_symbol = safe_str(entry.get("symbol")) or ""

    language_code = safe_str(first_value(record.get("languages"))) or ""

    flags = record.get("flags")
    flag_image_url = safe_str(flags.get("png")) if isinstance(flags, dict) else None

    return CountryInfo(
        currency_code=currency_code,
        currency_symbol=currency_symbol,
        language_code=language_code,
        flag_image_url=flag_image_url or "",
        currency_display=format_currency(tables.currency.lookup(currency_code), currency_symbol),
        language_display=tables.language.lookup(language_code),
        raw=record,
    )


async def fetch_country_info(
    config: PlaceInfoConfig,
    transport: Transport,
    country_code: str,
    tables: LocalizationTables,
) -> CountryInfo:
    """Fetch country metadata and resolve its localized display strings.

    Raises
    ------
    EnrichmentError
        The provider has no record for *country_code*.
    """
    endpoint = f"{config.restcountries_base_url}/alpha/{country_code}"
    data = await transport.get_json(endpoint)
    info = _parse_country_info(data, tables, endpoint=endpoint)
    _logger.debug("Country %s: currency=%s language=%s", country_code, info.currency_code, info.language_code)
    return info
