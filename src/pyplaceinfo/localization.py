"""Static code → localized-name tables for currencies and languages.

The providers return machine codes (``JPY``) or English names
(``Japanese``). These tables turn them into the viewer's language. They
are loaded once before the first click and never mutated afterwards, so
they can be shared freely between overlapping click sequences.
"""

from __future__ import annotations

import asyncio
import importlib.resources
import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from pyplaceinfo._constants import CURRENCY_TABLE_RESOURCE, LANGUAGE_TABLE_RESOURCE
from pyplaceinfo.exceptions import LocalizationLoadError

_logger = logging.getLogger(__name__)


class LocalizationTable(Mapping[str, str]):
    """Read-only code → display-name mapping."""

    def __init__(self, entries: Mapping[str, str] | None = None, *, name: str = "") -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries or {}))
        self.name = name

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LocalizationTable(name={self.name!r}, entries={len(self._entries)})"

    def lookup(self, code: str) -> str:
        """Return the localized name for *code*, or *code* itself when unknown."""
        localized = self._entries.get(code)
        return localized if localized else code


@dataclass(frozen=True)
class LocalizationTables:
    currency: LocalizationTable = field(default_factory=lambda: LocalizationTable(name="currency"))
    language: LocalizationTable = field(default_factory=lambda: LocalizationTable(name="language"))


def parse_table(raw: str | bytes, *, name: str = "") -> LocalizationTable:
    """Parse a flat JSON object of string → string.

    Raises :class:`LocalizationLoadError` for invalid JSON, a non-object
    document, or non-string entries.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise LocalizationLoadError(f"{name or 'localization'} table is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise LocalizationLoadError(f"{name or 'localization'} table must be a JSON object, got {type(data).__name__}")

    for key, value in data.items():
        if not isinstance(value, str):
            raise LocalizationLoadError(f"{name or 'localization'} table entry {key!r} is not a string")

    return LocalizationTable(data, name=name)


def _read_resource(path: str | Path | None, resource: str) -> bytes:
    if path is not None:
        _logger.debug("Loading localization table from %s", path)
        try:
            return Path(path).read_bytes()
        except OSError as exc:
            raise LocalizationLoadError(f"Localization table not readable: {path}") from exc

    _logger.debug("Loading localization table %s from package data", resource)
    try:
        return importlib.resources.files("pyplaceinfo").joinpath(f"assets/{resource}").read_bytes()
    except OSError as exc:
        raise LocalizationLoadError(f"{resource} not found in package data") from exc


def _load_one(path: str | Path | None, resource: str, name: str, *, strict: bool) -> LocalizationTable:
    try:
        return parse_table(_read_resource(path, resource), name=name)
    except LocalizationLoadError:
        if strict:
            raise
        _logger.warning("%s table unavailable, falling back to raw codes", name, exc_info=True)
        return LocalizationTable(name=name)


def load_localization_tables(
    currency_path: str | Path | None = None,
    language_path: str | Path | None = None,
    *,
    strict: bool = False,
) -> LocalizationTables:
    """Load the currency and language tables.

    ``None`` paths use the bundled Japanese tables. When *strict* is
    false a missing or malformed table degrades to an empty one, so
    every lookup shows the raw code.
    """
    tables = LocalizationTables(
        currency=_load_one(currency_path, CURRENCY_TABLE_RESOURCE, "currency", strict=strict),
        language=_load_one(language_path, LANGUAGE_TABLE_RESOURCE, "language", strict=strict),
    )
    _logger.debug(
        "Localization tables loaded: %d currencies, %d languages",
        len(tables.currency),
        len(tables.language),
    )
    return tables


async def async_load_localization_tables(
    currency_path: str | Path | None = None,
    language_path: str | Path | None = None,
    *,
    strict: bool = False,
) -> LocalizationTables:
    """Run :func:`load_localization_tables` off the event loop."""
    return await asyncio.to_thread(
        load_localization_tables,
        currency_path,
        language_path,
        strict=strict,
    )
