from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from pyplaceinfo._api.countries import _parse_country_info
from pyplaceinfo.exceptions import LocalizationLoadError
from pyplaceinfo.localization import (
    LocalizationTable,
    async_load_localization_tables,
    load_localization_tables,
    parse_table,
)


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_bundled_tables_load() -> None:
    tables = load_localization_tables(strict=True)
    assert tables.currency.lookup("JPY") == "日本円"
    assert tables.currency.lookup("EUR") == "ユーロ"
    assert tables.language.lookup("Japanese") == "日本語"


def test_lookup_falls_back_to_raw_code() -> None:
    table = LocalizationTable({"JPY": "日本円", "EMPTY": ""}, name="currency")
    assert table.lookup("JPY") == "日本円"
    assert table.lookup("XYZ") == "XYZ"
    assert table.lookup("EMPTY") == "EMPTY"


def test_table_is_read_only() -> None:
    table = LocalizationTable({"JPY": "日本円"})
    with pytest.raises(TypeError):
        table._entries["USD"] = "米ドル"  # type: ignore[index]  # noqa: SLF001
    assert len(table) == 1
    assert dict(table) == {"JPY": "日本円"}


def test_custom_paths(tmp_path: Path) -> None:
    currency = _write(tmp_path, "currency.json", json.dumps({"JPY": "Yen"}))
    language = _write(tmp_path, "language.json", json.dumps({"ja": "Japanese"}))

    tables = load_localization_tables(currency, language, strict=True)

    assert tables.currency.lookup("JPY") == "Yen"
    assert tables.language.lookup("ja") == "Japanese"


def test_missing_table_degrades_to_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    language = _write(tmp_path, "language.json", json.dumps({"ja": "日本語"}))

    with caplog.at_level(logging.WARNING, logger="pyplaceinfo.localization"):
        tables = load_localization_tables(tmp_path / "missing.json", language)

    assert len(tables.currency) == 0
    assert tables.currency.lookup("JPY") == "JPY"
    assert tables.language.lookup("ja") == "日本語"
    assert "currency table unavailable" in caplog.text


def test_missing_table_raises_in_strict_mode(tmp_path: Path) -> None:
    with pytest.raises(LocalizationLoadError):
        load_localization_tables(tmp_path / "missing.json", strict=True)


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2, 3]",
        json.dumps({"JPY": {"name": "Yen"}}),
    ],
)
def test_malformed_table_rejected(content: str) -> None:
    with pytest.raises(LocalizationLoadError):
        parse_table(content, name="currency")


def test_malformed_table_degrades_when_not_strict(tmp_path: Path) -> None:
    bad = _write(tmp_path, "currency.json", "[]")
    tables = load_localization_tables(bad)
    assert tables.currency.lookup("JPY") == "JPY"


@pytest.mark.asyncio
async def test_async_loader_matches_sync_loader() -> None:
    tables = await async_load_localization_tables(strict=True)
    assert tables.currency.lookup("USD") == "米ドル"


@pytest.mark.parametrize("key", ["ja", "jpn", "Japanese"])
def test_bundled_language_table_accepts_iso_codes_and_names(key: str) -> None:
    tables = load_localization_tables(strict=True)
    assert tables.language.lookup(key) == "日本語"


def test_bundled_language_table_localizes_country_record() -> None:
    tables = load_localization_tables(strict=True)
    record = {
        "currencies": {"JPY": {"symbol": "¥"}},
        "languages": {"jpn": "ja"},
        "flags": {"png": "https://flagcdn.com/w320/jp.png"},
    }

    info = _parse_country_info([record], tables)

    assert info.currency_display == "日本円(¥)"
    assert info.language_display == "日本語"
