from __future__ import annotations

import math

import pytest

from pyplaceinfo.models.location import Coordinate
from pyplaceinfo.normalize import (
    first_key,
    first_non_empty,
    first_value,
    format_coordinate,
    normalize_lng,
    safe_float,
    safe_str,
)


@pytest.mark.parametrize(
    ("lng", "expected"),
    [
        (180.0, -180.0),
        (-180.0, -180.0),
        (540.0, -180.0),
        (0.0, 0.0),
        (139.6503, 139.6503),
        (499.6503, 139.6503),
        (-220.5, 139.5),
        (-900.0, -180.0),
        (359.0, -1.0),
    ],
)
def test_normalize_lng_known_values(lng: float, expected: float) -> None:
    assert normalize_lng(lng) == pytest.approx(expected)


@pytest.mark.parametrize("lng", [-1e6, -721.25, -360.0, -179.999, -0.5, 0.25, 179.999, 360.0, 1234.5678, 1e6])
def test_normalize_lng_range_and_congruence(lng: float) -> None:
    result = normalize_lng(lng)
    assert -180.0 <= result < 180.0
    turns = (lng - result) / 360.0
    assert math.isclose(turns, round(turns), abs_tol=1e-9)


@pytest.mark.parametrize("lng", [-725.3, -180.0, 12.0, 180.0, 540.0, 9999.9])
def test_normalize_lng_is_idempotent(lng: float) -> None:
    once = normalize_lng(lng)
    assert normalize_lng(once) == once


def test_coordinate_recomputes_normalized_lng_and_keeps_lat() -> None:
    coord = Coordinate(lat=35.6762, lng=499.6503)
    assert coord.lat == 35.6762
    assert coord.lng == 499.6503
    assert coord.normalized_lng == pytest.approx(139.6503)


def test_coordinate_rejects_out_of_range_latitude() -> None:
    with pytest.raises(ValueError):
        Coordinate(lat=91.0, lng=0.0)


def test_safe_helpers() -> None:
    assert safe_float("21.5") == 21.5
    assert safe_float("") is None
    assert safe_float("nan") is None
    assert safe_float(True) is None
    assert safe_str("  ") is None
    assert safe_str(" Tokyo ") == "Tokyo"


def test_first_helpers() -> None:
    assert first_non_empty({"state": "", "city": "Osaka", "county": "X"}, ("state", "city", "county")) == "Osaka"
    assert first_non_empty({}, ("state",)) is None
    assert first_key({"JPY": {}, "USD": {}}) == "JPY"
    assert first_key({}) is None
    assert first_key(None) is None
    assert first_value({"jpn": "Japanese", "eng": "English"}) == "Japanese"
    assert first_value([]) is None


def test_format_coordinate_uses_four_decimals() -> None:
    assert format_coordinate(35.67624) == "35.6762"
    assert format_coordinate(-180.0) == "-180.0000"
