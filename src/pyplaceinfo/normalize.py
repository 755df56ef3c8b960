"""Normalization helpers.

Centralizes coordinate wrapping and defensive payload parsing.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any


def normalize_lng(lng: float) -> float:
    """Wrap a longitude into ``[-180, 180)``.

    A continuously panned map reports longitudes beyond ±180; providers
    only accept the canonical range. The second ``% 360`` folds the
    ``360.0`` that floored ``%`` returns for tiny negative inputs.
    In-range values are returned untouched, which keeps the function
    exactly idempotent under float rounding.
    """
    if -180.0 <= lng < 180.0:
        return lng
    return (((lng + 180.0) % 360.0) + 360.0) % 360.0 - 180.0


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None


def first_non_empty(mapping: Mapping[str, Any], keys: Iterable[str]) -> str | None:
    """Return the first key's value in *keys* that is a non-empty string."""
    for key in keys:
        value = safe_str(mapping.get(key))
        if value is not None:
            return value
    return None


def first_key(mapping: Any) -> str | None:
    if not isinstance(mapping, Mapping):
        return None
    for key in mapping:
        return safe_str(key)
    return None


def first_value(mapping: Any) -> Any:
    if not isinstance(mapping, Mapping):
        return None
    for value in mapping.values():
        return value
    return None


def format_coordinate(value: float) -> str:
    """Render a coordinate with four decimals, as shown in the lat/lng slots."""
    return f"{value:.4f}"
