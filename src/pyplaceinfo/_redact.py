"""Credential masking for request logs.

The weather ``appid`` and the GeoNames ``username`` travel in query
strings; they are masked before request parameters reach DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping

_SECRET_PARAMS: frozenset[str] = frozenset({"appid", "username"})

_MASK = "<redacted>"


def redact_query(params: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of *params* with credential parameters masked."""
    return {key: _MASK if key.lower() in _SECRET_PARAMS else value for key, value in params.items()}
