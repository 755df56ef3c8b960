"""HTTP transport shared by the provider modules."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyplaceinfo._redact import redact_query
from pyplaceinfo.config import PlaceInfoConfig
from pyplaceinfo.exceptions import PlaceInfoTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by provider modules.

    Provider modules only need ``get_json``; tests pass fakes that
    return canned payloads or raise :class:`PlaceInfoTransportError`.
    """

    async def get_json(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        ...


class HttpTransport:
    """JSON-over-HTTP GET transport backed by an aiohttp session."""

    def __init__(
        self,
        config: PlaceInfoConfig,
        http_session: aiohttp.ClientSession,
    ) -> None:
        self._config = config
        self._http = http_session
        self._timeout: aiohttp.ClientTimeout | None = None
        if config.request_timeout is not None:
            self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    async def get_json(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """GET *url* and decode the body as JSON.

        A non-2xx status raises :class:`PlaceInfoTransportError`
        carrying ``status_code`` so callers can map it to a stage error.
        """
        query = {k: str(v) for k, v in (params or {}).items()}
        _logger.debug("GET %s params=%s", url, redact_query(query))

        kwargs: dict[str, Any] = {"params": query, "headers": dict(headers or {})}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        try:
            async with self._http.get(url, **kwargs) as resp:
                text = await resp.text()
                if not 200 <= resp.status < 300:
                    raise PlaceInfoTransportError(
                        f"HTTP {resp.status} from {url}: {text[:200]}",
                        status_code=resp.status,
                        endpoint=url,
                    )
        except PlaceInfoTransportError:
            raise
        except aiohttp.ClientError as exc:
            raise PlaceInfoTransportError(
                f"Request to {url} failed: {exc}",
                endpoint=url,
            ) from exc

        try:
            result: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PlaceInfoTransportError(
                f"Invalid JSON from {url}: {text[:200]}",
                endpoint=url,
            ) from exc

        return result
