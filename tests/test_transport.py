from __future__ import annotations

from collections.abc import AsyncIterator

import aiohttp
import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp import test_utils

from pyplaceinfo._transport import HttpTransport
from pyplaceinfo.config import PlaceInfoConfig
from pyplaceinfo.exceptions import PlaceInfoTransportError


async def _json_handler(request: web.Request) -> web.Response:
    return web.json_response(
        {
            "query": dict(request.query),
            "user_agent": request.headers.get("User-Agent"),
        }
    )


async def _broken_handler(_request: web.Request) -> web.Response:
    return web.Response(text="<html>oops</html>", content_type="text/html")


async def _created_handler(_request: web.Request) -> web.Response:
    return web.json_response({"ok": True}, status=201)


async def _error_handler(_request: web.Request) -> web.Response:
    return web.Response(status=500, text="internal error")


@pytest_asyncio.fixture
async def server() -> AsyncIterator[test_utils.TestServer]:
    app = web.Application()
    app.router.add_get("/json", _json_handler)
    app.router.add_get("/broken", _broken_handler)
    app.router.add_get("/error", _error_handler)
    app.router.add_get("/created", _created_handler)
    test_server = test_utils.TestServer(app)
    await test_server.start_server()
    try:
        yield test_server
    finally:
        await test_server.close()


@pytest_asyncio.fixture
async def transport() -> AsyncIterator[HttpTransport]:
    async with aiohttp.ClientSession() as session:
        yield HttpTransport(PlaceInfoConfig(request_timeout=5.0), session)


@pytest.mark.asyncio
async def test_get_json_sends_params_and_headers(server: test_utils.TestServer, transport: HttpTransport) -> None:
    result = await transport.get_json(
        str(server.make_url("/json")),
        params={"lat": 35.5, "lon": -120.25},
        headers={"User-Agent": "various-map-app"},
    )
    assert result == {"query": {"lat": "35.5", "lon": "-120.25"}, "user_agent": "various-map-app"}


@pytest.mark.asyncio
async def test_non_200_raises_with_status(server: test_utils.TestServer, transport: HttpTransport) -> None:
    with pytest.raises(PlaceInfoTransportError) as exc_info:
        await transport.get_json(str(server.make_url("/error")))
    assert exc_info.value.status_code == 500
    assert exc_info.value.endpoint.endswith("/error")


@pytest.mark.asyncio
async def test_invalid_json_raises(server: test_utils.TestServer, transport: HttpTransport) -> None:
    with pytest.raises(PlaceInfoTransportError) as exc_info:
        await transport.get_json(str(server.make_url("/broken")))
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_connection_failure_raises(transport: HttpTransport) -> None:
    with pytest.raises(PlaceInfoTransportError):
        await transport.get_json("http://127.0.0.1:9/unreachable")


@pytest.mark.asyncio
async def test_any_2xx_status_is_success(server: test_utils.TestServer, transport: HttpTransport) -> None:
    result = await transport.get_json(str(server.make_url("/created")))
    assert result == {"ok": True}
