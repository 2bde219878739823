"""End-to-end tests of the pricing and transaction streams over HTTP."""

from __future__ import annotations

import asyncio
import contextlib
from typing import Any, Dict, List

import pytest  # type: ignore
from aiohttp import web
from aiohttp.test_utils import TestServer

from tests.helpers import payloads
from tests.helpers.fake_streams import encode_line
from v20client.clients import HttpTransport, V20Client
from v20client.config import ClientSettings
from v20client.errors import UnexpectedStatus

ACCOUNT = payloads.ACCOUNT_ID


def stream_handler(lines: List[Any], received: List[Dict[str, str]], hold_open: bool = False):
    async def handler(request: web.Request) -> web.StreamResponse:
        received.append(dict(request.query))
        resp = web.StreamResponse(headers={"Content-Type": "application/octet-stream"})
        await resp.prepare(request)
        for line in lines:
            await resp.write(encode_line(line))
        while hold_open:
            await asyncio.sleep(0.05)
            await resp.write(encode_line(payloads.pricing_heartbeat()))
        await resp.write_eof()
        return resp

    return handler


async def _collect(stream):
    return [event async for event in stream]


@contextlib.asynccontextmanager
async def stream_server(*routes: web.RouteDef):
    app = web.Application()
    app.router.add_routes(routes)
    server = TestServer(app)
    await server.start_server()
    base = str(server.make_url("/")).rstrip("/")
    settings = ClientSettings(
        access_token="secret-token",
        api_url=base,
        stream_url=base,
        max_requests_per_second=0,
        stream_read_timeout=5.0,
    )
    client = V20Client(settings, transport=HttpTransport(settings, retry_multiplier=0))
    try:
        yield client
    finally:
        await client.close()
        await server.close()


@pytest.mark.asyncio  # type: ignore
async def test_pricing_stream_over_http() -> None:
    received: List[Dict[str, str]] = []
    lines = [
        payloads.pricing_heartbeat(),
        payloads.price("EUR_USD", bid="1.1"),
        payloads.pricing_heartbeat(),
        payloads.price("USD_JPY", bid="150.1", ask="150.12"),
    ]
    route = web.get(f"/v3/accounts/{ACCOUNT}/pricing/stream", stream_handler(lines, received))
    async with stream_server(route) as client:
        stream = await client.stream_pricing(ACCOUNT, ["EUR_USD", "USD_JPY"], snapshot=True)
        async with stream:
            prices = [p async for p in stream]
    assert received == [{"instruments": "EUR_USD,USD_JPY", "snapshot": "true"}]
    assert [p.instrument for p in prices] == ["EUR_USD", "USD_JPY"]
    assert stream.stats.heartbeats == 2
    assert stream.closed


@pytest.mark.asyncio  # type: ignore
async def test_corrupt_frame_does_not_end_stream_over_http() -> None:
    received: List[Dict[str, str]] = []
    huge = '{"type": "PRICE", "instrument": "GBP_USD", "closeoutBid": %s}' % ("1" * 5000)
    lines = [payloads.price("EUR_USD"), huge, payloads.price("USD_JPY")]
    route = web.get(f"/v3/accounts/{ACCOUNT}/pricing/stream", stream_handler(lines, received))
    async with stream_server(route) as client:
        async with await client.stream_pricing(ACCOUNT, ["EUR_USD", "USD_JPY"]) as stream:
            prices = await asyncio.wait_for(_collect(stream), timeout=5)
    assert [p.instrument for p in prices] == ["EUR_USD", "USD_JPY"]
    assert stream.stats.skipped == 1


@pytest.mark.asyncio  # type: ignore
async def test_transaction_stream_over_http() -> None:
    received: List[Dict[str, str]] = []
    lines = [
        payloads.transaction_heartbeat("999"),
        payloads.market_order_transaction("1000"),
        payloads.order_fill_transaction("1001", "1000", "1000"),
        payloads.transaction_heartbeat("1001"),
    ]
    route = web.get(f"/v3/accounts/{ACCOUNT}/transactions/stream", stream_handler(lines, received))
    async with stream_server(route) as client:
        async with await client.stream_transactions(ACCOUNT) as stream:
            events = [t async for t in stream]
    assert [t.type.value for t in events] == ["MARKET_ORDER", "ORDER_FILL"]
    assert stream.last_transaction_id == "1001"


@pytest.mark.asyncio  # type: ignore
async def test_stream_can_be_closed_while_open() -> None:
    received: List[Dict[str, str]] = []
    route = web.get(
        f"/v3/accounts/{ACCOUNT}/pricing/stream",
        stream_handler([payloads.price()], received, hold_open=True),
    )
    async with stream_server(route) as client:
        stream = await client.stream_pricing(ACCOUNT, ["EUR_USD"])
        first = await asyncio.wait_for(stream.next(), timeout=5)
        await stream.aclose()
        assert first.instrument == "EUR_USD"
        assert stream.closed
        with pytest.raises(StopAsyncIteration):
            await stream.next()


@pytest.mark.asyncio  # type: ignore
async def test_stream_error_status_is_unexpected() -> None:
    async def handler(request: web.Request) -> web.Response:
        return web.json_response({"errorMessage": "Invalid value specified for 'instruments'"}, status=400)

    async with stream_server(web.get(f"/v3/accounts/{ACCOUNT}/pricing/stream", handler)) as client:
        with pytest.raises(UnexpectedStatus) as excinfo:
            await client.stream_pricing(ACCOUNT, ["NOT_AN_INSTRUMENT"])
    assert excinfo.value.status == 400
    assert excinfo.value.endpoint == "stream_pricing"
