"""Tests for the stream demultiplexer.

A ``FakeStreamResponse`` feeds scripted lines to ``PricingStream`` and
``TransactionStream`` so that heartbeat filtering, malformed-line
handling, ordering, termination and cancellation can be checked without
a network connection.
"""

from __future__ import annotations

import asyncio
import logging
from decimal import Decimal

import aiohttp
import pytest  # type: ignore

from tests.helpers import payloads
from tests.helpers.fake_streams import FakeStreamResponse
from v20client.errors import TransportError
from v20client.models.pricing import ClientPrice
from v20client.streaming import PricingStream, TransactionStream


async def collect(stream):
    return [event async for event in stream]


@pytest.mark.asyncio  # type: ignore
async def test_heartbeats_are_filtered_and_order_is_kept() -> None:
    lines = [
        payloads.pricing_heartbeat(),
        payloads.price("EUR_USD", bid="1.1"),
        payloads.pricing_heartbeat(),
        payloads.pricing_heartbeat(),
        payloads.price("USD_JPY", bid="150.1"),
        payloads.pricing_heartbeat(),
        payloads.price("GBP_USD", bid="1.27"),
    ]
    resp = FakeStreamResponse(lines)
    stream = PricingStream(resp)
    events = await collect(stream)
    assert [p.instrument for p in events] == ["EUR_USD", "USD_JPY", "GBP_USD"]
    assert all(isinstance(p, ClientPrice) for p in events)
    assert events[1].best_bid == Decimal("150.1")
    assert stream.stats.heartbeats == 4
    assert stream.stats.events == 3
    assert stream.last_heartbeat is not None
    # end of body releases the connection
    assert resp.closed
    assert stream.closed


@pytest.mark.asyncio  # type: ignore
async def test_malformed_line_is_skipped(caplog) -> None:
    lines = [
        payloads.minimal_transaction("CLOSE", "1"),
        "{this is not json",
        payloads.minimal_transaction("REOPEN", "2"),
    ]
    stream = TransactionStream(FakeStreamResponse(lines))
    with caplog.at_level(logging.WARNING, logger="v20client.streaming"):
        events = await collect(stream)
    assert [t.id for t in events] == ["1", "2"]
    assert stream.stats.skipped == 1
    assert "Skipping malformed transactions stream line" in caplog.text


@pytest.mark.asyncio  # type: ignore
async def test_oversized_integer_frame_is_skipped() -> None:
    huge = '{"type": "PRICE", "instrument": "EUR_USD", "time": "2024-03-01T12:00:00Z", "units": %s}' % ("9" * 5000)
    lines = [payloads.price("EUR_USD"), huge, payloads.price("USD_JPY")]
    stream = PricingStream(FakeStreamResponse(lines))
    events = await asyncio.wait_for(collect(stream), timeout=5)
    assert [p.instrument for p in events] == ["EUR_USD", "USD_JPY"]
    assert stream.stats.skipped == 1


@pytest.mark.asyncio  # type: ignore
async def test_deeply_nested_frame_is_skipped() -> None:
    lines = [payloads.price("EUR_USD"), "[" * 200000, payloads.price("USD_JPY")]
    stream = PricingStream(FakeStreamResponse(lines))
    events = await asyncio.wait_for(collect(stream), timeout=5)
    assert [p.instrument for p in events] == ["EUR_USD", "USD_JPY"]
    assert stream.stats.skipped == 1


@pytest.mark.asyncio  # type: ignore
async def test_unexpected_producer_error_reaches_consumer() -> None:
    resp = FakeStreamResponse([payloads.price()], error=RuntimeError("boom"))
    stream = PricingStream(resp)
    assert (await stream.next()).instrument == "EUR_USD"
    with pytest.raises(RuntimeError, match="boom"):
        await asyncio.wait_for(stream.next(), timeout=5)
    with pytest.raises(StopAsyncIteration):
        await stream.next()
    assert resp.closed


@pytest.mark.asyncio  # type: ignore
async def test_unknown_and_invalid_objects_are_skipped() -> None:
    unknown = payloads.minimal_transaction("CLOSE", "2")
    unknown["type"] = "BRAND_NEW"
    lines = [
        payloads.minimal_transaction("CLOSE", "1"),
        unknown,
        {"type": "ORDER_FILL", "id": "3"},
        "[1, 2, 3]",
        "",
        payloads.minimal_transaction("REOPEN", "4"),
    ]
    stream = TransactionStream(FakeStreamResponse(lines))
    events = await collect(stream)
    assert [t.id for t in events] == ["1", "4"]
    assert stream.stats.skipped == 3


@pytest.mark.asyncio  # type: ignore
async def test_pricing_stream_only_emits_prices() -> None:
    lines = [{"type": "SOMETHING_ELSE", "time": payloads.TIME}, payloads.price()]
    stream = PricingStream(FakeStreamResponse(lines))
    events = await collect(stream)
    assert len(events) == 1
    assert stream.stats.skipped == 1


@pytest.mark.asyncio  # type: ignore
async def test_ordering_with_small_buffer() -> None:
    lines = []
    for i in range(1, 201):
        lines.append(payloads.minimal_transaction("CLOSE", str(i)))
        if i % 7 == 0:
            lines.append(payloads.transaction_heartbeat(str(i)))
    resp = FakeStreamResponse(lines)
    stream = TransactionStream(resp, queue_size=4)
    seen = []
    async for txn in stream:
        seen.append(int(txn.id))
        # slow consumer
        await asyncio.sleep(0)
    assert seen == list(range(1, 201))
    assert stream.last_transaction_id == "200"


@pytest.mark.asyncio  # type: ignore
async def test_bounded_buffer_applies_backpressure() -> None:
    lines = [payloads.minimal_transaction("CLOSE", str(i)) for i in range(1, 51)]
    resp = FakeStreamResponse(lines)
    stream = TransactionStream(resp, queue_size=3)
    for _ in range(20):
        await asyncio.sleep(0)
    # the producer cannot run ahead of the consumer by more than the buffer
    assert resp.lines_read <= 4
    await stream.aclose()


@pytest.mark.asyncio  # type: ignore
async def test_heartbeat_cursor_is_tracked() -> None:
    lines = [
        payloads.transaction_heartbeat("1520"),
        payloads.minimal_transaction("CLOSE", "1521"),
        payloads.transaction_heartbeat("1523"),
    ]
    stream = TransactionStream(FakeStreamResponse(lines))
    first = await stream.next()
    assert first.id == "1521"
    assert stream.last_transaction_id == "1521"
    with pytest.raises(StopAsyncIteration):
        await stream.next()
    assert stream.last_transaction_id == "1523"


@pytest.mark.asyncio  # type: ignore
async def test_read_error_surfaces_once_then_ends() -> None:
    resp = FakeStreamResponse([payloads.price()], error=aiohttp.ClientPayloadError("connection reset"))
    stream = PricingStream(resp)
    assert (await stream.next()).instrument == "EUR_USD"
    with pytest.raises(TransportError):
        await stream.next()
    with pytest.raises(StopAsyncIteration):
        await stream.next()
    assert resp.closed


@pytest.mark.asyncio  # type: ignore
async def test_read_timeout_surfaces_as_transport_error() -> None:
    stream = PricingStream(FakeStreamResponse([], error=asyncio.TimeoutError()))
    with pytest.raises(TransportError):
        await collect(stream)


@pytest.mark.asyncio  # type: ignore
async def test_cancellation_releases_connection_and_task() -> None:
    resp = FakeStreamResponse([payloads.price()], hold_open=True)
    async with PricingStream(resp) as stream:
        await stream.next()
        task = stream._task
        assert not task.done()
    assert resp.closed
    assert task.done()
    # closing again is harmless
    await stream.aclose()
    with pytest.raises(StopAsyncIteration):
        await stream.next()


@pytest.mark.asyncio  # type: ignore
async def test_close_wakes_a_waiting_consumer() -> None:
    resp = FakeStreamResponse([], hold_open=True)
    stream = TransactionStream(resp)
    waiter = asyncio.create_task(collect(stream))
    await asyncio.sleep(0.01)
    assert not waiter.done()
    await stream.aclose()
    assert await asyncio.wait_for(waiter, timeout=1) == []
