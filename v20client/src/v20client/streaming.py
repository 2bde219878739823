"""
Demultiplexing of the v20 streaming endpoints.

Both streams deliver one JSON object per line.  A background producer task
reads the response body line by line, drops ``HEARTBEAT`` frames, decodes
everything else and hands the results to the consumer through a bounded
``asyncio.Queue``.  When the queue is full the producer stops reading the
socket, so a slow consumer throttles the connection instead of growing
memory.

A line that cannot be decoded is logged and skipped; the stream carries
on.  The end of the body ends iteration; a read error is raised to the
consumer once and then iteration ends.

Usage::

    async with await client.stream_pricing(account_id, ["EUR_USD"]) as prices:
        async for price in prices:
            ...
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional, Type, TypeVar

import aiohttp
from pydantic import BaseModel

from .decoding import decode_model, parse_json
from .errors import DecodeError, SchemaViolation, TransportError
from .metrics import record_stream_line
from .models.pricing import ClientPrice, PricingHeartbeat
from .models.primitives import TransactionID
from .models.transaction import Transaction, TransactionHeartbeat
from .models.variants import decode_transaction

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_QUEUE_SIZE = 1024

_END = object()


@dataclass
class StreamStats:
    events: int = 0
    heartbeats: int = 0
    skipped: int = 0


class _Heartbeat:
    __slots__ = ("value",)

    def __init__(self, value: BaseModel) -> None:
        self.value = value


class _Failure:
    __slots__ = ("error",)

    def __init__(self, error: BaseException) -> None:
        self.error = error


class EventStream(Generic[T]):
    """Async iterator over the typed events of one open stream.

    Subclasses set ``name`` and ``heartbeat_model`` and implement
    ``decode``.  The producer starts on construction, so instances must be
    created inside a running event loop.  ``aclose()`` stops the producer
    and releases the connection; it is safe to call more than once.
    """

    name = "stream"
    heartbeat_model: Type[BaseModel] = PricingHeartbeat

    def __init__(self, response: aiohttp.ClientResponse, *, queue_size: int = DEFAULT_QUEUE_SIZE) -> None:
        self._response = response
        self._queue: "asyncio.Queue[Any]" = asyncio.Queue(maxsize=queue_size)
        self._done = False
        self._closed = False
        self.stats = StreamStats()
        self.last_heartbeat: Optional[BaseModel] = None
        self._task = asyncio.create_task(self._produce())
        logger.info("Opened %s stream", self.name)

    def decode(self, obj: Any) -> Optional[T]:
        """Decode one non-heartbeat object; ``None`` skips it."""
        raise NotImplementedError

    def _on_heartbeat(self, heartbeat: BaseModel) -> None:
        self.last_heartbeat = heartbeat

    def _on_event(self, event: T) -> None:
        pass

    # ------------------------------------------------------------------
    # Producer
    # ------------------------------------------------------------------

    def _handle_line(self, line: bytes) -> Any:
        try:
            obj = parse_json(line)
            if not isinstance(obj, dict):
                raise SchemaViolation("", "stream line is not a JSON object")
            if obj.get("type") == "HEARTBEAT":
                heartbeat = decode_model(self.heartbeat_model, obj)
                self.stats.heartbeats += 1
                record_stream_line(self.name, "heartbeat")
                return _Heartbeat(heartbeat)
            event = self.decode(obj)
        except DecodeError as exc:
            self.stats.skipped += 1
            record_stream_line(self.name, "skipped")
            logger.warning(
                "Skipping malformed %s stream line (%s): %s",
                self.name,
                exc,
                line[:200].decode("utf-8", errors="replace"),
            )
            return None
        if event is None:
            self.stats.skipped += 1
            record_stream_line(self.name, "skipped")
            logger.debug("Ignoring %s stream object of type %r", self.name, obj.get("type"))
            return None
        self.stats.events += 1
        record_stream_line(self.name, "event")
        return event

    async def _produce(self) -> None:
        try:
            async for raw_line in self._response.content:
                line = raw_line.strip()
                if not line:
                    continue
                item = self._handle_line(line)
                if item is not None:
                    await self._queue.put(item)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.warning("%s stream read failed: %r", self.name, exc)
            await self._queue.put(
                _Failure(TransportError(f"{self.name} stream read failed: {exc!r}", method="GET"))
            )
            return
        except Exception as exc:
            # The consumer must always receive a terminal item.
            logger.exception("%s stream producer failed", self.name)
            await self._queue.put(_Failure(exc))
            return
        await self._queue.put(_END)

    # ------------------------------------------------------------------
    # Consumer
    # ------------------------------------------------------------------

    def __aiter__(self) -> "EventStream[T]":
        return self

    async def __anext__(self) -> T:
        while True:
            if self._done:
                raise StopAsyncIteration
            item = await self._queue.get()
            if self._done or item is _END:
                await self.aclose()
                raise StopAsyncIteration
            if isinstance(item, _Failure):
                await self.aclose()
                raise item.error
            if isinstance(item, _Heartbeat):
                self._on_heartbeat(item.value)
                continue
            self._on_event(item)
            return item

    async def next(self) -> T:
        """Return the next event; raises ``StopAsyncIteration`` at the end."""
        return await self.__anext__()

    async def aclose(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._done = True
        if not self._task.done():
            self._task.cancel()
        await asyncio.gather(self._task, return_exceptions=True)
        self._response.close()
        try:
            # Wake a consumer blocked on an empty queue.
            self._queue.put_nowait(_END)
        except asyncio.QueueFull:
            pass
        logger.info("Closed %s stream", self.name)

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> "EventStream[T]":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


class PricingStream(EventStream[ClientPrice]):
    """Stream of ``ClientPrice`` updates; objects of other types are skipped."""

    name = "pricing"
    heartbeat_model = PricingHeartbeat

    def decode(self, obj: Any) -> Optional[ClientPrice]:
        if obj.get("type") != "PRICE":
            return None
        return decode_model(ClientPrice, obj)


class TransactionStream(EventStream[Transaction]):
    """Stream of account transactions.

    ``last_transaction_id`` follows the newest transaction delivered to the
    consumer, or the cursor carried by the newest heartbeat, so a dropped
    stream can be resumed with ``get_transactions_since``.
    """

    name = "transactions"
    heartbeat_model = TransactionHeartbeat

    def __init__(self, response: aiohttp.ClientResponse, *, queue_size: int = DEFAULT_QUEUE_SIZE) -> None:
        self.last_transaction_id: Optional[TransactionID] = None
        super().__init__(response, queue_size=queue_size)

    def decode(self, obj: Any) -> Optional[Transaction]:
        return decode_transaction(obj)

    def _on_heartbeat(self, heartbeat: BaseModel) -> None:
        super()._on_heartbeat(heartbeat)
        self.last_transaction_id = getattr(heartbeat, "last_transaction_id", None) or self.last_transaction_id

    def _on_event(self, event: Transaction) -> None:
        self.last_transaction_id = event.id
