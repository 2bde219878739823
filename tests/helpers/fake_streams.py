"""Fake streaming responses for the v20 stream demultiplexer.

``FakeStreamResponse`` stands in for an ``aiohttp.ClientResponse`` whose
body is read line by line through ``response.content``.  Lines are
served in order; an optional ``error`` is raised after the last line to
simulate a dropped connection, and ``hold_open`` keeps the body open
until the response is closed, like a live stream between frames.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, Iterable, List, Optional, Union

Line = Union[bytes, str, Dict[str, Any]]


def encode_line(line: Line) -> bytes:
    if isinstance(line, dict):
        return json.dumps(line).encode() + b"\n"
    if isinstance(line, str):
        return line.encode() + b"\n"
    return line


class FakeContent:
    """Async iterator over newline-terminated byte lines."""

    def __init__(self, owner: "FakeStreamResponse") -> None:
        self._owner = owner

    def __aiter__(self) -> "FakeContent":
        return self

    async def __anext__(self) -> bytes:
        owner = self._owner
        # yield control so the consumer runs between frames
        await asyncio.sleep(0)
        if owner.pending:
            owner.lines_read += 1
            return owner.pending.pop(0)
        if owner.error is not None:
            error, owner.error = owner.error, None
            raise error
        if owner.hold_open:
            await owner.released.wait()
        raise StopAsyncIteration


class FakeStreamResponse:
    def __init__(
        self,
        lines: Iterable[Line],
        *,
        error: Optional[BaseException] = None,
        hold_open: bool = False,
        status: int = 200,
    ) -> None:
        self.pending: List[bytes] = [encode_line(line) for line in lines]
        self.error = error
        self.hold_open = hold_open
        self.status = status
        self.lines_read = 0
        self.closed = False
        self.released = asyncio.Event()
        self.content = FakeContent(self)

    def close(self) -> None:
        self.closed = True
        self.released.set()

    def release(self) -> None:
        self.close()
