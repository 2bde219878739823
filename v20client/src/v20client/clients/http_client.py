"""
HTTP transport for the v20 API with pacing, retries and status mapping.

A single ``aiohttp.ClientSession`` is created on first use and shared by
every REST call and stream opened through the transport.  Requests are
paced by a token bucket, idempotent GETs are retried on transport
failures with exponential back-off, and every response status is mapped
onto the error taxonomy in ``v20client.errors``:

* a documented success status decodes into the endpoint's response model;
* a documented error status decodes into its error body and raises the
  endpoint's ``TypedRejection`` subclass;
* anything else raises ``UnexpectedStatus``.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar
from urllib.parse import quote

import aiohttp
from pydantic import BaseModel
from tenacity import AsyncRetrying, before_sleep_log, retry_if_exception_type, stop_after_attempt, wait_exponential
from yarl import URL

from ..config import ClientSettings
from ..decoding import decode_model, parse_json, to_wire
from ..errors import TransportError, TypedRejection, UnexpectedStatus
from ..metrics import record_request
from ..requests import encode_query
from .auth import AuthProvider, BearerTokenProvider

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class Endpoint:
    """Status contract of one endpoint.

    Attributes:
        name: label used in logs and metrics, e.g. ``"create_order"``.
        success: documented success statuses and the model each decodes to.
        rejections: documented error statuses and the error body model.
        rejection: the ``TypedRejection`` subclass raised for ``rejections``.
    """

    name: str
    success: Mapping[int, Type[BaseModel]]
    rejections: Mapping[int, Type[BaseModel]] = field(default_factory=dict)
    rejection: Type[TypedRejection] = TypedRejection


def path_segment(value: str) -> str:
    """Percent-encode one path segment; ``@`` is kept for client-id specifiers."""
    return quote(str(value), safe="@")


class HttpTransport:
    """Asynchronous v20 transport with simple rate limiting."""

    def __init__(
        self,
        settings: ClientSettings,
        *,
        auth_provider: Optional[AuthProvider] = None,
        session: Optional[aiohttp.ClientSession] = None,
        retry_multiplier: float = 0.5,
        retry_max_wait: float = 8.0,
    ) -> None:
        """Construct the transport.

        Args:
            settings: hosts, timeouts, pacing and retry configuration.
            auth_provider: source of authentication headers; defaults to a
                ``BearerTokenProvider`` over ``settings.access_token``.
            session: an existing session to use.  A caller-supplied session
                is not closed by ``close()``.
            retry_multiplier: base of the exponential back-off, in seconds.
            retry_max_wait: upper bound of a single back-off wait.
        """
        self.settings = settings
        self.auth_provider = auth_provider or BearerTokenProvider(settings.access_token)
        self._session = session
        self._owns_session = session is None
        self.retry_multiplier = retry_multiplier
        self.retry_max_wait = retry_max_wait
        # Token bucket; one token per request, refilled continuously.
        self.max_requests_per_second = settings.max_requests_per_second
        self.tokens = float(max(settings.max_requests_per_second, 0))
        self._token_lock = asyncio.Lock()
        self._last_refill = time.monotonic()
        self._token_interval = (
            1.0 / settings.max_requests_per_second if settings.max_requests_per_second > 0 else 0.0
        )

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.settings.request_timeout)
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None

    # ------------------------------------------------------------------
    # Request plumbing
    # ------------------------------------------------------------------

    async def _acquire_token(self) -> None:
        """Wait until a request token is available based on the token bucket."""
        if self.max_requests_per_second <= 0:
            return
        while True:
            async with self._token_lock:
                now = time.monotonic()
                elapsed = now - self._last_refill
                if elapsed > 0:
                    self.tokens = min(
                        float(self.max_requests_per_second),
                        self.tokens + elapsed / self._token_interval,
                    )
                    self._last_refill = now
                if self.tokens >= 1:
                    self.tokens -= 1
                    return
            await asyncio.sleep(self._token_interval)

    async def _headers(self, method: str, path: str) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept-Datetime-Format": "RFC3339",
            "User-Agent": self.settings.user_agent,
        }
        headers.update(await self.auth_provider.get_headers(method, path))
        return headers

    def build_url(self, base_url: str, path: str, query: Optional[BaseModel] = None) -> URL:
        """Join ``base_url`` and ``/v3{path}`` with the encoded query string."""
        url = f"{base_url.rstrip('/')}/v3{path}"
        query_string = encode_query(query)
        if query_string:
            url = f"{url}?{query_string}"
        return URL(url, encoded=True)

    async def _send(
        self, method: str, url: URL, path: str, endpoint: str, body: Optional[str]
    ) -> Tuple[int, bytes]:
        await self._acquire_token()
        headers = await self._headers(method, path)
        session = self._get_session()
        logger.debug("%s %s", method, url)
        try:
            async with session.request(method, url, headers=headers, data=body) as resp:
                raw = await resp.read()
                status = resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            record_request(method, endpoint, "error")
            raise TransportError(
                f"{method} {url} failed: {exc!r}", method=method, url=str(url)
            ) from exc
        record_request(method, endpoint, status)
        return status, raw

    def _map_response(self, endpoint: Endpoint, status: int, raw: bytes) -> BaseModel:
        model = endpoint.success.get(status)
        if model is not None:
            return decode_model(model, parse_json(raw))
        text = raw.decode("utf-8", errors="replace")
        truncated = text[:200] if text else ""
        error_model = endpoint.rejections.get(status)
        if error_model is not None:
            logger.warning("%s rejected with HTTP %s: %s", endpoint.name, status, truncated)
            raise endpoint.rejection(status, decode_model(error_model, parse_json(raw)))
        logger.warning("%s returned undocumented HTTP %s: %s", endpoint.name, status, truncated)
        raise UnexpectedStatus(status, text, endpoint=endpoint.name)

    async def request(
        self,
        method: str,
        path: str,
        endpoint: Endpoint,
        *,
        query: Optional[BaseModel] = None,
        body: Optional[BaseModel] = None,
    ) -> Any:
        """Send one REST request and decode its response.

        GET requests are retried on ``TransportError``; state-changing
        requests are sent exactly once.

        Raises:
            TransportError: no response was received.
            TypedRejection: a documented error status (endpoint subclass).
            UnexpectedStatus: an undocumented status.
            SchemaViolation, UnknownVariant: the body did not decode.
        """
        url = self.build_url(self.settings.api_url, path, query)
        payload = json.dumps(to_wire(body), separators=(",", ":")) if body is not None else None

        if method != "GET":
            status, raw = await self._send(method, url, path, endpoint.name, payload)
            return self._map_response(endpoint, status, raw)

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(max(self.settings.retry_attempts, 1)),
            wait=wait_exponential(multiplier=self.retry_multiplier, max=self.retry_max_wait),
            retry=retry_if_exception_type(TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                status, raw = await self._send(method, url, path, endpoint.name, payload)
        return self._map_response(endpoint, status, raw)

    async def open_stream(
        self, path: str, endpoint: str, *, query: Optional[BaseModel] = None
    ) -> aiohttp.ClientResponse:
        """Open a streaming GET on the stream host and return the live response.

        The caller owns the response and must close it.  Reads time out after
        ``stream_read_timeout`` seconds without data.
        """
        url = self.build_url(self.settings.stream_url, path, query)
        await self._acquire_token()
        headers = await self._headers("GET", path)
        session = self._get_session()
        timeout = aiohttp.ClientTimeout(
            total=None,
            sock_connect=self.settings.request_timeout,
            sock_read=self.settings.stream_read_timeout,
        )
        logger.debug("GET %s (stream)", url)
        try:
            resp = await session.get(url, headers=headers, timeout=timeout)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            record_request("GET", endpoint, "error")
            raise TransportError(f"GET {url} failed: {exc!r}", method="GET", url=str(url)) from exc
        record_request("GET", endpoint, resp.status)
        if resp.status != 200:
            try:
                text = await resp.text(errors="replace")
            finally:
                resp.release()
            logger.warning("%s returned undocumented HTTP %s: %s", endpoint, resp.status, text[:200])
            raise UnexpectedStatus(resp.status, text, endpoint=endpoint)
        return resp
